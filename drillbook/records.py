"""Writing and reading a text profile and a fixed-size binary person record."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

PROFILE_LINES = ("姓名:张三2", "性别:男", "年龄:18")

NAME_SIZE = 64
_LAYOUT = struct.Struct(f"<{NAME_SIZE}si")
RECORD_SIZE = _LAYOUT.size


def write_profile_text(path: str | Path) -> None:
    """Write the sample profile as text, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="\n") as stream:
        for line in PROFILE_LINES:
            stream.write(f"{line}\n")


def read_text(path: str | Path) -> str:
    """Return the whole content of a text file."""
    with open(path, "r", encoding="utf-8", newline="") as stream:
        return stream.read()


@dataclass
class PersonRecord:
    """A person stored as a 64-byte name field followed by a 32-bit age."""

    name: str
    age: int

    def pack(self) -> bytes:
        """Encode as a fixed-size record; the name must leave room for a NUL."""
        encoded = self.name.encode("utf-8")
        if len(encoded) >= NAME_SIZE:
            raise ValueError(
                f"name takes {len(encoded)} bytes, at most {NAME_SIZE - 1} fit"
            )
        try:
            return _LAYOUT.pack(encoded, self.age)
        except struct.error as exc:
            raise ValueError(f"age {self.age} does not fit in 32 bits") from exc

    @classmethod
    def unpack(cls, data: bytes) -> "PersonRecord":
        """Decode the first record in data."""
        if len(data) < RECORD_SIZE:
            raise ValueError(
                f"need {RECORD_SIZE} bytes for a person record, got {len(data)}"
            )
        raw_name, age = _LAYOUT.unpack_from(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8")
        return cls(name, age)

    def __str__(self) -> str:
        return f"姓名:{self.name} 年龄:{self.age}"


def write_person(path: str | Path, record: PersonRecord) -> None:
    """Write one binary person record, replacing any existing file."""
    Path(path).write_bytes(record.pack())


def read_person(path: str | Path) -> PersonRecord:
    """Read the binary person record at the start of a file."""
    with open(path, "rb") as stream:
        return PersonRecord.unpack(stream.read(RECORD_SIZE))