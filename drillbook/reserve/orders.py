"""Reservation records, computer rooms and the shared identity base."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

ADMIN_FILE = "admin.txt"
STUDENT_FILE = "student.txt"
TEACHER_FILE = "teacher.txt"
COMPUTER_FILE = "computerRoom.txt"
ORDER_FILE = "order.txt"

FIELDS_PER_ORDER = 6


class OrderStatus(enum.Enum):
    """State of a reservation as stored in the order file."""

    PENDING = "1"
    APPROVED = "2"
    REJECTED = "-1"
    CANCELLED = "0"

    @classmethod
    def from_code(cls, code: str) -> "OrderStatus":
        """Map a stored code to a status; unknown codes count as cancelled."""
        try:
            return cls(code)
        except ValueError:
            return cls.CANCELLED


_STATUS_TEXT = {
    OrderStatus.PENDING: "审核中",
    OrderStatus.APPROVED: "预约成功",
    OrderStatus.REJECTED: "预约失败,审核未通过",
    OrderStatus.CANCELLED: "预约已取消",
}


@dataclass
class Order:
    """One reservation of a computer room."""

    date: str
    interval: str
    stu_id: str
    stu_name: str
    room_id: str
    status: OrderStatus = OrderStatus.PENDING

    def to_line(self) -> str:
        """Render the order in the order file's line format."""
        return (
            f"date:{self.date} interval:{self.interval} stuId:{self.stu_id} "
            f"stuName:{self.stu_name} roomId:{self.room_id} "
            f"status:{self.status.value}"
        )

    def status_text(self) -> str:
        """Human-readable status."""
        return _STATUS_TEXT[self.status]

    def interval_text(self) -> str:
        """Morning for interval 1, afternoon otherwise."""
        return "上午" if self.interval == "1" else "下午"


def _fields_from_tokens(tokens: Iterable[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition(":")
        if sep:
            fields.setdefault(key, value)
    return fields


def _order_from_tokens(tokens: Iterable[str]) -> Order:
    fields = _fields_from_tokens(tokens)
    return Order(
        date=fields.get("date", ""),
        interval=fields.get("interval", ""),
        stu_id=fields.get("stuId", ""),
        stu_name=fields.get("stuName", ""),
        room_id=fields.get("roomId", ""),
        status=OrderStatus.from_code(fields.get("status", "")),
    )


def parse_order_line(line: str) -> Order:
    """Parse one line of the order file."""
    tokens = line.split()
    if len(tokens) != FIELDS_PER_ORDER:
        raise ValueError(
            f"expected {FIELDS_PER_ORDER} fields in order line, got {len(tokens)}"
        )
    return _order_from_tokens(tokens)


def _read_tokens(path: str | Path) -> list[str]:
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except FileNotFoundError:
        return []


@dataclass
class OrderBook:
    """All reservations held in one order file."""

    path: Path
    orders: list[Order] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | Path) -> "OrderBook":
        """Read every complete record; a missing file gives an empty book."""
        tokens = iter(_read_tokens(path))
        chunks = zip(*[tokens] * FIELDS_PER_ORDER)
        return cls(Path(path), [_order_from_tokens(chunk) for chunk in chunks])

    def save(self) -> None:
        """Rewrite the file with the current orders; an empty book is not written."""
        if not self.orders:
            return
        self.path.write_text(
            "".join(f"{order.to_line()}\n" for order in self.orders),
            encoding="utf-8",
        )

    def append(self, order: Order) -> None:
        """Add an order and append it to the file."""
        self.orders.append(order)
        with self.path.open("a", encoding="utf-8") as stream:
            stream.write(f"{order.to_line()}\n")

    def __len__(self) -> int:
        return len(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __getitem__(self, index: int) -> Order:
        return self.orders[index]


@dataclass(frozen=True)
class ComputerRoom:
    """A computer room and how many people it seats."""

    room_id: int
    capacity: int


def load_rooms(path: str | Path) -> list[ComputerRoom]:
    """Read id/capacity pairs, stopping at the first malformed pair."""
    tokens = iter(_read_tokens(path))
    rooms = []
    for room_id, capacity in zip(tokens, tokens):
        try:
            rooms.append(ComputerRoom(int(room_id), int(capacity)))
        except ValueError:
            break
    return rooms


class Identity(ABC):
    """Base for every kind of user that can log in."""

    def __init__(self, name: str, password: str) -> None:
        self.name = name
        self.password = password

    @abstractmethod
    def menu_text(self) -> str:
        """Text of this user's operation menu."""