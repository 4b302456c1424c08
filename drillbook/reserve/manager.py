"""Administrators who manage accounts, rooms and the reservation file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from drillbook.reserve.orders import (
    COMPUTER_FILE,
    ORDER_FILE,
    STUDENT_FILE,
    TEACHER_FILE,
    ComputerRoom,
    Identity,
    load_rooms,
)


class AccountKind(enum.Enum):
    """The two kinds of account an administrator can create."""

    STUDENT = 1
    TEACHER = 2

    @property
    def file_name(self) -> str:
        return STUDENT_FILE if self is AccountKind.STUDENT else TEACHER_FILE


_DUPLICATE_TEXT = {
    AccountKind.STUDENT: "学号重复,重新输入!",
    AccountKind.TEACHER: "职工号重复,重新输入!",
}


@dataclass
class Account:
    """A login record of a student or a teacher."""

    account_id: int
    name: str
    password: str


def load_accounts(path: str | Path) -> list[Account]:
    """Read id/name/password triples, stopping at the first malformed id."""
    try:
        tokens = iter(Path(path).read_text(encoding="utf-8").split())
    except FileNotFoundError:
        return []
    accounts = []
    for account_id, name, secret in zip(tokens, tokens, tokens):
        try:
            accounts.append(Account(int(account_id), name, secret))
        except ValueError:
            break
    return accounts


def format_account(kind: AccountKind, account: Account) -> str:
    """One line describing an account."""
    label = "学号" if kind is AccountKind.STUDENT else "职工号"
    return f"{label}:{account.account_id} 姓名:{account.name} 密码:{account.password}"


def format_room(room: ComputerRoom) -> str:
    """One line describing a computer room."""
    return f"机房编号:{room.room_id} 机房最大容量:{room.capacity}"


class Manager(Identity):
    """An administrator, bound to a data directory."""

    def __init__(self, name: str, password: str, data_dir: str | Path = ".") -> None:
        super().__init__(name, password)
        self.data_dir = Path(data_dir)
        self._accounts: dict[AccountKind, list[Account]] = {
            kind: [] for kind in AccountKind
        }
        student_path = self.data_dir / STUDENT_FILE
        if student_path.is_file():
            for kind in AccountKind:
                self._accounts[kind] = load_accounts(self.data_dir / kind.file_name)
        self.rooms: list[ComputerRoom] = load_rooms(self.data_dir / COMPUTER_FILE)

    def menu_text(self) -> str:
        return "\n".join(
            [
                f"欢迎管理员:{self.name}登录!",
                "——————————",
                "——1.添加账号——",
                "——2.查看账号——",
                "——3.查看机房——",
                "——4.清空预约——",
                "——0.注销登录——",
                "——————————",
                "——————————",
                f"当前学生数量:{len(self._accounts[AccountKind.STUDENT])}",
                f"当前老师数量:{len(self._accounts[AccountKind.TEACHER])}",
                f"机房数量为:{len(self.rooms)}",
                "——————————",
                "请选择您的操作:",
            ]
        )

    def check_repeat(self, account_id: int, kind: AccountKind) -> bool:
        """True when an account of this kind already uses the id."""
        return any(account.account_id == account_id for account in self._accounts[kind])

    def add_account(
        self, kind: AccountKind, account_id: int, name: str, password: str
    ) -> Account:
        """Store a new account; raise ValueError if the id is taken."""
        if self.check_repeat(account_id, kind):
            raise ValueError(_DUPLICATE_TEXT[kind])
        account = Account(account_id, name, password)
        with (self.data_dir / kind.file_name).open("a", encoding="utf-8") as stream:
            stream.write(f"{account_id} {name} {password} \n")
        self._accounts[kind].append(account)
        return account

    def accounts(self, kind: AccountKind) -> list[Account]:
        """Accounts of one kind, in file order."""
        return list(self._accounts[kind])

    def clear_orders(self) -> None:
        """Empty the reservation file."""
        (self.data_dir / ORDER_FILE).write_text("", encoding="utf-8")