"""A small console address book."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

MAX_CONTACTS = 1000

MENU_LINES = (
    "--------------------",
    "1.增加联系人",
    "2.显示联系人",
    "3.删除联系人",
    "4.查找联系人",
    "5.修改联系人",
    "6.清空联系人",
    "0.退出通讯录",
    "--------------------",
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


@dataclass
class Person:
    """One contact."""

    name: str
    sex: str
    age: int
    phone: str
    addr: str


class BookFullError(Exception):
    """The address book holds as many contacts as it can."""


class ContactNotFoundError(KeyError):
    """No contact carries the requested name."""


class AddressBook:
    """Contacts in insertion order, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_CONTACTS) -> None:
        self.capacity = capacity
        self._people: list[Person] = []

    @property
    def full(self) -> bool:
        return len(self._people) >= self.capacity

    def add(self, person: Person) -> None:
        if self.full:
            raise BookFullError("联系人已满，无法添加")
        self._people.append(person)

    def index_of(self, name: str) -> int:
        """Position of the first contact with this name."""
        for index, person in enumerate(self._people):
            if person.name == name:
                return index
        raise ContactNotFoundError(name)

    def find(self, name: str) -> Person:
        return self._people[self.index_of(name)]

    def remove(self, name: str) -> Person:
        return self._people.pop(self.index_of(name))

    def modify(self, name: str, person: Person) -> None:
        self._people[self.index_of(name)] = person

    def clear(self) -> None:
        self._people.clear()

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)


def format_person(person: Person) -> str:
    """Multi-line description of a contact."""
    return "\n".join(
        [
            f"姓名\t{person.name}",
            f"性别\t{person.sex}",
            f"年龄\t{person.age}",
            f"电话\t{person.phone}",
            f"地址\t{person.addr}",
        ]
    )


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _prompt_person(read: Reader, write: Writer) -> Person:
    write("请输入姓名")
    name = read()
    write("请输入性别")
    sex = read()
    write("请输入年龄")
    age = _to_int(read()) or 0
    write("请输入电话")
    phone = read()
    write("请输入地址")
    addr = read()
    return Person(name, sex, age, phone, addr)


def _add(book: AddressBook, read: Reader, write: Writer) -> None:
    if book.full:
        write("联系人已满，无法添加")
        return
    book.add(_prompt_person(read, write))
    write("添加成功")


def _show(book: AddressBook, read: Reader, write: Writer) -> None:
    if not len(book):
        write("当前记录为空")
        return
    for person in book:
        write(format_person(person))
        write("")


def _delete(book: AddressBook, read: Reader, write: Writer) -> None:
    write("请输入你要删除的人名")
    try:
        book.remove(read())
    except ContactNotFoundError:
        write("查无此人")
    else:
        write("删除成功")


def _find(book: AddressBook, read: Reader, write: Writer) -> None:
    write("请输入要查找的联系人姓名")
    try:
        person = book.find(read())
    except ContactNotFoundError:
        write("查无此人")
    else:
        write(format_person(person))


def _modify(book: AddressBook, read: Reader, write: Writer) -> None:
    write("请输入要修改的联系人姓名")
    name = read()
    try:
        book.index_of(name)
    except ContactNotFoundError:
        write("查无此人")
        return
    book.modify(name, _prompt_person(read, write))
    write("修改成功")


def _clean(book: AddressBook, read: Reader, write: Writer) -> None:
    book.clear()
    write("通讯录清空成功！")


_ACTIONS = {1: _add, 2: _show, 3: _delete, 4: _find, 5: _modify, 6: _clean}


def run(read: Reader, write: Writer) -> AddressBook:
    """Drive the menu until the user quits or input ends; return the book."""
    book = AddressBook()
    while True:
        for line in MENU_LINES:
            write(line)
        try:
            select = _to_int(read())
            if select == 0:
                write("欢迎下次使用")
                return book
            action = _ACTIONS.get(select)
            if action is not None:
                action(book, read, write)
        except EOFError:
            return book


def _token_reader(lines: Iterable[str]) -> Reader:
    tokens = (token for line in lines for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def main(argv: list[str] | None = None) -> int:
    run(_token_reader(sys.stdin), print)
    return 0