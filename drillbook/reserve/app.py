"""Console front end of the computer-room reservation system."""

from __future__ import annotations

import argparse
import enum
import sys
from pathlib import Path
from typing import Callable, Iterable

from drillbook.reserve.manager import (
    AccountKind,
    Manager,
    format_account,
    format_room,
    load_accounts,
)
from drillbook.reserve.orders import (
    ADMIN_FILE,
    STUDENT_FILE,
    TEACHER_FILE,
    Identity,
)
from drillbook.reserve.student import (
    INTERVALS,
    OPEN_DAYS,
    ROOM_NUMBERS,
    Student,
    format_cancellable_order,
    format_my_order,
)
from drillbook.reserve.student import format_order as format_student_view
from drillbook.reserve.teacher import Teacher, format_pending_order
from drillbook.reserve.teacher import format_order as format_teacher_view

Reader = Callable[[], str]
Writer = Callable[[str], object]


class Role(enum.IntEnum):
    """Who is logging in."""

    STUDENT = 1
    TEACHER = 2
    ADMIN = 3


ROLE_FILES = {
    Role.STUDENT: STUDENT_FILE,
    Role.TEACHER: TEACHER_FILE,
    Role.ADMIN: ADMIN_FILE,
}

_ROLE_SUCCESS = {
    Role.STUDENT: "学生验证登录成功",
    Role.TEACHER: "老师验证登录成功",
    Role.ADMIN: "管理员验证登录成功",
}

MAIN_MENU = "\n".join(
    [
        "——————————————",
        "  欢迎使用机房预约系统系统",
        "——————————————",
        "\t1.学生代表",
        "\t2.老师",
        "\t3.管理员",
        "\t0.退出",
        "——————————————",
        "请输入您的选择",
    ]
)


class LoginError(Exception):
    """The credentials match no account."""


def login(
    data_dir: str | Path, kind: int, account_id: int, name: str, password: str
) -> Identity:
    """Check credentials against the role's file and return the logged-in user."""
    role = Role(kind)
    data_dir = Path(data_dir)
    path = data_dir / ROLE_FILES[role]
    if not path.is_file():
        raise FileNotFoundError(f"文件不存在: {path}")
    if role is Role.ADMIN:
        tokens = iter(path.read_text(encoding="utf-8").split())
        for file_name, file_secret in zip(tokens, tokens):
            if file_name == name and file_secret == password:
                return Manager(name, password, data_dir)
    else:
        for account in load_accounts(path):
            if (account.account_id, account.name, account.password) == (
                account_id,
                name,
                password,
            ):
                if role is Role.STUDENT:
                    return Student(account_id, name, password, data_dir)
                return Teacher(account_id, name, password, data_dir)
    raise LoginError("验证登录失败！")


def _read_int(read: Reader) -> int | None:
    try:
        return int(read())
    except ValueError:
        return None


def _ask_choice(read: Reader, write: Writer, allowed: range) -> int:
    while True:
        value = _read_int(read)
        if value in allowed:
            return value
        write("输入有误，请重新输入。")


def _pick_entry(read: Reader, write: Writer, count: int) -> int:
    """Read an entry number from 0 to count, repeating on bad input."""
    while True:
        value = _read_int(read)
        if value is not None and 0 <= value <= count:
            return value
        write("输入有误，请重新输入")


# --- student -----------------------------------------------------------


def _apply(student: Student, read: Reader, write: Writer) -> None:
    write("机房开放时间为周一至周五")
    write("请输入申请预约的时间")
    for line in ("1.周一", "2.周二", "3.周三", "4.周四", "5.周五"):
        write(line)
    date = _ask_choice(read, write, OPEN_DAYS)
    write("请输入申请预约的时间段")
    write("1.上午")
    write("2.下午")
    interval = _ask_choice(read, write, INTERVALS)
    write("请选择机房")
    for room in student.rooms:
        write(f"{room.room_id}号机房容量为:{room.capacity}")
    room = _ask_choice(read, write, ROOM_NUMBERS)
    student.apply_order(date, interval, room)
    write("预约成功，审核中！")


def _show_mine(student: Student, read: Reader, write: Writer) -> None:
    if not student.all_orders():
        write("无预约记录")
        return
    for order in student.my_orders():
        write(format_my_order(order))


def _show_all_for_student(student: Student, read: Reader, write: Writer) -> None:
    orders = student.all_orders()
    if not orders:
        write("无预约记录")
        return
    for position, order in enumerate(orders, start=1):
        write(format_student_view(position, order))


def _cancel(student: Student, read: Reader, write: Writer) -> None:
    if not student.all_orders():
        write("无预约记录")
        return
    write("审核中或预约成功的记录可以取消，请输入取消的记录")
    cancellable = student.cancellable_orders()
    for position, order in enumerate(cancellable, start=1):
        write(format_cancellable_order(position, order))
    write("请输入取消的记录，0代表返回")
    choice = _pick_entry(read, write, len(cancellable))
    if choice:
        student.cancel_order(choice)
        write("已取消预约")


_STUDENT_ACTIONS = {1: _apply, 2: _show_mine, 3: _show_all_for_student, 4: _cancel}


def _student_menu(student: Student, read: Reader, write: Writer) -> None:
    while True:
        write(student.menu_text())
        action = _STUDENT_ACTIONS.get(_read_int(read))
        if action is None:
            write("注销成功!")
            return
        action(student, read, write)


# --- teacher -----------------------------------------------------------


def _show_all_for_teacher(teacher: Teacher, read: Reader, write: Writer) -> None:
    orders = teacher.all_orders()
    if not orders:
        write("无预约记录")
        return
    for position, order in enumerate(orders, start=1):
        write(format_teacher_view(position, order))


def _review(teacher: Teacher, read: Reader, write: Writer) -> None:
    if not teacher.all_orders():
        write("无预约记录")
        return
    write("待审核的预约记录如下:")
    pending = teacher.pending_orders()
    for position, order in enumerate(pending, start=1):
        write(format_pending_order(position, order))
    write("请输入要审核的预约记录,0代表返回")
    choice = _pick_entry(read, write, len(pending))
    if choice:
        write("请输入审核结果")
        write("1.通过")
        write("2.不通过")
        approve = _read_int(read) == 1
        teacher.review_order(choice, approve)
        write("审核完毕")


_TEACHER_ACTIONS = {1: _show_all_for_teacher, 2: _review}


def _teacher_menu(teacher: Teacher, read: Reader, write: Writer) -> None:
    while True:
        write(teacher.menu_text())
        action = _TEACHER_ACTIONS.get(_read_int(read))
        if action is None:
            write("注销成功")
            return
        action(teacher, read, write)


# --- manager -----------------------------------------------------------


def _add_account(manager: Manager, read: Reader, write: Writer) -> None:
    write("请输入添加账号的类型")
    write("1.添加学生")
    write("2.添加老师")
    kind = AccountKind.STUDENT if _read_int(read) == 1 else AccountKind.TEACHER
    if kind is AccountKind.STUDENT:
        write("请输入学号")
        duplicate = "学号重复,重新输入!"
    else:
        write("请输入职工编号")
        duplicate = "职工号重复,重新输入!"
    while True:
        account_id = _read_int(read)
        if account_id is not None and not manager.check_repeat(account_id, kind):
            break
        write(duplicate)
    write("请输入姓名")
    name = read()
    write("请输入密码")
    secret = read()
    manager.add_account(kind, account_id, name, secret)
    write("添加成功")


def _show_accounts(manager: Manager, read: Reader, write: Writer) -> None:
    write("请选择查看内容")
    write("1.查看所有学生")
    write("2.查看所有老师")
    if _read_int(read) == 1:
        kind = AccountKind.STUDENT
        write("所有学生信息如下:")
    else:
        kind = AccountKind.TEACHER
        write("所老师生信息如下:")
    for account in manager.accounts(kind):
        write(format_account(kind, account))


def _show_rooms(manager: Manager, read: Reader, write: Writer) -> None:
    write("机房信息如下")
    for room in manager.rooms:
        write(format_room(room))


def _clear(manager: Manager, read: Reader, write: Writer) -> None:
    manager.clear_orders()
    write("清空成功")


_MANAGER_ACTIONS = {1: _add_account, 2: _show_accounts, 3: _show_rooms, 4: _clear}


def _manager_menu(manager: Manager, read: Reader, write: Writer) -> None:
    while True:
        write(manager.menu_text())
        action = _MANAGER_ACTIONS.get(_read_int(read))
        if action is None:
            write("注销成功")
            return
        action(manager, read, write)


# --- login and main loop -----------------------------------------------


def _login_console(data_dir: Path, role: Role, read: Reader, write: Writer) -> None:
    if not (data_dir / ROLE_FILES[role]).is_file():
        write("文件不存在")
        return
    account_id = 0
    if role is Role.STUDENT:
        write("请输入你的学号:")
        account_id = _read_int(read) or 0
    elif role is Role.TEACHER:
        write("请输入你的职工号:")
        account_id = _read_int(read) or 0
    write("请输入用户名:")
    name = read()
    write("请输入密码:")
    secret = read()
    try:
        user = login(data_dir, role, account_id, name, secret)
    except LoginError:
        write("验证登录失败！")
        return
    write(_ROLE_SUCCESS[role])
    if isinstance(user, Student):
        _student_menu(user, read, write)
    elif isinstance(user, Teacher):
        _teacher_menu(user, read, write)
    elif isinstance(user, Manager):
        _manager_menu(user, read, write)


def run_console(data_dir: str | Path, read: Reader, write: Writer) -> None:
    """Drive the main menu until the user quits or input runs out."""
    data_dir = Path(data_dir)
    try:
        while True:
            write(MAIN_MENU)
            select = _read_int(read)
            if select == 0:
                write("欢迎下次使用!")
                return
            if select in (1, 2, 3):
                _login_console(data_dir, Role(select), read, write)
            else:
                write("输入有误，请重新选择！")
    except EOFError:
        return


def _token_reader(lines: Iterable[str]) -> Reader:
    tokens = (token for line in lines for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Computer-room reservation system.")
    parser.add_argument("data_dir", nargs="?", default=".", help="directory of data files")
    args = parser.parse_args(argv)
    run_console(args.data_dir, _token_reader(sys.stdin), print)
    return 0