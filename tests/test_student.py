from pathlib import Path

import pytest

from drillbook.reserve.orders import (
    ComputerRoom,
    Order,
    OrderBook,
    OrderStatus,
)
from drillbook.reserve.student import (
    Student,
    format_cancellable_order,
    format_my_order,
    format_order,
)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "computerRoom.txt").write_text("1 20\n2 50\n3 100\n", encoding="utf-8")
    return tmp_path


def _student(data_dir: Path, student_id: int = 7, name: str = "alice") -> Student:
    password = "password"
    return Student(student_id, name, password, data_dir)


def _seed(data_dir: Path, orders: list[Order]) -> None:
    (data_dir / "order.txt").write_text(
        "".join(order.to_line() + "\n" for order in orders), encoding="utf-8"
    )


def test_rooms_loaded_from_data_dir(data_dir):
    student = _student(data_dir)
    assert student.rooms == [
        ComputerRoom(1, 20),
        ComputerRoom(2, 50),
        ComputerRoom(3, 100),
    ]


def test_menu_text_names_student(data_dir):
    text = _student(data_dir).menu_text()
    assert text.splitlines()[0] == "欢迎学生代表:alice登录!"
    assert "——4.取消预约——" in text


def test_apply_order_appends_line(data_dir):
    order = _student(data_dir).apply_order(1, 2, 3)
    assert order.status is OrderStatus.PENDING
    content = (data_dir / "order.txt").read_text(encoding="utf-8")
    assert content == "date:1 interval:2 stuId:7 stuName:alice roomId:3 status:1\n"


@pytest.mark.parametrize(
    "date, interval, room",
    [(0, 1, 1), (6, 1, 1), (1, 0, 1), (1, 3, 1), (1, 1, 0), (1, 1, 4)],
)
def test_apply_order_rejects_invalid_choice(data_dir, date, interval, room):
    with pytest.raises(ValueError):
        _student(data_dir).apply_order(date, interval, room)
    assert not (data_dir / "order.txt").exists()


def test_my_orders_filters_by_id(data_dir):
    mine = _student(data_dir)
    other = _student(data_dir, 8, "bob")
    mine.apply_order(1, 1, 1)
    other.apply_order(2, 2, 2)
    mine.apply_order(3, 1, 3)
    assert [order.date for order in mine.my_orders()] == ["1", "3"]
    assert [order.stu_name for order in other.my_orders()] == ["bob"]
    assert len(mine.all_orders()) == 3


def test_no_orders_when_file_missing(data_dir):
    student = _student(data_dir)
    assert student.my_orders() == []
    assert student.all_orders() == []
    assert student.cancellable_orders() == []


def test_cancellable_only_pending_or_approved(data_dir):
    _seed(
        data_dir,
        [
            Order("1", "1", "7", "alice", "1", OrderStatus.PENDING),
            Order("2", "1", "7", "alice", "1", OrderStatus.REJECTED),
            Order("3", "1", "7", "alice", "1", OrderStatus.APPROVED),
            Order("4", "1", "7", "alice", "1", OrderStatus.CANCELLED),
            Order("5", "1", "8", "bob", "1", OrderStatus.PENDING),
        ],
    )
    dates = [order.date for order in _student(data_dir).cancellable_orders()]
    assert dates == ["1", "3"]


def test_cancel_order_updates_file(data_dir):
    _seed(
        data_dir,
        [
            Order("1", "1", "8", "bob", "1", OrderStatus.PENDING),
            Order("2", "2", "7", "alice", "2", OrderStatus.PENDING),
            Order("3", "1", "7", "alice", "3", OrderStatus.APPROVED),
        ],
    )
    student = _student(data_dir)
    cancelled = student.cancel_order(2)
    assert cancelled.date == "3"
    assert cancelled.status is OrderStatus.CANCELLED
    book = OrderBook.load(data_dir / "order.txt")
    assert [order.status for order in book] == [
        OrderStatus.PENDING,
        OrderStatus.PENDING,
        OrderStatus.CANCELLED,
    ]
    assert [order.date for order in student.cancellable_orders()] == ["2"]


def test_cancel_zero_changes_nothing(data_dir):
    _seed(data_dir, [Order("1", "1", "7", "alice", "1", OrderStatus.PENDING)])
    before = (data_dir / "order.txt").read_text(encoding="utf-8")
    assert _student(data_dir).cancel_order(0) is None
    assert (data_dir / "order.txt").read_text(encoding="utf-8") == before


@pytest.mark.parametrize("choice", [-1, 2])
def test_cancel_out_of_range(data_dir, choice):
    _seed(data_dir, [Order("1", "1", "7", "alice", "1", OrderStatus.PENDING)])
    with pytest.raises(ValueError):
        _student(data_dir).cancel_order(choice)


def test_format_helpers():
    order = Order("2", "1", "7", "alice", "3", OrderStatus.APPROVED)
    assert format_my_order(order) == "预约日期:  周2 时间段:  上午 机房号:  3状态:\t预约成功"
    assert format_order(1, order).startswith("1、 预约日期:  周2")
    assert format_order(1, order).endswith(" 状态: 预约成功")
    assert format_cancellable_order(4, order).startswith("4、 预约时期:  周2")