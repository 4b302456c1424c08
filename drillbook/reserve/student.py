"""Student representatives who request and cancel room reservations."""

from __future__ import annotations

import re
from pathlib import Path

from drillbook.reserve.orders import (
    COMPUTER_FILE,
    ORDER_FILE,
    ComputerRoom,
    Identity,
    Order,
    OrderBook,
    OrderStatus,
    load_rooms,
)

OPEN_DAYS = range(1, 6)
INTERVALS = range(1, 3)
ROOM_NUMBERS = range(1, 4)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of a string, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def format_my_order(order: Order) -> str:
    """One line describing a student's own reservation."""
    return (
        f"预约日期:  周{order.date} 时间段:  {order.interval_text()}"
        f" 机房号:  {order.room_id}状态:\t{order.status_text()}"
    )


def format_order(position: int, order: Order) -> str:
    """One numbered line describing any reservation."""
    return (
        f"{position}、 预约日期:  周{order.date} 时间段:  {order.interval_text()}"
        f" 学号:  {order.stu_id} 姓名:  {order.stu_name}"
        f" 机房编号:  {order.room_id} 状态: {order.status_text()}"
    )


def format_cancellable_order(position: int, order: Order) -> str:
    """One numbered line describing a reservation that may be cancelled."""
    return (
        f"{position}、 预约时期:  周{order.date} 时间段:  {order.interval_text()}"
        f" 机房编号:  {order.room_id} 状态:  {order.status_text()}"
    )


class Student(Identity):
    """A student representative, bound to a data directory."""

    def __init__(
        self,
        student_id: int,
        name: str,
        password: str,
        data_dir: str | Path = ".",
    ) -> None:
        super().__init__(name, password)
        self.student_id = student_id
        self.data_dir = Path(data_dir)
        self.rooms: list[ComputerRoom] = load_rooms(self.data_dir / COMPUTER_FILE)

    @property
    def order_path(self) -> Path:
        return self.data_dir / ORDER_FILE

    def menu_text(self) -> str:
        return "\n".join(
            [
                f"欢迎学生代表:{self.name}登录!",
                "——————————",
                "——1.申请预约——",
                "——2.查看我的预约—",
                "——3.查看所有预约—",
                "——4.取消预约——",
                "——0.注销登录——",
                "——————————",
                "请选择您的操作:",
            ]
        )

    def apply_order(self, date: int, interval: int, room: int) -> Order:
        """Record a pending reservation; raise ValueError on an invalid choice."""
        if date not in OPEN_DAYS:
            raise ValueError(f"date must be 1 to 5, got {date}")
        if interval not in INTERVALS:
            raise ValueError(f"interval must be 1 or 2, got {interval}")
        if room not in ROOM_NUMBERS:
            raise ValueError(f"room must be 1 to 3, got {room}")
        order = Order(
            date=str(date),
            interval=str(interval),
            stu_id=str(self.student_id),
            stu_name=self.name,
            room_id=str(room),
            status=OrderStatus.PENDING,
        )
        OrderBook.load(self.order_path).append(order)
        return order

    def _is_mine(self, order: Order) -> bool:
        return _atoi(order.stu_id) == self.student_id

    def my_orders(self) -> list[Order]:
        """Every reservation made under this student's id."""
        return [order for order in OrderBook.load(self.order_path) if self._is_mine(order)]

    def all_orders(self) -> list[Order]:
        """Every reservation on file."""
        return list(OrderBook.load(self.order_path))

    def _cancellable_indices(self, book: OrderBook) -> list[int]:
        return [
            index
            for index, order in enumerate(book)
            if self._is_mine(order)
            and order.status in (OrderStatus.PENDING, OrderStatus.APPROVED)
        ]

    def cancellable_orders(self) -> list[Order]:
        """This student's reservations that are pending or approved."""
        book = OrderBook.load(self.order_path)
        return [book[index] for index in self._cancellable_indices(book)]

    def cancel_order(self, choice: int) -> Order | None:
        """Cancel the choice-th cancellable reservation, counting from 1.

        A choice of 0 cancels nothing and returns None.
        """
        book = OrderBook.load(self.order_path)
        indices = self._cancellable_indices(book)
        if not 0 <= choice <= len(indices):
            raise ValueError(f"choice must be 0 to {len(indices)}, got {choice}")
        if choice == 0:
            return None
        order = book[indices[choice - 1]]
        order.status = OrderStatus.CANCELLED
        book.save()
        return order