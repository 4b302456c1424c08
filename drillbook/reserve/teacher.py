"""Teachers who review pending room reservations."""

from __future__ import annotations

from pathlib import Path

from drillbook.reserve.orders import (
    ORDER_FILE,
    Identity,
    Order,
    OrderBook,
    OrderStatus,
)

_STATUS_TEXT = {
    OrderStatus.PENDING: "审核中",
    OrderStatus.APPROVED: "预约成功",
    OrderStatus.REJECTED: "预约失败，审核未通过",
    OrderStatus.CANCELLED: "预约已取消",
}


def format_order(position: int, order: Order) -> str:
    """One numbered line describing any reservation."""
    return (
        f"{position}、 预约日期: 周{order.date} 时间段:  {order.interval_text()}"
        f" 学号:  {order.stu_id} 姓名:  {order.stu_name}"
        f" 机房编号:  {order.room_id} 状态: {_STATUS_TEXT[order.status]}"
    )


def format_pending_order(position: int, order: Order) -> str:
    """One numbered line describing a reservation awaiting review."""
    return (
        f"{position}、 预约日期: 周{order.date} 时间段: {order.interval_text()}"
        f"学生编号: {order.stu_id}学生姓名: {order.stu_name}"
        f"机房编号: {order.room_id}状态: 审核中 "
    )


class Teacher(Identity):
    """A teacher, bound to a data directory."""

    def __init__(
        self,
        emp_id: int,
        name: str,
        password: str,
        data_dir: str | Path = ".",
    ) -> None:
        super().__init__(name, password)
        self.emp_id = emp_id
        self.data_dir = Path(data_dir)

    @property
    def order_path(self) -> Path:
        return self.data_dir / ORDER_FILE

    def menu_text(self) -> str:
        return "\n".join(
            [
                f"欢迎教师: {self.name}登录! ",
                "——————————",
                "——1.查看所有预约——",
                "——2.审核预约————",
                "——0.注销登录———",
                "——————————",
                "请选择你的操作",
            ]
        )

    def all_orders(self) -> list[Order]:
        """Every reservation on file."""
        return list(OrderBook.load(self.order_path))

    @staticmethod
    def _pending_indices(book: OrderBook) -> list[int]:
        return [
            index
            for index, order in enumerate(book)
            if order.status is OrderStatus.PENDING
        ]

    def pending_orders(self) -> list[Order]:
        """Reservations still awaiting review."""
        book = OrderBook.load(self.order_path)
        return [book[index] for index in self._pending_indices(book)]

    def review_order(self, choice: int, approve: bool) -> Order | None:
        """Approve or reject the choice-th pending reservation, counting from 1.

        A choice of 0 reviews nothing and returns None.
        """
        book = OrderBook.load(self.order_path)
        indices = self._pending_indices(book)
        if not 0 <= choice <= len(indices):
            raise ValueError(f"choice must be 0 to {len(indices)}, got {choice}")
        if choice == 0:
            return None
        order = book[indices[choice - 1]]
        order.status = OrderStatus.APPROVED if approve else OrderStatus.REJECTED
        book.save()
        return order