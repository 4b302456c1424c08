"""Two styles of a simple integer calculator."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


@dataclass
class Calculator:
    """Calculator that picks the operation from an operator symbol."""

    num1: int = 0
    num2: int = 0

    def get_result(self, oper: str) -> int:
        """Apply '+', '-' or '*' to the two operands."""
        try:
            operation = _OPERATIONS[oper]
        except KeyError:
            raise ValueError(f"unsupported operator: {oper!r}") from None
        return operation(self.num1, self.num2)


@dataclass
class AbstractCalculator:
    """Base of the calculators that each implement one operation."""

    num1: int = 0
    num2: int = 0

    def result(self) -> int:
        """The base calculator computes nothing and yields 0."""
        return 0


class AddCalculator(AbstractCalculator):
    def result(self) -> int:
        return self.num1 + self.num2


class SubCalculator(AbstractCalculator):
    def result(self) -> int:
        return self.num1 - self.num2


class MulCalculator(AbstractCalculator):
    def result(self) -> int:
        return self.num1 * self.num2