"""Drinks made by following the same four-step recipe."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Drink(ABC):
    """A drink whose preparation steps subclasses describe."""

    @abstractmethod
    def boil(self) -> str:
        """Boil the water."""

    @abstractmethod
    def brew(self) -> str:
        """Brew the drink."""

    @abstractmethod
    def pour(self) -> str:
        """Pour into the cup."""

    @abstractmethod
    def put_something(self) -> str:
        """Add the extras."""

    def make(self) -> list[str]:
        """Run the recipe and return its steps in order."""
        return [self.boil(), self.brew(), self.pour(), self.put_something()]


class Coffee(Drink):
    def boil(self) -> str:
        return "把水煮开"

    def brew(self) -> str:
        return "冲泡咖啡"

    def pour(self) -> str:
        return "倒入杯中"

    def put_something(self) -> str:
        return "加入糖和牛奶"


class Tea(Drink):
    def boil(self) -> str:
        return "把矿泉水煮开"

    def brew(self) -> str:
        return "冲泡茶叶"

    def pour(self) -> str:
        return "倒入杯中"

    def put_something(self) -> str:
        return "加入柠檬"