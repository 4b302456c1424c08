"""Circles, cubes and points."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

PI = 3.14


def circumference(radius: float) -> float:
    """Circumference of a circle, using PI = 3.14."""
    return 2 * PI * radius


@dataclass
class Cube:
    """A rectangular box."""

    length: int
    width: int
    height: int

    def surface_area(self) -> int:
        return 2 * (
            self.length * self.width
            + self.length * self.height
            + self.width * self.height
        )

    def volume(self) -> int:
        return self.length * self.width * self.height

    def same_as(self, other: "Cube") -> bool:
        return is_same(self, other)


def is_same(first: Cube, second: Cube) -> bool:
    """True when both boxes have the same three dimensions."""
    return (first.length, first.width, first.height) == (
        second.length,
        second.width,
        second.height,
    )


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Circle:
    radius: int
    center: Point = field(default_factory=Point)


class Position(enum.Enum):
    """Where a point lies relative to a circle."""

    ON = "点在圆上"
    OUTSIDE = "点在圆外"
    INSIDE = "点在圆内"


def locate(circle: Circle, point: Point) -> Position:
    """Compare squared distances to place the point against the circle."""
    dx = circle.center.x - point.x
    dy = circle.center.y - point.y
    distance = dx * dx + dy * dy
    radius_squared = circle.radius * circle.radius
    if distance == radius_squared:
        return Position.ON
    if distance > radius_squared:
        return Position.OUTSIDE
    return Position.INSIDE