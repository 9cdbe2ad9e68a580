# Snake body stored as turn points of an axis-aligned polyline.
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: int) -> Point:
        return Point(self.x * factor, self.y * factor)

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(Enum):
    # Screen coordinates: y grows downwards.
    RIGHT = (1, 0)
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> Point:
        return Point(*self.value)

    @property
    def axis(self) -> Axis:
        return Axis.HORIZONTAL if self.value[1] == 0 else Axis.VERTICAL

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _as_point(value: Point | tuple[int, int]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


class BodyPath:
    """Tail-to-head turn points; consecutive points form horizontal or vertical runs."""

    def __init__(self, points: Iterable[Point | tuple[int, int]]) -> None:
        self._points: deque[Point] = deque(_as_point(p) for p in points)
        if not self._points:
            raise ValueError("BodyPath needs at least one point.")
        for first, second in zip(self._points, list(self._points)[1:]):
            if first == second:
                raise ValueError(f"Repeated point {first.as_tuple()}; segments must have length.")
            if first.x != second.x and first.y != second.y:
                raise ValueError(f"Segment {first.as_tuple()} -> {second.as_tuple()} is diagonal.")

    @classmethod
    def straight(cls, start: Point | tuple[int, int], direction: Direction, length: int) -> BodyPath:
        """Seed a single straight run of `length` unit steps heading in `direction`."""
        if length < 0:
            raise ValueError("length must be >= 0")
        start = _as_point(start)
        if length == 0:
            return cls([start])
        return cls([start, start + direction.delta.scaled(length)])

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BodyPath):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"BodyPath({[p.as_tuple() for p in self._points]})"

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def head(self) -> Point:
        return self._points[-1]

    @property
    def length(self) -> int:
        """Path length in unit steps."""
        total = 0
        previous = self._points[0]
        for point in list(self._points)[1:]:
            total += abs(point.x - previous.x) + abs(point.y - previous.y)
            previous = point
        return total

    @property
    def cell_count(self) -> int:
        return self.length + 1

    @property
    def direction(self) -> Direction | None:
        """Heading of the last segment, None for a single point."""
        if len(self._points) < 2:
            return None
        delta = self._points[-1] - self._points[-2]
        return Direction((_sign(delta.x), _sign(delta.y)))

    def shrink_tail(self) -> None:
        """Pull the tail point one step toward the next point; drop it once they meet."""
        if len(self._points) < 2:
            return
        first, second = self._points[0], self._points[1]
        delta = second - first
        if delta.y == 0:
            first = first + Point(_sign(delta.x), 0)
        else:
            first = first + Point(0, _sign(delta.y))

        if first == second:
            self._points.popleft()
        else:
            self._points[0] = first

    def grow_head(self, direction: Direction) -> None:
        # Collinear heads are appended as-is; shrink_tail collapses them later.
        self._points.append(self._points[-1] + direction.delta)

    def move(self, direction: Direction) -> None:
        self.shrink_tail()
        self.grow_head(direction)

    def cells(self) -> Iterator[Point]:
        """Every unit cell from tail to head, corners yielded once."""
        current = self._points[0]
        yield current
        for target in list(self._points)[1:]:
            step = Point(_sign(target.x - current.x), _sign(target.y - current.y))
            while current != target:
                current = current + step
                yield current
