"""Two-dimensional positions and a rectangular grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Vec2:
    """An integer position or direction; y grows downwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scale: object) -> Vec2:
        if not isinstance(scale, int):
            return NotImplemented
        return Vec2(scale * self.x, scale * self.y)

    __rmul__ = __mul__

    def rotate90deg(self) -> Vec2:
        """Turn clockwise on screen (a right turn)."""
        return Vec2(-self.y, self.x)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


UP = Vec2(0, -1)
DOWN = Vec2(0, 1)
LEFT = Vec2(-1, 0)
RIGHT = Vec2(1, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def direction_to_idx(d: Vec2) -> int:
    """Index of a unit direction: up, down, left, right -> 0..3."""
    try:
        return DIRECTIONS.index(d)
    except ValueError:
        raise ValueError(f"invalid direction {d}") from None


Position = Union[Vec2, tuple]


class Grid(Generic[T]):
    """A rectangular grid stored row by row."""

    def __init__(self, data: Iterable[T], width: int) -> None:
        cells = list(data)
        if width < 0 or (width == 0 and cells):
            raise ValueError("grid: width must be positive")
        if width and len(cells) % width:
            raise ValueError("grid: data size not divisible by width")
        self._cells = cells
        self.width = width
        self.height = len(cells) // width if width else 0

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        """A grid of the given size with every cell set to ``value``."""
        return cls([value] * (width * height), width)

    def _offset(self, p: Position) -> int:
        x, y = (p.x, p.y) if isinstance(p, Vec2) else p
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) outside grid")
        return y * self.width + x

    def __getitem__(self, p: Position) -> T:
        return self._cells[self._offset(p)]

    def __setitem__(self, p: Position, value: T) -> None:
        self._cells[self._offset(p)] = value

    def at_or(self, p: Position, fallback: T) -> T:
        """The cell at ``p``, or ``fallback`` when ``p`` lies outside."""
        return self[p] if self.inside(p) else fallback

    def set_all(self, value: T) -> None:
        self._cells = [value] * len(self._cells)

    def inside(self, p: Position) -> bool:
        x, y = (p.x, p.y) if isinstance(p, Vec2) else p
        return 0 <= x < self.width and 0 <= y < self.height

    def positions(self) -> Iterator[Vec2]:
        """All positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Vec2(x, y)

    def copy(self) -> Grid[T]:
        """A shallow copy whose cells can be changed independently."""
        return Grid(self._cells, self.width)