"""Core geometry types: shapes, positions, rectangles and numeric ranges."""

from typing import Any, Callable

from pydantic import BaseModel, Field, model_validator


class Shape(BaseModel, frozen=True):
    """Immutable 2D size in tiles."""

    width: int = Field(ge=0)
    height: int = Field(ge=0)

    @classmethod
    def square(cls, size: int) -> "Shape":
        """Return a shape with equal width and height."""
        return cls(width=size, height=size)

    def area(self) -> int:
        return self.width * self.height

    def map(self, func: Callable[[int], int]) -> "Shape":
        """Return new shape with func applied to both dimensions."""
        return Shape(width=func(self.width), height=func(self.height))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Position(BaseModel, frozen=True):
    """Immutable 2D tile coordinate.

    Coordinates may be negative; only grid accesses are bounds-checked.
    """

    x: int
    y: int

    @classmethod
    def from_shape(cls, shape: Shape) -> "Position":
        """Position equal to the extents of a shape."""
        return cls(x=shape.width, y=shape.height)

    def __add__(self, other: "Position") -> "Position":
        return Position(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(x=self.x - other.x, y=self.y - other.y)

    def map(self, func: Callable[[int], int]) -> "Position":
        """Return new position with func applied to both components."""
        return Position(x=func(self.x), y=func(self.y))

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class Rectangle(BaseModel, frozen=True):
    """Axis-aligned region covering cells in [top_left, bottom_right)."""

    top_left: Position
    bottom_right: Position

    @model_validator(mode="after")
    def _check_corners(self) -> "Rectangle":
        if (
            self.bottom_right.x < self.top_left.x
            or self.bottom_right.y < self.top_left.y
        ):
            raise ValueError(
                f"bottom_right {self.bottom_right} must not precede top_left {self.top_left}"
            )
        return self

    @classmethod
    def from_corner(cls, top_left: Position, shape: Shape) -> "Rectangle":
        """Rectangle from its top-left corner and size."""
        return cls(top_left=top_left, bottom_right=top_left + Position.from_shape(shape))

    @classmethod
    def from_points(cls, a: Position, b: Position) -> "Rectangle":
        """Rectangle spanning two arbitrary corner points."""
        return cls(
            top_left=Position(x=min(a.x, b.x), y=min(a.y, b.y)),
            bottom_right=Position(x=max(a.x, b.x), y=max(a.y, b.y)),
        )

    @property
    def shape(self) -> Shape:
        return Shape(
            width=self.bottom_right.x - self.top_left.x,
            height=self.bottom_right.y - self.top_left.y,
        )

    def intersection(self, other: "Rectangle") -> "Rectangle | None":
        """Overlapping region of two rectangles, or None if they are disjoint."""
        left = max(self.top_left.x, other.top_left.x)
        top = max(self.top_left.y, other.top_left.y)
        right = min(self.bottom_right.x, other.bottom_right.x)
        bottom = min(self.bottom_right.y, other.bottom_right.y)
        if right <= left or bottom <= top:
            return None
        return Rectangle(
            top_left=Position(x=left, y=top),
            bottom_right=Position(x=right, y=bottom),
        )


class Range(BaseModel, frozen=True):
    """Closed numeric interval [start, end]."""

    start: float
    end: float

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        # Config files may spell a range as a two-element list
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Range needs exactly two bounds, got {len(data)}")
            return {"start": data[0], "end": data[1]}
        return data

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} is below start {self.start}")
        return self

    def contains(self, value: float) -> bool:
        """Whether value lies in the range, bounds included."""
        return self.start <= value <= self.end

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def map(self, value: float) -> float:
        """Affinely rescale a value in [0, 1] into this range."""
        return value * (self.end - self.start) + self.start

    @property
    def width(self) -> float:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"
