"""Dense, bounds-checked 2D grid container."""

from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

import numpy as np
from numpy.typing import DTypeLike, NDArray

from .exceptions import InvalidMatrixError, OutOfBoundsError
from .types import Position, Rectangle, Shape

T = TypeVar("T")
D = TypeVar("D")


class Matrix(Generic[T]):
    """Row-major 2D container backed by a numpy array.

    Storage always has ``shape.height`` rows of ``shape.width`` cells, and
    every single-cell access is checked against the shape. Sub-matrices
    returned by ``of`` are independent copies.
    """

    def __init__(
        self,
        shape: Shape | None = None,
        value: Sequence[Sequence[T]] | NDArray | None = None,
        fill: T | None = None,
        dtype: DTypeLike = object,
    ):
        """Initialize Matrix.

        Args:
            shape: Matrix shape. Inferred from value when None.
            value: Initial cells as rows. When None, cells are set to fill.
            fill: Initial value for every cell when value is not given.
            dtype: numpy dtype of the storage.

        Raises:
            InvalidMatrixError: If neither shape nor value is given, value is
                jagged, or value does not match shape.
        """
        if shape is None and value is None:
            raise InvalidMatrixError("Matrix needs a shape or a value")

        if value is None:
            if fill is None and np.dtype(dtype) != np.dtype(object):
                self._cells = np.zeros((shape.height, shape.width), dtype=dtype)
            else:
                self._cells = np.full((shape.height, shape.width), fill, dtype=dtype)
            self.shape = shape
            return

        rows = [list(row) for row in value]
        inferred = Shape(width=len(rows[0]) if rows else 0, height=len(rows))
        for i, row in enumerate(rows):
            if len(row) != inferred.width:
                raise InvalidMatrixError(
                    f"Row {i} has {len(row)} cells, expected {inferred.width}"
                )
        if shape is not None and shape != inferred:
            raise InvalidMatrixError(
                f"Value of shape {inferred} does not match declared shape {shape}"
            )

        self.shape = inferred
        self._cells = np.empty((inferred.height, inferred.width), dtype=dtype)
        for i, row in enumerate(rows):
            for j, cell in enumerate(row):
                self._cells[i, j] = cell

    @classmethod
    def _wrap(cls, cells: NDArray) -> "Matrix[Any]":
        """Build a matrix around an existing 2D array without copying."""
        matrix = cls.__new__(cls)
        matrix._cells = cells
        matrix.shape = Shape(width=cells.shape[1], height=cells.shape[0])
        return matrix

    @property
    def dtype(self) -> np.dtype:
        return self._cells.dtype

    def __len__(self) -> int:
        return self.shape.area()

    def has(self, position: Position) -> bool:
        """Whether position lies inside the matrix."""
        return 0 <= position.x < self.shape.width and 0 <= position.y < self.shape.height

    def at(self, position: Position) -> T:
        """Return the cell at position.

        Raises:
            OutOfBoundsError: If position is outside the matrix.
        """
        if not self.has(position):
            raise OutOfBoundsError(position, self.shape)
        return self._cells[position.y, position.x]

    def set(self, position: Position, value: T) -> None:
        """Set the cell at position.

        Raises:
            OutOfBoundsError: If position is outside the matrix.
        """
        if not self.has(position):
            raise OutOfBoundsError(position, self.shape, action="set")
        self._cells[position.y, position.x] = value

    def insert(self, position: Position, matrix: "Matrix[T]") -> None:
        """Copy another matrix into this one with its top-left at position.

        Raises:
            OutOfBoundsError: If any part of matrix would land outside.
        """
        if (
            position.x < 0
            or position.y < 0
            or position.x + matrix.shape.width > self.shape.width
            or position.y + matrix.shape.height > self.shape.height
        ):
            raise OutOfBoundsError(position, self.shape, action=f"insert {matrix.shape} at")
        self._cells[
            position.y : position.y + matrix.shape.height,
            position.x : position.x + matrix.shape.width,
        ] = matrix._cells

    def of(self, rectangle: Rectangle, out_fill: T | None = None) -> "Matrix[T]":
        """Return a copy of the region covered by rectangle.

        Cells of the region that fall outside this matrix are set to out_fill.
        """
        result: Matrix[T] = Matrix(rectangle.shape, fill=out_fill, dtype=self.dtype)
        bounds = Rectangle.from_corner(Position(x=0, y=0), self.shape)
        overlap = rectangle.intersection(bounds)
        if overlap is None:
            return result

        local = overlap.top_left - rectangle.top_left
        shape = overlap.shape
        result._cells[
            local.y : local.y + shape.height,
            local.x : local.x + shape.width,
        ] = self._cells[
            overlap.top_left.y : overlap.bottom_right.y,
            overlap.top_left.x : overlap.bottom_right.x,
        ]
        return result

    def neighbour_submatrix(
        self, position: Position, radius: int, out_fill: T | None = None
    ) -> "Matrix[T]":
        """Square window of side 2*radius+1 centred on position."""
        return self.of(
            Rectangle.from_corner(
                position.map(lambda c: c - radius),
                Shape.square(2 * radius + 1),
            ),
            out_fill,
        )

    def positions(self) -> Iterator[Position]:
        """Iterate positions row by row, left to right."""
        for y in range(self.shape.height):
            for x in range(self.shape.width):
                yield Position(x=x, y=y)

    def for_each(self, func: Callable[[T, Position], None]) -> None:
        """Call func on every cell in row-major order."""
        for position in self.positions():
            func(self._cells[position.y, position.x], position)

    def map(
        self, func: Callable[[T, Position], D], dtype: DTypeLike = object
    ) -> "Matrix[D]":
        """Return new matrix with func applied to every cell."""
        cells = np.empty((self.shape.height, self.shape.width), dtype=dtype)
        for position in self.positions():
            cells[position.y, position.x] = func(
                self._cells[position.y, position.x], position
            )
        return Matrix._wrap(cells)

    def flatten(self) -> list[T]:
        """Cells as a flat list, row by row."""
        return self._cells.ravel().tolist()

    def rotate_clockwise(self) -> "Matrix[T]":
        """Return a copy rotated 90 degrees clockwise.

        Example::

            [0 1] -> [2 0]
            [2 3]    [3 1]
        """
        return Matrix._wrap(np.rot90(self._cells, k=-1).copy())

    def to_array(self) -> NDArray:
        """Copy of the underlying storage, indexed [y, x]."""
        return self._cells.copy()

    def count(self, predicate: Callable[[T], bool]) -> int:
        """Number of cells satisfying predicate."""
        return sum(1 for cell in self._cells.ravel() if predicate(cell))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self.flatten(), other.flatten()))

    def __str__(self) -> str:
        return "".join(
            "[" + ", ".join(str(cell) for cell in row) + "]\n" for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape}, dtype={self.dtype})"
