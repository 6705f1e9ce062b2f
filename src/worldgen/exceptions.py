"""Custom exceptions for world generation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Position, Shape


class WorldGenError(Exception):
    """Base exception for world generation errors."""

    pass


class OutOfBoundsError(WorldGenError, IndexError):
    """Raised when a grid access or insertion falls outside its shape."""

    def __init__(self, position: "Position", shape: "Shape", action: str = "access"):
        self.position = position
        self.shape = shape
        super().__init__(
            f"Cannot {action} position {position}: outside matrix of shape {shape}"
        )


class InvalidMatrixError(WorldGenError, ValueError):
    """Raised when a matrix is built from inconsistent shape and data."""

    pass


class ClassificationError(WorldGenError, ValueError):
    """Raised when a value falls outside every fraction range."""

    pass


class GenerationInfeasibleError(WorldGenError, RuntimeError):
    """Raised when generation keeps failing its acceptance check."""

    def __init__(self, message: str, attempts: int):
        self.attempts = attempts
        super().__init__(message)
