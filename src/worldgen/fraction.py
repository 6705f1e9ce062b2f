"""Fraction tables: split [0, 1] into weighted sub-ranges and classify values."""

import math
from typing import Sequence

from .exceptions import ClassificationError
from .types import Range


def validate_weights(weights: Sequence[float]) -> None:
    """Check that weights form a usable fraction table.

    Raises:
        ValueError: If the table is empty, any weight is negative or not
            finite, or the weights sum to zero.
    """
    if not weights:
        raise ValueError("Fraction table needs at least one weight")
    for weight in weights:
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Fraction weights must be finite and >= 0, got {weight}")
    if sum(weights) <= 0:
        raise ValueError("Fraction weights must not all be zero")


def calculate_ranges(weights: Sequence[float]) -> list[Range]:
    """Cumulative sub-ranges of [0, 1] with widths proportional to weights.

    Weights are normalised by their total, so a table that already sums to
    1 maps directly onto [0, 1]. The last range always ends at exactly 1.0.

    Args:
        weights: Ordered proportions.

    Returns:
        One Range per weight, in order, each starting where the previous ends.
    """
    validate_weights(weights)
    total = float(sum(weights))

    ranges: list[Range] = []
    start = 0.0
    cumulative = 0.0
    for i, weight in enumerate(weights):
        cumulative += weight
        end = 1.0 if i == len(weights) - 1 else cumulative / total
        ranges.append(Range(start=start, end=end))
        start = end
    return ranges


def classify(ranges: Sequence[Range], value: float) -> int:
    """Index of the first range containing value.

    Bounds are inclusive, so on a shared boundary the lower range wins.

    Raises:
        ClassificationError: If no range contains value.
    """
    for i, value_range in enumerate(ranges):
        if value_range.contains(value):
            return i
    raise ClassificationError(f"Value {value} is outside every fraction range")
