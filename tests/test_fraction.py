"""Tests for fraction tables."""

import math

import numpy as np
import pytest

from worldgen.exceptions import ClassificationError
from worldgen.fraction import calculate_ranges, classify, validate_weights
from worldgen.types import Range


class TestCalculateRanges:
    """Tests for calculate_ranges."""

    def test_cumulative_ranges(self) -> None:
        """Ranges are cumulative and proportional to weights."""
        ranges = calculate_ranges([0.25, 0.25, 0.5])
        assert ranges == [
            Range(start=0.0, end=0.25),
            Range(start=0.25, end=0.5),
            Range(start=0.5, end=1.0),
        ]

    def test_ranges_are_contiguous(self) -> None:
        """Each range starts where the previous ends, from 0 to exactly 1."""
        ranges = calculate_ranges([0.1, 0.2, 0.3, 0.4])
        assert ranges[0].start == 0.0
        assert ranges[-1].end == 1.0
        for previous, current in zip(ranges, ranges[1:]):
            assert previous.end == current.start

    def test_unnormalized_weights(self) -> None:
        """Weights are normalised by their total."""
        ranges = calculate_ranges([4, 5, 2])
        assert math.isclose(ranges[0].end, 4 / 11)
        assert math.isclose(ranges[1].end, 9 / 11)
        assert ranges[2].end == 1.0

    def test_zero_weight_is_empty_range(self) -> None:
        ranges = calculate_ranges([1, 0])
        assert ranges[1] == Range(start=1.0, end=1.0)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "weights",
        [[1.0], [0.5, 0.5], [0.3, 0.3, 0.4], [0.1, 0.2, 0.3, 0.4], [4, 5, 2]],
    )
    def test_every_unit_value_classifies(self, weights: list[float]) -> None:
        """Every value in [0, 1] lands in a valid index."""
        ranges = calculate_ranges(weights)
        for value in np.linspace(0.0, 1.0, 1001):
            index = classify(ranges, float(value))
            assert 0 <= index < len(weights)
            assert ranges[index].contains(float(value))

    def test_lower_range_wins_tie(self) -> None:
        """A shared boundary belongs to the earlier range."""
        ranges = calculate_ranges([0.5, 0.5])
        assert classify(ranges, 0.5) == 0

    def test_interior_values(self) -> None:
        ranges = calculate_ranges([0.2, 0.3, 0.5])
        assert classify(ranges, 0.1) == 0
        assert classify(ranges, 0.4) == 1
        assert classify(ranges, 0.9) == 2

    def test_out_of_range_raises(self) -> None:
        ranges = calculate_ranges([0.5, 0.5])
        with pytest.raises(ClassificationError):
            classify(ranges, 1.5)
        with pytest.raises(ClassificationError):
            classify(ranges, -0.1)


class TestValidateWeights:
    """Tests for validate_weights."""

    @pytest.mark.parametrize(
        "weights",
        [[], [-0.1, 1.1], [0, 0], [float("nan"), 1.0], [float("inf")]],
    )
    def test_invalid_tables(self, weights: list[float]) -> None:
        with pytest.raises(ValueError):
            validate_weights(weights)

    def test_valid_table(self) -> None:
        validate_weights([0.0, 1.0])
