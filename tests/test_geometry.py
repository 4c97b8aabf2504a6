"""
Tests for the vector primitive.
"""

import numpy as np
import pytest

from skeleton_engine.processing.geometry import chain_length, length


class TestLength:
    """Tests for single-point magnitude."""

    def test_length_of_point(self):
        assert length(np.array([3.0, 4.0, 0.0])) == pytest.approx(5.0)

    def test_origin_is_zero(self):
        assert length(np.zeros(3)) == 0.0


class TestChainLength:
    """Tests for summed segment lengths."""

    def test_sums_consecutive_segments(self):
        points = [np.array([0.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), np.array([1.0, 1.0, 0.0])]
        assert chain_length(points) == pytest.approx(2.0)

    def test_order_is_significant(self):
        a = np.array([0.0, 0.0, 0.0])
        b = np.array([0.0, 1.0, 0.0])
        c = np.array([0.0, 2.0, 0.0])

        assert chain_length([a, b, c]) == pytest.approx(2.0)
        assert chain_length([a, c, b]) == pytest.approx(3.0)

    def test_coincident_points_are_zero(self):
        assert chain_length([np.zeros(3), np.zeros(3)]) == 0.0

    @pytest.mark.parametrize("count", [0, 1])
    def test_fewer_than_two_points_raises(self, count):
        with pytest.raises(ValueError):
            chain_length([np.zeros(3)] * count)
