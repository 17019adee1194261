"""Tests for isoline2d.interpolate.crossing."""

import numpy.testing as npt

from isoline2d import crossing


class TestCrossing:
    def test_midpoint_for_equal_magnitudes(self):
        assert crossing((0.0, 0.0), -1.0, (2.0, 0.0), 1.0) == (1.0, 0.0)

    def test_weight_from_first_endpoint(self):
        # |d1| / (|d1| + |d2|) = 1 / 4
        npt.assert_allclose(crossing((0.0, 0.0), -1.0, (0.0, 4.0), 3.0), (0.0, 1.0))

    def test_weight_uses_magnitudes_only(self):
        a = crossing((0.0, 0.0), -1.0, (4.0, 4.0), 3.0)
        b = crossing((0.0, 0.0), 1.0, (4.0, 4.0), -3.0)
        assert a == b

    def test_zero_at_first_endpoint(self):
        assert crossing((1.0, 2.0), 0.0, (3.0, 4.0), 5.0) == (1.0, 2.0)

    def test_zero_at_second_endpoint(self):
        assert crossing((1.0, 2.0), -5.0, (3.0, 4.0), 0.0) == (3.0, 4.0)

    def test_zero_zero_collapses_to_first_point(self):
        assert crossing((1.5, -2.0), 0.0, (3.0, 7.0), 0.0) == (1.5, -2.0)

    def test_zero_zero_depends_on_direction(self):
        p, q = (0.0, 0.0), (1.0, 0.0)
        assert crossing(p, 0.0, q, 0.0) == p
        assert crossing(q, 0.0, p, 0.0) == q

    def test_negative_zero(self):
        assert crossing((0.0, 1.0), -0.0, (1.0, 1.0), 0.0) == (0.0, 1.0)

    def test_nan_weight_falls_back_to_first_point(self):
        assert crossing((0.0, 0.0), float("inf"), (1.0, 1.0), float("inf")) == (0.0, 0.0)

    def test_reversed_step_direction(self):
        npt.assert_allclose(crossing((2.0, 2.0), 1.0, (2.0, -2.0), -1.0), (2.0, 0.0))
