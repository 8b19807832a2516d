import math

import numpy as np
import pytest

from arc_reparam.utils.dual import DualAxis, Position2Dual, curvature


def test_dual_axis_indexing():
    a = DualAxis(1.0, 2.0, 3.0)
    assert (a[0], a[1], a[2]) == (1.0, 2.0, 3.0)
    with pytest.raises(IndexError):
        a[3]


def test_position_components():
    p = Position2Dual(DualAxis(1.0, 2.0, 3.0), DualAxis(4.0, 5.0, 6.0))
    np.testing.assert_array_equal(p.value(), [1.0, 4.0])
    np.testing.assert_array_equal(p.velocity(), [2.0, 5.0])
    np.testing.assert_array_equal(p.acceleration(), [3.0, 6.0])


def test_curvature_of_circle_is_inverse_radius(arc):
    for t in np.linspace(0.0, 1.0, 7):
        assert curvature(arc.evaluate(t)) == pytest.approx(1.0 / arc.radius, rel=1e-12)


def test_curvature_of_line_is_zero(line):
    assert curvature(line.evaluate(0.4)) == 0.0


def test_curvature_is_unsigned():
    # clockwise turn gives the same magnitude
    ccw = Position2Dual(DualAxis(0.0, 1.0, 0.0), DualAxis(0.0, 0.0, 2.0))
    cw = Position2Dual(DualAxis(0.0, 1.0, 0.0), DualAxis(0.0, 0.0, -2.0))
    assert curvature(ccw) == curvature(cw) == pytest.approx(2.0)


def test_curvature_with_zero_velocity_is_nan():
    p = Position2Dual(DualAxis(0.0, 0.0, 1.0), DualAxis(0.0, 0.0, 1.0))
    assert math.isnan(curvature(p))
