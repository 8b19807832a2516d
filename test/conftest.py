import math

import pytest

from arc_reparam.utils.dual import DualAxis, Position2Dual
from arc_reparam.utils.quintic_spline import QuinticSpline1, QuinticSpline2


class LineCurve:
    """r(t) = start + t * (end - start)"""

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def evaluate(self, t, order=2):
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return Position2Dual(
            DualAxis(self.start[0] + t * dx, dx, 0.0),
            DualAxis(self.start[1] + t * dy, dy, 0.0),
        )


class ArcCurve:
    """Circle of `radius` about `center`, swept from angle 0 to `sweep` as t goes 0 -> 1."""

    def __init__(self, radius, sweep, center=(0.0, 0.0)):
        self.radius = radius
        self.sweep = sweep
        self.center = center

    def evaluate(self, t, order=2):
        a = self.sweep * t
        r, w = self.radius, self.sweep
        return Position2Dual(
            DualAxis(self.center[0] + r * math.cos(a), -r * w * math.sin(a), -r * w * w * math.cos(a)),
            DualAxis(self.center[1] + r * math.sin(a), r * w * math.cos(a), -r * w * w * math.sin(a)),
        )


class ConstantCurve:
    def evaluate(self, t, order=2):
        return Position2Dual(DualAxis(1.0, 0.0, 0.0), DualAxis(2.0, 0.0, 0.0))


class ParabolicStartCurve:
    """r(t) = (t^2, t^2): straight, but with zero velocity at t = 0."""

    def evaluate(self, t, order=2):
        return Position2Dual(DualAxis(t * t, 2.0 * t, 2.0), DualAxis(t * t, 2.0 * t, 2.0))


@pytest.fixture
def spline():
    return QuinticSpline2(
        QuinticSpline1(DualAxis(0.0, 10.0, 30.0), DualAxis(20.0, 30.0, 0.0)),
        QuinticSpline1(DualAxis(0.0, 15.0, 10.0), DualAxis(20.0, 20.0, 0.0)),
    )


@pytest.fixture
def line():
    return LineCurve((1.0, -2.0), (4.0, 2.0))


@pytest.fixture
def arc():
    return ArcCurve(radius=2.0, sweep=1.5 * math.pi, center=(3.0, -1.0))


@pytest.fixture
def constant_curve():
    return ConstantCurve()


@pytest.fixture
def parabolic_start_curve():
    return ParabolicStartCurve()


@pytest.fixture
def arc_factory():
    return ArcCurve
