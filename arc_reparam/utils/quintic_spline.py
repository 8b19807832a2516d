# quintic_spline.py
"""
Quintic Hermite splines on t in [0, 1].

Each axis is a degree-5 polynomial fixed by its value, 1st and 2nd
derivative at both ends, so consecutive splines join with continuous
curvature. QuinticSpline2 satisfies the PositionPath interface used by
ArcLengthReparam.

Example:
    spline = QuinticSpline2(
        QuinticSpline1(DualAxis(0.0, 10.0, 30.0), DualAxis(20.0, 30.0, 0.0)),
        QuinticSpline1(DualAxis(0.0, 15.0, 10.0), DualAxis(20.0, 20.0, 0.0)),
    )
    p = spline.evaluate(0.5)        # Position2Dual
"""

import numpy as np

from arc_reparam.utils.dual import DualAxis, Position2Dual


class QuinticSpline1:
    """Scalar quintic between two boundary states (value, d1, d2)."""

    def __init__(self, begin, end):
        self.begin = begin
        self.end = end

        x0, dx0, ddx0 = begin.value, begin.d1, begin.d2
        x1, dx1, ddx1 = end.value, end.d1, end.d2

        # highest power first, as np.polyval expects
        self.coeffs = np.array([
            -6.0 * x0 - 3.0 * dx0 - 0.5 * ddx0 + 0.5 * ddx1 - 3.0 * dx1 + 6.0 * x1,
            15.0 * x0 + 8.0 * dx0 + 1.5 * ddx0 - ddx1 + 7.0 * dx1 - 15.0 * x1,
            -10.0 * x0 - 6.0 * dx0 - 1.5 * ddx0 + 0.5 * ddx1 - 4.0 * dx1 + 10.0 * x1,
            0.5 * ddx0,
            dx0,
            x0,
        ])
        self._d1_coeffs = np.polyder(self.coeffs, 1)
        self._d2_coeffs = np.polyder(self.coeffs, 2)

    def evaluate(self, t, order=2):
        """Value and derivatives at t; derivatives above `order` are left at 0."""
        value = float(np.polyval(self.coeffs, t))
        d1 = float(np.polyval(self._d1_coeffs, t)) if order >= 1 else 0.0
        d2 = float(np.polyval(self._d2_coeffs, t)) if order >= 2 else 0.0
        return DualAxis(value, d1, d2)


class QuinticSpline2:
    """Planar curve made of one QuinticSpline1 per axis."""

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def evaluate(self, t, order=2):
        return Position2Dual(self.x.evaluate(t, order), self.y.evaluate(t, order))
