# b_spline_curve.py
"""
scipy B-spline adapter.

Wraps an existing parametric B-spline representation `tck = (knots, [cx, cy], k)`
(the form returned by scipy.interpolate.splprep) so it can be handed to
ArcLengthReparam. Only evaluation lives here; fitting the spline is up to
the caller.

Requires: numpy, scipy
"""

import numpy as np

try:
    from scipy.interpolate import splev
except Exception as e:
    raise ImportError("scipy is required: pip install scipy") from e

from arc_reparam.utils.dual import DualAxis, Position2Dual


class BSplineCurve2:
    """
    Planar B-spline over its knot span, exposed on t in [0, 1].

    Args:
      tck: (knots, [cx, cy], degree) with degree >= 2 so that the second
           derivative exists
    """

    def __init__(self, tck):
        knots, coeffs, degree = tck
        knots = np.asarray(knots, dtype=float)
        coeffs = [np.asarray(c, dtype=float) for c in coeffs]
        if len(coeffs) != 2:
            raise ValueError("tck must hold exactly two coefficient arrays (x, y)")
        if degree < 2:
            raise ValueError(f"spline degree must be >= 2 for curvature, got {degree}")

        self.tck = (knots, coeffs, int(degree))
        self.u_min = float(knots[degree])
        self.u_max = float(knots[-degree - 1])
        if not self.u_max > self.u_min:
            raise ValueError("knot vector spans an empty parameter interval")

    def evaluate(self, t, order=2):
        """Position and t-derivatives at t in [0, 1] (mapped onto the knot span)."""
        scale = self.u_max - self.u_min
        u = self.u_min + t * scale

        x, y = splev(u, self.tck, der=0)
        dx = dy = d2x = d2y = 0.0
        if order >= 1:
            dx, dy = splev(u, self.tck, der=1)
        if order >= 2:
            d2x, d2y = splev(u, self.tck, der=2)

        # chain rule for u = u_min + t * scale
        return Position2Dual(
            DualAxis(float(x), float(dx) * scale, float(d2x) * scale * scale),
            DualAxis(float(y), float(dy) * scale, float(d2y) * scale * scale),
        )
