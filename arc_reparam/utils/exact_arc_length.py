# exact_arc_length.py
"""
Quadrature-based arc length, used to cross-check ArcLengthReparam.

s(t) is the integral of |r'(u)| over [0, t], computed with adaptive Gauss-Kronrod
quadrature; reparam(s) inverts it with Brent's method. Every query costs a
root solve of nested integrals, so this is a reference, not a hot path.

Requires: numpy, scipy
"""

import math

import numpy as np
from scipy import integrate, optimize


class ExactArcLengthReparam:
    """
    Same contract as ArcLengthReparam: `length` and a clamped `reparam(s)`.

    Args:
      curve: PositionPath (only first derivatives are requested)
      tol: absolute/relative tolerance for quadrature and root finding
    """

    def __init__(self, curve, tol=1e-10):
        self.curve = curve
        self.tol = tol
        self.length = self.arc_length(1.0)
        if not (math.isfinite(self.length) and self.length > 0.0):
            raise ValueError(f"curve length must be finite and > 0, got {self.length}")

    def speed(self, t):
        """|dr/dt| at t."""
        return float(np.linalg.norm(self.curve.evaluate(t, 1).velocity()))

    def arc_length(self, t):
        """Arc length from parameter 0 to t."""
        if t <= 0.0:
            return 0.0
        value, _ = integrate.quad(self.speed, 0.0, t, epsabs=self.tol, epsrel=self.tol, limit=200)
        return value

    def reparam(self, s):
        s = float(s)
        if math.isnan(s):
            raise ValueError("arc length must not be NaN")
        if s <= 0.0:
            return 0.0
        if s >= self.length:
            return 1.0
        return optimize.brentq(lambda t: self.arc_length(t) - s, 0.0, 1.0, xtol=self.tol)
