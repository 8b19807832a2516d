# dual.py
"""
Second-order derivative bundles for planar curves.

A curve evaluated at parameter t hands back, per axis, the value and its first
and second derivatives with respect to t. That is all the arc-length sampler
ever needs, so the bundle is a fixed three-slot struct rather than a general
dual-number type.

Types:
- DualAxis(value, d1, d2)
- Position2Dual(x, y)

Functions:
- curvature(p) -> unsigned curvature |x'y'' - y'x''| / |r'|^3
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DualAxis:
    """Value of one coordinate plus its 1st and 2nd derivatives."""
    value: float
    d1: float = 0.0
    d2: float = 0.0

    def __getitem__(self, order):
        if order == 0:
            return self.value
        if order == 1:
            return self.d1
        if order == 2:
            return self.d2
        raise IndexError(f"derivative order must be 0, 1 or 2, got {order}")


@dataclass(frozen=True)
class Position2Dual:
    """(x, y) position at a curve parameter, with derivatives up to 2nd order."""
    x: DualAxis
    y: DualAxis

    def value(self):
        return np.array([self.x.value, self.y.value], dtype=float)

    def velocity(self):
        return np.array([self.x.d1, self.y.d1], dtype=float)

    def acceleration(self):
        return np.array([self.x.d2, self.y.d2], dtype=float)


def curvature(p):
    """
    Curvature magnitude of the curve at the evaluated point.

        kappa = |d2x*dy - dx*d2y| / (dx^2 + dy^2)^1.5

    A zero first derivative has no defined curvature; math.nan is returned and
    left for the caller to deal with.
    """
    dx, d2x = p.x.d1, p.x.d2
    dy, d2y = p.y.d1, p.y.d2
    deriv_norm = math.sqrt(dx * dx + dy * dy)
    if deriv_norm == 0.0:
        return math.nan
    return abs(d2x * dy - dx * d2y) / (deriv_norm * deriv_norm * deriv_norm)
