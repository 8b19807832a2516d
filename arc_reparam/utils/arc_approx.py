# arc_approx.py
"""
Three-point arc length estimate.

Given three points taken in order along a curve, fit the circle through them
and return the length of the arc from the first point to the last. Nearly
collinear windows fall back to the straight chord.

Functions:
- chord_length(p1, p3)
- approx_length(p1, p2, p3)
"""

import math

import numpy as np

# |4 * (v1 x v2)| below this counts as collinear
COLLINEAR_EPS = 1e-6


def chord_length(p1, p3):
    """Straight-line distance between two (x, y) points."""
    return float(np.linalg.norm(np.asarray(p3, dtype=float) - np.asarray(p1, dtype=float)))


def approx_length(p1, p2, p3):
    """
    Estimate the arc length from p1 to p3 through p2.

    The circumcenter c satisfies 2 c.(p2 - p1) = |p2|^2 - |p1|^2 and
    2 c.(p2 - p3) = |p2|^2 - |p3|^2. Squared norms are taken on the raw
    coordinates, not relative to p1, so precision drops for points far from
    the origin.

    Args:
      p1: start point (x, y)
      p2: interior point (x, y)
      p3: end point (x, y)

    Returns:
      arc length estimate (float). Equals the chord length when the three
      points are (nearly) collinear.
    """
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    p3 = np.asarray(p3, dtype=float)

    chord = chord_length(p1, p3)

    v1 = p2 - p1
    v2 = p2 - p3
    det = 4.0 * (v1[0] * v2[1] - v1[1] * v2[0])

    if abs(det) < COLLINEAR_EPS:
        return chord

    x1 = float(p1 @ p1)
    x2 = float(p2 @ p2)
    x3 = float(p3 @ p3)

    y1 = x2 - x1
    y2 = x2 - x3

    # det carries a factor 4, the linear system above a factor 2; for circles
    # about the origin y1 = y2 = 0 and the center is 0 with either divisor
    center = 2.0 * np.array([y1 * v2[1] - y2 * v1[1], y2 * v1[0] - y1 * v2[0]]) / det
    radius = float(np.linalg.norm(p1 - center))

    ratio = max(-1.0, min(1.0, chord / (2.0 * radius)))
    return 2.0 * radius * math.asin(ratio)
