# arc_length_reparam.py
"""
Arc-length reparameterization of a planar parametric curve.

The curve's parameter t in [0, 1] is generally not proportional to distance
travelled. ArcLengthReparam builds, once, a table of (s, t) samples by
recursive bisection of the parameter domain and then answers s -> t queries
with a binary search plus linear interpolation.

Inputs:
- `curve`: any object with evaluate(t, order) -> Position2Dual (see PositionPath)
Outputs:
- length: total arc length
- reparam(s): parameter t for arc length s (clamped to [0, 1])

Typical use:
    reparam = ArcLengthReparam(spline)
    t = reparam.reparam(0.5 * reparam.length)
    point = spline.evaluate(t, 0).value()
"""

import logging
import math
from typing import Protocol

import numpy as np

from arc_reparam.utils.arc_approx import approx_length
from arc_reparam.utils.config import SamplingConfig
from arc_reparam.utils.dual import Position2Dual, curvature

logger = logging.getLogger(__name__)

# rounding slack when comparing an arc estimate against its two chords
TWO_CHORD_RTOL = 1e-6


class PositionPath(Protocol):
    """Planar curve over t in [0, 1] that can report derivatives up to `order`."""

    def evaluate(self, t: float, order: int = 2) -> Position2Dual:
        ...


class ArcLengthReparam:
    """
    Immutable s -> t lookup table for one curve.

    Args:
      curve: PositionPath to sample; only borrowed during construction
      config: SamplingConfig, defaults to SamplingConfig()
      **overrides: individual SamplingConfig fields, applied on top of `config`

    Raises:
      ValueError: on invalid settings, or if the curve has no positive finite length
    """

    def __init__(self, curve: PositionPath, config=None, **overrides):
        if config is None:
            config = SamplingConfig.from_dict(overrides)
        elif overrides:
            config = SamplingConfig.from_dict({**config.to_dict(), **overrides})
        self.config = config

        s_values, t_values, self.depth_limited = self._adaptive_sample(curve)
        if len(s_values) < 2:
            raise ValueError("must have at least two samples")

        self._s = np.array(s_values, dtype=float)
        self._t = np.array(t_values, dtype=float)
        self._s.flags.writeable = False
        self._t.flags.writeable = False

        # the last table entry is the total, so reparam(length) hits it exactly
        self.length = float(self._s[-1])
        if not (math.isfinite(self.length) and self.length > 0.0):
            raise ValueError(f"curve length must be finite and > 0, got {self.length}")

        logger.debug(
            "arc-length table built: %d samples, length=%.6f, depth-limited leaves=%d",
            len(self._s), self.length, self.depth_limited)
        if self.depth_limited:
            logger.warning(
                "%d segment(s) stopped at max_depth=%d with tolerances unmet",
                self.depth_limited, self.config.max_depth)

    def _adaptive_sample(self, curve):
        """
        Bisect [0, 1] until every segment meets the curvature and length bounds.

        Samples are appended to one pair of lists as the recursion walks left to
        right. A call covering (t_lo, t_hi] appends its samples and returns the
        cumulative s at t_hi; the left half's returned s seeds the right half.

        Returns:
          (s_values, t_values, depth_limited)
        """
        max_delta_k = self.config.max_delta_k
        max_segment_length = self.config.max_segment_length
        max_depth = self.config.max_depth

        s_values = [0.0]
        t_values = [0.0]
        depth_limited = 0
        nonfinite_k = 0

        def helper(s_lo, t_lo, t_hi, p_lo, p_hi, depth):
            nonlocal depth_limited, nonfinite_k

            t_mid = 0.5 * (t_lo + t_hi)
            p_mid = curve.evaluate(t_mid, 2)

            delta_k = abs(curvature(p_lo) - curvature(p_hi))
            if not math.isfinite(delta_k):
                nonfinite_k += 1
            x_lo, x_mid, x_hi = p_lo.value(), p_mid.value(), p_hi.value()
            length = approx_length(x_lo, x_mid, x_hi)

            # any path through x_mid is at least this long; falling short means
            # the window closed on itself or swept past a half turn
            two_chord = float(np.linalg.norm(x_mid - x_lo) + np.linalg.norm(x_hi - x_mid))
            cut_short = length < two_chord * (1.0 - TWO_CHORD_RTOL)

            too_coarse = cut_short or delta_k > max_delta_k or length > max_segment_length
            if too_coarse and depth < max_depth:
                s_mid = helper(s_lo, t_lo, t_mid, p_lo, p_mid, depth + 1)
                return helper(s_mid, t_mid, t_hi, p_mid, p_hi, depth + 1)

            if too_coarse:
                depth_limited += 1
            if cut_short:
                length = two_chord
            s_hi = s_lo + length
            s_values.append(s_hi)
            t_values.append(t_hi)
            return s_hi

        helper(0.0, 0.0, 1.0, curve.evaluate(0.0, 2), curve.evaluate(1.0, 2), 0)

        if nonfinite_k:
            logger.warning(
                "curvature was not finite on %d segment(s); check for a zero "
                "first derivative in the curve parameterization", nonfinite_k)
        return s_values, t_values, depth_limited

    @property
    def samples(self):
        """Read-only (n, 2) array of (s, t) rows, ascending in both columns."""
        table = np.column_stack((self._s, self._t))
        table.flags.writeable = False
        return table

    def __len__(self):
        return len(self._s)

    def reparam(self, s):
        """
        Parameter t at arc length s.

        s below 0 returns 0.0 and s beyond `length` returns 1.0. Between table
        entries t is interpolated linearly.
        """
        s = float(s)
        if math.isnan(s):
            raise ValueError("arc length must not be NaN")

        n = len(self._s)
        index = int(np.searchsorted(self._s, s, side='left'))
        if index < n and self._s[index] == s:
            return float(self._t[index])
        if index == 0:
            return 0.0
        if index >= n:
            return 1.0

        s_lo, s_hi = self._s[index - 1], self._s[index]
        t_lo, t_hi = self._t[index - 1], self._t[index]
        return float(t_lo + (s - s_lo) / (s_hi - s_lo) * (t_hi - t_lo))

    def reparam_array(self, s_values):
        """Vectorized reparam() for an array of arc lengths; same clamping."""
        s_values = np.asarray(s_values, dtype=float)
        if np.isnan(s_values).any():
            raise ValueError("arc lengths must not be NaN")
        return np.interp(s_values, self._s, self._t, left=0.0, right=1.0)
