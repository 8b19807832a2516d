# resample.py
"""
Arc-length resampling helpers built on ArcLengthReparam.

Inputs:
- `curve`: PositionPath, or `points`: ndarray (N,2) polyline
Outputs:
- samples: ndarray (N,2) spaced evenly in arc length

Functions:
- arc_lengths(points)
- linspace_range(begin, end, n)
- sample_uniform(curve, num_samples, reparam=None)
"""

import numpy as np

from arc_reparam.utils.arc_length_reparam import ArcLengthReparam


def arc_lengths(points):
    """Return cumulative chord lengths s for a sequence of points (N,2)."""
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points must be shape (N,2)")
    if pts.shape[0] == 0:
        return np.array([])
    seg = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    return np.concatenate(([0.0], np.cumsum(seg)))


def linspace_range(begin, end, n):
    """n evenly spaced values from begin to end, both included."""
    if n < 2:
        raise ValueError("n must be >= 2")
    return np.linspace(begin, end, n)


def sample_uniform(curve, num_samples=200, reparam=None):
    """
    Sample `curve` at `num_samples` points evenly spaced in arc length.

    Args:
      curve: PositionPath to sample
      num_samples: number of output points, >= 2 (endpoints included)
      reparam: ArcLengthReparam already built for `curve`; built with default
               settings when omitted

    Returns:
      samples: ndarray (num_samples, 2)
    """
    if num_samples < 2:
        raise ValueError("num_samples must be >= 2")
    if reparam is None:
        reparam = ArcLengthReparam(curve)

    s_targets = linspace_range(0.0, reparam.length, num_samples)
    t_samples = reparam.reparam_array(s_targets)
    return np.array([curve.evaluate(float(t), 0).value() for t in t_samples])


# ----------------- Example usage -----------------
if __name__ == "__main__":
    import matplotlib.pyplot as plt

    from arc_reparam.utils.dual import DualAxis
    from arc_reparam.utils.quintic_spline import QuinticSpline1, QuinticSpline2

    spline = QuinticSpline2(
        QuinticSpline1(DualAxis(0.0, 10.0, 30.0), DualAxis(20.0, 30.0, 0.0)),
        QuinticSpline1(DualAxis(0.0, 15.0, 10.0), DualAxis(20.0, 20.0, 0.0)),
    )
    reparam = ArcLengthReparam(spline)
    print(f"length = {reparam.length:.6f}, table samples = {len(reparam)}")

    by_param = np.array([spline.evaluate(t, 0).value() for t in np.linspace(0.0, 1.0, 40)])
    by_arc = sample_uniform(spline, num_samples=40, reparam=reparam)

    plt.figure(figsize=(7, 5))
    plt.plot(by_param[:, 0], by_param[:, 1], "o", label="uniform in t")
    plt.plot(by_arc[:, 0], by_arc[:, 1], "x", label="uniform in s")
    plt.axis("equal")
    plt.legend()
    plt.title("Quintic spline: parameter vs arc-length sampling")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.grid(True)
    plt.show()
