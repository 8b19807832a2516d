import numpy as np
import pytest

from arc_reparam.utils.arc_length_reparam import ArcLengthReparam
from arc_reparam.utils.resample import arc_lengths, linspace_range, sample_uniform


def test_arc_lengths_of_polyline():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 5.0]])
    np.testing.assert_allclose(arc_lengths(pts), [0.0, 5.0, 6.0])


def test_arc_lengths_rejects_bad_shape():
    with pytest.raises(ValueError):
        arc_lengths(np.zeros((4, 3)))


def test_linspace_range_includes_endpoints():
    values = linspace_range(0.0, 2.0, 5)
    np.testing.assert_allclose(values, [0.0, 0.5, 1.0, 1.5, 2.0])
    with pytest.raises(ValueError):
        linspace_range(0.0, 1.0, 1)


def test_uniform_samples_are_evenly_spaced(spline):
    reparam = ArcLengthReparam(spline)
    pts = sample_uniform(spline, num_samples=60, reparam=reparam)
    assert pts.shape == (60, 2)

    d = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    cv = float(np.std(d) / np.mean(d))
    assert cv < 1e-2
    assert arc_lengths(pts)[-1] == pytest.approx(reparam.length, rel=1e-3)


def test_uniform_samples_hit_endpoints(spline):
    pts = sample_uniform(spline, num_samples=10)
    np.testing.assert_allclose(pts[0], [0.0, 0.0], atol=1e-9)
    np.testing.assert_allclose(pts[-1], [20.0, 20.0], atol=1e-9)


def test_parameter_sampling_is_uneven_but_arc_sampling_is_not(spline):
    by_param = np.array([spline.evaluate(t, 0).value() for t in np.linspace(0.0, 1.0, 30)])
    by_arc = sample_uniform(spline, num_samples=30)
    spread_param = np.ptp(np.linalg.norm(np.diff(by_param, axis=0), axis=1))
    spread_arc = np.ptp(np.linalg.norm(np.diff(by_arc, axis=0), axis=1))
    assert spread_arc < 0.1 * spread_param


def test_sample_uniform_needs_two_points(line):
    with pytest.raises(ValueError):
        sample_uniform(line, num_samples=1)
