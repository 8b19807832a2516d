"""
Arc-length reparameterization for planar parametric curves.

Exports:
- ArcLengthReparam: adaptive s -> t lookup table
- SamplingConfig: accuracy settings for the table
- DualAxis, Position2Dual, curvature: derivative bundles and curvature
- approx_length: three-point circular-arc length estimate
"""
from .utils.arc_approx import approx_length
from .utils.arc_length_reparam import ArcLengthReparam, PositionPath
from .utils.config import SamplingConfig
from .utils.dual import DualAxis, Position2Dual, curvature

__all__ = [
    'ArcLengthReparam',
    'PositionPath',
    'SamplingConfig',
    'DualAxis',
    'Position2Dual',
    'curvature',
    'approx_length',
]
