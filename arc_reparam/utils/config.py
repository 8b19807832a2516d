# config.py
"""Accuracy settings for adaptive arc-length sampling."""

import numbers
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class SamplingConfig:
    """
    Tolerances that stop the adaptive bisection.

    Attributes:
        max_delta_k: largest curvature difference allowed between the two ends
                     of a table segment
        max_segment_length: longest arc a single table segment may cover
        max_depth: bisection depth cap; a branch stops here even if the
                   tolerances are still violated
    """
    max_delta_k: float = 0.01
    max_segment_length: float = 0.25
    max_depth: int = 30

    def __post_init__(self):
        if not self.max_delta_k >= 0.0:
            raise ValueError(f"max_delta_k must be >= 0, got {self.max_delta_k}")
        if not self.max_segment_length > 0.0:
            raise ValueError(f"max_segment_length must be > 0, got {self.max_segment_length}")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, numbers.Integral):
            raise ValueError(f"max_depth must be an int, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_dict(cls, data):
        """
        Build a config from a plain mapping, e.g. a parsed YAML/JSON block.

        Missing keys take their defaults; unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown sampling options: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self):
        return {
            'max_delta_k': self.max_delta_k,
            'max_segment_length': self.max_segment_length,
            'max_depth': self.max_depth,
        }
