"""
gridrun/
--------
Run recording & comparison.

    from gridrun import Recorder, RunMetrics, ComparisonResult, compare
"""

from gridrun.recorder import ComparisonResult, Recorder, RunMetrics, compare

__all__ = [
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
