"""
Domain layer - Pure interval logic without external dependencies.
"""

from .free_intervals import FreeIntervalComputer
from .interval_merger import IntervalMerger
from .models import IntervalType, Segment, TimeBlock
from .segment_builder import SegmentBuilder

__all__ = [
    "TimeBlock",
    "IntervalType",
    "Segment",
    "IntervalMerger",
    "FreeIntervalComputer",
    "SegmentBuilder",
]
