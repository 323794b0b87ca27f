"""
Coalescing of busy intervals.

Pure domain logic: no I/O and no state kept between calls.
"""

import logging
from typing import List, Sequence

import pendulum

from .models import TimeBlock

logger = logging.getLogger(__name__)

DEFAULT_ADJACENCY_THRESHOLD_SECONDS = 60.0


class IntervalMerger:
    """
    Sorts busy blocks and merges those that overlap or nearly touch.

    Two blocks are merged when the gap between them is at most
    ``adjacency_threshold_seconds``; an overlap counts as a negative gap.

    Example (threshold 60s):
    [09:00-10:00, 10:00-11:00, 10:30-12:00, 14:00-15:00]
    -> [09:00-12:00, 14:00-15:00]
    """

    def __init__(self, adjacency_threshold_seconds: float = DEFAULT_ADJACENCY_THRESHOLD_SECONDS):
        self.adjacency_threshold_seconds = adjacency_threshold_seconds
        self._threshold = pendulum.duration(seconds=adjacency_threshold_seconds)

    def merge(self, intervals: Sequence[TimeBlock]) -> List[TimeBlock]:
        """
        Merge overlapping or near-adjacent blocks.

        Args:
            intervals: Busy blocks in any order

        Returns:
            Disjoint blocks sorted by start, each pair separated by more
            than the adjacency threshold
        """
        if not intervals:
            return []

        # sorted() is stable, equal starts keep their input order
        sorted_blocks = sorted(intervals, key=lambda b: b.start)

        merged: List[TimeBlock] = []
        current = sorted_blocks[0]

        for block in sorted_blocks[1:]:
            if self._overlaps_or_adjacent(current, block):
                current = TimeBlock(start=current.start, end=max(current.end, block.end))
            else:
                merged.append(current)
                current = block

        merged.append(current)

        logger.debug("Merged %d busy blocks into %d", len(intervals), len(merged))
        return merged

    def _overlaps_or_adjacent(self, current: TimeBlock, following: TimeBlock) -> bool:
        """Check ``following.start - current.end <= threshold``."""
        return following.start <= current.end + self._threshold
