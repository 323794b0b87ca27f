"""
Assembly of the classified day timeline.
"""

from typing import List, Sequence

from .models import IntervalType, Segment, TimeBlock


class SegmentBuilder:
    """Combines merged busy blocks and free blocks into one ordered timeline."""

    def build(
        self,
        busy_merged: Sequence[TimeBlock],
        free: Sequence[TimeBlock]
    ) -> List[Segment]:
        """
        Tag busy and free blocks and sort them by start time.

        Busy segments are listed before free ones prior to the stable sort,
        so a tie on start (not expected for disjoint inputs) puts busy first.
        """
        segments = [Segment(block=block, type=IntervalType.BUSY) for block in busy_merged]
        segments.extend(Segment(block=block, type=IntervalType.FREE) for block in free)

        return sorted(segments, key=lambda s: s.start)
