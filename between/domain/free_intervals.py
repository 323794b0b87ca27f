"""
Free time as the complement of busy time inside a bounding range.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no database, no I/O).
"""

import logging
from typing import List, Sequence

from .models import TimeBlock

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_GAP_SECONDS = 300.0


class FreeIntervalComputer:
    """
    Computes the free gaps left between merged busy blocks.

    Algorithm:
    1. Start a cursor at the beginning of the range
    2. For each busy block, the span from the cursor to the block start is a
       candidate gap; move the cursor past the block
    3. The span from the cursor to the end of the range is the last candidate
    4. Candidates shorter than the minimum gap duration are dropped

    The busy blocks must already be merged (see ``IntervalMerger``); they
    are not re-merged here.
    """

    def __init__(self, minimum_gap_seconds: float = DEFAULT_MINIMUM_GAP_SECONDS):
        self.minimum_gap_seconds = minimum_gap_seconds

    def compute_free(
        self,
        busy: Sequence[TimeBlock],
        day_range: TimeBlock
    ) -> List[TimeBlock]:
        """
        Subtract busy blocks from a range, yielding free blocks.

        Example:
        Range: 08:00 - 18:00
        Busy: [10:00-11:00, 11:03-12:00]
        Result: [08:00-10:00, 12:00-18:00]  (the 3 minute gap is too short)

        Args:
            busy: Merged busy blocks, sorted by start
            day_range: The bounding window

        Returns:
            Ordered, disjoint free blocks within ``day_range``
        """
        free_blocks: List[TimeBlock] = []
        cursor = day_range.start

        for busy_block in busy:
            if busy_block.start > cursor:
                self._append_if_long_enough(
                    free_blocks,
                    TimeBlock(start=cursor, end=busy_block.start)
                )

            cursor = max(cursor, busy_block.end)

        if cursor < day_range.end:
            self._append_if_long_enough(
                free_blocks,
                TimeBlock(start=cursor, end=day_range.end)
            )

        logger.debug(
            "Found %d free gaps of at least %ss in %s",
            len(free_blocks),
            self.minimum_gap_seconds,
            day_range
        )
        return free_blocks

    def _append_if_long_enough(self, free_blocks: List[TimeBlock], gap: TimeBlock) -> None:
        if gap.duration() >= self.minimum_gap_seconds:
            free_blocks.append(gap)
