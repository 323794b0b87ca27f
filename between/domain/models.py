"""
Domain models for busy/free interval processing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional

from pendulum import DateTime


@dataclass(frozen=True)
class TimeBlock:
    """
    Represents an immutable half-open time span ``[start, end)``.

    Callers must supply ``start <= end``. Nothing is validated here: an
    inverted block reports a negative duration instead of raising.
    Zero-length blocks are allowed and simply produce no visible gap.
    """
    start: DateTime
    end: DateTime

    def duration(self) -> float:
        """Return the duration in seconds."""
        return (self.end - self.start).total_seconds()

    def duration_minutes(self) -> float:
        """Return the duration in minutes."""
        return self.duration() / 60

    def __str__(self) -> str:
        return f"{self.start.strftime('%d.%m.%Y %H:%M')} - {self.end.strftime('%H:%M')}"


class IntervalType(Enum):
    """Classification of a timeline segment."""
    FREE = "free"
    BUSY = "busy"


@dataclass(frozen=True)
class Segment:
    """
    A classified block on the day timeline.

    ``tag`` is an opaque identifier owned by the caller (the timeline service
    uses the segment's position). The interval algorithms never look at it.
    """
    block: TimeBlock
    type: IntervalType
    tag: Optional[Hashable] = None

    @property
    def start(self) -> DateTime:
        return self.block.start

    @property
    def end(self) -> DateTime:
        return self.block.end

    @property
    def is_free(self) -> bool:
        return self.type is IntervalType.FREE

    def duration(self) -> float:
        return self.block.duration()

    def duration_minutes(self) -> float:
        return self.block.duration_minutes()
