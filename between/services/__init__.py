"""
Service layer helpers that orchestrate calendar sources and domain logic.
"""

from .day_timeline import (
    BusyIntervalSourceProtocol,
    DayTimeline,
    DayTimelineService,
    DayWindow,
    gap_size_label,
)

__all__ = [
    "BusyIntervalSourceProtocol",
    "DayTimeline",
    "DayTimelineService",
    "DayWindow",
    "gap_size_label",
]
