"""
Application service that builds the free/busy timeline for a day.

The service coordinates fetching busy intervals via a calendar source and
delegates merging, gap computation and segment assembly to the domain layer.
Every call recomputes the whole pipeline; nothing is cached between calls.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

import pendulum
from pendulum import Date, DateTime

from ..config import AppConfig
from ..domain.free_intervals import FreeIntervalComputer
from ..domain.interval_merger import IntervalMerger
from ..domain.models import Segment, TimeBlock
from ..domain.segment_builder import SegmentBuilder

logger = logging.getLogger(__name__)

LONG_GAP_MINUTES = 180
MEDIUM_GAP_MINUTES = 60


class BusyIntervalSourceProtocol(Protocol):
    """Protocol describing the calendar source behaviour needed by the service."""

    def get_busy_intervals(self, day_range: TimeBlock) -> List[TimeBlock]:
        """
        Return busy blocks inside the range, already clamped to it.

        Zero-length blocks must not be returned; they would show up as empty
        busy segments.
        """


@dataclass(frozen=True)
class DayWindow:
    """
    Hours of the day that make up the timeline window.

    ``end_hour`` 24 is the following midnight.
    """
    start_hour: int = 0
    end_hour: int = 24
    timezone: str = "Europe/Berlin"

    def range_for(self, date: Date) -> TimeBlock:
        """Resolve the window into concrete instants for a calendar date."""
        day_start = pendulum.datetime(date.year, date.month, date.day, tz=self.timezone)
        return TimeBlock(
            start=self._wall_clock(day_start, self.start_hour),
            end=self._wall_clock(day_start, self.end_hour)
        )

    @staticmethod
    def _wall_clock(day_start: DateTime, hour: int) -> DateTime:
        # Wall-clock hours, so DST days still end at the next local midnight
        if hour == 24:
            return day_start.add(days=1)
        return day_start.set(hour=hour)


@dataclass(frozen=True)
class DayTimeline:
    """The computed timeline of one day."""
    date: Date
    day_range: TimeBlock
    segments: List[Segment]

    def free_segments(self) -> List[Segment]:
        return [segment for segment in self.segments if segment.is_free]

    def busy_segments(self) -> List[Segment]:
        return [segment for segment in self.segments if not segment.is_free]

    def total_free_minutes(self) -> float:
        return sum(segment.duration_minutes() for segment in self.free_segments())

    def total_busy_minutes(self) -> float:
        return sum(segment.duration_minutes() for segment in self.busy_segments())


def gap_size_label(segment: Segment) -> str:
    """Describe a free gap by its length."""
    minutes = segment.duration_minutes()
    if minutes >= LONG_GAP_MINUTES:
        return "Lange Lücke"
    if minutes >= MEDIUM_GAP_MINUTES:
        return "Mittlere Lücke"
    return "Kurze Lücke"


class DayTimelineService:
    """
    Orchestrates busy-interval retrieval and the interval pipeline.

    Dependency inversion toward a protocol makes it easy to plug in the JSON
    file source or an in-memory source in tests.
    """

    def __init__(
        self,
        source: BusyIntervalSourceProtocol,
        window: Optional[DayWindow] = None,
        merger: Optional[IntervalMerger] = None,
        free_computer: Optional[FreeIntervalComputer] = None,
        segment_builder: Optional[SegmentBuilder] = None,
    ) -> None:
        self._source = source
        self._window = window or DayWindow()
        self._merger = merger or IntervalMerger()
        self._free_computer = free_computer or FreeIntervalComputer()
        self._segment_builder = segment_builder or SegmentBuilder()

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        source: BusyIntervalSourceProtocol,
    ) -> "DayTimelineService":
        """Build a service with window and thresholds taken from the config."""
        timeline = config.timeline
        return cls(
            source=source,
            window=DayWindow(
                start_hour=timeline.day_start_hour,
                end_hour=timeline.day_end_hour,
                timezone=config.timezone,
            ),
            merger=IntervalMerger(
                adjacency_threshold_seconds=timeline.adjacency_threshold_seconds
            ),
            free_computer=FreeIntervalComputer(
                minimum_gap_seconds=timeline.minimum_gap_seconds
            ),
        )

    @property
    def timezone(self) -> str:
        return self._window.timezone

    def load_day(self, date: Date) -> DayTimeline:
        """
        Fetch busy time for a date and compute its full timeline.
        """
        day_range = self._window.range_for(date)
        busy = self._source.get_busy_intervals(day_range)

        segments = self.build_segments(busy, day_range)
        logger.info(
            "Built timeline for %s with %d segments",
            date.isoformat(),
            len(segments)
        )

        return DayTimeline(date=date, day_range=day_range, segments=segments)

    def build_segments(self, busy: List[TimeBlock], day_range: TimeBlock) -> List[Segment]:
        """Run merge, complement and assembly, tagging segments by position."""
        merged = self._merger.merge(busy)
        free = self._free_computer.compute_free(merged, day_range)
        segments = self._segment_builder.build(merged, free)

        return [
            dataclasses.replace(segment, tag=index)
            for index, segment in enumerate(segments)
        ]

    def today(self) -> Date:
        return pendulum.today(self.timezone).date()

    @staticmethod
    def next_day(date: Date) -> Date:
        return date.add(days=1)

    @staticmethod
    def previous_day(date: Date) -> Date:
        return date.subtract(days=1)
