"""
Calendar sources that supply busy intervals for a day range.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pendulum
from pendulum import DateTime

from ..domain.exceptions import CalendarSourceError
from ..domain.models import TimeBlock

logger = logging.getLogger(__name__)


def clamp_to_range(block: TimeBlock, day_range: TimeBlock) -> Optional[TimeBlock]:
    """
    Clip a block to fit within the range.
    Returns None if nothing of positive length is left.
    """
    clamped_start = max(block.start, day_range.start)
    clamped_end = min(block.end, day_range.end)

    if clamped_start >= clamped_end:
        return None

    return TimeBlock(start=clamped_start, end=clamped_end)


class JsonCalendarSource:
    """
    Reads calendar events from a JSON file and reduces them to busy blocks.

    Expected file format::

        [
            {"start": "2024-11-25T09:00:00", "end": "2024-11-25T10:00:00"},
            {"start": "2024-11-25", "end": "2024-11-26", "allDay": true}
        ]

    Only start and end survive; any other event field is dropped on load.
    """

    def __init__(
        self,
        events_file: Path,
        timezone: str = "Europe/Berlin",
        include_all_day: bool = False
    ):
        """
        Initialize the source.

        Args:
            events_file: Path to the JSON events file
            timezone: IANA timezone for event times without an offset
            include_all_day: Treat all-day events as busy time
        """
        self.events_file = events_file
        self.timezone = timezone
        self.include_all_day = include_all_day

    def _load_events(self) -> List[Dict[str, Any]]:
        """Load raw events from the JSON file."""
        if not self.events_file.exists():
            raise CalendarSourceError(f"Events file not found: {self.events_file}")

        try:
            with open(self.events_file, "r", encoding="utf-8") as f:
                events = json.load(f)
        except json.JSONDecodeError as exc:
            raise CalendarSourceError(f"Invalid JSON in {self.events_file}: {exc}") from exc

        if not isinstance(events, list):
            raise CalendarSourceError("Events file must contain a list of events.")

        return events

    def _parse_datetime(self, value: str) -> DateTime:
        dt = pendulum.parse(value, tz=self.timezone)

        if isinstance(dt, DateTime):
            return dt.in_timezone(self.timezone)

        raise ValueError(f"Could not parse datetime: {value}")

    def get_busy_intervals(self, day_range: TimeBlock) -> List[TimeBlock]:
        """
        Return busy blocks overlapping the range, clamped to it.

        Args:
            day_range: Window to fetch busy time for

        Returns:
            Busy blocks in file order (not merged)
        """
        busy_blocks: List[TimeBlock] = []

        for event in self._load_events():
            if not isinstance(event, dict):
                logger.warning("Skipping calendar entry that is not an event object: %r", event)
                continue

            if event.get("allDay", False) and not self.include_all_day:
                continue

            try:
                event_start = self._parse_datetime(event["start"])
                event_end = self._parse_datetime(event["end"])
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping calendar event with invalid times: %s", exc)
                continue

            clamped = clamp_to_range(TimeBlock(start=event_start, end=event_end), day_range)
            if clamped is not None:
                busy_blocks.append(clamped)

        logger.debug("Loaded %d busy blocks from %s", len(busy_blocks), self.events_file)
        return busy_blocks


class StaticCalendarSource:
    """
    In-memory source holding a fixed list of busy blocks.

    Useful for tests and for embedding the timeline in other programs.
    """

    def __init__(self, blocks: Sequence[TimeBlock] = ()):
        self.blocks = list(blocks)

    def get_busy_intervals(self, day_range: TimeBlock) -> List[TimeBlock]:
        """Return stored blocks overlapping the range, clamped to it."""
        clamped = (clamp_to_range(block, day_range) for block in self.blocks)
        return [block for block in clamped if block is not None]
