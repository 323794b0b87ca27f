"""
Adapters layer - Calendar data sources.
"""

from .json_calendar_source import JsonCalendarSource, StaticCalendarSource, clamp_to_range

__all__ = ["JsonCalendarSource", "StaticCalendarSource", "clamp_to_range"]
