"""Enumeration of the weekly schedule slots."""
from __future__ import annotations

from enum import Enum


class DayOfWeek(str, Enum):
    """Identify one of the seven calendar weekdays."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value: object) -> DayOfWeek:
        """Return the weekday matching ``value`` ignoring case and whitespace."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().casefold() if value is not None else ""
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown day of week: {value!r}.") from None
