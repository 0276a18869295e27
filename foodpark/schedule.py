# foodpark/schedule.py
"""
Which trading day to report on, and how the page writes it.

The page heads each day with an upper-cased date such as "THU 04 JANUARY",
and order links embed the ISO date ("2024-01-04").
"""

from __future__ import annotations

from datetime import date, timedelta

THURSDAY = 3  # date.weekday()

ISO_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_HEADER_FORMAT = "%a %d %B"


def next_weekday(today: date, weekday: int = THURSDAY) -> date:
    """`today` if it already falls on `weekday`, otherwise the next one."""
    days_ahead = (weekday - today.weekday()) % 7
    return today + timedelta(days=days_ahead)


def parse_target_date(value: str) -> date:
    raw = (value or "").strip()
    try:
        return date.fromisoformat(raw)
    except ValueError as err:
        raise ValueError(f"Target date must be YYYY-MM-DD; got {value!r}") from err


def format_date_header(day: date, fmt: str = DEFAULT_HEADER_FORMAT) -> str:
    return day.strftime(fmt).upper()


def date_token(day: date) -> str:
    return day.strftime(ISO_DATE_FORMAT)


__all__ = [
    "THURSDAY",
    "ISO_DATE_FORMAT",
    "DEFAULT_HEADER_FORMAT",
    "next_weekday",
    "parse_target_date",
    "format_date_header",
    "date_token",
]
