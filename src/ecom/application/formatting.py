"""Display formatting for listing pages."""

from __future__ import annotations

from datetime import datetime

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ordinal(day: int) -> str:
    """``1 -> "1st"``, ``12 -> "12th"``, ``23 -> "23rd"``."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(value: datetime) -> str:
    """Long date with an ordinal day, e.g. ``July 4th, 2023``. English whatever the locale."""
    return f"{MONTHS[value.month - 1]} {ordinal(value.day)}, {value.year}"
