"""
Date helpers for birth dates and record timestamps.

Birth dates travel as ``YYYY-MM-DD`` strings and are handled as plain
calendar dates, never through a locale‑dependent parser, so a date
cannot shift by one day depending on where the server runs.  "Today"
is the current date in ``settings.timezone``.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.config import settings

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Oldest accepted birth date, in years before today.
MAX_AGE_YEARS = 150


@lru_cache(maxsize=None)
def _zone(name: str) -> timezone | ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", name)
        return timezone.utc


def local_today() -> date:
    """Return today's date in the configured timezone."""
    return datetime.now(_zone(settings.timezone)).date()


def _parse_datetime(value: str) -> Optional[datetime]:
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def _parse_calendar_date(value) -> Optional[date]:
    """Calendar date of an ISO date or date‑time string, else ``None``."""
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    if ISO_DATE_RE.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None
    parsed = _parse_datetime(value)
    return parsed.date() if parsed else None


def _parse_instant(value) -> Optional[datetime]:
    """Timezone‑aware instant for an ISO string, else ``None``.

    A bare date means midnight UTC; a date‑time without offset is read
    in the configured timezone.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip()
    if ISO_DATE_RE.fullmatch(value):
        try:
            day = date.fromisoformat(value)
        except ValueError:
            return None
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    parsed = _parse_datetime(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=_zone(settings.timezone))
    return parsed


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non‑leap target year
        return day.replace(year=day.year - years, day=28)


def format_date_to_french(value) -> str:
    """Format ``YYYY-MM-DD`` as ``DD/MM/YYYY``.

    Returns an empty string for empty or unparseable input.
    """
    day = _parse_calendar_date(value)
    if day is None:
        return ""
    return f"{day.day:02d}/{day.month:02d}/{day.year:04d}"


def calculate_age(birth_date, today: Optional[date] = None) -> int:
    """Return the age in whole years of someone born on ``birth_date``.

    ``today`` defaults to the current local date.  Returns ``0`` for
    empty or invalid input.
    """
    born = _parse_calendar_date(birth_date)
    if born is None:
        return 0
    current = today or local_today()
    age = current.year - born.year
    if (current.month, current.day) < (born.month, born.day):
        age -= 1
    return age


def is_valid_birth_date(value, today: Optional[date] = None) -> bool:
    """Check a birth date string.

    The value must be exactly ``YYYY-MM-DD``, name a real calendar
    date, not lie in the future and not be more than
    ``MAX_AGE_YEARS`` years old.
    """
    if not value or not isinstance(value, str) or not ISO_DATE_RE.fullmatch(value):
        return False
    try:
        born = date.fromisoformat(value)
    except ValueError:
        return False
    current = today or local_today()
    if born > current:
        return False
    return born >= _years_before(current, MAX_AGE_YEARS)


def are_dates_equal(first, second) -> bool:
    """True if both values parse to the same instant."""
    first_instant = _parse_instant(first)
    second_instant = _parse_instant(second)
    if first_instant is None or second_instant is None:
        return False
    return first_instant == second_instant


def get_current_iso_date() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
