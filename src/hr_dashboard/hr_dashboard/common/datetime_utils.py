from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT, MONTH_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_month_token(value: str) -> str:
    """Validate a YYYY-MM month token and return it unchanged."""
    v = (value or "").strip()
    try:
        parsed = datetime.strptime(v, MONTH_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid month {value!r} (expected YYYY-MM)")
    # strptime accepts "2025-1"; the token is also used as a string prefix.
    if parsed.strftime(MONTH_FORMAT) != v:
        raise ValidationError(f"Invalid month {value!r} (expected YYYY-MM)")
    return v


def in_month(day: str | None, month: str) -> bool:
    """True when a YYYY-MM-DD string falls within the YYYY-MM token."""
    return bool(day) and day.startswith(month)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def today_iso() -> str:
    return today_local().strftime(DATE_FORMAT)


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")
