"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone

from finboard.domain.shared.exceptions import InvalidDateError


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_transaction_date(value: str | date | datetime) -> datetime:
    """Parse a transaction date into a timezone-aware UTC datetime.

    Accepts ISO datetimes (with or without offset, ``Z`` suffix included)
    and plain ``YYYY-MM-DD`` dates. A plain date is midnight UTC, so
    ``"2024-12-01"`` and ``"2024-12-01T00:00:00Z"`` compare equal.

    Raises
    ------
    InvalidDateError
        If the value is not a recognizable date
    """
    if isinstance(value, datetime):
        return ensure_tz_aware(value).astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateError(value) from e

    return ensure_tz_aware(parsed).astimezone(timezone.utc)
