"""Date normalization for heterogeneous record values.

Raw records carry dates as ``datetime`` objects, spreadsheet serial numbers
or strings in several layouts. Everything is reduced to a canonical
``YYYY-MM-DD`` string; ``None`` means "no date information" and is never an
error for the caller.
"""

from __future__ import annotations

import logging
import re
from calendar import monthrange
from datetime import date, datetime, timedelta, timezone

from dateutil import parser as date_parser


logger = logging.getLogger(__name__)

EXCEL_EPOCH_OFFSET_DAYS = 25569
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
SLASHED_ISO_DATE_RE = re.compile(r"^(\d{4})/(\d{1,2})/(\d{1,2})")
# DD/MM/YYYY and DD-MM-YYYY, also the unpadded D/M/YYYY form ("8/2/2026").
DAY_FIRST_DATE_RE = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{4})")
MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{1,2})")

# Two defaults differing in year, month and day, so partial strings ("12", "2026") are detectable.
PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def format_ymd(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def _valid_ymd(year: int | str, month: int | str, day: int | str) -> str | None:
    try:
        return date(int(year), int(month), int(day)).isoformat()
    except ValueError:
        return None


def excel_serial_to_datetime(serial: float) -> datetime | None:
    """Convert a spreadsheet serial (days since 1899-12-30) to a UTC datetime."""
    try:
        milliseconds = round((serial - EXCEL_EPOCH_OFFSET_DAYS) * 86400 * 1000)
        return UNIX_EPOCH + timedelta(milliseconds=milliseconds)
    except (OverflowError, ValueError):
        return None


def _normalize_text(text: str) -> str | None:
    match = ISO_DATE_RE.match(text)
    if match:
        return _valid_ymd(*match.groups())

    match = SLASHED_ISO_DATE_RE.match(text)
    if match:
        return _valid_ymd(*match.groups())

    match = DAY_FIRST_DATE_RE.match(text)
    if match:
        day, month, year = match.groups()
        return _valid_ymd(year, month, day)

    if "T" in text:
        head = text.split("T", 1)[0].strip()
        return _normalize_text(head) if head else None

    try:
        parsed = date_parser.parse(text, default=PARSE_DEFAULTS[0])
        reparsed = date_parser.parse(text, default=PARSE_DEFAULTS[1])
    except (ValueError, OverflowError):
        logger.debug("Unparseable date value %r", text)
        return None
    if parsed.date() != reparsed.date():
        # Year, month or day came from the defaults, not from the text.
        logger.debug("Partial date value %r", text)
        return None
    return parsed.date().isoformat()


def normalize_date(value: object) -> str | None:
    """Return ``value`` as a ``YYYY-MM-DD`` string, or ``None`` if it is not a date."""
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        converted = excel_serial_to_datetime(value)
        return converted.date().isoformat() if converted is not None else None

    text = str(value).strip()
    if not text:
        return None
    return _normalize_text(text)


def to_comparable(canonical: str | date | None) -> date | None:
    if canonical is None:
        return None
    if isinstance(canonical, date):
        return canonical
    try:
        return date.fromisoformat(canonical)
    except ValueError:
        return None


def parse_flexible_date(value: object) -> date | None:
    return to_comparable(normalize_date(value))


def normalize_month(value: object) -> str | None:
    """Return a roster month value (serial, ``YYYY-M``, ``YYYY-MM-DD`` ...) as ``YYYY-MM``."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, date)):
        normalized = normalize_date(value)
        return normalized[:7] if normalized else None

    text = str(value).strip()
    match = MONTH_KEY_RE.match(text)
    if match:
        year, month = match.groups()
        return month_key(int(year), int(month))

    normalized = normalize_date(text)
    return normalized[:7] if normalized else None


def month_key(year: int, month: int) -> str | None:
    if not 1 <= month <= 12:
        return None
    return f"{year:04d}-{month:02d}"


def parse_month_key(value: str | None) -> tuple[int, int] | None:
    if not value:
        return None
    match = MONTH_KEY_RE.match(value.strip())
    if match is None:
        return None
    year, month = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        return None
    return year, month
