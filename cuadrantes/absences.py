"""Absence (ausencia) lookup for a calendar day."""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from cuadrantes import fields
from cuadrantes.dates import normalize_date, parse_flexible_date
from cuadrantes.models import DayCategory


RANGE_SEPARATOR = " - "
DEFAULT_ABSENCE_LABEL = "AUSENCIA"

VACATION_MARKERS = ("vacacion",)
PERSONAL_LEAVE_MARKERS = ("asunto", "propio", "personal")


def _combined_bounds(record: Mapping[str, Any]) -> tuple[str | None, str | None]:
    combined = fields.first_value(record, fields.ABSENCE_DATE)
    if not isinstance(combined, str) or RANGE_SEPARATOR not in combined:
        return None, None
    start_text, end_text = combined.split(RANGE_SEPARATOR, 1)
    return start_text, end_text


def absence_span_days(record: Mapping[str, Any]) -> float:
    """Length of the explicit start/end interval; single-date records sort last."""
    start = parse_flexible_date(fields.first_value(record, fields.ABSENCE_START))
    end = parse_flexible_date(fields.first_value(record, fields.ABSENCE_END))
    if start is None or end is None:
        return math.inf
    return abs((end - start).days)


def absence_range(record: Mapping[str, Any]) -> tuple[date, date] | None:
    start_raw = fields.first_value(record, fields.ABSENCE_START)
    end_raw = fields.first_value(record, fields.ABSENCE_END)
    if start_raw is None or end_raw is None:
        combined_start, combined_end = _combined_bounds(record)
        start_raw = start_raw if start_raw is not None else combined_start
        end_raw = end_raw if end_raw is not None else combined_end

    start = parse_flexible_date(start_raw)
    end = parse_flexible_date(end_raw)
    if start is None or end is None:
        return None
    if start > end:
        start, end = end, start
    return start, end


def matches_exact_day(record: Mapping[str, Any], day_key: str) -> bool:
    single = fields.first_value(record, fields.ABSENCE_DATE)
    if single is None:
        return False
    if isinstance(single, str) and single.strip().startswith(day_key):
        return True
    return normalize_date(single) == day_key


def sort_by_specificity(absences: Iterable[object]) -> list[Mapping[str, Any]]:
    records = [record for record in absences if isinstance(record, Mapping)]
    return sorted(records, key=absence_span_days)


def resolve_absence(day: date, absences: Iterable[object]) -> Mapping[str, Any] | None:
    """Return the most specific absence applying to ``day``.

    Records are tried shortest interval first, so a one-day personal matter
    nested inside a longer vacation wins for that day. A record whose
    bounds cannot be parsed is skipped.
    """
    day_key = day.isoformat()
    for record in sort_by_specificity(absences):
        if matches_exact_day(record, day_key):
            return record

        bounds = absence_range(record)
        if bounds is None:
            continue
        start, end = bounds
        if start <= day <= end:
            return record
    return None


def absence_type_label(record: Mapping[str, Any]) -> str:
    return fields.first_text(record, fields.ABSENCE_TYPE) or DEFAULT_ABSENCE_LABEL


def absence_reason(record: Mapping[str, Any]) -> str:
    return fields.first_text(record, fields.ABSENCE_REASON)


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def absence_category(record: Mapping[str, Any]) -> DayCategory:
    label = _fold_accents(fields.first_text(record, fields.ABSENCE_TYPE).lower())
    if any(marker in label for marker in VACATION_MARKERS):
        return DayCategory.VACATION
    if any(marker in label for marker in PERSONAL_LEAVE_MARKERS):
        return DayCategory.PERSONAL_LEAVE
    return DayCategory.ABSENCE
