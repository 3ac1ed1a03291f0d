"""Medical leave (baja médica) ranges and coverage."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from cuadrantes import fields
from cuadrantes.dates import normalize_date, to_comparable
from cuadrantes.models import LeaveEndSource, LeaveRange


logger = logging.getLogger(__name__)

RANGE_SEPARATOR = " - "
DEFAULT_LEAVE_LABEL = "Baja médica"


def _infer_end(record: Mapping[str, Any], today: date) -> tuple[str | None, LeaveEndSource | None]:
    actual = normalize_date(fields.first_value(record, fields.LEAVE_ACTUAL_END))
    if actual is not None:
        return actual, LeaveEndSource.ACTUAL

    predicted = normalize_date(fields.first_value(record, fields.LEAVE_PREDICTED_END))
    if predicted is not None:
        # A prediction that already passed does not close a leave nobody has discharged.
        if to_comparable(predicted) < today:
            return today.isoformat(), LeaveEndSource.OPEN
        return predicted, LeaveEndSource.PREDICTED

    return None, None


def leave_range(record: object, today: date) -> LeaveRange | None:
    """Build the ``[start, end]`` range of one medical leave record.

    The end is the actual discharge date when known, otherwise the predicted
    discharge date if it is not in the past, otherwise ``today``. Records
    without a usable start date produce no range.
    """
    if not isinstance(record, Mapping):
        return None

    start_text = normalize_date(fields.first_value(record, fields.LEAVE_START))
    end_text, end_source = _infer_end(record, today)

    combined = fields.first_value(record, fields.LEAVE_RANGE)
    if (start_text is None or end_text is None) and isinstance(combined, str) and RANGE_SEPARATOR in combined:
        combined_start, combined_end = combined.split(RANGE_SEPARATOR, 1)
        if start_text is None:
            start_text = normalize_date(combined_start)
        if end_text is None:
            end_text = normalize_date(combined_end)
            end_source = LeaveEndSource.ACTUAL if end_text is not None else None

    if start_text is None:
        logger.debug("Discarding medical leave without start date: %r", record)
        return None

    if end_text is None:
        end_text, end_source = today.isoformat(), LeaveEndSource.OPEN

    start = to_comparable(start_text)
    end = to_comparable(end_text)
    if start is None or end is None:
        return None
    if start > end:
        start, end = end, start

    situation = fields.first_text(record, fields.LEAVE_SITUATION)
    reason = situation or fields.first_text(record, fields.LEAVE_MOTIVE) or DEFAULT_LEAVE_LABEL
    return LeaveRange(
        start=start,
        end=end,
        start_text=start_text,
        end_text=end_text,
        situation=situation,
        reason=reason,
        end_source=end_source or LeaveEndSource.OPEN,
        raw=record,
    )


def build_leave_ranges(records: Iterable[object], today: date) -> list[LeaveRange]:
    ranges: list[LeaveRange] = []
    for record in records:
        resolved = leave_range(record, today)
        if resolved is not None:
            ranges.append(resolved)
    return ranges


def covering_leave(day: date, ranges: Iterable[LeaveRange]) -> LeaveRange | None:
    for candidate in ranges:
        if candidate.contains(day):
            return candidate
    return None


def current_leave(ranges: Iterable[LeaveRange], today: date) -> LeaveRange | None:
    return covering_leave(today, ranges)
