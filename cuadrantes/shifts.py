"""Base shift resolution: roster, then assigned weekly schedule, then default."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from cuadrantes import fields
from cuadrantes.models import BaseShift, ShiftCode


DEFAULT_SHIFT_SCHEDULE = "08:00-17:00"
FREE_CODES = {"", "LIBRE", "LIB"}
MAX_SCHEDULE_INTERVALS = 3

# Schedule days are keyed Sunday first: D(omingo), L(unes) ... S(ábado).
WEEKDAY_KEYS = ("D", "L", "M", "X", "J", "V", "S")

SHIFT_PREFIX_RE = re.compile(r"^(T[123])\s*(.*)$", re.DOTALL)
TIME_PREFIX_RE = re.compile(r"^\d{1,2}:\d{2}")


def schedule_day_key(day: date) -> str:
    return WEEKDAY_KEYS[(day.weekday() + 1) % 7]


def roster_day_value(roster_entry: Mapping[str, Any], day_number: int) -> str:
    value = fields.first_value(roster_entry, fields.roster_day_keys(day_number))
    return "" if value is None else str(value).strip()


def parse_roster_code(raw_value: str) -> BaseShift:
    value = raw_value.strip()
    if value.upper() in FREE_CODES:
        return BaseShift.free()

    match = SHIFT_PREFIX_RE.match(value)
    if match:
        code, schedule_text = match.groups()
        return BaseShift.work(ShiftCode(code), schedule_text.strip())

    if TIME_PREFIX_RE.match(value):
        return BaseShift.work(ShiftCode.T1, value)

    return BaseShift.free()


def schedule_intervals(assigned_schedule: Mapping[str, Any], day: date) -> list[str]:
    days = fields.first_value(assigned_schedule, fields.SCHEDULE_DAYS)
    if not isinstance(days, Mapping):
        return []
    day_schedule = days.get(schedule_day_key(day))
    if not isinstance(day_schedule, Mapping):
        return []

    intervals = []
    for index in range(1, MAX_SCHEDULE_INTERVALS + 1):
        entry = fields.first_text(day_schedule, (f"in{index}",))
        exit_ = fields.first_text(day_schedule, (f"out{index}",))
        if entry and exit_:
            intervals.append(f"{entry}-{exit_}")
    return intervals


def resolve_base_shift(
    day: date,
    roster_entry: Mapping[str, Any] | None,
    assigned_schedule: Mapping[str, Any] | None,
    default_schedule: str = DEFAULT_SHIFT_SCHEDULE,
) -> BaseShift:
    """Shift for ``day`` when no absence or medical leave overrides it.

    A roster for the month is authoritative, days it leaves empty are free.
    Without a roster the assigned weekly schedule applies, and without either
    weekdays default to T1 with ``default_schedule``.
    """
    if roster_entry is not None:
        return parse_roster_code(roster_day_value(roster_entry, day.day))

    if assigned_schedule is not None:
        intervals = schedule_intervals(assigned_schedule, day)
        if intervals:
            return BaseShift.work(ShiftCode.T1, ", ".join(intervals))
        return BaseShift.free()

    if day.weekday() < 5:
        return BaseShift.work(ShiftCode.T1, default_schedule)
    return BaseShift.free()
