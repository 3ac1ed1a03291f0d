"""Attendance (fichaje) completeness and worked-time aggregation.

Two pairing strategies coexist on purpose:

* the per-day check pairs the i-th sorted entrada with the i-th sorted
  salida, which is what the calendar cell shows;
* the monthly fallback walks both sorted lists and only pairs an entrada
  with a later salida, skipping orphaned exits.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cuadrantes import fields
from cuadrantes.dates import normalize_date
from cuadrantes.models import DayAttendance, DayCell, MonthlyTotal, TotalSource


ENTRY = "entrada"
EXIT = "salida"
MINUTES_PER_DAY = 24 * 60


def event_day_key(event: Mapping[str, Any]) -> str | None:
    return normalize_date(fields.first_value(event, fields.EVENT_DATE))


def event_kind(event: Mapping[str, Any]) -> str:
    return fields.first_text(event, fields.EVENT_TYPE).lower()


def clock_seconds(value: object) -> int | None:
    """Seconds since midnight for ``H:MM``/``HH:MM[:SS[.fff]]`` values; fractions are dropped."""
    if value is None:
        return None
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours, minutes = int(parts[0]), int(parts[1])
        seconds = int(float(parts[2])) if len(parts) > 2 else 0
    except (ValueError, OverflowError):
        return None
    if not (0 <= hours < 24 and 0 <= minutes < 60 and 0 <= seconds < 60):
        return None
    return hours * 3600 + minutes * 60 + seconds


def duration_seconds(value: object) -> int:
    if not isinstance(value, str):
        return 0
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return 0

    numbers = []
    for part in parts:
        try:
            numbers.append(int(part))
        except ValueError:
            numbers.append(0)
    hours, minutes = numbers[0], numbers[1]
    seconds = numbers[2] if len(numbers) == 3 else 0
    return hours * 3600 + minutes * 60 + seconds


def group_events_by_day(events: Iterable[object]) -> dict[str, list[Mapping[str, Any]]]:
    events_by_day: dict[str, list[Mapping[str, Any]]] = {}
    for event in events:
        if not isinstance(event, Mapping):
            continue
        day_key = event_day_key(event)
        if day_key is None:
            continue
        events_by_day.setdefault(day_key, []).append(event)
    return events_by_day


def _sorted_times(events: Iterable[Mapping[str, Any]], kind: str) -> list[int]:
    times = []
    for event in events:
        if event_kind(event) != kind:
            continue
        seconds = clock_seconds(fields.first_value(event, fields.EVENT_TIME))
        if seconds is not None:
            times.append(seconds)
    return sorted(times)


def _gap_minutes(entry_seconds: int, exit_seconds: int) -> int:
    return (exit_seconds // 60 - entry_seconds // 60) % MINUTES_PER_DAY


def evaluate_day(events: Iterable[Mapping[str, Any]], is_past_day: bool) -> DayAttendance:
    day_events = list(events)
    entry_count = sum(1 for event in day_events if event_kind(event) == ENTRY)
    exit_count = sum(1 for event in day_events if event_kind(event) == EXIT)
    if (entry_count == 0 or exit_count == 0) and is_past_day:
        return DayAttendance(incomplete_clock_in=True)

    entries = _sorted_times(day_events, ENTRY)
    exits = _sorted_times(day_events, EXIT)
    worked = sum(_gap_minutes(entry, exit_) for entry, exit_ in zip(entries, exits))
    return DayAttendance(worked_minutes=worked or None)


def greedy_pair_minutes(events: Iterable[Mapping[str, Any]]) -> int:
    day_events = list(events)
    entries = _sorted_times(day_events, ENTRY)
    exits = _sorted_times(day_events, EXIT)

    total = 0
    entry_index = exit_index = 0
    while entry_index < len(entries) and exit_index < len(exits):
        if exits[exit_index] <= entries[entry_index]:
            exit_index += 1
            continue
        total += _gap_minutes(entries[entry_index], exits[exit_index])
        entry_index += 1
        exit_index += 1
    return total


def monthly_total(events: Iterable[object], year: int, month: int) -> MonthlyTotal:
    """Worked time for the month.

    The backend-computed ``DURACION`` of salida events wins whenever it adds
    up to something; otherwise each day is paired greedily.
    """
    prefix = f"{year:04d}-{month:02d}-"
    events_by_day = {
        day_key: day_events
        for day_key, day_events in group_events_by_day(events).items()
        if day_key.startswith(prefix)
    }

    reported_seconds = sum(
        duration_seconds(fields.first_value(event, fields.EVENT_DURATION))
        for day_events in events_by_day.values()
        for event in day_events
        if event_kind(event) == EXIT
    )
    if reported_seconds > 0:
        return MonthlyTotal(reported_seconds, TotalSource.DURATION)

    paired_minutes = sum(greedy_pair_minutes(day_events) for day_events in events_by_day.values())
    return MonthlyTotal(paired_minutes * 60, TotalSource.PAIRS)


def incomplete_days_message(cells: Iterable[DayCell]) -> str | None:
    count = sum(1 for cell in cells if cell.is_work_shift and cell.incomplete_clock_in)
    if count == 0:
        return None
    plural = "" if count == 1 else "s"
    return (
        f"Tienes {count} día{plural} laborable{plural} con turnos incompletos "
        "(falta Entrada o Salida) en el mes seleccionado!"
    )
