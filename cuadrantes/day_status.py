"""Per-day status of an employee's month.

Priority for every day: medical leave, then approved absence, then the
base shift (roster, assigned schedule, default rule). Attendance checks
only run on work-shift days.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import date
from typing import Any

from cuadrantes.absences import (
    absence_category,
    absence_reason,
    absence_type_label,
    resolve_absence,
)
from cuadrantes.attendance import evaluate_day, group_events_by_day, incomplete_days_message, monthly_total
from cuadrantes.dates import days_in_month, month_key, parse_month_key
from cuadrantes.medical_leave import build_leave_ranges, covering_leave, current_leave
from cuadrantes.models import DayCategory, DayCell, LeaveRange, MonthCalendar
from cuadrantes.shifts import DEFAULT_SHIFT_SCHEDULE, resolve_base_shift


def resolve_day(
    day: date,
    *,
    leave_ranges: Sequence[LeaveRange],
    absences: Sequence[Mapping[str, Any]],
    roster_entry: Mapping[str, Any] | None,
    assigned_schedule: Mapping[str, Any] | None,
    default_schedule: str = DEFAULT_SHIFT_SCHEDULE,
) -> DayCell:
    day_key = day.isoformat()

    leave = covering_leave(day, leave_ranges)
    if leave is not None:
        return DayCell(day=day.day, date=day_key, category=DayCategory.MEDICAL_LEAVE, reason_text=leave.reason)

    absence = resolve_absence(day, absences)
    if absence is not None:
        return DayCell(
            day=day.day,
            date=day_key,
            category=absence_category(absence),
            reason_text=absence_reason(absence),
            absence_type=absence_type_label(absence),
        )

    base = resolve_base_shift(day, roster_entry, assigned_schedule, default_schedule)
    return DayCell(
        day=day.day,
        date=day_key,
        category=base.category,
        shift_code=base.code,
        schedule_text=base.schedule_text,
    )


def build_month_calendar(
    month: str,
    *,
    today: date,
    roster_entry: Mapping[str, Any] | None = None,
    assigned_schedule: Mapping[str, Any] | None = None,
    absences: Iterable[object] = (),
    medical_leaves: Iterable[object] = (),
    events: Iterable[object] = (),
    default_schedule: str = DEFAULT_SHIFT_SCHEDULE,
) -> MonthCalendar:
    """Resolve every day of ``month`` (``YYYY-MM``) from one snapshot of records.

    Inputs are not modified and nothing is kept between calls. An invalid
    month key produces an empty calendar.
    """
    parsed = parse_month_key(month)
    if parsed is None:
        return MonthCalendar(month=month)
    year, month_number = parsed

    leave_ranges = build_leave_ranges(medical_leaves, today)
    absence_records = [record for record in absences if isinstance(record, Mapping)]
    event_list = list(events)
    events_by_day = group_events_by_day(event_list)

    cells: list[DayCell] = []
    for day_number in range(1, days_in_month(year, month_number) + 1):
        current_day = date(year, month_number, day_number)
        cell = resolve_day(
            current_day,
            leave_ranges=leave_ranges,
            absences=absence_records,
            roster_entry=roster_entry,
            assigned_schedule=assigned_schedule,
            default_schedule=default_schedule,
        )
        attendance_fields: dict[str, object] = {"is_today": current_day == today}
        if cell.is_work_shift:
            attendance = evaluate_day(events_by_day.get(cell.date, []), is_past_day=current_day < today)
            attendance_fields["incomplete_clock_in"] = attendance.incomplete_clock_in
            attendance_fields["worked_minutes"] = attendance.worked_minutes
        cells.append(replace(cell, **attendance_fields))

    total = monthly_total(event_list, year, month_number)
    return MonthCalendar(
        month=month_key(year, month_number),
        cells=cells,
        total=total,
        total_text=total.display(year, month_number),
        alert=incomplete_days_message(cells),
        current_leave=current_leave(leave_ranges, today),
        first_weekday=date(year, month_number, 1).weekday(),
    )
