"""Narrow raw record arrays down to the ones describing one employee."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cuadrantes import fields
from cuadrantes.dates import normalize_month
from cuadrantes.models import Employee


def roster_month(roster: Mapping[str, Any]) -> str | None:
    return normalize_month(fields.first_value(roster, fields.ROSTER_MONTH))


def _roster_belongs_to(roster: Mapping[str, Any], employee: Employee) -> bool:
    if employee.is_anonymous:
        return True
    email = fields.first_text(roster, fields.ROSTER_EMAIL).lower()
    code = fields.first_text(roster, fields.ROSTER_CODE)
    name = fields.first_text(roster, fields.ROSTER_NAME)
    return (
        (bool(employee.email) and email == employee.email.lower())
        or (bool(employee.code) and code == employee.code)
        or (bool(employee.name) and name == employee.name)
    )


def select_roster_entry(
    rosters: Iterable[object],
    month: str,
    employee: Employee,
) -> Mapping[str, Any] | None:
    for roster in rosters:
        if not isinstance(roster, Mapping):
            continue
        if roster_month(roster) == month and _roster_belongs_to(roster, employee):
            return roster
    return None


def roster_months(rosters: Iterable[object], employee: Employee) -> list[str]:
    months: list[str] = []
    for roster in rosters:
        if not isinstance(roster, Mapping) or not _roster_belongs_to(roster, employee):
            continue
        month = roster_month(roster)
        if month is not None and month not in months:
            months.append(month)
    return months


def select_assigned_schedule(schedules: Iterable[object], employee: Employee) -> Mapping[str, Any] | None:
    """Weekly schedule whose center and group match the employee's."""
    for schedule in schedules:
        if not isinstance(schedule, Mapping):
            continue
        center = fields.first_text(schedule, fields.SCHEDULE_CENTER)
        group = fields.first_text(schedule, fields.SCHEDULE_GROUP)
        if center == employee.center and group == employee.group:
            return schedule
    return None


def filter_medical_leaves(records: Iterable[object], employee: Employee) -> list[Mapping[str, Any]]:
    """Leaves matching the employee code or name.

    The registry is already queried by employee code, so when nothing
    matches the whole list is kept.
    """
    leaves = [record for record in records if isinstance(record, Mapping)]
    code = employee.code.strip()
    name = employee.name.strip().lower()

    matching = []
    for leave in leaves:
        leave_code = fields.first_text(leave, fields.LEAVE_EMPLOYEE_CODE)
        leave_name = fields.first_text(leave, fields.LEAVE_EMPLOYEE_NAME).lower()
        if (code and leave_code == code) or (name and leave_name == name):
            matching.append(leave)
    return matching or leaves
