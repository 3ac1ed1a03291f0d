"""Calendar routes.

The caller posts the raw record arrays it fetched for one employee and gets
back the resolved month. Nothing is stored between requests.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flask import Blueprint, current_app, request

from cuadrantes.day_status import build_month_calendar
from cuadrantes.forms import CalendarQueryForm
from cuadrantes.models import Employee
from cuadrantes.months import build_available_months, default_month
from cuadrantes.selection import (
    filter_medical_leaves,
    roster_months,
    select_assigned_schedule,
    select_roster_entry,
)


bp = Blueprint("calendar", __name__, url_prefix="/api")

ROSTERS_KEY = "cuadrantes"
SCHEDULES_KEY = "horarios"
ABSENCES_KEY = "ausencias"
MEDICAL_LEAVES_KEY = "bajas"
EVENTS_KEY = "fichajes"


def _app_timezone() -> ZoneInfo:
    tz_name = current_app.config.get("APP_TIMEZONE", "Europe/Madrid")
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        return ZoneInfo("UTC")


def _today_local() -> date:
    return datetime.now(_app_timezone()).date()


def _records(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = payload.get(key)
    if isinstance(value, dict):
        return [value]
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _parse_request() -> tuple[CalendarQueryForm, dict[str, Any] | None, dict[str, Any] | None]:
    form = CalendarQueryForm(formdata=request.args)
    if not form.validate():
        current_app.logger.warning("Rejected calendar query %s: %s", request.query_string, form.errors)
        return form, None, {"errors": form.errors}

    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        current_app.logger.warning("Rejected calendar payload of type %s", type(payload).__name__)
        return form, None, {"errors": {"body": ["El cuerpo debe ser un objeto JSON."]}}
    return form, payload, None


@bp.post("/months")
def available_months():
    form, payload, errors = _parse_request()
    if errors is not None:
        return errors, 400

    today = form.today.data or _today_local()
    employee = Employee.from_record(payload.get("employee"))
    months = roster_months(_records(payload, ROSTERS_KEY), employee)
    return {
        "months": build_available_months(months, today),
        "default_month": default_month(months, today),
        "today": today.isoformat(),
    }


@bp.post("/calendar")
def month_calendar():
    form, payload, errors = _parse_request()
    if errors is not None:
        return errors, 400

    today = form.today.data or _today_local()
    employee = Employee.from_record(payload.get("employee"))
    rosters = _records(payload, ROSTERS_KEY)
    months = roster_months(rosters, employee)
    selected_month = form.month.data or default_month(months, today)

    roster_entry = select_roster_entry(rosters, selected_month, employee)
    assigned_schedule = select_assigned_schedule(_records(payload, SCHEDULES_KEY), employee)
    medical_leaves = filter_medical_leaves(_records(payload, MEDICAL_LEAVES_KEY), employee)

    calendar = build_month_calendar(
        selected_month,
        today=today,
        roster_entry=roster_entry,
        assigned_schedule=assigned_schedule,
        absences=_records(payload, ABSENCES_KEY),
        medical_leaves=medical_leaves,
        events=_records(payload, EVENTS_KEY),
        default_schedule=current_app.config["DEFAULT_SHIFT_SCHEDULE"],
    )
    current_app.logger.debug(
        "Resolved %s for employee %r: roster=%s schedule=%s",
        selected_month,
        employee.code or employee.email,
        roster_entry is not None,
        assigned_schedule is not None,
    )

    return {
        "employee": {"code": employee.code, "name": employee.name},
        "today": today.isoformat(),
        "available_months": build_available_months(months, today),
        "has_roster": roster_entry is not None,
        "has_assigned_schedule": assigned_schedule is not None,
        "calendar": calendar.to_dict(),
    }
