"""Domain types produced by the calendar reconciliation."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from cuadrantes import fields


class DayCategory(str, enum.Enum):
    WORK_SHIFT = "WorkShift"
    FREE = "Free"
    VACATION = "Vacation"
    PERSONAL_LEAVE = "PersonalLeave"
    MEDICAL_LEAVE = "MedicalLeave"
    ABSENCE = "Absence"


class ShiftCode(str, enum.Enum):
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"


class LeaveEndSource(str, enum.Enum):
    ACTUAL = "actual"
    PREDICTED = "predicted"
    OPEN = "open"


class TotalSource(str, enum.Enum):
    DURATION = "duration"
    PAIRS = "pairs"


@dataclass(frozen=True)
class Employee:
    code: str = ""
    name: str = ""
    email: str = ""
    center: str = ""
    group: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> "Employee":
        return cls(
            code=fields.first_text(record, fields.EMPLOYEE_CODE),
            name=fields.first_text(record, fields.EMPLOYEE_NAME),
            email=fields.first_text(record, fields.EMPLOYEE_EMAIL),
            center=fields.first_text(record, fields.EMPLOYEE_CENTER),
            group=fields.first_text(record, fields.EMPLOYEE_GROUP),
        )

    @property
    def is_anonymous(self) -> bool:
        return not (self.code or self.name or self.email)


@dataclass(frozen=True)
class BaseShift:
    category: DayCategory
    code: ShiftCode | None = None
    schedule_text: str = ""

    @classmethod
    def free(cls) -> "BaseShift":
        return cls(DayCategory.FREE)

    @classmethod
    def work(cls, code: ShiftCode, schedule_text: str = "") -> "BaseShift":
        return cls(DayCategory.WORK_SHIFT, code, schedule_text)


@dataclass(frozen=True)
class LeaveRange:
    start: date
    end: date
    start_text: str
    end_text: str
    situation: str
    reason: str
    end_source: LeaveEndSource
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_dict(self) -> dict[str, object]:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "start_text": self.start_text,
            "end_text": self.end_text,
            "situation": self.situation,
            "reason": self.reason,
            "end_source": self.end_source.value,
        }


@dataclass(frozen=True)
class DayAttendance:
    incomplete_clock_in: bool = False
    worked_minutes: int | None = None


@dataclass(frozen=True)
class DayCell:
    day: int
    date: str
    category: DayCategory
    shift_code: ShiftCode | None = None
    schedule_text: str = ""
    incomplete_clock_in: bool = False
    worked_minutes: int | None = None
    reason_text: str | None = None
    absence_type: str | None = None
    is_today: bool = False

    @property
    def is_work_shift(self) -> bool:
        return self.category == DayCategory.WORK_SHIFT

    @property
    def worked_duration(self) -> str | None:
        if self.worked_minutes is None:
            return None
        return f"{self.worked_minutes // 60}h {self.worked_minutes % 60}m"

    def to_dict(self) -> dict[str, object]:
        return {
            "day": self.day,
            "date": self.date,
            "category": self.category.value,
            "shift_code": self.shift_code.value if self.shift_code else None,
            "schedule_text": self.schedule_text,
            "incomplete_clock_in": self.incomplete_clock_in,
            "worked_minutes": self.worked_minutes,
            "worked_duration": self.worked_duration,
            "reason_text": self.reason_text,
            "absence_type": self.absence_type,
            "is_today": self.is_today,
        }


@dataclass(frozen=True)
class MonthlyTotal:
    seconds: int = 0
    source: TotalSource = TotalSource.PAIRS

    @property
    def components(self) -> tuple[int, int, int]:
        total = max(0, self.seconds)
        return total // 3600, (total % 3600) // 60, total % 60

    def display(self, year: int, month: int) -> str:
        hours, minutes, seconds = self.components
        return f"Total horas trabajadas ({month}/{year}): {hours}h {minutes}m {seconds}s"


@dataclass(frozen=True)
class MonthCalendar:
    month: str
    cells: list[DayCell] = field(default_factory=list)
    total: MonthlyTotal = field(default_factory=MonthlyTotal)
    total_text: str = ""
    alert: str | None = None
    current_leave: LeaveRange | None = None
    first_weekday: int | None = None

    def to_dict(self) -> dict[str, object]:
        hours, minutes, seconds = self.total.components
        return {
            "month": self.month,
            "first_weekday": self.first_weekday,
            "days": [cell.to_dict() for cell in self.cells],
            "total": {
                "seconds": self.total.seconds,
                "hours": hours,
                "minutes": minutes,
                "secs": seconds,
                "source": self.total.source.value,
                "display": self.total_text,
            },
            "alert": self.alert,
            "current_leave": self.current_leave.to_dict() if self.current_leave else None,
        }
