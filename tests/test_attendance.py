from __future__ import annotations

from cuadrantes.attendance import (
    clock_seconds,
    duration_seconds,
    evaluate_day,
    greedy_pair_minutes,
    group_events_by_day,
    incomplete_days_message,
    monthly_total,
)
from cuadrantes.models import DayCategory, DayCell, MonthlyTotal, ShiftCode, TotalSource


def _event(day: str, hour: str, kind: str, duration: str | None = None) -> dict[str, str]:
    event = {"FECHA": day, "HORA": hour, "TIPO": kind}
    if duration is not None:
        event["DURACION"] = duration
    return event


def test_day_pairing_is_positional_after_sorting():
    events = [
        _event("2025-03-03", "08:05", "Entrada"),
        _event("2025-03-03", "12:00", "Salida"),
        _event("2025-03-03", "08:00", "Entrada"),
    ]

    result = evaluate_day(events, is_past_day=True)

    assert result.incomplete_clock_in is False
    assert result.worked_minutes == 240


def test_monthly_greedy_pairing_leaves_second_entry_unmatched():
    events = [
        _event("2025-03-03", "08:00", "Entrada"),
        _event("2025-03-03", "08:05", "Entrada"),
        _event("2025-03-03", "12:00", "Salida"),
    ]

    assert greedy_pair_minutes(events) == 240
    assert monthly_total(events, 2025, 3) == MonthlyTotal(240 * 60, TotalSource.PAIRS)


def test_greedy_pairing_skips_exits_before_the_entry():
    events = [
        _event("2025-03-03", "07:00", "Salida"),
        _event("2025-03-03", "08:00", "Entrada"),
        _event("2025-03-03", "14:00", "Salida"),
        _event("2025-03-03", "15:00", "Entrada"),
        _event("2025-03-03", "18:30", "Salida"),
    ]

    assert greedy_pair_minutes(events) == 6 * 60 + 210


def test_missing_exit_on_past_day_is_incomplete():
    result = evaluate_day([_event("2025-03-03", "08:00", "Entrada")], is_past_day=True)

    assert result.incomplete_clock_in is True
    assert result.worked_minutes is None


def test_missing_exit_today_is_not_flagged():
    result = evaluate_day([_event("2025-03-03", "08:00", "Entrada")], is_past_day=False)

    assert result.incomplete_clock_in is False
    assert result.worked_minutes is None


def test_overnight_pair_wraps_around_midnight():
    events = [_event("2025-03-03", "22:00", "Entrada"), _event("2025-03-03", "06:00", "Salida")]

    assert evaluate_day(events, is_past_day=True).worked_minutes == 480


def test_reported_durations_take_precedence_over_pairs():
    events = [
        _event("2025-03-03", "08:00", "Entrada"),
        _event("2025-03-03", "12:00", "Salida", "04:00:30"),
        _event("2025-03-04", "08:00", "Entrada", "09:00:00"),
        _event("2025-03-04", "10:00", "Salida", "02:00"),
        _event("2025-04-01", "10:00", "Salida", "05:00:00"),
    ]

    total = monthly_total(events, 2025, 3)

    assert total.seconds == 4 * 3600 + 30 + 2 * 3600
    assert total.source == TotalSource.DURATION
    assert total.display(2025, 3) == "Total horas trabajadas (3/2025): 6h 0m 30s"


def test_monthly_total_is_idempotent():
    events = [
        _event("2025-03-03", "08:00", "Entrada"),
        _event("2025-03-03", "15:15", "Salida"),
        _event("2025-03-04", "09:00", "Entrada"),
        _event("2025-03-04", "13:00", "Salida"),
    ]

    first = monthly_total(events, 2025, 3)
    second = monthly_total(events, 2025, 3)

    assert first == second
    assert first.components == (11, 15, 0)


def test_lowercase_aliases_are_accepted():
    events = [
        {"data": "03/03/2025", "hora": "08:30:00", "tipo": "Entrada"},
        {"data": "03/03/2025", "hora": "14:30:00", "tipo": "Salida"},
    ]

    assert set(group_events_by_day(events)) == {"2025-03-03"}
    assert monthly_total(events, 2025, 3).seconds == 6 * 3600


def test_time_and_duration_parsing():
    assert clock_seconds("8:05") == 8 * 3600 + 5 * 60
    assert clock_seconds("23:59:59") == 86399
    assert clock_seconds("25:00") is None
    assert clock_seconds("mediodia") is None
    assert duration_seconds("01:02:03") == 3723
    assert duration_seconds("01:30") == 5400
    assert duration_seconds("xx:10:00") == 600
    assert duration_seconds(3600) == 0


def test_incomplete_days_message_counts_work_shift_days():
    cells = [
        DayCell(1, "2025-03-01", DayCategory.WORK_SHIFT, ShiftCode.T1, incomplete_clock_in=True),
        DayCell(2, "2025-03-02", DayCategory.FREE),
    ]

    assert incomplete_days_message(cells) == (
        "Tienes 1 día laborable con turnos incompletos (falta Entrada o Salida) en el mes seleccionado!"
    )
    assert incomplete_days_message(cells[1:]) is None
    assert incomplete_days_message([cells[0], cells[0]]).startswith("Tienes 2 días laborables")


def test_fractional_seconds_still_pair():
    events = [
        _event("2025-03-03", "08:00:00.000", "Entrada"),
        _event("2025-03-03", "12:00:00.000", "Salida"),
    ]

    assert clock_seconds("08:00:59.999") == 8 * 3600 + 59
    assert evaluate_day(events, is_past_day=True).worked_minutes == 240
    assert monthly_total(events, 2025, 3).seconds == 240 * 60
