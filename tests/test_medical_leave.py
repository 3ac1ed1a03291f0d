from __future__ import annotations

from datetime import date

from cuadrantes.medical_leave import build_leave_ranges, covering_leave, current_leave, leave_range
from cuadrantes.models import LeaveEndSource


TODAY = date(2025, 6, 15)


def test_actual_end_date_closes_the_leave():
    resolved = leave_range({"Fecha baja": "2025-05-02", "Fecha alta": "2025-05-20", "Situación": "Alta"}, TODAY)

    assert resolved is not None
    assert (resolved.start, resolved.end) == (date(2025, 5, 2), date(2025, 5, 20))
    assert resolved.end_source == LeaveEndSource.ACTUAL
    assert resolved.reason == "Alta"


def test_future_prediction_is_used_as_end():
    resolved = leave_range({"fecha_baja": "10/06/2025", "Fecha de alta prevista": "30/06/2025"}, TODAY)

    assert resolved.end == date(2025, 6, 30)
    assert resolved.end_source == LeaveEndSource.PREDICTED


def test_stale_prediction_keeps_leave_open_until_today():
    resolved = leave_range({"fechaBaja": "2025-05-01", "fechaAltaPrevista": "2025-05-10"}, TODAY)

    assert resolved.end == TODAY
    assert resolved.end_text == "2025-06-15"
    assert resolved.end_source == LeaveEndSource.OPEN
    for day in (date(2025, 5, 1), date(2025, 5, 11), date(2025, 6, 1), TODAY):
        assert covering_leave(day, [resolved]) is resolved
    assert covering_leave(date(2025, 6, 16), [resolved]) is None


def test_leave_without_end_information_is_open_ended():
    resolved = leave_range({"FECHA_INICIO": "2025-06-01", "estado": "En curso"}, TODAY)

    assert resolved.end == TODAY
    assert resolved.end_source == LeaveEndSource.OPEN
    assert resolved.situation == "En curso"


def test_unparseable_actual_end_falls_back_to_prediction():
    resolved = leave_range(
        {"fecha_inicio": "2025-06-01", "fecha_alta": "pendiente", "Fecha alta prevista": "2025-07-01"},
        TODAY,
    )

    assert resolved.end == date(2025, 7, 1)
    assert resolved.end_source == LeaveEndSource.PREDICTED


def test_inverted_bounds_are_swapped():
    resolved = leave_range({"fecha_inicio": "2025-05-20", "fecha_fin": "2025-05-02"}, TODAY)

    assert resolved.start <= resolved.end
    assert (resolved.start, resolved.end) == (date(2025, 5, 2), date(2025, 5, 20))


def test_combined_range_field_fills_missing_bounds():
    resolved = leave_range({"FECHA": "2025-04-01 - 2025-04-03", "motivo": "Gripe"}, TODAY)

    assert (resolved.start, resolved.end) == (date(2025, 4, 1), date(2025, 4, 3))
    assert resolved.reason == "Gripe"


def test_records_without_start_are_discarded():
    records = [
        {"Fecha alta": "2025-05-20"},
        {"fecha_inicio": "??"},
        None,
        {"fecha_inicio": "2025-05-02", "fecha_fin": "2025-05-03"},
    ]

    ranges = build_leave_ranges(records, TODAY)

    assert len(ranges) == 1
    assert ranges[0].start == date(2025, 5, 2)
    assert ranges[0].reason == "Baja médica"


def test_first_range_in_record_order_wins_and_current_leave_uses_today():
    ranges = build_leave_ranges(
        [
            {"fecha_inicio": "2025-06-10", "fecha_fin": "2025-06-20", "Situacion": "Primera"},
            {"fecha_inicio": "2025-06-01", "fecha_fin": "2025-06-30", "Situacion": "Segunda"},
        ],
        TODAY,
    )

    assert covering_leave(date(2025, 6, 12), ranges).situation == "Primera"
    assert covering_leave(date(2025, 6, 25), ranges).situation == "Segunda"
    assert current_leave(ranges, TODAY).situation == "Primera"
    assert current_leave(ranges, date(2025, 8, 1)) is None
