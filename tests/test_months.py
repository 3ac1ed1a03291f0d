from __future__ import annotations

from datetime import date

from cuadrantes.months import build_available_months, default_month, normalized_months


def test_available_months_cover_previous_december_and_current_year():
    months = build_available_months(["2025-03"], date(2025, 6, 1))

    assert months == ["2024-12"] + [f"2025-{month:02d}" for month in range(1, 13)]


def test_available_months_drop_stray_years():
    months = build_available_months(["2023-05", "2024-11", "2026-01", 45717], date(2025, 6, 1))

    assert "2023-05" not in months
    assert "2024-11" not in months
    assert "2026-01" not in months
    assert months[0] == "2024-12"
    assert len(months) == 13


def test_available_months_without_roster_data():
    assert build_available_months([], date(2026, 1, 10))[:2] == ["2025-12", "2026-01"]


def test_normalized_months_deduplicates_and_skips_garbage():
    assert normalized_months(["2025-03-01", "2025-3", None, "garbage", 45717]) == ["2025-03"]


def test_default_month_prefers_current_month():
    assert default_month(["2025-02", "2025-06"], date(2025, 6, 15)) == "2025-06"


def test_default_month_picks_closest_roster_month_this_year():
    assert default_month(["2025-01", "2025-08", "2024-06"], date(2025, 6, 15)) == "2025-08"


def test_default_month_falls_back_to_first_roster_month():
    assert default_month(["2024-06", "2024-07"], date(2025, 6, 15)) == "2024-06"


def test_default_month_without_roster_is_current_month():
    assert default_month([], date(2025, 6, 15)) == "2025-06"
