"""Selectable months for the calendar month picker."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from cuadrantes.dates import month_key, normalize_month, parse_month_key


def normalized_months(roster_months: Iterable[object]) -> list[str]:
    months: list[str] = []
    for value in roster_months:
        normalized = normalize_month(value)
        if normalized is not None and normalized not in months:
            months.append(normalized)
    return months


def build_available_months(roster_months: Iterable[object], today: date) -> list[str]:
    """Previous December plus every month of the current year.

    Months present in roster data are merged in, but only those two
    windows survive; stray months from other years are dropped.
    """
    previous_december = (today.year - 1, 12)
    candidates = set(normalized_months(roster_months))
    candidates.add(month_key(*previous_december))
    candidates.update(month_key(today.year, month) for month in range(1, 13))

    selectable: list[tuple[int, int]] = []
    for candidate in candidates:
        parsed = parse_month_key(candidate)
        if parsed is None:
            continue
        if parsed == previous_december or parsed[0] == today.year:
            selectable.append(parsed)

    selectable.sort(key=lambda year_month: (year_month != previous_december, year_month))
    return [month_key(year, month) for year, month in selectable]


def default_month(roster_months: Iterable[object], today: date) -> str:
    """Month initially shown: the current one, else the closest roster month this year."""
    months = normalized_months(roster_months)
    current = month_key(today.year, today.month)
    if current in months:
        return current

    closest: str | None = None
    smallest_gap: int | None = None
    for candidate in months:
        parsed = parse_month_key(candidate)
        if parsed is None or parsed[0] != today.year:
            continue
        gap = abs(parsed[1] - today.month)
        if smallest_gap is None or gap < smallest_gap:
            closest, smallest_gap = candidate, gap

    if closest is not None:
        return closest
    if months:
        return months[0]
    return current
