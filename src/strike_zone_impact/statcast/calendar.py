from __future__ import annotations

from datetime import date, timedelta

from strike_zone_impact.statcast.models import DateWindow

# Season-specific overrides for non-standard start/end dates.
_SEASON_OVERRIDES: dict[int, tuple[date, date]] = {
    2020: (date(2020, 7, 23), date(2020, 10, 28)),
}

_DEFAULT_START_MONTH_DAY = (3, 20)
_DEFAULT_END_MONTH_DAY = (11, 5)


def season_date_range(season: int) -> tuple[date, date]:
    """Return the (start, end) dates for an MLB season, inclusive."""
    if season in _SEASON_OVERRIDES:
        return _SEASON_OVERRIDES[season]
    start = date(season, *_DEFAULT_START_MONTH_DAY)
    end = date(season, *_DEFAULT_END_MONTH_DAY)
    return start, end


def date_windows(start: date, end: date, days: int = 7) -> list[DateWindow]:
    """Split [start, end] into consecutive inclusive windows of *days* days.

    The final window is truncated at *end*.
    """
    if start > end:
        raise ValueError(f"start {start.isoformat()} is after end {end.isoformat()}")
    if days <= 0:
        raise ValueError(f"window size must be positive, got {days}")

    windows: list[DateWindow] = []
    current = start
    while current <= end:
        window_end = min(current + timedelta(days=days - 1), end)
        windows.append(DateWindow(index=len(windows), start=current, end=window_end))
        current = window_end + timedelta(days=1)
    return windows
