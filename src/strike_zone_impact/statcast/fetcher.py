from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import date

    import pandas as pd


@runtime_checkable
class StatcastFetcher(Protocol):
    def fetch_range(self, start: date, end: date) -> pd.DataFrame: ...


class PybaseballFetcher:
    def fetch_range(self, start: date, end: date) -> pd.DataFrame:
        import pybaseball

        return pybaseball.statcast(
            start_dt=start.strftime("%Y-%m-%d"),
            end_dt=end.strftime("%Y-%m-%d"),
            verbose=False,
        )
