from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class DateWindow:
    index: int
    start: date
    end: date

    @property
    def label(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class WindowResult:
    window: DateWindow
    row_count: int
    success: bool
    error: str | None = None

    @property
    def empty(self) -> bool:
        return self.success and self.row_count == 0


@dataclass
class FetchReport:
    events: pd.DataFrame = field(default_factory=pd.DataFrame)
    windows: list[WindowResult] = field(default_factory=list)

    @property
    def failures(self) -> list[WindowResult]:
        return [w for w in self.windows if not w.success]

    @property
    def empty_windows(self) -> list[WindowResult]:
        return [w for w in self.windows if w.empty]

    @property
    def total_rows(self) -> int:
        return len(self.events)
