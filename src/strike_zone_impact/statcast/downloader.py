from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any

import pandas as pd
from tenacity import RetryCallState, retry, stop_after_attempt, wait_exponential_jitter

from strike_zone_impact.config import FetchConfig
from strike_zone_impact.statcast.calendar import date_windows
from strike_zone_impact.statcast.models import DateWindow, FetchReport, WindowResult

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    from strike_zone_impact.statcast.fetcher import StatcastFetcher

logger = logging.getLogger(__name__)

type RetryPolicy = Callable[[Callable[..., Any]], Callable[..., Any]]


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning("Retrying Statcast window (attempt %d): %s", retry_state.attempt_number, retry_state.outcome)


def default_window_retry(config: FetchConfig) -> RetryPolicy:
    return retry(
        stop=stop_after_attempt(config.max_attempts),
        wait=wait_exponential_jitter(initial=config.base_delay, max=config.max_delay),
        before_sleep=_log_retry,
        reraise=True,
    )


class StatcastDownloader:
    """Fetches a date range as independent windows and stitches the successes back together.

    A window that still fails after its retries is recorded and skipped; it never
    aborts the rest of the range. Windows may run concurrently, but the output
    frame is always concatenated in chronological window order.
    """

    def __init__(
        self,
        fetcher: StatcastFetcher,
        config: FetchConfig | None = None,
        progress_callback: Callable[[WindowResult], None] | None = None,
        retry: RetryPolicy | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._config = config or FetchConfig()
        self._progress_callback = progress_callback
        self._fetch_with_retry = (retry or default_window_retry(self._config))(self._do_fetch)

    def _do_fetch(self, window: DateWindow) -> pd.DataFrame:
        return self._fetcher.fetch_range(window.start, window.end)

    def _fetch_window(self, window: DateWindow) -> tuple[WindowResult, pd.DataFrame | None]:
        logger.debug("Fetching Statcast window %d (%s)", window.index, window.label)
        try:
            df = self._fetch_with_retry(window)
        except Exception as e:
            logger.error("Permanent failure for window %s: %s", window.label, e)
            result = WindowResult(window=window, row_count=0, success=False, error=str(e))
            return result, None

        row_count = 0 if df is None else len(df)
        result = WindowResult(window=window, row_count=row_count, success=True)
        return result, df if row_count > 0 else None

    def _notify(self, result: WindowResult) -> None:
        if self._progress_callback:
            self._progress_callback(result)

    def fetch(self, start: date, end: date) -> FetchReport:
        windows = date_windows(start, end, self._config.window_days)
        logger.info(
            "Fetching %s..%s in %d windows (%d workers)",
            start.isoformat(),
            end.isoformat(),
            len(windows),
            self._config.max_workers,
        )

        slots: list[tuple[WindowResult, pd.DataFrame | None] | None] = [None] * len(windows)
        if self._config.max_workers == 1:
            for window in windows:
                outcome = self._fetch_window(window)
                slots[window.index] = outcome
                self._notify(outcome[0])
        else:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                futures = {pool.submit(self._fetch_window, window): window for window in windows}
                for future in as_completed(futures):
                    outcome = future.result()
                    slots[futures[future].index] = outcome
                    self._notify(outcome[0])

        results = [slot[0] for slot in slots if slot is not None]
        frames = [slot[1] for slot in slots if slot is not None and slot[1] is not None]
        events = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame()

        report = FetchReport(events=events, windows=results)
        logger.info(
            "Fetched %d rows: %d windows ok, %d empty, %d failed",
            report.total_rows,
            len(results) - len(report.failures),
            len(report.empty_windows),
            len(report.failures),
        )
        return report
