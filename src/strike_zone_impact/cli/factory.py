from collections.abc import Callable
from pathlib import Path

from strike_zone_impact.config import FetchConfig
from strike_zone_impact.ingest.chadwick_source import ChadwickRegisterSource
from strike_zone_impact.ingest.csv_source import LAHMAN_PEOPLE_COLUMNS, CsvSource
from strike_zone_impact.ingest.lahman_source import LahmanPeopleSource
from strike_zone_impact.ingest.protocols import ReferenceSource
from strike_zone_impact.statcast.downloader import StatcastDownloader
from strike_zone_impact.statcast.fetcher import PybaseballFetcher, StatcastFetcher
from strike_zone_impact.statcast.models import WindowResult


def identity_source(register_csv: Path | None) -> ReferenceSource:
    if register_csv is not None:
        return CsvSource(register_csv)
    return ChadwickRegisterSource()


def biometric_source(people_csv: Path | None) -> ReferenceSource:
    if people_csv is not None:
        return CsvSource(people_csv, columns=LAHMAN_PEOPLE_COLUMNS)
    return LahmanPeopleSource()


def build_fetcher() -> StatcastFetcher:
    return PybaseballFetcher()


def build_downloader(
    config: FetchConfig,
    on_progress: Callable[[WindowResult], None] | None = None,
) -> StatcastDownloader:
    return StatcastDownloader(fetcher=build_fetcher(), config=config, progress_callback=on_progress)
