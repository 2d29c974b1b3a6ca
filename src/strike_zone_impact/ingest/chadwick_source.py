import csv
import fnmatch
import io
import logging
import zipfile
from collections.abc import Iterator
from typing import Any

import httpx

from strike_zone_impact.ingest._csv_helpers import nullify_empty_strings, strip_bom
from strike_zone_impact.ingest._retry import RetryPolicy, default_http_retry

logger = logging.getLogger(__name__)

_URL = "https://github.com/chadwickbureau/register/archive/refs/heads/master.zip"

_COLUMNS = ("key_mlbam", "key_bbref", "name_last", "name_first")
_PEOPLE_PATTERN = "*/people-*.csv"

_DEFAULT_RETRY = default_http_retry("Chadwick register download")


class ChadwickRegisterSource:
    """Identity reference rows (MLBAM id, Baseball-Reference id, names) from the Chadwick register."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        retry: RetryPolicy = _DEFAULT_RETRY,
    ) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(60.0, connect=10.0))
        self._fetch_with_retry = retry(self._do_fetch)

    @property
    def source_type(self) -> str:
        return "chadwick_bureau"

    @property
    def source_detail(self) -> str:
        return "chadwick_register"

    def _do_fetch(self) -> httpx.Response:
        response = self._client.get(_URL)
        response.raise_for_status()
        return response

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("GET %s", _URL)
        response = self._fetch_with_retry()
        logger.debug("Chadwick register responded %d", response.status_code)

        with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
            parsed = [_project(row) for row in _people_rows(archive)]
        rows = [row for row in parsed if row["key_mlbam"] is not None]

        logger.info(
            "Parsed %d identity rows from Chadwick register (%d without an MLBAM id)",
            len(rows),
            len(parsed) - len(rows),
        )
        return rows


def _people_rows(archive: zipfile.ZipFile) -> Iterator[dict[str, Any]]:
    """The register is split across people-0.csv .. people-f.csv; read them in name order."""
    for name in sorted(fnmatch.filter(archive.namelist(), _PEOPLE_PATTERN)):
        text = archive.read(name).decode("utf-8")
        yield from csv.DictReader(io.StringIO(strip_bom(text)))


def _project(row: dict[str, Any]) -> dict[str, Any]:
    cleaned = nullify_empty_strings(row)
    return {column: cleaned.get(column) for column in _COLUMNS}
