import csv
import io
import logging
from typing import Any

import httpx

from strike_zone_impact.ingest._csv_helpers import nullify_empty_strings, strip_bom
from strike_zone_impact.ingest._retry import RetryPolicy, default_http_retry

logger = logging.getLogger(__name__)

_PEOPLE_URL = "https://raw.githubusercontent.com/daviddalpiaz/pylahman/main/data-raw/People.csv"

_DEFAULT_RETRY = default_http_retry("Lahman people download")


class LahmanPeopleSource:
    """Biometric reference rows (Baseball-Reference id, height in inches) from Lahman People.csv."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        retry: RetryPolicy = _DEFAULT_RETRY,
    ) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(60.0, connect=10.0))
        self._fetch_with_retry = retry(self._do_fetch)

    @property
    def source_type(self) -> str:
        return "lahman"

    @property
    def source_detail(self) -> str:
        return "people"

    def _do_fetch(self) -> httpx.Response:
        response = self._client.get(_PEOPLE_URL)
        response.raise_for_status()
        return response

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("GET %s", _PEOPLE_URL)
        response = self._fetch_with_retry()
        reader = csv.DictReader(io.StringIO(strip_bom(response.text)))
        rows = [
            {"bbref_id": row.get("bbrefID"), "height": row.get("height")}
            for row in (nullify_empty_strings(r) for r in reader)
        ]
        logger.info("Parsed %d Lahman people rows", len(rows))
        return rows
