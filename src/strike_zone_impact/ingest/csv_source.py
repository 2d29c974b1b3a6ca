import csv
import logging
from pathlib import Path
from typing import Any

from strike_zone_impact.ingest._csv_helpers import nullify_empty_strings

logger = logging.getLogger(__name__)


class CsvSource:
    """Reads a local reference table, e.g. a saved copy of the register or People.csv."""

    def __init__(self, path: str | Path, columns: dict[str, str] | None = None) -> None:
        self._path = Path(path)
        self._columns = columns

    @property
    def source_type(self) -> str:
        return "csv"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("Reading CSV %s", self._path)
        encoding = params.pop("encoding", "utf-8-sig")
        with open(self._path, encoding=encoding, newline="") as f:
            rows = [nullify_empty_strings(row) for row in csv.DictReader(f)]
        if self._columns is not None:
            rows = [{target: row.get(source) for source, target in self._columns.items()} for row in rows]
        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows


# Renames a local copy of Lahman People.csv to the shape LahmanPeopleSource returns.
LAHMAN_PEOPLE_COLUMNS = {"bbrefID": "bbref_id", "height": "height"}
