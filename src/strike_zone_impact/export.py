"""Flat tabular export of event tables, by file extension."""

import logging
from pathlib import Path

import pandas as pd

from strike_zone_impact.domain.errors import ExportError
from strike_zone_impact.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_SUFFIXES = (".csv", ".parquet")


def _check_suffix(path: Path) -> ExportError | None:
    if path.suffix not in _SUFFIXES:
        return ExportError(message=f"unsupported file type '{path.suffix}' (use .csv or .parquet)", path=str(path))
    return None


def write_table(events: pd.DataFrame, path: Path) -> Result[Path, ExportError]:
    if (error := _check_suffix(path)) is not None:
        return Err(error)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        events.to_parquet(path, index=False)
    else:
        events.to_csv(path, index=False)
    logger.info("Wrote %d rows to %s", len(events), path)
    return Ok(path)


def read_table(path: Path) -> Result[pd.DataFrame, ExportError]:
    if (error := _check_suffix(path)) is not None:
        return Err(error)
    if not path.exists():
        return Err(ExportError(message="file not found", path=str(path)))
    if path.suffix == ".parquet":
        events = pd.read_parquet(path)
    else:
        try:
            events = pd.read_csv(path, low_memory=False)
        except pd.errors.EmptyDataError:
            # a fetch where every window failed writes a file with no header
            events = pd.DataFrame()
    logger.debug("Read %d rows from %s", len(events), path)
    return Ok(events)
