import logging
import time
from typing import Any

from strike_zone_impact.domain.errors import SourceError
from strike_zone_impact.domain.result import Err, Ok, Result
from strike_zone_impact.ingest.protocols import ReferenceSource

logger = logging.getLogger(__name__)


def load_reference(source: ReferenceSource, **fetch_params: Any) -> Result[list[dict[str, Any]], SourceError]:
    """Fetch a reference table once, turning any failure into an Err."""
    t0 = time.perf_counter()
    logger.info("Loading reference table from %s", source.source_detail)
    try:
        rows = source.fetch(**fetch_params)
    except Exception as exc:
        logger.error("Fetch failed for %s: %s", source.source_detail, exc)
        return Err(
            SourceError(
                message=str(exc),
                source_type=source.source_type,
                source_detail=source.source_detail,
            )
        )
    logger.info("Loaded %d rows from %s in %.1fs", len(rows), source.source_detail, time.perf_counter() - t0)
    return Ok(rows)
