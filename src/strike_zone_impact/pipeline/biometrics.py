from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

import pandas as pd

from strike_zone_impact.domain.identity import Biometric
from strike_zone_impact.pipeline import columns as col

if TYPE_CHECKING:
    from collections.abc import Iterable

    from strike_zone_impact.domain.identity import Identity

logger = logging.getLogger(__name__)


def _to_height(value: Any) -> float | None:
    if value is None:
        return None
    try:
        height = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(height) or height <= 0:
        return None
    return height


def parse_biometrics(rows: Iterable[dict[str, Any]]) -> dict[str, Biometric]:
    """Index People rows by Baseball-Reference id, skipping rows without a usable height."""
    table: dict[str, Biometric] = {}
    skipped = 0
    for row in rows:
        bbref_id = row.get("bbref_id")
        height = _to_height(row.get("height"))
        if not bbref_id or height is None:
            skipped += 1
            continue
        table.setdefault(bbref_id, Biometric(bbref_id=bbref_id, height_in=height))
    logger.debug("Parsed %d biometric rows (%d without id or height)", len(table), skipped)
    return table


def join_heights(identities: dict[int, Identity], biometrics: dict[str, Biometric]) -> dict[int, float]:
    """Chain MLBAM id -> Baseball-Reference id -> height.

    Several MLBAM ids may share one Baseball-Reference id; each of them gets the
    height. Biometric records for ids no identity points at are ignored.
    """
    heights: dict[int, float] = {}
    no_bbref = 0
    for mlbam_id, identity in identities.items():
        if identity.bbref_id is None:
            no_bbref += 1
            continue
        biometric = biometrics.get(identity.bbref_id)
        if biometric is not None:
            heights[mlbam_id] = biometric.height_in

    logger.info(
        "Joined heights for %d of %d identities (%d with no Baseball-Reference id)",
        len(heights),
        len(identities),
        no_bbref,
    )
    return heights


def attach_heights(events: pd.DataFrame, heights: dict[int, float]) -> pd.DataFrame:
    batter = pd.to_numeric(events[col.BATTER], errors="coerce")
    return events.assign(**{col.HEIGHT_IN: batter.map(heights)})
