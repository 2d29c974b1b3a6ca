from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pandas as pd

from strike_zone_impact.config import ZonePolicy
from strike_zone_impact.pipeline import columns as col
from strike_zone_impact.pipeline.biometrics import attach_heights, join_heights, parse_biometrics
from strike_zone_impact.pipeline.classify import classify
from strike_zone_impact.pipeline.identity import (
    attach_batting_team,
    attach_identities,
    resolve_identities,
    subject_ids,
)
from strike_zone_impact.pipeline.normalize import normalize
from strike_zone_impact.pipeline.types import DropReport, PipelineResult

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _empty_enriched(events: pd.DataFrame) -> pd.DataFrame:
    """An empty table that still carries every column a classified table has."""
    extra = [c for c in (*col.SOURCE_COLUMNS, *col.DERIVED_COLUMNS) if c not in events.columns]
    return events.reindex(columns=[*events.columns, *extra])


def run_pipeline(
    events: pd.DataFrame,
    identity_rows: Iterable[dict[str, Any]],
    biometric_rows: Iterable[dict[str, Any]],
    policy: ZonePolicy | None = None,
) -> PipelineResult:
    """Resolve, join, normalize and classify raw Statcast events.

    The input frame is never modified. Every event either comes out classified
    or is counted under exactly one reason in the returned DropReport.
    """
    policy = policy or ZonePolicy()
    drops = DropReport(input_events=len(events))
    if events.empty:
        logger.info("No events to process")
        return PipelineResult(events=_empty_enriched(events), drops=drops)

    identities = resolve_identities(subject_ids(events), identity_rows)
    heights = join_heights(identities, parse_biometrics(biometric_rows))

    enriched = attach_batting_team(attach_identities(events, identities))
    enriched = attach_heights(enriched, heights)

    batter = pd.to_numeric(enriched[col.BATTER], errors="coerce")
    known = batter.isin(list(identities))
    drops.missing_identity = int((~known).sum())
    has_height = enriched[col.HEIGHT_IN].notna()
    drops.missing_height = int((known & ~has_height).sum())
    enriched = enriched[known & has_height]
    logger.info(
        "Dropped %d events with no register identity, %d with no height",
        drops.missing_identity,
        drops.missing_height,
    )

    enriched = normalize(enriched, policy, drops)
    enriched = classify(enriched, policy).reset_index(drop=True)

    drops.output_events = len(enriched)
    logger.info("Classified %d of %d events", drops.output_events, drops.input_events)
    return PipelineResult(events=enriched, drops=drops)
