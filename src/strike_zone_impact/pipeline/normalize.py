"""Unit conversion and zone geometry.

Statcast reports zone bounds and pitch location in feet. Everything downstream
works in inches, and every event carries both its legacy zone (the bounds the
tracking system reported) and its proportional zone (fixed fractions of the
batter's height).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from strike_zone_impact.pipeline import columns as col

if TYPE_CHECKING:
    import pandas as pd

    from strike_zone_impact.config import ZonePolicy
    from strike_zone_impact.pipeline.types import DropReport

logger = logging.getLogger(__name__)


def drop_missing(events: pd.DataFrame, columns: list[str]) -> tuple[pd.DataFrame, int]:
    kept = events.dropna(subset=columns)
    return kept, len(events) - len(kept)


def to_inches(events: pd.DataFrame, policy: ZonePolicy) -> pd.DataFrame:
    factor = policy.feet_to_inches
    return events.assign(
        **{
            col.LEGACY_BOTTOM: events[col.SZ_BOT].astype(float) * factor,
            col.LEGACY_TOP: events[col.SZ_TOP].astype(float) * factor,
            col.PLATE_X_IN: events[col.PLATE_X].astype(float) * factor,
            col.PLATE_Z_IN: events[col.PLATE_Z].astype(float) * factor,
        }
    )


def add_zone_geometry(events: pd.DataFrame, policy: ZonePolicy) -> pd.DataFrame:
    height = events[col.HEIGHT_IN].astype(float)
    bottom = policy.bottom_fraction * height
    top = policy.top_fraction * height
    legacy_height = events[col.LEGACY_TOP] - events[col.LEGACY_BOTTOM]
    proportional_height = top - bottom
    return events.assign(
        **{
            col.PROPORTIONAL_BOTTOM: bottom,
            col.PROPORTIONAL_TOP: top,
            col.LEGACY_HEIGHT: legacy_height,
            col.LEGACY_AREA: legacy_height * policy.plate_width,
            col.PROPORTIONAL_HEIGHT: proportional_height,
            col.PROPORTIONAL_AREA: proportional_height * policy.plate_width,
        }
    )


def drop_malformed(events: pd.DataFrame) -> tuple[pd.DataFrame, int]:
    """Reject events whose zone top does not sit above its bottom."""
    valid = (events[col.LEGACY_TOP] > events[col.LEGACY_BOTTOM]) & (
        events[col.PROPORTIONAL_TOP] > events[col.PROPORTIONAL_BOTTOM]
    )
    kept = events[valid]
    return kept, len(events) - len(kept)


def normalize(events: pd.DataFrame, policy: ZonePolicy, drops: DropReport) -> pd.DataFrame:
    """Convert to inches and compute both zones, recording each drop in *drops*."""
    events, missing_bounds = drop_missing(events, [col.SZ_BOT, col.SZ_TOP])
    events, missing_location = drop_missing(events, [col.PLATE_X, col.PLATE_Z])
    events = add_zone_geometry(to_inches(events, policy), policy)
    events, malformed = drop_malformed(events)

    drops.missing_zone_bounds += missing_bounds
    drops.missing_location += missing_location
    drops.malformed_geometry += malformed
    if missing_bounds or missing_location:
        logger.info("Dropped %d events missing zone bounds, %d missing location", missing_bounds, missing_location)
    if malformed:
        logger.warning("Dropped %d events with malformed zone geometry (top <= bottom)", malformed)
    return events
