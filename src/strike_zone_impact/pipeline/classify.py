from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from strike_zone_impact.domain.zone import ZoneTransition
from strike_zone_impact.pipeline import columns as col

if TYPE_CHECKING:
    import pandas as pd

    from strike_zone_impact.config import ZonePolicy


def in_zone(events: pd.DataFrame, bottom: str, top: str, half_width: float) -> pd.Series:
    """Boundary-exclusive: a pitch exactly on an edge is out of the zone."""
    x = events[col.PLATE_X_IN]
    z = events[col.PLATE_Z_IN]
    return (x > -half_width) & (x < half_width) & (z > events[bottom]) & (z < events[top])


def classify(events: pd.DataFrame, policy: ZonePolicy) -> pd.DataFrame:
    legacy = in_zone(events, col.LEGACY_BOTTOM, col.LEGACY_TOP, policy.plate_half_width)
    proportional = in_zone(events, col.PROPORTIONAL_BOTTOM, col.PROPORTIONAL_TOP, policy.plate_half_width)
    transition = np.select(
        [legacy & proportional, legacy & ~proportional, ~legacy & proportional],
        [ZoneTransition.STILL_IN.value, ZoneTransition.NEWLY_EXCLUDED.value, ZoneTransition.NEWLY_INCLUDED.value],
        default=ZoneTransition.STILL_OUT.value,
    )
    return events.assign(
        **{
            col.LEGACY_IN_ZONE: legacy.astype(bool),
            col.PROPORTIONAL_IN_ZONE: proportional.astype(bool),
            col.ZONE_TRANSITION: transition,
        }
    )
