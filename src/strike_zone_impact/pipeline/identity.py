from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

import pandas as pd

from strike_zone_impact.domain.identity import Identity
from strike_zone_impact.pipeline import columns as col

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _to_optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _display_name(last: Any, first: Any) -> str:
    last_s = str(last).strip() if last else ""
    first_s = str(first).strip() if first else ""
    if last_s and first_s:
        return f"{last_s}, {first_s}"
    return last_s or first_s


def resolve_identities(subject_ids: Iterable[int], reference_rows: Iterable[dict[str, Any]]) -> dict[int, Identity]:
    """Map each subject id seen in the events to its register identity.

    Subjects absent from the register are left out of the mapping. When the
    register repeats an MLBAM id, the first row wins.
    """
    wanted = {int(s) for s in subject_ids}
    lookup: dict[int, Identity] = {}
    duplicates = 0
    for row in reference_rows:
        mlbam_id = _to_optional_int(row.get("key_mlbam"))
        if mlbam_id is None or mlbam_id not in wanted:
            continue
        if mlbam_id in lookup:
            duplicates += 1
            continue
        lookup[mlbam_id] = Identity(
            mlbam_id=mlbam_id,
            bbref_id=row.get("key_bbref") or None,
            name=_display_name(row.get("name_last"), row.get("name_first")),
        )

    if duplicates:
        logger.debug("Ignored %d duplicate register rows", duplicates)
    logger.info("Resolved %d of %d subjects against the register", len(lookup), len(wanted))
    return lookup


def subject_ids(events: pd.DataFrame) -> set[int]:
    ids = pd.to_numeric(events[col.BATTER], errors="coerce").dropna()
    return {int(i) for i in ids.unique()}


def attach_identities(events: pd.DataFrame, identities: dict[int, Identity]) -> pd.DataFrame:
    """Append display name and Baseball-Reference id columns; unknown subjects get missing values."""
    batter = pd.to_numeric(events[col.BATTER], errors="coerce")
    names = {k: v.name for k, v in identities.items()}
    bbref = {k: v.bbref_id for k, v in identities.items()}
    return events.assign(
        **{
            col.BATTER_NAME: batter.map(names),
            col.BATTER_BBREF_ID: batter.map(bbref),
        }
    )


def attach_batting_team(events: pd.DataFrame) -> pd.DataFrame:
    """The away team bats in the top half of an inning, the home team in the bottom."""
    if not {col.INNING_TOPBOT, col.HOME_TEAM, col.AWAY_TEAM} <= set(events.columns):
        logger.warning("Events carry no inning half or team columns; batting_team left empty")
        return events.assign(**{col.BATTING_TEAM: pd.NA})
    half = events[col.INNING_TOPBOT]
    team = events[col.AWAY_TEAM].where(half == "Top", events[col.HOME_TEAM].where(half == "Bot"))
    return events.assign(**{col.BATTING_TEAM: team})
