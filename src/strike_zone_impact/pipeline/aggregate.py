"""Outcome statistics under each zone definition.

Means over empty or all-missing samples are ``None``; they never turn into
zero or NaN, and rows without a defined value never take part in ranking.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import pandas as pd
from scipy.stats import ttest_ind

from strike_zone_impact.domain.aggregate import (
    AggregateRow,
    Comparison,
    GroupSummary,
    SignificanceTier,
    TransitionCounts,
    ZoneGeometrySummary,
)
from strike_zone_impact.domain.zone import ZoneTransition
from strike_zone_impact.pipeline import columns as col

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from strike_zone_impact.config import ZonePolicy

logger = logging.getLogger(__name__)


def _missing_columns(events: pd.DataFrame, columns: Sequence[str]) -> list[str]:
    missing = [c for c in columns if c not in events.columns]
    if missing:
        logger.warning("Events have no %s column; nothing to aggregate", ", ".join(missing))
    return missing


def qualifying(events: pd.DataFrame, outcome: str) -> pd.DataFrame:
    if _missing_columns(events, [col.DESCRIPTION]):
        return events.iloc[0:0]
    return events[events[col.DESCRIPTION] == outcome]


def _mean(values: pd.Series) -> float | None:
    clean = values.dropna()
    if clean.empty:
        return None
    return float(clean.mean())


def compare_samples(left: pd.Series, right: pd.Series) -> Comparison:
    """Compare two samples with Welch's t-test; difference is right minus left."""
    left = left.dropna().astype(float)
    right = right.dropna().astype(float)
    left_mean = _mean(left)
    right_mean = _mean(right)
    difference = None if left_mean is None or right_mean is None else right_mean - left_mean

    p_value: float | None = None
    if len(left) >= 2 and len(right) >= 2:
        p = float(ttest_ind(right, left, equal_var=False).pvalue)
        p_value = None if math.isnan(p) else p

    return Comparison(
        left_mean=left_mean,
        right_mean=right_mean,
        left_count=len(left),
        right_count=len(right),
        difference=difference,
        p_value=p_value,
        significance=SignificanceTier.from_p_value(p_value),
    )


def _as_key(value: object) -> tuple[object, ...]:
    return value if isinstance(value, tuple) else (value,)


def _groups(events: pd.DataFrame, keys: Sequence[str]) -> list[tuple[tuple[object, ...], pd.DataFrame]]:
    """Group by *keys*; rows with a missing key value are left out and counted in the log."""
    keys = list(keys)
    if _missing_columns(events, keys):
        return []
    unkeyed = int(events[keys].isna().any(axis=1).sum())
    if unkeyed:
        logger.warning("Left %d events with no %s out of the grouping", unkeyed, " / ".join(keys))
    return [(_as_key(key), group) for key, group in events.groupby(keys, sort=True)]


def summarize(
    events: pd.DataFrame,
    keys: Sequence[str],
    metrics: Sequence[str] = col.METRICS,
    outcome: str | None = None,
) -> list[GroupSummary]:
    """Count and per-metric mean for each group, optionally restricted to one outcome."""
    if outcome is not None:
        events = qualifying(events, outcome)
    return [
        GroupSummary(
            key=key,
            count=len(group),
            means={m: _mean(group[m]) if m in group.columns else None for m in metrics},
        )
        for key, group in _groups(events, keys)
    ]


def zone_impact(events: pd.DataFrame, keys: Sequence[str], metric: str, policy: ZonePolicy) -> list[AggregateRow]:
    """Per group, compare qualifying outcomes inside the proportional zone against the legacy zone."""
    events = qualifying(events, policy.qualifying_outcome)
    if _missing_columns(events, [metric, col.LEGACY_IN_ZONE, col.PROPORTIONAL_IN_ZONE]):
        return []
    rows: list[AggregateRow] = []
    for key, group in _groups(events, keys):
        comparison = compare_samples(
            group.loc[group[col.LEGACY_IN_ZONE], metric],
            group.loc[group[col.PROPORTIONAL_IN_ZONE], metric],
        )
        rows.append(
            AggregateRow(
                key=key,
                metric=metric,
                count=len(group),
                legacy_mean=comparison.left_mean,
                proportional_mean=comparison.right_mean,
                legacy_count=comparison.left_count,
                proportional_count=comparison.right_count,
                difference=comparison.difference,
                p_value=comparison.p_value,
                significance=comparison.significance,
            )
        )
    logger.debug("Computed %s zone impact for %d groups", metric, len(rows))
    return rows


def transition_breakdown(events: pd.DataFrame, keys: Sequence[str]) -> list[TransitionCounts]:
    counts: list[TransitionCounts] = []
    if _missing_columns(events, [col.ZONE_TRANSITION]):
        return counts
    for key, group in _groups(events, keys):
        tally = group[col.ZONE_TRANSITION].value_counts()
        counts.append(
            TransitionCounts(
                key=key,
                still_in=int(tally.get(ZoneTransition.STILL_IN.value, 0)),
                still_out=int(tally.get(ZoneTransition.STILL_OUT.value, 0)),
                newly_excluded=int(tally.get(ZoneTransition.NEWLY_EXCLUDED.value, 0)),
                newly_included=int(tally.get(ZoneTransition.NEWLY_INCLUDED.value, 0)),
            )
        )
    return counts


def transition_outcomes(
    events: pd.DataFrame, metric: str, policy: ZonePolicy, transition: ZoneTransition = ZoneTransition.NEWLY_EXCLUDED
) -> Comparison:
    """Compare qualifying outcomes on pitches that stay in the zone against one transition category."""
    events = qualifying(events, policy.qualifying_outcome)
    if _missing_columns(events, [col.ZONE_TRANSITION, metric]):
        return compare_samples(pd.Series(dtype=float), pd.Series(dtype=float))
    still_in = events.loc[events[col.ZONE_TRANSITION] == ZoneTransition.STILL_IN.value, metric]
    moved = events.loc[events[col.ZONE_TRANSITION] == transition.value, metric]
    return compare_samples(still_in, moved)


def zone_geometry(events: pd.DataFrame, keys: Sequence[str]) -> list[ZoneGeometrySummary]:
    geometry = [col.LEGACY_HEIGHT, col.PROPORTIONAL_HEIGHT, col.LEGACY_AREA, col.PROPORTIONAL_AREA]
    if _missing_columns(events, geometry):
        return []
    return [
        ZoneGeometrySummary(
            key=key,
            count=len(group),
            legacy_height=float(group[col.LEGACY_HEIGHT].mean()),
            proportional_height=float(group[col.PROPORTIONAL_HEIGHT].mean()),
            legacy_area=float(group[col.LEGACY_AREA].mean()),
            proportional_area=float(group[col.PROPORTIONAL_AREA].mean()),
        )
        for key, group in _groups(events, keys)
    ]


def rank[R: AggregateRow](
    rows: Sequence[R],
    k: int,
    min_count: int,
    ascending: bool = False,
    value: Callable[[R], float | None] = lambda r: r.difference,
) -> list[R]:
    """Top (or bottom, with *ascending*) *k* rows by *value*.

    Rows with fewer than *min_count* events, or no defined value, are left out.
    """
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    eligible = [r for r in rows if r.count >= min_count and value(r) is not None]
    excluded = len(rows) - len(eligible)
    if excluded:
        logger.debug("Excluded %d of %d groups from ranking", excluded, len(rows))
    ordered = sorted(eligible, key=lambda r: value(r), reverse=not ascending)  # type: ignore[arg-type, return-value]
    return ordered[:k]
