from typing import Any

import pandas as pd
import pytest

from strike_zone_impact.config import ZonePolicy
from strike_zone_impact.pipeline import columns as col
from strike_zone_impact.pipeline.aggregate import rank, transition_breakdown, zone_impact
from strike_zone_impact.pipeline.engine import run_pipeline

TROUT = 545361
JUDGE = 592450
ALTUVE = 514888
UNKNOWN = 111111


@pytest.fixture
def events(make_events) -> pd.DataFrame:
    return make_events(
        {"batter": TROUT, "plate_z": 2.5},
        {"batter": JUDGE, "plate_z": 3.3, "sz_top": 3.6},
        {"batter": ALTUVE, "plate_z": 2.0},
        {"batter": UNKNOWN},
        {"batter": TROUT, "sz_bot": None},
        {"batter": TROUT, "sz_bot": 3.0, "sz_top": 2.0},
    )


class TestRunPipeline:
    def test_drop_accounting(self, events, register_rows, people_rows) -> None:
        people = [r for r in people_rows if r["bbref_id"] != "altuvjo01"]

        result = run_pipeline(events, register_rows, people)

        drops = result.drops
        assert drops.input_events == 6
        assert drops.missing_identity == 1
        assert drops.missing_height == 1
        assert drops.missing_zone_bounds == 1
        assert drops.malformed_geometry == 1
        assert drops.output_events == 2
        assert drops.input_events == drops.total_dropped + drops.output_events

    def test_subject_without_height_contributes_no_rows(self, events, register_rows, people_rows) -> None:
        people = [r for r in people_rows if r["bbref_id"] != "altuvjo01"]
        result = run_pipeline(events, register_rows, people)
        assert ALTUVE not in result.events["batter"].tolist()

    def test_biometric_for_unseen_subject_contributes_no_rows(self, make_events, register_rows) -> None:
        people = [{"bbref_id": "troutmi01", "height": "74"}, {"bbref_id": "nobody01", "height": "70"}]
        result = run_pipeline(make_events({"batter": TROUT}), register_rows, people)
        assert result.events["batter"].tolist() == [TROUT]

    def test_enriched_columns(self, events, register_rows, people_rows) -> None:
        result = run_pipeline(events, register_rows, people_rows)
        trout = result.events[result.events["batter"] == TROUT].iloc[0]
        assert trout["batter_name"] == "Trout, Mike"
        assert trout["batter_bbref_id"] == "troutmi01"
        assert trout["batting_team"] == "LAA"
        assert trout["height_in"] == 74.0
        assert trout["proportional_zone_height"] == pytest.approx(0.265 * 74)
        assert trout["legacy_in_zone"]
        assert trout["zone_transition"] == "still_in"
        # pass-through columns survive
        assert trout["pitch_type"] == "FF"

    def test_tall_batter_high_pitch_newly_excluded(self, make_events, register_rows, people_rows) -> None:
        # 42.6in sits under the 43.2in legacy top but over 0.535 * 79in
        events = make_events({"batter": JUDGE, "plate_z": 3.55, "sz_top": 3.6})
        result = run_pipeline(events, register_rows, people_rows)
        judge = result.events.iloc[0]
        assert judge["plate_z_in"] == pytest.approx(42.6)
        assert judge["legacy_in_zone"]
        assert not judge["proportional_in_zone"]
        assert judge["zone_transition"] == "newly_excluded"

    def test_input_not_modified(self, events, register_rows, people_rows) -> None:
        before = events.copy()
        run_pipeline(events, register_rows, people_rows)
        pd.testing.assert_frame_equal(events, before)

    def test_deterministic_output(self, events, register_rows, people_rows, tmp_path) -> None:
        first = run_pipeline(events, register_rows, people_rows).events
        second = run_pipeline(events, register_rows, people_rows).events
        first.to_csv(tmp_path / "a.csv", index=False)
        second.to_csv(tmp_path / "b.csv", index=False)
        assert (tmp_path / "a.csv").read_bytes() == (tmp_path / "b.csv").read_bytes()

    def test_empty_events(self, register_rows, people_rows) -> None:
        result = run_pipeline(pd.DataFrame(), register_rows, people_rows)
        assert result.events.empty
        assert result.drops.output_events == 0

    def test_empty_events_still_carry_every_column(self, register_rows, people_rows) -> None:
        result = run_pipeline(pd.DataFrame(), register_rows, people_rows)

        for column in (*col.SOURCE_COLUMNS, *col.DERIVED_COLUMNS):
            assert column in result.events.columns
        rows = zone_impact(result.events, [col.BATTING_TEAM], col.XWOBA, ZonePolicy())
        assert rank(rows, k=10, min_count=0) == []
        assert transition_breakdown(result.events, [col.BATTING_TEAM]) == []

    def test_custom_policy(self, make_events, register_rows, people_rows) -> None:
        policy = ZonePolicy(bottom_fraction=0.3, top_fraction=0.5)
        result = run_pipeline(make_events({"batter": TROUT}), register_rows, people_rows, policy)
        assert result.events.iloc[0]["proportional_zone_bottom"] == pytest.approx(0.3 * 74)

    def test_reference_rows_may_be_iterators(self, make_events, register_rows, people_rows) -> None:
        rows: Any = iter(register_rows)
        result = run_pipeline(make_events({"batter": TROUT}), rows, iter(people_rows))
        assert result.drops.output_events == 1
