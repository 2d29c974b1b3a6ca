from collections.abc import Callable
from typing import Any

import pandas as pd
import pytest

TROUT = 545361
JUDGE = 592450
ALTUVE = 514888

REGISTER_ROWS: list[dict[str, Any]] = [
    {"key_mlbam": str(TROUT), "key_bbref": "troutmi01", "name_last": "Trout", "name_first": "Mike"},
    {"key_mlbam": str(JUDGE), "key_bbref": "judgeaa01", "name_last": "Judge", "name_first": "Aaron"},
    {"key_mlbam": str(ALTUVE), "key_bbref": "altuvjo01", "name_last": "Altuve", "name_first": "Jose"},
]

PEOPLE_ROWS: list[dict[str, Any]] = [
    {"bbref_id": "troutmi01", "height": "74"},
    {"bbref_id": "judgeaa01", "height": "79"},
    {"bbref_id": "altuvjo01", "height": "66"},
]


def pitch(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "batter": TROUT,
        "sz_bot": 1.6,
        "sz_top": 3.4,
        "plate_x": 0.0,
        "plate_z": 2.5,
        "description": "hit_into_play",
        "events": "single",
        "estimated_woba_using_speedangle": 0.4,
        "delta_run_exp": 0.1,
        "launch_speed": 95.0,
        "inning_topbot": "Top",
        "home_team": "NYY",
        "away_team": "LAA",
        "game_pk": 745000,
        "at_bat_number": 1,
        "pitch_type": "FF",
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_events() -> Callable[..., pd.DataFrame]:
    def _make(*rows: dict[str, Any]) -> pd.DataFrame:
        return pd.DataFrame([pitch(**r) for r in rows])

    return _make


@pytest.fixture
def register_rows() -> list[dict[str, Any]]:
    return [dict(r) for r in REGISTER_ROWS]


@pytest.fixture
def people_rows() -> list[dict[str, Any]]:
    return [dict(r) for r in PEOPLE_ROWS]
