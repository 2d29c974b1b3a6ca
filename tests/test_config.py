from pathlib import Path

import pytest

from strike_zone_impact.config import AppConfig, ConfigError, FetchConfig, ZonePolicy, load_config, parse_config


def _write(tmp_path: Path, text: str) -> Path:
    (tmp_path / "zone.toml").write_text(text)
    return tmp_path


class TestDefaults:
    def test_policy_constants(self) -> None:
        policy = ZonePolicy()
        assert policy.bottom_fraction == 0.27
        assert policy.top_fraction == 0.535
        assert policy.plate_half_width == 8.5
        assert policy.plate_width == 17.0
        assert policy.min_ranking_count == 300
        assert policy.top_k == 10
        assert policy.qualifying_outcome == "hit_into_play"

    def test_fetch_defaults_to_weekly_windows(self) -> None:
        assert FetchConfig().window_days == 7

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == AppConfig()


class TestLoadConfig:
    def test_overrides_policy_and_fetch(self, tmp_path: Path) -> None:
        config_dir = _write(
            tmp_path,
            "[policy]\nbottom_fraction = 0.25\nmin_ranking_count = 100\n\n[fetch]\nmax_workers = 1\n",
        )
        config = load_config(config_dir)
        assert config.policy.bottom_fraction == 0.25
        assert config.policy.top_fraction == 0.535
        assert config.policy.min_ranking_count == 100
        assert config.fetch.max_workers == 1

    def test_integer_accepted_for_float_field(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, "[policy]\nplate_half_width = 9\nplate_width = 18\n"))
        assert config.policy.plate_half_width == 9.0
        assert isinstance(config.policy.plate_half_width, float)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(_write(tmp_path, "[policy\n"))


class TestValidation:
    def test_unknown_section(self) -> None:
        with pytest.raises(ConfigError, match="unrecognized sections"):
            parse_config({"charts": {}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="unrecognized keys"):
            parse_config({"policy": {"bottom": 0.3}})

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError, match="must be float"):
            parse_config({"policy": {"top_fraction": "high"}})

    def test_bool_is_not_an_int(self) -> None:
        with pytest.raises(ConfigError):
            parse_config({"policy": {"top_k": True}})

    def test_bottom_must_be_below_top(self) -> None:
        with pytest.raises(ConfigError, match="bottom_fraction"):
            parse_config({"policy": {"bottom_fraction": 0.6}})

    def test_plate_width_must_match_half_width(self) -> None:
        with pytest.raises(ConfigError, match="plate_width"):
            parse_config({"policy": {"plate_width": 18.0}})

    def test_window_days_positive(self) -> None:
        with pytest.raises(ConfigError, match="window_days"):
            parse_config({"fetch": {"window_days": 0}})

    def test_delay_bounds(self) -> None:
        with pytest.raises(ConfigError, match="base_delay"):
            parse_config({"fetch": {"base_delay": 10.0, "max_delay": 1.0}})
