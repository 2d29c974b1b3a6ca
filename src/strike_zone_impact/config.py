import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_CONFIG_FILENAME = "zone.toml"


class ConfigError(Exception):
    """Raised when zone.toml is invalid."""


@dataclass(frozen=True)
class ZonePolicy:
    """The rule being studied: proportional zone fractions and ranking policy."""

    bottom_fraction: float = 0.27
    top_fraction: float = 0.535
    plate_half_width: float = 8.5
    plate_width: float = 17.0
    feet_to_inches: float = 12.0
    min_ranking_count: int = 300
    top_k: int = 10
    qualifying_outcome: str = "hit_into_play"


@dataclass(frozen=True)
class FetchConfig:
    window_days: int = 7
    max_workers: int = 4
    max_attempts: int = 3
    base_delay: float = 2.0
    max_delay: float = 60.0


@dataclass(frozen=True)
class AppConfig:
    policy: ZonePolicy = ZonePolicy()
    fetch: FetchConfig = FetchConfig()


# -- Validation --------------------------------------------------------------


def validate_policy(policy: ZonePolicy) -> None:
    if not 0 <= policy.bottom_fraction < policy.top_fraction:
        raise ConfigError(
            f"policy: bottom_fraction ({policy.bottom_fraction}) must be >= 0 and below "
            f"top_fraction ({policy.top_fraction})"
        )
    if policy.plate_half_width <= 0:
        raise ConfigError(f"policy: plate_half_width must be > 0, got {policy.plate_half_width}")
    if policy.plate_width != 2 * policy.plate_half_width:
        raise ConfigError(
            f"policy: plate_width ({policy.plate_width}) must equal 2 * plate_half_width ({policy.plate_half_width})"
        )
    if policy.feet_to_inches <= 0:
        raise ConfigError(f"policy: feet_to_inches must be > 0, got {policy.feet_to_inches}")
    if policy.min_ranking_count < 0:
        raise ConfigError(f"policy: min_ranking_count must be >= 0, got {policy.min_ranking_count}")
    if policy.top_k <= 0:
        raise ConfigError(f"policy: top_k must be > 0, got {policy.top_k}")


def validate_fetch(fetch: FetchConfig) -> None:
    if fetch.window_days <= 0:
        raise ConfigError(f"fetch: window_days must be > 0, got {fetch.window_days}")
    if fetch.max_workers <= 0:
        raise ConfigError(f"fetch: max_workers must be > 0, got {fetch.max_workers}")
    if fetch.max_attempts <= 0:
        raise ConfigError(f"fetch: max_attempts must be > 0, got {fetch.max_attempts}")
    if fetch.base_delay < 0 or fetch.max_delay < fetch.base_delay:
        raise ConfigError(f"fetch: need 0 <= base_delay <= max_delay, got {fetch.base_delay}, {fetch.max_delay}")


# -- Parsing -----------------------------------------------------------------


def _parse_section[T](cls: type[T], raw: dict[str, Any], section: str) -> T:
    fields = {f.name: f for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(raw) - set(fields))
    if unknown:
        raise ConfigError(f"{section}: unrecognized keys {', '.join(unknown)}")

    defaults = cls()
    values: dict[str, Any] = {}
    for name, value in raw.items():
        expected = type(getattr(defaults, name))
        if expected is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(f"{section}: '{name}' must be {expected.__name__}, got {value!r}")
        values[name] = value
    return cls(**values)


def parse_config(raw: dict[str, Any]) -> AppConfig:
    unknown = sorted(set(raw) - {"policy", "fetch"})
    if unknown:
        raise ConfigError(f"unrecognized sections {', '.join(unknown)}")

    policy = _parse_section(ZonePolicy, raw.get("policy", {}), "policy")
    fetch = _parse_section(FetchConfig, raw.get("fetch", {}), "fetch")
    validate_policy(policy)
    validate_fetch(fetch)
    return AppConfig(policy=policy, fetch=fetch)


# -- TOML loading ------------------------------------------------------------


def load_config(config_dir: Path) -> AppConfig:
    """Load zone.toml from *config_dir*; defaults apply when the file is absent."""
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return AppConfig()

    with toml_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{toml_path}: {e}") from e

    return parse_config(raw)
