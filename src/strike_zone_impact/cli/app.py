import dataclasses
from datetime import date
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import pandas as pd
import typer

from strike_zone_impact.cli._logging import configure_logging
from strike_zone_impact.cli._output import (
    console,
    print_comparison,
    print_drop_report,
    print_error,
    print_fetch_report,
    print_transitions,
    print_window_progress,
    print_zone_geometry,
    print_zone_impact,
)
from strike_zone_impact.cli.factory import biometric_source, build_downloader, identity_source
from strike_zone_impact.config import AppConfig, ConfigError, load_config
from strike_zone_impact.domain.result import Err, Ok
from strike_zone_impact.domain.zone import ZoneTransition
from strike_zone_impact.export import read_table, write_table
from strike_zone_impact.ingest.loader import load_reference
from strike_zone_impact.pipeline import columns as col
from strike_zone_impact.pipeline.aggregate import (
    rank,
    transition_breakdown,
    transition_outcomes,
    zone_geometry,
    zone_impact,
)
from strike_zone_impact.pipeline.engine import run_pipeline
from strike_zone_impact.statcast.calendar import season_date_range

app = typer.Typer(name="szi", help="Strike-zone rule change impact analysis")


class GroupBy(StrEnum):
    BATTER = "batter"
    TEAM = "team"


class Metric(StrEnum):
    XWOBA = "xwoba"
    RUN_VALUE = "run-value"
    EXIT_VELO = "exit-velo"


_GROUP_KEYS: dict[GroupBy, list[str]] = {
    GroupBy.BATTER: [col.BATTER, col.BATTER_NAME],
    GroupBy.TEAM: [col.BATTING_TEAM],
}

_METRIC_COLUMNS: dict[Metric, str] = {
    Metric.XWOBA: col.XWOBA,
    Metric.RUN_VALUE: col.DELTA_RUN_EXP,
    Metric.EXIT_VELO: col.LAUNCH_SPEED,
}


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Strike-zone rule change impact analysis."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ConfigDirOpt = Annotated[Path, typer.Option("--config-dir", help="Directory containing zone.toml")]
_EnrichedOpt = Annotated[Path, typer.Option("--enriched", help="Enriched events file (.csv or .parquet)")]
_GroupByOpt = Annotated[GroupBy, typer.Option("--by", help="Group by batter or batting team")]
_MetricOpt = Annotated[Metric, typer.Option("--metric", help="Outcome metric to compare")]


def _load_app_config(config_dir: Path) -> AppConfig:
    try:
        return load_config(config_dir)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _read_events(path: Path) -> pd.DataFrame:
    match read_table(path):
        case Ok(events):
            return events
        case Err(e):
            print_error(f"{e.path}: {e.message}")
            raise typer.Exit(code=1)


def _resolve_range(start: str | None, end: str | None, season: int | None) -> tuple[date, date]:
    if season is not None:
        return season_date_range(season)
    if start is None or end is None:
        print_error("pass --season or both --start and --end")
        raise typer.Exit(code=1)
    try:
        return date.fromisoformat(start), date.fromisoformat(end)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command("fetch")
def fetch_cmd(
    out: Annotated[Path, typer.Option("--out", help="Output file (.csv or .parquet)")],
    start: Annotated[str | None, typer.Option("--start", help="First date, YYYY-MM-DD")] = None,
    end: Annotated[str | None, typer.Option("--end", help="Last date, YYYY-MM-DD")] = None,
    season: Annotated[int | None, typer.Option("--season", help="Fetch a whole regular season")] = None,
    workers: Annotated[int | None, typer.Option("--workers", help="Concurrent window fetches")] = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Fetch raw Statcast pitches week by week and export them."""
    config = _load_app_config(config_dir)
    fetch_config = config.fetch
    if workers is not None:
        if workers <= 0:
            print_error("--workers must be positive")
            raise typer.Exit(code=1)
        fetch_config = dataclasses.replace(fetch_config, max_workers=workers)

    first, last = _resolve_range(start, end, season)
    try:
        report = build_downloader(fetch_config, on_progress=print_window_progress).fetch(first, last)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_fetch_report(report)

    match write_table(report.events, out):
        case Ok(path):
            console.print(f"[bold green]Wrote[/bold green] {report.total_rows} events to {path}")
        case Err(e):
            print_error(f"{e.path}: {e.message}")
            raise typer.Exit(code=1)


@app.command("enrich")
def enrich_cmd(
    events_path: Annotated[Path, typer.Option("--events", help="Raw events file from 'fetch'")],
    out: Annotated[Path, typer.Option("--out", help="Enriched output file (.csv or .parquet)")],
    register_csv: Annotated[
        Path | None, typer.Option("--register-csv", help="Local Chadwick register CSV instead of downloading")
    ] = None,
    people_csv: Annotated[
        Path | None, typer.Option("--people-csv", help="Local Lahman People.csv instead of downloading")
    ] = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Join identities and heights, compute both zones and classify every pitch."""
    config = _load_app_config(config_dir)
    events = _read_events(events_path)

    match load_reference(identity_source(register_csv)):
        case Ok(identity_rows):
            pass
        case Err(e):
            print_error(f"identity table ({e.source_detail}): {e.message}")
            raise typer.Exit(code=1)
    match load_reference(biometric_source(people_csv)):
        case Ok(biometric_rows):
            pass
        case Err(e):
            print_error(f"biometric table ({e.source_detail}): {e.message}")
            raise typer.Exit(code=1)

    result = run_pipeline(events, identity_rows, biometric_rows, config.policy)
    print_drop_report(result.drops)

    match write_table(result.events, out):
        case Ok(path):
            console.print(f"[bold green]Wrote[/bold green] {result.drops.output_events} classified events to {path}")
        case Err(e):
            print_error(f"{e.path}: {e.message}")
            raise typer.Exit(code=1)


@app.command("rank")
def rank_cmd(
    enriched: _EnrichedOpt,
    by: _GroupByOpt = GroupBy.BATTER,
    metric: _MetricOpt = Metric.XWOBA,
    ascending: Annotated[bool, typer.Option("--ascending", help="Rank smallest differences first")] = False,
    top: Annotated[int | None, typer.Option("--top", "-k", help="Rows to show")] = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Rank groups by the proportional-minus-legacy outcome difference."""
    if top is not None and top <= 0:
        print_error("--top must be positive")
        raise typer.Exit(code=1)
    policy = _load_app_config(config_dir).policy
    events = _read_events(enriched)
    rows = zone_impact(events, _GROUP_KEYS[by], _METRIC_COLUMNS[metric], policy)
    k = top if top is not None else policy.top_k
    ranked = rank(rows, k=k, min_count=policy.min_ranking_count, ascending=ascending)
    if not ranked:
        console.print(f"No groups with at least {policy.min_ranking_count} qualifying events.")
        return
    direction = "bottom" if ascending else "top"
    print_zone_impact(ranked, f"{metric.value} difference, {direction} {len(ranked)}", by.value)


@app.command("transitions")
def transitions_cmd(
    enriched: _EnrichedOpt,
    by: _GroupByOpt = GroupBy.TEAM,
) -> None:
    """Count still-in, still-out, newly-excluded and newly-included pitches per group."""
    events = _read_events(enriched)
    print_transitions(transition_breakdown(events, _GROUP_KEYS[by]), by.value)


@app.command("outcomes")
def outcomes_cmd(
    enriched: _EnrichedOpt,
    metric: _MetricOpt = Metric.XWOBA,
    transition: Annotated[
        ZoneTransition, typer.Option("--transition", help="Transition category compared against still-in")
    ] = ZoneTransition.NEWLY_EXCLUDED,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Compare balls in play on pitches that stay in the zone against a transition category."""
    policy = _load_app_config(config_dir).policy
    events = _read_events(enriched)
    comparison = transition_outcomes(events, _METRIC_COLUMNS[metric], policy, transition)
    print_comparison(comparison, ZoneTransition.STILL_IN.value, transition.value, metric.value)


@app.command("geometry")
def geometry_cmd(
    enriched: _EnrichedOpt,
    by: _GroupByOpt = GroupBy.BATTER,
) -> None:
    """Average legacy and proportional zone size per group."""
    events = _read_events(enriched)
    print_zone_geometry(zone_geometry(events, _GROUP_KEYS[by]), by.value)
