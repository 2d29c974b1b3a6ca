from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from strike_zone_impact.domain.aggregate import AggregateRow, Comparison, TransitionCounts, ZoneGeometrySummary
from strike_zone_impact.pipeline.types import DropReport
from strike_zone_impact.statcast.models import FetchReport, WindowResult

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _fmt(value: float | None, digits: int = 3) -> str:
    return "no data" if value is None else f"{value:.{digits}f}"


def _fmt_signed(value: float | None, digits: int = 3) -> str:
    return "no data" if value is None else f"{value:+.{digits}f}"


def _fmt_key(key: tuple[object, ...]) -> str:
    return " / ".join(str(k) for k in key)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_window_progress(result: WindowResult) -> None:
    status = "[green]OK[/green]" if result.success else "[red]FAIL[/red]"
    console.print(f"  {result.window.label} {status} ({result.row_count} rows)")


def print_fetch_report(report: FetchReport) -> None:
    table = Table(title="Fetch Summary")
    table.add_column("Window")
    table.add_column("Status")
    table.add_column("Rows", justify="right")
    table.add_column("Error")
    for w in report.windows:
        if not w.success:
            status = "[red]Failed[/red]"
        elif w.empty:
            status = "[yellow]Empty[/yellow]"
        else:
            status = "[green]OK[/green]"
        table.add_row(w.window.label, status, str(w.row_count), w.error or "")
    console.print(table)
    console.print(f"Total rows: {report.total_rows} ({len(report.failures)} failed windows)")


def print_drop_report(drops: DropReport) -> None:
    table = Table(title="Pipeline Accounting")
    table.add_column("Stage")
    table.add_column("Events", justify="right")
    for label, count in drops.as_rows():
        table.add_row(label, str(count))
    console.print(table)


def print_zone_impact(rows: Sequence[AggregateRow], title: str, group_label: str) -> None:
    table = Table(title=title)
    table.add_column(group_label)
    table.add_column("BIP", justify="right")
    table.add_column("Legacy", justify="right")
    table.add_column("Proportional", justify="right")
    table.add_column("Diff", justify="right")
    table.add_column("p", justify="right")
    table.add_column("Significance")
    for r in rows:
        table.add_row(
            _fmt_key(r.key),
            str(r.count),
            _fmt(r.legacy_mean),
            _fmt(r.proportional_mean),
            _fmt_signed(r.difference),
            _fmt(r.p_value, 4),
            r.significance.value,
        )
    console.print(table)


def print_comparison(comparison: Comparison, left_label: str, right_label: str, metric: str) -> None:
    console.print(f"[bold]{metric}[/bold]: {left_label} vs {right_label}")
    console.print(f"  {left_label}: {_fmt(comparison.left_mean)} (n={comparison.left_count})")
    console.print(f"  {right_label}: {_fmt(comparison.right_mean)} (n={comparison.right_count})")
    console.print(f"  Difference: {_fmt_signed(comparison.difference)} ({comparison.significance.value})")


def print_transitions(counts: Sequence[TransitionCounts], group_label: str) -> None:
    table = Table(title="Zone Transitions")
    table.add_column(group_label)
    table.add_column("Still in", justify="right")
    table.add_column("Still out", justify="right")
    table.add_column("Newly excluded", justify="right")
    table.add_column("Newly included", justify="right")
    table.add_column("Total", justify="right")
    for c in counts:
        table.add_row(
            _fmt_key(c.key),
            str(c.still_in),
            str(c.still_out),
            str(c.newly_excluded),
            str(c.newly_included),
            str(c.total),
        )
    console.print(table)


def print_zone_geometry(rows: Sequence[ZoneGeometrySummary], group_label: str) -> None:
    table = Table(title="Zone Size (inches)")
    table.add_column(group_label)
    table.add_column("Pitches", justify="right")
    table.add_column("Legacy height", justify="right")
    table.add_column("Proportional height", justify="right")
    table.add_column("Legacy area", justify="right")
    table.add_column("Proportional area", justify="right")
    table.add_column("Area diff", justify="right")
    for r in rows:
        table.add_row(
            _fmt_key(r.key),
            str(r.count),
            _fmt(r.legacy_height, 2),
            _fmt(r.proportional_height, 2),
            _fmt(r.legacy_area, 1),
            _fmt(r.proportional_area, 1),
            _fmt_signed(r.area_difference, 1),
        )
    console.print(table)
