"""Command-line interface for toggl-export."""

import logging
import sys
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from toggl_export import __version__
from toggl_export.config import Config, TogglExportConfig, validate_value
from toggl_export.export import AggregatedEntry, ExportEngine, format_duration, group_by_day, total_duration
from toggl_export.timetracker import TimeTrackerClient
from toggl_export.toggl import TogglClient
from toggl_export.utils import get_logger, setup_logging

app = typer.Typer(help="Export toggl.com time entries to the scalableminds time tracker.")
console = Console()
logger = get_logger(__name__)

COMMENT_WIDTH = 50
DEFAULT_RANGE_DAYS = 6


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        console.print("[red]Invalid date format. Use YYYY-MM-DD[/red]")
        raise typer.Exit(code=1)


def resolve_date_range(since: Optional[str], until: Optional[str], today: date | None = None) -> tuple[date, date]:
    """Resolve the --since/--until options.

    Args:
        since: First day as YYYY-MM-DD, defaults to a week before ``until``.
        until: Last day as YYYY-MM-DD, defaults to today.
        today: Reference day for the defaults.

    Returns:
        The inclusive (since, until) range.
    """
    until_dt = _parse_date(until) if until else (today or date.today())
    since_dt = _parse_date(since) if since else until_dt - timedelta(days=DEFAULT_RANGE_DAYS)

    if since_dt > until_dt:
        console.print("[red]--since must not be after --until[/red]")
        raise typer.Exit(code=1)
    return since_dt, until_dt


def _format_day(day: date) -> str:
    return f"{day.day} {day:%B %Y}"


def print_entries(entries: list[AggregatedEntry]) -> None:
    """Print entries as one table per day, followed by the total."""
    for day, day_entries in group_by_day(entries):
        table = Table(title=_format_day(day), title_style="bold", title_justify="left", box=None)
        table.add_column("Duration", justify="right", style="magenta")
        table.add_column("Issue", justify="right", style="cyan")
        table.add_column("Comment", max_width=COMMENT_WIDTH, overflow="ellipsis", no_wrap=True)
        table.add_column("Repository", style="green")

        for entry in day_entries:
            table.add_row(
                entry.duration_label,
                f"#{entry.issue_number}",
                escape(entry.comment),
                escape(f"[{entry.repository}]"),
            )

        console.print()
        console.print(table)

    console.print(f"\n[bold]Total time: {format_duration(total_duration(entries))}[/bold]")


def _shorten(comment: str) -> str:
    text = Text(comment)
    text.truncate(COMMENT_WIDTH, overflow="ellipsis")
    return text.plain


def _report_entry(entry: AggregatedEntry, error: Exception | None) -> None:
    status = "[green]OK[/green]" if error is None else f"[red]{escape(str(error))}[/red]"
    console.print(
        f"Logging {entry.duration_label} on #{entry.issue_number} {escape(_shorten(entry.comment))} [ {status} ]",
        highlight=False,
    )


@app.command()
def export(
    since: Optional[str] = typer.Option(
        None,
        "--since",
        "-s",
        help="Only export entries logged on or after that date (YYYY-MM-DD). Defaults to until - 6 days.",
    ),
    until: Optional[str] = typer.Option(
        None,
        "--until",
        "-u",
        help="Only export entries logged on or before that date (YYYY-MM-DD). Defaults to today.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be logged without submitting anything.",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Submit without asking for confirmation.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-export/",
    ),
) -> None:
    """Export Toggl time entries to the time tracker."""
    setup_logging(
        log_level=logging.DEBUG if verbose else logging.INFO,
        config_dir=config_dir,
        console=console,
    )
    logger.info(f"toggl-export v{__version__}")

    since_dt, until_dt = resolve_date_range(since, until)

    config = Config(config_dir).load()
    if config is None:
        console.print("[yellow]toggl-export is not configured yet.[/yellow]")
        console.print("Run: toggl-export configure")
        raise typer.Exit(code=1)

    try:
        with TogglClient(config.toggl_api_token) as toggl_client, TimeTrackerClient(
            config.time_tracker_session
        ) as timetracker_client:
            engine = ExportEngine(toggl_client, timetracker_client, config.toggl_workspace_id)

            with console.status(
                f"Looking for time entries from {_format_day(since_dt)} until {_format_day(until_dt)}"
            ):
                entries = engine.collect(since_dt, until_dt)

            if not entries:
                console.print("\nLooks like you didn't work at all. Shame on you!")
                raise typer.Exit(code=0)

            console.print("\nLooks like you actually did some work.")
            print_entries(entries)

            if dry_run:
                console.print("\n[bold cyan]DRY RUN[/bold cyan], nothing will be logged.")
            elif not yes and not Confirm.ask("\nDoes that sound about right?", default=False):
                console.print("Goodbye then.")
                raise typer.Exit(code=0)

            console.print("\nHere we go:")
            result = engine.submit(entries, dry_run=dry_run, on_entry=_report_entry)

    except typer.Exit:
        raise
    except httpx.HTTPError as e:
        logger.error(f"API request failed: {e}", exc_info=True)
        console.print(f"[red]Error: API request failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if result.errors:
        console.print("\n[red]Errors:[/red]")
        for error in result.errors:
            console.print(f"  - {error}")
        raise typer.Exit(code=1)

    console.print("\nDone.")


def _ask_valid(field: str, prompt: str, default: Optional[str]) -> str:
    """Prompt until the answer is a valid value for a config field."""
    while True:
        value = Prompt.ask(prompt, default=default) if default else Prompt.ask(prompt)
        try:
            validate_value(field, value)
        except ValidationError:
            console.print(f"[red]Invalid {field.replace('_', ' ')}.[/red]")
            continue
        return value


@app.command()
def configure(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-export/",
    ),
) -> None:
    """Configure Toggl and time tracker credentials."""
    setup_logging(config_dir=config_dir, console=console)

    config = Config(config_dir)
    previous = config.load_raw()

    console.print("[bold cyan]toggl-export Configuration[/bold cyan]\n")

    token = _ask_valid("toggl_api_token", "Enter your toggl.com API token", previous.get("toggl_api_token"))
    workspace_id = _ask_valid(
        "toggl_workspace_id",
        "Enter your toggl.com workspace id",
        str(previous["toggl_workspace_id"]) if previous.get("toggl_workspace_id") else None,
    )
    session = _ask_valid(
        "time_tracker_session",
        "Enter your time tracker session id",
        previous.get("time_tracker_session"),
    )

    config.save(
        TogglExportConfig(
            toggl_api_token=token,
            toggl_workspace_id=workspace_id,
            time_tracker_session=session,
        )
    )
    console.print("[green]Config updated.[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"toggl-export v{__version__}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
