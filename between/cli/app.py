"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import pendulum
import typer
from pendulum import Date
from rich.console import Console
from rich.table import Table

from ..adapters.json_calendar_source import JsonCalendarSource, StaticCalendarSource
from ..config import AppConfig, load_config
from ..domain.exceptions import BetweenError
from ..domain.models import Segment
from ..logging_config import configure_logging
from ..services.day_timeline import DayTimeline, DayTimelineService, gap_size_label

app = typer.Typer(
    name="between",
    help="Show the free spaces between the busy blocks of a day",
    add_completion=False
)

console = Console()


def _determine_date(
    *,
    service: DayTimelineService,
    date_option: Optional[str],
    today_flag: bool,
    tomorrow: bool,
    yesterday: bool,
) -> Date:
    """
    Resolve the day to show from shortcut flags or an explicit date.
    """
    if sum([bool(date_option), today_flag, tomorrow, yesterday]) > 1:
        console.print("[red]Fehler: --date, --today, --tomorrow und --yesterday schließen sich gegenseitig aus.[/red]")
        raise typer.Exit(1)

    today = service.today()

    if today_flag:
        return today

    if tomorrow:
        return service.next_day(today)

    if yesterday:
        return service.previous_day(today)

    if date_option:
        try:
            return pendulum.from_format(date_option, "YYYY-MM-DD", tz=service.timezone).date()
        except Exception as e:
            console.print(f"[red]Fehler beim Parsen des Datums: {e}[/red]")
            raise typer.Exit(1)

    return today


def _build_service(config: AppConfig, events: Optional[Path]) -> DayTimelineService:
    events_file = events or config.calendar.events_file

    if events_file is None:
        source = StaticCalendarSource()
    else:
        source = JsonCalendarSource(
            events_file=events_file,
            timezone=config.timezone,
            include_all_day=config.calendar.include_all_day
        )

    return DayTimelineService.from_config(config, source)


def _format_minutes(minutes: float) -> str:
    hours, rest = divmod(int(round(minutes)), 60)
    if hours:
        return f"{hours} Std. {rest} Min." if rest else f"{hours} Std."
    return f"{rest} Min."


def _format_end(segment: Segment) -> str:
    end = segment.end
    if end.hour == 0 and end.minute == 0 and end.date() > segment.start.date():
        return "24:00"
    return end.format("HH:mm")


def _render_timeline(timeline: DayTimeline, free_only: bool) -> None:
    segments = timeline.free_segments() if free_only else timeline.segments

    table = Table(
        title=timeline.date.format("dddd, DD.MM.YYYY"),
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Zeitraum", style="bold")
    table.add_column("Status")
    table.add_column("Dauer", justify="right")
    table.add_column("Lücke", style="dim")

    for segment in segments:
        end_str = _format_end(segment)
        if segment.is_free:
            status = "[green]frei[/green]"
            label = gap_size_label(segment)
        else:
            status = "[dim]belegt[/dim]"
            label = ""
        table.add_row(
            str(segment.tag),
            f"{segment.start.format('HH:mm')} – {end_str}",
            status,
            _format_minutes(segment.duration_minutes()),
            label
        )

    console.print()
    console.print(table)
    console.print(
        f"\n[bold green]Frei:[/bold green] {_format_minutes(timeline.total_free_minutes())}"
        f"   [bold]Belegt:[/bold] {_format_minutes(timeline.total_busy_minutes())}\n"
    )


@app.command()
def show(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    events: Annotated[Optional[Path], typer.Option("--events", "-e", help="JSON file with calendar events (overrides config).")] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Day to show (YYYY-MM-DD). Defaults to today.")] = None,
    today: Annotated[bool, typer.Option("--today", help="Show today.")] = False,
    tomorrow: Annotated[bool, typer.Option("--tomorrow", help="Show tomorrow.")] = False,
    yesterday: Annotated[bool, typer.Option("--yesterday", help="Show yesterday.")] = False,
    free_only: Annotated[bool, typer.Option("--free-only", help="List free gaps only.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Show the free and busy segments of a day.

    Examples:

        # Today, with events from the configured file
        between show

        # A specific day from an events file
        between show --date 2024-11-25 --events events.json

        # Only the gaps of tomorrow
        between show --tomorrow --free-only
    """
    if verbose:
        configure_logging(logging.DEBUG)

    pendulum.set_locale("de")

    try:
        config = load_config(config_file)
        service = _build_service(config, events)

        day = _determine_date(
            service=service,
            date_option=date,
            today_flag=today,
            tomorrow=tomorrow,
            yesterday=yesterday
        )

        timeline = service.load_day(day)

        if not timeline.free_segments():
            console.print(
                "\n[yellow]⚠ Keine freien Lücken an diesem Tag.[/yellow]\n"
            )
            if free_only:
                return

        _render_timeline(timeline, free_only=free_only)

    except FileNotFoundError as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)

    except (BetweenError, ValueError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]between[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
