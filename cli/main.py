"""CLI entry point — scriptura reading plan.

Usage:
  scriptura books             list the canon
  scriptura plan              show the 365-day plan
  scriptura today             today's reading and its status
  scriptura toggle Genesis-1  mark/unmark a chapter
  scriptura progress          overall completion
  scriptura reset             clear saved progress
  scriptura --help            all commands
"""

import logging
import sys
from datetime import date
from pathlib import Path

import click
from rich.table import Table

from canon.index import CanonIndex
from cli.theme import (
    app_header,
    book_table,
    command_panel,
    get_console,
    plan_table,
    progress_panel,
    success_panel,
)
from config.exceptions import ProgressSaveError, ScripturaError
from config.logging_config import setup_logging
from config.settings import Settings
from models.enums import Category, PeriodKind
from models.plan import Plan
from planner.calendar_index import period_index_for_date
from planner.generator import AUTO, generate_monthly_plan, generate_plan
from progress.store import SqliteProgressStore
from progress.tracker import ProgressTracker
from scenes.client import SceneClient

console = get_console()


def _init_logging(verbose: bool):
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    settings = Settings()
    setup_logging(level=level, log_dir=settings.log_dir, console_enabled=verbose)


def _parse_per_period(ctx, param, value):
    if value is None or value == AUTO:
        return value
    try:
        parsed = int(value)
    except ValueError:
        raise click.BadParameter("must be a positive integer or 'auto'")
    if parsed < 1:
        raise click.BadParameter("must be a positive integer or 'auto'")
    return parsed


def _build_tracker(settings: Settings, canon: CanonIndex) -> ProgressTracker:
    store = SqliteProgressStore(settings.sqlite_db_path, key=settings.progress_key)
    return ProgressTracker(canon, store)


def _build_plan(settings: Settings, canon: CanonIndex, days=None, per_period=None, monthly=False) -> Plan:
    per_period = per_period if per_period is not None else settings.units_per_period
    if monthly:
        return generate_monthly_plan(canon, per_period)
    horizon = days if days is not None else settings.plan_horizon_days
    return generate_plan(canon, horizon, per_period)


def _fail(message: str):
    console.print(f"[error]{message}[/]")
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Scriptura — read the whole Bible on a schedule.

    \b
    Examples:
      scriptura plan -d 365
      scriptura plan --monthly
      scriptura today --date 2026-03-01
      scriptura toggle Genesis-1 Genesis-2
    """
    _init_logging(verbose)


# ---------------------------------------------------------------------------
# books command
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--category", "-c", type=click.Choice([c.value for c in Category]), default=None,
              help="Only list books in this category")
def books(category):
    """List the books of the canon in order."""
    canon = CanonIndex()
    listed = canon.books_in_category(Category(category)) if category else list(canon.list_books())

    console.print(app_header())
    console.print()
    console.print(book_table(listed))
    console.print(
        f"[muted]{len(listed)} books, {sum(b.chapters for b in listed)} chapters[/]"
    )


# ---------------------------------------------------------------------------
# plan command
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--days", "-d", type=int, default=None, help="Plan horizon in days (default from settings)")
@click.option("--per-period", "-k", default=None, callback=_parse_per_period,
              help="Chapters per period, or 'auto'")
@click.option("--monthly", "-m", is_flag=True, help="Twelve monthly periods instead of days")
@click.option("--limit", "-l", type=click.IntRange(min=0), default=31,
              help="Rows to display (0 = all)")
def plan(days, per_period, monthly, limit):
    """Show the reading plan with completion marks."""
    settings = Settings()
    canon = CanonIndex()
    try:
        reading_plan = _build_plan(settings, canon, days, per_period, monthly)
    except ScripturaError as e:
        _fail(str(e))

    tracker = _build_tracker(settings, canon)

    console.print(app_header())
    console.print()
    console.print(command_panel("Reading plan", {
        "Kind": reading_plan.kind.value,
        "Periods": f"{len(reading_plan)} of {reading_plan.horizon}",
        "Per period": f"{reading_plan.units_per_period} chapters",
        "Total": f"{reading_plan.total_units} chapters",
    }))
    if reading_plan.unscheduled:
        console.print(
            f"[warning]{reading_plan.unscheduled} chapters do not fit in this horizon[/]"
        )
    console.print(plan_table(list(reading_plan.periods), tracker, limit or None))


# ---------------------------------------------------------------------------
# today command
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--date", "on_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Look up this date instead of today (YYYY-MM-DD)")
@click.option("--monthly", "-m", is_flag=True, help="Use the monthly plan")
def today(on_date, monthly):
    """Show the reading assigned to a date."""
    settings = Settings()
    canon = CanonIndex()
    lookup = on_date.date() if on_date else date.today()
    try:
        reading_plan = _build_plan(settings, canon, monthly=monthly)
        kind = PeriodKind.MONTH if monthly else PeriodKind.DAY
        index = period_index_for_date(lookup, reading_plan.horizon, kind)
    except ScripturaError as e:
        _fail(str(e))

    console.print(app_header())
    console.print()
    if index > len(reading_plan):
        console.print(f"[success]Nothing scheduled for {lookup.isoformat()}, the plan ends on day {len(reading_plan)}.[/]")
        return

    period = reading_plan.period(index)
    tracker = _build_tracker(settings, canon)

    table = Table(title=f"{period.label or 'Day ' + str(period.index)}: {period.title}",
                  border_style="dim")
    table.add_column("Chapter", style="book.name")
    table.add_column("Id", style="muted")
    table.add_column("Done", justify="center")
    for unit in period.units:
        done = "[success]✓[/]" if tracker.is_complete(unit.unit_id) else ""
        table.add_row(str(unit), unit.unit_id, done)
    console.print(table)


# ---------------------------------------------------------------------------
# toggle / complete-day commands
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("unit_ids", nargs=-1, required=True)
def toggle(unit_ids):
    """Toggle completion of chapters, e.g. 'Genesis-1' or '1 John-3'."""
    settings = Settings()
    canon = CanonIndex()
    tracker = _build_tracker(settings, canon)

    failed = False
    for unit_id in unit_ids:
        try:
            now_complete = tracker.toggle(unit_id)
        except ProgressSaveError as e:
            console.print(f"[warning]{unit_id} updated but not saved: {e}[/]")
            failed = True
            continue
        except ScripturaError as e:
            console.print(f"[error]{e}[/]")
            failed = True
            continue
        book, chapter = canon.parse_unit_id(unit_id)
        state = "[success]complete[/]" if now_complete else "[warning]not complete[/]"
        console.print(f"{book} {chapter} marked {state}")

    if failed:
        sys.exit(1)


@cli.command(name="complete-day")
@click.argument("index", type=int)
@click.option("--undo", is_flag=True, help="Mark the day's chapters incomplete instead")
def complete_day(index, undo):
    """Mark every chapter of one plan day complete."""
    settings = Settings()
    canon = CanonIndex()
    try:
        period = _build_plan(settings, canon).period(index)
        tracker = _build_tracker(settings, canon)
        changed = tracker.mark_period(period, complete=not undo)
    except ScripturaError as e:
        _fail(str(e))

    verb = "incomplete" if undo else "complete"
    console.print(success_panel(
        f"Day {period.index}",
        f"  {period.title}: {changed} chapter(s) marked {verb}",
    ))


# ---------------------------------------------------------------------------
# progress / reset commands
# ---------------------------------------------------------------------------

@cli.command()
def progress():
    """Show overall reading progress."""
    settings = Settings()
    canon = CanonIndex()
    try:
        reading_plan = _build_plan(settings, canon)
    except ScripturaError as e:
        _fail(str(e))
    tracker = _build_tracker(settings, canon)

    console.print(app_header())
    console.print()
    console.print(progress_panel(tracker.summary(reading_plan)))


@cli.command()
@click.confirmation_option(prompt="Clear all saved reading progress?")
def reset():
    """Forget every completed chapter."""
    settings = Settings()
    store = SqliteProgressStore(settings.sqlite_db_path, key=settings.progress_key)
    try:
        cleared = store.clear()
    except ScripturaError as e:
        _fail(str(e))

    if cleared:
        console.print("[success]Reading progress cleared[/]")
    else:
        console.print("[muted]No saved progress to clear[/]")


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--monthly", "-m", is_flag=True, help="Export the monthly plan")
def export(path, monthly):
    """Write the plan as JSON."""
    settings = Settings()
    canon = CanonIndex()
    try:
        reading_plan = _build_plan(settings, canon, monthly=monthly)
    except ScripturaError as e:
        _fail(str(e))

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(reading_plan.to_json(), encoding="utf-8")
    console.print(f"[success]Wrote {len(reading_plan)} periods to {path}[/]")


# ---------------------------------------------------------------------------
# scene command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("book")
@click.argument("chapter", type=int)
def scene(book, chapter):
    """Fetch the scene description renderers would show for a chapter."""
    settings = Settings()
    canon = CanonIndex()
    client = SceneClient(settings.scene_endpoint, settings.scene_timeout_seconds, canon=canon)
    try:
        description = client.fetch(book, chapter)
    except ScripturaError as e:
        _fail(str(e))

    fields = {"Summary": description.summary}
    for label, value in (
        ("Color", description.color),
        ("Geometry", description.geometry),
        ("Audio", description.audio_url),
        ("Video", description.video_url),
    ):
        if value:
            fields[label] = value
    title = f"{book} {chapter}" + (" (fallback)" if description.is_fallback else "")
    console.print(command_panel(title, fields))


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
