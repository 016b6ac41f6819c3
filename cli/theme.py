"""Unified Rich theme and reusable UI helper functions for the CLI."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.theme import Theme

SCRIPTURA_THEME = Theme({
    "app.title": "bold",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "info": "blue",
    "muted": "dim",
    "accent": "cyan",
    "stat.label": "dim",
    "stat.value": "bold",
    "period.num": "blue",
    "book.name": "bold cyan",
})

_CATEGORY_STYLES = {
    "pentateuch": "yellow",
    "history": "green",
    "poetry": "magenta",
    "prophets": "red",
    "gospels": "cyan",
    "epistles": "blue",
    "apocalypse": "bold red",
}


def get_console() -> Console:
    """Return a Console instance with the scriptura theme applied."""
    return Console(theme=SCRIPTURA_THEME)


def app_header(title: str = "scriptura") -> Rule:
    """Return a Rule element for the application header banner."""
    return Rule(title=f"[bold]{title}[/]", style="dim")


def command_panel(title: str, fields: dict[str, str]) -> Panel:
    """Return a Panel displaying command parameters.

    Args:
        title: Panel title (e.g. "Reading plan").
        fields: Ordered dict of label -> value pairs.
    """
    lines = []
    for label, value in fields.items():
        lines.append(f"  [stat.label]{label}:[/] [stat.value]{value}[/]")
    body = "\n".join(lines)
    return Panel(body, title=f"[bold]{title}[/]", box=box.ROUNDED, border_style="dim", padding=(0, 2))


def success_panel(title: str, body: str) -> Panel:
    """Return a green-bordered Panel for success results."""
    return Panel(body, title=f"[success]{title}[/]", box=box.ROUNDED, border_style="green", padding=(0, 2))


def progress_bar(percentage: int, width: int = 30) -> str:
    filled = round(width * percentage / 100)
    return f"[success]{'█' * filled}[/][muted]{'░' * (width - filled)}[/] {percentage}%"


def progress_panel(summary) -> Panel:
    """Return a Panel with aggregate progress stats.

    Args:
        summary: ProgressSummary with unit and period counts.
    """
    next_text = f"Period {summary.next_period}" if summary.next_period else "[success]finished[/]"
    body = (
        f"  {progress_bar(summary.percentage)}\n"
        f"  [stat.label]Chapters:[/] [stat.value]{summary.completed_units}/{summary.total_units}[/]  "
        f"[muted]|[/]  [stat.label]Periods:[/] [stat.value]{summary.completed_periods}/{summary.total_periods}[/]  "
        f"[muted]|[/]  [stat.label]Next:[/] {next_text}"
    )
    return Panel(body, title="[bold]Progress[/]", box=box.ROUNDED, border_style="dim", padding=(0, 2))


def book_table(books: list) -> Table:
    """Build a Rich Table of canon books.

    Args:
        books: List of Book objects.
    """
    table = Table(box=box.ROUNDED, border_style="dim", show_header=True, padding=(0, 1))
    table.add_column("#", style="muted", justify="right")
    table.add_column("Book", style="book.name")
    table.add_column("Chapters", justify="right")
    table.add_column("Category")
    table.add_column("Theme", style="muted")

    for i, b in enumerate(books, start=1):
        style = _CATEGORY_STYLES.get(b.category.value, "white")
        table.add_row(
            str(i),
            b.name,
            str(b.chapters),
            f"[{style}]{b.category.value}[/]",
            b.theme.value,
        )
    return table


def plan_table(periods: list, tracker=None, limit: int | None = None) -> Table:
    """Build a Rich Table of plan periods, with completion marks if a tracker is given."""
    table = Table(box=box.ROUNDED, border_style="dim", show_header=True, padding=(0, 1))
    table.add_column("Period", style="period.num", justify="right")
    table.add_column("Reading")
    table.add_column("Chapters", justify="right", style="muted")
    if tracker is not None:
        table.add_column("Done", justify="center")

    shown = periods if limit is None else periods[:limit]
    for p in shown:
        label = p.label or str(p.index)
        row = [label, p.title, str(len(p.units))]
        if tracker is not None:
            row.append("[success]✓[/]" if tracker.period_completion(p) else "")
        table.add_row(*row)

    if limit is not None and len(periods) > limit:
        table.add_row(f"[muted]+{len(periods) - limit} more[/]", "", "", *([""] if tracker is not None else []))
    return table
