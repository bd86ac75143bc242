"""Rich terminal reporter: file tables, hunk line states, stats."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitparse.git.models import (
    FileChangeRecord,
    FileStatus,
    Hunk,
    HunkLineState,
    ParsedDiff,
    ParsedHunks,
    ShortStat,
)

_STATE_STYLE = {
    HunkLineState.ADDED: "green",
    HunkLineState.REMOVED: "red",
    HunkLineState.CHANGED: "yellow",
    HunkLineState.UNCHANGED: "dim",
}

_STATUS_STYLE = {
    FileStatus.ADDED: "bold green",
    FileStatus.DELETED: "bold red",
    FileStatus.RENAMED: "bold cyan",
    FileStatus.COPIED: "bold cyan",
    FileStatus.MODIFIED: "bold yellow",
}


def _status_pill(status: FileStatus) -> Text:
    return Text(f" {status.value} ", style=_STATUS_STYLE.get(status, "bold"))


def _print_hunk(console: Console, hunk: Hunk) -> None:
    table = Table(title=Text(hunk.header), title_justify="left", border_style="dim", show_header=True)
    table.add_column("Line", justify="right", style="green")
    table.add_column("State", width=10)
    table.add_column("Previous")
    table.add_column("Current")
    for line_no, line in hunk.lines.items():
        table.add_row(
            str(line_no),
            Text(line.state.value, style=_STATE_STYLE[line.state]),
            Text(line.previous or ""),
            Text(line.current or ""),
        )
    console.print(table)


def render_diff(result: ParsedDiff, *, show_lines: bool = True, console: Optional[Console] = None) -> None:
    """Print a parsed multi-file diff."""
    console = console or Console()

    if not result.files:
        console.print("[dim]No file diffs found.[/dim]")
        return

    table = Table(title="Files", show_lines=False, title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", width=8)
    table.add_column("Path", style="magenta")
    table.add_column("From", style="cyan")
    table.add_column("Hunks", justify="right")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")
    for f in result.files:
        table.add_row(
            _status_pill(f.status),
            Text(f.path),
            Text(f.original_path or ""),
            str(len(f.hunks)),
            str(f.additions),
            str(f.deletions),
        )
    console.print(table)

    if show_lines:
        for f in result.files:
            console.print()
            console.print(Text(f.path, style="bold magenta"))
            for hunk in f.hunks:
                _print_hunk(console, hunk)

    render_short_stat(result.stats(), console=console)


def render_hunks(result: Optional[ParsedHunks], *, console: Optional[Console] = None) -> None:
    console = console or Console()
    if result is None or not result.hunks:
        console.print("[dim]No hunks found.[/dim]")
        return
    for hunk in result.hunks:
        _print_hunk(console, hunk)


def render_records(
    records: Optional[Sequence[FileChangeRecord]], *, console: Optional[Console] = None
) -> None:
    """Print name-status or apply-summary records."""
    console = console or Console()
    if not records:
        console.print("[dim]No file changes found.[/dim]")
        return

    with_stats = any(r.stats is not None for r in records)
    table = Table(title="File changes", title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", width=8)
    table.add_column("Path", style="magenta")
    table.add_column("From", style="cyan")
    if with_stats:
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")

    for r in records:
        row = [_status_pill(r.status), Text(r.path), Text(r.original_path or "")]
        if with_stats:
            row += [
                str(r.stats.additions) if r.stats else "",
                str(r.stats.deletions) if r.stats else "",
            ]
        table.add_row(*row)
    console.print(table)


def render_short_stat(stat: Optional[ShortStat], *, console: Optional[Console] = None) -> None:
    console = console or Console()
    if stat is None:
        console.print("[dim]No summary found.[/dim]")
        return
    console.print()
    console.print(f"[dim]Files changed:[/dim]  {stat.files}")
    console.print(f"[dim]Insertions:[/dim]     [green]+{stat.additions}[/green]")
    console.print(f"[dim]Deletions:[/dim]      [red]-{stat.deletions}[/red]")
