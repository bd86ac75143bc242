"""gitparse CLI: Typer application that parses git output read from a file or stdin."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gitparse import __version__

app = typer.Typer(
    name="gitparse",
    help="Turn git diff, name-status, apply and shortstat output into structured data.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

_FILE_HELP = "File with git output, or - for stdin"
_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to .gitparse.toml")
_FORMAT_OPTION = typer.Option(None, "--format", "-f", help="Output format: terminal | json")
_DEBUG_OPTION = typer.Option(False, "--debug", help="Debug logging with timing")
_STRICT_OPTION = typer.Option(False, "--strict", help="Exit 1 when nothing could be parsed")


def _load(config: Optional[str], format: Optional[str], debug: bool):
    """Load config, apply CLI overrides and configure logging. Exit 2 on bad input."""
    from gitparse.config.loader import OUTPUT_FORMATS, ConfigError, load_config
    from gitparse.logging import configure_logging

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if debug:
        cfg.logging.level = "debug"

    configure_logging(cfg.logging.level, cfg.logging.format)
    return cfg


def _read_input(file: str) -> bytes:
    if file == "-":
        return typer.get_binary_stream("stdin").read()
    try:
        return Path(file).read_bytes()
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {file}: {exc.strerror}")
        raise typer.Exit(code=2) from exc


def _finish(found: bool, strict: bool) -> None:
    if strict and not found:
        console.print("[yellow]Nothing parsed.[/yellow]")
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    file: str = typer.Argument("-", help=_FILE_HELP),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Keep the verbatim input in the result"),
    no_lines: bool = typer.Option(False, "--no-lines", help="Only list files, not line states"),
    debug: bool = _DEBUG_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Parse a multi-file unified diff (git diff / git show)."""
    from gitparse.git.diff_parser import parse_diff
    from gitparse.output import json_report, terminal

    cfg = _load(config, format, debug)
    result = parse_diff(_read_input(file), include_raw_content=raw or cfg.parse.include_raw_content)

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render_diff(result, show_lines=cfg.output.show_lines and not no_lines)

    _finish(bool(result.files), strict)


# ── hunks ─────────────────────────────────────────────────────────────────────


@app.command()
def hunks(
    file: str = typer.Argument("-", help=_FILE_HELP),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Keep the verbatim input in the result"),
    debug: bool = _DEBUG_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Parse the hunk body of a single file's diff."""
    from gitparse.git.diff_parser import parse_file_diff
    from gitparse.output import json_report, terminal

    cfg = _load(config, format, debug)
    result = parse_file_diff(_read_input(file), include_raw_content=raw or cfg.parse.include_raw_content)

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render_hunks(result)

    _finish(result is not None and bool(result.hunks), strict)


# ── name-status ───────────────────────────────────────────────────────────────


@app.command("name-status")
def name_status(
    file: str = typer.Argument("-", help=_FILE_HELP),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path for the records"),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    debug: bool = _DEBUG_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Parse `git diff --name-status -z` output."""
    from gitparse.git.status_parser import parse_name_status
    from gitparse.output import json_report, terminal

    cfg = _load(config, format, debug)
    result = parse_name_status(_read_input(file), repo or cfg.parse.repo_path)

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render_records(result)

    _finish(bool(result), strict)


# ── apply ─────────────────────────────────────────────────────────────────────


@app.command()
def apply(
    file: str = typer.Argument("-", help=_FILE_HELP),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Repository path for the records"),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    debug: bool = _DEBUG_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Parse `git apply --numstat --summary -z` output."""
    from gitparse.git.apply_parser import parse_apply_files
    from gitparse.output import json_report, terminal

    cfg = _load(config, format, debug)
    result = parse_apply_files(_read_input(file), repo or cfg.parse.repo_path)

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render_records(result)

    _finish(bool(result), strict)


# ── shortstat ─────────────────────────────────────────────────────────────────


@app.command()
def shortstat(
    file: str = typer.Argument("-", help=_FILE_HELP),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    debug: bool = _DEBUG_OPTION,
    strict: bool = _STRICT_OPTION,
) -> None:
    """Parse a `git diff --shortstat` summary line."""
    from gitparse.git.stat_parser import parse_short_stat
    from gitparse.output import json_report, terminal

    cfg = _load(config, format, debug)
    result = parse_short_stat(_read_input(file))

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render_short_stat(result)

    _finish(result is not None, strict)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .gitparse.toml"),
) -> None:
    """Generate a starter .gitparse.toml in the current directory."""
    from gitparse.config.defaults import DEFAULT_TOML
    from gitparse.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitparse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitparse: structured views of git diff output."""
