"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]
LogFormat = Literal["console", "json"]


@dataclass
class ParseConfig:
    include_raw_content: bool = False  # keep verbatim input alongside parsed data
    repo_path: str = "."


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_lines: bool = True  # per-line state tables for diffs


@dataclass
class LoggingConfig:
    level: LogLevel = "warning"
    format: LogFormat = "console"


@dataclass
class GitParseConfig:
    version: str = "1.0"
    parse: ParseConfig = field(default_factory=ParseConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
