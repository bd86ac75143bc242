"""gitparse: structured parsing of git diff, status and stat output."""

__version__ = "0.1.0"
