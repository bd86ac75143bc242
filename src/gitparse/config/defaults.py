"""Starter .gitparse.toml template."""

DEFAULT_TOML = """\
# gitparse configuration
version = "1.0"

[parse]
include_raw_content = false   # keep the verbatim input next to parsed results
repo_path = "."               # repository path attached to file change records

[output]
format = "terminal"           # terminal | json
show_lines = true             # print per-line state tables for diffs

[logging]
level = "warning"             # debug | info | warning | error
format = "console"            # console | json
"""
