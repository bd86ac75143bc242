"""Tests for the JSON and terminal reporters."""

import io
import json

from rich.console import Console

from gitparse.git.apply_parser import parse_apply_files
from gitparse.git.diff_parser import parse_diff, parse_file_diff
from gitparse.git.models import ShortStat
from gitparse.git.status_parser import parse_name_status
from gitparse.output import json_report, terminal


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestJsonReport:
    def test_diff(self, sample_diff_multi):
        data = json.loads(json_report.render(parse_diff(sample_diff_multi)))
        assert [f["path"] for f in data["files"]] == ["app.py", "new_name.py"]
        assert "original_path" not in data["files"][0]
        assert data["files"][1]["original_path"] == "old_name.py"
        assert data["files"][1]["status"] == "R"
        assert data["stats"] == {"files": 2, "additions": 4, "deletions": 2}
        assert "raw_content" not in data

    def test_hunk_lines_keyed_by_line_number(self, sample_hunks_two):
        data = json_report.to_dict(parse_file_diff(sample_hunks_two))
        first = data["hunks"][0]
        assert first["previous"] == {"start": 1, "count": 3, "end": 3}
        assert first["lines"]["2"] == {"state": "changed", "previous": "b = 2", "current": "b = 3"}
        assert "previous" not in data["hunks"][1]["lines"]["21"]

    def test_records(self, sample_apply_summary):
        data = json_report.to_dict(parse_apply_files(sample_apply_summary, "/repo"))
        assert data[1] == {
            "status": "A",
            "path": "src/new.py",
            "repo_path": "/repo",
            "stats": {"changes": 0, "additions": 10, "deletions": 0},
        }

    def test_name_status_has_no_stats(self, sample_name_status):
        data = json_report.to_dict(parse_name_status(sample_name_status, "/repo"))
        assert all("stats" not in r for r in data)

    def test_short_stat_and_none(self):
        assert json_report.to_dict(ShortStat(1, 2, 3)) == {"files": 1, "additions": 2, "deletions": 3}
        assert json_report.render(None) == "null"


class TestTerminal:
    def test_diff_tables(self, sample_diff_multi):
        console = _console()
        terminal.render_diff(parse_diff(sample_diff_multi), console=console)
        out = console.file.getvalue()
        assert "new_name.py" in out
        assert "old_name.py" in out
        assert "changed" in out
        assert "Files changed:" in out

    def test_markup_in_content_is_literal(self):
        console = _console()
        terminal.render_hunks(parse_file_diff("@@ -1 +1 @@\n-[bold]x[/bold]\n+[/oops]\n"), console=console)
        out = console.file.getvalue()
        assert "[bold]x[/bold]" in out
        assert "[/oops]" in out

    def test_empty_results(self):
        console = _console()
        terminal.render_hunks(None, console=console)
        terminal.render_records([], console=console)
        terminal.render_short_stat(None, console=console)
        out = console.file.getvalue()
        assert "No hunks found." in out
        assert "No file changes found." in out
        assert "No summary found." in out

    def test_records_with_stats(self, sample_apply_summary):
        console = _console()
        terminal.render_records(parse_apply_files(sample_apply_summary, "/repo"), console=console)
        out = console.file.getvalue()
        assert "lib/a.py" in out
        assert "src/old.py" in out
