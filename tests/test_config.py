"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gitparse.config.defaults import DEFAULT_TOML
from gitparse.config.loader import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GITPARSE_FORMAT",
        "GITPARSE_LOG_LEVEL",
        "GITPARSE_LOG_FORMAT",
        "GITPARSE_REPO_PATH",
        "GITPARSE_INCLUDE_RAW",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.parse.include_raw_content is False
        assert cfg.parse.repo_path == "."
        assert cfg.logging.level == "warning"

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".gitparse.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.output.show_lines is True
        assert cfg.logging.format == "console"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".gitparse.toml").write_text(
            'version = "1.0"\n'
            '[parse]\n'
            'include_raw_content = true\n'
            'repo_path = "/work/repo"\n'
            '[output]\n'
            'format = "json"\n'
            'unknown_key = 1\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.parse.include_raw_content is True
        assert cfg.parse.repo_path == "/work/repo"
        assert cfg.output.format == "json"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[logging]\nlevel = "debug"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.logging.level == "debug"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gitparse.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".gitparse.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".gitparse.toml").write_text('parse = "yes"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITPARSE_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_invalid_format_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITPARSE_FORMAT", "xml")
        assert load_config(tmp_path).output.format == "terminal"

    def test_log_level_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITPARSE_LOG_LEVEL", "DEBUG")
        assert load_config(tmp_path).logging.level == "debug"

    def test_repo_path_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITPARSE_REPO_PATH", "/srv/repo")
        assert load_config(tmp_path).parse.repo_path == "/srv/repo"

    def test_include_raw_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITPARSE_INCLUDE_RAW", "1")
        assert load_config(tmp_path).parse.include_raw_content is True
