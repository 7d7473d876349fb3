"""Tests for minmax.toml discovery and loading."""

from pathlib import Path

import click
import pytest

from minmax.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, load_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("")
        cfg = load_config(path)
        assert cfg.operands.allow_strings is False
        assert cfg.clamp.warn_inverted_bounds is True

    def test_loads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[operands]\nallow_strings = true\n[clamp]\nwarn_inverted_bounds = false\n")
        cfg = load_config(path)
        assert cfg.operands.allow_strings is True
        assert cfg.clamp.warn_inverted_bounds is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[operands\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            load_config(path)

    def test_bad_value_names_the_field(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[operands]\nallow_strings = "maybe"\n')
        with pytest.raises(click.ClickException, match="Invalid config") as exc_info:
            load_config(path)
        assert "operands.allow_strings" in exc_info.value.message
