"""Tests for leapcheck.config."""

import os
from pathlib import Path

import pytest
import tomli_w

from leapcheck.config import (
    create_default_config,
    get_config_path,
    get_default_range,
    load_config,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should place config under XDG_CONFIG_HOME when set."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "leapcheck" / "config.toml"

    def test_falls_back_to_home_config(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should fall back to ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert get_config_path() == tmp_path / ".config" / "leapcheck" / "config.toml"


class TestCreateDefaultConfig:
    """Tests for create_default_config and load_config."""

    def test_writes_default_range(self, tmp_path: Path) -> None:
        """Should create parent dirs and write the default range."""
        config_path = tmp_path / "nested" / "config.toml"
        create_default_config(config_path)

        assert load_config(config_path) == {"range": {"start": 1900, "end": 2100}}

    def test_secure_permissions(self, tmp_path: Path) -> None:
        """Should restrict the file to its owner."""
        config_path = tmp_path / "config.toml"
        save_config({"range": {"start": 1, "end": 2}}, config_path)

        assert os.stat(config_path).st_mode & 0o777 == 0o600

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestGetDefaultRange:
    """Tests for get_default_range."""

    def test_missing_file_uses_builtin_range(self, tmp_path: Path) -> None:
        """Should fall back to 1900-2100."""
        assert get_default_range(tmp_path / "missing.toml") == (1900, 2100)

    def test_reads_configured_range(self, tmp_path: Path) -> None:
        """Should return configured bounds."""
        config_path = tmp_path / "config.toml"
        save_config({"range": {"start": 1600, "end": 1700}}, config_path)

        assert get_default_range(config_path) == (1600, 1700)

    def test_partial_range_fills_missing_key(self, tmp_path: Path) -> None:
        """Should fill a missing bound from the built-in default."""
        config_path = tmp_path / "config.toml"
        save_config({"range": {"start": 2000}}, config_path)

        assert get_default_range(config_path) == (2000, 2100)

    def test_non_integer_raises_valueerror(self, tmp_path: Path) -> None:
        """Should reject non-integer bounds."""
        config_path = tmp_path / "config.toml"
        with open(config_path, "wb") as f:
            tomli_w.dump({"range": {"start": "1900"}}, f)

        with pytest.raises(ValueError, match="range.start"):
            get_default_range(config_path)

    def test_boolean_raises_valueerror(self, tmp_path: Path) -> None:
        """Should reject booleans even though bool subclasses int."""
        config_path = tmp_path / "config.toml"
        save_config({"range": {"end": True}}, config_path)

        with pytest.raises(ValueError, match="range.end"):
            get_default_range(config_path)

    def test_range_not_a_table_raises_valueerror(self, tmp_path: Path) -> None:
        """Should reject a range value that is not a table."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("range = 5\n")

        with pytest.raises(ValueError, match="range must be a table"):
            get_default_range(config_path)
