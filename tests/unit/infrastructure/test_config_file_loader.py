"""Unit tests for ConfigFileLoader (pyproject.toml discovery and parsing)."""

from pathlib import Path

import pytest

from datastar_hygiene.domain.config import ConfigurationError
from datastar_hygiene.infrastructure.config_file_loader import ConfigFileLoader


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigFileLoader:
    def test_reads_hyphenated_section(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "pyproject.toml",
            '[tool.datastar-hygiene]\ncheck-typos = false\nenforce = ["typo"]\n',
        )

        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {
            "check-typos": False,
            "enforce": ["typo"],
        }

    def test_reads_underscored_section(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "pyproject.toml", "[tool.datastar_hygiene]\nworkers = 2\n")

        assert ConfigFileLoader.load_config_from_file(config_file) == {"workers": 2}

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        _write(tmp_path / "pyproject.toml", "[tool.datastar-hygiene]\nexclude = ['dist']\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert ConfigFileLoader.find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()
        assert ConfigFileLoader.load_config_from_fs(nested) == {"exclude": ["dist"]}

    def test_missing_section_is_empty(self, tmp_path: Path) -> None:
        _write(tmp_path / "pyproject.toml", "[project]\nname = 'x'\n")

        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "pyproject.toml", "[tool.datastar-hygiene\n")

        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            ConfigFileLoader.load_config_from_file(config_file)

    def test_non_table_section_raises(self, tmp_path: Path) -> None:
        config_file = _write(tmp_path / "pyproject.toml", '[tool]\ndatastar-hygiene = "on"\n')

        with pytest.raises(ConfigurationError, match="must be a table"):
            ConfigFileLoader.load_config_from_file(config_file)

    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            ConfigFileLoader.load_config_from_file(tmp_path / "missing.toml")
