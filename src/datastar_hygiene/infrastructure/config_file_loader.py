"""Load [tool.datastar-hygiene] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path

from datastar_hygiene.domain.config import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

TOOL_SECTION_NAMES: tuple[str, ...] = ("datastar-hygiene", "datastar_hygiene")


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        """Walk up from start (default: cwd) and return the first pyproject.toml found."""
        current = (start or Path.cwd()).resolve()
        for directory in (current, *current.parents):
            candidate = directory / "pyproject.toml"
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def load_config_from_file(config_file: Path) -> dict[str, object]:
        """Return the [tool.datastar-hygiene] table of config_file (empty when absent)."""
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError as exc:
            raise ConfigurationError(f"Cannot read {config_file}: {exc}") from exc
        except toml_lib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid TOML in {config_file}: {exc}") from exc
        tool_section = data.get("tool", {}) or {}
        if not isinstance(tool_section, dict):
            return {}
        for section_name in TOOL_SECTION_NAMES:
            section = tool_section.get(section_name)
            if isinstance(section, dict):
                return section
            if section is not None:
                raise ConfigurationError(
                    f"[tool.{section_name}] in {config_file} must be a table"
                )
        return {}

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Load the tool section from the nearest pyproject.toml; empty dict when none exists."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        return ConfigFileLoader.load_config_from_file(config_file)
