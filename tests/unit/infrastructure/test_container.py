"""Unit tests for DatastarContainer and the composition root."""

from pathlib import Path
from unittest.mock import patch

import pytest

from datastar_hygiene import __main__ as entry
from datastar_hygiene.domain.config import ConfigurationError
from datastar_hygiene.infrastructure.di.container import DatastarContainer
from datastar_hygiene.infrastructure.reporters import JsonLintReporter, TerminalLintReporter


class TestDatastarContainer:
    def test_wires_file_configuration(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.datastar-hygiene]\ncheck-typos = false\nenforce = ["typo"]\n',
            encoding="utf-8",
        )

        container = DatastarContainer(start=tmp_path)

        assert container.get_config_loader().enforced_rules == frozenset({"typo"})
        assert not container.get_decree().config.check_typos
        assert "typo" not in [r.code for r in container.get_decree().rules()]

    def test_reporters_by_format(self, tmp_path: Path) -> None:
        reporters = DatastarContainer(start=tmp_path).get_reporters()

        assert isinstance(reporters["terminal"], TerminalLintReporter)
        assert isinstance(reporters["json"], JsonLintReporter)

    def test_register_and_get(self, tmp_path: Path) -> None:
        container = DatastarContainer(start=tmp_path)
        marker = object()
        container.register_singleton("Marker", marker)

        assert container.get("Marker") is marker
        with pytest.raises(ValueError, match="not registered"):
            container.get("Missing")

    def test_malformed_pyproject_raises(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.datastar-hygiene\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            DatastarContainer(start=tmp_path)


class TestMain:
    def test_configuration_error_exits_two(self) -> None:
        with patch.object(entry, "DatastarContainer", side_effect=ConfigurationError("bad toml")), \
             patch.object(entry, "ProjectTelemetry") as telemetry:
            with pytest.raises(SystemExit) as excinfo:
                entry.main()

        assert excinfo.value.code == 2
        telemetry.return_value.error.assert_called_once_with("bad toml")

    def test_runs_app(self) -> None:
        with patch.object(entry, "DatastarContainer"), \
             patch.object(entry, "CLIAppFactory") as factory:
            entry.main()

        factory.create_app.assert_called_once()
        factory.create_app.return_value.assert_called_once_with()
