from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from datastar_hygiene.domain.config import ConfigurationLoader
from datastar_hygiene.infrastructure.config_file_loader import ConfigFileLoader
from datastar_hygiene.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from datastar_hygiene.infrastructure.reporters import JsonLintReporter, TerminalLintReporter
from datastar_hygiene.infrastructure.services.guidance_service import GuidanceService
from datastar_hygiene.interface.telemetry import ProjectTelemetry
from datastar_hygiene.use_cases.lint_markup import DatastarHygiene

if TYPE_CHECKING:
    from datastar_hygiene.domain.protocols import (
        FileSystemProtocol,
        GuidanceServiceProtocol,
        TelemetryPort,
    )
    from datastar_hygiene.interface.reporters import LintReporter


class DatastarContainer:
    """Dependency Injection Container for the Datastar hygiene linter."""

    def __init__(self, start: Path | None = None, quiet: bool = False) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(start, quiet)

    def _register_defaults(self, start: Path | None, quiet: bool) -> None:
        """Register default implementations for protocols."""
        # Raises ConfigurationError on a malformed pyproject.toml
        config_dict = ConfigFileLoader.load_config_from_fs(start)
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("DATASTAR", "cyan", quiet=quiet)
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("DatastarHygiene", DatastarHygiene(config_loader.rules))
        self.register_singleton("TerminalLintReporter", TerminalLintReporter(telemetry))
        self.register_singleton("JsonLintReporter", JsonLintReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_decree(self) -> DatastarHygiene:
        """Return the decree built from the file configuration."""
        return cast(DatastarHygiene, self.get("DatastarHygiene"))

    def get_reporters(self) -> dict[str, "LintReporter"]:
        """Return reporters keyed by --format value."""
        return {
            "terminal": cast("LintReporter", self.get("TerminalLintReporter")),
            "json": cast("LintReporter", self.get("JsonLintReporter")),
        }
