"""Ports implemented by Infrastructure and consumed by use cases and the CLI."""

from typing import Protocol

from datastar_hygiene.domain.registry_types import RuleRegistryEntry


class TelemetryPort(Protocol):
    """Protocol for user-facing progress and status lines."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def collect_markup_files(self, path: str, extensions: tuple[str, ...]) -> list[str]:
        """Return markup files under path (recursive for directories), sorted."""
        ...

    def read_text(self, path: str) -> str:
        """Read a file as UTF-8 text; undecodable bytes survive as surrogate escapes."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the rule registry."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return the loaded registry keyed by rule id."""
        ...

    def get_entry(self, rule_id: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a bare or qualified rule id."""
        ...

    def get_manual_instructions(self, rule_id: str) -> str:
        """Return the fix instructions for a rule, or an empty string."""
        ...
