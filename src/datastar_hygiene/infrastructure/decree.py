"""
Host entry points - the surface a plugin host calls.

The host supplies (path, source) pairs and receives diagnostics; it never sees
configuration loading or the CLI.
"""

from datastar_hygiene.domain.config import DatastarConfig
from datastar_hygiene.domain.entities import DecreeMetadata, Diagnostics
from datastar_hygiene.use_cases.lint_markup import DatastarHygiene

_DEFAULT_DECREE = DatastarHygiene()


def init_decree(config: DatastarConfig | None = None) -> DatastarHygiene:
    """Factory for a decree instance; default config enables every rule."""
    return DatastarHygiene(config)


def name() -> str:
    return _DEFAULT_DECREE.name()


def lint(path: str, source: str | bytes) -> Diagnostics:
    return _DEFAULT_DECREE.lint(path, source)


def metadata() -> DecreeMetadata:
    return _DEFAULT_DECREE.metadata()
