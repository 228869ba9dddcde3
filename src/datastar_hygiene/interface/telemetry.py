"""Console telemetry - user-facing status lines on stderr."""

from rich.console import Console
from rich.markup import escape

from datastar_hygiene.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """TelemetryPort on a rich Console. Writes to stderr so JSON on stdout stays clean."""

    def __init__(self, project: str, color: str = "cyan", quiet: bool = False) -> None:
        self._tag = escape(f"[{project}]")
        self._color = color
        self._quiet = quiet
        self._console = Console(stderr=True, highlight=False)

    def step(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(f"[{self._color}]{self._tag}[/] {escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]{self._tag} WARNING:[/] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[bold red]{self._tag} ERROR:[/] {escape(message)}")
