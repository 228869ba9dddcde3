"""Protocol for lint reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datastar_hygiene.domain.entities import LintRun


class LintReporter(Protocol):
    """Protocol for reporting lint results."""

    def report_run(self, run: "LintRun", view: str = "by_file") -> None:
        """Report a lint run to the user. view: 'by_file' (default) or 'by_rule'."""
        ...
