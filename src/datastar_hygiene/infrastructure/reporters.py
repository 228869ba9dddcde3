"""Terminal and JSON reporters - live in infrastructure (rich, json)."""

import json
from collections import defaultdict
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from datastar_hygiene.domain.entities import DiagnosticDict
from datastar_hygiene.domain.locations import SourceLocator

if TYPE_CHECKING:
    from datastar_hygiene.domain.entities import Diagnostic, FileReport, LintRun
    from datastar_hygiene.domain.protocols import TelemetryPort


class DiagnosticRow(DiagnosticDict):
    """One reported diagnostic with its file and resolved location."""

    path: str
    severity: str
    line: int
    column: int


class ReportRows:
    """Flattens a LintRun into serializable rows."""

    @staticmethod
    def severity(diagnostic: "Diagnostic") -> str:
        return "error" if diagnostic.enforced else "warning"

    @staticmethod
    def for_file(report: "FileReport") -> list[DiagnosticRow]:
        locator = SourceLocator(report.source)
        rows: list[DiagnosticRow] = []
        for d in report.diagnostics:
            line, column = locator.position(d.span.start)
            rows.append({
                "path": report.path,
                **d.to_dict(),
                "severity": ReportRows.severity(d),
                "line": line,
                "column": column,
            })
        return rows

    @staticmethod
    def for_run(run: "LintRun") -> list[DiagnosticRow]:
        rows: list[DiagnosticRow] = []
        for report in run.files:
            rows.extend(ReportRows.for_file(report))
        return rows


class JsonLintReporter:
    """Prints a LintRun as a JSON document on stdout."""

    def render(self, run: "LintRun") -> str:
        return json.dumps(
            {
                "files": len(run.files),
                "skipped": list(run.skipped),
                "diagnostics": ReportRows.for_run(run),
                "summary": {
                    "total": run.diagnostic_count,
                    "enforced": run.enforced_count,
                },
            },
            indent=2,
        )

    def report_run(self, run: "LintRun", view: str = "by_file") -> None:
        print(self.render(run))


class TerminalLintReporter:
    """Rich tables: one per file (by_file) or a rule summary (by_rule)."""

    def __init__(self, telemetry: "TelemetryPort", console: Console | None = None) -> None:
        self._telemetry = telemetry
        self._console = console if console is not None else Console(highlight=False)

    def report_run(self, run: "LintRun", view: str = "by_file") -> None:
        if view == "by_rule":
            self._report_by_rule(run)
        else:
            self._report_by_file(run)
        self._report_summary(run)

    def _report_by_file(self, run: "LintRun") -> None:
        for report in run.files:
            if not report.diagnostics:
                continue
            table = Table(title=Text(report.path), title_justify="left", expand=False)
            table.add_column("Location", no_wrap=True)
            table.add_column("Rule", no_wrap=True)
            table.add_column("Severity", no_wrap=True)
            table.add_column("Message")
            locator = SourceLocator(report.source)
            for d in report.diagnostics:
                style = "red" if d.enforced else "yellow"
                table.add_row(
                    Text(locator.location(report.path, d.span)),
                    d.qualified_rule,
                    Text(ReportRows.severity(d), style=style),
                    Text(d.message),
                )
            self._console.print(table)

    def _report_by_rule(self, run: "LintRun") -> None:
        counts: dict[str, int] = defaultdict(int)
        files: dict[str, set[str]] = defaultdict(set)
        for row in ReportRows.for_run(run):
            counts[row["qualified_rule"]] += 1
            files[row["qualified_rule"]].add(row["path"])
        if not counts:
            return
        table = Table(title="Diagnostics by rule", title_justify="left")
        table.add_column("Rule", no_wrap=True)
        table.add_column("Count", justify="right")
        table.add_column("Files", justify="right")
        for rule in sorted(counts, key=lambda r: (-counts[r], r)):
            table.add_row(rule, str(counts[rule]), str(len(files[rule])))
        self._console.print(table)

    def _report_summary(self, run: "LintRun") -> None:
        for path in run.skipped:
            self._telemetry.step(f"Skipped: {path}")
        total = run.diagnostic_count
        if total == 0:
            self._telemetry.step(f"No Datastar issues found in {len(run.files)} file(s).")
            return
        self._telemetry.step(
            f"{total} issue(s) in {sum(1 for f in run.files if f.diagnostics)} of "
            f"{len(run.files)} file(s); {run.enforced_count} enforced."
        )
