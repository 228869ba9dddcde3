"""Use Case: Lint Files - expand paths, lint each file independently, apply escalation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from datastar_hygiene.domain.entities import FileReport, LintRun
from datastar_hygiene.domain.protocols import FileSystemProtocol, TelemetryPort
from datastar_hygiene.use_cases.lint_markup import DatastarHygiene

if TYPE_CHECKING:
    from datastar_hygiene.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class LintFilesUseCase:
    """
    Orchestrate a multi-file run.

    Files share no state, so each one is linted on its own worker; results are
    returned in the order the files were collected.
    """

    def __init__(
        self,
        decree: DatastarHygiene,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
        enforce: frozenset[str] | None = None,
        workers: int | None = None,
    ) -> None:
        self.decree = decree
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.enforce = enforce if enforce is not None else config_loader.enforced_rules
        self.workers = workers if workers is not None else config_loader.workers

    def collect(self, paths: list[str]) -> tuple[list[str], list[str]]:
        """Return (files to lint, skipped paths). Missing paths are skipped."""
        metadata = self.decree.metadata()
        excluded = self.config_loader.exclude_paths
        files: list[str] = []
        skipped: list[str] = []
        seen: set[str] = set()
        for path in paths:
            for file_path in self.filesystem.collect_markup_files(
                path, self.config_loader.extensions
            ):
                if file_path in seen:
                    continue
                seen.add(file_path)
                name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
                if name in metadata.skip_filenames or any(
                    fragment in file_path for fragment in excluded
                ):
                    logger.debug("Excluded %s", file_path)
                    skipped.append(file_path)
                    continue
                files.append(file_path)
        return files, skipped

    def execute(self, paths: list[str]) -> LintRun:
        files, skipped = self.collect(paths)
        self.telemetry.step(f"Linting {len(files)} file(s) with {self.workers} worker(s)...")
        if self.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                outcomes = list(pool.map(self._lint_file, files))
        else:
            outcomes = [self._lint_file(f) for f in files]

        reports: list[FileReport] = []
        for file_path, report in zip(files, outcomes):
            if report is None:
                skipped.append(file_path)
            else:
                reports.append(report)
        return LintRun(files=tuple(reports), skipped=tuple(skipped))

    def lint_source(self, path: str, source: str | bytes) -> FileReport:
        """Lint already-loaded source (e.g. raw stdin bytes) and apply escalation."""
        if isinstance(source, bytes):
            source = source.decode("utf-8", "surrogateescape")
        diagnostics = self.decree.lint(path, source)
        escalated = tuple(
            d.escalate() if d.rule in self.enforce else d for d in diagnostics
        )
        return FileReport(path=path, diagnostics=escalated, source=source)

    def _lint_file(self, file_path: str) -> FileReport | None:
        try:
            source = self.filesystem.read_text(file_path)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", file_path, exc)
            self.telemetry.warning(f"Skipping {file_path}: {exc.strerror or exc}")
            return None
        return self.lint_source(file_path, source)
