"""CLI entry points for datastar-hygiene - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from typing import NoReturn

import typer

from datastar_hygiene.domain.config import ConfigurationLoader
from datastar_hygiene.domain.constants import ALL_RULES, DECREE_NAME, RULE_NAMESPACE
from datastar_hygiene.domain.entities import LintRun
from datastar_hygiene.domain.protocols import (
    FileSystemProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
)
from datastar_hygiene.interface.reporters import LintReporter
from datastar_hygiene.use_cases.lint_files import LintFilesUseCase
from datastar_hygiene.use_cases.lint_markup import DatastarHygiene

STDIN_PATH = "-"

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    decree: DatastarHygiene
    reporters: dict[str, LintReporter]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def normalize_rule_ids(values: list[str]) -> tuple[list[str], list[str]]:
        """Split user-supplied ids into (known bare ids, unknown values). Accepts 'datastar/typo'."""
        prefix = f"{RULE_NAMESPACE}/"
        known: list[str] = []
        unknown: list[str] = []
        for value in values:
            bare = value[len(prefix):] if value.startswith(prefix) else value
            if bare in ALL_RULES:
                if bare not in known:
                    known.append(bare)
            else:
                unknown.append(value)
        return known, unknown

    @staticmethod
    def exit_code(run: LintRun, strict: bool) -> int:
        """1 for enforced findings (or any finding when strict), else 0."""
        if run.enforced_count or (strict and run.has_diagnostics()):
            return EXIT_FINDINGS
        return EXIT_CLEAN

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("datastar_hygiene").setLevel(
            logging.DEBUG if verbose else logging.WARNING
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="datastar-hygiene",
            help="Lint Datastar attributes in HTML templates. Run 'datastar-hygiene check' on files or directories.",
            add_completion=False,
        )

        def _fail(message: str) -> NoReturn:
            deps.telemetry.error(message)
            sys.exit(EXIT_USAGE)

        @app.command()
        def check(
            paths: list[str] | None = typer.Argument(None, help="Files or directories to lint (default: .). Use '-' for stdin."),  # noqa: B008, RUF100
            output_format: str = typer.Option(
                "terminal", "--format", "-f", help="Output format: terminal or json"),
            view: str = typer.Option(
                "by_file", help="Terminal view: by_file (default) or by_rule"),
            disable: list[str] = typer.Option(  # noqa: B008, RUF100
                [], "--disable", help="Rule id to switch off (repeatable)"),
            enforce: list[str] = typer.Option(  # noqa: B008, RUF100
                [], "--enforce", help="Rule id whose findings fail the run (repeatable)"),
            strict: bool = typer.Option(
                False, "--strict", help="Exit 1 on any finding, enforced or not"),
            workers: int | None = typer.Option(
                None, "--workers", min=1, help="Worker threads for multi-file runs"),
            stdin_filename: str = typer.Option(
                "<stdin>", "--stdin-filename", help="Path reported for source read from stdin"),
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            """Lint markup files and report Datastar attribute problems."""
            CLIAppFactory.configure_logging(verbose)
            reporter = deps.reporters.get(output_format)
            if reporter is None:
                _fail(f"Unknown format '{output_format}'. Choose from: {', '.join(deps.reporters)}")
            if view not in ("by_file", "by_rule"):
                _fail(f"Unknown view '{view}'. Choose from: by_file, by_rule")
            disabled, unknown_disabled = CLIAppFactory.normalize_rule_ids(disable)
            enforced, unknown_enforced = CLIAppFactory.normalize_rule_ids(enforce)
            unknown = unknown_disabled + unknown_enforced
            if unknown:
                _fail(f"Unknown rule id(s): {', '.join(unknown)}. Run 'datastar-hygiene rules' to list rules.")

            decree = deps.decree
            if disabled:
                decree = DatastarHygiene(decree.config.without(*disabled))
            use_case = LintFilesUseCase(
                decree=decree,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
                enforce=deps.config_loader.enforced_rules | frozenset(enforced),
                workers=workers,
            )

            targets = list(paths or ["."])
            if targets == [STDIN_PATH]:
                source = typer.get_binary_stream("stdin").read()
                run = LintRun(files=(use_case.lint_source(stdin_filename, source),))
            else:
                if STDIN_PATH in targets:
                    _fail("'-' (stdin) cannot be combined with other paths")
                run = use_case.execute(targets)

            reporter.report_run(run, view=view)
            sys.exit(CLIAppFactory.exit_code(run, strict))

        @app.command()
        def rules() -> None:
            """List every rule with its enabled and enforced state."""
            enabled = set(deps.decree.config.enabled_rule_ids())
            enforced = deps.config_loader.enforced_rules
            registry = deps.guidance_service.get_registry()
            for rule_id in ALL_RULES:
                entry = registry.get(rule_id)
                summary = entry.get("short_description", "") if entry else ""
                state = "enabled" if rule_id in enabled else "disabled"
                if rule_id in enforced:
                    state += ", enforced"
                print(f"{RULE_NAMESPACE + '/' + rule_id:<28} [{state}] {summary}")

        @app.command()
        def explain(
            rule: str = typer.Argument(..., help="Rule id, e.g. typo or datastar/typo"),
        ) -> None:
            """Print guidance for one rule: what it catches and how to fix it."""
            entry = deps.guidance_service.get_entry(rule)
            if entry is None:
                _fail(f"Unknown rule '{rule}'. Run 'datastar-hygiene rules' to list rules.")
            print(f"{entry.get('display_name', rule)}")
            print("=" * len(str(entry.get("display_name", rule))))
            short = entry.get("short_description")
            if short:
                print(short)
            instructions = deps.guidance_service.get_manual_instructions(rule)
            if instructions:
                print("")
                print(instructions)
            bad = entry.get("example_bad")
            good = entry.get("example_good")
            if bad:
                print("")
                print("Bad:")
                print(f"  {str(bad).strip()}")
            if good:
                print("Good:")
                print(f"  {str(good).strip()}")
            references = entry.get("references") or []
            if references:
                print("")
                print("References:")
                for ref in references:
                    print(f"  - {ref}")

        @app.command()
        def version() -> None:
            """Print the decree name, version and supported extensions."""
            meta = deps.decree.metadata()
            print(
                f"{DECREE_NAME} {meta.decree_version} "
                f"(abi {meta.abi_version}; {', '.join(meta.supported_extensions)})"
            )

        return app
