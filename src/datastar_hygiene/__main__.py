"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

from datastar_hygiene.domain.config import ConfigurationError
from datastar_hygiene.infrastructure.di.container import DatastarContainer
from datastar_hygiene.interface.cli import EXIT_USAGE, CLIAppFactory, CLIDependencies
from datastar_hygiene.interface.telemetry import ProjectTelemetry


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = DatastarContainer()
    except ConfigurationError as exc:
        ProjectTelemetry("DATASTAR").error(str(exc))
        sys.exit(EXIT_USAGE)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        decree=container.get_decree(),
        reporters=container.get_reporters(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
