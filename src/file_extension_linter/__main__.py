"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

from rich.console import Console
from rich.markup import escape

from file_extension_linter.domain.config import ConfigurationError
from file_extension_linter.infrastructure.di.container import LinterContainer
from file_extension_linter.interface.cli import CLIDependencies, create_app


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = LinterContainer.get_instance()
    except ConfigurationError as exc:
        message = escape(f"Invalid [tool.ext-lint] configuration: {exc}")
        Console(stderr=True).print(f"[bold red]{message}[/]")
        sys.exit(2)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
        guidance_service=container.get_guidance_service(),
        rule_factory=container.rule_for,
        enumerator_factory=container.enumerator_for,
    )

    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
