"""CLI entry points for ext-lint - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console

from file_extension_linter.domain.config import ConfigurationError, ConfigurationLoader, ExtensionPolicy
from file_extension_linter.domain.constants import BANNER, RULE_CODE
from file_extension_linter.domain.protocols import (
    FileSystemProtocol,
    FixerGatewayProtocol,
    GuidanceServiceProtocol,
    ImportTargetEnumeratorProtocol,
    TelemetryPort,
    ViolationReporterProtocol,
)
from file_extension_linter.domain.rules import BaseRule
from file_extension_linter.domain.rules.file_extension import MESSAGE_TEMPLATES
from file_extension_linter.infrastructure.reporters import (
    JsonViolationReporter,
    TerminalViolationReporter,
)
from file_extension_linter.infrastructure.telemetry import LoggingConfigurator
from file_extension_linter.use_cases.apply_fixes import ApplyFixesUseCase
from file_extension_linter.use_cases.check_imports import CheckImportsUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol
    guidance_service: GuidanceServiceProtocol
    rule_factory: Callable[[ExtensionPolicy], BaseRule]
    enumerator_factory: Callable[[ExtensionPolicy], ImportTargetEnumeratorProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def build_check_use_case(
        deps: CLIDependencies, style: Optional[str], esm: Optional[bool]
    ) -> tuple[CheckImportsUseCase, BaseRule]:
        """Apply CLI overrides to the configuration and wire the check use case."""
        try:
            config_loader = deps.config_loader.with_overrides(style=style, esm=esm)
        except ConfigurationError as exc:
            deps.telemetry.error(str(exc))
            raise typer.Exit(code=2) from exc
        policy = config_loader.policy
        rule = deps.rule_factory(policy)
        use_case = CheckImportsUseCase(
            rule=rule,
            enumerator=deps.enumerator_factory(policy),
            filesystem=deps.filesystem,
            telemetry=deps.telemetry,
            config_loader=config_loader,
        )
        return use_case, rule

    @staticmethod
    def build_reporter(
        deps: CLIDependencies, output_format: str, view: str
    ) -> ViolationReporterProtocol:
        if output_format == "json":
            return JsonViolationReporter()
        return TerminalViolationReporter(deps.guidance_service, view=view)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="ext-lint",
            help=f"{BANNER}\nEnforce file extensions in import/require specifiers.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
        ) -> None:
            LoggingConfigurator.configure(verbose=verbose)

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="File or directory to check (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option("table", "--format", "-f", help="Output: table or json"),
            view: str = typer.Option("by_file", help="Table view: by_file (default) or by_extension"),
            style: Optional[str] = typer.Option(None, help="Override the default style: always or never"),
            esm: Optional[bool] = typer.Option(None, "--esm/--no-esm", help="Treat TypeScript sources as .js"),
        ) -> None:
            """Report import specifiers whose file extension breaks the configured style."""
            if output_format != "json":
                deps.telemetry.handshake()
            use_case, _ = CLIAppFactory.build_check_use_case(deps, style, esm)
            result = use_case.execute(CLIAppFactory.resolve_target_path(path))
            CLIAppFactory.build_reporter(deps, output_format, view).report(result)
            if result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            path: Optional[Path] = typer.Argument(None, help="File or directory to fix (default: src/ or .)"),  # noqa: B008
            dry_run: bool = typer.Option(False, "--dry-run", help="Show what would change without writing"),
            style: Optional[str] = typer.Option(None, help="Override the default style: always or never"),
            esm: Optional[bool] = typer.Option(None, "--esm/--no-esm", help="Treat TypeScript sources as .js"),
        ) -> None:
            """Add or remove extensions where the fix is unambiguous."""
            deps.telemetry.handshake()
            check_use_case, rule = CLIAppFactory.build_check_use_case(deps, style, esm)
            use_case = ApplyFixesUseCase(
                rule=rule,
                check_imports=check_use_case,
                fixer_gateway=deps.fixer_gateway,
                telemetry=deps.telemetry,
                dry_run=dry_run,
            )
            summary = use_case.execute(CLIAppFactory.resolve_target_path(path))
            for report in summary.remaining:
                for violation in report.violations:
                    reason = violation.fix_failure_reason or "fix pending"
                    deps.telemetry.warning(f"{violation.location}: {violation.message} ({reason})")
            if summary.remaining_count and not dry_run:
                raise typer.Exit(code=1)

        @app.command()
        def explain() -> None:
            """Show guidance for the file-extension-in-import rule."""
            console = Console()
            entry = deps.guidance_service.get_entry(RULE_CODE) or {}
            console.print(f"[bold]{deps.guidance_service.get_display_name(RULE_CODE)}[/] ({RULE_CODE})")
            if entry.get("short_description"):
                console.print(entry["short_description"])
            if entry.get("proactive_guidance"):
                console.print(f"\n{entry['proactive_guidance']}")
            for kind, template in MESSAGE_TEMPLATES.items():
                console.print(f"  {kind.value}: {template}", markup=False)
            console.print(f"\nManual fixes: {deps.guidance_service.get_manual_instructions(RULE_CODE)}")
            policy = deps.config_loader.policy
            overrides = ", ".join(
                f"{ext}={style.value}" for ext, style in sorted(policy.overrides_by_extension.items())
            )
            console.print(
                f"\nActive policy: default={policy.default_style.value}"
                f" overrides={{{overrides}}}"
                f" tryExtensions={list(policy.resolution_extensions)}"
                f" esm={policy.esm_normalize}",
                markup=False,
            )

        return app


def create_app(deps: CLIDependencies) -> typer.Typer:
    """Module-level alias used by the composition root."""
    return CLIAppFactory.create_app(deps)
