"""
Console telemetry and logging setup built on rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from file_extension_linter.domain.constants import BANNER
from file_extension_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Status lines on stderr so stdout stays clean for reports."""

    def __init__(
        self,
        project_name: str,
        color: str = "cyan",
        welcome: str = "",
        console: Optional[Console] = None,
        quiet: bool = False,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = console or Console(stderr=True)
        self.quiet = quiet

    @property
    def _tag(self) -> str:
        return escape(f"[{self.project_name}]")

    def handshake(self) -> None:
        if self.quiet:
            return
        self.console.print(f"[bold {self.color}]{BANNER}[/]")
        if self.welcome:
            self.console.print(f"[{self.color}]{self.welcome}[/]")

    def step(self, message: str) -> None:
        if not self.quiet:
            self.console.print(f"[{self.color}]{self._tag}[/] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{self._tag} WARNING:[/] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]{self._tag} ERROR:[/] {escape(message)}", highlight=False)


class LoggingConfigurator:
    """Configures the package logger once per process."""

    @staticmethod
    def configure(verbose: bool = False) -> None:
        level = logging.DEBUG if verbose else logging.WARNING
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger = logging.getLogger("file_extension_linter")
        package_logger.handlers = [handler]
        package_logger.setLevel(level)
        package_logger.propagate = False
