"""Reporters for check results: rich tables for terminals, JSON for machines."""

import json
from collections import defaultdict
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from file_extension_linter.domain.constants import RULE_CODE
from file_extension_linter.domain.entities import CheckResult, Violation
from file_extension_linter.domain.protocols import GuidanceServiceProtocol, ViolationReporterProtocol


class TerminalViolationReporter(ViolationReporterProtocol):
    """Terminal reporter printing one table per run, grouped by file or by extension."""

    def __init__(
        self,
        guidance_service: GuidanceServiceProtocol,
        console: Optional[Console] = None,
        view: str = "by_file",
    ) -> None:
        self.guidance_service = guidance_service
        self.console = console or Console()
        self.view = view

    @staticmethod
    def _fix_label(violation: Violation) -> str:
        return "✅ Auto" if violation.fixable else "⚠️ Manual"

    def report(self, result: CheckResult) -> None:
        """Print violation tables for the check run."""
        for report in result.reports:
            if report.error:
                self.console.print(f"[red]Could not read {escape(report.file_path)}: {escape(report.error)}[/]")

        if not result.has_violations():
            self.console.print(
                f"\n✅ No import extension violations in {result.files_checked} file(s)."
            )
            return

        title = self.guidance_service.get_display_name(RULE_CODE)
        if self.view == "by_extension":
            self._report_by_extension(result, title)
        else:
            self._report_by_file(result, title)

        unfixable = len(result.violations) - result.fixable_count
        self.console.print(
            f"\n{len(result.violations)} violation(s), {result.fixable_count} auto-fixable."
        )
        if unfixable:
            self.console.print(
                self.guidance_service.get_manual_instructions(RULE_CODE),
                style="yellow",
            )

    def _report_by_file(self, result: CheckResult, title: str) -> None:
        table = Table(title=escape(f"[{title}]") + " Import Specifier Audit", header_style="bold #007BFF")
        table.add_column("Location", style="#00EEFF")
        table.add_column("Specifier")
        table.add_column("Form")
        table.add_column("Fix?")
        table.add_column("Message")
        for violation in result.violations:
            table.add_row(
                escape(violation.location),
                escape(violation.node.value),
                violation.import_kind.value,
                self._fix_label(violation),
                escape(violation.message),
            )
        self.console.print(table)

    def _report_by_extension(self, result: CheckResult, title: str) -> None:
        grouped: dict[tuple[str, str], list[Violation]] = defaultdict(list)
        for violation in result.violations:
            grouped[(violation.kind.value, violation.extension)].append(violation)
        table = Table(
            title=escape(f"[{title}]") + " Violations by Extension",
            header_style="bold #F9A602",
            expand=True,
        )
        table.add_column("Kind", style="#C41E3A")
        table.add_column("Extension")
        table.add_column("Count", style="bold #007BFF")
        table.add_column("Auto-fixable")
        for (kind, ext), violations in sorted(grouped.items()):
            fixable = sum(1 for v in violations if v.fixable)
            table.add_row(kind, ext, str(len(violations)), str(fixable))
        self.console.print(table)


class JsonViolationReporter(ViolationReporterProtocol):
    """Writes the full result as a single JSON document."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report(self, result: CheckResult) -> None:
        self.console.print_json(json.dumps(result.to_dict()))
