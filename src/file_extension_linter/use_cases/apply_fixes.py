"""Use Case: Apply Fixes to Source Code."""

import logging
from dataclasses import dataclass, field

from file_extension_linter.domain.entities import FileReport, TransformationPlan
from file_extension_linter.domain.protocols import FixerGatewayProtocol, TelemetryPort
from file_extension_linter.domain.rules import BaseRule
from file_extension_linter.use_cases.check_imports import CheckImportsUseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixSummary:
    """Outcome of a fix run."""
    modified_files: list[str] = field(default_factory=list)
    applied_count: int = 0
    remaining: list[FileReport] = field(default_factory=list)

    @property
    def remaining_count(self) -> int:
        return sum(len(report.violations) for report in self.remaining)


class ApplyFixesUseCase:
    """Apply every deterministic fix, then re-check the touched files."""

    def __init__(
        self,
        rule: BaseRule,
        check_imports: CheckImportsUseCase,
        fixer_gateway: FixerGatewayProtocol,
        telemetry: TelemetryPort,
        dry_run: bool = False,
    ) -> None:
        self.rule = rule
        self.check_imports = check_imports
        self.fixer_gateway = fixer_gateway
        self.telemetry = telemetry
        self.dry_run = dry_run

    def _plans_for(self, report: FileReport) -> list[TransformationPlan]:
        plans: list[TransformationPlan] = []
        for violation in report.violations:
            plan = self.rule.fix(violation)
            if plan is None:
                logger.debug(
                    "No fix for %s: %s", violation.location, violation.fix_failure_reason
                )
                continue
            plans.append(plan)
        return plans

    def execute(self, target_path: str) -> FixSummary:
        """Apply fixes to all files in target path."""
        self.telemetry.step(f"🔧 Starting fix run on {target_path}")
        result = self.check_imports.execute(target_path)
        modified: list[str] = []
        applied = 0
        remaining: list[FileReport] = []

        for report in result.reports:
            plans = self._plans_for(report)
            if not plans:
                if report.violations:
                    remaining.append(report)
                continue
            if self.dry_run:
                self.telemetry.step(f"Would apply {len(plans)} fix(es) to {report.file_path}")
                applied += len(plans)
                remaining.append(report)
                continue
            if self.fixer_gateway.apply_fixes(report.file_path, plans):
                modified.append(report.file_path)
                applied += len(plans)
            recheck = self.check_imports.check_file(report.file_path)
            if recheck.violations:
                remaining.append(recheck)

        status = "dry run complete" if self.dry_run else "complete"
        self.telemetry.step(
            f"🛠️ Fix run {status}. Fixes applied: {applied}, files modified: {len(modified)}"
        )
        return FixSummary(modified_files=modified, applied_count=applied, remaining=remaining)
