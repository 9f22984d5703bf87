"""Use Case: Check Imports - run the extension rule over every import in a tree."""

import logging
from typing import TYPE_CHECKING

from file_extension_linter.domain.entities import CheckResult, FileReport, Violation
from file_extension_linter.domain.protocols import (
    FileSystemProtocol,
    ImportTargetEnumeratorProtocol,
    TelemetryPort,
)
from file_extension_linter.domain.rules import BaseRule

if TYPE_CHECKING:
    from file_extension_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class CheckImportsUseCase:
    """Orchestrate scanning, resolution and rule evaluation; return the check result."""

    def __init__(
        self,
        rule: BaseRule,
        enumerator: ImportTargetEnumeratorProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.rule = rule
        self.enumerator = enumerator
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader

    def check_source(self, source: str, file_path: str) -> FileReport:
        """Evaluate every import target of one source text. Targets are independent."""
        violations: list[Violation] = []
        for target in self.enumerator.enumerate_targets(source, file_path):
            violation = self.rule.check(target)
            if violation is not None:
                violations.append(violation)
        return FileReport(file_path=file_path, violations=violations)

    def check_file(self, file_path: str) -> FileReport:
        try:
            source = self.filesystem.read_text(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.warning(f"Skipping {file_path}: {exc}")
            return FileReport(file_path=file_path, error=str(exc))
        return self.check_source(source, file_path)

    def execute(self, target_path: str) -> CheckResult:
        """
        Check every source file under target_path.

        Args:
            target_path: File or directory to check

        Returns:
            CheckResult with one FileReport per scanned file.
        """
        files = self.filesystem.glob_source_files(
            target_path,
            self.config_loader.source_extensions,
            self.config_loader.exclude_patterns,
        )
        self.telemetry.step(f"Checking import specifiers in {len(files)} file(s) under {target_path}")
        reports = [self.check_file(file_path) for file_path in files]
        result = CheckResult(reports=reports)
        logger.debug(
            "Checked %d file(s): %d violation(s), %d fixable",
            result.files_checked, len(result.violations), result.fixable_count,
        )
        return result
