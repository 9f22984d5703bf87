"""Text-edit based Fixer Gateway."""

import logging
from typing import Optional

from file_extension_linter.domain.entities import TransformationPlan
from file_extension_linter.domain.protocols import FileSystemProtocol, FixerGatewayProtocol
from file_extension_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway

logger = logging.getLogger(__name__)


class TextEditFixerGateway(FixerGatewayProtocol):
    """Gateway for applying range-based insert/remove edits to source files."""

    def __init__(self, filesystem: Optional[FileSystemProtocol] = None) -> None:
        self.filesystem = filesystem or FileSystemGateway()

    @staticmethod
    def select_non_overlapping(fixes: list[TransformationPlan]) -> list[TransformationPlan]:
        """Keep plans in source order, dropping any that overlap an earlier one."""
        selected: list[TransformationPlan] = []
        for plan in sorted(fixes, key=lambda p: (p.start, p.end)):
            if any(plan.overlaps(kept) for kept in selected):
                logger.warning(
                    "Dropping overlapping edit at %d-%d", plan.start, plan.end
                )
                continue
            selected.append(plan)
        return selected

    def apply_to_source(self, source: str, fixes: list[TransformationPlan]) -> str:
        """Apply plans from the highest offset down so earlier offsets stay valid."""
        result = source
        for plan in reversed(self.select_non_overlapping(fixes)):
            result = plan.apply(result)
        return result

    def apply_fixes(self, file_path: str, fixes: list[TransformationPlan]) -> bool:
        """
        Apply a list of fixes to a file.

        Args:
            file_path: Path to the file to modify
            fixes: TransformationPlans computed against the file's current content

        Returns:
            True if the file was modified, False otherwise
        """
        plans = [fix for fix in fixes if fix is not None]
        if not plans:
            return False
        source = self.filesystem.read_text(file_path)
        updated = self.apply_to_source(source, plans)
        if updated == source:
            return False
        self.filesystem.write_text(file_path, updated)
        return True
