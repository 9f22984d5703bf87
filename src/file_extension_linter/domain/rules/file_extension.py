"""File Extension In Import Rule - enforce the style of file extensions in specifiers."""

import logging
import os
from typing import Optional

from file_extension_linter.domain.config import ExtensionPolicy, Style
from file_extension_linter.domain.constants import (
    CORE_PACKAGE_OVERRIDE_PATTERN,
    FORBID_EXT_MESSAGE,
    PACKAGE_NAME_PATTERN,
    REQUIRE_EXT_MESSAGE,
    RULE_CODE,
    TYPESCRIPT_EXTS,
)
from file_extension_linter.domain.entities import (
    Decision,
    DecisionOutcome,
    ImportTarget,
    TransformationPlan,
    Violation,
    ViolationKind,
)
from file_extension_linter.domain.rules import BaseRule
from file_extension_linter.domain.services.extension_inventory import ExtensionInventory

logger = logging.getLogger(__name__)

AMBIGUOUS_INSERT_REASON = (
    "Fix withheld: several files share this basename, the extension to add is ambiguous."
)
AMBIGUOUS_REMOVE_REASON = (
    "Fix withheld: removing the extension would make resolution ambiguous "
    "between same-named files."
)

MESSAGE_TEMPLATES: dict[ViolationKind, str] = {
    ViolationKind.REQUIRE_EXTENSION: REQUIRE_EXT_MESSAGE,
    ViolationKind.FORBID_EXTENSION: FORBID_EXT_MESSAGE,
}


class FileExtensionInImportRule(BaseRule):
    """
    Decides which extension an import specifier should carry.

    The canonical extension is taken from the resolved path, else from the only
    TypeScript sibling, else from the only sibling. When none of those is
    unique the target is skipped. Under ``esm_normalize`` TypeScript sources
    are treated as ``.js``.
    """

    code: str = RULE_CODE
    description: str = "Enforce the style of file extensions in import specifiers."

    def __init__(self, policy: ExtensionPolicy, inventory: ExtensionInventory) -> None:
        self.policy = policy
        self.inventory = inventory

    @staticmethod
    def is_exempt(target: ImportTarget) -> bool:
        """Unresolved targets, bare packages and ``fs/``-style core names never report."""
        return (
            not target.resolved_path
            or PACKAGE_NAME_PATTERN.match(target.specifier) is not None
            or CORE_PACKAGE_OVERRIDE_PATTERN.match(target.specifier) is not None
        )

    def evaluate(self, target: ImportTarget) -> Decision:
        """Compute the tri-state decision for a single import target."""
        if self.is_exempt(target):
            return Decision.no_violation()
        resolved_path = str(target.resolved_path)
        name = target.specifier

        original_ext = os.path.splitext(name)[1]
        resolved_ext = os.path.splitext(resolved_path)[1]
        existing_exts = self.inventory.list_sibling_extensions(resolved_path)
        typescript_exts = [ext for ext in existing_exts if ext in TYPESCRIPT_EXTS]
        unique_candidate = len(existing_exts) == 1 or len(typescript_exts) == 1

        if not resolved_ext and not unique_candidate:
            logger.debug(
                "Skipping %s: extension of %s is ambiguous (%s)",
                name, resolved_path, existing_exts,
            )
            return Decision.no_violation()

        found_ext = resolved_ext or (typescript_exts[0] if typescript_exts else existing_exts[0])
        ext = ".js" if self.policy.esm_normalize and found_ext in TYPESCRIPT_EXTS else found_ext
        style = self.policy.style_for(ext)

        if style is Style.ALWAYS and ext != original_ext:
            if unique_candidate:
                plan = TransformationPlan.insert_text(target.node.end - 1, ext)
                return self._decide(target, ViolationKind.REQUIRE_EXTENSION, ext, plan)
            return self._decide(
                target, ViolationKind.REQUIRE_EXTENSION, ext, None, AMBIGUOUS_INSERT_REASON
            )

        if style is Style.NEVER and ext == original_ext:
            if len(existing_exts) == 1:
                start = target.node.start + 1 + name.rindex(ext)
                plan = TransformationPlan.remove_range(start, start + len(ext))
                return self._decide(target, ViolationKind.FORBID_EXTENSION, ext, plan)
            return self._decide(
                target, ViolationKind.FORBID_EXTENSION, ext, None, AMBIGUOUS_REMOVE_REASON
            )

        return Decision.no_violation()

    def _decide(
        self,
        target: ImportTarget,
        kind: ViolationKind,
        ext: str,
        plan: Optional[TransformationPlan],
        failure_reason: Optional[str] = None,
    ) -> Decision:
        violation = Violation(
            code=self.code,
            kind=kind,
            extension=ext,
            message=MESSAGE_TEMPLATES[kind].format(ext=ext),
            location=target.location,
            node=target.node,
            fix=plan,
            fix_failure_reason=failure_reason,
            import_kind=target.kind,
        )
        outcome = (
            DecisionOutcome.VIOLATION_WITH_FIX if plan else DecisionOutcome.VIOLATION_WITHOUT_FIX
        )
        return Decision(outcome=outcome, violation=violation)

    def check(self, target: ImportTarget) -> Optional[Violation]:
        """Return the violation for ``target``, or None when it conforms."""
        return self.evaluate(target).violation

    def fix(self, violation: Violation) -> Optional[TransformationPlan]:
        if violation.code != self.code:
            return None
        return violation.fix

    def get_fix_instructions(self, violation: Violation) -> str:
        """Provide human/AI instructions for manual fix."""
        if violation.kind is ViolationKind.REQUIRE_EXTENSION:
            return (
                f"Append '{violation.extension}' to the specifier '{violation.node.value}'. "
                "If several files share the basename, pick the one the import is meant to load."
            )
        return (
            f"Remove '{violation.extension}' from the specifier '{violation.node.value}', "
            "or rename the sibling files so the extensionless import resolves to a single file."
        )
