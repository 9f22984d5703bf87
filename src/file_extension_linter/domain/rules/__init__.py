"""Domain models for rules and violations."""

from typing import Optional, Protocol

from file_extension_linter.domain.entities import ImportTarget, TransformationPlan, Violation

__all__ = ["BaseRule", "Violation"]


class BaseRule(Protocol):
    """The fundamental unit of import governance."""

    code: str
    description: str

    def check(self, target: ImportTarget) -> Optional[Violation]:
        """Interrogate an import target for a specific policy breach."""
        ...

    def fix(self, violation: Violation) -> Optional[TransformationPlan]:
        """
        Return a plan ONLY if the resolution is deterministic.

        When the edit would be ambiguous, return None and ensure the Violation
        captures the reason in fix_failure_reason.
        """
        ...

    def get_fix_instructions(self, violation: Violation) -> str:
        """Provide human/AI instructions for a manual fix."""
        ...
