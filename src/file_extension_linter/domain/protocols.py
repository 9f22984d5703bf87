from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from file_extension_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from file_extension_linter.domain.entities import (
        CheckResult,
        ImportTarget,
        TransformationPlan,
    )


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def list_directory(self, path: str) -> list[str]:
        """Return entry names of a directory. Raises OSError when unreadable."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def glob_source_files(
        self, path: str, suffixes: Sequence[str], exclude: Sequence[str] = ()
    ) -> list[str]:
        """Get all source files with one of ``suffixes`` under path."""
        ...


class ModuleResolverProtocol(Protocol):
    """Protocol for mapping a specifier to a file on disk."""

    def resolve(
        self, specifier: str, basedir: str, try_extensions: Sequence[str]
    ) -> Optional[str]:
        """Return the absolute resolved path, or None when it cannot be resolved."""
        ...


class ImportTargetEnumeratorProtocol(Protocol):
    """Protocol for yielding import targets from a source file."""

    def enumerate_targets(self, source: str, file_path: str) -> list["ImportTarget"]:
        ...


class FixerGatewayProtocol(Protocol):
    """Protocol for applying code fixes. Implementers accept only TransformationPlan at boundary."""

    def apply_fixes(self, file_path: str, fixes: list["TransformationPlan"]) -> bool:
        """Apply a list of transformation plans to a file. Returns True if modified."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for rule registry lookups (display names, manual instructions)."""

    def get_entry(self, rule_code: str) -> Optional[RuleRegistryEntry]: ...
    def get_display_name(self, rule_code: str) -> str: ...
    def get_manual_instructions(self, rule_code: str) -> str: ...


class ViolationReporterProtocol(Protocol):
    """Protocol for rendering check results."""

    def report(self, result: "CheckResult") -> None: ...
