from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ImportKind(Enum):
    """Syntactic form an import specifier was found in."""
    STATIC_IMPORT = "import"
    DYNAMIC_IMPORT = "import()"
    EXPORT_FROM = "export-from"
    REQUIRE = "require"


class ViolationKind(Enum):
    """Machine-readable violation kinds emitted by the extension rule."""
    REQUIRE_EXTENSION = "requireExt"
    FORBID_EXTENSION = "forbidExt"


class DecisionOutcome(Enum):
    NO_VIOLATION = "no_violation"
    VIOLATION_WITH_FIX = "violation_with_fix"
    VIOLATION_WITHOUT_FIX = "violation_without_fix"


class TransformationType(Enum):
    """Types of textual edits the fixer can apply."""
    INSERT_TEXT = "insert_text"
    REMOVE_RANGE = "remove_range"


@dataclass(frozen=True)
class SpecifierNode:
    """
    Location handle for a specifier string literal.

    ``start``/``end`` span the whole literal, quotes included, as character
    offsets into the source text. ``line`` and ``column`` are 1-based and point
    at the opening quote.
    """
    value: str
    start: int
    end: int
    line: int = 1
    column: int = 1
    quote: str = '"'

    @classmethod
    def from_source(cls, source: str, start: int, end: int) -> "SpecifierNode":
        """Build a node for the literal occupying ``source[start:end]``."""
        line = source.count("\n", 0, start) + 1
        column = start - (source.rfind("\n", 0, start) + 1) + 1
        return cls(
            value=source[start + 1:end - 1],
            start=start,
            end=end,
            line=line,
            column=column,
            quote=source[start],
        )


@dataclass(frozen=True)
class ImportTarget:
    """One import occurrence: the specifier as written and where it resolved to."""
    specifier: str
    resolved_path: Optional[str]
    node: SpecifierNode
    kind: ImportKind = ImportKind.STATIC_IMPORT
    source_path: Optional[str] = None

    @property
    def location(self) -> str:
        position = f"{self.node.line}:{self.node.column}"
        return f"{self.source_path}:{position}" if self.source_path else position


@dataclass(frozen=True)
class TransformationPlan:
    """
    Pure data structure describing a textual edit over a source range.

    Rules return plans; the fixer gateway interprets and applies them.
    """
    transformation_type: TransformationType
    start: int
    end: int
    text: str = ""

    @classmethod
    def insert_text(cls, offset: int, text: str) -> "TransformationPlan":
        """Create plan to insert ``text`` before ``offset``."""
        return cls(
            transformation_type=TransformationType.INSERT_TEXT,
            start=offset,
            end=offset,
            text=text,
        )

    @classmethod
    def remove_range(cls, start: int, end: int) -> "TransformationPlan":
        """Create plan to delete ``source[start:end]``."""
        return cls(
            transformation_type=TransformationType.REMOVE_RANGE,
            start=start,
            end=end,
        )

    def apply(self, source: str) -> str:
        """Return ``source`` with this edit applied."""
        return source[:self.start] + self.text + source[self.end:]

    def overlaps(self, other: "TransformationPlan") -> bool:
        if self.start == self.end or other.start == other.end:
            return self.start < other.end and other.start < self.end
        return max(self.start, other.start) < min(self.end, other.end)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.transformation_type.value,
            "range": [self.start, self.end],
            "text": self.text,
        }


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location, and an optional fix."""

    code: str
    kind: ViolationKind
    extension: str
    message: str
    location: str
    node: SpecifierNode
    fix: Optional[TransformationPlan] = None
    fix_failure_reason: Optional[str] = None
    """Reason why an auto-fix wasn't offered (e.g. ambiguous sibling files)."""
    import_kind: ImportKind = ImportKind.STATIC_IMPORT

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for reporter."""
        return {
            "code": self.code,
            "kind": self.kind.value,
            "extension": self.extension,
            "message": self.message,
            "location": self.location,
            "specifier": self.node.value,
            "import_kind": self.import_kind.value,
            "fixable": self.fixable,
            "fix": self.fix.to_dict() if self.fix else None,
            "fix_failure_reason": self.fix_failure_reason,
        }


@dataclass(frozen=True)
class Decision:
    """Tri-state result of evaluating a single import target."""
    outcome: DecisionOutcome
    violation: Optional[Violation] = None

    @classmethod
    def no_violation(cls) -> "Decision":
        return cls(outcome=DecisionOutcome.NO_VIOLATION)


@dataclass(frozen=True)
class FileReport:
    """Violations found in a single source file."""
    file_path: str
    violations: list[Violation] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "violations": [v.to_dict() for v in self.violations],
            "error": self.error,
        }


@dataclass(frozen=True)
class CheckResult:
    """Result of a complete check run across all scanned files."""
    reports: list[FileReport] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        return [v for report in self.reports for v in report.violations]

    @property
    def files_checked(self) -> int:
        return len(self.reports)

    @property
    def fixable_count(self) -> int:
        return sum(1 for v in self.violations if v.fixable)

    def has_violations(self) -> bool:
        """Check if any violations were found."""
        return any(report.violations for report in self.reports)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "files_checked": self.files_checked,
            "violation_count": len(self.violations),
            "fixable_count": self.fixable_count,
            "files": [r.to_dict() for r in self.reports if r.violations or r.error],
        }
