"""Tests for terminal and JSON reporters."""

import io
import json

import pytest
from rich.console import Console

from file_extension_linter.domain.entities import (
    CheckResult,
    FileReport,
    SpecifierNode,
    TransformationPlan,
    Violation,
    ViolationKind,
)
from file_extension_linter.infrastructure.reporters import (
    JsonViolationReporter,
    TerminalViolationReporter,
)
from file_extension_linter.infrastructure.services.guidance_service import GuidanceService


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _violation(specifier: str, kind: ViolationKind, ext: str, fixable: bool) -> Violation:
    return Violation(
        code="file-extension-in-import",
        kind=kind,
        extension=ext,
        message=f"{'require' if kind is ViolationKind.REQUIRE_EXTENSION else 'forbid'} file extension '{ext}'.",
        location="src/[id]/page.js:1:15",
        node=SpecifierNode(specifier, 14, 14 + len(specifier) + 2),
        fix=TransformationPlan.insert_text(20, ext) if fixable else None,
        fix_failure_reason=None if fixable else "ambiguous",
    )


@pytest.fixture
def result() -> CheckResult:
    return CheckResult(
        reports=[
            FileReport(
                "src/[id]/page.js",
                [
                    _violation("./foo", ViolationKind.REQUIRE_EXTENSION, ".js", True),
                    _violation("./bar.ts", ViolationKind.FORBID_EXTENSION, ".ts", False),
                ],
            ),
            FileReport("src/clean.js"),
        ]
    )


class TestTerminalViolationReporter:
    def test_by_file_table(self, result) -> None:
        console, buffer = _console()
        TerminalViolationReporter(GuidanceService(), console=console).report(result)
        output = buffer.getvalue()
        assert "[File Extension In Import] Import Specifier Audit" in output
        assert "src/[id]/page.js:1:15" in output
        assert "./bar.ts" in output
        assert "2 violation(s), 1 auto-fixable." in output
        assert "No automatic fix is offered" in output
        assert "Form" in output
        assert "│ import " in output

    def test_by_extension_table(self, result) -> None:
        console, buffer = _console()
        TerminalViolationReporter(GuidanceService(), console=console, view="by_extension").report(result)
        output = buffer.getvalue()
        assert "[File Extension In Import] Violations by Extension" in output
        assert "requireExt" in output
        assert "forbidExt" in output

    def test_by_extension_title_fits_on_one_line_at_narrow_width(self, result) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, width=90, color_system=None)
        TerminalViolationReporter(GuidanceService(), console=console, view="by_extension").report(result)
        title_line = buffer.getvalue().splitlines()[0]
        assert title_line.strip() == "[File Extension In Import] Violations by Extension"

    def test_clean_run(self) -> None:
        console, buffer = _console()
        TerminalViolationReporter(GuidanceService(), console=console).report(
            CheckResult(reports=[FileReport("a.js")])
        )
        assert "No import extension violations in 1 file(s)." in buffer.getvalue()

    def test_read_errors_are_listed(self) -> None:
        console, buffer = _console()
        TerminalViolationReporter(GuidanceService(), console=console).report(
            CheckResult(reports=[FileReport("bad.js", error="[Errno 13] denied")])
        )
        assert "Could not read bad.js: [Errno 13] denied" in buffer.getvalue()


class TestJsonViolationReporter:
    def test_emits_parseable_document(self, result) -> None:
        console, buffer = _console()
        JsonViolationReporter(console=console).report(result)
        data = json.loads(buffer.getvalue())
        assert data["violation_count"] == 2
        assert data["fixable_count"] == 1
        [file_entry] = data["files"]
        assert file_entry["file"] == "src/[id]/page.js"
        assert [v["kind"] for v in file_entry["violations"]] == ["requireExt", "forbidExt"]
        assert file_entry["violations"][0]["fix"]["text"] == ".js"
