"""End-to-end runs of the ext-lint entry point against a small TypeScript project."""

import json
import sys
from pathlib import Path

import pytest

from file_extension_linter import __main__ as entry_point

PYPROJECT = """
[tool.ext-lint]
options = ["always", { tryExtensions = [".ts", ".tsx", ".js"], esm = true }]
exclude = ["generated"]
"""

INDEX = """\
import { helper } from './util';
import type { Shape } from './types';
export * from "./widgets/button";
const lazy = await import('./lazy');
// import './commented-out';
import React from 'react';
"""


@pytest.fixture
def ts_project(make_files, monkeypatch) -> Path:
    root = make_files(
        "src/util.ts",
        "src/types.ts",
        "src/types.d.ts",
        "src/widgets/button.tsx",
        "src/lazy.js",
        contents={
            "pyproject.toml": PYPROJECT,
            "src/index.ts": INDEX,
            "src/generated/out.ts": "import x from './nope';\n",
        },
    )
    monkeypatch.chdir(root)
    return root


def _run(monkeypatch, capsys, *args: str) -> tuple[int, str]:
    monkeypatch.setattr(sys, "argv", ["ext-lint", *args])
    with pytest.raises(SystemExit) as exc_info:
        entry_point.main()
    return exc_info.value.code or 0, capsys.readouterr().out


class TestCheckThenFix:
    def test_check_reports_from_project_configuration(self, ts_project, monkeypatch, capsys) -> None:
        code, out = _run(monkeypatch, capsys, "check", "--format", "json")

        assert code == 1
        data = json.loads(out)
        [file_entry] = data["files"]
        assert file_entry["file"].endswith("index.ts")
        by_specifier = {v["specifier"]: v for v in file_entry["violations"]}
        assert set(by_specifier) == {"./util", "./types", "./widgets/button", "./lazy"}
        assert by_specifier["./util"]["extension"] == ".js"
        assert by_specifier["./widgets/button"]["extension"] == ".js"
        assert by_specifier["./lazy"]["fixable"] is True
        # types.ts and types.d.ts share the basename.
        assert by_specifier["./types"]["fixable"] is False

    def test_fix_then_recheck(self, ts_project, monkeypatch, capsys) -> None:
        code, _ = _run(monkeypatch, capsys, "fix")
        assert code == 1

        fixed = (ts_project / "src" / "index.ts").read_text()
        assert "from './util.js';" in fixed
        assert 'from "./widgets/button.js";' in fixed
        assert "from './types';" in fixed
        assert "import('./lazy.js')" in fixed
        assert "// import './commented-out';" in fixed

        code, out = _run(monkeypatch, capsys, "check", "-f", "json")
        assert code == 1
        data = json.loads(out)
        assert data["violation_count"] == 1
        assert data["files"][0]["violations"][0]["specifier"] == "./types"

    def test_never_style_from_command_line(self, ts_project, monkeypatch, capsys) -> None:
        code, out = _run(monkeypatch, capsys, "check", "src", "--style", "never", "--no-esm")
        assert code == 0
        # The generated/ directory is excluded by configuration.
        assert "No import extension violations in 6 file(s)." in out

    def test_never_style_removes_added_extension(self, ts_project, monkeypatch, capsys) -> None:
        _run(monkeypatch, capsys, "fix")
        code, _ = _run(monkeypatch, capsys, "fix", "--style", "never")
        assert code == 0
        assert "import('./lazy')" in (ts_project / "src" / "index.ts").read_text()
