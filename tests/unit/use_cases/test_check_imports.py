"""Tests for CheckImportsUseCase."""

from unittest.mock import MagicMock

import pytest

from file_extension_linter.domain.config import ConfigurationLoader
from file_extension_linter.domain.entities import ViolationKind
from file_extension_linter.domain.rules.file_extension import FileExtensionInImportRule
from file_extension_linter.domain.services.extension_inventory import ExtensionInventory
from file_extension_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from file_extension_linter.infrastructure.gateways.import_scanner import ImportScanner
from file_extension_linter.infrastructure.gateways.node_resolver import NodeModuleResolver
from file_extension_linter.use_cases.check_imports import CheckImportsUseCase


def _use_case(config: dict, telemetry=None) -> CheckImportsUseCase:
    loader = ConfigurationLoader(config, {})
    filesystem = FileSystemGateway()
    return CheckImportsUseCase(
        rule=FileExtensionInImportRule(loader.policy, ExtensionInventory(filesystem)),
        enumerator=ImportScanner(NodeModuleResolver(), loader.policy.resolution_extensions),
        filesystem=filesystem,
        telemetry=telemetry or MagicMock(),
        config_loader=loader,
    )


@pytest.fixture
def project(make_files):
    return make_files(
        "src/util.js",
        "src/data.json",
        "src/data.js",
        contents={
            "src/index.js": (
                "import util from './util';\n"
                "import data from './data.json';\n"
                "const same = require('./data');\n"
                "import React from 'react';\n"
            ),
            "src/clean.mjs": "import util from './util.js';\n",
        },
    )


class TestCheckSource:
    def test_reports_each_target_independently(self, project) -> None:
        report = _use_case({"options": ["always"]}).check_source(
            (project / "src" / "index.js").read_text(), str(project / "src" / "index.js")
        )
        specifiers = [v.node.value for v in report.violations]
        # './data' resolves to data.js but data.json shares the basename.
        assert specifiers == ["./util", "./data"]
        util, data = report.violations
        assert util.fixable
        assert not data.fixable
        assert data.kind is ViolationKind.REQUIRE_EXTENSION

    def test_never_style(self, project) -> None:
        report = _use_case({"options": ["never"]}).check_source(
            "import util from './util.js';\n", str(project / "src" / "x.js")
        )
        [violation] = report.violations
        assert violation.kind is ViolationKind.FORBID_EXTENSION
        assert violation.location.endswith("x.js:1:18")

    def test_virtual_buffer_has_no_targets(self) -> None:
        report = _use_case({}).check_source("import a from './a';", "<input>")
        assert report.violations == []


class TestExecute:
    def test_scans_tree_and_aggregates(self, project) -> None:
        telemetry = MagicMock()
        result = _use_case({"options": ["always"]}, telemetry).execute(str(project))
        # data.json is not a source file.
        assert result.files_checked == 4
        assert len(result.violations) == 2
        assert result.fixable_count == 1
        telemetry.step.assert_called_once()

    def test_respects_configured_source_extensions(self, project) -> None:
        result = _use_case({"source_extensions": [".mjs"]}).execute(str(project))
        assert result.files_checked == 1
        assert not result.has_violations()

    def test_unreadable_file_becomes_error_report(self, make_files) -> None:
        root = make_files(contents={"bad.js": ""})
        (root / "bad.js").write_bytes(b"\xff\xfe\xfa")
        telemetry = MagicMock()
        result = _use_case({}, telemetry).execute(str(root))
        [report] = result.reports
        assert report.error is not None
        telemetry.warning.assert_called_once()
