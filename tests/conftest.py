"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path.
"""

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

import pytest

from file_extension_linter.domain.entities import ImportTarget, SpecifierNode
from file_extension_linter.infrastructure.di.container import LinterContainer


@pytest.fixture(autouse=True)
def isolate_global_state() -> Iterator[None]:
    """CLI runs reconfigure the package logger and may create the global container."""
    package_logger = logging.getLogger("file_extension_linter")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield
    package_logger.handlers, package_logger.level, package_logger.propagate = saved
    LinterContainer.reset()


def make_target(
    specifier: str,
    resolved_path: Optional[str],
    prefix: str = "import x from ",
) -> tuple[ImportTarget, str]:
    """Build an ImportTarget whose node spans a double-quoted literal inside a one-line source."""
    source = f'{prefix}"{specifier}";\n'
    start = len(prefix)
    node = SpecifierNode.from_source(source, start, start + len(specifier) + 2)
    return ImportTarget(specifier=specifier, resolved_path=resolved_path, node=node), source


@pytest.fixture
def target_factory() -> Callable[..., tuple[ImportTarget, str]]:
    return make_target


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """Create empty (or given) files under tmp_path; returns tmp_path."""

    def _make(*names: str, contents: Optional[dict[str, str]] = None) -> Path:
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("")
        for name, text in (contents or {}).items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        return tmp_path

    return _make
