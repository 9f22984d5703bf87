"""Node-style module resolver for import specifiers."""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from file_extension_linter.domain.constants import NODE_CORE_MODULES
from file_extension_linter.domain.protocols import ModuleResolverProtocol

logger = logging.getLogger(__name__)


class NodeModuleResolver(ModuleResolverProtocol):
    """
    Resolves specifiers the way Node's CommonJS loader does for plain files.

    Relative and absolute specifiers are tried as an exact file, then with each
    of ``try_extensions`` appended, then as a directory (``package.json`` main,
    then ``index`` plus each extension). Bare specifiers are looked up in the
    ``node_modules`` directories above ``basedir``. Path aliases, export maps
    and conditions are out of scope.
    """

    def resolve(
        self, specifier: str, basedir: str, try_extensions: Sequence[str]
    ) -> Optional[str]:
        if not specifier or self._is_core_module(specifier):
            return None
        if specifier.startswith(("./", "../", "/")) or specifier in (".", ".."):
            target = Path(basedir, specifier)
            return self._load_as_file(target, try_extensions) or self._load_as_directory(
                target, try_extensions
            )
        return self._load_node_modules(specifier, Path(basedir), try_extensions)

    @staticmethod
    def _is_core_module(specifier: str) -> bool:
        # Core modules shadow same-named packages, subpaths included ("fs/promises").
        return specifier.startswith("node:") or specifier.split("/", 1)[0] in NODE_CORE_MODULES

    @staticmethod
    def _load_as_file(target: Path, try_extensions: Sequence[str]) -> Optional[str]:
        if target.is_file():
            return os.path.abspath(target)
        for ext in try_extensions:
            candidate = Path(f"{target}{ext}")
            if candidate.is_file():
                return os.path.abspath(candidate)
        return None

    def _load_as_directory(self, target: Path, try_extensions: Sequence[str]) -> Optional[str]:
        if not target.is_dir():
            return None
        package_json = target / "package.json"
        if package_json.is_file():
            try:
                with open(package_json, encoding="utf-8") as f:
                    main = json.load(f).get("main")
            except (OSError, ValueError, AttributeError) as exc:
                logger.debug("Ignoring unreadable %s: %s", package_json, exc)
                main = None
            if isinstance(main, str) and main:
                main_path = target / main
                resolved = self._load_as_file(main_path, try_extensions) or self._load_index(
                    main_path, try_extensions
                )
                if resolved:
                    return resolved
        return self._load_index(target, try_extensions)

    @staticmethod
    def _load_index(target: Path, try_extensions: Sequence[str]) -> Optional[str]:
        for ext in try_extensions:
            candidate = target / f"index{ext}"
            if candidate.is_file():
                return os.path.abspath(candidate)
        return None

    def _load_node_modules(
        self, specifier: str, basedir: Path, try_extensions: Sequence[str]
    ) -> Optional[str]:
        current = basedir.resolve()
        while True:
            if current.name != "node_modules":
                target = current / "node_modules" / specifier
                resolved = self._load_as_file(target, try_extensions) or self._load_as_directory(
                    target, try_extensions
                )
                if resolved:
                    return resolved
            if current.parent == current:
                return None
            current = current.parent
