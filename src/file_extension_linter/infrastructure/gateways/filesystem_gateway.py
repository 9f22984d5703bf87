"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import fnmatch
import os
from pathlib import Path
from typing import List, Sequence

from file_extension_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def list_directory(self, path: str) -> List[str]:
        """Return entry names in directory-listing order. Raises OSError."""
        return os.listdir(path or ".")

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file, keeping line endings as written."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    @staticmethod
    def _is_excluded(relative: Path, exclude: Sequence[str]) -> bool:
        rel = relative.as_posix()
        return any(
            fnmatch.fnmatch(rel, pattern) or any(fnmatch.fnmatch(part, pattern) for part in relative.parts)
            for pattern in exclude
        )

    def glob_source_files(
        self, path: str, suffixes: Sequence[str], exclude: Sequence[str] = ()
    ) -> List[str]:
        """Get all source files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if not path_obj.is_dir():
            return [str(path_obj)] if path_obj.suffix in suffixes and path_obj.is_file() else []
        files: List[str] = []
        for candidate in path_obj.rglob("*"):
            if candidate.suffix not in suffixes or not candidate.is_file():
                continue
            if self._is_excluded(candidate.relative_to(path_obj), exclude):
                continue
            files.append(str(candidate))
        return sorted(files)
