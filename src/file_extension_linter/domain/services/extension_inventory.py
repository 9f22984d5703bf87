"""Sibling-extension discovery for resolved import targets."""

import logging
import os

from file_extension_linter.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class ExtensionInventory:
    """Lists the extensions of files sharing a resolved path's basename."""

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self.filesystem = filesystem

    def list_sibling_extensions(self, resolved_path: str) -> list[str]:
        """
        Get all file extensions of the files which have the same basename.

        Compound extensions are kept whole: with ``foo.ts`` and ``foo.d.ts``
        on disk, ``/dir/foo.ts`` yields ``[".ts", ".d.ts"]`` in listing order.
        An unreadable directory yields an empty list.
        """
        stem = os.path.splitext(os.path.basename(resolved_path))[0]
        prefix = f"{stem}."
        try:
            entries = self.filesystem.list_directory(os.path.dirname(resolved_path))
        except OSError as exc:
            logger.debug("Cannot list siblings of %s: %s", resolved_path, exc)
            return []
        return [name[len(stem):] for name in entries if name.startswith(prefix)]
