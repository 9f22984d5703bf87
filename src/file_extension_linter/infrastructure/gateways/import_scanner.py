"""Import Scanner - enumerates import specifiers in JavaScript/TypeScript source."""

import os
import re
from typing import Iterator, Optional, Sequence

from file_extension_linter.domain.constants import DEFAULT_TRY_EXTENSIONS
from file_extension_linter.domain.entities import ImportKind, ImportTarget, SpecifierNode
from file_extension_linter.domain.protocols import (
    ImportTargetEnumeratorProtocol,
    ModuleResolverProtocol,
)

_STRING = r"""(?:"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')"""
_NOT_MEMBER = r"(?<![\w$.])"
# A slash right after one of these punctuators starts a regex literal, not a division.
_REGEX = r"(?<=[=(,:\[!&|?{;])\s*/(?![/*])(?:\\.|\[(?:\\.|[^\]\\\n])*\]|[^/\\\n\[])+/[A-Za-z]*"

# Alternatives are tried left to right at every position, so comments, regex
# literals and ordinary string literals are consumed whole and never scanned
# for imports.
_TOKEN = re.compile(
    rf"""
    (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<regex>{_REGEX})
  | {_NOT_MEMBER}(?P<fromkw>import|export)(?:\s+type)?\s*
        (?:[\w$]+\s*,?\s*)?
        (?:\*\s*(?:as\s+[\w$]+)?|\{{[^}}]*\}}|[\w$]+)?
        \s*from\s*(?P<from_lit>{_STRING})
  | {_NOT_MEMBER}import\s*(?P<bare_lit>{_STRING})
  | {_NOT_MEMBER}import\s*\(\s*(?P<dynamic_lit>{_STRING})\s*[,)]
  | {_NOT_MEMBER}require\s*\(\s*(?P<require_lit>{_STRING})\s*[,)]
  | (?P<string>{_STRING}|`(?:\\.|[^`\\])*`)
    """,
    re.VERBOSE | re.DOTALL,
)


class ImportScanner(ImportTargetEnumeratorProtocol):
    """
    Yields an ImportTarget for every import-like construct with a literal specifier.

    Recognised forms: ``import x from "m"``, ``import "m"``, ``export … from "m"``,
    ``import("m")`` and ``require("m")``. Specifiers built from expressions or
    template literals are skipped.

    JSX text is not tokenized: an apostrophe in element text (``<p>Don't</p>``)
    opens a string that runs to the next quote on the same line, hiding any
    import written after it on that line.
    """

    def __init__(
        self,
        resolver: ModuleResolverProtocol,
        try_extensions: Sequence[str] = DEFAULT_TRY_EXTENSIONS,
    ) -> None:
        self.resolver = resolver
        self.try_extensions = tuple(try_extensions)

    def iter_specifiers(self, source: str) -> Iterator[tuple[ImportKind, SpecifierNode]]:
        for match in _TOKEN.finditer(source):
            group, kind = self._classify(match)
            if group is None or kind is None:
                continue
            yield kind, SpecifierNode.from_source(source, match.start(group), match.end(group))

    @staticmethod
    def _classify(match: "re.Match[str]") -> tuple[Optional[str], Optional[ImportKind]]:
        if match.group("from_lit") is not None:
            kind = ImportKind.EXPORT_FROM if match.group("fromkw") == "export" else ImportKind.STATIC_IMPORT
            return "from_lit", kind
        if match.group("bare_lit") is not None:
            return "bare_lit", ImportKind.STATIC_IMPORT
        if match.group("dynamic_lit") is not None:
            return "dynamic_lit", ImportKind.DYNAMIC_IMPORT
        if match.group("require_lit") is not None:
            return "require_lit", ImportKind.REQUIRE
        return None, None

    def enumerate_targets(self, source: str, file_path: str) -> list[ImportTarget]:
        # Virtual buffers ("<input>", "<text>") have no directory to resolve against.
        if file_path.startswith("<"):
            return []
        basedir = os.path.dirname(os.path.abspath(file_path))
        return [
            ImportTarget(
                specifier=node.value,
                resolved_path=self.resolver.resolve(node.value, basedir, self.try_extensions),
                node=node,
                kind=kind,
                source_path=file_path,
            )
            for kind, node in self.iter_specifiers(source)
        ]
