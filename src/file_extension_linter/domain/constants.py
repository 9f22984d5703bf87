"""
Extension Policy Constants
"""

import re

RULE_CODE: str = "file-extension-in-import"

# Reserved keys of the second rule option; every other key is an extension override.
TRY_EXTENSIONS_KEY: str = "tryExtensions"
ESM_KEY: str = "esm"

DEFAULT_TRY_EXTENSIONS: tuple[str, ...] = (".js", ".json", ".node")
DEFAULT_ESM: bool = False

TYPESCRIPT_EXTS: tuple[str, ...] = (".ts", ".tsx", ".d.ts")

# Optional @scope/ prefix plus one path segment, e.g. "lodash" or "@babel/core".
PACKAGE_NAME_PATTERN: re.Pattern[str] = re.compile(r"^(?:@[^/\\]+[/\\])?[^/\\]+$")

NODE_CORE_MODULES: tuple[str, ...] = (
    "assert",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "dns",
    "domain",
    "events",
    "fs",
    "http",
    "http2",
    "https",
    "inspector",
    "module",
    "net",
    "os",
    "path",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "repl",
    "stream",
    "string_decoder",
    "sys",
    "timers",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "v8",
    "vm",
    "worker_threads",
    "zlib",
)

# "fs/" and friends would otherwise be read as a directory import.
CORE_PACKAGE_OVERRIDE_PATTERN: re.Pattern[str] = re.compile(
    r"^(?:" + "|".join(NODE_CORE_MODULES) + r")[/\\]$"
)

REQUIRE_EXT_MESSAGE: str = "require file extension '{ext}'."
FORBID_EXT_MESSAGE: str = "forbid file extension '{ext}'."

DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx", ".mts", ".cts",
)
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules", "dist", "build", "coverage", ".git",
)

CONFIG_SECTION: str = "ext-lint"

BANNER: str = "ext-lint :: file extensions in import specifiers"
