"""Extension policy configuration. Immutable value objects created by Infrastructure."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from file_extension_linter.domain.constants import (
    DEFAULT_ESM,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_SOURCE_EXTENSIONS,
    DEFAULT_TRY_EXTENSIONS,
    ESM_KEY,
    TRY_EXTENSIONS_KEY,
)


class ConfigurationError(ValueError):
    """Raised when rule options or shared settings carry invalid values."""


class Style(Enum):
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: object, key: str) -> "Style":
        """Convert a raw option value to a Style, rejecting anything else."""
        if isinstance(value, Style):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"Invalid style {value!r} for '{key}': expected 'always' or 'never'."
            ) from None


@dataclass(frozen=True)
class ExtensionPolicy:
    """Effective configuration for one analysis session."""

    default_style: Style = Style.ALWAYS
    overrides_by_extension: Mapping[str, Style] = field(
        default_factory=lambda: MappingProxyType({})
    )
    resolution_extensions: tuple[str, ...] = DEFAULT_TRY_EXTENSIONS
    esm_normalize: bool = DEFAULT_ESM

    def style_for(self, extension: str) -> Style:
        """Return the override for ``extension`` or the default style."""
        return self.overrides_by_extension.get(extension, self.default_style)


class OptionResolver:
    """
    Merges rule options with shared settings.

    Each value falls back independently: explicit rule option, then
    ``settings.node``, then the hardcoded default.
    """

    @staticmethod
    def _override_option(rule_options: Optional[list[Any]]) -> Optional[Mapping[str, Any]]:
        if rule_options and len(rule_options) > 1 and isinstance(rule_options[1], Mapping):
            return rule_options[1]
        return None

    @staticmethod
    def _node_settings(shared_settings: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        node = (shared_settings or {}).get("node")
        return node if isinstance(node, Mapping) else None

    @staticmethod
    def _read_try_extensions(option: Optional[Mapping[str, Any]]) -> Optional[tuple[str, ...]]:
        if not option:
            return None
        raw = option.get(TRY_EXTENSIONS_KEY)
        if isinstance(raw, (list, tuple)) and raw and all(isinstance(e, str) for e in raw):
            return tuple(raw)
        return None

    @staticmethod
    def _read_esm(option: Optional[Mapping[str, Any]]) -> bool:
        return bool(option) and option.get(ESM_KEY) is True

    @staticmethod
    def get_try_extensions(
        rule_options: Optional[list[Any]],
        shared_settings: Optional[Mapping[str, Any]],
    ) -> tuple[str, ...]:
        """Gets "tryExtensions" from the rule option, then settings.node, then the default."""
        return (
            OptionResolver._read_try_extensions(OptionResolver._override_option(rule_options))
            or OptionResolver._read_try_extensions(OptionResolver._node_settings(shared_settings))
            or DEFAULT_TRY_EXTENSIONS
        )

    @staticmethod
    def get_esm(
        rule_options: Optional[list[Any]],
        shared_settings: Optional[Mapping[str, Any]],
    ) -> bool:
        """Gets "esm" from the rule option, then settings.node; only a literal True counts."""
        return (
            OptionResolver._read_esm(OptionResolver._override_option(rule_options))
            or OptionResolver._read_esm(OptionResolver._node_settings(shared_settings))
            or DEFAULT_ESM
        )

    @staticmethod
    def get_overrides(rule_options: Optional[list[Any]]) -> Mapping[str, Style]:
        """Per-extension styles from the second rule option, reserved keys excluded."""
        option = OptionResolver._override_option(rule_options) or {}
        overrides: dict[str, Style] = {}
        for key, value in option.items():
            if key in (TRY_EXTENSIONS_KEY, ESM_KEY):
                continue
            if not isinstance(key, str) or not key.startswith("."):
                raise ConfigurationError(
                    f"Invalid extension override key {key!r}: extensions must start with '.'."
                )
            overrides[key] = Style.parse(value, key)
        return MappingProxyType(overrides)

    @staticmethod
    def resolve(
        rule_options: Optional[list[Any]] = None,
        shared_settings: Optional[Mapping[str, Any]] = None,
    ) -> ExtensionPolicy:
        """Build the effective ExtensionPolicy. Missing levels fall back to defaults."""
        default_style = Style.ALWAYS
        if rule_options and rule_options[0] is not None:
            default_style = Style.parse(rule_options[0], "options[0]")
        return ExtensionPolicy(
            default_style=default_style,
            overrides_by_extension=OptionResolver.get_overrides(rule_options),
            resolution_extensions=OptionResolver.get_try_extensions(rule_options, shared_settings),
            esm_normalize=OptionResolver.get_esm(rule_options, shared_settings),
        )


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    """

    def __init__(
        self,
        config_dict: Optional[dict[str, object]] = None,
        tool_section: Optional[dict[str, object]] = None,
    ) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self._tool_section: dict[str, object] = dict(tool_section or {})
        self._policy = OptionResolver.resolve(self.rule_options, self.shared_settings)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def rule_options(self) -> list[Any]:
        raw = self._config.get("options", [])
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, (list, tuple)):
            return list(raw)
        raise ConfigurationError("'options' must be a style string or a list.")

    @property
    def shared_settings(self) -> dict[str, Any]:
        raw = self._config.get("settings", {})
        return dict(raw) if isinstance(raw, Mapping) else {}

    @property
    def policy(self) -> ExtensionPolicy:
        return self._policy

    def _get_list(self, key: str, defaults: tuple[str, ...]) -> tuple[str, ...]:
        raw = self._config.get(key)
        if isinstance(raw, (list, tuple)):
            return tuple(str(item) for item in raw)
        return defaults

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        """Glob patterns (matched against path parts and relative paths) to skip."""
        return self._get_list("exclude", DEFAULT_EXCLUDE_PATTERNS)

    @property
    def source_extensions(self) -> tuple[str, ...]:
        return self._get_list("source_extensions", DEFAULT_SOURCE_EXTENSIONS)

    def with_overrides(
        self, style: Optional[str] = None, esm: Optional[bool] = None
    ) -> "ConfigurationLoader":
        """Return a copy with CLI flags applied over options[0] and the esm option."""
        options = self.rule_options
        if style is not None:
            options = [style, *options[1:]] if options else [style]
        if esm is not None:
            second = dict(options[1]) if len(options) > 1 and isinstance(options[1], Mapping) else {}
            second[ESM_KEY] = esm
            options = [options[0] if options else None, second]
        config = dict(self._config)
        config["options"] = options
        return ConfigurationLoader(config, self._tool_section)
