"""GuidanceService: loads the rule registry and provides display names and manual_instructions."""

from pathlib import Path
from typing import Optional, cast

import yaml

from file_extension_linter.domain.protocols import GuidanceServiceProtocol
from file_extension_linter.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and answers registry lookups."""

    def __init__(self, registry_path: Optional[str] = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_entry(self, rule_code: str) -> Optional[RuleRegistryEntry]:
        entry = self._registry.get(rule_code)
        if entry:
            return cast(RuleRegistryEntry, dict(entry))
        for e in self._registry.values():
            if e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def get_display_name(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code)
        if not entry:
            return rule_code.replace("-", " ").title()
        return str(
            entry.get("display_name")
            or entry.get("short_description")
            or rule_code.replace("-", " ").title()
        )

    def get_manual_instructions(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"])
        default_entry = self._registry.get("_default")
        if default_entry and "manual_instructions" in default_entry:
            return str(default_entry["manual_instructions"])
        return "See project docs. Fix the violation at the reported location."
