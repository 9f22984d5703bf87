"""Load [tool.ext-lint] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from file_extension_linter.domain.constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml that has a [tool.ext-lint] table.
    """

    @staticmethod
    def load_config_from_fs(
        start: Optional[Path] = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.ext-lint] and [tool] from pyproject.toml. Returns (config_dict, tool_section)."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError) as exc:
                    logger.warning("Skipping unreadable %s: %s", config_file, exc)
                else:
                    tool_section = data.get("tool", {}) or {}
                    config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
                    if config_dict:
                        logger.debug("Loaded configuration from %s", config_file)
                        return (config_dict, tool_section)
            if current_path.parent == current_path:
                return (empty, empty)
            current_path = current_path.parent
