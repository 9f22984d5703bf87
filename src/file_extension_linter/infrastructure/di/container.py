from typing import TYPE_CHECKING, Any, Optional, cast

from file_extension_linter.domain.config import ConfigurationLoader, ExtensionPolicy
from file_extension_linter.domain.rules.file_extension import FileExtensionInImportRule
from file_extension_linter.domain.services.extension_inventory import ExtensionInventory
from file_extension_linter.infrastructure.config_file_loader import ConfigFileLoader
from file_extension_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from file_extension_linter.infrastructure.gateways.import_scanner import ImportScanner
from file_extension_linter.infrastructure.gateways.node_resolver import NodeModuleResolver
from file_extension_linter.infrastructure.gateways.text_edit_fixer_gateway import (
    TextEditFixerGateway,
)
from file_extension_linter.infrastructure.services.guidance_service import GuidanceService
from file_extension_linter.infrastructure.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from file_extension_linter.domain.protocols import (
        FileSystemProtocol,
        FixerGatewayProtocol,
        GuidanceServiceProtocol,
        TelemetryPort,
    )


class LinterContainer:
    """Dependency Injection Container for the extension linter."""

    _instance: Optional["LinterContainer"] = None

    def __init__(self, config_loader: Optional[ConfigurationLoader] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: Optional[ConfigurationLoader]) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("EXT-LINT", "cyan", "Import specifier audit online")
        )
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("TextEditFixerGateway", TextEditFixerGateway(filesystem))

    def rule_for(self, policy: ExtensionPolicy) -> FileExtensionInImportRule:
        """Build a rule bound to `policy`, sharing the registered filesystem gateway."""
        return FileExtensionInImportRule(policy, ExtensionInventory(self.get_filesystem_gateway()))

    def enumerator_for(self, policy: ExtensionPolicy) -> ImportScanner:
        return ImportScanner(NodeModuleResolver(), policy.resolution_extensions)

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_fixer_gateway(self) -> "FixerGatewayProtocol":
        return cast("FixerGatewayProtocol", self.get("TextEditFixerGateway"))

    @classmethod
    def get_instance(cls) -> "LinterContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = LinterContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
