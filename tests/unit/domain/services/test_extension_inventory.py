"""Tests for ExtensionInventory."""

from unittest.mock import MagicMock

from file_extension_linter.domain.services.extension_inventory import ExtensionInventory
from file_extension_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class TestListSiblingExtensions:
    def test_lists_extensions_sharing_basename(self, make_files) -> None:
        root = make_files("foo.js", "foo.json", "foobar.js", "bar.js")
        inventory = ExtensionInventory(FileSystemGateway())
        result = inventory.list_sibling_extensions(str(root / "foo.js"))
        assert sorted(result) == [".js", ".json"]

    def test_compound_extension_is_kept_whole(self, make_files) -> None:
        root = make_files("foo.ts", "foo.d.ts")
        inventory = ExtensionInventory(FileSystemGateway())
        assert sorted(inventory.list_sibling_extensions(str(root / "foo.ts"))) == [".d.ts", ".ts"]

    def test_extensionless_resolved_path(self, make_files) -> None:
        root = make_files("foo", "foo.mjs")
        inventory = ExtensionInventory(FileSystemGateway())
        assert inventory.list_sibling_extensions(str(root / "foo")) == [".mjs"]

    def test_preserves_listing_order(self) -> None:
        filesystem = MagicMock()
        filesystem.list_directory.return_value = ["foo.tsx", "README.md", "foo.js"]
        inventory = ExtensionInventory(filesystem)
        assert inventory.list_sibling_extensions("/src/foo.tsx") == [".tsx", ".js"]
        filesystem.list_directory.assert_called_once_with("/src")

    def test_unreadable_directory_yields_empty_list(self) -> None:
        filesystem = MagicMock()
        filesystem.list_directory.side_effect = PermissionError("denied")
        inventory = ExtensionInventory(filesystem)
        assert inventory.list_sibling_extensions("/locked/foo.js") == []

    def test_missing_directory_yields_empty_list(self, tmp_path) -> None:
        inventory = ExtensionInventory(FileSystemGateway())
        assert inventory.list_sibling_extensions(str(tmp_path / "nope" / "foo.js")) == []
