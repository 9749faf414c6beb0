# Tests for config path resolution and the client catalog
import os
from pathlib import Path

import pytest

from n8nmcp.platforms import CLIENT_SPECS, get_client_spec, resolve_config_path, template_for_platform


HOME = Path("/home/ada")


class TestResolveConfigPath:
    """Tests for resolve_config_path."""

    def test_relative_template_joins_home(self):
        """Non-Windows templates are relative to the home dir."""
        result = resolve_config_path(".cursor/mcp.json", "linux", home=HOME, environ={})
        assert result == os.path.join(str(HOME), ".cursor", "mcp.json")

    def test_darwin_application_support(self):
        """Spaces in segments are kept as-is."""
        result = resolve_config_path(
            "Library/Application Support/Claude/claude_desktop_config.json",
            "darwin",
            home=HOME,
            environ={},
        )
        assert result.endswith(os.path.join("Application Support", "Claude", "claude_desktop_config.json"))
        assert result.startswith(str(HOME))

    def test_appdata_from_environment(self):
        """%APPDATA% is replaced by the APPDATA variable on win32."""
        result = resolve_config_path(
            "%APPDATA%/Claude/claude_desktop_config.json",
            "win32",
            home=HOME,
            environ={"APPDATA": "C:\\Users\\ada\\AppData\\Roaming"},
        )
        assert result == "C:\\Users\\ada\\AppData\\Roaming\\Claude\\claude_desktop_config.json"

    def test_appdata_fallback_to_home(self):
        """Without APPDATA the roaming dir under home is used."""
        result = resolve_config_path(
            "%APPDATA%/Claude/claude_desktop_config.json", "win32", home=HOME, environ={}
        )
        assert "%APPDATA%" not in result
        assert "/" not in result
        assert result.endswith("AppData\\Roaming\\Claude\\claude_desktop_config.json")

    def test_appdata_placeholder_ignored_off_windows(self):
        """The placeholder is only special on win32."""
        result = resolve_config_path("%APPDATA%/x.json", "linux", home=HOME, environ={"APPDATA": "/tmp"})
        assert result == os.path.join(str(HOME), "%APPDATA%", "x.json")

    @pytest.mark.parametrize("platform", ["win32", "darwin", "linux"])
    def test_every_catalog_template_resolves(self, platform):
        """Every catalog template resolves to a full path without placeholders."""
        for spec in CLIENT_SPECS:
            template = template_for_platform(spec, platform)
            if template is None:
                continue
            result = resolve_config_path(template, platform, home=HOME, environ={})
            assert "%APPDATA%" not in result
            assert result != template
            assert len(result) > len(template.replace("%APPDATA%", ""))

    def test_does_not_touch_filesystem(self, tmp_path):
        """Resolving never creates anything."""
        resolve_config_path(".cursor/mcp.json", "linux", home=tmp_path, environ={})
        assert list(tmp_path.iterdir()) == []


class TestCatalog:
    """Tests for the static client catalog."""

    def test_catalog_order(self):
        """Clients are offered in a fixed order."""
        assert [spec.name for spec in CLIENT_SPECS] == [
            "Claude Desktop",
            "Cursor",
            "Windsurf",
            "Claude Code",
            "VS Code / Cline",
        ]

    def test_json_clients_have_key_and_paths(self):
        """Every json client declares its key and at least one path."""
        for spec in CLIENT_SPECS:
            if spec.mode == "json":
                assert spec.json_key == "mcpServers"
                assert spec.config_paths

    def test_template_for_unknown_platform(self):
        """Unsupported platforms have no template."""
        spec = get_client_spec("Claude Desktop")
        assert spec is not None
        assert template_for_platform(spec, "sunos5") is None

    def test_get_client_spec_case_insensitive(self):
        """Lookup ignores case."""
        assert get_client_spec("cursor").name == "Cursor"
        assert get_client_spec("nope") is None
