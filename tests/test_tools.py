"""
Tests for MCP tools.

Tests the MCP tool implementations for conversion and profiles.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_rem.profiles import ProfileLoader
from chuk_mcp_rem.tools import register_conversion_tools, register_profile_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def loader(library_path: Path, temp_dir: Path) -> ProfileLoader:
    """Profile loader over the built-in library and a temp project."""
    return ProfileLoader(library_path=library_path, project_path=temp_dir / "profiles")


@pytest.fixture
def conversion_tools(loader: ProfileLoader) -> dict:
    return register_conversion_tools(MockMCPServer("test"), loader)


@pytest.fixture
def profile_tools(loader: ProfileLoader) -> dict:
    return register_profile_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_with_server(self, loader: ProfileLoader):
        """Every returned tool is also registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_conversion_tools(mcp, loader)
        tools.update(register_profile_tools(mcp, loader))
        assert set(tools) == set(mcp.tools)
        assert set(tools) == {
            "rem_convert",
            "rem_convert_declarations",
            "rem_convert_value",
            "rem_baseline",
            "rem_list_profiles",
            "rem_describe_profile",
            "rem_copy_profile_to_project",
        }


class TestConversionTools:
    """Tests for conversion tools."""

    @pytest.mark.asyncio
    async def test_convert(self, conversion_tools: dict):
        """Convert one declaration with the defaults."""
        result = await conversion_tools["rem_convert"](property="margin", value="20px auto")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["conversion"]["rem"] == "1.25rem auto"
        assert data["conversion"]["declarations"] == ["margin: 1.25rem auto;"]

    @pytest.mark.asyncio
    async def test_convert_with_profile(self, conversion_tools: dict):
        """The legacy profile adds a px fallback first."""
        result = await conversion_tools["rem_convert"](
            property="margin", value="20px", profile="legacy"
        )
        data = json.loads(result)
        assert data["conversion"]["declarations"] == ["margin: 20px;", "margin: 1.25rem;"]

    @pytest.mark.asyncio
    async def test_convert_with_overrides(self, conversion_tools: dict):
        """Explicit settings override the profile."""
        result = await conversion_tools["rem_convert"](
            property="margin",
            value="15px",
            profile="legacy",
            base_font_size="10px",
            output_mode="rem",
        )
        data = json.loads(result)
        assert data["conversion"]["declarations"] == ["margin: 1.5rem;"]

    @pytest.mark.asyncio
    async def test_convert_unknown_profile(self, conversion_tools: dict):
        """Unknown profiles are reported as errors."""
        result = await conversion_tools["rem_convert"](
            property="margin", value="20px", profile="nonexistent"
        )
        data = json.loads(result)
        assert data["status"] == "error"
        assert "nonexistent" in data["message"]

    @pytest.mark.asyncio
    async def test_convert_invalid_base(self, conversion_tools: dict):
        """Invalid configuration is reported, not raised."""
        result = await conversion_tools["rem_convert"](
            property="margin", value="20px", base_font_size=0
        )
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_convert_declarations(self, conversion_tools: dict):
        """Several declarations keep their order and policies."""
        result = await conversion_tools["rem_convert_declarations"](
            declarations={"margin": "20.3px", "font-size": "20.3px"},
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 2
        assert data["declarations"] == ["margin: 1.25rem;", "font-size: 1.26875rem;"]

    @pytest.mark.asyncio
    async def test_convert_value(self, conversion_tools: dict):
        """Bare values are converted without a property."""
        result = await conversion_tools["rem_convert_value"](value="12pt 24px !important")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["value"] == "1rem 1.5rem !important"

    @pytest.mark.asyncio
    async def test_baseline(self, conversion_tools: dict):
        """The baseline follows the profile."""
        result = await conversion_tools["rem_baseline"](profile="ten-base")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["base_font_size"] == 10
        assert data["declaration"] == "font-size: 62.5%;"


class TestProfileTools:
    """Tests for profile tools."""

    @pytest.mark.asyncio
    async def test_list_profiles(self, profile_tools: dict):
        """Library profiles are listed."""
        result = await profile_tools["rem_list_profiles"]()
        data = json.loads(result)
        assert data["status"] == "success"
        names = {p["name"] for p in data["profiles"]}
        assert {"default", "legacy", "ten-base"} <= names
        assert data["count"] == len(data["profiles"])

    @pytest.mark.asyncio
    async def test_describe_profile(self, profile_tools: dict):
        """Profile settings are described."""
        result = await profile_tools["rem_describe_profile"](name="legacy")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["profile"]["output_mode"] == "px_and_rem"
        assert data["profile"]["base_font_size"] == 16

    @pytest.mark.asyncio
    async def test_describe_missing_profile(self, profile_tools: dict):
        """Unknown profiles are reported as errors."""
        result = await profile_tools["rem_describe_profile"](name="nonexistent")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_profile(self, profile_tools: dict, temp_dir: Path):
        """Library profiles are copied into the project."""
        result = await profile_tools["rem_copy_profile_to_project"](name="ten-base")
        data = json.loads(result)
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "profiles" / "ten-base.yaml"

        again = await profile_tools["rem_copy_profile_to_project"](name="ten-base")
        assert json.loads(again)["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_missing_profile(self, profile_tools: dict):
        """Copying an unknown profile is an error."""
        result = await profile_tools["rem_copy_profile_to_project"](name="nonexistent")
        assert json.loads(result)["status"] == "error"
