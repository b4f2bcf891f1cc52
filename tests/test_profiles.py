"""
Tests for configuration and the profile system.

Tests cover:
- ConversionConfig validation and per-property contexts
- Profile models
- ProfileLoader discovery, overrides and copying
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_rem.constants import OutputMode
from chuk_mcp_rem.models import ConversionConfig, ConversionContext, Profile, ProfileMetadata
from chuk_mcp_rem.profiles import ProfileLoader


class TestConversionConfig:
    """Tests for ConversionConfig."""

    def test_defaults(self):
        """16px base, rem only."""
        config = ConversionConfig()
        assert config.base_font_size == 16
        assert config.output_mode == OutputMode.REM

    @pytest.mark.parametrize(
        "raw,expected",
        [(16, 16.0), (10.5, 10.5), ("16px", 16.0), (" 10PX ", 10.0), ("12pt", 16.0), ("18", 18.0)],
    )
    def test_base_font_size_forms(self, raw, expected: float):
        """Numbers, px and pt lengths are accepted."""
        assert ConversionConfig(base_font_size=raw).base_font_size == expected

    @pytest.mark.parametrize("raw", [0, -16, "0px", "-4px", "1em", "large"])
    def test_invalid_base_font_size(self, raw):
        """Non-positive or non-px sizes fail at configuration time."""
        with pytest.raises(ValidationError):
            ConversionConfig(base_font_size=raw)

    def test_output_mode_from_text(self):
        """Output modes can be given by value."""
        assert ConversionConfig(output_mode="px_and_rem").output_mode == OutputMode.PX_AND_REM

    def test_invalid_output_mode(self):
        """Unknown output modes are rejected."""
        with pytest.raises(ValidationError):
            ConversionConfig(output_mode="em")

    def test_frozen(self):
        """Configs cannot be mutated."""
        config = ConversionConfig()
        with pytest.raises(ValidationError):
            config.base_font_size = 10  # type: ignore[misc]

    def test_context_for(self):
        """Contexts carry the policy of their property."""
        config = ConversionConfig(base_font_size=10, output_mode=OutputMode.PX)
        context = config.context_for("font-size")
        assert isinstance(context, ConversionContext)
        assert context.base_font_size == 10
        assert context.output_mode == OutputMode.PX
        assert context.round_values is False
        assert config.context_for("margin").round_values is True
        assert config.context_for(None).round_values is True

    def test_with_overrides(self):
        """Overrides replace only what is given."""
        config = ConversionConfig(base_font_size=10)
        updated = config.with_overrides(output_mode="px")
        assert updated.base_font_size == 10
        assert updated.output_mode == OutputMode.PX
        assert config.output_mode == OutputMode.REM
        assert config.with_overrides() == config

    def test_with_overrides_validates(self):
        """Overrides go through validation."""
        with pytest.raises(ValidationError):
            ConversionConfig().with_overrides(base_font_size=-1)


class TestProfileModels:
    """Tests for Profile and ProfileMetadata."""

    def test_minimal_profile(self):
        """A profile needs only a name."""
        profile = Profile(name="test")
        assert profile.description == ""
        assert profile.config == ConversionConfig()

    def test_metadata(self):
        """Metadata flattens the config."""
        profile = Profile(
            name="big",
            description="Large root",
            config=ConversionConfig(base_font_size=20, output_mode="px_and_rem"),
        )
        meta = ProfileMetadata.from_profile(profile)
        assert meta.name == "big"
        assert meta.base_font_size == 20
        assert meta.output_mode == OutputMode.PX_AND_REM


class TestProfileLoader:
    """Tests for ProfileLoader."""

    def test_default_library_path(self):
        """The library ships with the package."""
        loader = ProfileLoader()
        assert loader.library_path.exists()

    def test_list_library_profiles(self, library_path: Path):
        """Built-in profiles are listed."""
        loader = ProfileLoader(library_path=library_path)
        names = {p.name for p in loader.list_profiles()}
        assert {"default", "legacy", "ten-base"} <= names

    def test_get_library_profiles(self, library_path: Path):
        """Built-in profiles load with their settings."""
        loader = ProfileLoader(library_path=library_path)

        legacy = loader.get_profile("legacy")
        assert legacy is not None
        assert legacy.config.base_font_size == 16
        assert legacy.config.output_mode == OutputMode.PX_AND_REM

        ten = loader.get_profile("ten-base")
        assert ten is not None
        assert ten.config.base_font_size == 10

    def test_get_missing_profile(self, library_path: Path):
        """Unknown profiles return None."""
        loader = ProfileLoader(library_path=library_path)
        assert loader.get_profile("nonexistent") is None

    def test_get_config(self, library_path: Path):
        """get_config resolves names and defaults."""
        loader = ProfileLoader(library_path=library_path)
        assert loader.get_config() == ConversionConfig()
        assert loader.get_config("ten-base").base_font_size == 10
        with pytest.raises(ValueError):
            loader.get_config("nonexistent")

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path):
        """Project profiles win over library profiles of the same name."""
        (temp_dir / "legacy.yaml").write_text(
            "name: legacy\ndescription: custom\nbase_font_size: 20px\noutput_mode: px\n"
        )
        loader = ProfileLoader(library_path=library_path, project_path=temp_dir)

        legacy = loader.get_profile("legacy")
        assert legacy is not None
        assert legacy.config.base_font_size == 20
        assert legacy.config.output_mode == OutputMode.PX

        listed = {p.name: p for p in loader.list_profiles()}
        assert listed["legacy"].description == "custom"

    def test_name_defaults_to_filename(self, temp_dir: Path):
        """A profile without a name is named after its file."""
        (temp_dir / "compact.yaml").write_text("base_font_size: 14\n")
        loader = ProfileLoader(library_path=temp_dir)
        profile = loader.get_profile("compact")
        assert profile is not None
        assert profile.name == "compact"
        assert profile.config.base_font_size == 14
        assert profile.config.output_mode == OutputMode.REM

    @pytest.mark.parametrize(
        "content",
        [
            "base_font_size: -1\n",
            "output_mode: sideways\n",
            "- just\n- a list\n",
            "base_font_size: [unclosed\n",
        ],
    )
    def test_invalid_profiles_are_skipped(self, temp_dir: Path, content: str):
        """Profiles that do not validate are ignored."""
        (temp_dir / "broken.yaml").write_text(content)
        loader = ProfileLoader(library_path=temp_dir)
        assert loader.get_profile("broken") is None
        assert loader.list_profiles() == []

    def test_cache(self, temp_dir: Path):
        """Loaded profiles are cached until cleared."""
        path = temp_dir / "p.yaml"
        path.write_text("base_font_size: 12\n")
        loader = ProfileLoader(library_path=temp_dir)
        assert loader.get_profile("p").config.base_font_size == 12

        path.write_text("base_font_size: 14\n")
        assert loader.get_profile("p").config.base_font_size == 12

        loader.clear_cache()
        assert loader.get_profile("p").config.base_font_size == 14

    def test_copy_to_project(self, library_path: Path, temp_dir: Path):
        """Library profiles can be copied for customization."""
        project = temp_dir / "profiles"
        loader = ProfileLoader(library_path=library_path, project_path=project)

        dest = loader.copy_to_project("legacy")
        assert dest == project / "legacy.yaml"
        assert dest.exists()

        with pytest.raises(ValueError):
            loader.copy_to_project("legacy")

    def test_copy_missing(self, library_path: Path, temp_dir: Path):
        """Copying an unknown profile returns None."""
        loader = ProfileLoader(library_path=library_path, project_path=temp_dir)
        assert loader.copy_to_project("nonexistent") is None

    def test_copy_without_project(self, library_path: Path):
        """Copying needs a project path."""
        loader = ProfileLoader(library_path=library_path)
        with pytest.raises(ValueError):
            loader.copy_to_project("legacy")

    def test_copy_invalid_library_profile(self, temp_dir: Path):
        """A library profile that would be skipped on load is not copied."""
        library = temp_dir / "library"
        library.mkdir()
        (library / "broken.yaml").write_text("base_font_size: -4px\n")
        project = temp_dir / "profiles"
        loader = ProfileLoader(library_path=library, project_path=project)

        with pytest.raises(ValueError, match="broken"):
            loader.copy_to_project("broken")
        assert not (project / "broken.yaml").exists()
