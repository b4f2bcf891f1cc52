"""
Profile loader - discovers and loads conversion presets.

Profiles can come from:
1. Built-in library (shipped with package)
2. Project profiles (user's project/profiles directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_rem.constants import ErrorMessages
from chuk_mcp_rem.models.config import ConversionConfig
from chuk_mcp_rem.models.profile import Profile, ProfileMetadata

logger = logging.getLogger(__name__)


class ProfileLoader:
    """
    Discovers and loads profile definitions.

    Profiles are loaded from YAML files in the library and project directories.
    Project profiles override library profiles with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the profile loader.

        Args:
            library_path: Path to built-in profile library
            project_path: Path to project profiles directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Profile] = {}

    def list_profiles(self) -> list[ProfileMetadata]:
        """
        List all available profiles.

        Returns profiles from both library and project, with project
        profiles taking precedence.
        """
        profiles: dict[str, ProfileMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                profile = self._load_profile_file(path)
                if profile:
                    profiles[profile.name] = ProfileMetadata.from_profile(profile)

        return list(profiles.values())

    def get_profile(self, name: str) -> Profile | None:
        """
        Get a profile by name.

        Project profiles take precedence over library profiles.

        Args:
            name: Profile name

        Returns:
            Profile if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                profile = self._load_profile_file(path)
                if profile:
                    self._cache[name] = profile
                    return profile

        return None

    def get_config(self, name: str | None = None) -> ConversionConfig:
        """
        Get the conversion config of a profile.

        Args:
            name: Profile name, or None for the built-in defaults

        Raises:
            ValueError: If the named profile does not exist
        """
        if name is None:
            return ConversionConfig()
        profile = self.get_profile(name)
        if profile is None:
            raise ValueError(ErrorMessages.PROFILE_NOT_FOUND.format(name=name))
        return profile.config

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library profile into the project directory so it can be edited.

        The library file is validated first; a profile that would be
        skipped on load is never copied.

        Returns:
            Path to the project copy, or None if the library has no such profile

        Raises:
            ValueError: No project directory, the copy already exists, or the
                library profile is invalid
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        source = self.library_path / f"{name}.yaml"
        if not source.exists():
            return None
        if self._load_profile_file(source) is None:
            raise ValueError(ErrorMessages.PROFILE_INVALID.format(name=name))

        target = self.project_path / f"{name}.yaml"
        if target.exists():
            raise ValueError(ErrorMessages.PROFILE_EXISTS.format(name=name))

        self.project_path.mkdir(parents=True, exist_ok=True)
        target.write_text(source.read_text())
        self._cache.pop(name, None)
        logger.info("Copied profile %s to %s", name, target)
        return target

    def _load_profile_file(self, path: Path) -> Profile | None:
        """Load a profile from a YAML file, skipping files that do not validate."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_profile(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning("Skipping invalid profile %s: %s", path, e)
            return None

    def _parse_profile(self, data: dict[str, Any], default_name: str) -> Profile:
        """Parse a profile from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        config_data = {
            key: data[key] for key in ("base_font_size", "output_mode") if key in data
        }

        return Profile(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            config=ConversionConfig.model_validate(config_data),
        )

    def clear_cache(self) -> None:
        """Clear the profile cache."""
        self._cache.clear()
