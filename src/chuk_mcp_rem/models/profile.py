"""
Profile models - named conversion presets.

A profile bundles a ConversionConfig under a name so projects can
share settings (e.g. 'legacy' for px fallbacks, 'ten-base' for a
62.5% root font size).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_rem.constants import OutputMode
from chuk_mcp_rem.models.config import ConversionConfig


class Profile(BaseModel):
    """A named conversion preset."""

    name: str = Field(..., description="Profile name")
    description: str = Field(default="", description="What the profile is for")
    config: ConversionConfig = Field(default_factory=ConversionConfig)

    model_config = {"frozen": True}


class ProfileMetadata(BaseModel):
    """Lightweight profile summary for listing."""

    name: str
    description: str
    base_font_size: float
    output_mode: OutputMode

    @classmethod
    def from_profile(cls, profile: Profile) -> ProfileMetadata:
        """Create metadata from a full profile."""
        return cls(
            name=profile.name,
            description=profile.description,
            base_font_size=profile.config.base_font_size,
            output_mode=profile.config.output_mode,
        )
