"""
Conversion configuration and the per-call conversion context.

ConversionConfig is the long-lived setup (base font size, output mode).
ConversionContext is derived from it for a single property and
discarded after the call.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_rem.constants import DEFAULT_BASE_FONT_SIZE, ErrorMessages, OutputMode
from chuk_mcp_rem.core.length import Length, Unitless, classify
from chuk_mcp_rem.core.policy import should_round
from chuk_mcp_rem.core.units import to_px


class ConversionContext(BaseModel):
    """Read-only settings for converting one property's value."""

    base_font_size: float = Field(..., gt=0, description="Root font size in px")
    output_mode: OutputMode = Field(OutputMode.REM, description="Declarations to emit")
    round_values: bool = Field(True, description="Snap px magnitudes before converting")

    model_config = {"frozen": True}


class ConversionConfig(BaseModel):
    """
    Global conversion settings.

    The base font size must be positive; this is enforced here so the
    conversion core never has to check it.
    """

    base_font_size: float = Field(
        default=DEFAULT_BASE_FONT_SIZE,
        gt=0,
        description="Root font size in px (accepts 16, 16.0 or '16px')",
    )
    output_mode: OutputMode = Field(
        default=OutputMode.REM,
        description="rem, px_and_rem or px",
    )

    model_config = {"frozen": True}

    @field_validator("base_font_size", mode="before")
    @classmethod
    def parse_base_font_size(cls, v: Any) -> Any:
        """Accept px/pt lengths and bare numbers given as text."""
        if isinstance(v, str):
            classified = classify(v.strip())
            if isinstance(classified, Length):
                return to_px(classified.magnitude, classified.unit)
            if isinstance(classified, Unitless):
                return classified.magnitude
            raise ValueError(ErrorMessages.INVALID_BASE_FONT_SIZE.format(value=v))
        return v

    def context_for(self, property_name: str | None = None) -> ConversionContext:
        """
        Build the context for converting one property.

        Args:
            property_name: CSS property, or None for a bare value

        Returns:
            A frozen ConversionContext
        """
        return ConversionContext(
            base_font_size=self.base_font_size,
            output_mode=self.output_mode,
            round_values=should_round(property_name),
        )

    def with_overrides(
        self,
        base_font_size: float | str | None = None,
        output_mode: OutputMode | str | None = None,
    ) -> ConversionConfig:
        """Return a copy with the given settings replaced (None keeps the current one)."""
        data = self.model_dump()
        if base_font_size is not None:
            data["base_font_size"] = base_font_size
        if output_mode is not None:
            data["output_mode"] = output_mode
        return ConversionConfig.model_validate(data)
