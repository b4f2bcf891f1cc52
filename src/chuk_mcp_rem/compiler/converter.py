"""
Rem converter - the conversion pipeline behind every entry point.

    raw value → Value tree → (px fallback tree, rem tree) → declarations

The converter holds only the immutable ConversionConfig; every call
builds its own ConversionContext, so a converter can be shared freely.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_rem.compiler.assembler import render, render_declaration
from chuk_mcp_rem.compiler.parser import coerce_value
from chuk_mcp_rem.compiler.walker import convert_value
from chuk_mcp_rem.constants import DEFAULT_BASE_FONT_SIZE, OutputMode, Unit
from chuk_mcp_rem.core.units import format_number
from chuk_mcp_rem.models.config import ConversionConfig
from chuk_mcp_rem.models.value import Token, Value


@dataclass
class ConversionResult:
    """Result of converting one property's value."""

    property_name: str
    original: Value
    px_value: Value
    rem_value: Value
    declarations: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if any length was rewritten."""
        return self.rem_value != self.original

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "property": self.property_name,
            "original": self.original.render(),
            "px": self.px_value.render(),
            "rem": self.rem_value.render(),
            "declarations": list(self.declarations),
        }


class RemConverter:
    """
    Converts px/pt lengths in CSS values to rem.

    Example:
        >>> RemConverter().render("margin", "20px auto")
        ['margin: 1.25rem auto;']
    """

    def __init__(self, config: ConversionConfig | None = None):
        """
        Initialize the converter.

        Args:
            config: Conversion settings (default: 16px base, rem only)
        """
        self.config = config or ConversionConfig()

    def convert(self, property_name: str, value: Any) -> ConversionResult:
        """
        Convert one property's value.

        Args:
            property_name: CSS property (decides the rounding policy)
            value: Value text, Value/ValueNode object, or number

        Returns:
            ConversionResult with both trees and the rendered declarations
        """
        original = coerce_value(value)
        context = self.config.context_for(property_name)

        px_value = convert_value(original, context, Unit.PX)
        rem_value = convert_value(original, context, Unit.REM)

        return ConversionResult(
            property_name=property_name,
            original=original,
            px_value=px_value,
            rem_value=rem_value,
            declarations=render(property_name, px_value, rem_value, context.output_mode),
        )

    def convert_many(self, values: Mapping[str, Any]) -> list[ConversionResult]:
        """Convert several declarations, in the mapping's key order."""
        return [self.convert(name, value) for name, value in values.items()]

    def convert_value(self, value: Any) -> Value:
        """
        Convert a bare value with no property attached.

        Lengths are rounded (the default policy) and converted to rem.
        """
        return convert_value(coerce_value(value), self.config.context_for(None), Unit.REM)

    def render(self, property_name: str, value: Any) -> list[str]:
        """Convert and render one property."""
        return self.convert(property_name, value).declarations

    def render_many(self, values: Mapping[str, Any]) -> list[str]:
        """Convert and render several properties, in key order."""
        lines: list[str] = []
        for result in self.convert_many(values):
            lines.extend(result.declarations)
        return lines

    def baseline_value(self) -> Value:
        """Root font-size as a percentage of the browser default (10px -> 62.5%)."""
        percent = self.config.base_font_size / DEFAULT_BASE_FONT_SIZE * 100
        return Value(Token(f"{format_number(percent)}%"))

    def baseline_declaration(self) -> str:
        """The `font-size` declaration that sets the root to the configured base."""
        return render_declaration("font-size", self.baseline_value())


def convert_declarations(
    values: Mapping[str, Any],
    base_font_size: float | str = DEFAULT_BASE_FONT_SIZE,
    output_mode: OutputMode | str = OutputMode.REM,
) -> list[str]:
    """
    Convenience function to convert and render several declarations.

    Args:
        values: Mapping of property name to value
        base_font_size: Root font size in px
        output_mode: rem, px_and_rem or px

    Returns:
        Declaration lines in key order
    """
    config = ConversionConfig(base_font_size=base_font_size, output_mode=output_mode)
    return RemConverter(config).render_many(values)
