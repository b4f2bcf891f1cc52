"""
Output assembler - renders converted values as declaration lines.

In px_and_rem mode the px fallback is always emitted before the rem
line, so engines that understand rem override the fallback.
"""

from __future__ import annotations

from chuk_mcp_rem.constants import OutputMode
from chuk_mcp_rem.models.value import Value


def render_declaration(property_name: str, value: Value) -> str:
    """Render a single `property: value;` line."""
    return f"{property_name}: {value.render()};"


def render(
    property_name: str,
    px_value: Value,
    rem_value: Value,
    output_mode: OutputMode,
) -> list[str]:
    """
    Render the declarations for one property.

    Args:
        property_name: CSS property
        px_value: Value with lengths rounded per policy, printed in px
        rem_value: Value with lengths converted to rem
        output_mode: Which declarations to emit

    Returns:
        Declaration lines in emission order (empty for an empty value)
    """
    if rem_value.is_empty and not rem_value.decoration:
        return []

    if output_mode == OutputMode.REM:
        return [render_declaration(property_name, rem_value)]
    if output_mode == OutputMode.PX_AND_REM:
        return [
            render_declaration(property_name, px_value),
            render_declaration(property_name, rem_value),
        ]
    if output_mode == OutputMode.PX:
        return [render_declaration(property_name, px_value)]
    raise ValueError(f"Unknown output mode: {output_mode}")
