"""
Value-tree walker - converts every Length leaf, keeps everything else.

The walk is a structural fold over the value tree:
- Token: classify, and convert only if it is a px/pt Length
- SpaceList / CommaList: recurse in order, same separator kind
- Value: convert the tree, carry the decoration through untouched
- Mapping: each entry converted under its own property's policy

The output tree always has the input's shape. Non-Length tokens are
returned as the very same objects.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import replace

from chuk_mcp_rem.constants import Unit
from chuk_mcp_rem.core.length import Length, classify
from chuk_mcp_rem.core.units import format_length, round_half_away, to_px
from chuk_mcp_rem.models.config import ConversionConfig, ConversionContext
from chuk_mcp_rem.models.value import CommaList, SpaceList, Token, Value, ValueNode


def convert_length(length: Length, context: ConversionContext, target: Unit = Unit.REM) -> str:
    """
    Convert a single Length to its printed form in the target unit.

    Rounding (when the context asks for it) happens in px space, before
    the division by the base font size.
    A length whose result overflows a float is returned as written.
    """
    px = to_px(length.magnitude, length.unit)
    if context.round_values:
        px = round_half_away(px)

    if target == Unit.PX:
        result = px
    elif target == Unit.REM:
        result = px / context.base_font_size
    else:
        raise ValueError(f"Unsupported target unit: {target.value}")

    if not math.isfinite(result):
        return length.text
    return format_length(result, target)


def convert_token(token: Token, context: ConversionContext, target: Unit = Unit.REM) -> Token:
    """Convert a token if it is a Length, otherwise return it unchanged."""
    classified = classify(token.text)
    if isinstance(classified, Length):
        return Token(convert_length(classified, context, target))
    return token


def convert_node(node: ValueNode, context: ConversionContext, target: Unit = Unit.REM) -> ValueNode:
    """Convert a value tree, preserving its shape."""
    if isinstance(node, Token):
        return convert_token(node, context, target)
    if isinstance(node, SpaceList):
        return replace(node, items=tuple(convert_node(item, context, target) for item in node.items))
    if isinstance(node, CommaList):
        return replace(node, items=tuple(convert_node(item, context, target) for item in node.items))
    raise TypeError(f"Not a value node: {type(node).__name__}")


def convert_value(value: Value, context: ConversionContext, target: Unit = Unit.REM) -> Value:
    """
    Convert a complete value.

    The decoration is detached before the walk and reattached afterwards;
    an empty value converts to itself.
    """
    if value.node is None:
        return value
    return replace(value, node=convert_node(value.node, context, target))


def convert_mapping(
    values: Mapping[str, Value],
    config: ConversionConfig,
    target: Unit = Unit.REM,
) -> dict[str, Value]:
    """
    Convert several declarations at once.

    Each property gets its own context (and so its own rounding policy).
    Keys keep their original order.
    """
    result: dict[str, Value] = {}
    for property_name, value in values.items():
        result[property_name] = convert_value(value, config.context_for(property_name), target)
    return result
