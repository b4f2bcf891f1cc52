"""
Conversion pipeline - rewrites px/pt lengths as rem.

The pipeline:
    value text → Value tree (parser)
    → converted trees, px fallback and rem (walker)
    → declaration lines (assembler)
"""

from chuk_mcp_rem.compiler.assembler import render, render_declaration
from chuk_mcp_rem.compiler.converter import ConversionResult, RemConverter, convert_declarations
from chuk_mcp_rem.compiler.parser import coerce_value, parse_value
from chuk_mcp_rem.compiler.walker import (
    convert_length,
    convert_mapping,
    convert_node,
    convert_token,
    convert_value,
)

__all__ = [
    # Converter
    "ConversionResult",
    "RemConverter",
    "convert_declarations",
    # Parser
    "coerce_value",
    "parse_value",
    # Walker
    "convert_length",
    "convert_mapping",
    "convert_node",
    "convert_token",
    "convert_value",
    # Assembler
    "render",
    "render_declaration",
]
