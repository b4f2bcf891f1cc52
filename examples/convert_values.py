#!/usr/bin/env python3
"""
Example: Converting CSS values to rem.

Shows single declarations, dual px/rem output, combined declaration
maps and the root baseline.

Usage:
    python examples/convert_values.py
"""

from chuk_mcp_rem.compiler import RemConverter
from chuk_mcp_rem.constants import OutputMode
from chuk_mcp_rem.models.config import ConversionConfig


def main() -> None:
    """Demonstrate rem conversion."""
    print("CHUK Rem Conversion Demo")
    print("=" * 40)
    print()

    converter = RemConverter()

    print("rem only (16px base):")
    for prop, value in [
        ("margin", "20px auto"),
        ("font-size", "20.3px"),
        ("padding", "20.3px 12pt"),
        ("box-shadow", "0 2px 4px rgba(0, 0, 0, 0.5), inset 0 1px #fff"),
        ("border", "7px solid #f90 !important"),
        ("background", "auto, inherit, url(x.png)"),
    ]:
        for line in converter.render(prop, value):
            print(f"  {line}")
    print()

    legacy = RemConverter(ConversionConfig(output_mode=OutputMode.PX_AND_REM))
    print("px fallback + rem:")
    for line in legacy.render_many({"margin": "20px", "font-size": "14.5px", "width": "44px auto"}):
        print(f"  {line}")
    print()

    ten = RemConverter(ConversionConfig(base_font_size="10px"))
    print("10px base:")
    print(f"  html {{ {ten.baseline_declaration()} }}")
    print(f"  24px -> {ten.convert_value('24px')}")


if __name__ == "__main__":
    main()
