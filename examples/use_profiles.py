#!/usr/bin/env python3
"""
Example: Using conversion profiles.

Profiles are named presets (base font size + output mode) loaded from
YAML. Project profiles override the built-in library.

Usage:
    python examples/use_profiles.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_rem.compiler import RemConverter
from chuk_mcp_rem.profiles import ProfileLoader


def main() -> None:
    """Demonstrate the profile system."""
    print("CHUK Rem Profiles Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        loader = ProfileLoader(project_path=Path(tmp))

        print("Available profiles:")
        for meta in loader.list_profiles():
            print(f"  {meta.name}: {meta.description}")
            print(f"    Base: {meta.base_font_size:g}px, Output: {meta.output_mode.value}")
        print()

        for name in ["default", "legacy", "ten-base"]:
            converter = RemConverter(loader.get_config(name))
            print(f"margin: 20px 15px with '{name}':")
            for line in converter.render("margin", "20px 15px"):
                print(f"  {line}")
        print()

        # Customize a library profile in the project
        path = loader.copy_to_project("legacy")
        print(f"Copied legacy profile to {path}")
        path.write_text(path.read_text().replace("16px", "20px"))
        loader.clear_cache()
        converter = RemConverter(loader.get_config("legacy"))
        print("margin: 20px with customized 'legacy':")
        for line in converter.render("margin", "20px"):
            print(f"  {line}")


if __name__ == "__main__":
    main()
