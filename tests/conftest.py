"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_rem.compiler import RemConverter
from chuk_mcp_rem.constants import OutputMode
from chuk_mcp_rem.models.config import ConversionConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config() -> ConversionConfig:
    """Default config: 16px base, rem only."""
    return ConversionConfig()


@pytest.fixture
def converter(config: ConversionConfig) -> RemConverter:
    """Converter with the default config."""
    return RemConverter(config)


@pytest.fixture
def legacy_converter() -> RemConverter:
    """Converter emitting px fallbacks before rem lines."""
    return RemConverter(ConversionConfig(output_mode=OutputMode.PX_AND_REM))


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in profile library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_rem" / "profiles" / "library"
