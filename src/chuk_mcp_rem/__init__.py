"""
CHUK Rem - px/pt to rem conversion for CSS values, served over MCP.
"""

__version__ = "0.1.0"
