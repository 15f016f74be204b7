"""Argument parsing, deep merging, variable source tracing and output helpers for stack configuration."""

__version__ = "0.1.0"

__all__ = [
    "args",
    "constants",
    "convert",
    "merge",
    "models",
    "output",
    "sources",
]