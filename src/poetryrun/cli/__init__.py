"""
Command-line interface for the poetryrun package.

This module provides the CLI entry point used by the bin/ shims.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
