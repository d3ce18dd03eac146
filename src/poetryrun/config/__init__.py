"""
Configuration management for the poetryrun package.

This module provides access to operator settings from the environment and to
the TOML files supplied by the buildpack lifecycle.
"""

from .loader import load_buildpack_info, load_buildpack_plan, load_toml_file
from .settings import BuildpackSettings, load_settings

__all__ = [
    "BuildpackSettings",
    "load_settings",
    "load_toml_file",
    "load_buildpack_info",
    "load_buildpack_plan",
]
