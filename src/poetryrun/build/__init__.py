"""
Build phase for the poetryrun buildpack.

This module resolves the poetry run target, assembles the launch process,
applies live reload and reports the resulting launch metadata.
"""

from .assembler import build_web_process
from .coordinator import ReloadCoordinator
from .pipeline import Builder
from .reporter import ResultReporter
from .resolver import LaunchTarget, TargetOrigin, TargetResolver

__all__ = [
    "Builder",
    "LaunchTarget",
    "ReloadCoordinator",
    "ResultReporter",
    "TargetOrigin",
    "TargetResolver",
    "build_web_process",
]
