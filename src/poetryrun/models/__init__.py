"""
Data models and structures for the buildpack.

Context Models:
- Buildpack identity and plan entries
- Detect and build phase inputs

Process Models:
- Launch process descriptors
- Reloadable process specifications
- Tagged reload outcomes

Result Models:
- Build results and launch metadata
- Detection build plans
"""

from .context import BuildContext, BuildpackInfo, BuildpackPlanEntry, DetectContext
from .process import (
    LaunchProcess,
    ReloadableProcessSpec,
    ReloadOutcome,
    ReloadPair,
    SingleProcess,
)
from .results import BuildPlanRequirement, BuildResult, DetectResult, LaunchMetadata

__all__ = [
    # Context
    "BuildContext",
    "BuildpackInfo",
    "BuildpackPlanEntry",
    "DetectContext",
    # Processes
    "LaunchProcess",
    "ReloadableProcessSpec",
    "ReloadOutcome",
    "ReloadPair",
    "SingleProcess",
    # Results
    "BuildPlanRequirement",
    "BuildResult",
    "DetectResult",
    "LaunchMetadata",
]
