"""
Lifecycle context models.

This module contains the inputs the lifecycle hands to the detect and build
phases: buildpack identity, the working directory and the resolved plan.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class BuildpackInfo:
    """
    Identity of the buildpack, loaded from `buildpack.toml`.
    """

    id: str
    name: str
    version: str


@dataclass
class BuildpackPlanEntry:
    """
    A single entry of the buildpack plan resolved by the lifecycle.
    """

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DetectContext:
    """
    Encapsulates everything the detect phase needs.
    """

    working_dir: Path


@dataclass
class BuildContext:
    """
    Encapsulates everything a single build invocation needs.
    """

    # --- Application ---
    working_dir: Path

    # --- Buildpack metadata ---
    buildpack_info: Optional[BuildpackInfo] = None
    plan: List[BuildpackPlanEntry] = field(default_factory=list)
