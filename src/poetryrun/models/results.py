"""
Result data models.

This module contains the artifacts produced by the detect and build phases
and their TOML-ready dictionary forms.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .context import BuildpackPlanEntry
from .process import LaunchProcess


@dataclass
class LaunchMetadata:
    """
    Launch metadata written to `launch.toml`.
    """

    processes: List[LaunchProcess] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"processes": [process.to_dict() for process in self.processes]}


@dataclass
class BuildResult:
    """
    Everything a build hands back to the lifecycle.

    This buildpack contributes no plan entries and creates no layers.
    """

    plan: List[BuildpackPlanEntry] = field(default_factory=list)
    layers: List[str] = field(default_factory=list)
    launch: LaunchMetadata = field(default_factory=LaunchMetadata)

    @property
    def default_process(self) -> LaunchProcess:
        return next(process for process in self.launch.processes if process.default)


@dataclass
class BuildPlanRequirement:
    """
    A dependency this buildpack requires from earlier buildpacks.
    """

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "metadata": dict(self.metadata)}


@dataclass
class DetectResult:
    """
    The build plan produced by a passing detection.

    This buildpack only requires dependencies; it provides none.
    """

    requires: List[BuildPlanRequirement] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        plan: Dict[str, Any] = {}
        if self.requires:
            plan["requires"] = [requirement.to_dict() for requirement in self.requires]
        return plan
