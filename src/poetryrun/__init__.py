"""
poetryrun: launch command buildpack for Poetry applications.

This package computes, at image build time, the command that launches a
Poetry-managed Python application and optionally wraps it in watchexec so
the application restarts when its sources change.

The package is organized into specialized modules:
- config: Operator settings and lifecycle TOML files
- models: Data structures for contexts, processes and results
- validation: Error taxonomy and input validation
- system: Project metadata (pyproject.toml) parsing
- reload: Live reload backends
- build: Target resolution, process assembly, reload coordination, reporting
- detection: Detection and build plan requirements
- cli: Lifecycle harness for bin/detect and bin/build

Usage:
    From the lifecycle:
        poetry-run build <layers> <platform> <plan>

    Programmatically:
        from poetryrun import Builder, PyProjectParser, WatchexecReloader
        builder = Builder(PyProjectParser(), WatchexecReloader())
        result = builder(BuildContext(working_dir=Path("/workspace")))
"""

from .build import Builder, TargetResolver, ReloadCoordinator, ResultReporter
from .cli import main_cli
from .config import BuildpackSettings, load_settings
from .detection import detect
from .models import (
    BuildContext,
    BuildpackInfo,
    BuildResult,
    DetectContext,
    DetectResult,
    LaunchProcess,
    ReloadableProcessSpec,
)
from .reload import Reloader, WatchexecReloader
from .system import PyProjectParser
from .validation import (
    DetectFailure,
    PoetryRunError,
    PyProjectError,
    ReloadDecisionError,
    ResolutionError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Phases
    "Builder",
    "detect",
    "main_cli",
    # Pipeline stages
    "TargetResolver",
    "ReloadCoordinator",
    "ResultReporter",
    # Collaborators
    "PyProjectParser",
    "Reloader",
    "WatchexecReloader",
    # Configuration
    "BuildpackSettings",
    "load_settings",
    # Models
    "BuildContext",
    "BuildpackInfo",
    "BuildResult",
    "DetectContext",
    "DetectResult",
    "LaunchProcess",
    "ReloadableProcessSpec",
    # Errors
    "DetectFailure",
    "PoetryRunError",
    "PyProjectError",
    "ReloadDecisionError",
    "ResolutionError",
    "ValidationError",
]
