"""
Launch process data models.

This module contains the process descriptors produced by a build, the
specification handed to reloaders, and the tagged outcome of reload
coordination.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class LaunchProcess:
    """
    A process the platform can launch for the application image.
    """

    # Role label, e.g. "web" or "reload-web".
    type: str
    # Executable to run.
    command: str
    # Arguments passed to the executable, in order.
    args: List[str] = field(default_factory=list)
    # The process the platform launches unless another type is selected.
    default: bool = False
    # Launch without an intermediate shell.
    direct: bool = False

    def with_default(self, default: bool) -> "LaunchProcess":
        return dataclasses.replace(self, default=default, args=list(self.args))

    def describe(self) -> str:
        """Render the process as a single log line."""
        label = f"{self.type} (default)" if self.default else self.type
        return f"{label}: {' '.join([self.command, *self.args])}"

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "command": [self.command],
            "args": list(self.args),
            "default": self.default,
            "direct": self.direct,
        }


@dataclass
class ReloadableProcessSpec:
    """
    Describes how a reloader should supervise a process.
    """

    # Directories whose changes restart the process.
    watch_paths: List[str] = field(default_factory=list)
    # Paths excluded from watching.
    ignore_paths: List[str] = field(default_factory=list)
    # Shell used by the watcher; None means run without a shell.
    shell: Optional[str] = None
    # Number of verbosity flags passed to the watcher.
    verbosity: int = 0


@dataclass(frozen=True)
class SingleProcess:
    """Outcome when live reload is disabled."""

    process: LaunchProcess

    @property
    def processes(self) -> List[LaunchProcess]:
        return [self.process]


@dataclass(frozen=True)
class ReloadPair:
    """Outcome when live reload is enabled: the reload wrapper leads."""

    reload_process: LaunchProcess
    original_process: LaunchProcess

    @property
    def processes(self) -> List[LaunchProcess]:
        return [self.reload_process, self.original_process]


ReloadOutcome = Union[SingleProcess, ReloadPair]
