"""
Reloader interface.

A reloader decides whether live reload is enabled for a build and knows how
to wrap a launch process in a watch-and-restart supervisor.
"""

from pathlib import Path
from typing import Protocol, Tuple, Union

from ..models.process import LaunchProcess, ReloadableProcessSpec


class Reloader(Protocol):
    """Capability interface implemented by every watch-tool backend."""

    def should_enable_live_reload(self, working_dir: Union[str, Path]) -> bool:
        """Return True when the build for working_dir should add a reload process."""
        ...

    def transform_reloadable_processes(
        self, process: LaunchProcess, spec: ReloadableProcessSpec
    ) -> Tuple[LaunchProcess, LaunchProcess]:
        """Return the (reload process, original process) pair."""
        ...
