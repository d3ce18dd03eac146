"""
Live reload coordination.

The coordinator asks the reloader whether live reload is on and, if so,
turns the single launch process into a reload pair.
"""

import logging
from pathlib import Path
from typing import Union

from ..models.process import (
    LaunchProcess,
    ReloadableProcessSpec,
    ReloadOutcome,
    ReloadPair,
    SingleProcess,
)
from ..reload.base import Reloader

logger = logging.getLogger(__name__)


class ReloadCoordinator:
    """
    Applies live reload to a launch process.

    Args:
        reloader: Backend deciding enablement and building the wrapper process
    """

    def __init__(self, reloader: Reloader):
        self.reloader = reloader

    def apply(self, process: LaunchProcess, working_dir: Union[str, Path]) -> ReloadOutcome:
        """
        Wrap the process for live reload when enabled.

        Errors from the enablement check propagate unchanged.

        Args:
            process: The assembled web process
            working_dir: Directory to watch for changes

        Returns:
            SingleProcess when disabled, ReloadPair (reload process first) when enabled
        """
        if not self.reloader.should_enable_live_reload(working_dir):
            return SingleProcess(process)

        logger.debug(f"Live reload enabled, watching {working_dir}")
        reload_process, original_process = self.reloader.transform_reloadable_processes(
            process, ReloadableProcessSpec(watch_paths=[str(working_dir)])
        )
        return ReloadPair(reload_process=reload_process, original_process=original_process)
