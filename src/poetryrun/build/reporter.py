"""
Build result reporting.

Renders the launch decision as buildpack log output and packages the
processes into the BuildResult handed back to the lifecycle.
"""

import logging

from ..constants import RUN_TARGET_ENV
from ..models.process import ReloadOutcome
from ..models.results import BuildResult, LaunchMetadata
from .resolver import LaunchTarget, TargetOrigin

logger = logging.getLogger(__name__)

# Indentation used by buildpack output for process and sub-process lines.
PROCESS_INDENT = "  "
SUBPROCESS_INDENT = "    "


class ResultReporter:
    """
    Logs the launch decision and builds the result.
    """

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def report(self, outcome: ReloadOutcome, target: LaunchTarget) -> BuildResult:
        """
        Report the final decision.

        Args:
            outcome: Processes produced by reload coordination
            target: The resolved launch target

        Returns:
            BuildResult with the processes in launch metadata, no plan
            entries and no layers
        """
        processes = outcome.processes

        self.log.info(f"{PROCESS_INDENT}Finding the poetry run target")
        if target.origin is TargetOrigin.OVERRIDE:
            self.log.info(f"{SUBPROCESS_INDENT}Found {RUN_TARGET_ENV}={target.joined}")
        else:
            self.log.info(f"{SUBPROCESS_INDENT}Found pyproject.toml script={target.joined}")
        self.log.info("")

        self.log.info(f"{PROCESS_INDENT}Assigning launch processes:")
        for process in processes:
            self.log.info(f"{SUBPROCESS_INDENT}{process.describe()}")
        self.log.info("")

        return BuildResult(launch=LaunchMetadata(processes=processes))
