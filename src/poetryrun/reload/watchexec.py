"""
Watchexec-backed live reload.

Live reload is switched on with BP_LIVE_RELOAD_ENABLED. When enabled, the
launch process is wrapped in `watchexec --restart` so the application restarts
whenever files under the watched paths change.
"""

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional, Tuple, Union

from ..config.settings import BuildpackSettings
from ..constants import LIVE_RELOAD_ENV, RELOAD_PROCESS_PREFIX, WATCHEXEC
from ..models.process import LaunchProcess, ReloadableProcessSpec
from ..validation import ReloadDecisionError, ValidationError, validate_bool_string

logger = logging.getLogger(__name__)


class WatchexecReloader:
    """
    Reloader that supervises processes with watchexec.

    Args:
        environ: Mapping to read BP_LIVE_RELOAD_ENABLED from, defaults to os.environ
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @classmethod
    def from_settings(cls, settings: BuildpackSettings) -> "WatchexecReloader":
        """Create a reloader driven by already loaded operator settings."""
        if settings.live_reload_enabled is None:
            return cls(environ={})
        return cls(environ={LIVE_RELOAD_ENV: settings.live_reload_enabled})

    def should_enable_live_reload(self, working_dir: Union[str, Path]) -> bool:
        """
        Check BP_LIVE_RELOAD_ENABLED.

        The decision does not depend on working_dir for this backend.

        Returns:
            False when the variable is unset, otherwise its boolean value

        Raises:
            ReloadDecisionError: If the value is set but not a boolean, including
                the empty string
        """
        raw_value = self.environ.get(LIVE_RELOAD_ENV)
        if raw_value is None:
            return False

        try:
            enabled = validate_bool_string(raw_value, field_name=LIVE_RELOAD_ENV)
        except ValidationError as e:
            raise ReloadDecisionError(
                f"failed to parse {LIVE_RELOAD_ENV} value {raw_value!r}: {e}"
            ) from e

        logger.debug(
            f"{LIVE_RELOAD_ENV}={raw_value} -> live reload "
            f"{'enabled' if enabled else 'disabled'} for {working_dir}"
        )
        return enabled

    def transform_reloadable_processes(
        self, process: LaunchProcess, spec: ReloadableProcessSpec
    ) -> Tuple[LaunchProcess, LaunchProcess]:
        """
        Wrap a process in watchexec.

        Args:
            process: The process to supervise
            spec: Paths to watch and ignore, shell and verbosity

        Returns:
            Tuple of (reload process, original process). The reload process
            becomes the default; the original stays available as a fallback.
        """
        args: List[str] = ["--restart"]
        for path in spec.watch_paths:
            args.extend(["--watch", str(path)])
        for path in spec.ignore_paths:
            args.extend(["--ignore", str(path)])
        args.extend(["--shell", spec.shell or "none"])
        args.extend(["-v"] * spec.verbosity)
        args.append("--")
        args.append(process.command)
        args.extend(process.args)

        reload_process = LaunchProcess(
            type=RELOAD_PROCESS_PREFIX + process.type,
            command=WATCHEXEC,
            args=args,
            default=True,
            direct=True,
        )
        return reload_process, process.with_default(False)
