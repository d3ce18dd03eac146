"""
Environment-driven buildpack settings.

Operators configure the buildpack through BP_* environment variables. The
settings are read once from an injected mapping so that callers and tests
never have to mutate the process environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import LIVE_RELOAD_ENV, LOG_LEVEL_ENV, RUN_TARGET_ENV
from ..validation import validate_enum_choice

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO"]


@dataclass(frozen=True)
class BuildpackSettings:
    """
    Operator settings read from the build environment.
    """

    # Value of BP_POETRY_RUN_TARGET; None when the variable is absent.
    run_target: Optional[str] = None
    # Raw value of BP_LIVE_RELOAD_ENABLED, parsed by the reloader.
    live_reload_enabled: Optional[str] = None
    # Logging verbosity for buildpack output.
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> BuildpackSettings:
    """
    Build settings from an environment mapping.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        Validated BuildpackSettings

    Raises:
        ValidationError: If BP_LOG_LEVEL is not a supported level
    """
    if environ is None:
        environ = os.environ

    log_level = validate_enum_choice(
        environ.get(LOG_LEVEL_ENV) or "INFO",
        valid_choices=LOG_LEVELS,
        field_name=LOG_LEVEL_ENV,
    )

    settings = BuildpackSettings(
        run_target=environ.get(RUN_TARGET_ENV),
        live_reload_enabled=environ.get(LIVE_RELOAD_ENV),
        log_level=log_level,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
