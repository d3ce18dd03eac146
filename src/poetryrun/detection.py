"""
The detect phase.

Detection passes when the application has something to run: either the
operator set BP_POETRY_RUN_TARGET or pyproject.toml declares one script. A
passing detection requires the Python runtime, Poetry and the installed
virtual environment at launch, plus watchexec when live reload is enabled.
"""

import logging
from typing import List, Mapping, Optional

from .config.settings import BuildpackSettings, load_settings
from .constants import CPYTHON, POETRY, POETRY_VENV, RUN_TARGET_ENV, WATCHEXEC
from .models.context import DetectContext
from .models.results import BuildPlanRequirement, DetectResult
from .reload.base import Reloader
from .system.pyproject import MetadataParser
from .validation import DetectFailure, PyProjectError

logger = logging.getLogger(__name__)


def _launch_requirement(name: str) -> BuildPlanRequirement:
    return BuildPlanRequirement(name=name, metadata={"launch": True})


def detect(
    context: DetectContext,
    parser: MetadataParser,
    reloader: Reloader,
    settings: Optional[BuildpackSettings] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DetectResult:
    """
    Decide whether this buildpack applies to the application.

    Args:
        context: Detect context supplied by the lifecycle
        parser: Metadata parser used when no override is set
        reloader: Live reload backend
        settings: Operator settings; read from environ when omitted
        environ: Environment mapping used to load settings

    Returns:
        DetectResult listing the launch-time requirements

    Raises:
        DetectFailure: If there is no run target
        ReloadDecisionError: If live reload enablement cannot be decided
    """
    if settings is None:
        settings = load_settings(environ)

    if settings.run_target is None:
        try:
            script = parser.parse(context.working_dir)
        except PyProjectError as e:
            raise DetectFailure(f"no poetry run target found: {e}") from e
        logger.debug(f"Detected pyproject.toml script={script}")
    else:
        logger.debug(f"Detected {RUN_TARGET_ENV}={settings.run_target}")

    requires: List[BuildPlanRequirement] = [
        _launch_requirement(CPYTHON),
        _launch_requirement(POETRY),
        _launch_requirement(POETRY_VENV),
    ]
    if reloader.should_enable_live_reload(context.working_dir):
        requires.append(_launch_requirement(WATCHEXEC))

    return DetectResult(requires=requires)
