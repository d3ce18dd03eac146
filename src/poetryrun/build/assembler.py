"""Construction of the canonical `web` launch process."""

from typing import Sequence

from ..constants import POETRY_EXECUTABLE, RUN_SUBCOMMAND, WEB_PROCESS_TYPE
from ..models.process import LaunchProcess


def build_web_process(tokens: Sequence[str]) -> LaunchProcess:
    """Return the default, direct `poetry run <tokens>` process."""
    return LaunchProcess(
        type=WEB_PROCESS_TYPE,
        command=POETRY_EXECUTABLE,
        args=[RUN_SUBCOMMAND, *tokens],
        default=True,
        direct=True,
    )
