"""
Poetry run target resolution.

The target is either the operator's BP_POETRY_RUN_TARGET override or the one
script declared in pyproject.toml.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..system.pyproject import MetadataParser
from ..validation import ResolutionError

logger = logging.getLogger(__name__)


class TargetOrigin(Enum):
    """Where the launch target came from."""
    OVERRIDE = "override"
    PARSED = "parsed"


@dataclass(frozen=True)
class LaunchTarget:
    """
    Tokens passed to `poetry run`, together with their origin.
    """

    tokens: List[str] = field(default_factory=list)
    origin: TargetOrigin = TargetOrigin.PARSED

    @property
    def joined(self) -> str:
        return " ".join(self.tokens)


class TargetResolver:
    """
    Chooses between the operator override and the parsed project metadata.

    Args:
        parser: Metadata parser consulted when no override is given
    """

    def __init__(self, parser: MetadataParser):
        self.parser = parser

    def resolve(self, override: Optional[str], working_dir: Union[str, Path]) -> LaunchTarget:
        """
        Resolve the launch target.

        The override is split on runs of whitespace with no quoting, so an
        argument containing a space cannot be expressed. A whitespace-only
        override resolves to no tokens.

        Args:
            override: Value of BP_POETRY_RUN_TARGET, None when unset
            working_dir: Application root handed to the parser

        Returns:
            The resolved LaunchTarget

        Raises:
            ResolutionError: If the parser fails
        """
        if override is not None:
            return LaunchTarget(tokens=override.split(), origin=TargetOrigin.OVERRIDE)

        try:
            script = self.parser.parse(working_dir)
        except Exception as e:
            raise ResolutionError(f"failed to resolve poetry run target: {e}") from e

        return LaunchTarget(tokens=[script], origin=TargetOrigin.PARSED)
