"""
Project metadata parsing.

This module reads the application's pyproject.toml and extracts the single
script that `poetry run` should launch by default.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

from ..config.loader import load_toml_file
from ..constants import PYPROJECT_FILENAME, RUN_TARGET_ENV
from ..validation import PyProjectError

logger = logging.getLogger(__name__)


class MetadataParser(Protocol):
    """Anything that can name the default script of a project."""

    def parse(self, working_dir: Union[str, Path]) -> str:
        ...


def _declared_scripts(data: Dict[str, Any]) -> List[str]:
    """
    Return script names, preferring [tool.poetry.scripts] over [project.scripts].

    Examples:
        >>> _declared_scripts({"tool": {"poetry": {"scripts": {"serve": "app:main"}}}})
        ['serve']
        >>> _declared_scripts({"project": {"scripts": {"serve": "app:main"}}})
        ['serve']
    """
    poetry_scripts = data.get("tool", {}).get("poetry", {}).get("scripts")
    if poetry_scripts is not None:
        return list(poetry_scripts)
    return list(data.get("project", {}).get("scripts", {}))


class PyProjectParser:
    """
    Extracts the default script from `pyproject.toml`.
    """

    def parse(self, working_dir: Union[str, Path]) -> str:
        """
        Find the one script declared by the project.

        Args:
            working_dir: Application root containing pyproject.toml

        Returns:
            The script name

        Raises:
            PyProjectError: If the file is missing or malformed, or does not
                declare exactly one script
        """
        path = Path(working_dir) / PYPROJECT_FILENAME

        try:
            data = load_toml_file(path, PYPROJECT_FILENAME)
        except FileNotFoundError as e:
            raise PyProjectError(f"failed to read {path}: {e}", path=str(path)) from e
        except tomllib.TOMLDecodeError as e:
            raise PyProjectError(f"failed to parse {path}: {e}", path=str(path)) from e

        scripts = _declared_scripts(data)
        if not scripts:
            raise PyProjectError(f"no scripts found in {PYPROJECT_FILENAME}", path=str(path))
        if len(scripts) > 1:
            raise PyProjectError(
                f"{PYPROJECT_FILENAME} declares multiple scripts ({', '.join(scripts)}); "
                f"set {RUN_TARGET_ENV} to choose one",
                path=str(path),
            )

        logger.debug(f"Found script '{scripts[0]}' in {path}")
        return scripts[0]
