"""
TOML file loading utilities.

This module handles the low-level loading and parsing of the TOML files the
lifecycle provides: the buildpack descriptor (buildpack.toml) and the
resolved buildpack plan.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List

from ..models.context import BuildpackInfo, BuildpackPlanEntry
from ..validation import ErrorSeverity, ValidationError, handle_config_error

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.debug(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.debug(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.DEBUG,
            reraise=True,
            logger=logger
        )
        raise


def load_buildpack_info(cnb_path: Path) -> BuildpackInfo:
    """
    Load the buildpack identity from `buildpack.toml`.

    Args:
        cnb_path: Root directory of the buildpack

    Returns:
        BuildpackInfo with id, name and version

    Raises:
        ValidationError: If the [buildpack] table lacks an id
    """
    data = load_toml_file(cnb_path / "buildpack.toml", "buildpack descriptor")
    buildpack = data.get("buildpack", {})

    buildpack_id = buildpack.get("id")
    if not buildpack_id:
        raise ValidationError(
            "buildpack.id must be set in buildpack.toml",
            field_name="buildpack.id"
        )

    return BuildpackInfo(
        id=buildpack_id,
        name=buildpack.get("name", buildpack_id),
        version=buildpack.get("version", ""),
    )


def load_buildpack_plan(plan_path: Path) -> List[BuildpackPlanEntry]:
    """
    Load the buildpack plan the lifecycle resolved for this build.

    Args:
        plan_path: Path to the plan TOML file

    Returns:
        List of plan entries, empty when the plan declares none
    """
    data = load_toml_file(plan_path, "buildpack plan")
    return [
        BuildpackPlanEntry(name=entry["name"], metadata=entry.get("metadata", {}))
        for entry in data.get("entries", [])
    ]
