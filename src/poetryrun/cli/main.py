"""
Command-line interface for the poetry-run buildpack.

This module is the lifecycle harness: the bin/detect and bin/build shims call
it with the directories the Cloud Native Buildpacks lifecycle provides. It
loads context from disk and the environment, runs the requested phase and
writes the phase's TOML output.
"""

import argparse
import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import List, Mapping, Optional

import toml

from ..build import Builder
from ..config import load_buildpack_info, load_buildpack_plan, load_settings
from ..constants import BUILDPACK_DIR_ENV, DETECT_FAIL_EXIT_CODE
from ..detection import detect
from ..models.context import BuildContext, BuildpackInfo, DetectContext
from ..models.results import BuildResult, DetectResult
from ..reload import WatchexecReloader
from ..system import PyProjectParser
from ..validation import (
    DetectFailure,
    PoetryRunError,
    ValidationError,
    handle_cli_error,
    handle_file_error,
    validate_path_exists,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Buildpack output is plain text on stdout."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        stream=sys.stdout,
    )


def _buildpack_dir(environ: Mapping[str, str]) -> Path:
    """Resolve the buildpack root, falling back to the checkout containing src/."""
    configured = environ.get(BUILDPACK_DIR_ENV)
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parents[3]


def _load_info(cnb_path: Path) -> Optional[BuildpackInfo]:
    try:
        return load_buildpack_info(cnb_path)
    except FileNotFoundError as e:
        logger.debug(f"Continuing without buildpack identity: {e}")
        return None


def write_launch_toml(result: BuildResult, layers_dir: Path) -> Path:
    """
    Write the launch metadata of a build result.

    Args:
        result: The build result
        layers_dir: Layers directory provided by the lifecycle

    Returns:
        Path of the written launch.toml
    """
    layers_dir.mkdir(parents=True, exist_ok=True)
    launch_path = layers_dir / "launch.toml"
    try:
        with open(launch_path, "w", encoding="utf-8") as f:
            toml.dump(result.launch.to_dict(), f)
    except OSError as e:
        handle_file_error(e, f"writing {launch_path}", logger=logger)
    logger.debug(f"Wrote launch metadata to {launch_path}")
    return launch_path


def write_build_plan(result: DetectResult, plan_path: Path) -> None:
    """Write the build plan produced by detection."""
    with open(plan_path, "w", encoding="utf-8") as f:
        toml.dump(result.to_dict(), f)
    logger.debug(f"Wrote build plan to {plan_path}")


def run_detect(args: argparse.Namespace, environ: Mapping[str, str]) -> int:
    settings = load_settings(environ)
    context = DetectContext(working_dir=Path.cwd())
    try:
        result = detect(
            context, PyProjectParser(), WatchexecReloader.from_settings(settings), settings=settings
        )
    except DetectFailure as e:
        logger.info(f"SKIPPED: {e}")
        return DETECT_FAIL_EXIT_CODE

    write_build_plan(result, Path(args.plan_path))
    return 0


def run_build(args: argparse.Namespace, environ: Mapping[str, str]) -> int:
    settings = load_settings(environ)
    cnb_path = _buildpack_dir(environ)
    context = BuildContext(
        working_dir=Path.cwd(),
        buildpack_info=_load_info(cnb_path),
        plan=load_buildpack_plan(validate_path_exists(args.plan_path, field_name="plan_path")),
    )

    builder = Builder(PyProjectParser(), WatchexecReloader.from_settings(settings), settings=settings)
    result = builder(context)
    write_launch_toml(result, Path(args.layers_dir))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poetry-run",
        description="Compute the launch command of a Poetry application.",
    )
    subparsers = parser.add_subparsers(dest="phase", required=True)

    detect_parser = subparsers.add_parser("detect", help="Run the detect phase.")
    detect_parser.add_argument("platform_dir", help="Platform directory provided by the lifecycle.")
    detect_parser.add_argument("plan_path", help="Where to write the build plan.")

    build_parser_ = subparsers.add_parser("build", help="Run the build phase.")
    build_parser_.add_argument("layers_dir", help="Layers directory provided by the lifecycle.")
    build_parser_.add_argument("platform_dir", help="Platform directory provided by the lifecycle.")
    build_parser_.add_argument("plan_path", help="Path of the resolved buildpack plan.")

    return parser


def main_cli(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Main entry point for the buildpack phases.

    Raises:
        SystemExit: Always, carrying the phase's exit status.
    """
    if environ is None:
        environ = os.environ

    args = build_parser().parse_args(argv)

    try:
        _configure_logging(load_settings(environ).log_level)
    except ValidationError as e:
        _configure_logging("INFO")
        handle_cli_error(error=e, context="settings validation", exit_code=1, logger=logger)

    try:
        if args.phase == "detect":
            exit_code = run_detect(args, environ)
        else:
            exit_code = run_build(args, environ)
    except (PoetryRunError, OSError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(error=e, context=f"{args.phase} phase", exit_code=1, logger=logger)

    sys.exit(exit_code)


if __name__ == "__main__":
    main_cli()
