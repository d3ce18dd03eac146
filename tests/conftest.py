"""
Pytest configuration and shared fixtures for the poetryrun test suite.

This module provides common fixtures, test doubles, and configuration
for all test modules in the poetryrun project.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import toml

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from poetryrun.models import BuildContext, BuildpackInfo  # noqa: E402
from poetryrun.reload import WatchexecReloader  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def working_dir(tmp_path):
    """Application root for a build."""
    path = tmp_path / "working-dir"
    path.mkdir()
    return path


@pytest.fixture
def build_context(working_dir):
    """Build context as the lifecycle would provide it."""
    return BuildContext(
        working_dir=working_dir,
        buildpack_info=BuildpackInfo(
            id="some-buildpack-id",
            name="Some Buildpack",
            version="some-version",
        ),
    )


@pytest.fixture
def caplog_info(caplog):
    """Capture buildpack output at INFO level."""
    caplog.set_level(logging.INFO, logger="poetryrun")
    return caplog


# ============================================================================
# Test Doubles
# ============================================================================


@pytest.fixture
def pyproject_parser():
    """Metadata parser double that reports a single script."""
    parser = Mock()
    parser.parse.return_value = "some-script"
    return parser


@pytest.fixture
def reloader():
    """
    Reloader double with live reload disabled.

    The transformation delegates to the real watchexec reloader so the
    expected reload process shape is exercised end to end.
    """
    double = Mock()
    double.should_enable_live_reload.return_value = False
    double.transform_reloadable_processes.side_effect = (
        WatchexecReloader(environ={}).transform_reloadable_processes
    )
    return double


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def write_pyproject(working_dir):
    """Write a pyproject.toml into the working directory."""

    def _write(data):
        path = working_dir / "pyproject.toml"
        with open(path, "w") as f:
            toml.dump(data, f)
        return path

    return _write


@pytest.fixture
def buildpack_dir(tmp_path):
    """Buildpack root containing a buildpack.toml."""
    path = tmp_path / "cnb"
    path.mkdir(exist_ok=True)
    with open(path / "buildpack.toml", "w") as f:
        toml.dump(
            {
                "api": "0.9",
                "buildpack": {
                    "id": "some-buildpack-id",
                    "name": "Some Buildpack",
                    "version": "some-version",
                },
            },
            f,
        )
    return path
