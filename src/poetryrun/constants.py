"""
Names shared across the buildpack: dependencies, environment variables, roles.
"""

# Name of the dependency provided by the Poetry Install buildpack.
POETRY_VENV = "poetry-venv"

# Name of the python runtime dependency provided by the CPython buildpack.
CPYTHON = "cpython"

# Name of the dependency provided by the Poetry buildpack.
POETRY = "poetry"

# Name of the dependency provided by the Watchexec buildpack.
WATCHEXEC = "watchexec"

# Operator override for the poetry run target.
RUN_TARGET_ENV = "BP_POETRY_RUN_TARGET"

# Enables the watchexec reload wrapper.
LIVE_RELOAD_ENV = "BP_LIVE_RELOAD_ENABLED"

LOG_LEVEL_ENV = "BP_LOG_LEVEL"

BUILDPACK_DIR_ENV = "CNB_BUILDPACK_DIR"

PYPROJECT_FILENAME = "pyproject.toml"

POETRY_EXECUTABLE = "poetry"
RUN_SUBCOMMAND = "run"
WEB_PROCESS_TYPE = "web"
RELOAD_PROCESS_PREFIX = "reload-"

# Exit status the lifecycle expects when detection does not pass.
DETECT_FAIL_EXIT_CODE = 100
