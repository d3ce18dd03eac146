"""
Unit tests for configuration loading.

Tests environment settings, boolean parsing, and the lifecycle TOML loaders.
"""

import pytest
import toml

from poetryrun.config import load_buildpack_info, load_buildpack_plan, load_settings, load_toml_file
from poetryrun.models import BuildpackInfo
from poetryrun.models.context import BuildpackPlanEntry
from poetryrun.validation import ValidationError, validate_bool_string, validate_enum_choice


@pytest.mark.unit
class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({})

        assert settings.run_target is None
        assert settings.live_reload_enabled is None
        assert settings.log_level == "INFO"

    def test_reads_values(self):
        settings = load_settings({
            "BP_POETRY_RUN_TARGET": "uvicorn app:app",
            "BP_LIVE_RELOAD_ENABLED": "true",
            "BP_LOG_LEVEL": "debug",
        })

        assert settings.run_target == "uvicorn app:app"
        assert settings.live_reload_enabled == "true"
        assert settings.log_level == "DEBUG"

    def test_empty_run_target_is_still_set(self):
        assert load_settings({"BP_POETRY_RUN_TARGET": ""}).run_target == ""

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("BP_POETRY_RUN_TARGET", "serve")
        assert load_settings().run_target == "serve"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            load_settings({"BP_LOG_LEVEL": "TRACE"})

        assert exc_info.value.field_name == "BP_LOG_LEVEL"


@pytest.mark.unit
class TestValidators:

    def test_bool_string(self):
        assert validate_bool_string("True") is True
        assert validate_bool_string("0") is False
        assert validate_bool_string(False) is False

    def test_bool_string_invalid(self):
        with pytest.raises(ValidationError, match="flag must be a boolean"):
            validate_bool_string("nope", field_name="flag")

    def test_enum_choice_is_case_insensitive(self):
        assert validate_enum_choice("info", ["DEBUG", "INFO"]) == "INFO"

    def test_enum_choice_case_sensitive(self):
        with pytest.raises(ValidationError):
            validate_enum_choice("info", ["DEBUG", "INFO"], case_sensitive=True)


@pytest.mark.unit
class TestLoaders:

    def test_load_toml_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="plan not found"):
            load_toml_file(tmp_path / "missing.toml", "plan")

    def test_load_buildpack_info(self, buildpack_dir):
        assert load_buildpack_info(buildpack_dir) == BuildpackInfo(
            id="some-buildpack-id",
            name="Some Buildpack",
            version="some-version",
        )

    def test_load_buildpack_info_requires_id(self, tmp_path):
        with open(tmp_path / "buildpack.toml", "w") as f:
            toml.dump({"buildpack": {"name": "Nameless"}}, f)

        with pytest.raises(ValidationError, match="buildpack.id"):
            load_buildpack_info(tmp_path)

    def test_load_buildpack_plan(self, tmp_path):
        plan_path = tmp_path / "plan.toml"
        with open(plan_path, "w") as f:
            toml.dump({"entries": [{"name": "poetry-venv", "metadata": {"launch": True}}]}, f)

        assert load_buildpack_plan(plan_path) == [
            BuildpackPlanEntry(name="poetry-venv", metadata={"launch": True})
        ]

    def test_load_empty_buildpack_plan(self, tmp_path):
        plan_path = tmp_path / "plan.toml"
        plan_path.write_text("")

        assert load_buildpack_plan(plan_path) == []
