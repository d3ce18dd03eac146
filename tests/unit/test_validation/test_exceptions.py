"""
Unit tests for the error handling helpers.
"""

import logging

import pytest

from poetryrun.validation.exceptions import ErrorSeverity, handle_cli_error, handle_error


@pytest.mark.unit
class TestHandleError:

    def test_logs_at_severity_without_reraise(self, caplog):
        log = logging.getLogger("poetryrun.tests.errors")
        caplog.set_level(logging.DEBUG, logger=log.name)

        handle_error(ValueError("bad value"), "settings", severity=ErrorSeverity.WARNING,
                     reraise=False, logger=log)

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.WARNING, "Error in settings: bad value"),
        ]
        assert caplog.records[0].exc_info is None

    def test_reraises_same_error(self):
        error = OSError("disk full")

        with pytest.raises(OSError) as exc_info:
            handle_error(error, "write")

        assert exc_info.value is error

    def test_debug_records_carry_traceback(self, caplog):
        caplog.set_level(logging.DEBUG, logger="poetryrun")

        try:
            raise KeyError("id")
        except KeyError as e:
            handle_error(e, "lookup", severity=ErrorSeverity.DEBUG, reraise=False)

        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].exc_info is not None

    def test_cli_error_exits(self, caplog):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(RuntimeError("boom"), "build", exit_code=3)

        assert exc_info.value.code == 3
        assert "Error in CLI build: boom" in caplog.text
