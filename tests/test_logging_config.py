"""
Tests for logging setup and level resolution.
"""

import logging
from pathlib import Path

import pytest

from mpm_wizard.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_default(self):
        assert resolve_level() == "WARNING"

    def test_flags_beat_env_and_config(self):
        assert resolve_level(debug=True, env_level="ERROR") == "DEBUG"
        assert resolve_level(verbose=True, config_level="ERROR") == "INFO"
        assert resolve_level(quiet=True, env_level="DEBUG") == "ERROR"

    def test_env_beats_config(self):
        assert resolve_level(env_level="INFO", config_level="DEBUG") == "INFO"

    def test_config(self):
        assert resolve_level(config_level="DEBUG") == "DEBUG"


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "wizard.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("mpm_wizard.test").debug("written to file only")
        for h in root.handlers:
            h.flush()
        assert "written to file only" in log_file.read_text()
