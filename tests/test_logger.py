import logging
import os
import subprocess
import sys

import pytest

from fpstd.logger import logger, resolve_level, setup_logger


class TestResolveLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("ERROR", logging.ERROR), (" info ", logging.INFO), (logging.INFO, logging.INFO)],
    )
    def test_known_levels(self, name, expected):
        assert resolve_level(name) == expected

    @pytest.mark.parametrize("name", ["", "verbose", "10"])
    def test_unknown_levels_fall_back_to_warning(self, name):
        assert resolve_level(name) == logging.WARNING

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("FPSTD_LOG_LEVEL", "error")
        assert resolve_level() == logging.ERROR

    def test_unset_env(self, monkeypatch):
        monkeypatch.delenv("FPSTD_LOG_LEVEL", raising=False)
        assert resolve_level() == logging.WARNING


class TestImport:
    @pytest.mark.parametrize("value", ["", "verbose"])
    def test_bad_env_level_does_not_break_import(self, value):
        env = {**os.environ, "FPSTD_LOG_LEVEL": value}
        result = subprocess.run(
            [sys.executable, "-c", "import fpstd, logging; print(logging.getLogger('fpstd').level)"],
            env=env,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == str(logging.WARNING)


class TestPackageLogger:
    def test_name(self):
        assert logger.name == "fpstd"

    def test_library_defaults(self):
        assert logger.propagate
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert not any(type(h) is logging.StreamHandler for h in logger.handlers)


class TestSetupLogger:
    def test_explicit_level(self):
        log = setup_logger("fpstd.tests.explicit", level="debug")
        assert log.level == logging.DEBUG
        assert log.propagate

    def test_bad_level_falls_back(self):
        log = setup_logger("fpstd.tests.bad", level="verbose")
        assert log.level == logging.WARNING

    def test_adds_one_stream_handler(self):
        first = setup_logger("fpstd.tests.once")
        second = setup_logger("fpstd.tests.once", level="DEBUG")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
