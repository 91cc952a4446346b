"""Unit tests for logging configuration."""

import json
from pathlib import Path

import pytest
from loguru import logger

from rep_finder.core.logging import LOG_FILE_NAME, setup_logging


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_does_not_raise(self) -> None:
        """setup_logging with valid log level does not raise."""
        setup_logging("DEBUG")
        setup_logging("INFO")
        setup_logging("WARNING")

    def test_setup_logging_case_insensitive(self) -> None:
        """setup_logging accepts case-insensitive log levels."""
        setup_logging("info")
        setup_logging("debug")

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO")
        logger.info("Indexed {} state/district entries", 3)
        err = capsys.readouterr().err
        assert "| INFO     |" in err
        assert "Indexed 3 state/district entries" in err
        setup_logging("INFO")

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO", json_logs=True)
        logger.info("Roster reloaded")
        logger.debug("below threshold")
        lines = capsys.readouterr().err.strip().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["record"]["message"] == "Roster reloaded"
        assert record["record"]["level"]["name"] == "INFO"
        setup_logging("INFO")

    def test_log_dir_creates_file_sink(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        setup_logging("INFO", log_dir=str(log_dir))
        logger.info("hello from the test")
        logger.remove()
        assert "hello from the test" in (log_dir / LOG_FILE_NAME).read_text()
        setup_logging("INFO")
