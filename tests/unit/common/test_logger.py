"""Tests for logging setup."""

import io
import logging
import logging.handlers
import uuid

import pytest

from publishing.common.config import LoggingConfig
from publishing.common.logger import LOG_FILE_MAX_BYTES, get_logger, setup_logger


@pytest.fixture
def logger_name():
    """Unique logger name so handlers do not leak between tests."""
    name = f"publishing-test-{uuid.uuid4().hex[:8]}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogger:
    def test_console_logging(self, logger_name):
        stream = io.StringIO()
        logger = setup_logger(logger_name, LoggingConfig(level="INFO"), stream=stream)

        logger.info("stage advanced")

        output = stream.getvalue()
        assert "[INFO]" in output
        assert f"[{logger_name}]" in output
        assert "stage advanced" in output

    def test_defaults_to_warning(self, logger_name):
        logger = setup_logger(logger_name, stream=io.StringIO())
        assert logger.level == logging.WARNING

    def test_level_override_wins(self, logger_name):
        stream = io.StringIO()
        logger = setup_logger(
            logger_name, LoggingConfig(level="ERROR"), level="warning", stream=stream
        )

        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    @pytest.mark.parametrize("level", ["LOUD", "BASIC_FORMAT"])
    def test_invalid_level(self, logger_name, level):
        with pytest.raises(ValueError):
            setup_logger(logger_name, level=level)

    def test_no_duplicate_handlers(self, logger_name):
        setup_logger(logger_name, stream=io.StringIO())
        logger = setup_logger(logger_name, stream=io.StringIO())

        assert len(logger.handlers) == 1

    def test_file_logging(self, logger_name, tmp_path):
        config = LoggingConfig(
            log_dir=str(tmp_path / "logs"),
            file_logging=True,
            console_logging=False,
        )
        logger = setup_logger(logger_name, config)

        logger.warning("written to file")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / f"{logger_name}.log"
        assert log_file.exists()
        assert "written to file" in log_file.read_text()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)
        assert logger.handlers[0].maxBytes == LOG_FILE_MAX_BYTES

    def test_all_output_disabled(self, logger_name):
        config = LoggingConfig(console_logging=False)
        logger = setup_logger(logger_name, config)

        assert logger.handlers == []

    def test_get_logger(self, logger_name):
        logger = setup_logger(logger_name, stream=io.StringIO())
        assert get_logger(logger_name) is logger
