import logging
from pathlib import Path

from quicknotes.logger import configure_logging


def test_configures_stream_handler_and_level(fresh_logger) -> None:
    logger = configure_logging("debug")
    assert logger is fresh_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_second_call_keeps_existing_handlers(fresh_logger) -> None:
    configure_logging("INFO")
    configure_logging("DEBUG")
    assert fresh_logger.level == logging.INFO
    assert len(fresh_logger.handlers) == 1


def test_log_file_adds_rotating_handler(fresh_logger, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "quicknotes.log"
    logger = configure_logging("INFO", str(log_path))
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert len(logger.handlers) == 2
    assert "hello" in log_path.read_text(encoding="utf-8")


def test_unknown_level_defaults_to_info(fresh_logger) -> None:
    assert configure_logging("chatty").level == logging.INFO


def test_unwritable_log_file_keeps_console_handler(fresh_logger, tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    logger = configure_logging("INFO", str(blocker / "quicknotes.log"))

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert "Cannot write log file" in caplog.text
