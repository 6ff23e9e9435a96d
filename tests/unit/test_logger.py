import logging
from logging.handlers import RotatingFileHandler

import pytest

from solid_principles.config import LogDestination, LoggingConfig, LogLevel
from solid_principles.helpers.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_stderr_destination_never_writes_stdout(capsys):
    setup_logging(LoggingConfig(level=LogLevel.DEBUG, destination=LogDestination.STDERR))

    get_logger("tests").warning("something happened", principle="srp")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "something happened" in captured.err
    assert "principle='srp'" in captured.err


def test_level_is_applied():
    setup_logging(LoggingConfig(level=LogLevel.ERROR))

    assert logging.getLogger().level == logging.ERROR


def test_file_destination(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(LoggingConfig(
        level=LogLevel.INFO,
        destination=LogDestination.FILE,
        file_path=str(log_file),
    ))

    get_logger("tests").info("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    root_handlers = logging.getLogger().handlers
    assert len(root_handlers) == 1
    assert isinstance(root_handlers[0], RotatingFileHandler)
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_both_destinations(tmp_path):
    setup_logging(LoggingConfig(
        destination=LogDestination.BOTH,
        file_path=str(tmp_path / "app.log"),
    ))

    assert len(logging.getLogger().handlers) == 2


def test_lowercase_level_accepted():
    assert LoggingConfig(level="debug").level == LogLevel.DEBUG
