import logging
import sys

from arrowkit.logger.logger import logger, setup_logger

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _stream_handlers(log: logging.Logger):
    return [h for h in log.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "arrowkit"
    assert logger.propagate is False

    handlers = _stream_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == FORMAT


def test_setup_logger_is_idempotent():
    first = setup_logger("arrowkit.test.fresh", level="DEBUG")
    second = setup_logger("arrowkit.test.fresh", level="WARNING")
    assert first is second
    handlers = _stream_handlers(second)
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stdout
    assert second.level == logging.WARNING
