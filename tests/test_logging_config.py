import logging

from bezierbeauty.logging_config import LOGGER_NAME, setup_logging


def _close_handlers(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_configures_package_logger():
    logger = setup_logging(level=logging.DEBUG)
    try:
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        _close_handlers(logger)


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        _close_handlers(logger)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "app.log"
    logger = setup_logging(log_file=str(log_file))
    try:
        logging.getLogger("bezierbeauty.model.state").info("hello from the driver")
    finally:
        _close_handlers(logger)

    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in content
    assert "bezierbeauty.model.state - INFO - hello from the driver" in content
