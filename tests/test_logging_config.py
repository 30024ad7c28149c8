"""Tests for tagcloud.logging_config — handler setup for the tagcloud logger."""

import logging

import pytest

from tagcloud.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("tagcloud")
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_level_applied(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "tagcloud"
        assert logger.level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(logging.INFO, log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("tagcloud.layout.packer").info("hello from the packer")
        for h in logger.handlers:
            h.flush()
        assert "hello from the packer" in log_file.read_text(encoding="utf-8")

    def test_packer_debug_messages(self, caplog):
        from tagcloud.layout import RectanglePacker

        with caplog.at_level(logging.DEBUG, logger="tagcloud"):
            RectanglePacker().place((10, 10))
        assert any("spiral steps" in r.getMessage() for r in caplog.records)

    def test_level_by_name(self):
        assert setup_logging("debug").level == logging.DEBUG

    def test_unknown_level_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("chatty")

    def test_previous_file_handler_closed(self, tmp_path):
        first = setup_logging(log_file=str(tmp_path / "a.log"))
        (old_file,) = [h for h in first.handlers if isinstance(h, logging.FileHandler)]
        setup_logging()
        assert old_file.stream is None
