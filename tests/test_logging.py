import logging

from html5_tree.utils.logging import (
    LOGGER_NAME,
    LogFormatter,
    PerformanceLogger,
    get_default_log_file,
    log_exception,
    setup_logging,
)


def _real_handlers(logger):
    return [handler for handler in logger.handlers if not isinstance(handler, logging.NullHandler)]


class TestSetupLogging:
    def test_console_only(self):
        logger = setup_logging(console_level="WARNING")
        assert logger.name == LOGGER_NAME
        handlers = _real_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING
        assert logger.level == logging.WARNING

    def test_idempotent(self):
        first = setup_logging()
        second = setup_logging()
        assert first is second
        assert len(_real_handlers(first)) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "tree.log"
        logger = setup_logging(log_file=str(log_file), console_level="ERROR", file_level="DEBUG")
        assert logger.level == logging.DEBUG

        logging.getLogger(f"{LOGGER_NAME}.dom.document").debug("relocated node")
        for handler in logger.handlers:
            handler.flush()

        assert "relocated node" in log_file.read_text()

    def test_component_logger(self):
        logger = setup_logging(component="cli")
        try:
            assert logger.name == f"{LOGGER_NAME}.cli"
        finally:
            for handler in _real_handlers(logger):
                logger.removeHandler(handler)

    def test_default_log_file_location(self):
        path = get_default_log_file()
        assert ".html5_tree" in path
        assert path.endswith(".log")


class TestLogFormatter:
    def test_colored_level(self):
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        formatter = LogFormatter(colored=True, fmt="%(levelname)s %(message)s")
        formatter.colored = True
        assert formatter.format(record) == f"{LogFormatter.LEVEL_COLORS['ERROR']}ERROR{LogFormatter.RESET} boom"

    def test_plain_level(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "fine", None, None)
        formatter = LogFormatter(colored=False, fmt="%(levelname)s %(message)s")
        assert formatter.format(record) == "INFO fine"


class TestHelpers:
    def test_log_exception(self, caplog):
        logger = logging.getLogger(f"{LOGGER_NAME}.test")
        try:
            raise ValueError("bad input")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger=logger.name):
                log_exception(logger, e, "Parsing failed")

        assert "Parsing failed: bad input" in caplog.text
        assert caplog.records[0].exc_info is not None

    def test_performance_logger(self, caplog):
        logger = logging.getLogger(f"{LOGGER_NAME}.perf")
        perf = PerformanceLogger(logger, "parser")
        with caplog.at_level(logging.DEBUG, logger=logger.name):
            perf.start("parse")
            duration = perf.end("parse")
            missing = perf.end("never started")

        assert duration >= 0
        assert missing == 0.0
        assert "parser parse took" in caplog.text
        assert "No start time found for never started" in caplog.text
