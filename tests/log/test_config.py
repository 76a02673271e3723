"""
Logging configuration tests.

Tests for stencil._logging setup.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _restore_logger():
    """Put the stencil logger back the way the test found it."""
    from stencil._logging import logger

    handlers = logger.handlers[:]
    level = logger.level
    log_format = os.environ.get("STENCIL_LOG_FORMAT")
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    if log_format is None:
        os.environ.pop("STENCIL_LOG_FORMAT", None)
    else:
        os.environ["STENCIL_LOG_FORMAT"] = log_format


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_setup_logging_accessible(self, stencil):
        """setup_logging is exported from the package root."""
        from stencil._logging import setup_logging

        assert stencil.setup_logging is setup_logging

    def test_setup_logging_default_level(self):
        """setup_logging() defaults to INFO level."""
        from stencil._logging import logger, setup_logging

        setup_logging()

        assert logger.level == logging.INFO

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("debug", logging.DEBUG),
            ("warn", logging.WARNING),
            ("off", logging.CRITICAL + 10),
            (logging.WARNING, logging.WARNING),
        ],
    )
    def test_setup_logging_levels(self, level, expected):
        """setup_logging() accepts level names and integer constants."""
        from stencil._logging import logger, setup_logging

        setup_logging(level)

        assert logger.level == expected

    def test_setup_logging_replaces_handlers(self):
        """setup_logging() replaces existing handlers with a single StreamHandler."""
        from stencil._logging import logger, setup_logging

        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging("INFO")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_with_json_format(self):
        """setup_logging(format='json') uses JsonFormatter."""
        from stencil._logging import JsonFormatter, logger, setup_logging

        setup_logging("INFO", format="json")

        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_leaves_environment_alone(self):
        """setup_logging() does not write STENCIL_LOG_FORMAT."""
        from stencil._logging import setup_logging

        before = os.environ.get("STENCIL_LOG_FORMAT")
        setup_logging("INFO", format="json")

        assert os.environ.get("STENCIL_LOG_FORMAT") == before

    def test_setup_logging_with_human_format(self):
        """setup_logging(format='human') uses HumanFormatter."""
        from stencil._logging import HumanFormatter, logger, setup_logging

        setup_logging("INFO", format="human")

        assert isinstance(logger.handlers[0].formatter, HumanFormatter)


class TestLoggerHierarchy:
    """Tests for the stencil logger and its children."""

    def test_logger_name_is_stencil(self):
        """Root stencil logger has the package name."""
        from stencil._logging import logger

        assert logger.name == "stencil"

    def test_module_loggers_are_children(self):
        """Module-specific loggers are children of the stencil logger."""
        import stencil._logging  # noqa: F401

        assert logging.getLogger("stencil.template").parent.name == "stencil"

    def test_child_inherits_level(self):
        """Child loggers inherit level from parent."""
        from stencil._logging import setup_logging

        setup_logging("DEBUG")

        assert logging.getLogger("stencil.child").getEffectiveLevel() == logging.DEBUG

    def test_records_propagate(self, caplog):
        """Records reach handlers configured on the root logger."""
        from stencil._logging import scoped_logger

        with caplog.at_level(logging.INFO, logger="stencil"):
            scoped_logger("template").info("hello")

        assert [r.getMessage() for r in caplog.records] == ["hello"]
        assert caplog.records[0].scope == "template"
