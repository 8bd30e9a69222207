"""Tests for parley.core.logging module."""

import importlib
import logging

import pytest
import structlog

import parley.core.logging as parley_logging


@pytest.fixture
def preserved_logging_state():
    """Restore structlog and root logger state after the test."""
    saved_config = structlog.get_config()
    saved_handlers = list(logging.root.handlers)
    saved_level = logging.root.level
    yield
    structlog.configure(**saved_config)
    logging.root.handlers[:] = saved_handlers
    logging.root.setLevel(saved_level)


class TestImportSideEffects:
    """Importing parley must leave host logging untouched."""

    def test_import_keeps_root_handlers_and_level(self, preserved_logging_state):
        """Reloading the module does not touch the stdlib root logger."""
        host_handler = logging.StreamHandler()
        logging.root.addHandler(host_handler)
        logging.root.setLevel(logging.INFO)

        importlib.reload(parley_logging)

        assert host_handler in logging.root.handlers
        assert logging.root.level == logging.INFO

    def test_import_keeps_structlog_config(self, preserved_logging_state):
        """Reloading the module does not replace host processors."""
        host_processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=host_processors)

        importlib.reload(parley_logging)

        assert structlog.get_config()["processors"] == host_processors

    def test_module_logger_follows_host_config(self, preserved_logging_state):
        """Module loggers resolve configuration lazily, at first use."""
        module_logger = parley_logging.get_module_logger()
        captured = []

        def _capture(_, __, event_dict):
            captured.append(event_dict)
            raise structlog.DropEvent

        structlog.configure(
            processors=[_capture],
            wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        )
        module_logger.info("late_configured_event")

        assert captured[0]["event"] == "late_configured_event"
        assert "component" in captured[0]


class TestConfigureLogging:
    """Tests for the opt-in configure_logging()."""

    def test_json_output(self, preserved_logging_state):
        """json_output selects the JSON renderer."""
        parley_logging.configure_logging("DEBUG", json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_output(self, preserved_logging_state):
        """Console rendering is used otherwise."""
        parley_logging.configure_logging("INFO", json_output=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
