"""Root pytest configuration for all tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo logging configuration done by CLI tests.

    _configure_logging() attaches handlers bound to the CliRunner streams;
    they must not leak into later tests.
    """
    app_logger = logging.getLogger("xml_to_elements")
    original_handlers = list(app_logger.handlers)
    original_level = app_logger.level

    yield

    for handler in list(app_logger.handlers):
        if handler not in original_handlers:
            app_logger.removeHandler(handler)
            handler.close()
    app_logger.setLevel(original_level)
