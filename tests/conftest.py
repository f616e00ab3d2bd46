"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handlers and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
