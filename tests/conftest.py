"""Shared fixtures for the test suite."""

import logging
import os

import pytest

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def categories(segments):
    """Get (category name, content) pairs for a segment list."""
    return [(segment.name, segment.content) for segment in segments]


@pytest.fixture
def pairs():
    return categories


@pytest.fixture(scope="session")
def qapp():
    """A QGuiApplication for tests that need one."""
    QtGui = pytest.importorskip("PyQt6.QtGui")
    app = QtGui.QGuiApplication.instance()
    if app is None:
        app = QtGui.QGuiApplication([])
    return app


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
