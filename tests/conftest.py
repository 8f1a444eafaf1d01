"""Test configuration for harmonypicker."""

import os

import pytest

# Qt widgets are exercised without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by all Qt tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
