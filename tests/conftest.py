"""pytest configuration and fixtures for pyqt-sortable tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class FakeClock:
    """Manually advanced millisecond clock, for HoverThrottle."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_ms(self, ms: int):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
