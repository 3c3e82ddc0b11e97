import os

# headless Qt for the test run
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from app.config import Mode, SessionConfig
from services.session import TypingSession


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """Every test gets the shared QApplication so QTimer/QObject work."""
    return qapp


@pytest.fixture
def make_session():
    """Build a session; the clock is driven by calling tick() by hand."""
    created = []

    def _make(text="cat", mode=Mode.WORDS, mode_option=10, on_progress=None):
        cfg = SessionConfig(mode=mode, mode_option=mode_option, text=text)
        s = TypingSession(cfg, on_progress=on_progress)
        created.append(s)
        return s

    yield _make
    for s in created:
        s.teardown()
