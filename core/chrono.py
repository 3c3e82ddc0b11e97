# core/chrono.py
import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

logger = logging.getLogger(__name__)


class SessionClock(QObject):
    """
    Whole-second session clock.
    Each QTimer timeout counts as one logical second; no drift correction.
    With a ceiling (time mode) elapsed is clamped to it and the clock stops itself;
    that last second is announced by ceilingReached instead of ticked.
    """
    ticked = Signal(int)           # new elapsed seconds
    ceilingReached = Signal(int)
    stopped = Signal()

    def __init__(self, ceiling: Optional[int] = None, tick_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._elapsed = 0
        self._running = False
        self._ceiling = ceiling

        self._tick = QTimer(self)
        self._tick.setInterval(tick_ms)
        self._tick.timeout.connect(self.tick)

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def ceiling(self) -> Optional[int]:
        return self._ceiling

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        if self._running:
            return
        self._running = True
        self._tick.start()

    def stop(self):
        if self._running:
            self._running = False
            self._tick.stop()
            self.stopped.emit()

    def tick(self):
        if not self._running:
            return
        elapsed = self._elapsed + 1
        hit_ceiling = self._ceiling is not None and elapsed >= self._ceiling
        if hit_ceiling:
            elapsed = self._ceiling
        self._elapsed = elapsed
        if hit_ceiling:
            logger.debug("clock reached ceiling at %ss", elapsed)
            self.stop()
            self.ceilingReached.emit(elapsed)
        else:
            self.ticked.emit(elapsed)
