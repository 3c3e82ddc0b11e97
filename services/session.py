# services/session.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal, Slot

from app import calculation
from app.config import SessionConfig
from app.state import (
    CharacterState,
    InputState,
    MetricsHistory,
    MetricsSnapshot,
    SessionResult,
    SessionStatus,
    caret_index,
    character_statuses,
)
from core.chrono import SessionClock
from services.typing_engine import apply_input

logger = logging.getLogger(__name__)


class TypingSession(QObject):
    """
    Owns one typing run: input state, clock, live metrics and the wpm history.

    Events (input changes and clock ticks) are handled in arrival order on the
    Qt thread. The run goes Running -> Completed exactly once, when the whole
    reference has been typed or the time-mode ceiling is hit; after that every
    event is ignored. Nothing is accepted before start().
    """
    progressed = Signal(float, float, float)  # wpm, accuracy, progress %
    completed = Signal(object)                # SessionResult

    def __init__(
        self,
        config: SessionConfig,
        on_progress: Optional[Callable[[float, float, float], None]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.config = config
        self._reference = config.text
        self._input = InputState()
        self._status = SessionStatus.RUNNING
        self._started = False
        self._torn_down = False

        self._wpm = 0.0
        self._accuracy = 0.0
        self._progress = 0.0
        self._history = MetricsHistory()
        self._result: Optional[SessionResult] = None

        self._clock = SessionClock(ceiling=config.ceiling, tick_ms=config.tick_ms, parent=self)
        self._clock.ticked.connect(self.on_tick)
        self._clock.ceilingReached.connect(self.on_ceiling_reached)

        if on_progress is not None:
            self.progressed.connect(on_progress)

    # ---------- read-only projections ----------
    @property
    def reference(self) -> str:
        return self._reference

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._started and self._status is SessionStatus.RUNNING and not self._torn_down

    @property
    def is_completed(self) -> bool:
        return self._status is SessionStatus.COMPLETED

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def elapsed(self) -> int:
        return self._clock.elapsed

    @property
    def input_state(self) -> InputState:
        return self._input

    @property
    def current_index(self) -> int:
        return caret_index(self._input, self._reference)

    @property
    def wpm(self) -> float:
        return self._wpm

    @property
    def accuracy(self) -> float:
        return self._accuracy

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def history(self) -> Tuple[MetricsSnapshot, ...]:
        return self._history.snapshot()

    @property
    def result(self) -> Optional[SessionResult]:
        return self._result

    def characters(self) -> List[CharacterState]:
        return character_statuses(self._reference, self._input)

    # ---------- lifecycle ----------
    def start(self):
        if self._started or self._torn_down:
            return
        self._started = True
        logger.info(
            "session started: mode=%s option=%s length=%d",
            self.config.mode.value, self.config.mode_option, len(self._reference),
        )
        if not self._reference:
            self.complete()
            return
        self._clock.start()

    def teardown(self):
        """Stop the clock for good; later input and ticks are ignored."""
        self._clock.stop()
        if not self._torn_down:
            self._torn_down = True
            logger.debug("session torn down (status=%s)", self._status.value)

    # ---------- events ----------
    def handle_input(self, raw: str):
        if not self.is_running:
            logger.debug("input ignored, session is not running")
            return

        self._input = apply_input(self._input, raw, self._reference)

        ceiling = self.config.ceiling
        if ceiling is not None and self._clock.elapsed >= ceiling:
            self.complete()
            return

        # input running past the reference is treated as the end of the run
        if self._input.length >= len(self._reference):
            self.complete()
            return

        if self._clock.elapsed > 0:
            self._recompute()

    @Slot(int)
    def on_tick(self, elapsed: int):
        if not self.is_running:
            return
        if elapsed > 0:
            self._recompute()

    @Slot(int)
    def on_ceiling_reached(self, elapsed: int):
        if not self.is_running:
            return
        self._recompute()
        self.complete()

    def complete(self):
        if self._status is SessionStatus.COMPLETED or self._torn_down:
            return
        self._status = SessionStatus.COMPLETED
        self._clock.stop()

        elapsed = self._clock.elapsed
        typed = self._input.text
        self._wpm = calculation.wpm(len(typed), elapsed)
        self._accuracy = calculation.accuracy(typed, self._reference)
        self._progress = calculation.final_progress(len(typed), len(self._reference))
        self._history.append_if_distinct(
            MetricsSnapshot(self._wpm, self._accuracy, self._progress, elapsed)
        )

        self._result = SessionResult(
            wpm=self._wpm,
            accuracy=self._accuracy,
            progress=self._progress,
            elapsed=elapsed,
            history=self._history.snapshot(),
            mode=self.config.mode.value,
            mode_option=self.config.mode_option,
        )
        logger.info(
            "session completed at %ss: %.1f wpm, %.1f%% accuracy",
            elapsed, self._wpm, self._accuracy,
        )
        self.progressed.emit(self._wpm, self._accuracy, self._progress)
        self.completed.emit(self._result)

    # ---------- internals ----------
    def _recompute(self):
        elapsed = self._clock.elapsed
        typed = self._input.text
        self._wpm = calculation.wpm(len(typed), elapsed)
        self._accuracy = calculation.accuracy(typed, self._reference)
        self._progress = calculation.progress(len(typed), len(self._reference))
        self._history.append_if_distinct(
            MetricsSnapshot(self._wpm, self._accuracy, self._progress, elapsed)
        )
        self.progressed.emit(self._wpm, self._accuracy, self._progress)
