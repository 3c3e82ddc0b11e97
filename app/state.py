from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple


class CharStatus(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    ERROR = "error"


class SessionStatus(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True)
class CharacterState:
    char: str
    status: CharStatus


@dataclass(frozen=True)
class InputState:
    text: str = ""
    mistakes: FrozenSet[int] = frozenset()

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class MetricsSnapshot:
    wpm: float
    accuracy: float
    progress: float
    timestamp: int


@dataclass
class MetricsHistory:
    """
    Append-only series of snapshots used for live display and the results chart.
    A reading identical to the previous one (same second, same wpm) is dropped.
    """
    _entries: List[MetricsSnapshot] = field(default_factory=list)

    def append_if_distinct(self, snap: MetricsSnapshot) -> bool:
        last = self.last
        if last is not None and last.timestamp == snap.timestamp and last.wpm == snap.wpm:
            return False
        self._entries.append(snap)
        return True

    @property
    def last(self) -> Optional[MetricsSnapshot]:
        return self._entries[-1] if self._entries else None

    def timestamps(self) -> List[int]:
        return [s.timestamp for s in self._entries]

    def wpm_values(self) -> List[float]:
        return [s.wpm for s in self._entries]

    def snapshot(self) -> Tuple[MetricsSnapshot, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[MetricsSnapshot]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True)
class SessionResult:
    wpm: float
    accuracy: float
    progress: float
    elapsed: int
    history: Tuple[MetricsSnapshot, ...]
    mode: str
    mode_option: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wpm": self.wpm,
            "accuracy": self.accuracy,
            "progress": self.progress,
            "time": self.elapsed,
            "wpmData": [{"time": s.timestamp, "wpm": s.wpm} for s in self.history],
            "mode": self.mode,
            "modeOption": self.mode_option,
        }


def caret_index(state: InputState, reference: str) -> int:
    return min(state.length, len(reference))


def character_statuses(reference: str, state: InputState) -> List[CharacterState]:
    """One entry per reference character, derived from the caret and the mistake set."""
    caret = caret_index(state, reference)
    out: List[CharacterState] = []
    for i, ch in enumerate(reference):
        if i >= caret:
            status = CharStatus.PENDING
        elif i in state.mistakes:
            status = CharStatus.ERROR
        else:
            status = CharStatus.CORRECT
        out.append(CharacterState(ch, status))
    return out
