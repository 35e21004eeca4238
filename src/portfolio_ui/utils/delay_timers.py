from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict

# Absorbs float drift when delays are accumulated from frame deltas.
_EPSILON = 1e-9


class TimerKind(Enum):
    SHOW = "show"
    HIDE = "hide"


@dataclass(slots=True)
class _PendingTimer:
    remaining: float
    callback: Callable[[], None]


@dataclass(slots=True)
class DelayTimers:
    """Named, cancelable delays advanced by frame ticks.

    At most one timer per :class:`TimerKind` is outstanding. Scheduling a kind
    that is already pending replaces the earlier timer, so a stale callback can
    never fire after a newer request of the same kind.
    """

    _pending: Dict[TimerKind, _PendingTimer] = field(default_factory=dict, repr=False)

    def schedule(self, kind: TimerKind, delay: float, callback: Callable[[], None]) -> None:
        self._pending[kind] = _PendingTimer(max(0.0, float(delay)), callback)

    def cancel(self, kind: TimerKind) -> bool:
        return self._pending.pop(kind, None) is not None

    def cancel_all(self) -> None:
        self._pending.clear()

    def pending(self, kind: TimerKind) -> bool:
        return kind in self._pending

    def remaining(self, kind: TimerKind) -> float | None:
        timer = self._pending.get(kind)
        if timer is None:
            return None
        return timer.remaining

    def advance(self, dt: float) -> None:
        if dt <= 0.0 or not self._pending:
            return
        due: list[tuple[float, TimerKind]] = []
        for kind, timer in self._pending.items():
            timer.remaining -= dt
            if timer.remaining <= _EPSILON:
                due.append((timer.remaining, kind))
        # Fire in expiry order; a callback may cancel or reschedule the other kind.
        for _, kind in sorted(due, key=lambda item: item[0]):
            timer = self._pending.get(kind)
            if timer is None or timer.remaining > _EPSILON:
                continue
            del self._pending[kind]
            timer.callback()
