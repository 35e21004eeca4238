from __future__ import annotations

from typing import Callable, List, Tuple

from portfolio_ui.events.bus import EventBus


class ListenerGroup:
    """Records bus subscriptions so they can be released together.

    ``dispose`` unsubscribes exactly the handlers bound through this group and
    is safe to call more than once.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        self._bound: List[Tuple[str, Callable]] = []

    def bind(self, name: str, fn: Callable) -> None:
        self.event_bus.subscribe(name, fn)
        self._bound.append((name, fn))

    def dispose(self) -> None:
        bound, self._bound = self._bound, []
        for name, fn in reversed(bound):
            self.event_bus.unsubscribe(name, fn)

    def __len__(self) -> int:
        return len(self._bound)
