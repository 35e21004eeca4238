from __future__ import annotations

from typing import Any

from esper import World

from portfolio_ui.components.hotspot import Hotspot
from portfolio_ui.events.bus import (
    EventBus,
    EVENT_DOCUMENT_CLICK,
    EVENT_HOTSPOT_CLICK,
    EVENT_HOTSPOT_POINTER_ENTER,
    EVENT_HOTSPOT_POINTER_LEAVE,
    EVENT_HOTSPOT_POINTER_MOVE,
    EVENT_HOTSPOT_TOUCH_START,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_TOUCH_START,
)

LEFT_BUTTON = 1


class HotspotInputSystem:
    """Bridges raw pointer input to hotspot-level enter/leave/click events."""

    def __init__(self, world: World, event_bus: EventBus, *, presses_as_touch: bool = False) -> None:
        self.world = world
        self.event_bus = event_bus
        # Touch hosts that only report presses route them through the touch path.
        self.presses_as_touch = presses_as_touch
        self._hovered: int | None = None
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_TOUCH_START, self.on_touch_start)

    @property
    def hovered(self) -> int | None:
        return self._hovered

    def on_mouse_move(self, sender: Any, **payload: Any) -> None:
        point = self._point(payload)
        if point is None:
            return
        x, y = point
        entity = self.hotspot_at_point(x, y)
        if entity == self._hovered:
            if entity is not None:
                self.event_bus.emit(EVENT_HOTSPOT_POINTER_MOVE, hotspot_entity=entity, x=x, y=y)
            return
        previous = self._hovered
        self._hovered = entity
        if previous is not None:
            self.event_bus.emit(EVENT_HOTSPOT_POINTER_LEAVE, hotspot_entity=previous, x=x, y=y)
        if entity is not None:
            self.event_bus.emit(EVENT_HOTSPOT_POINTER_ENTER, hotspot_entity=entity, x=x, y=y)
            self.event_bus.emit(EVENT_HOTSPOT_POINTER_MOVE, hotspot_entity=entity, x=x, y=y)

    def on_mouse_press(self, sender: Any, **payload: Any) -> None:
        point = self._point(payload)
        if point is None:
            return
        button = payload.get("button", LEFT_BUTTON)
        if button != LEFT_BUTTON:
            return
        if self.presses_as_touch:
            self.on_touch_start(sender, **payload)
            return
        x, y = point
        entity = self.hotspot_at_point(x, y)
        if entity is None:
            self.event_bus.emit(EVENT_DOCUMENT_CLICK, x=x, y=y)
            return
        self.event_bus.emit(EVENT_HOTSPOT_CLICK, hotspot_entity=entity, x=x, y=y)

    def on_touch_start(self, sender: Any, **payload: Any) -> None:
        point = self._point(payload)
        if point is None:
            return
        x, y = point
        entity = self.hotspot_at_point(x, y)
        if entity is None:
            # Taps on empty page areas behave like a click outside.
            self.event_bus.emit(EVENT_DOCUMENT_CLICK, x=x, y=y)
            return
        self.event_bus.emit(EVENT_HOTSPOT_TOUCH_START, hotspot_entity=entity, x=x, y=y)

    def hotspot_at_point(self, x: float, y: float) -> int | None:
        for entity, hotspot in self.world.get_component(Hotspot):
            if hotspot.rect.contains(x, y):
                return entity
        return None

    @staticmethod
    def _point(payload: dict) -> tuple[float, float] | None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return None
        try:
            return float(x), float(y)
        except (TypeError, ValueError):
            return None
