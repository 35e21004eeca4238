from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def has_subscribers(self, name: str) -> bool:
        sig = self._signals.get(name)
        return bool(sig and sig.receivers)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds)
EVENT_SCROLL = "scroll"                    # payload: dx, dy
EVENT_RESIZE = "resize"                    # payload: width, height


# ============================================================================
# RAW INPUT
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TOUCH_START = "touch_start"          # payload: x, y


# ============================================================================
# HOTSPOT INTERACTION
# ============================================================================
EVENT_HOTSPOT_POINTER_ENTER = "hotspot_pointer_enter"  # payload: hotspot_entity=int, x, y
EVENT_HOTSPOT_POINTER_LEAVE = "hotspot_pointer_leave"  # payload: hotspot_entity=int, x, y
EVENT_HOTSPOT_POINTER_MOVE = "hotspot_pointer_move"    # payload: hotspot_entity=int, x, y
EVENT_HOTSPOT_CLICK = "hotspot_click"                  # payload: hotspot_entity=int, x, y
EVENT_HOTSPOT_TOUCH_START = "hotspot_touch_start"      # payload: hotspot_entity=int, x, y
EVENT_DOCUMENT_CLICK = "document_click"                # payload: x, y


# ============================================================================
# TOOLTIP
# ============================================================================
EVENT_TOOLTIP_SHOWN = "tooltip_shown"      # payload: hotspot_entity=int, project_id=str, placement=Placement
EVENT_TOOLTIP_HIDDEN = "tooltip_hidden"    # payload: hotspot_entity=int|None, reason=str
