from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from esper import World

from portfolio_ui.components.hotspot import Hotspot
from portfolio_ui.components.project_info import ProjectRegistry
from portfolio_ui.components.rect import Rect
from portfolio_ui.components.tooltip_state import TooltipPhase, TooltipState
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.config import TooltipConfig
from portfolio_ui.events.bus import (
    EventBus,
    EVENT_DOCUMENT_CLICK,
    EVENT_HOTSPOT_CLICK,
    EVENT_HOTSPOT_POINTER_ENTER,
    EVENT_HOTSPOT_POINTER_LEAVE,
    EVENT_HOTSPOT_POINTER_MOVE,
    EVENT_HOTSPOT_TOUCH_START,
    EVENT_RESIZE,
    EVENT_SCROLL,
    EVENT_TICK,
    EVENT_TOOLTIP_HIDDEN,
    EVENT_TOOLTIP_SHOWN,
)
from portfolio_ui.utils.delay_timers import DelayTimers, TimerKind
from portfolio_ui.utils.listeners import ListenerGroup
from portfolio_ui.utils.placement import (
    PlacementResult,
    place_anchored,
    place_following,
    place_sheet,
)
from portfolio_ui.utils.tooltip_text import build_tooltip_content, measure_tooltip

logger = logging.getLogger(__name__)

HIDE_REASON_TIMEOUT = "timeout"
HIDE_REASON_TOGGLE = "toggle"
HIDE_REASON_CLICK_AWAY = "click_away"
HIDE_REASON_SCROLL = "scroll"
HIDE_REASON_TEARDOWN = "teardown"


class MissingSurfaceError(RuntimeError):
    """Raised when the viewport, project registry or hotspots are absent."""


def _noop() -> None:
    return None


class TooltipSystem:
    """Owns tooltip visibility, the show/hide delays and on-screen placement.

    Hotspot-level input arrives on the event bus (see ``HotspotInputSystem``);
    the system binds to it in :meth:`initialize` and releases everything in
    :meth:`teardown`. One hotspot at most is associated with the tooltip.
    """

    def __init__(self, world: World, event_bus: EventBus, *, config: TooltipConfig | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or TooltipConfig()
        self.timers = DelayTimers()
        self._disposers: list[Callable[[], None]] = []
        self._state_entity: Optional[int] = None
        self._state = self._ensure_state()

    @property
    def state(self) -> TooltipState:
        return self._state

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> Callable[[], None]:
        """Bind listeners and return the disposer that unbinds them.

        Not idempotent: a second call binds every handler again.
        """
        try:
            hotspot_count = self._resolve_surface()
        except MissingSurfaceError as exc:
            logger.warning("Tooltip system disabled: %s", exc)
            return _noop
        listeners = ListenerGroup(self.event_bus)
        listeners.bind(EVENT_HOTSPOT_POINTER_ENTER, self.on_pointer_enter)
        listeners.bind(EVENT_HOTSPOT_POINTER_LEAVE, self.on_pointer_leave)
        listeners.bind(EVENT_HOTSPOT_POINTER_MOVE, self.on_pointer_move)
        listeners.bind(EVENT_HOTSPOT_TOUCH_START, self.on_touch_start)
        listeners.bind(EVENT_HOTSPOT_CLICK, self.on_click)
        listeners.bind(EVENT_DOCUMENT_CLICK, self.on_document_click)
        listeners.bind(EVENT_SCROLL, self.on_scroll)
        listeners.bind(EVENT_RESIZE, self.on_resize)
        listeners.bind(EVENT_TICK, self.on_tick)
        self._disposers.append(listeners.dispose)
        logger.info("Tooltip system initialized with %d hotspots", hotspot_count)
        return listeners.dispose

    def teardown(self) -> None:
        self.hide(HIDE_REASON_TEARDOWN)
        disposers, self._disposers = self._disposers, []
        for dispose in disposers:
            dispose()

    def _resolve_surface(self) -> int:
        if self._singleton(Viewport) is None:
            raise MissingSurfaceError("no Viewport component registered")
        if self._singleton(ProjectRegistry) is None:
            raise MissingSurfaceError("no ProjectRegistry component registered")
        hotspot_count = len(self.world.get_component(Hotspot))
        if hotspot_count == 0:
            raise MissingSurfaceError("no hotspots found")
        return hotspot_count

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_pointer_enter(self, sender, **payload):
        hotspot_entity = self._hotspot_from(payload)
        if hotspot_entity is None:
            return
        state = self._state
        if state.visible and state.hotspot_entity == hotspot_entity:
            # Back on the active hotspot before the hide delay ran out.
            self.timers.cancel(TimerKind.HIDE)
            self.timers.cancel(TimerKind.SHOW)
            state.pending_hotspot = None
            state.phase = TooltipPhase.VISIBLE
            return
        state.pending_hotspot = hotspot_entity
        self.timers.schedule(TimerKind.SHOW, self.config.show_delay, self._on_show_timer)
        if state.visible:
            # Keep the current tooltip up until the show delay swaps it.
            self.timers.cancel(TimerKind.HIDE)
            state.phase = TooltipPhase.VISIBLE
        elif state.phase is TooltipPhase.HIDDEN:
            state.phase = TooltipPhase.PENDING_SHOW

    def on_pointer_leave(self, sender, **payload):
        hotspot_entity = self._hotspot_from(payload)
        if hotspot_entity is None:
            return
        state = self._state
        if state.pending_hotspot == hotspot_entity:
            self.timers.cancel(TimerKind.SHOW)
            state.pending_hotspot = None
            if state.phase is TooltipPhase.PENDING_SHOW:
                state.phase = TooltipPhase.HIDDEN
        if state.phase is TooltipPhase.VISIBLE:
            self.timers.schedule(TimerKind.HIDE, self.config.hide_delay, self._on_hide_timer)
            state.phase = TooltipPhase.PENDING_HIDE

    def on_pointer_move(self, sender, **payload):
        hotspot_entity = self._hotspot_from(payload)
        state = self._state
        if hotspot_entity is None or state.phase is not TooltipPhase.VISIBLE:
            return
        if state.hotspot_entity != hotspot_entity:
            return
        try:
            xf = float(payload["x"])
            yf = float(payload["y"])
        except (KeyError, TypeError, ValueError):
            return
        viewport = self._singleton(Viewport)
        if viewport is None or viewport.is_mobile(self.config.mobile_breakpoint):
            return
        result = place_following(
            xf,
            yf,
            state.width,
            state.height,
            viewport,
            gap=self.config.gap,
        )
        self._apply_placement(result)

    def on_touch_start(self, sender, **payload):
        hotspot_entity = self._hotspot_from(payload)
        if hotspot_entity is None:
            return
        # Touch has no hover, so the show delay is skipped.
        self._cancel_timers()
        self.show(hotspot_entity)

    def on_click(self, sender, **payload):
        hotspot_entity = self._hotspot_from(payload)
        if hotspot_entity is None:
            return
        state = self._state
        toggling_off = state.visible and state.hotspot_entity == hotspot_entity
        # A click settles the interaction immediately; pending delays are dropped.
        self._cancel_timers()
        if toggling_off:
            self.hide(HIDE_REASON_TOGGLE)
            return
        self.show(hotspot_entity)

    def on_document_click(self, sender, **payload):
        x, y = payload.get("x"), payload.get("y")
        if x is None or y is None:
            return
        try:
            xf, yf = float(x), float(y)
        except (TypeError, ValueError):
            return
        state = self._state
        if state.visible and state.box().contains(xf, yf):
            return
        if self.hotspot_at_point(xf, yf) is not None:
            return
        self.hide(HIDE_REASON_CLICK_AWAY)

    def on_scroll(self, sender, **payload):
        self.hide(HIDE_REASON_SCROLL)

    def on_resize(self, sender, **payload):
        width, height = payload.get("width"), payload.get("height")
        viewport = self._singleton(Viewport)
        if viewport is None:
            return
        if width is not None and height is not None:
            try:
                new_width, new_height = float(width), float(height)
            except (TypeError, ValueError):
                return
            viewport.width = new_width
            viewport.height = new_height
        state = self._state
        if not state.visible or state.hotspot_entity is None:
            return
        try:
            hotspot = self.world.component_for_entity(state.hotspot_entity, Hotspot)
        except KeyError:
            return
        self._apply_placement(self._place(hotspot.rect, viewport))

    def on_tick(self, sender, **payload):
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        self.timers.advance(dt_val)

    # ------------------------------------------------------------------
    # Show / hide
    # ------------------------------------------------------------------
    def show(self, hotspot_entity: int) -> bool:
        """Populate and place the tooltip for ``hotspot_entity`` right away.

        Returns ``False`` without touching the visible tooltip when the hotspot
        or its project data cannot be found.
        """
        state = self._state
        try:
            hotspot = self.world.component_for_entity(hotspot_entity, Hotspot)
        except KeyError:
            logger.warning("Tooltip requested for unknown hotspot entity %s", hotspot_entity)
            self._abandon_pending_show()
            return False
        registry = self._singleton(ProjectRegistry)
        project = registry.lookup(hotspot.project_id) if registry is not None else None
        if project is None:
            logger.warning(
                "Project data not found for hotspot %r (project %r)",
                hotspot.hotspot_id,
                hotspot.project_id,
            )
            self._abandon_pending_show()
            return False
        viewport = self._singleton(Viewport)
        if viewport is None:
            logger.warning("Tooltip cannot be placed without a Viewport component")
            self._abandon_pending_show()
            return False

        previous = state.hotspot_entity
        if previous is not None and previous != hotspot_entity:
            self._set_active(previous, False)
        self.timers.cancel(TimerKind.HIDE)

        content = build_tooltip_content(project, self.config)
        state.content = content
        state.width, state.height = measure_tooltip(content, self.config)
        state.hotspot_entity = hotspot_entity
        state.project_id = hotspot.project_id
        if state.pending_hotspot == hotspot_entity:
            self.timers.cancel(TimerKind.SHOW)
            state.pending_hotspot = None
        self._apply_placement(self._place(hotspot.rect, viewport))
        state.phase = TooltipPhase.VISIBLE
        hotspot.active = True
        logger.debug("Tooltip shown for %r at %s", hotspot.hotspot_id, state.placement)
        self.event_bus.emit(
            EVENT_TOOLTIP_SHOWN,
            hotspot_entity=hotspot_entity,
            project_id=hotspot.project_id,
            placement=state.placement,
        )
        return True

    def hide(self, reason: str = HIDE_REASON_CLICK_AWAY) -> None:
        """Hide immediately, overriding any pending show or hide delay."""
        self._cancel_timers()
        self._conceal(reason)

    def _conceal(self, reason: str) -> None:
        state = self._state
        was_visible = state.visible
        hotspot_entity = state.hotspot_entity
        if hotspot_entity is not None:
            self._set_active(hotspot_entity, False)
        state.hotspot_entity = None
        state.content = None
        state.project_id = ""
        state.phase = TooltipPhase.PENDING_SHOW if self.timers.pending(TimerKind.SHOW) else TooltipPhase.HIDDEN
        if not was_visible:
            return
        state.last_hide_reason = reason
        logger.debug("Tooltip hidden (%s)", reason)
        self.event_bus.emit(EVENT_TOOLTIP_HIDDEN, hotspot_entity=hotspot_entity, reason=reason)

    def _on_show_timer(self) -> None:
        state = self._state
        target = state.pending_hotspot
        state.pending_hotspot = None
        if target is None:
            return
        self.show(target)

    def _on_hide_timer(self) -> None:
        self._conceal(HIDE_REASON_TIMEOUT)

    def _cancel_timers(self) -> None:
        self.timers.cancel_all()
        state = self._state
        state.pending_hotspot = None
        if state.phase is TooltipPhase.PENDING_SHOW:
            state.phase = TooltipPhase.HIDDEN
        elif state.phase is TooltipPhase.PENDING_HIDE:
            state.phase = TooltipPhase.VISIBLE

    def _abandon_pending_show(self) -> None:
        state = self._state
        if state.phase is TooltipPhase.PENDING_SHOW and not self.timers.pending(TimerKind.SHOW):
            state.phase = TooltipPhase.HIDDEN

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place(self, rect: Rect, viewport: Viewport) -> PlacementResult:
        state = self._state
        if viewport.is_mobile(self.config.mobile_breakpoint):
            return place_sheet(state.height, viewport, bottom_offset=self.config.sheet_bottom_offset)
        return place_anchored(rect, state.width, state.height, viewport, gap=self.config.gap)

    def _apply_placement(self, result: PlacementResult) -> None:
        state = self._state
        state.placement = result.placement
        state.anchor = result.anchor
        state.x = result.x
        state.y = result.y

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def hotspot_at_point(self, x: float, y: float) -> int | None:
        for entity, hotspot in self.world.get_component(Hotspot):
            if hotspot.rect.contains(x, y):
                return entity
        return None

    def _ensure_state(self) -> TooltipState:
        entries = list(self.world.get_component(TooltipState))
        if entries:
            self._state_entity, state = entries[0]
            return state
        self._state_entity = self.world.create_entity(TooltipState())
        return self.world.component_for_entity(self._state_entity, TooltipState)

    def _singleton(self, component_type: type) -> Any:
        for _, component in self.world.get_component(component_type):
            return component
        return None

    def _set_active(self, hotspot_entity: int, active: bool) -> None:
        try:
            hotspot = self.world.component_for_entity(hotspot_entity, Hotspot)
        except KeyError:
            return
        hotspot.active = active

    @staticmethod
    def _hotspot_from(payload: dict) -> int | None:
        raw = payload.get("hotspot_entity")
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            return None
