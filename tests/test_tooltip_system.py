from __future__ import annotations

import logging

from portfolio_ui.components.hotspot import Hotspot
from portfolio_ui.components.rect import Rect
from portfolio_ui.components.tooltip_state import Placement, TooltipPhase
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.events.bus import (
    EVENT_DOCUMENT_CLICK,
    EVENT_HOTSPOT_CLICK,
    EVENT_HOTSPOT_POINTER_ENTER,
    EVENT_HOTSPOT_POINTER_LEAVE,
    EVENT_HOTSPOT_POINTER_MOVE,
    EVENT_HOTSPOT_TOUCH_START,
    EVENT_RESIZE,
    EVENT_SCROLL,
    EVENT_TOOLTIP_HIDDEN,
    EVENT_TOOLTIP_SHOWN,
)
from portfolio_ui.utils.delay_timers import TimerKind
from tests.helpers import build_page, tick


def _enter(page, name):
    page.bus.emit(EVENT_HOTSPOT_POINTER_ENTER, hotspot_entity=page.hotspots[name], x=0.0, y=0.0)


def _leave(page, name):
    page.bus.emit(EVENT_HOTSPOT_POINTER_LEAVE, hotspot_entity=page.hotspots[name], x=0.0, y=0.0)


def _click(page, name):
    page.bus.emit(EVENT_HOTSPOT_CLICK, hotspot_entity=page.hotspots[name], x=0.0, y=0.0)


def _hotspot(page, name) -> Hotspot:
    return page.world.component_for_entity(page.hotspots[name], Hotspot)


def _show_alpha(page):
    _enter(page, "alpha")
    tick(page.bus, 0.3, steps=3)
    assert page.system.state.phase is TooltipPhase.VISIBLE


def _record(bus, name):
    received = []

    def handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, handler)
    return received


def test_hover_past_show_delay_shows_project_content():
    page = build_page()
    _enter(page, "alpha")
    assert page.system.state.phase is TooltipPhase.PENDING_SHOW

    tick(page.bus, 0.3, steps=3)

    state = page.system.state
    assert state.phase is TooltipPhase.VISIBLE
    assert state.visible
    assert state.hotspot_entity == page.hotspots["alpha"]
    assert state.content.title == "Alpha Tracker"
    assert state.content.description == "Tracks alpha releases across teams."
    assert state.content.tech == ("Python", "SQLite")
    assert state.content.show_live_link
    assert not state.content.show_source_link
    assert state.placement is Placement.TOP
    assert _hotspot(page, "alpha").active


def test_leaving_before_show_delay_never_shows():
    page = build_page()
    _enter(page, "alpha")
    tick(page.bus, 0.29)
    _leave(page, "alpha")

    assert page.system.state.phase is TooltipPhase.HIDDEN
    tick(page.bus, 1.0)
    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert page.system.state.content is None
    assert not _hotspot(page, "alpha").active


def test_reentering_within_hide_delay_keeps_tooltip_visible():
    page = build_page()
    hidden = _record(page.bus, EVENT_TOOLTIP_HIDDEN)
    _show_alpha(page)

    _leave(page, "alpha")
    assert page.system.state.phase is TooltipPhase.PENDING_HIDE
    tick(page.bus, 0.1)
    _enter(page, "alpha")

    assert page.system.state.phase is TooltipPhase.VISIBLE
    assert not page.system.timers.pending(TimerKind.HIDE)
    tick(page.bus, 1.0)
    assert page.system.state.phase is TooltipPhase.VISIBLE
    assert hidden == []


def test_hide_delay_elapsing_clears_active_hotspot():
    page = build_page()
    hidden = _record(page.bus, EVENT_TOOLTIP_HIDDEN)
    _show_alpha(page)

    _leave(page, "alpha")
    tick(page.bus, 0.15)

    state = page.system.state
    assert state.phase is TooltipPhase.HIDDEN
    assert state.hotspot_entity is None
    assert not _hotspot(page, "alpha").active
    assert hidden == [{"hotspot_entity": page.hotspots["alpha"], "reason": "timeout"}]


def test_clicking_active_hotspot_toggles_tooltip_off():
    page = build_page()
    _show_alpha(page)

    _click(page, "alpha")

    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert page.system.state.last_hide_reason == "toggle"
    assert not _hotspot(page, "alpha").active


def test_clicking_other_hotspot_swaps_without_hiding():
    page = build_page()
    hidden = _record(page.bus, EVENT_TOOLTIP_HIDDEN)
    shown = _record(page.bus, EVENT_TOOLTIP_SHOWN)
    _show_alpha(page)

    _click(page, "beta")

    state = page.system.state
    assert state.phase is TooltipPhase.VISIBLE
    assert state.hotspot_entity == page.hotspots["beta"]
    assert state.content.title == "Beta Board"
    assert not _hotspot(page, "alpha").active
    assert _hotspot(page, "beta").active
    assert hidden == []
    assert [event["project_id"] for event in shown] == ["alpha", "beta"]


def test_click_during_pending_show_takes_precedence():
    page = build_page()
    _enter(page, "alpha")
    tick(page.bus, 0.1)

    _click(page, "alpha")

    assert page.system.state.phase is TooltipPhase.VISIBLE
    assert not page.system.timers.pending(TimerKind.SHOW)
    tick(page.bus, 1.0)
    assert page.system.state.phase is TooltipPhase.VISIBLE


def test_document_click_outside_hides_but_inside_tooltip_does_not():
    page = build_page()
    _show_alpha(page)
    box = page.system.state.box()

    page.bus.emit(EVENT_DOCUMENT_CLICK, x=box.center_x, y=box.center_y)
    assert page.system.state.phase is TooltipPhase.VISIBLE

    page.bus.emit(EVENT_DOCUMENT_CLICK, x=1000.0, y=620.0)
    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert page.system.state.last_hide_reason == "click_away"


def test_scroll_hides_from_any_state_and_cancels_timers():
    page = build_page()
    _show_alpha(page)
    _leave(page, "alpha")
    _enter(page, "beta")
    assert page.system.timers.pending(TimerKind.SHOW)

    page.bus.emit(EVENT_SCROLL, dx=0, dy=-3)

    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert not page.system.timers.pending(TimerKind.SHOW)
    assert not page.system.timers.pending(TimerKind.HIDE)
    tick(page.bus, 1.0)
    assert page.system.state.phase is TooltipPhase.HIDDEN


def test_touch_start_shows_immediately_as_bottom_sheet():
    page = build_page(touch_capable=True)
    page.bus.emit(EVENT_HOTSPOT_TOUCH_START, hotspot_entity=page.hotspots["alpha"], x=0.0, y=0.0)

    state = page.system.state
    assert state.phase is TooltipPhase.VISIBLE
    assert state.placement is Placement.SHEET
    assert state.x == 512.0


def test_narrow_viewport_always_uses_bottom_sheet():
    page = build_page(width=500.0, hotspots=(("alpha", Rect(0.0, 0.0, 50.0, 50.0), "alpha"),))
    _enter(page, "alpha")
    tick(page.bus, 0.3)

    assert page.system.state.placement is Placement.SHEET
    assert page.system.state.placement.tag == "bottom"


def test_missing_project_data_is_a_logged_noop(caplog):
    page = build_page(hotspots=(("ghost", Rect(400.0, 300.0, 100.0, 100.0), "missing"),))
    with caplog.at_level(logging.WARNING, logger="portfolio_ui.systems.tooltip_system"):
        _enter(page, "ghost")
        tick(page.bus, 0.3)

    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert page.system.state.content is None
    assert "Project data not found" in caplog.text


def test_missing_surface_leaves_feature_inert(caplog):
    with caplog.at_level(logging.WARNING, logger="portfolio_ui.systems.tooltip_system"):
        page = build_page(hotspots=())

    assert "no hotspots" in caplog.text
    assert not page.bus.has_subscribers(EVENT_HOTSPOT_POINTER_ENTER)
    page.disposer()


def test_pointer_move_follows_cursor_on_desktop():
    page = build_page()
    _show_alpha(page)
    state = page.system.state

    page.bus.emit(EVENT_HOTSPOT_POINTER_MOVE, hotspot_entity=page.hotspots["alpha"], x=450.0, y=350.0)

    assert state.x == 450.0
    assert state.y == 350.0 - state.height - 15.0
    assert state.placement is Placement.TOP


def test_pointer_move_ignored_on_mobile():
    page = build_page(width=600.0)
    _show_alpha(page)
    before = (page.system.state.x, page.system.state.y)

    page.bus.emit(EVENT_HOTSPOT_POINTER_MOVE, hotspot_entity=page.hotspots["alpha"], x=420.0, y=320.0)

    assert (page.system.state.x, page.system.state.y) == before


def test_resize_replaces_visible_tooltip():
    page = build_page()
    _show_alpha(page)
    assert page.system.state.placement is Placement.TOP

    page.bus.emit(EVENT_RESIZE, width=500, height=640)

    viewport = next(iter(page.world.get_component(Viewport)))[1]
    assert viewport.width == 500.0
    assert page.system.state.placement is Placement.SHEET


def test_resize_ignores_malformed_dimensions():
    page = build_page()
    _show_alpha(page)

    page.bus.emit(EVENT_RESIZE, width="wide", height=640)
    page.bus.emit(EVENT_RESIZE, width=[500], height=640)

    viewport = next(iter(page.world.get_component(Viewport)))[1]
    assert viewport.width == 1024.0
    assert viewport.height == 640.0
    assert page.system.state.placement is Placement.TOP


def test_hovering_straight_to_other_hotspot_swaps_without_hiding():
    page = build_page()
    hidden = _record(page.bus, EVENT_TOOLTIP_HIDDEN)
    shown = _record(page.bus, EVENT_TOOLTIP_SHOWN)
    _show_alpha(page)
    _leave(page, "alpha")
    _enter(page, "beta")
    assert not page.system.timers.pending(TimerKind.HIDE)

    tick(page.bus, 0.2)
    state = page.system.state
    assert state.phase is TooltipPhase.VISIBLE
    assert state.visible
    assert state.hotspot_entity == page.hotspots["alpha"]

    tick(page.bus, 0.1)
    assert state.phase is TooltipPhase.VISIBLE
    assert state.hotspot_entity == page.hotspots["beta"]
    assert not _hotspot(page, "alpha").active
    assert _hotspot(page, "beta").active
    assert hidden == []
    assert [event["project_id"] for event in shown] == ["alpha", "beta"]


def test_leaving_other_hotspot_before_its_show_hides_tooltip():
    page = build_page()
    hidden = _record(page.bus, EVENT_TOOLTIP_HIDDEN)
    _show_alpha(page)
    _leave(page, "alpha")
    _enter(page, "beta")
    _leave(page, "beta")

    assert page.system.state.phase is TooltipPhase.PENDING_HIDE
    assert not page.system.timers.pending(TimerKind.SHOW)

    tick(page.bus, 0.15)
    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert [event["reason"] for event in hidden] == ["timeout"]


def test_teardown_cancels_timers_and_unbinds_listeners():
    page = build_page()
    _enter(page, "alpha")
    page.system.teardown()

    assert not page.system.timers.pending(TimerKind.SHOW)
    tick(page.bus, 1.0)
    _enter(page, "alpha")
    tick(page.bus, 1.0)
    assert page.system.state.phase is TooltipPhase.HIDDEN
    assert not page.bus.has_subscribers(EVENT_HOTSPOT_POINTER_ENTER)
