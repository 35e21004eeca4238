"""Rendering helper for hotspots and the project tooltip.

Component geometry uses page coordinates (origin top-left, y down); arcade
draws with the origin bottom-left, so every box is flipped against the window
height before drawing.
"""
from __future__ import annotations

from typing import Dict, Tuple

from esper import World

from portfolio_ui.components.hotspot import Hotspot
from portfolio_ui.components.rect import Rect
from portfolio_ui.components.tooltip_state import Placement, TooltipState
from portfolio_ui.config import TooltipConfig

# (left, right, bottom, top) in arcade coordinates.
Bounds = Tuple[float, float, float, float]

ARROW_SIZE = 8.0

HOTSPOT_COLOR = (60, 72, 110)
HOTSPOT_ACTIVE_COLOR = (110, 140, 220)
HOTSPOT_BORDER_COLOR = (200, 200, 220)
TOOLTIP_COLOR = (28, 30, 44)
TOOLTIP_BORDER_COLOR = (150, 160, 210)
TITLE_COLOR = (240, 240, 255)
TEXT_COLOR = (205, 208, 225)
TAG_COLOR = (120, 200, 170)
LINK_COLOR = (130, 170, 255)


def flip(rect: Rect, window_height: float) -> Bounds:
    return (rect.left, rect.right, window_height - rect.bottom, window_height - rect.top)


class TooltipRenderer:
    """Draws hotspots and, when visible, the tooltip with its arrow."""

    def __init__(self, world: World, *, config: TooltipConfig | None = None) -> None:
        self.world = world
        self.config = config or TooltipConfig()
        self._hotspot_layout: Dict[int, Bounds] = {}
        self._tooltip_bounds: Bounds | None = None
        self._arrow: Tuple[float, float, float, float, float, float] | None = None

    def hotspot_layout(self) -> Dict[int, Bounds]:
        return dict(self._hotspot_layout)

    def tooltip_bounds(self) -> Bounds | None:
        return self._tooltip_bounds

    def arrow(self) -> Tuple[float, float, float, float, float, float] | None:
        return self._arrow

    def render(self, arcade, ctx, *, headless: bool) -> None:
        window_height = ctx.window_height
        layout: Dict[int, Bounds] = {}
        hotspots = list(self.world.get_component(Hotspot))
        for entity, hotspot in hotspots:
            layout[entity] = flip(hotspot.rect, window_height)
        self._hotspot_layout = layout

        state = self._tooltip_state()
        if state is None or not state.visible or state.content is None:
            self._tooltip_bounds = None
            self._arrow = None
        else:
            self._tooltip_bounds = flip(state.box(), window_height)
            self._arrow = self._arrow_points(state.placement, self._tooltip_bounds)

        if headless:
            return

        for entity, hotspot in hotspots:
            left, right, bottom, top = layout[entity]
            fill = HOTSPOT_ACTIVE_COLOR if hotspot.active else HOTSPOT_COLOR
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, fill)
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, HOTSPOT_BORDER_COLOR, 2)
            arcade.draw_text(
                hotspot.hotspot_id,
                (left + right) / 2.0,
                (bottom + top) / 2.0,
                TITLE_COLOR,
                12,
                anchor_x="center",
                anchor_y="center",
            )

        if self._tooltip_bounds is not None and state is not None:
            self._draw_tooltip(arcade, state, self._tooltip_bounds)

    def _draw_tooltip(self, arcade, state: TooltipState, bounds: Bounds) -> None:
        content = state.content
        cfg = self.config
        left, right, bottom, top = bounds
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, TOOLTIP_COLOR)
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, TOOLTIP_BORDER_COLOR, 1)
        if self._arrow is not None:
            arcade.draw_triangle_filled(*self._arrow, TOOLTIP_BORDER_COLOR)

        x = left + cfg.padding
        y = top - cfg.padding
        arcade.draw_text(content.title, x, y, TITLE_COLOR, 14, anchor_y="top", bold=True)
        y -= cfg.title_height
        for line in content.description_lines:
            arcade.draw_text(line, x, y, TEXT_COLOR, 11, anchor_y="top")
            y -= cfg.line_height
        if content.tech:
            arcade.draw_text("  ".join(content.tech), x, y, TAG_COLOR, 10, anchor_y="top")
            y -= cfg.tag_row_height
        links = []
        if content.show_live_link:
            links.append("Live demo")
        if content.show_source_link:
            links.append("Source")
        if links:
            arcade.draw_text("  |  ".join(links), x, y, LINK_COLOR, 10, anchor_y="top")

    @staticmethod
    def _arrow_points(placement: Placement | None, bounds: Bounds):
        left, right, bottom, top = bounds
        size = ARROW_SIZE
        cx = (left + right) / 2.0
        cy = (bottom + top) / 2.0
        if placement is Placement.TOP:
            return (cx - size, bottom, cx + size, bottom, cx, bottom - size)
        if placement is Placement.BOTTOM:
            return (cx - size, top, cx + size, top, cx, top + size)
        if placement is Placement.LEFT:
            return (left, cy - size, left, cy + size, left - size, cy)
        if placement is Placement.RIGHT:
            return (right, cy - size, right, cy + size, right + size, cy)
        # The bottom sheet is not attached to a hotspot.
        return None

    def _tooltip_state(self) -> TooltipState | None:
        for _, state in self.world.get_component(TooltipState):
            return state
        return None
