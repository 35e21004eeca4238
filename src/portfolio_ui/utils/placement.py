"""Pure tooltip placement math.

All coordinates use the page convention: origin at the top-left corner of the
viewport, y growing downward.
"""
from __future__ import annotations

from dataclasses import dataclass

from portfolio_ui.components.rect import Rect
from portfolio_ui.components.tooltip_state import Anchor, Placement
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.constants import SHEET_BOTTOM_OFFSET, TOOLTIP_GAP


@dataclass(slots=True, frozen=True)
class PlacementResult:
    placement: Placement
    x: float
    y: float
    anchor: Anchor

    def box(self, width: float, height: float) -> Rect:
        left = self.x
        top = self.y
        if self.anchor is Anchor.CENTER_X:
            left -= width / 2.0
        elif self.anchor is Anchor.CENTER_Y:
            top -= height / 2.0
        return Rect(left, top, width, height)


def place_anchored(
    hotspot: Rect,
    width: float,
    height: float,
    viewport: Viewport,
    *,
    gap: float = TOOLTIP_GAP,
) -> PlacementResult:
    """Place the tooltip around a hotspot: above, else below, else beside it."""
    x = hotspot.center_x
    y = hotspot.top - height - gap
    placement = Placement.TOP
    anchor = Anchor.CENTER_X

    if y < gap:
        y = hotspot.bottom + gap
        placement = Placement.BOTTOM

    if x + width / 2.0 > viewport.width - gap:
        x = hotspot.right + gap
        y = hotspot.center_y
        placement = Placement.LEFT
        anchor = Anchor.CENTER_Y

    if x - width / 2.0 < gap:
        # Sit left of the hotspot, but never past the viewport edge.
        x = max(gap, hotspot.left - gap - width)
        y = hotspot.center_y
        placement = Placement.RIGHT
        anchor = Anchor.CENTER_Y

    return PlacementResult(placement, x, y, anchor)


def place_sheet(
    height: float,
    viewport: Viewport,
    *,
    bottom_offset: float = SHEET_BOTTOM_OFFSET,
) -> PlacementResult:
    """Pin the tooltip centred near the bottom edge; hotspot geometry is ignored."""
    x = viewport.width / 2.0
    y = viewport.height - bottom_offset - height
    return PlacementResult(Placement.SHEET, x, y, Anchor.CENTER_X)


def place_following(
    pointer_x: float,
    pointer_y: float,
    width: float,
    height: float,
    viewport: Viewport,
    *,
    gap: float = TOOLTIP_GAP,
) -> PlacementResult:
    """Track the cursor: above it by ``gap``, clamped inside the viewport."""
    x = pointer_x
    y = pointer_y - height - gap
    placement = Placement.TOP
    if x + width > viewport.width - gap:
        x = viewport.width - width - gap
    if x < gap:
        x = gap
    if y < gap:
        y = pointer_y + gap
        placement = Placement.BOTTOM
    return PlacementResult(placement, x, y, Anchor.NONE)
