"""Tooltip state shared between the tooltip system and the renderer."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from portfolio_ui.components.rect import Rect


class TooltipPhase(Enum):
    HIDDEN = "hidden"
    PENDING_SHOW = "pending_show"
    VISIBLE = "visible"
    PENDING_HIDE = "pending_hide"


class Placement(Enum):
    """Side of the anchor the tooltip sits on; drives the arrow only.

    ``LEFT`` and ``RIGHT`` name the arrow side, so a tooltip drawn to the right
    of its hotspot is tagged ``LEFT``.
    """

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    SHEET = "sheet"

    @property
    def tag(self) -> str:
        """Styling tag; the sheet reuses the bottom arrow styling."""
        if self is Placement.SHEET:
            return "bottom"
        return self.value


class Anchor(Enum):
    """Which axis the stored x/y offset is centred on."""

    CENTER_X = "center_x"
    CENTER_Y = "center_y"
    NONE = "none"


@dataclass(slots=True, frozen=True)
class TooltipContent:
    title: str
    description: str
    tech: Tuple[str, ...] = ()
    live_url: Optional[str] = None
    source_url: Optional[str] = None
    description_lines: Tuple[str, ...] = ()

    @property
    def show_live_link(self) -> bool:
        return bool(self.live_url)

    @property
    def show_source_link(self) -> bool:
        return bool(self.source_url)


@dataclass(slots=True)
class TooltipState:
    """Single tooltip state; at most one hotspot is associated at a time."""

    phase: TooltipPhase = TooltipPhase.HIDDEN
    hotspot_entity: int | None = None
    pending_hotspot: int | None = None
    placement: Placement | None = None
    anchor: Anchor = Anchor.CENTER_X
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    content: TooltipContent | None = None
    project_id: str = ""
    last_hide_reason: str = field(default="", repr=False)

    @property
    def visible(self) -> bool:
        return self.phase in (TooltipPhase.VISIBLE, TooltipPhase.PENDING_HIDE)

    def box(self) -> Rect:
        left = self.x
        top = self.y
        if self.anchor is Anchor.CENTER_X:
            left = self.x - self.width / 2.0
        elif self.anchor is Anchor.CENTER_Y:
            top = self.y - self.height / 2.0
        return Rect(left, top, self.width, self.height)
