from __future__ import annotations

from dataclasses import dataclass

from portfolio_ui import constants


@dataclass(slots=True, frozen=True)
class TooltipConfig:
    """Per-coordinator overrides for the tooltip timing and layout constants."""

    show_delay: float = constants.SHOW_DELAY
    hide_delay: float = constants.HIDE_DELAY
    gap: float = constants.TOOLTIP_GAP
    mobile_breakpoint: float = constants.MOBILE_BREAKPOINT
    sheet_bottom_offset: float = constants.SHEET_BOTTOM_OFFSET
    padding: float = constants.TOOLTIP_PADDING
    line_height: float = constants.TOOLTIP_LINE_HEIGHT
    title_height: float = constants.TOOLTIP_TITLE_HEIGHT
    char_width: float = constants.TOOLTIP_CHAR_WIDTH
    wrap_chars: int = constants.TOOLTIP_WRAP_CHARS
    min_width: float = constants.TOOLTIP_MIN_WIDTH
    tag_row_height: float = constants.TOOLTIP_TAG_ROW_HEIGHT
    link_row_height: float = constants.TOOLTIP_LINK_ROW_HEIGHT

    def __post_init__(self) -> None:
        if self.show_delay < 0.0 or self.hide_delay < 0.0:
            raise ValueError("tooltip delays must be non-negative")
        if self.gap < 0.0:
            raise ValueError("tooltip gap must be non-negative")
        if self.wrap_chars <= 0:
            raise ValueError("wrap_chars must be positive")
