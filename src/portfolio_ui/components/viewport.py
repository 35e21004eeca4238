from dataclasses import dataclass

from portfolio_ui.constants import MOBILE_BREAKPOINT


@dataclass(slots=True)
class Viewport:
    """Singleton component describing the visible page area."""

    width: float
    height: float
    touch_capable: bool = False

    def is_mobile(self, breakpoint: float = MOBILE_BREAKPOINT) -> bool:
        return self.touch_capable or self.width < breakpoint
