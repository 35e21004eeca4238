from dataclasses import dataclass

from portfolio_ui.components.rect import Rect


@dataclass(slots=True)
class Hotspot:
    """Hoverable page region bound to one project's tooltip content."""

    hotspot_id: str
    rect: Rect
    project_id: str
    # Highlight flag; only the tooltip system flips it.
    active: bool = False
