from __future__ import annotations

from typing import Iterable

from esper import World

from portfolio_ui.components.hotspot import Hotspot
from portfolio_ui.components.rect import Rect
from portfolio_ui.constants import HOTSPOT_HEIGHT, HOTSPOT_SPACING, HOTSPOT_WIDTH


def create_hotspot(world: World, hotspot_id: str, rect: Rect, project_id: str | None = None) -> int:
    return world.create_entity(
        Hotspot(hotspot_id=hotspot_id, rect=rect, project_id=project_id or hotspot_id)
    )


def layout_hotspot_row(
    world: World,
    project_ids: Iterable[str],
    viewport_width: float,
    viewport_height: float,
    *,
    width: float = HOTSPOT_WIDTH,
    height: float = HOTSPOT_HEIGHT,
    spacing: float = HOTSPOT_SPACING,
) -> list[int]:
    """Create one hotspot per project, centred in a single horizontal row."""
    ids = list(project_ids)
    if not ids:
        return []
    total_width = len(ids) * width + (len(ids) - 1) * spacing
    left = max(spacing, (viewport_width - total_width) / 2.0)
    top = (viewport_height - height) / 2.0
    entities: list[int] = []
    for project_id in ids:
        rect = Rect(left, top, width, height)
        entities.append(create_hotspot(world, project_id, rect, project_id))
        left += width + spacing
    return entities
