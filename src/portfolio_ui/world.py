from __future__ import annotations

from esper import World

from portfolio_ui.components.project_info import ProjectRegistry
from portfolio_ui.components.tooltip_state import TooltipState
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from portfolio_ui.factories.hotspots import layout_hotspot_row
from portfolio_ui.factories.projects import create_default_project_registry


def create_world(
    *,
    registry: ProjectRegistry | None = None,
    viewport: Viewport | None = None,
    layout_hotspots: bool = True,
) -> World:
    world = World()
    registry = registry if registry is not None else create_default_project_registry()
    viewport = viewport or Viewport(WINDOW_WIDTH, WINDOW_HEIGHT)

    # Page-level resources live on a single entity.
    world.create_entity(registry, viewport, TooltipState())

    if layout_hotspots:
        layout_hotspot_row(world, registry.projects.keys(), viewport.width, viewport.height)
    return world
