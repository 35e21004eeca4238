from __future__ import annotations

from types import SimpleNamespace
from typing import Mapping, Sequence

from esper import World

from portfolio_ui.components.project_info import ProjectInfo, ProjectRegistry
from portfolio_ui.components.rect import Rect
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.events.bus import EVENT_TICK, EventBus
from portfolio_ui.factories.hotspots import create_hotspot
from portfolio_ui.systems.tooltip_system import TooltipSystem
from portfolio_ui.world import create_world

DEFAULT_HOTSPOTS: Sequence[tuple[str, Rect, str]] = (
    ("alpha", Rect(400.0, 300.0, 160.0, 110.0), "alpha"),
    ("beta", Rect(100.0, 300.0, 160.0, 110.0), "beta"),
)

DEFAULT_PROJECTS: Mapping[str, ProjectInfo] = {
    "alpha": ProjectInfo(
        title="Alpha Tracker",
        description="Tracks alpha releases across teams.",
        tech=("Python", "SQLite"),
        live_url="https://alpha.example.com",
        source_url=None,
    ),
    "beta": ProjectInfo(
        title="Beta Board",
        description="Kanban board for beta testers.",
        tech=("Vue.js",),
    ),
}


def build_page(
    *,
    width: float = 1024.0,
    height: float = 640.0,
    touch_capable: bool = False,
    hotspots: Sequence[tuple[str, Rect, str]] = DEFAULT_HOTSPOTS,
    projects: Mapping[str, ProjectInfo] = DEFAULT_PROJECTS,
    initialize: bool = True,
):
    """Create a world, bus and tooltip system with the given hotspots.

    Returns a namespace with ``world``, ``bus``, ``system``, ``hotspots``
    (hotspot id -> entity) and ``disposer``.
    """
    world: World = create_world(
        registry=ProjectRegistry(projects=dict(projects)),
        viewport=Viewport(width, height, touch_capable=touch_capable),
        layout_hotspots=False,
    )
    entities = {}
    for hotspot_id, rect, project_id in hotspots:
        entities[hotspot_id] = create_hotspot(world, hotspot_id, rect, project_id)
    bus = EventBus()
    system = TooltipSystem(world, bus)
    disposer = system.initialize() if initialize else None
    return SimpleNamespace(world=world, bus=bus, system=system, hotspots=entities, disposer=disposer)


def tick(bus: EventBus, seconds: float, *, steps: int = 1) -> None:
    """Advance the bus clock by ``seconds`` split into ``steps`` equal ticks."""
    dt = seconds / steps
    for _ in range(steps):
        bus.emit(EVENT_TICK, dt=dt)
