"""Entry point for the interactive portfolio demo.

Sets up the ECS world, event bus, tooltip systems, and Arcade window.
"""
import argparse
import logging
from types import SimpleNamespace

import arcade
from arcade import Window, run, set_background_color, color
from portfolio_ui.components.viewport import Viewport
from portfolio_ui.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from portfolio_ui.events.bus import (
    EventBus,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_RESIZE,
    EVENT_SCROLL,
    EVENT_TICK,
)
from portfolio_ui.factories.projects import load_project_registry
from portfolio_ui.rendering.tooltip_renderer import TooltipRenderer
from portfolio_ui.systems.hotspot_input_system import HotspotInputSystem
from portfolio_ui.systems.tooltip_system import TooltipSystem
from portfolio_ui.world import create_world

logger = logging.getLogger("portfolio_ui")


class PortfolioWindow(Window):
    def __init__(self, *, registry=None, touch_capable: bool = False):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Portfolio", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(
            registry=registry,
            viewport=Viewport(self.width, self.height, touch_capable=touch_capable),
        )
        self.hotspot_input_system = HotspotInputSystem(
            self.world, self.event_bus, presses_as_touch=touch_capable
        )
        self.tooltip_system = TooltipSystem(self.world, self.event_bus)
        self.tooltip_system.initialize()
        self.tooltip_renderer = TooltipRenderer(self.world, config=self.tooltip_system.config)
        set_background_color(color.BLACK)

    # Arcade reports y from the bottom edge; the page model measures from the top.
    def _page_y(self, y: float) -> float:
        return self.height - y

    def on_draw(self):
        self.clear()
        ctx = SimpleNamespace(window_width=self.width, window_height=self.height)
        self.tooltip_renderer.render(arcade, ctx, headless=False)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=self._page_y(y))

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=self._page_y(y), button=button)

    def on_mouse_scroll(self, x: int, y: int, scroll_x: int, scroll_y: int):
        self.event_bus.emit(EVENT_SCROLL, dx=scroll_x, dy=scroll_y)

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_RESIZE, width=width, height=height)
        return super().on_resize(width, height)

    def on_close(self):
        self.tooltip_system.teardown()
        super().on_close()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive portfolio hotspot demo")
    parser.add_argument("--projects", help="JSON catalogue of projects keyed by id")
    parser.add_argument("--touch", action="store_true", help="Treat the device as touch capable: mouse presses act as touch-starts and the tooltip uses the bottom sheet")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    registry = load_project_registry(args.projects) if args.projects else None
    window = PortfolioWindow(registry=registry, touch_capable=args.touch)
    logger.info("Portfolio window ready (%dx%d)", window.width, window.height)
    run()

if __name__ == "__main__":
    main()
