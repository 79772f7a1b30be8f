"""Main application loop for the simview viewer."""
from __future__ import annotations

import argparse
import logging
import os

import pygame

from simview.app.display import Display
from simview.app.input_handler import InputHandler
from simview.app.ui.status_bar import StatusBar
from simview.app.ui.theme import Theme
from simview.config import ViewerConfig, load_config
from simview.errors import ConfigError
from simview.geometry.bounds import ViewBounds
from simview.logging_config import setup_logging
from simview.project.scenario import Scenario, load_scenario
from simview.util.file_dialog import open_file_dialog

logger = logging.getLogger(__name__)

APP_TITLE = "simview"


class App:
    """Window, event loop and the display being shown."""

    def __init__(self, config: ViewerConfig, scenario_path: str | None = None):
        self.config = config
        self.scenario_path = scenario_path
        self.scenario: Scenario | None = None
        self.running = False

        self.input_handler = InputHandler()
        self.display: Display = config.display_factory(self._canvas_size(config.width, config.height),
                                                       config)
        self.status_bar = StatusBar(config.width, config.height)

        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.font: pygame.font.Font | None = None

    @staticmethod
    def _canvas_size(width: int, height: int) -> ViewBounds:
        return ViewBounds(width, max(0, height - Theme.STATUS_BAR_HEIGHT))

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def init(self) -> None:
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((self.config.width, self.config.height),
                                              pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("dejavusans,arial,helvetica", Theme.FONT_SIZE_SMALL)
        self.input_handler.set_callbacks({
            "quit": self._on_quit,
            "open": self._on_open,
        })
        if self.scenario_path:
            self._load_scenario(self.scenario_path)

    def _load_scenario(self, path: str) -> None:
        try:
            scenario = load_scenario(path)
        except (OSError, ConfigError) as e:
            logger.error("Could not load %s: %s", path, e)
            self.display.set_notification(f"Load failed: {e}", 5.0)
            return
        self.scenario = scenario
        # A new environment gets a new viewport
        self.display.bind_environment(scenario.bounds, scenario.obstacles)
        self.display.snapshot.update(scenario.positions, scenario.neighbors, step=0)
        self.display.set_notification(f"Loaded: {os.path.basename(path)}")
        if scenario.geographic and self.config.display != "map":
            logger.warning("%s is geographic but the %s display is configured",
                           path, self.config.display)
            self.display.set_notification(
                f"Geographic scenario shown on the {self.config.display} display", 5.0)

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def _on_quit(self) -> None:
        self.running = False

    def _on_open(self) -> None:
        initial = os.path.dirname(self.scenario_path) if self.scenario_path else None
        path = open_file_dialog(initial_dir=initial)
        if path:
            self.scenario_path = path
            self._load_scenario(path)

    def _on_resize(self, width: int, height: int) -> None:
        self.display.on_resize(self._canvas_size(width, height))
        self.status_bar.resize(width, height)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        self.running = True
        while self.running:
            dt = self.clock.tick(self.config.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._on_resize(event.w, event.h)
                else:
                    self.input_handler.handle_event(event, self.display)
            self.display.update_timers(dt)
            self._draw()
        pygame.quit()

    def _draw(self) -> None:
        size = self.display.view_size
        canvas_rect = pygame.Rect(0, 0, int(size.width), int(size.height))
        canvas = self.screen.subsurface(canvas_rect.clip(self.screen.get_rect()))
        visible = self.display.paint(canvas)
        self.status_bar.draw(self.screen, self.font, self.display, visible)
        pygame.display.flip()


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = argparse.ArgumentParser(prog="simview", description="Spatial simulation viewer")
    parser.add_argument("scenario", nargs="?", help="scenario JSON file")
    parser.add_argument("--config", help="viewer configuration JSON file")
    parser.add_argument("--log-file", help="also write logs to this file")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(getattr(logging, config.log_level), args.log_file)
    app = App(config, scenario_path=args.scenario)
    app.init()
    app.run()


if __name__ == "__main__":
    main()
