"""Input routing: pointer gestures and keyboard shortcuts to the display."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import pygame

from simview.errors import ViewportError
from simview.geometry.point import Point

if TYPE_CHECKING:
    from simview.app.display import Display

logger = logging.getLogger(__name__)

PAN_BUTTONS = (1, 2)
ROTATE_BUTTON = 3


class InputHandler:
    """Routes raw pygame events to pan, anchored zoom and anchored rotate."""

    def __init__(self):
        self._panning = False
        self._rotating = False
        self._rotate_pivot: Point | None = None
        self._callbacks: dict[str, Callable] = {}

    def set_callbacks(self, callbacks: dict[str, Callable]) -> None:
        """Expected keys: quit, open."""
        self._callbacks = callbacks

    def handle_event(self, event: pygame.event.Event, display: Display) -> None:
        """Process a single pygame event; viewer errors end up in the status bar."""
        if display.viewport is None:
            return
        try:
            self._dispatch(event, display)
        except ViewportError as e:
            logger.warning("%s", e)
            display.set_notification(str(e), 5.0)

    def _dispatch(self, event: pygame.event.Event, display: Display) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event, display)
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            display.pointer.set_current_position(Point.from_pixel(*event.pos))
            # Discard the jump from wherever the previous sample was
            display.pointer.set_current_position(Point.from_pixel(*event.pos))
            if event.button in PAN_BUTTONS:
                self._panning = True
            elif event.button == ROTATE_BUTTON:
                self._rotating = True
                self._rotate_pivot = display.pointer.current_position
            return

        if event.type == pygame.MOUSEBUTTONUP:
            if event.button in PAN_BUTTONS:
                self._panning = False
            elif event.button == ROTATE_BUTTON:
                self._rotating = False
            return

        if event.type == pygame.MOUSEMOTION:
            display.pointer.set_current_position(Point.from_pixel(*event.pos))
            delta = display.pointer.variation()
            if self._panning:
                display.pan(delta)
            elif self._rotating:
                display.drag_rotate(delta.x, self._rotate_pivot)
            return

        # Wheel events carry no position: use the last sample
        if event.type == pygame.MOUSEWHEEL:
            if event.y:
                display.wheel(display.pointer.current_position, event.y)
            return

    def _handle_key(self, event: pygame.event.Event, display: Display) -> None:
        if event.key == pygame.K_ESCAPE:
            cb = self._callbacks.get("quit")
            if cb:
                cb()
            return

        if event.mod & pygame.KMOD_CTRL and event.key == pygame.K_o:
            cb = self._callbacks.get("open")
            if cb:
                cb()
            return

        # Home: fit the environment
        if event.key == pygame.K_h:
            display.angle_manager.reset()
            display.viewport.set_rotation(0.0)
            display.reset_view()
            display.set_notification("View reset")
            return

        if event.key == pygame.K_m:
            display.toggle_mode()
            return

        if event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            display.wheel(display.viewport.view_size.center, 1)
            return

        if event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            display.wheel(display.viewport.view_size.center, -1)
            return
