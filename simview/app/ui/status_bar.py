"""Status bar at the bottom of the window."""
from __future__ import annotations

import pygame

from simview.app.display import Display
from simview.app.ui.theme import Theme


def status_text(display: Display, visible_nodes: int) -> str:
    viewport = display.viewport
    if viewport is None:
        return "No environment"
    return (f"Mode: {viewport.mode.value}  Zoom: {viewport.zoom:.3g}  "
            f"Rotation: {display.angle_manager.degrees:.0f}°  "
            f"Nodes: {visible_nodes}/{len(display.snapshot)}  Step: {display.snapshot.step}")


class StatusBar:
    """Shows the view state and any condition the viewport reported."""

    def __init__(self, screen_w: int, screen_h: int):
        self.rect = pygame.Rect(0, screen_h - Theme.STATUS_BAR_HEIGHT,
                                screen_w, Theme.STATUS_BAR_HEIGHT)

    def resize(self, screen_w: int, screen_h: int) -> None:
        self.rect = pygame.Rect(0, screen_h - Theme.STATUS_BAR_HEIGHT,
                                screen_w, Theme.STATUS_BAR_HEIGHT)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font,
             display: Display, visible_nodes: int) -> None:
        pygame.draw.rect(surface, Theme.BG_HEADER, self.rect)
        pygame.draw.line(surface, Theme.BORDER, (self.rect.x, self.rect.y),
                         (self.rect.right, self.rect.y))

        lbl = font.render(status_text(display, visible_nodes), True, Theme.TEXT_DIM)
        surface.blit(lbl, (self.rect.x + 8, self.rect.y + 5))

        if getattr(display.viewport, "is_degenerate", False):
            warn = font.render("Degenerate transform", True, Theme.TEXT_ERROR)
            surface.blit(warn, (self.rect.x + 600, self.rect.y + 5))

        if display.notification:
            notif = font.render(display.notification, True, Theme.TEXT_WARNING)
            surface.blit(notif, (self.rect.right - notif.get_width() - 12, self.rect.y + 5))
