"""UI theme constants and color palette."""
from __future__ import annotations


class Theme:
    """Central color and dimension constants for the viewer."""

    # Background colors
    BG_CANVAS = (25, 25, 35)
    BG_HEADER = (50, 52, 66)

    # Text colors
    TEXT_DIM = (140, 140, 160)
    TEXT_WARNING = (255, 200, 80)
    TEXT_ERROR = (255, 100, 100)

    # Border colors
    BORDER = (65, 68, 85)
    ENV_BORDER = (200, 200, 200)
    GRID = (255, 255, 255)

    # Environment content
    NODE = (100, 140, 255)
    LINK = (90, 100, 130)
    OBSTACLE = (180, 140, 60)

    # Dimensions
    STATUS_BAR_HEIGHT = 28
    NODE_RADIUS = 4
    FONT_SIZE_SMALL = 12
