"""
2D renderer: draws the board, endpoints, path, cursor, walker and side panel.
"""

from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np
import pygame

from .config import (
    BACKGROUND_COLOR,
    CELL_MARGIN,
    CURSOR_COLOR,
    EMPTY_COLOR,
    FONT_SIZE,
    GOAL_COLOR,
    OBSTACLE_COLOR,
    PANEL_COLOR,
    PANEL_WIDTH,
    PATH_COLOR,
    START_COLOR,
    TEXT_COLOR,
    WALKER_COLOR,
)
from .point import Point

if TYPE_CHECKING:
    from .grid import Grid
    from .walker import Walker

logger = logging.getLogger(__name__)


class Renderer:
    """Maps grid cells to screen pixels and draws a frame."""

    def __init__(self, width: int, height: int, grid_width: int, grid_height: int) -> None:
        self.w = width
        self.h = height
        board_w = max(1, width - PANEL_WIDTH)
        # Square cells, as large as fit on both axes
        self.cell_size = max(2, min(board_w // grid_width, height // grid_height))
        self.grid_width = grid_width
        self.grid_height = grid_height
        # Center the board inside its area
        self.origin_x = (board_w - self.cell_size * grid_width) // 2
        self.origin_y = (height - self.cell_size * grid_height) // 2
        self.panel_rect = pygame.Rect(width - PANEL_WIDTH, 0, PANEL_WIDTH, height)
        self._font: Optional[pygame.font.Font] = None
        logger.debug(
            "Renderer %dx%d, board %dx%d cells of %dpx",
            width,
            height,
            grid_width,
            grid_height,
            self.cell_size,
        )

    def screen_to_cell(self, pos: Tuple[int, int]) -> Point:
        """Return the cell under a screen position, or Point.UNSET if off the board."""
        px = pos[0] - self.origin_x
        py = pos[1] - self.origin_y
        if px < 0 or py < 0:
            return Point.UNSET
        x, y = px // self.cell_size, py // self.cell_size
        if x >= self.grid_width or y >= self.grid_height:
            return Point.UNSET
        # Screen y grows downward, grid y grows upward
        return Point(int(x), int(self.grid_height - 1 - y))

    def cell_rect(self, point: Point) -> pygame.Rect:
        sy = self.grid_height - 1 - point.y
        return pygame.Rect(
            self.origin_x + point.x * self.cell_size + CELL_MARGIN,
            self.origin_y + sy * self.cell_size + CELL_MARGIN,
            self.cell_size - 2 * CELL_MARGIN,
            self.cell_size - 2 * CELL_MARGIN,
        )

    def cell_center(self, x: float, y: float) -> Tuple[int, int]:
        """Pixel center of a (possibly fractional) cell position."""
        sx = self.origin_x + (x + 0.5) * self.cell_size
        sy = self.origin_y + (self.grid_height - 1 - y + 0.5) * self.cell_size
        return int(sx), int(sy)

    def walker_marker(
        self, walker: Walker
    ) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Pixel center of the walker and the tip of its facing line."""
        cx, cy = self.cell_center(walker.x, walker.y)
        reach = max(2, self.cell_size // 2)
        # Screen y points down, so the vertical component flips
        tip = (
            int(round(cx + math.cos(walker.angle) * reach)),
            int(round(cy - math.sin(walker.angle) * reach)),
        )
        return (cx, cy), tip

    def render(
        self,
        screen: pygame.Surface,
        grid: Grid,
        path: List[Point],
        cursor: Point,
        walker: Walker,
        lines: List[str],
    ) -> None:
        """Draw one frame and flip the display."""
        screen.fill(BACKGROUND_COLOR)
        self._draw_cells(screen, grid)
        for point, color in ((grid.start, START_COLOR), (grid.goal, GOAL_COLOR)):
            if not point.is_unset():
                pygame.draw.rect(screen, color, self.cell_rect(point))
        if len(path) > 1:
            pygame.draw.lines(
                screen,
                PATH_COLOR,
                False,
                [self.cell_center(p.x, p.y) for p in path],
                max(2, self.cell_size // 6),
            )
        if not cursor.is_unset():
            pygame.draw.rect(screen, CURSOR_COLOR, self.cell_rect(cursor), 2)
        if walker.active:
            center, tip = self.walker_marker(walker)
            pygame.draw.circle(
                screen, WALKER_COLOR, center, max(2, self.cell_size // 3)
            )
            # Facing line toward the next waypoint
            pygame.draw.line(screen, TEXT_COLOR, center, tip, 2)
        self._draw_panel(screen, lines)
        pygame.display.flip()

    def _draw_cells(self, screen: pygame.Surface, grid: Grid) -> None:
        mask = grid.to_mask()
        for y in range(grid.height):
            for x in range(grid.width):
                pygame.draw.rect(screen, EMPTY_COLOR, self.cell_rect(Point(x, y)))
        for y, x in np.argwhere(~mask):
            pygame.draw.rect(
                screen, OBSTACLE_COLOR, self.cell_rect(Point(int(x), int(y)))
            )

    def _draw_panel(self, screen: pygame.Surface, lines: List[str]) -> None:
        pygame.draw.rect(screen, PANEL_COLOR, self.panel_rect)
        if self._font is None:
            self._font = pygame.font.SysFont(None, FONT_SIZE)
        y = 10
        for line in lines:
            text = self._font.render(line, True, TEXT_COLOR)
            screen.blit(text, (self.panel_rect.x + 10, y))
            y += text.get_height() + 4
