from __future__ import annotations
import logging
from typing import List, Optional

import pygame

from .config import (
    FPS,
    GRID_SIZE_X,
    GRID_SIZE_Y,
    INSTRUCTIONS_TEXT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPAWN_WALKER_TEXT,
    STOP_WALKER_TEXT,
    WINDOW_TITLE,
    clamp_grid_size,
)
from .grid import Grid
from .input_handler import InputHandler
from .painter import GridPainter, PlacingMode
from .path_info import PathInfo, PathResult, solve
from .pathfinding import Pathfinder
from .point import Point
from .renderer import Renderer
from .walker import Walker

logger = logging.getLogger(__name__)


class App:
    """Main application class: owns the board and recomputes the path on every edit."""

    def __init__(
        self,
        width: int = GRID_SIZE_X,
        height: int = GRID_SIZE_Y,
        grid: Optional[Grid] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        # A loaded layout keeps its own size; otherwise clamp the requested one
        if grid is None:
            grid = Grid(clamp_grid_size(width), clamp_grid_size(height))
        self.grid = grid
        self.pathfinder = Pathfinder(grid.width, grid.height)
        self.painter = GridPainter(grid)
        self.painter.on_change(self.on_grid_changed)
        self.walker = Walker()
        self.renderer = Renderer(SCREEN_WIDTH, SCREEN_HEIGHT, grid.width, grid.height)
        self.input = InputHandler()
        self.cursor = Point.UNSET
        self._last_applied = Point.UNSET
        self.result = PathResult(PathInfo.NO_START_NO_GOAL)
        self.running = True
        # A layout may arrive with start and goal already placed
        self.on_grid_changed(grid)

    @property
    def have_valid_path(self) -> bool:
        return self.result.found

    def on_grid_changed(self, grid: Grid) -> None:
        """Any edit invalidates the walker's route and triggers a fresh search."""
        self.walker.stop()
        self.result = solve(self.pathfinder, grid)
        logger.debug("%s: %s", self.result.info.name, self.result.message())
        if self.result.found:
            self.walker.set_path(self.result.positions())

    def toggle_walker(self) -> None:
        """Spawn the walker on the current path, or stop it if it is out."""
        if self.walker.active:
            self.walker.stop()
        elif self.have_valid_path:
            self.walker.spawn()
        else:
            logger.info("No valid path, walker not spawned")

    def handle_events(self) -> None:
        """Process input via InputHandler and dispatch editor actions."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        mode = self.input.selected_mode()
        if mode is not None:
            self.painter.set_mode(mode)
        if self.input.invert_pressed():
            self.painter.invert()
        if self.input.toggle_walker_pressed():
            self.toggle_walker()
        self.cursor = self.renderer.screen_to_cell(self.input.get_mouse_pos())
        # Apply once per cell while the button is held so a stroke paints a line
        if self.input.mouse_held() and not self.cursor.is_unset():
            if self.cursor != self._last_applied:
                self._last_applied = self.cursor
                self.painter.apply(self.cursor)
        if self.input.mouse_released():
            self._last_applied = Point.UNSET
            self.painter.end_stroke()

    def update(self, dt: float) -> None:
        self.walker.update(dt)

    def info_lines(self) -> List[str]:
        """Text shown in the side panel."""
        lines = INSTRUCTIONS_TEXT.split("\n")
        lines.append("")
        lines.append(f"Mode: {PlacingMode(self.painter.mode).name.lower()}")
        lines.append(self.result.message())
        if self.have_valid_path:
            lines.append(STOP_WALKER_TEXT if self.walker.active else SPAWN_WALKER_TEXT)
        return lines

    def render(self) -> None:
        self.renderer.render(
            self.screen,
            self.grid,
            self.result.positions(),
            self.cursor,
            self.walker,
            self.info_lines(),
        )

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render()
        pygame.quit()
