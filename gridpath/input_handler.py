"""
Input handling abstraction to decouple Pygame input from the grid editor.
"""

from __future__ import annotations
import pygame
from typing import Optional, Tuple

from .painter import PlacingMode

_MODE_KEYS = {
    pygame.K_1: PlacingMode.OBSTACLE,
    pygame.K_2: PlacingMode.START,
    pygame.K_3: PlacingMode.GOAL,
}


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    provides per-frame action queries plus the mouse position and button state.
    """

    def __init__(self) -> None:
        self._quit = False
        self._invert = False
        self._toggle_walker = False
        self._mode: Optional[PlacingMode] = None
        self._mouse_up = False
        self._mouse_held = False
        self._mouse_pos: Tuple[int, int] = (0, 0)

    def process_events(self) -> None:
        """
        Poll Pygame events, update one-shot actions for this frame, and
        capture the mouse position and left button state.
        """
        self._quit = False
        self._invert = False
        self._toggle_walker = False
        self._mode = None
        self._mouse_up = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key == pygame.K_i:
                    self._invert = True
                elif event.key == pygame.K_SPACE:
                    self._toggle_walker = True
                elif event.key in _MODE_KEYS:
                    self._mode = _MODE_KEYS[event.key]
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._mouse_up = True
        self._mouse_held = bool(pygame.mouse.get_pressed()[0])
        self._mouse_pos = pygame.mouse.get_pos()

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def invert_pressed(self) -> bool:
        """Return True if I was pressed this frame to invert the grid."""
        return self._invert

    def toggle_walker_pressed(self) -> bool:
        """Return True if Space was pressed this frame to spawn or stop the walker."""
        return self._toggle_walker

    def selected_mode(self) -> Optional[PlacingMode]:
        """Return the placing mode picked this frame, or None."""
        return self._mode

    def mouse_held(self) -> bool:
        return self._mouse_held

    def mouse_released(self) -> bool:
        """Return True if the left button went up this frame."""
        return self._mouse_up

    def get_mouse_pos(self) -> Tuple[int, int]:
        return self._mouse_pos
