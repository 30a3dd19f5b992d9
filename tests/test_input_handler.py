import pygame
import pytest

from gridpath.input_handler import InputHandler
from gridpath.painter import PlacingMode


class Event:
    def __init__(self, type, **attrs):
        self.type = type
        self.__dict__.update(attrs)


@pytest.fixture
def feed(monkeypatch):
    """Replace pygame event/mouse polling with scripted values."""
    state = {"events": [], "pressed": (False, False, False), "pos": (0, 0)}
    monkeypatch.setattr(pygame.event, "get", lambda: state["events"])
    monkeypatch.setattr(pygame.mouse, "get_pressed", lambda: state["pressed"])
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: state["pos"])
    return state


def test_keyboard_actions(feed):
    handler = InputHandler()
    feed["events"] = [
        Event(pygame.KEYDOWN, key=pygame.K_i),
        Event(pygame.KEYDOWN, key=pygame.K_SPACE),
        Event(pygame.KEYDOWN, key=pygame.K_3),
    ]
    handler.process_events()
    assert handler.invert_pressed()
    assert handler.toggle_walker_pressed()
    assert handler.selected_mode() is PlacingMode.GOAL
    assert not handler.should_quit()
    # One-shot actions reset on the next frame
    feed["events"] = []
    handler.process_events()
    assert not handler.invert_pressed()
    assert handler.selected_mode() is None


@pytest.mark.parametrize(
    "event",
    [Event(pygame.QUIT), Event(pygame.KEYDOWN, key=pygame.K_x), Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
)
def test_quit(feed, event):
    handler = InputHandler()
    feed["events"] = [event]
    handler.process_events()
    assert handler.should_quit()


def test_mouse_state(feed):
    handler = InputHandler()
    feed["pressed"] = (True, False, False)
    feed["pos"] = (12, 34)
    handler.process_events()
    assert handler.mouse_held()
    assert handler.get_mouse_pos() == (12, 34)
    feed["pressed"] = (False, False, False)
    feed["events"] = [Event(pygame.MOUSEBUTTONUP, button=1)]
    handler.process_events()
    assert not handler.mouse_held()
    assert handler.mouse_released()
