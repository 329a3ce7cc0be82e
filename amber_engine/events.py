"""Per-frame dispatch of input events to the keyboard and mouse."""

import enum
import logging
from dataclasses import dataclass

from .keyboard import Keyboard
from .mouse import Mouse

_log = logging.getLogger(__name__)


class EventKind(enum.Enum):
    QUIT = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    MOUSE_BUTTON_DOWN = enum.auto()
    MOUSE_BUTTON_UP = enum.auto()


@dataclass(frozen=True)
class InputEvent:
    """One input event; ``code`` is a key code or a zero-based mouse button."""

    kind: EventKind
    code: int = 0


class EventManager:
    """Owns the keyboard and mouse and feeds them each frame's events."""

    def __init__(self, window_height):
        self._quit = False
        self.keyboard = Keyboard()
        self.mouse = Mouse()
        self.mouse.window_height = window_height
        _log.info("Event created")

    def manage(self, events, mouse_x, mouse_y):
        """Start a new frame, then apply ``events`` in order."""
        self.keyboard.manage()
        self.mouse.manage(mouse_x, mouse_y)
        for event in events:
            if event.kind is EventKind.QUIT:
                self._quit = True
            elif event.kind is EventKind.KEY_DOWN:
                self.keyboard.manage_down(event.code)
            elif event.kind is EventKind.KEY_UP:
                self.keyboard.manage_up(event.code)
            elif event.kind is EventKind.MOUSE_BUTTON_DOWN:
                self.mouse.manage_down(event.code)
            elif event.kind is EventKind.MOUSE_BUTTON_UP:
                self.mouse.manage_up(event.code)

    def reset(self):
        """Release all keys and clear the quit request."""
        self.keyboard.reset()
        self._quit = False

    def is_quitting(self):
        return self._quit

    def quit(self):
        """Request that the application stop."""
        self._quit = True