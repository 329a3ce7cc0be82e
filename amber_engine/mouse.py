"""Mouse button state and cursor position."""

import enum


class MouseButton(enum.IntEnum):
    """Mouse buttons, numbered from zero."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    EXTRA_1 = 3
    EXTRA_2 = 4


BUTTON_COUNT = len(MouseButton)


class _State(enum.IntEnum):
    IDLE = 0
    DOWN = 1
    PRESSED = 2
    UP = 3


def _check(button):
    button = int(button)
    if not 0 <= button < BUTTON_COUNT:
        raise IndexError(f"mouse button {button} out of range")
    return button


class Mouse:
    """Button states and a cursor position with ``y`` growing upward.

    ``window_height`` is used to flip the window's downward ``y`` axis.
    """

    def __init__(self):
        self._states = [_State.IDLE] * BUTTON_COUNT
        self.x = 0
        self.y = 0
        self.window_height = 0

    @property
    def position(self):
        """The cursor position as ``(x, y)``."""
        return self.x, self.y

    def button_down(self, button):
        """True on the frame the button went down."""
        return self._states[_check(button)] is _State.DOWN

    def button_up(self, button):
        """True on the frame the button was released."""
        return self._states[_check(button)] is _State.UP

    def button_press(self, button):
        """True while the button is held, including the frame it went down."""
        return self._states[_check(button)] in (_State.DOWN, _State.PRESSED)

    def manage(self, x, y):
        """Advance to a new frame with the cursor at window position ``(x, y)``."""
        self.x = x
        self.y = self.window_height - y
        for index, state in enumerate(self._states):
            if state is _State.DOWN:
                self._states[index] = _State.PRESSED
            elif state is _State.UP:
                self._states[index] = _State.IDLE

    def reset(self):
        """Release every button and move the cursor to the origin."""
        self.x = 0
        self.y = 0
        self._states = [_State.IDLE] * BUTTON_COUNT

    def manage_down(self, button):
        """Record a button going down."""
        self._states[_check(button)] = _State.DOWN

    def manage_up(self, button):
        """Record a button being released."""
        self._states[_check(button)] = _State.UP