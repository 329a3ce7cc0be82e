"""Keyboard state tracked across frames, with a small typed-text buffer."""

import enum

from .keycode import NUM_CODES, KeyCode


class _State(enum.IntEnum):
    IDLE = 0
    DOWN = 1
    PRESSED = 2
    UP = 3


def _check(code):
    code = int(code)
    if not 0 <= code < NUM_CODES:
        raise IndexError(f"key code {code} out of range")
    return code


class Keyboard:
    """Per-key state: down on the first frame, pressed while held, up on release.

    ``buffer`` collects the characters typed during the current frame:
    letters (upper case while a shift key is held), digits, and ``~`` for
    backspace.
    """

    def __init__(self):
        self._states = [_State.IDLE] * NUM_CODES
        self.buffer = []

    def key_down(self, code):
        """True on the frame the key went down."""
        return self._states[_check(code)] is _State.DOWN

    def key_up(self, code):
        """True on the frame the key was released."""
        return self._states[_check(code)] is _State.UP

    def key_press(self, code):
        """True while the key is held, including the frame it went down."""
        return self._states[_check(code)] in (_State.DOWN, _State.PRESSED)

    def manage(self):
        """Advance to a new frame: clear the buffer and age key states."""
        self.buffer.clear()
        for index, state in enumerate(self._states):
            if state is _State.DOWN:
                self._states[index] = _State.PRESSED
            elif state is _State.UP:
                self._states[index] = _State.IDLE

    def reset(self):
        """Release every key."""
        self._states = [_State.IDLE] * NUM_CODES

    def manage_down(self, code):
        """Record a key going down."""
        code = _check(code)
        if KeyCode.A <= code <= KeyCode.Z:
            shifted = self.key_press(KeyCode.LSHIFT) or self.key_press(KeyCode.RSHIFT)
            base = "A" if shifted else "a"
            self.buffer.append(chr(ord(base) + code - KeyCode.A))
        elif KeyCode.DIGIT_1 <= code <= KeyCode.DIGIT_0:
            if code == KeyCode.DIGIT_0:
                self.buffer.append("0")
            else:
                self.buffer.append(chr(ord("1") + code - KeyCode.DIGIT_1))
        elif code == KeyCode.BACKSPACE:
            self.buffer.append("~")
        self._states[code] = _State.DOWN

    def manage_up(self, code):
        """Record a key being released."""
        self._states[_check(code)] = _State.UP