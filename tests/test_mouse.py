import pytest

from amber_engine.mouse import BUTTON_COUNT, Mouse, MouseButton


@pytest.fixture
def mouse():
    m = Mouse()
    m.window_height = 600
    return m


def test_fresh_mouse(mouse):
    assert mouse.position == (0, 0)
    assert not mouse.button_press(MouseButton.LEFT)


def test_button_cycle(mouse):
    mouse.manage_down(MouseButton.RIGHT)
    assert mouse.button_down(MouseButton.RIGHT)
    assert mouse.button_press(MouseButton.RIGHT)
    mouse.manage(0, 0)
    assert not mouse.button_down(MouseButton.RIGHT)
    assert mouse.button_press(MouseButton.RIGHT)
    mouse.manage_up(MouseButton.RIGHT)
    assert mouse.button_up(MouseButton.RIGHT)
    assert not mouse.button_press(MouseButton.RIGHT)
    mouse.manage(0, 0)
    assert not mouse.button_up(MouseButton.RIGHT)


def test_buttons_are_independent(mouse):
    mouse.manage_down(MouseButton.LEFT)
    assert not mouse.button_press(MouseButton.MIDDLE)


def test_y_axis_is_flipped(mouse):
    mouse.manage(25, 600)
    assert mouse.position == (25, 0)
    mouse.manage(25, 0)
    assert mouse.y == 600


def test_reset(mouse):
    mouse.manage(10, 20)
    mouse.manage_down(MouseButton.EXTRA_2)
    mouse.reset()
    assert mouse.position == (0, 0)
    assert not mouse.button_press(MouseButton.EXTRA_2)


def test_every_button_is_tracked(mouse):
    buttons = list(MouseButton)
    assert len(buttons) == BUTTON_COUNT
    for button in buttons:
        mouse.manage_down(button)
    assert [mouse.button_down(button) for button in buttons] == [True] * BUTTON_COUNT


@pytest.mark.parametrize("button", [BUTTON_COUNT, -1])
def test_invalid_button(mouse, button):
    with pytest.raises(IndexError):
        mouse.manage_down(button)