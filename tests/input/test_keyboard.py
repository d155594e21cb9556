from bruteroom.input.keyboard import Keyboard
from bruteroom.input_events import KeyDown, KeySym, KeyUp, Keys


def test_press_sets_held_and_edge() -> None:
    keyboard = Keyboard()
    keyboard.press(KeySym.UP)

    assert keyboard.pressed(KeySym.UP)
    assert keyboard.just_pressed(KeySym.UP)
    assert not keyboard.just_released(KeySym.UP)


def test_begin_frame_clears_edges_but_keeps_held_keys() -> None:
    keyboard = Keyboard()
    keyboard.press(KeySym.UP)
    keyboard.release(KeySym.SPACE)

    keyboard.begin_frame()

    assert keyboard.pressed(KeySym.UP)
    assert not keyboard.just_pressed(KeySym.UP)
    assert not keyboard.just_released(KeySym.SPACE)


def test_release_clears_held_and_sets_edge() -> None:
    keyboard = Keyboard()
    keyboard.press(Keys.KEY_W)
    keyboard.begin_frame()

    keyboard.release(Keys.KEY_W)

    assert not keyboard.pressed(Keys.KEY_W)
    assert keyboard.just_released(Keys.KEY_W)


def test_auto_repeat_is_not_a_new_press() -> None:
    keyboard = Keyboard()
    keyboard.press(KeySym.LEFT)
    keyboard.begin_frame()

    keyboard.dispatch(KeyDown(sym=KeySym.LEFT, repeat=True))
    keyboard.press(KeySym.LEFT)

    assert not keyboard.just_pressed(KeySym.LEFT)
    assert keyboard.pressed(KeySym.LEFT)


def test_press_and_release_in_one_frame_report_both_edges() -> None:
    keyboard = Keyboard()
    keyboard.dispatch(KeyDown(sym=KeySym.SPACE))
    keyboard.dispatch(KeyUp(sym=KeySym.SPACE))

    assert keyboard.just_pressed(KeySym.SPACE)
    assert keyboard.just_released(KeySym.SPACE)
    assert not keyboard.pressed(KeySym.SPACE)


def test_any_helpers_match_key_groups() -> None:
    keyboard = Keyboard()
    keyboard.press(Keys.KEY_Z)
    keyboard.release(KeySym.DOWN)

    assert keyboard.any_just_pressed(frozenset({KeySym.UP, Keys.KEY_Z}))
    assert not keyboard.any_just_pressed(frozenset({KeySym.DOWN}))
    assert keyboard.any_just_released(frozenset({KeySym.DOWN, Keys.KEY_S}))
