import pytest

from bgshell.keys import SoftKey, SoftKeyboard, key_sequence, trackpad_sequence


@pytest.mark.parametrize(
    "key, expected",
    [
        (SoftKey.TAB, bytes([9])),
        (SoftKey.ESC, bytes([0x1B])),
        (SoftKey.LEFT, bytes([0x1B, 0x5B, ord("D")])),
        (SoftKey.RIGHT, bytes([0x1B, 0x5B, ord("C")])),
        (SoftKey.UP, bytes([0x1B, 0x5B, ord("A")])),
        (SoftKey.DOWN, bytes([0x1B, 0x5B, ord("B")])),
    ],
)
def test_key_sequence_plain(key, expected):
    assert key_sequence(key) == expected


def test_ctrl_lowers_horizontal_keys():
    assert key_sequence(SoftKey.LEFT, ctrl=True) == bytes([0x1B, 0x5B, ord("d")])
    assert key_sequence(SoftKey.RIGHT, ctrl=True) == bytes([0x1B, 0x5B, ord("c")])


@pytest.mark.parametrize("key", [SoftKey.UP, SoftKey.DOWN, SoftKey.TAB, SoftKey.ESC])
def test_ctrl_does_not_change_other_keys(key):
    assert key_sequence(key, ctrl=True) == key_sequence(key, ctrl=False)


def test_ctrl_key_has_no_sequence():
    with pytest.raises(ValueError):
        key_sequence(SoftKey.CTRL)


def test_trackpad_below_sensitivity_is_empty():
    assert trackpad_sequence(4, -4) == b""


@pytest.mark.parametrize(
    "dx, dy, key",
    [
        (10, 2, SoftKey.RIGHT),
        (-10, 2, SoftKey.LEFT),
        (1, 10, SoftKey.DOWN),
        (1, -10, SoftKey.UP),
        (7, 7, SoftKey.DOWN),
        (-7, -7, SoftKey.UP),
    ],
)
def test_trackpad_direction(dx, dy, key):
    assert trackpad_sequence(dx, dy) == key_sequence(key)


def test_trackpad_ctrl_affects_horizontal_only():
    assert trackpad_sequence(-9, 0, ctrl=True) == key_sequence(SoftKey.LEFT, True)
    assert trackpad_sequence(0, -9, ctrl=True) == key_sequence(SoftKey.UP)


def test_trackpad_custom_sensitivity():
    assert trackpad_sequence(3, 0, sensitivity=3) == key_sequence(SoftKey.RIGHT)
    assert trackpad_sequence(2, 0, sensitivity=3) == b""


def test_keyboard_writes_and_tracks_ctrl():
    written = []
    keyboard = SoftKeyboard(written.append)
    assert keyboard.press(SoftKey.CTRL) == b""
    assert keyboard.ctrl is True
    keyboard.press(SoftKey.LEFT)
    keyboard.press(SoftKey.UP)
    assert written == [key_sequence(SoftKey.LEFT, True), key_sequence(SoftKey.UP)]
    # Ctrl stays latched until toggled again.
    assert keyboard.ctrl is True
    assert keyboard.toggle_ctrl() is False
    keyboard.press(SoftKey.RIGHT)
    assert written[-1] == key_sequence(SoftKey.RIGHT)


def test_keyboard_trackpad_writes_only_movement():
    written = []
    keyboard = SoftKeyboard(written.append)
    assert keyboard.trackpad(1, 1) == b""
    assert written == []
    data = keyboard.trackpad(0, 12)
    assert written == [data]
    assert data == key_sequence(SoftKey.DOWN)