from beastbound.ui.keys import Key, classify, direction_for
from beastbound.world.movement import Direction


def test_wasd_and_control_keys():
    assert classify("w") is Key.UP
    assert classify("D") is Key.RIGHT
    assert classify("\r") is Key.ENTER
    assert classify("q") is Key.ESC
    assert classify("x") is Key.OTHER


def test_direction_mapping():
    assert direction_for(Key.LEFT) is Direction.LEFT
    assert direction_for(Key.ENTER) is None
