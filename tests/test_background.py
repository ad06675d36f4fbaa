from batcave.background import NEW_START_OFFSET, ParallaxBackground
from batcave.config import SCREEN_TILES_H, fix16


def test_initial_speeds():
    bg = ParallaxBackground(fix16(-0.80), fix16(-0.05))
    mid = bg.mid
    assert bg.offset_speed[:8] == [0] * 8
    assert all(s == bg.offset_speed[8] for s in bg.offset_speed[8:mid])
    assert bg.offset_speed[mid:] == [fix16(-0.80)] * (SCREEN_TILES_H - mid)


def test_update_advances_positions():
    bg = ParallaxBackground(fix16(-1), 0)
    values = bg.update()
    assert values[0] == NEW_START_OFFSET
    assert values[-1] == NEW_START_OFFSET - 1
    assert bg.update()[-1] == NEW_START_OFFSET - 2


def test_set_offset_speed_ignores_out_of_range_and_empty():
    bg = ParallaxBackground(0, 0)
    before = list(bg.offset_speed)
    bg.set_offset_speed(SCREEN_TILES_H, 3, 99)
    bg.set_offset_speed(0, 0, 99)
    assert bg.offset_speed == before


def test_set_offset_speed_bounded_at_end():
    bg = ParallaxBackground(0, 0)
    bg.set_offset_speed(SCREEN_TILES_H - 2, 10, 7)
    assert bg.offset_speed[-2:] == [7, 7]
    assert len(bg.offset_speed) == SCREEN_TILES_H