"""Parallax scrolling background, one horizontal offset per row of tiles."""

from .config import SCREEN_TILES_H, fix16, fix16_to_int

NEW_START_OFFSET = 103
TOP_MOUNTAIN = 69 // 8


def _fix16_mul(a, b):
    return (a * b) >> 6


class ParallaxBackground:
    """Row-by-row scroll offsets that advance by a per-row speed every frame."""

    def __init__(self, start_speed, speed_increase, tile_count=0):
        self.tile_count = tile_count
        self.start_offset = NEW_START_OFFSET
        self.mid = SCREEN_TILES_H // 2 + 1
        self.offset_pos = [fix16(self.start_offset)] * SCREEN_TILES_H
        self.offset_speed = [0] * SCREEN_TILES_H
        self.values = [0] * SCREEN_TILES_H
        self.set_offset_speed(TOP_MOUNTAIN, self.mid, _fix16_mul(speed_increase, fix16(2.0)))
        self.set_offset_speed(self.mid, SCREEN_TILES_H - self.mid, start_speed)

    def set_offset_speed(self, start, length, speed):
        """Give rows ``start`` to ``start + length`` (inclusive, bounded) the same speed."""
        if start >= SCREEN_TILES_H or length == 0:
            return
        end = min(start + length, SCREEN_TILES_H - 1)
        for i in range(start, end + 1):
            self.offset_speed[i] = speed

    def update(self):
        """Advance every row and return the integer offsets."""
        for i in range(self.mid):
            self.values[i] = self.start_offset
        for i, speed in enumerate(self.offset_speed):
            self.offset_pos[i] += speed
            self.values[i] = fix16_to_int(self.offset_pos[i])
        return list(self.values)