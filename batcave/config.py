"""Game-wide configuration and 10.6 fixed-point helpers."""

FIX16_FRAC_BITS = 6

# Map layout (in 16x16 metatiles)
MAP_METATILES_W = 60
MAP_METATILES_H = 42

HUD_TILES = 1

# Tile indexes used by the level map
IDX_EMPTY = 10
IDX_WALL_FIRST = 0
IDX_WALL_LAST = 5
IDX_ITEM = 8

# Palette slots
PAL0, PAL1, PAL2, PAL3 = range(4)
PAL_PLAYER = PAL0
PAL_ENEMY = PAL1
PAL_MAP = PAL2
PAL_BACKGROUND = PAL3

# Background planes
BG_A = "A"
BG_B = "B"
BG_BACKGROUND = BG_B
BG_MAP = BG_A

NUMBER_OF_JOYPADS = 2

PLAYER_MAX_HEALTH = 10

# Screen geometry
SCREEN_W = 320
SCREEN_H = 224

METATILE_W = 16

MAP_W = MAP_METATILES_W * METATILE_W
MAP_H = MAP_METATILES_H * METATILE_W

NUMBER_OF_ROOMS = (MAP_W // SCREEN_W) * (MAP_H // SCREEN_H)
ROOMS_PER_ROW = MAP_H // SCREEN_H

SCREEN_TILES_W = SCREEN_W // 8
SCREEN_TILES_H = SCREEN_H // 8

SCREEN_METATILES_W = SCREEN_W // METATILE_W
SCREEN_METATILES_H = SCREEN_H // METATILE_W


def fix16(value):
    """Convert a number to its fixed-point representation (truncating)."""
    return int(value * (1 << FIX16_FRAC_BITS))


def fix16_to_int(value):
    """Convert a fixed-point value to an integer, rounding towards minus infinity."""
    return int(value) >> FIX16_FRAC_BITS


def clamp(value, low, high):
    """Limit ``value`` to the closed range ``[low, high]``."""
    return min(max(value, low), high)


SCREEN_W_F16 = fix16(SCREEN_W)
SCREEN_H_F16 = fix16(SCREEN_H)

PLAYER_SPEED = fix16(2)
PLAYER_SPEED45 = fix16(0.707 * 2)