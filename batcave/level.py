"""Level tile map, screen collision map and per-room item tracking."""

import enum
from dataclasses import dataclass

from .config import (
    IDX_EMPTY,
    IDX_WALL_FIRST,
    IDX_WALL_LAST,
    MAP_H,
    MAP_W,
    METATILE_W,
    NUMBER_OF_ROOMS,
    ROOMS_PER_ROW,
    SCREEN_H,
    SCREEN_METATILES_H,
    SCREEN_METATILES_W,
    SCREEN_TILES_H,
    SCREEN_TILES_W,
    SCREEN_W,
    fix16,
    fix16_to_int,
)
from .utils import TextLine

NUMBER_OF_LEVELS = 5
OFFSCREEN_TILES = 3

# 20 x 14 metatiles per room = 280 bits, stored in nine 32-bit words.
NUMBER_OF_32BIT_BITMAPS = 9

TILE_INDEX_MASK = 0x7FF

COLLISION_COLS = SCREEN_METATILES_W + OFFSCREEN_TILES * 2
COLLISION_ROWS = SCREEN_METATILES_H + OFFSCREEN_TILES * 2

_ALL_BITS = 0xFFFFFFFF
_TOP_BIT = 0x80000000


def _tdiv(a, b):
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class CollisionFlag(enum.IntFlag):
    """Sides on which a wall was hit."""

    NONE = 0
    LEFT = 0b0001
    RIGHT = 0b0010
    HORIZ = 0b0011
    TOP = 0b0100
    BOTTOM = 0b1000
    VERT = 0b1100


@dataclass
class TileMap:
    """A map of 16x16 metatile indexes, rows top to bottom.

    Each metatile covers a 2x2 block of 8x8 tiles, all carrying the
    metatile's index offset by ``base_tile``.
    """

    metatiles: list
    base_tile: int = 0

    def __post_init__(self):
        self.metatiles = [list(row) for row in self.metatiles]
        if not self.metatiles or not self.metatiles[0]:
            raise ValueError("a tile map needs at least one metatile")
        width = len(self.metatiles[0])
        if any(len(row) != width for row in self.metatiles):
            raise ValueError("all tile map rows must have the same length")

    @property
    def width(self):
        return len(self.metatiles[0])

    @property
    def height(self):
        return len(self.metatiles)

    def get_rect(self, metatile_x, metatile_y, width, height):
        """Return the 8x8 tile entries of a metatile rectangle, row by row."""
        if (
            metatile_x < 0
            or metatile_y < 0
            or width < 0
            or height < 0
            or metatile_x + width > self.width
            or metatile_y + height > self.height
        ):
            raise IndexError("rectangle lies outside the tile map")
        entries = []
        for row in self.metatiles[metatile_y:metatile_y + height]:
            line = []
            for metatile in row[metatile_x:metatile_x + width]:
                entry = (metatile + self.base_tile) & 0xFFFF
                line.extend((entry, entry))
            entries.extend(line)
            entries.extend(line)
        return entries


class Level:
    """One screen of a tile map with its collision map and item bookkeeping."""

    def __init__(self, tilemap):
        self.tilemap = tilemap
        # indexed [x][y], with OFFSCREEN_TILES of margin on every side
        self.collision_map = [[0] * COLLISION_ROWS for _ in range(COLLISION_COLS)]
        self.tilemap_buff = [0] * (SCREEN_TILES_W * SCREEN_TILES_H)
        self.plane = [[0] * SCREEN_TILES_W for _ in range(SCREEN_TILES_H)]
        self.collision_result = CollisionFlag.NONE
        self.screen_x = 0
        self.screen_y = 0
        self.scroll_map(0, 0)
        self.items_table = [
            [_ALL_BITS] * NUMBER_OF_32BIT_BITMAPS for _ in range(NUMBER_OF_ROOMS)
        ]

    # collision map and buffer access

    @staticmethod
    def _check_cell(ix, iy):
        if not (0 <= ix < COLLISION_COLS and 0 <= iy < COLLISION_ROWS):
            raise IndexError(f"collision cell ({ix}, {iy}) out of range")

    def _get_cell(self, ix, iy):
        self._check_cell(ix, iy)
        return self.collision_map[ix][iy]

    def _set_cell(self, ix, iy, value):
        self._check_cell(ix, iy)
        self.collision_map[ix][iy] = value & 0xFF

    def wall_at(self, x, y):
        """True if the pixel ``(x, y)`` lies in a wall metatile."""
        return self.tile_at(x, y) == 1

    def tile_at(self, x, y):
        """Collision value of the metatile holding pixel ``(x, y)``."""
        return self._get_cell(
            _tdiv(x, METATILE_W) + OFFSCREEN_TILES, _tdiv(y, METATILE_W) + OFFSCREEN_TILES
        )

    def tile_idx16(self, metatile_x, metatile_y):
        """Collision value of a metatile given in metatile coordinates."""
        return self._get_cell(metatile_x + OFFSCREEN_TILES, metatile_y + OFFSCREEN_TILES)

    def set_tile_xy(self, x, y, value):
        """Set the collision value of the metatile holding pixel ``(x, y)``."""
        self._set_cell(
            _tdiv(x, METATILE_W) + OFFSCREEN_TILES,
            _tdiv(y, METATILE_W) + OFFSCREEN_TILES,
            value,
        )

    def set_tile_idx16(self, metatile_x, metatile_y, value):
        """Set the collision value of a metatile given in metatile coordinates."""
        self._set_cell(metatile_x + OFFSCREEN_TILES, metatile_y + OFFSCREEN_TILES, value)

    @staticmethod
    def _buff_pos(tile_x, tile_y):
        if not (0 <= tile_x < SCREEN_TILES_W and 0 <= tile_y < SCREEN_TILES_H):
            raise IndexError(f"tile ({tile_x}, {tile_y}) is outside the screen buffer")
        return tile_y * SCREEN_TILES_W + tile_x

    def mapbuff_idx8(self, tile_x, tile_y):
        """Tileset index of the 8x8 tile at ``(tile_x, tile_y)`` in the screen buffer."""
        entry = self.tilemap_buff[self._buff_pos(tile_x, tile_y)]
        return (entry - self.tilemap.base_tile) & TILE_INDEX_MASK

    def set_mapbuff_idx8(self, tile_x, tile_y, value):
        """Store a tileset index for the 8x8 tile at ``(tile_x, tile_y)``."""
        self.tilemap_buff[self._buff_pos(tile_x, tile_y)] = (
            value + self.tilemap.base_tile
        ) & 0xFFFF

    # logic

    def _clear_plane_rect(self, x, y, w, h):
        for ty in range(y, y + h):
            if 0 <= ty < SCREEN_TILES_H:
                row = self.plane[ty]
                for tx in range(x, x + w):
                    if 0 <= tx < SCREEN_TILES_W:
                        row[tx] = 0

    def _upload(self):
        for ty, row in enumerate(self.plane):
            row[:] = self.tilemap_buff[ty * SCREEN_TILES_W:(ty + 1) * SCREEN_TILES_W]

    def remove_tile_xy(self, x, y, new_index):
        """Replace the metatile at pixel ``(x, y)`` in the collision map and clear it on screen."""
        self.set_tile_xy(x, y, new_index)
        tx = _tdiv(x, METATILE_W) * 2
        ty = _tdiv(y, METATILE_W) * 2
        self._clear_plane_rect(tx, ty, 2, 2)

    def check_map_boundaries(self, obj):
        """Reposition ``obj`` if it is past the edges of the whole map."""
        if fix16_to_int(obj.x) + self.screen_x > MAP_W - obj.w:
            obj.x = fix16(SCREEN_W - obj.w)
        elif fix16_to_int(obj.x) + self.screen_x < 0:
            obj.x = 0

        if fix16_to_int(obj.y) + self.screen_y > MAP_H - obj.h:
            obj.y = fix16(SCREEN_H - obj.h)
        elif fix16_to_int(obj.y) + self.screen_y < 0:
            obj.y = 0

    def update_camera(self, obj):
        """Flip to the neighbouring room when ``obj`` leaves the screen halfway."""
        if obj.x > fix16(SCREEN_W - obj.w // 2):
            obj.x = 0
            self.scroll_and_update_collision(SCREEN_W, 0)
        elif obj.x < fix16(-(obj.w // 2)):
            obj.x = fix16(SCREEN_W - obj.w)
            self.scroll_and_update_collision(-SCREEN_W, 0)

        if obj.y > fix16(SCREEN_H - obj.h // 2):
            obj.y = 0
            self.scroll_and_update_collision(0, SCREEN_H)
        elif obj.y < fix16(-(obj.h // 2)):
            obj.y = fix16(SCREEN_H - obj.h)
            self.scroll_and_update_collision(0, -SCREEN_H)

    def check_wall(self, obj):
        """True if any 16-pixel sample point of ``obj``'s box is in a wall.

        The box must be up to date.
        """
        for x in range(obj.box.left, obj.box.right + 1, METATILE_W):
            for y in range(obj.box.top, obj.box.bottom + 1, METATILE_W):
                if self.wall_at(x, y):
                    return True
        return False

    def move_and_slide(self, obj):
        """Correct ``obj.next_x``/``obj.next_y`` so the object stops at walls.

        ``obj.x``/``obj.y`` hold the current position and ``obj.next_x``/
        ``obj.next_y`` the projected one. The sides hit are stored in
        ``collision_result``.
        """
        result = CollisionFlag.NONE
        obj.update_boundbox(obj.next_x, obj.y)
        box = obj.box

        if obj.speed_x > 0:
            if (
                self.wall_at(box.right, box.top)
                or self.wall_at(box.right, box.top + obj.h // 2)
                or self.wall_at(box.right, box.bottom - 1)
            ):
                obj.next_x = fix16(_tdiv(box.right, METATILE_W) * METATILE_W - obj.w)
                result |= CollisionFlag.RIGHT
        elif obj.speed_x < 0:
            if (
                self.wall_at(box.left, box.top)
                or self.wall_at(box.left, box.top + obj.h // 2)
                or self.wall_at(box.left, box.bottom - 1)
            ):
                obj.next_x = fix16((_tdiv(box.left, METATILE_W) + 1) * METATILE_W)
                result |= CollisionFlag.LEFT

        obj.update_boundbox(obj.next_x, obj.next_y)
        box = obj.box

        if obj.speed_y < 0:
            if (
                self.wall_at(box.left, box.top)
                or self.wall_at(box.left + obj.w // 2, box.top)
                or self.wall_at(box.right - 1, box.top)
            ):
                obj.next_y = fix16((_tdiv(box.top, METATILE_W) + 1) * METATILE_W)
                result |= CollisionFlag.TOP
        elif obj.speed_y > 0:
            if (
                self.wall_at(box.left, box.bottom)
                or self.wall_at(box.left + obj.w // 2, box.bottom)
                or self.wall_at(box.right - 1, box.bottom)
            ):
                obj.next_y = fix16(_tdiv(box.bottom, METATILE_W) * METATILE_W - obj.h)
                result |= CollisionFlag.BOTTOM

        self.collision_result = result

    # room handling

    def _remove_tile_from_buffer(self, x, y, new_index):
        """Remove the metatile whose top-left 8x8 tile is ``(x, y)``."""
        self.set_tile_idx16(x // 2, y // 2, new_index)
        self.set_mapbuff_idx8(x, y, IDX_EMPTY)
        self.set_mapbuff_idx8(x + 1, y, IDX_EMPTY)
        self.set_mapbuff_idx8(x, y + 1, IDX_EMPTY)
        self.set_mapbuff_idx8(x + 1, y + 1, IDX_EMPTY)

    def generate_screen_collision_map(self, empty, first_wall, last_wall):
        """Build the collision map from the screen buffer.

        Empty tiles become 0, walls become 1 and anything else keeps its
        tileset index. Only the top-left tile of each metatile is read.
        """
        for ty in range(0, SCREEN_TILES_H, 2):
            for tx in range(0, SCREEN_TILES_W, 2):
                tile_index = self.mapbuff_idx8(tx, ty)
                if tile_index == empty:
                    value = 0
                elif first_wall <= tile_index <= last_wall:
                    value = 1
                else:
                    value = tile_index
                self.set_tile_idx16(tx // 2, ty // 2, value)

    def _check_room(self, room):
        if not 0 <= room < NUMBER_OF_ROOMS:
            raise IndexError(f"room {room} out of range")

    @staticmethod
    def _bit_positions():
        for count in range(SCREEN_METATILES_W * SCREEN_METATILES_H):
            yield count // 32, _TOP_BIT >> (count % 32)

    def register_tiles_in_room(self, room):
        """Record which metatiles of the current screen are non-empty in the room's bitmap."""
        self._check_room(room)
        words = self.items_table[room]
        positions = self._bit_positions()
        for tile_y in range(SCREEN_METATILES_H):
            for tile_x in range(SCREEN_METATILES_W):
                offset, mask = next(positions)
                if self.tile_idx16(tile_x, tile_y) == 0:
                    words[offset] &= ~mask & _ALL_BITS
                else:
                    words[offset] |= mask

    def restore_tiles_in_room(self, room):
        """Remove from the screen buffer the metatiles the room's bitmap marks as gone."""
        self._check_room(room)
        words = self.items_table[room]
        positions = self._bit_positions()
        for tile_y in range(0, SCREEN_TILES_H, 2):
            for tile_x in range(0, SCREEN_TILES_W, 2):
                offset, mask = next(positions)
                if self.mapbuff_idx8(tile_x, tile_y) != IDX_EMPTY and not words[offset] & mask:
                    self._remove_tile_from_buffer(tile_x, tile_y, 0)

    def _room_at(self, x, y):
        return y // SCREEN_H * ROOMS_PER_ROW + x // SCREEN_W

    def scroll_map(self, x, y):
        """Load the screen at pixel ``(x, y)`` of the map into the buffer and the plane."""
        self.tilemap_buff = self.tilemap.get_rect(
            _tdiv(x, METATILE_W),
            _tdiv(y, METATILE_W),
            SCREEN_TILES_W // 2,
            SCREEN_TILES_H // 2,
        )
        self._upload()

    def scroll_and_update_collision(self, offset_x, offset_y):
        """Move to another room, keeping the state of the items in the one left."""
        new_x = self.screen_x + offset_x
        new_y = self.screen_y + offset_y
        if new_x < 0 or new_y < 0:
            raise ValueError("cannot scroll before the start of the map")
        new_room = self._room_at(new_x, new_y)
        self._check_room(new_room)
        buff = self.tilemap.get_rect(
            new_x // METATILE_W,
            new_y // METATILE_W,
            SCREEN_TILES_W // 2,
            SCREEN_TILES_H // 2,
        )

        self.register_tiles_in_room(self._room_at(self.screen_x, self.screen_y))
        self.screen_x = new_x
        self.screen_y = new_y
        self.tilemap_buff = buff
        self.restore_tiles_in_room(new_room)
        self.generate_screen_collision_map(IDX_EMPTY, IDX_WALL_FIRST, IDX_WALL_LAST)
        self._upload()

    # debug output

    def tilemap_dump(self):
        """Return the tileset index of each metatile in the buffer, one line per row."""
        text = TextLine()
        lines = []
        for ty in range(0, SCREEN_TILES_H, 2):
            for tx in range(0, SCREEN_TILES_W, 2):
                text.add_int(self.mapbuff_idx8(tx, ty))
            lines.append(text.flush())
        return lines

    def collision_map_text(self):
        """Render the on-screen part of the collision map as text, one line per metatile row."""
        width = SCREEN_METATILES_W * 2
        rows = [[" "] * width for _ in range(SCREEN_METATILES_H)]
        for tile_x in range(SCREEN_METATILES_W):
            for tile_y in range(SCREEN_METATILES_H):
                index = self.tile_idx16(tile_x, tile_y)
                label = str(index) if index != 0 else "  "
                row = rows[tile_y]
                for i, char in enumerate(label):
                    col = tile_x * 2 + i
                    if col < width:
                        row[col] = char
        return "\n".join("".join(row) for row in rows)