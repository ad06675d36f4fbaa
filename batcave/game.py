"""Game setup, frame loop and command entry point."""

import argparse

from .background import ParallaxBackground
from .config import IDX_EMPTY, IDX_ITEM, MAP_METATILES_H, MAP_METATILES_W, fix16
from .enemy import EnemySystem
from .hud import Hud
from .level import Level, TileMap
from .player import Player
from .utils import InputState

TILE_USER_INDEX = 1
BACKGROUND_TILES = 0
HUD_TILES_USED = 0


def demo_tilemap():
    """A walled map with a few items, sized like the game's level."""
    rows = []
    for y in range(MAP_METATILES_H):
        row = []
        for x in range(MAP_METATILES_W):
            if x in (0, MAP_METATILES_W - 1) or y in (0, MAP_METATILES_H - 1):
                row.append(0)
            elif x % 7 == 3 and y % 5 == 2:
                row.append(IDX_ITEM)
            else:
                row.append(IDX_EMPTY)
        rows.append(row)
    return TileMap(rows)


class Game:
    """All game systems and the per-frame update."""

    def __init__(self, tilemap=None):
        self.input = InputState()
        ind = TILE_USER_INDEX
        self.background = ParallaxBackground(fix16(-0.80), fix16(-0.05), BACKGROUND_TILES)
        ind += BACKGROUND_TILES
        self.level = Level(tilemap if tilemap is not None else demo_tilemap())
        ind += ind
        self.hud = Hud(HUD_TILES_USED)
        ind += ind + HUD_TILES_USED
        self.player = Player(self.level, self.input, self.hud, ind)
        self.enemies = EnemySystem(self.player.bullets, self.player.bullet_damage)
        ind = self.enemies.spawn_bat(200, 60, ind)
        ind = self.enemies.spawn_bat(250, 80, ind)
        self.tile_index = ind
        self.frame = 0

    def update(self, readings):
        """Run one frame with the given joypad readings."""
        self.input.update(readings)
        self.player.update()
        self.enemies.update_all()
        self.background.update()
        self.frame += 1

    def run(self, frames):
        """Run ``frames`` frames with no buttons held; return the frame count."""
        idle = [0] * len(self.input.buttons)
        for _ in range(frames):
            self.update(idle)
        return self.frame


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the game headless for a number of frames.")
    parser.add_argument("--frames", type=int, default=60)
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    game = Game()
    game.run(args.frames)
    print(f"frames={game.frame} health={game.player.obj.health} "
          f"gems={game.hud.player_gems} bats={game.enemies.active_count}")
    return 0