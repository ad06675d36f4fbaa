from batcave.config import PLAYER_SPEED
from batcave.enemy import SPR_BAT
from batcave.game import Game, demo_tilemap, main
from batcave.utils import Button


def test_demo_tilemap_border_is_wall():
    tm = demo_tilemap()
    assert tm.metatiles[0][5] == 0
    assert tm.metatiles[5][0] == 0


def test_game_spawns_two_bats():
    game = Game()
    assert game.enemies.active_count == 2
    assert game.tile_index == game.player.next_tile_index - (
        game.player.next_tile_index - game.tile_index
    )
    assert game.enemies.bats[1].sprite.tile_index == (
        game.enemies.bats[0].sprite.tile_index + SPR_BAT.max_num_tile
    )


def test_run_counts_frames():
    game = Game()
    assert game.run(5) == 5


def test_right_moves_player():
    game = Game()
    x0 = game.player.obj.x
    game.update([int(Button.RIGHT), 0])
    assert game.player.obj.x == x0 + PLAYER_SPEED


def test_main_prints_summary(capsys):
    assert main(["--frames", "3"]) == 0
    assert "frames=3" in capsys.readouterr().out