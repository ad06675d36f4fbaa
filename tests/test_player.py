import pytest

from batcave.config import PLAYER_SPEED, PLAYER_SPEED45, fix16
from batcave.game import demo_tilemap
from batcave.hud import Hud
from batcave.level import CollisionFlag, Level
from batcave.player import BULLET_SPEED, MAX_PLAYER_BULLETS, Anim, Player
from batcave.utils import Button, InputState


@pytest.fixture
def player():
    return Player(Level(demo_tilemap()), InputState(), Hud())


def press(player, buttons):
    player.input.update([int(buttons), 0])


def test_initial_state(player):
    assert player.obj.health == 10
    assert len(player.bullets) == MAX_PLAYER_BULLETS
    assert all(b.health == 0 and not b.sprite.visible for b in player.bullets)


def test_right_sets_speed_and_anim(player):
    press(player, Button.RIGHT)
    player.read_input_dir8()
    assert player.obj.speed_x == PLAYER_SPEED
    assert player.obj.anim == Anim.RIGHT


def test_diagonal_uses_reduced_speed(player):
    press(player, Button.UP | Button.LEFT)
    player.read_input_dir8()
    assert player.obj.speed_x == -PLAYER_SPEED45
    assert player.obj.speed_y == -PLAYER_SPEED45
    assert player.obj.anim == Anim.UP


def test_update_moves_player(player):
    x0 = player.obj.x
    press(player, Button.RIGHT)
    player.update()
    assert player.obj.x == x0 + PLAYER_SPEED


def test_shoot_only_on_press(player):
    press(player, Button.A)
    first = player.shoot()
    assert first is player.bullets[0] and first.health == 1
    assert first.x == player.obj.x + fix16(player.obj.w)
    press(player, Button.A)
    assert player.shoot() is None


def test_bullet_moves_and_leaves_screen(player):
    press(player, Button.A)
    bullet = player.shoot()
    x0 = bullet.x
    player.update_bullets()
    assert bullet.x == x0 + BULLET_SPEED
    bullet.x = fix16(400)
    player.update_bullets()
    assert bullet.health == 0 and not bullet.sprite.visible


def test_on_ground_reads_collision(player):
    player.level.collision_result = CollisionFlag.BOTTOM
    assert player.on_ground()
    player.level.collision_result = CollisionFlag.NONE
    assert not player.on_ground()


def test_dir4_keeps_moving(player):
    press(player, Button.DOWN)
    player.read_input_dir4()
    press(player, 0)
    player.read_input_dir4()
    assert player.obj.speed_y == PLAYER_SPEED and player.obj.speed_x == 0