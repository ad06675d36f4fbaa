import pytest

from batcave.config import SCREEN_H, SCREEN_W, fix16, fix16_to_int
from batcave.gameobject import (
    BoundBox,
    GameObject,
    GameObjectPool,
    SpriteDefinition,
)

BAT = SpriteDefinition("bat", 32, 32, 16)


def make(x=10, y=20, w_offset=-16, h_offset=-16):
    return GameObject.from_sprite(BAT, x, y, w_offset, h_offset, 1, 5)


def test_from_sprite_sets_position_and_size():
    obj = make()
    assert obj.x == fix16(10)
    assert obj.y == fix16(20)
    assert obj.next_x == obj.x
    assert obj.next_y == obj.y
    assert obj.w == BAT.w - 16
    assert obj.h == BAT.h - 16
    assert obj.w_offset * 2 == -16
    assert obj.sprite.tile_index == 5
    assert obj.sprite.palette == 1
    assert obj.sprite.definition is BAT


def test_update_boundbox():
    obj = make()
    obj.update_boundbox(obj.x, obj.y)
    assert obj.box.left == 10
    assert obj.box.top == 20
    assert obj.box.right - obj.box.left == obj.w
    assert obj.box.bottom - obj.box.top == obj.h


def test_clamp_screen():
    obj = make()
    obj.x = fix16(-5)
    obj.y = fix16(SCREEN_H + 50)
    obj.clamp_screen()
    assert obj.x == 0
    assert obj.y == fix16(SCREEN_H - obj.h)


def test_clamp_screen_leaves_inside_values():
    obj = make()
    obj.clamp_screen()
    assert obj.x == fix16(10)
    assert obj.y == fix16(20)


def test_wrap_screen():
    obj = make()
    obj.wrap_screen()
    assert obj.x == fix16(10)
    obj.x = fix16(SCREEN_W + 50)
    obj.wrap_screen()
    assert obj.x < 0
    obj.x = fix16(-100)
    obj.wrap_screen()
    assert fix16_to_int(obj.x) > SCREEN_W - obj.w


def test_bounce_off_screen():
    obj = make()
    obj.speed_x = fix16(2)
    obj.speed_y = fix16(1)
    obj.box = BoundBox(-1, 15, 10, 26)
    obj.bounce_off_screen()
    assert obj.speed_x == -fix16(2)
    assert obj.speed_y == fix16(1)
    obj.box = BoundBox(10, 26, SCREEN_H - 5, SCREEN_H + 11)
    obj.bounce_off_screen()
    assert obj.speed_x == -fix16(2)
    assert obj.speed_y == -fix16(1)


def test_collision():
    a = make(10, 10)
    b = make(20, 20)
    c = make(10 + a.w, 10)
    for obj in (a, b, c):
        obj.update_boundbox(obj.x, obj.y)
    assert a.collides_with(b)
    assert b.collides_with(a)
    assert not a.collides_with(c)


def test_sync_sprite():
    obj = make(40, 50)
    obj.update_boundbox(obj.x, obj.y)
    obj.sync_sprite()
    assert obj.sprite.x == obj.box.left + obj.w_offset
    assert obj.sprite.y == obj.box.top + obj.h_offset


def test_pool_alloc_until_empty():
    objects = [GameObject() for _ in range(3)]
    pool = GameObjectPool(objects)
    got = [pool.alloc() for _ in range(3)]
    assert got == objects
    assert pool.alloc() is None
    assert pool.active() == objects[::-1]


def test_pool_free_and_reuse():
    objects = [GameObject() for _ in range(2)]
    pool = GameObjectPool(objects)
    first = pool.alloc()
    second = pool.alloc()
    pool.free(first)
    assert pool.active() == [second]
    assert pool.alloc() is first


def test_pool_free_unknown_object():
    pool = GameObjectPool([GameObject()])
    with pytest.raises(ValueError):
        pool.free(GameObject())