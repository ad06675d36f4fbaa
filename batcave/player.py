"""The player ship and its bullets."""

import enum

from .config import (
    IDX_ITEM,
    PAL_MAP,
    PAL_PLAYER,
    PLAYER_MAX_HEALTH,
    PLAYER_SPEED,
    PLAYER_SPEED45,
    SCREEN_H,
    SCREEN_W,
    fix16,
)
from .gameobject import GameObject, SpriteDefinition
from .level import CollisionFlag
from .utils import Button

MAX_PLAYER_BULLETS = 8
BULLET_SPEED = fix16(4)
BULLET_DAMAGE = 5

SPR_PLAT = SpriteDefinition("spr_plat", 32, 32, 16)
SPR_PLAYER_SHOT = SpriteDefinition("spr_player_shot", 16, 8, 2)

_JOY_1 = 0


class Anim(enum.IntEnum):
    IDLE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Player:
    """Player object, its bullet set and the input handling that drives them."""

    def __init__(self, level, input_state, hud, tile_index=0,
                 definition=SPR_PLAT, shot_definition=SPR_PLAYER_SHOT):
        self.level = level
        self.input = input_state
        self.hud = hud
        self.bullet_damage = BULLET_DAMAGE
        self.obj = GameObject.from_sprite(
            definition, SCREEN_W // 2 - 12, SCREEN_H // 2 - 12, -16, -16, PAL_PLAYER, tile_index
        )
        tile_index += definition.max_num_tile
        self.obj.mana = 0
        self.obj.health = PLAYER_MAX_HEALTH
        self.bullets = []
        for _ in range(MAX_PLAYER_BULLETS):
            bullet = GameObject.from_sprite(shot_definition, -64, -64, 0, 0, PAL_MAP, tile_index)
            tile_index += shot_definition.max_num_tile
            bullet.health = 0
            bullet.sprite.visible = False
            bullet.sprite.loop = False
            self.bullets.append(bullet)
        self.next_tile_index = tile_index

    def update(self):
        """Run one frame: input, bullets, movement, walls, items and sprite."""
        p = self.obj
        self.read_input_dir8()
        self.shoot()
        self.update_bullets()

        p.next_x = p.x + p.speed_x
        p.next_y = p.y + p.speed_y
        self.level.move_and_slide(p)
        p.x = p.next_x
        p.y = p.next_y
        self.level.check_map_boundaries(p)

        p.update_boundbox(p.x, p.y)
        cx = p.box.left + p.w // 2
        cy = p.box.top + p.h // 2
        if self.level.tile_at(cx, cy) == IDX_ITEM:
            self.hud.gem_collected(1)
            self.level.remove_tile_xy(cx, cy, 0)

        p.clamp_screen()
        p.update_boundbox(p.x, p.y)
        p.sync_sprite()
        p.sprite.anim = p.anim

    def shoot(self):
        """Fire the first idle bullet when A is pressed; return it, or None."""
        if not self.input.key_pressed(_JOY_1, Button.A):
            return None
        p = self.obj
        for bullet in self.bullets:
            if bullet.health == 0:
                bullet.health = 1
                bullet.y = p.y + fix16(p.h // 2) - fix16(bullet.h // 2)
                bullet.x = p.x + fix16(p.w)
                bullet.speed_x = BULLET_SPEED
                bullet.speed_y = 0
                bullet.sprite.hflip = False
                bullet.update_boundbox(bullet.x, bullet.y)
                bullet.sync_sprite()
                bullet.sprite.visible = True
                bullet.sprite.anim = 0
                bullet.sprite.frame = 0
                return bullet
        return None

    def update_bullets(self):
        """Move active bullets, retiring those off screen or hitting a wall."""
        hit_sides = CollisionFlag.LEFT | CollisionFlag.RIGHT | CollisionFlag.TOP | CollisionFlag.BOTTOM
        for bullet in self.bullets:
            if bullet.health <= 0:
                continue
            bullet.x += bullet.speed_x
            bullet.update_boundbox(bullet.x, bullet.y)
            bullet.sync_sprite()
            box = bullet.box
            off_screen = box.right < 0 or box.left > SCREEN_W or box.bottom < 0 or box.top > SCREEN_H
            if off_screen or self.level.collision_result & hit_sides:
                bullet.health = 0
                bullet.sprite.visible = False

    def read_input_dir8(self):
        """Eight-way movement at constant speed, stopping when the pad is released."""
        p = self.obj
        key = self.input.key_down
        speed_x = speed_y = 0
        if key(_JOY_1, Button.UP):
            speed_y = -PLAYER_SPEED
        elif key(_JOY_1, Button.DOWN):
            speed_y = PLAYER_SPEED
        if key(_JOY_1, Button.LEFT):
            speed_x = -PLAYER_SPEED
        elif key(_JOY_1, Button.RIGHT):
            speed_x = PLAYER_SPEED

        if speed_y < 0:
            p.anim = Anim.UP
        elif speed_y > 0:
            p.anim = Anim.DOWN
        elif speed_x < 0:
            p.anim = Anim.LEFT
        elif speed_x > 0:
            p.anim = Anim.RIGHT
        else:
            p.anim = Anim.IDLE

        if speed_x and speed_y:
            speed_x = PLAYER_SPEED45 if speed_x > 0 else -PLAYER_SPEED45
            speed_y = PLAYER_SPEED45 if speed_y > 0 else -PLAYER_SPEED45
        p.speed_x = speed_x
        p.speed_y = speed_y

    def read_input_dir4(self):
        """Four-way movement that keeps going after the pad is released."""
        p = self.obj
        key = self.input.key_down
        if key(_JOY_1, Button.RIGHT):
            p.speed_x, p.speed_y, p.anim = PLAYER_SPEED, 0, 0
        elif key(_JOY_1, Button.LEFT):
            p.speed_x, p.speed_y, p.anim = -PLAYER_SPEED, 0, 4
        elif key(_JOY_1, Button.UP):
            p.speed_x, p.speed_y, p.anim = 0, -PLAYER_SPEED, 2
        elif key(_JOY_1, Button.DOWN):
            p.speed_x, p.speed_y, p.anim = 0, PLAYER_SPEED, 6

    def on_ground(self):
        """True if the last move ended on a floor."""
        return bool(self.level.collision_result & CollisionFlag.BOTTOM)

    def read_input_platformer(self):
        """Platformer controls: variable-height jump, gravity and head-bumping blocks."""
        p = self.obj
        inp = self.input
        if inp.key_down(_JOY_1, Button.RIGHT):
            p.speed_x = PLAYER_SPEED
            p.anim = Anim.RIGHT
        elif inp.key_down(_JOY_1, Button.LEFT):
            p.speed_x = -PLAYER_SPEED
            p.anim = Anim.LEFT
        else:
            p.speed_x = 0

        if self.on_ground():
            p.speed_y = fix16(1)
        elif self.level.collision_result & CollisionFlag.TOP:
            self.level.remove_tile_xy(p.box.left + p.w // 2 - 4, p.box.top - 8, 0)
            self.level.remove_tile_xy(p.box.left + p.w // 2 + 4, p.box.top - 8, 0)
            p.speed_y = 0

        if inp.key_released(_JOY_1, Button.A) and not self.on_ground():
            if p.speed_y < fix16(-2.4):
                p.speed_y = fix16(-2.4)

        if inp.key_pressed(_JOY_1, Button.A) and self.on_ground():
            p.speed_y = fix16(-4)

        p.speed_y = min(p.speed_y + fix16(0.15), fix16(4))