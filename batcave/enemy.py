"""Bat enemies that fly back and forth and take damage from bullets."""

from .config import PAL_ENEMY, SCREEN_W, fix16, fix16_to_int
from .gameobject import GameObject, SpriteDefinition

MAX_BATS = 5
BAT_HEALTH = 15

SPR_BAT = SpriteDefinition("spr_bat", 32, 32, 16)


class EnemySystem:
    """Fixed set of bat slots updated against the player's bullets."""

    def __init__(self, bullets, bullet_damage=5, definition=SPR_BAT):
        self.bullets = bullets
        self.bullet_damage = bullet_damage
        self.definition = definition
        self.bats = [GameObject() for _ in range(MAX_BATS)]
        self.active_count = 0

    def spawn_bat(self, x, y, tile_index):
        """Place a bat at pixel ``(x, y)``; return the next free tile index."""
        if self.active_count >= MAX_BATS:
            raise ValueError("no free bat slot")
        bat = GameObject.from_sprite(self.definition, x, y, -16, -16, PAL_ENEMY, tile_index)
        bat.speed_x = fix16(-1.5)
        bat.speed_y = 0
        bat.health = BAT_HEALTH
        self.bats[self.active_count] = bat
        self.active_count += 1
        return tile_index + self.definition.max_num_tile

    def update_all(self):
        """Move every live bat, bounce it at screen edges and apply bullet hits."""
        for bat in reversed(self.bats):
            if bat.health <= 0:
                continue
            bat.x += bat.speed_x
            px = fix16_to_int(bat.x)
            if px < 0:
                bat.x = 0
                bat.speed_x = -bat.speed_x
                bat.sprite.hflip = False
            elif px + bat.w > SCREEN_W:
                bat.x = fix16(SCREEN_W - bat.w)
                bat.speed_x = -bat.speed_x
                bat.sprite.hflip = True
            bat.update_boundbox(bat.x, bat.y)

            for bullet in self.bullets:
                if bullet.health > 0 and bat.collides_with(bullet):
                    bat.health -= self.bullet_damage
                    bullet.health = 0
                    if bullet.sprite is not None:
                        bullet.sprite.visible = False
                    if bat.health <= 0:
                        bat.health = 0
                        bat.sprite.visible = False
                        self.active_count -= 1
                        break

            if bat.health > 0:
                bat.sprite.visible = True
                bat.sync_sprite()