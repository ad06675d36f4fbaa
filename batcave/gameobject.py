"""Game objects, their sprites and an object pool."""

from collections import deque
from dataclasses import dataclass, field

from .config import SCREEN_H, SCREEN_W, clamp, fix16, fix16_to_int
from .utils import wrap


@dataclass
class BoundBox:
    """Integer bounding box in screen pixels."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class SpriteDefinition:
    """Static description of a sprite sheet."""

    name: str
    w: int
    h: int
    max_num_tile: int
    palette: tuple = ()


@dataclass
class Sprite:
    """Display state of one hardware sprite."""

    definition: SpriteDefinition
    x: int
    y: int
    palette: int
    tile_index: int
    visible: bool = True
    hflip: bool = False
    anim: int = 0
    frame: int = 0
    loop: bool = True


@dataclass(eq=False)
class GameObject:
    """A moving object with fixed-point position and speed."""

    sprite: Sprite | None = None
    x: int = 0
    y: int = 0
    next_x: int = 0
    next_y: int = 0
    speed_x: int = 0
    speed_y: int = 0
    w: int = 0
    h: int = 0
    box: BoundBox = field(default_factory=BoundBox)
    w_offset: int = 0
    h_offset: int = 0
    anim: int = 0
    health: int = 0
    mana: int = 0

    @classmethod
    def from_sprite(cls, definition, x, y, w_offset, h_offset, palette, tile_index):
        """Create an object at pixel ``(x, y)`` with a sprite from ``definition``.

        The offsets shrink (or grow) the collision size relative to the sprite;
        half of each offset is applied on each side when drawing.
        """
        sprite = Sprite(definition, x, y, palette, tile_index)
        return cls(
            sprite=sprite,
            x=fix16(x),
            y=fix16(y),
            next_x=fix16(x),
            next_y=fix16(y),
            w=definition.w + w_offset,
            h=definition.h + h_offset,
            w_offset=int(w_offset / 2),
            h_offset=int(h_offset / 2),
        )

    def update_boundbox(self, x, y):
        """Recompute the pixel box from fixed-point ``x``, ``y`` and the size."""
        left = fix16_to_int(x)
        top = fix16_to_int(y)
        self.box = BoundBox(left, left + self.w, top, top + self.h)

    def clamp_screen(self):
        """Keep the object inside the screen."""
        self.x = clamp(self.x, 0, fix16(SCREEN_W - self.w))
        self.y = clamp(self.y, 0, fix16(SCREEN_H - self.h))

    def wrap_screen(self):
        """Move the object to the opposite edge when it leaves the screen."""
        self.x = wrap(self.x, -((self.w << 6) // 2), fix16(SCREEN_W) - self.w // 2)
        self.y = wrap(self.y, -((self.h << 6) // 2), fix16(SCREEN_H) - self.h // 2)

    def bounce_off_screen(self):
        """Reverse speed on an axis where the box is past a screen edge."""
        if self.box.left < 0 or self.box.right > SCREEN_W:
            self.speed_x = -self.speed_x
        if self.box.top < 0 or self.box.bottom > SCREEN_H:
            self.speed_y = -self.speed_y

    def collides_with(self, other):
        """True if the two bounding boxes overlap."""
        return (
            self.box.right > other.box.left
            and self.box.left < other.box.right
            and self.box.bottom > other.box.top
            and self.box.top < other.box.bottom
        )

    def sync_sprite(self):
        """Place the sprite at the box position, corrected by the draw offsets."""
        if self.sprite is not None:
            self.sprite.x = self.box.left + self.w_offset
            self.sprite.y = self.box.top + self.h_offset


class GameObjectPool:
    """Fixed set of objects handed out and returned, most recent first."""

    def __init__(self, objects):
        self._free = deque(objects)
        self._active = deque()

    def alloc(self):
        """Take an object from the free list, or return None if none is left."""
        if not self._free:
            return None
        obj = self._free.popleft()
        self._active.appendleft(obj)
        return obj

    def free(self, obj):
        """Return an allocated object to the free list."""
        for i, candidate in enumerate(self._active):
            if candidate is obj:
                del self._active[i]
                self._free.appendleft(obj)
                return
        raise ValueError("object is not allocated from this pool")

    def active(self):
        """Allocated objects, most recently allocated first."""
        return list(self._active)