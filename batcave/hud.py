"""Heads-up display text row: energy bar and gem counter."""

from .config import PLAYER_MAX_HEALTH, SCREEN_TILES_W

HUD_ROWS = 1


class Hud:
    """Text window holding the energy bar and the gem counter."""

    def __init__(self, tile_count=0):
        self.tile_count = tile_count
        self.player_gems = 0
        self._rows = [[" "] * SCREEN_TILES_W for _ in range(HUD_ROWS)]
        self.draw_text("ENERGY ||||||||||   GEMS 255", 1, 0)
        self.gem_collected(0)

    def draw_text(self, text, x, y):
        """Write ``text`` starting at tile column ``x`` of row ``y``, cropping at the edge."""
        row = self._rows[y]
        for i, char in enumerate(text):
            if 0 <= x + i < len(row):
                row[x + i] = char

    def row(self, y):
        """The text of row ``y``."""
        return "".join(self._rows[y])

    def update_health(self, value):
        """Draw an energy bar of ``value`` marks."""
        if not 0 <= value <= PLAYER_MAX_HEALTH:
            raise ValueError(f"health must be between 0 and {PLAYER_MAX_HEALTH}")
        bar = ("|" * value).ljust(PLAYER_MAX_HEALTH)
        self.draw_text(bar, 7, 0)

    def gem_collected(self, value):
        """Add ``value`` gems (counter wraps at 256) and redraw."""
        self.player_gems = (self.player_gems + value) & 0xFF
        self.update_gems()

    def update_gems(self):
        """Redraw the gem counter."""
        self.draw_text(f"{self.player_gems:03d}", 26, 0)