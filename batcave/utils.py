"""Input handling, colour effects and small text/debug helpers."""

import enum
import logging

from .config import NUMBER_OF_JOYPADS

MAX_TEXT_LINE = 200

_log = logging.getLogger(__name__)


class Button(enum.IntFlag):
    """Joypad button bits."""

    UP = 0x01
    DOWN = 0x02
    LEFT = 0x04
    RIGHT = 0x08
    B = 0x10
    C = 0x20
    A = 0x40
    START = 0x80


def wrap(value, low, high):
    """Return ``high`` below ``low``, ``low`` above ``high``, else ``value``."""
    if value < low:
        return high
    if value > high:
        return low
    return value


def make_box(x, y, w, h):
    """Return the box ``(left, right, top, bottom)`` of a rectangle."""
    return (x, x + w, y, y + h)


def format_bits(value):
    """Render a 32-bit value as a string of 32 binary digits."""
    return format(value & 0xFFFFFFFF, "032b")


def rotate_colors(palette, first_index, last_index, direction):
    """Shift palette entries one step towards ``first_index``, cycling the first to ``last_index``."""
    if direction not in (1, -1):
        raise ValueError("direction must be 1 or -1")
    if (last_index - first_index) * direction < 0:
        raise ValueError("last_index cannot be reached from first_index in that direction")
    saved = palette[first_index]
    i = first_index
    while i != last_index:
        palette[i] = palette[i + direction]
        i += direction
    palette[last_index] = saved


def rotate_colors_left(palette, left_index, right_index):
    """Rotate the colours between the two indexes to the left."""
    rotate_colors(palette, left_index, right_index, 1)


def rotate_colors_right(palette, left_index, right_index):
    """Rotate the colours between the two indexes to the right."""
    rotate_colors(palette, right_index, left_index, -1)


class InputState:
    """Current and previous button state of every joypad."""

    def __init__(self, joypads=NUMBER_OF_JOYPADS):
        self.buttons = [0] * joypads
        self.buttons_old = [0] * joypads

    def update(self, readings):
        """Store a new reading for each joypad, keeping the previous one."""
        readings = list(readings)
        if len(readings) != len(self.buttons):
            raise ValueError(
                f"expected {len(self.buttons)} joypad readings, got {len(readings)}"
            )
        self.buttons_old = self.buttons
        self.buttons = [int(r) & 0xFF for r in readings]

    @staticmethod
    def _is_set(value, bit):
        return (value & bit) == bit

    def key_down(self, joy_id, key):
        """True while ``key`` is held."""
        return self._is_set(self.buttons[joy_id], key)

    def key_pressed(self, joy_id, key):
        """True on the frame ``key`` goes down."""
        return self._is_set(self.buttons[joy_id], key) and not self._is_set(
            self.buttons_old[joy_id], key
        )

    def key_released(self, joy_id, key):
        """True on the frame ``key`` goes up."""
        return not self._is_set(self.buttons[joy_id], key) and self._is_set(
            self.buttons_old[joy_id], key
        )


class ColorGlow:
    """Ping-pong through a list of colours, one step per call."""

    def __init__(self, colors):
        self.colors = list(colors)
        if len(self.colors) < 2:
            raise ValueError("a glow needs at least two colours")
        self.idx = 0
        self.inc = 1

    def step(self, palette, color_index):
        """Write the current colour into ``palette`` and advance; returns the colour."""
        color = self.colors[self.idx]
        palette[color_index] = color
        self.idx += self.inc
        if self.idx in (0, len(self.colors) - 1):
            self.inc = -self.inc
        return color


class TextLine:
    """Accumulates comma-separated numbers into a bounded debug line."""

    def __init__(self):
        self.line = ""

    def add_int(self, num):
        """Append ``num`` (at least two digits) if the line has room."""
        text = f"{num:02d}"
        if len(text) + len(self.line) + 1 < MAX_TEXT_LINE:
            self.line += text + ","

    def flush(self):
        """Log and return the line, then clear it."""
        text = self.line
        _log.debug("%s", text)
        self.line = ""
        return text