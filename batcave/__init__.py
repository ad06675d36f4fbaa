"""A small top-down arcade shooter engine with tile levels, collision, a HUD, the player and bat enemies."""

__version__ = "0.1.0"