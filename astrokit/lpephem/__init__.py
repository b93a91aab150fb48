"""Low-precision ephemerides for the Sun, the Moon and the planets."""

__all__ = ["moon", "planets", "sun"]