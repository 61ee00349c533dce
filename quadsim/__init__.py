"""Headless simulation cores for small 2D games: geometry, platformer physics, particles, Life, Snake and angle helpers."""

__version__ = "0.1.0"