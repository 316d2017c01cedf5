"""Fractal explorer core: complex-plane helpers, a headless window context, images, XPM42 textures and text utilities."""

__version__ = "0.1.0"