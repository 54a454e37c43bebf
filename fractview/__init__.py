"""Mandelbrot and Julia set rendering, an in-memory windowing layer and an XPM reader."""

__version__ = "0.1.0"