"""Escape-time fractal rendering into pixel buffers, with an XPM image reader."""

__version__ = "0.1.0"
__all__ = ["__version__"]