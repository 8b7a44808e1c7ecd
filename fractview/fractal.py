"""Escape-time rendering of the Julia, Mandelbrot and Burning Ship sets.

A view maps pixel ``(i, j)`` to the complex point
``i / zoom + shift_x + (j / zoom + shift_y)j``.  Each pixel is coloured with
its escape count multiplied by the view's colour, truncated to 32 bits.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .image import Image

SIZE = 500
MAX_ITER = 200
DIVERGE_VALUE = 4.0

WHITE = 0xFFFFFF
BLACK = 0x000000
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


class FractalSet(Enum):
    """The sets that can be drawn, keyed by their command-line digit."""

    JULIA = "0"
    MANDELBROT = "1"
    SHIP = "2"


def next_point(z: complex, c: complex, is_ship: bool = False) -> complex:
    """Return ``z*z + c``; for the Burning Ship, with both parts made positive."""
    result = z * z + c
    if is_ship:
        return complex(abs(result.real), abs(result.imag))
    return result


def escape_count(z: complex, c: complex, is_ship: bool = False) -> int:
    """Count iterations before ``|z|^2`` reaches the divergence bound.

    Returns -1 when ``z`` already lies outside the bound, and
    :data:`MAX_ITER` when the orbit never leaves it.
    """
    count = -1
    while z.real * z.real + z.imag * z.imag < DIVERGE_VALUE:
        count += 1
        if count >= MAX_ITER:
            break
        z = next_point(z, c, is_ship)
    return count


@dataclass
class View:
    """The part of the plane shown, the palette colour and the Julia seed."""

    kind: FractalSet = FractalSet.MANDELBROT
    zoom: float = float(SIZE // 4)
    shift_x: float = -2.0
    shift_y: float = -2.0
    color: int = RED
    c_x: int = 0
    c_y: int = 0

    @classmethod
    def for_set(cls, kind: FractalSet | str) -> View:
        """Return the starting view for ``kind``."""
        return cls(kind=FractalSet(kind))

    def render(self, image: Image) -> None:
        """Draw this view's set into ``image``."""
        _RENDERERS[self.kind](self, image)


def _render(
    view: View,
    image: Image,
    start: Callable[[complex], tuple[complex, complex]],
    is_ship: bool,
) -> None:
    zoom = view.zoom
    shift_x = view.shift_x
    shift_y = view.shift_y
    color = view.color
    width = min(SIZE, image.width)
    height = min(SIZE, image.height)
    for i in range(width):
        re = i / zoom + shift_x
        for j in range(height):
            z, c = start(complex(re, j / zoom + shift_y))
            image.put_pixel(i, j, escape_count(z, c, is_ship) * color)


def render_mandelbrot(view: View, image: Image) -> None:
    """Draw the Mandelbrot set: ``z`` starts at 0, ``c`` is the pixel."""
    _render(view, image, lambda point: (0j, point), False)


def render_ship(view: View, image: Image) -> None:
    """Draw the Burning Ship set: as Mandelbrot, with absolute parts."""
    _render(view, image, lambda point: (0j, point), True)


def render_julia(view: View, image: Image) -> None:
    """Draw the Julia set whose seed is the point under ``(c_x, c_y)``."""
    seed = complex(
        view.c_x / view.zoom + view.shift_x,
        view.c_y / view.zoom + view.shift_y,
    )
    _render(view, image, lambda point: (point, seed), False)


_RENDERERS: dict[FractalSet, Callable[[View, Image], None]] = {
    FractalSet.JULIA: render_julia,
    FractalSet.MANDELBROT: render_mandelbrot,
    FractalSet.SHIP: render_ship,
}