import pytest

from fractview import fractal
from fractview.fractal import (
    FractalSet,
    View,
    escape_count,
    next_point,
    render_julia,
    render_mandelbrot,
    render_ship,
)
from fractview.image import Image

MASK = 0xFFFFFFFF


def test_next_point_from_origin_is_c():
    assert next_point(0j, complex(0.5, -0.25)) == complex(0.5, -0.25)


def test_next_point_squares_i():
    assert next_point(1j, 0j) == complex(-1, 0)


def test_next_point_ship_takes_absolute_parts():
    result = next_point(0j, complex(-1, -1), True)
    assert result == complex(1, 1)
    assert next_point(0j, complex(-1, -1), False) == complex(-1, -1)


def test_escape_count_outside_start_is_minus_one():
    assert escape_count(complex(3, 0), 0j) == -1


def test_escape_count_bounded_orbit_reaches_max():
    assert escape_count(0j, 0j) == fractal.MAX_ITER
    assert escape_count(0j, complex(-1, 0)) == fractal.MAX_ITER


def test_escape_count_far_point_escapes_sooner():
    assert escape_count(0j, complex(2, 0)) < escape_count(0j, complex(0.3, 0))


def test_escape_count_ship_matches_plain_for_positive_orbit():
    c = complex(0.1, 0.1)
    assert escape_count(0j, c, True) == escape_count(0j, c, False)


def test_for_set_defaults():
    view = View.for_set("1")
    assert view.kind is FractalSet.MANDELBROT
    assert view.zoom == fractal.SIZE // 4
    assert view.shift_x == -2.0
    assert view.shift_y == -2.0
    assert view.color == fractal.RED


def test_for_set_accepts_enum_and_rejects_unknown():
    assert View.for_set(FractalSet.SHIP).kind is FractalSet.SHIP
    assert View.for_set("0").kind is FractalSet.JULIA
    with pytest.raises(ValueError):
        View.for_set("7")


def test_render_mandelbrot_pixels_follow_escape_count():
    view = View.for_set(FractalSet.MANDELBROT)
    image = Image(6, 5)
    render_mandelbrot(view, image)
    for i in range(6):
        for j in range(5):
            c = complex(i / view.zoom + view.shift_x, j / view.zoom + view.shift_y)
            assert image.get_pixel(i, j) == (escape_count(0j, c) * view.color) & MASK


def test_render_mandelbrot_interior_point():
    view = View(shift_x=0.0, shift_y=0.0)
    image = Image(2, 2)
    render_mandelbrot(view, image)
    assert image.get_pixel(0, 0) == (fractal.MAX_ITER * view.color) & MASK


def test_render_ship_pixels_follow_escape_count():
    view = View(kind=FractalSet.SHIP, zoom=4.0)
    image = Image(4, 4)
    render_ship(view, image)
    for i in range(4):
        for j in range(4):
            c = complex(i / view.zoom + view.shift_x, j / view.zoom + view.shift_y)
            assert image.get_pixel(i, j) == (escape_count(0j, c, True) * view.color) & MASK


def test_render_julia_uses_seed_under_cursor():
    view = View(kind=FractalSet.JULIA, zoom=3.0, c_x=5, c_y=7)
    image = Image(4, 3)
    render_julia(view, image)
    seed = complex(5 / 3.0 - 2.0, 7 / 3.0 - 2.0)
    for i in range(4):
        for j in range(3):
            z = complex(i / 3.0 - 2.0, j / 3.0 - 2.0)
            assert image.get_pixel(i, j) == (escape_count(z, seed) * view.color) & MASK


def test_render_julia_start_outside_bound_stores_negative_colour():
    view = View(kind=FractalSet.JULIA, shift_x=10.0, shift_y=10.0)
    image = Image(1, 1)
    render_julia(view, image)
    assert image.get_pixel(0, 0) == (-view.color) & MASK


@pytest.mark.parametrize(
    "kind, renderer",
    [
        (FractalSet.JULIA, render_julia),
        (FractalSet.MANDELBROT, render_mandelbrot),
        (FractalSet.SHIP, render_ship),
    ],
)
def test_view_render_dispatches_on_kind(kind, renderer):
    view = View(kind=kind, zoom=2.0, c_x=1, c_y=1)
    via_view = Image(5, 5)
    direct = Image(5, 5)
    view.render(via_view)
    renderer(view, direct)
    assert via_view.data == direct.data