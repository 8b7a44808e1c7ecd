import pytest

from fractview.image import Image, Visual

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map_2(image, visual, kind):
    w, h = image.width, image.height
    expected = {}
    for y in range(h):
        for x in range(w):
            if kind == 2:
                color = (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
            else:
                color = (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
            value = visual.color_value(color)
            image.put_pixel(x, y, value)
            expected[(x, y)] = value
    return expected


@pytest.mark.parametrize("big_endian", [False, True])
@pytest.mark.parametrize("size, kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_color_map_round_trip(size, kind, big_endian):
    image = Image(size[0], size[1], 32, big_endian)
    expected = _color_map_2(image, Visual(), kind)
    assert all(image.get_pixel(x, y) == v for (x, y), v in expected.items())


def test_size_line_for_32_bits():
    assert Image(IM1_SX, IM1_SY).size_line == IM1_SX * 4
    assert len(Image(IM1_SX, IM1_SY).data) == IM1_SX * 4 * IM1_SY


def test_size_line_padded_to_32_bits():
    image = Image(3, 2, 8)
    assert image.size_line == 4
    assert image.size_line % 4 == 0


def test_byte_order_in_buffer():
    little = Image(2, 1, 32, False)
    big = Image(2, 1, 32, True)
    little.put_pixel(1, 0, 0x11223344)
    big.put_pixel(1, 0, 0x11223344)
    assert little.data[4:8] == b"\x44\x33\x22\x11"
    assert big.data[4:8] == b"\x11\x22\x33\x44"


def test_put_pixel_masks_high_bits():
    image = Image(1, 1, 32)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_put_pixel_out_of_range():
    image = Image(4, 4)
    with pytest.raises(IndexError):
        image.put_pixel(4, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_fill_sets_every_pixel():
    image = Image(5, 3, 24)
    image.fill(0xFF0000)
    assert {image.get_pixel(x, y) for x in range(5) for y in range(3)} == {0xFF0000}


def test_to_rgb_bytes():
    image = Image(2, 2)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(1, 1, 0x00FF00)
    rgb = image.to_rgb_bytes()
    assert len(rgb) == 2 * 2 * 3
    assert rgb[:3] == b"\x11\x22\x33"
    assert rgb[9:12] == b"\x00\xff\x00"


@pytest.mark.parametrize("args", [(0, 5), (5, -1), (5, 5, 12), (5, 5, 64)])
def test_invalid_image(args):
    with pytest.raises(ValueError):
        Image(*args)


def test_true_color_identity():
    visual = Visual(24, 0xFF0000, 0x00FF00, 0x0000FF)
    assert visual.color_value(0xFF99FF) == 0xFF99FF


def test_rgb565_conversion():
    visual = Visual(16, 0xF800, 0x07E0, 0x001F)
    assert visual.color_value(0xFFFFFF) == 0xFFFF
    assert visual.color_value(0xFF0000) == 0xF800
    assert visual.color_value(0x00FF00) == 0x07E0
    assert visual.color_value(0x0000FF) == 0x001F
    assert visual.color_value(0x000000) == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        Visual(16, 0, 0x07E0, 0x001F)