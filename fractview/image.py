"""Off-screen images and the visual that maps RGB colours to pixel values."""

from __future__ import annotations

_BITMAP_PAD = 32


def _mask_shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


class Visual:
    """A TrueColor visual: a depth and the bit masks of its channels."""

    def __init__(
        self,
        depth: int = 24,
        red_mask: int = 0xFF0000,
        green_mask: int = 0x00FF00,
        blue_mask: int = 0x0000FF,
    ) -> None:
        self.depth = depth
        self.red_mask = red_mask
        self.green_mask = green_mask
        self.blue_mask = blue_mask
        self._channels = tuple(
            _mask_shift_and_width(mask) for mask in (red_mask, green_mask, blue_mask)
        )

    def color_value(self, color: int) -> int:
        """Convert ``0xRRGGBB`` into the pixel value of this visual."""
        if self.depth >= 24:
            return color
        sixteen_bit = ((color >> 8) & 0xFF00, color & 0xFF00, (color << 8) & 0xFF00)
        return sum(
            (value >> (16 - width)) << shift
            for value, (shift, width) in zip(sixteen_bit, self._channels)
        )


class Image:
    """A pixel buffer of ``height`` rows, each ``size_line`` bytes long."""

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8 or bits_per_pixel > 32:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = big_endian
        self._bytes_per_pixel = bits_per_pixel // 8
        self._size_line = (width * bits_per_pixel + _BITMAP_PAD - 1) // _BITMAP_PAD * 4
        self.data = bytearray(self._size_line * height)

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of :attr:`data`."""
        return self._size_line

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self._size_line + x * self._bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at pixel ``(x, y)``."""
        offset = self._offset(x, y)
        value = color & ((1 << self.bits_per_pixel) - 1)
        self.data[offset : offset + self._bytes_per_pixel] = value.to_bytes(
            self._bytes_per_pixel, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the value stored at pixel ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset : offset + self._bytes_per_pixel], self._byteorder
        )

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        value = color & ((1 << self.bits_per_pixel) - 1)
        pixel = value.to_bytes(self._bytes_per_pixel, self._byteorder)
        row = pixel * self.width
        row += bytes(self._size_line - len(row))
        self.data[:] = row * self.height

    def to_rgb_bytes(self) -> bytes:
        """Return the image as packed 8-bit RGB triples, row by row."""
        out = bytearray()
        for y in range(self.height):
            for x in range(self.width):
                value = self.get_pixel(x, y)
                out += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        return bytes(out)