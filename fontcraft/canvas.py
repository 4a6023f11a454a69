"""An in-memory bitmap surface for glyph rasterization."""

from __future__ import annotations

from enum import Enum

from fontcraft.geometry import Rect, Vector2


class PixelFormat(Enum):
    """The image format of a canvas."""

    RGBA32 = "rgba32"
    """Premultiplied R8G8B8A8, little-endian."""
    RGB24 = "rgb24"
    """R8G8B8, little-endian."""
    A8 = "a8"
    """A single 8-bit alpha channel."""

    def bits_per_pixel(self) -> int:
        return _BITS_PER_PIXEL[self]

    def components_per_pixel(self) -> int:
        return _COMPONENTS_PER_PIXEL[self]

    def bits_per_component(self) -> int:
        return self.bits_per_pixel() // self.components_per_pixel()

    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel() // 8


_BITS_PER_PIXEL = {PixelFormat.RGBA32: 32, PixelFormat.RGB24: 24, PixelFormat.A8: 8}
_COMPONENTS_PER_PIXEL = {PixelFormat.RGBA32: 4, PixelFormat.RGB24: 3, PixelFormat.A8: 1}


class RasterizationOptions(Enum):
    """The antialiasing strategy used when rasterizing glyphs."""

    BILEVEL = "bilevel"
    """Each pixel is either entirely on or off."""
    GRAYSCALE_AA = "grayscale"
    """Grayscale antialiasing using one channel."""
    SUBPIXEL_AA = "subpixel"
    """Subpixel RGB antialiasing, for LCD screens."""


_BITMAP_1BPP_TO_8BPP = tuple(
    bytes(0xFF if byte & (0x80 >> bit) else 0 for bit in range(8)) for byte in range(256)
)


def _copy(src: bytes) -> bytes:
    return bytes(src)


def _rgb24_to_a8(src: bytes) -> bytes:
    return bytes(src[1::3])


def _a8_to_rgb24(src: bytes) -> bytes:
    return bytes(value for value in src for _ in range(3))


def _rgba32_to_rgb24(src: bytes) -> bytes:
    count = len(src) // 4
    out = bytearray(count * 3)
    for channel in range(3):
        out[channel::3] = src[channel::4]
    return bytes(out)


def _rgb24_to_rgba32(src: bytes) -> bytes:
    count = len(src) // 3
    out = bytearray(count * 4)
    for channel in range(3):
        out[channel::4] = src[channel::3]
    out[3::4] = b"\xff" * count
    return bytes(out)


_CONVERTERS = {
    (PixelFormat.A8, PixelFormat.A8): _copy,
    (PixelFormat.RGB24, PixelFormat.RGB24): _copy,
    (PixelFormat.RGBA32, PixelFormat.RGBA32): _copy,
    (PixelFormat.A8, PixelFormat.RGB24): _rgb24_to_a8,
    (PixelFormat.RGB24, PixelFormat.A8): _a8_to_rgb24,
    (PixelFormat.RGB24, PixelFormat.RGBA32): _rgba32_to_rgb24,
    (PixelFormat.RGBA32, PixelFormat.RGB24): _rgb24_to_rgba32,
}


class Canvas:
    """A bitmap of ``size`` pixels, ``stride`` bytes per row, initialised to zero."""

    def __init__(self, size: Vector2, format: PixelFormat) -> None:
        format = PixelFormat(format)
        width = int(size.x)
        self._init(size, width * format.bytes_per_pixel(), format)

    @classmethod
    def with_stride(cls, size: Vector2, stride: int, format: PixelFormat) -> Canvas:
        """A blank canvas whose rows are ``stride`` bytes apart."""
        canvas = cls.__new__(cls)
        canvas._init(size, stride, PixelFormat(format))
        return canvas

    def _init(self, size: Vector2, stride: int, format: PixelFormat) -> None:
        width, height = int(size.x), int(size.y)
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        if stride < 0:
            raise ValueError(f"canvas stride must not be negative: {stride}")
        self.size = Vector2(width, height)
        self.stride = int(stride)
        self.format = format
        self.pixels = bytearray(self.stride * height)

    def __repr__(self) -> str:
        return (
            f"Canvas(pixels={len(self.pixels)}, size={self.size!r}, "
            f"stride={self.stride}, format={self.format})"
        )

    def row(self, y: int) -> bytes:
        """The bytes of row ``y``, stride included."""
        if not 0 <= y < self.size.y:
            raise IndexError(f"row {y} out of range")
        return bytes(self.pixels[y * self.stride : (y + 1) * self.stride])

    def _write(self, start: int, data: bytes) -> None:
        end = start + len(data)
        if start < 0 or end > len(self.pixels):
            raise IndexError("write past the end of the canvas")
        self.pixels[start:end] = data

    def _clip(self, dst_point: Vector2, src_size: Vector2) -> Rect | None:
        target = Rect(Vector2(int(dst_point.x), int(dst_point.y)), src_size)
        return target.intersection(Rect(Vector2(0, 0), self.size))

    def blit_from_canvas(self, src: Canvas) -> None:
        """Copy another canvas to this one's top left corner."""
        self.blit_from(Vector2(0, 0), src.pixels, src.size, src.stride, src.format)

    def blit_from(
        self,
        dst_point: Vector2,
        src_bytes: bytes,
        src_size: Vector2,
        src_stride: int,
        src_format: PixelFormat,
    ) -> None:
        """Copy pixels to the rectangle at ``dst_point``, clipped to the canvas.

        Pixels are converted between formats where needed.
        """
        src_format = PixelFormat(src_format)
        src_size = Vector2(int(src_size.x), int(src_size.y))
        if src_stride * src_size.y != len(src_bytes):
            raise ValueError("Number of pixels in src_bytes does not match stride and size.")
        if src_stride < src_size.x * src_format.bytes_per_pixel():
            raise ValueError("src_stride must be >= than src_size.x()")

        rect = self._clip(dst_point, src_size)
        if rect is None:
            return

        convert = _CONVERTERS.get((self.format, src_format))
        if convert is None:
            raise ValueError(f"cannot blit {src_format.name} pixels to a {self.format.name} canvas")

        src_bpp = src_format.bytes_per_pixel()
        dest_bpp = self.format.bytes_per_pixel()
        width = int(rect.width)
        for y in range(int(rect.height)):
            dest_start = (y + int(rect.origin_y)) * self.stride + int(rect.origin_x) * dest_bpp
            src_start = y * src_stride
            src_row = bytes(src_bytes[src_start : src_start + width * src_bpp])
            self._write(dest_start, convert(src_row))

    def blit_from_bitmap_1bpp(
        self,
        dst_point: Vector2,
        src_bytes: bytes,
        src_size: Vector2,
        src_stride: int,
    ) -> None:
        """Expand a 1-bit-per-pixel bitmap (most significant bit first) onto an A8 canvas."""
        if self.format is not PixelFormat.A8:
            raise ValueError("1-bit bitmaps can only be blitted to an A8 canvas")

        rect = self._clip(dst_point, Vector2(int(src_size.x), int(src_size.y)))
        if rect is None:
            return

        width = int(rect.width)
        src_row_stride = -(-width // 8)
        for y in range(int(rect.height)):
            dest_start = (y + int(rect.origin_y)) * self.stride + int(rect.origin_x)
            src_start = y * src_stride
            src_row = src_bytes[src_start : src_start + src_row_stride]
            if len(src_row) != src_row_stride:
                raise IndexError("source bitmap is too short")
            expanded = b"".join(_BITMAP_1BPP_TO_8BPP[byte] for byte in src_row)
            self._write(dest_start, expanded[:width])


def shade(value: int) -> str:
    """A block character whose density follows a coverage value from 0 to 255."""
    if not 0 <= value <= 255:
        raise ValueError(f"coverage value out of range: {value}")
    if value == 0:
        return " "
    if value <= 84:
        return "░"
    if value <= 169:
        return "▒"
    if value <= 254:
        return "▓"
    return "█"


_RED, _GREEN, _BLUE, _RESET = "\x1b[31m", "\x1b[32m", "\x1b[34m", "\x1b[0m"


def render_text(canvas: Canvas) -> str:
    """Draw a canvas as lines of block characters.

    A8 pixels become two characters each; RGB24 pixels become one coloured
    character per channel.
    """
    lines = []
    width = int(canvas.size.x)
    for y in range(int(canvas.size.y)):
        row = canvas.row(y)
        if canvas.format is PixelFormat.A8:
            line = "".join(shade(value) * 2 for value in row[:width])
        elif canvas.format is PixelFormat.RGB24:
            line = "".join(
                f"{_RED}{shade(row[x * 3])}{_RESET}"
                f"{_GREEN}{shade(row[x * 3 + 1])}{_RESET}"
                f"{_BLUE}{shade(row[x * 3 + 2])}{_RESET}"
                for x in range(width)
            )
        else:
            raise ValueError(f"cannot render a {canvas.format.name} canvas as text")
        lines.append(line)
    return "\n".join(lines)