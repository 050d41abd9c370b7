"""
Chunk encoders and decoders.

Each encoder returns the chunk bytes, or ``None`` when the pixel does not
meet the chunk's precondition. Each decoder takes the stream and the offset
of the chunk's tag byte and returns the produced pixel along with the offset
of the next chunk.

Channel arithmetic wraps modulo 256 throughout; negative deltas are stored
as biased unsigned fields.

Chunk layout::

    INDEX  00iiiiii                         cache slot i
    DIFF   01rrggbb                         dr, dg, db biased by 2
    LUMA   10gggggg rrrrbbbb                dg biased by 32, dr-dg, db-dg by 8
    RUN    11llllll                         run length biased by -1
    RGB    11111110 r g b                   alpha unchanged
    RGBA   11111111 r g b a
"""

from typing import Optional

from qoi_tools.compression.cache import ColorCache
from qoi_tools.constants import MAX_RUN_LENGTH, Tag
from qoi_tools.exceptions import TruncatedStreamError, UnresolvedIndexError
from qoi_tools.pixel import Pixel

DIFF_BIAS = 2
LUMA_GREEN_BIAS = 32
LUMA_RB_BIAS = 8


def _delta(current: int, previous: int) -> int:
    return (current - previous) & 0xFF


def _read(data: bytes, offset: int, size: int) -> bytes:
    end = offset + size
    if end > len(data):
        raise TruncatedStreamError(
            "Chunk at offset %d needs %d bytes but only %d remain"
            % (offset, size, len(data) - offset)
        )
    return data[offset:end]


def encode_run(length: int) -> bytes:
    if not 1 <= length <= MAX_RUN_LENGTH:
        raise ValueError("Invalid run length %d" % length)
    return bytes((Tag.RUN | (length - 1),))


def encode_runs(length: int) -> bytes:
    """Split a run into as many capped run chunks as needed."""
    full, rest = divmod(length, MAX_RUN_LENGTH)
    result = encode_run(MAX_RUN_LENGTH) * full
    if rest:
        result += encode_run(rest)
    return result


def encode_index(cache: ColorCache, current: Pixel) -> Optional[bytes]:
    index = cache.find(current)
    if index is None:
        return None
    return bytes((Tag.INDEX | index,))


def encode_diff(previous: Pixel, current: Pixel) -> Optional[bytes]:
    if previous.a != current.a:
        return None

    dr = (_delta(current.r, previous.r) + DIFF_BIAS) & 0xFF
    dg = (_delta(current.g, previous.g) + DIFF_BIAS) & 0xFF
    db = (_delta(current.b, previous.b) + DIFF_BIAS) & 0xFF
    if dr > 3 or dg > 3 or db > 3:
        return None
    return bytes((Tag.DIFF | dr << 4 | dg << 2 | db,))


def encode_luma(previous: Pixel, current: Pixel) -> Optional[bytes]:
    if previous.a != current.a:
        return None

    dg_raw = _delta(current.g, previous.g)
    dg = (dg_raw + LUMA_GREEN_BIAS) & 0xFF
    # The green field is 6 bits wide.
    if dg > 0x3F:
        return None

    dr = (_delta(current.r, previous.r) - dg_raw + LUMA_RB_BIAS) & 0xFF
    db = (_delta(current.b, previous.b) - dg_raw + LUMA_RB_BIAS) & 0xFF
    if dr > 0x0F or db > 0x0F:
        return None
    return bytes((Tag.LUMA | dg, dr << 4 | db))


def encode_rgb(previous: Pixel, current: Pixel) -> Optional[bytes]:
    if previous.a != current.a:
        return None
    return bytes((Tag.RGB, current.r, current.g, current.b))


def encode_rgba(current: Pixel) -> bytes:
    return bytes((Tag.RGBA, current.r, current.g, current.b, current.a))


def encode_pixel(cache: ColorCache, previous: Pixel, current: Pixel) -> bytes:
    """
    Encode one pixel with the first applicable chunk kind, trying index,
    diff, luma, RGB and RGBA in that order.
    """
    return (
        encode_index(cache, current)
        or encode_diff(previous, current)
        or encode_luma(previous, current)
        or encode_rgb(previous, current)
        or encode_rgba(current)
    )


def decode_index(data: bytes, offset: int, cache: ColorCache) -> tuple[Pixel, int]:
    index = data[offset] & 0x3F
    pixel = cache.get(index)
    if pixel is None:
        raise UnresolvedIndexError(index, offset)
    return pixel, offset + 1


def decode_diff(data: bytes, offset: int, previous: Pixel) -> tuple[Pixel, int]:
    tag = data[offset]
    dr = ((tag >> 4) & 0x03) - DIFF_BIAS
    dg = ((tag >> 2) & 0x03) - DIFF_BIAS
    db = (tag & 0x03) - DIFF_BIAS
    pixel = Pixel(
        (previous.r + dr) & 0xFF,
        (previous.g + dg) & 0xFF,
        (previous.b + db) & 0xFF,
        previous.a,
    )
    return pixel, offset + 1


def decode_luma(data: bytes, offset: int, previous: Pixel) -> tuple[Pixel, int]:
    tag, extra = _read(data, offset, 2)
    dg = (tag & 0x3F) - LUMA_GREEN_BIAS
    dr = ((extra >> 4) & 0x0F) - LUMA_RB_BIAS + dg
    db = (extra & 0x0F) - LUMA_RB_BIAS + dg
    pixel = Pixel(
        (previous.r + dr) & 0xFF,
        (previous.g + dg) & 0xFF,
        (previous.b + db) & 0xFF,
        previous.a,
    )
    return pixel, offset + 2


def decode_run(data: bytes, offset: int) -> tuple[int, int]:
    """Return the run length and the next offset."""
    return (data[offset] & 0x3F) + 1, offset + 1


def decode_rgb(data: bytes, offset: int, previous: Pixel) -> tuple[Pixel, int]:
    _, r, g, b = _read(data, offset, 4)
    return Pixel(r, g, b, previous.a), offset + 4


def decode_rgba(data: bytes, offset: int) -> tuple[Pixel, int]:
    _, r, g, b, a = _read(data, offset, 5)
    return Pixel(r, g, b, a), offset + 5
