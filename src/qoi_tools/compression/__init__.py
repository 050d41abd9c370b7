"""
Lossless image compression codec.

This subpackage converts RGBA pixels to the QOI chunk stream and back. The
stream is a sequence of variable-length chunks:

- **INDEX** (``Tag.INDEX``): reference to a recently seen color
- **DIFF** (``Tag.DIFF``): small per-channel difference to the previous pixel
- **LUMA** (``Tag.LUMA``): larger difference, coded relative to green
- **RUN** (``Tag.RUN``): repeat the previous pixel up to 62 times
- **RGB** / **RGBA** (``Tag.RGB``, ``Tag.RGBA``): literal color

Key functions:

- :py:func:`encode`: Encode a pixel sequence into a chunk stream
- :py:func:`decode`: Decode a chunk stream into a pixel sequence
- :py:func:`compress`: Compress interleaved raw RGB or RGBA bytes
- :py:func:`decompress`: Decompress back to interleaved raw bytes

Example usage::

    from qoi_tools.compression import compress, decompress

    compressed = compress(data=raw_pixels, width=100, height=100, channels=4)
    raw_pixels = decompress(data=compressed, width=100, height=100, channels=4)

The codec always works on four channels. With ``channels=3`` alpha is filled
with 255 on the way in and dropped on the way out.
"""

from qoi_tools.compression.cache import ColorCache, color_hash
from qoi_tools.compression.codec import Decoder, Encoder, decode, encode
from qoi_tools.pixel import iter_pixels, join_pixels

__all__ = [
    "ColorCache",
    "Decoder",
    "Encoder",
    "color_hash",
    "compress",
    "decode",
    "decompress",
    "encode",
]


def compress(data: bytes, width: int, height: int, channels: int = 4) -> bytes:
    """Compress raw data.

    :param data: interleaved raw pixel bytes.
    :param width: width.
    :param height: height.
    :param channels: bytes per pixel in ``data``, 3 or 4.
    :return: chunk stream bytes.
    """
    length = width * height * channels
    if len(data) != length:
        raise ValueError("len=%d, expected=%d" % (len(data), length))
    return encode(iter_pixels(data, channels))


def decompress(data: bytes, width: int, height: int, channels: int = 4) -> bytes:
    """Decompress raw data.

    :param data: chunk stream bytes.
    :param width: width.
    :param height: height.
    :param channels: bytes per pixel in the result, 3 or 4.
    :return: interleaved raw pixel bytes.
    :raise DecodeError: when the chunk stream is corrupt.
    """
    pixels = decode(data, width * height)
    result = join_pixels(pixels, channels)
    assert len(result) == width * height * channels, "len=%d, expected=%d" % (
        len(result),
        width * height * channels,
    )
    return result
