"""
Pixel value type shared by the encoder and the decoder.
"""

from typing import Iterable, Iterator, TypeVar

from attrs import astuple, define, field

from qoi_tools.validators import range_

T = TypeVar("T", bound="Pixel")


@define(frozen=True)
class Pixel:
    """
    Immutable RGBA pixel with 8-bit channels.

    The default value is opaque black, which is also the implicit pixel that
    precedes the first pixel of every image.

    .. py:attribute:: r
    .. py:attribute:: g
    .. py:attribute:: b
    .. py:attribute:: a
    """

    r: int = field(default=0, validator=range_(0, 255))
    g: int = field(default=0, validator=range_(0, 255))
    b: int = field(default=0, validator=range_(0, 255))
    a: int = field(default=255, validator=range_(0, 255))

    @classmethod
    def frombytes(cls: type[T], data: bytes, channels: int = 4) -> T:
        """Make a pixel from 3 (RGB) or 4 (RGBA) bytes."""
        if channels == 3:
            return cls(data[0], data[1], data[2])
        return cls(data[0], data[1], data[2], data[3])

    def tobytes(self, channels: int = 4) -> bytes:
        return bytes(astuple(self)[:channels])


def iter_pixels(data: bytes, channels: int = 4) -> Iterator[Pixel]:
    """Iterate over pixels of interleaved raw bytes."""
    if channels not in (3, 4):
        raise ValueError("Invalid channel count %d" % channels)
    if len(data) % channels:
        raise ValueError(
            "Data length %d is not a multiple of %d channels" % (len(data), channels)
        )
    view = memoryview(data)
    for offset in range(0, len(data), channels):
        yield Pixel.frombytes(view[offset : offset + channels], channels)


def join_pixels(pixels: Iterable[Pixel], channels: int = 4) -> bytes:
    """Interleave pixels back into raw bytes."""
    if channels not in (3, 4):
        raise ValueError("Invalid channel count %d" % channels)
    return b"".join(pixel.tobytes(channels) for pixel in pixels)
