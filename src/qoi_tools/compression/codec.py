"""
Encoder and decoder driving loops.

The encoder walks the raster once, coalescing repeated pixels into run chunks
and coding every other pixel with :py:func:`~.chunks.encode_pixel`. The
decoder walks the chunk stream once and dispatches on the tag byte. Both keep
the previous pixel and a :py:class:`~.cache.ColorCache` in lock-step.

Example usage::

    from qoi_tools.compression.codec import decode, encode
    from qoi_tools.pixel import Pixel

    pixels = [Pixel(10, 20, 30), Pixel(11, 20, 30), Pixel(11, 20, 30)]
    data = encode(pixels)
    assert decode(data, len(pixels)) == pixels
"""

import logging
from typing import Iterable, Iterator

from qoi_tools.compression import chunks
from qoi_tools.compression.cache import ColorCache
from qoi_tools.constants import TAG_MASK, Tag
from qoi_tools.exceptions import (
    DecodeError,
    PixelCountMismatchError,
    TruncatedStreamError,
)
from qoi_tools.pixel import Pixel

logger = logging.getLogger(__name__)


class Encoder:
    """
    Single-pass encoder state.

    Feed pixels in raster order with :py:meth:`feed` and finish with
    :py:meth:`flush`. An instance encodes one image.
    """

    def __init__(self) -> None:
        self.cache = ColorCache()
        self.previous = Pixel()
        self.run = 0
        self.count = 0

    def feed(self, pixel: Pixel) -> bytes:
        """Consume one pixel and return the bytes it completes, if any."""
        if self.count and pixel == self.previous:
            self.run += 1
            result = b""
        elif pixel == self.previous:
            # The first pixel has nothing to repeat, so a copy of the seed
            # pixel is written as a literal.
            result = chunks.encode_rgb(self.previous, pixel) or chunks.encode_rgba(pixel)
        else:
            result = self.flush()
            result += chunks.encode_pixel(self.cache, self.previous, pixel)

        self.cache.add(pixel)
        self.previous = pixel
        self.count += 1
        return result

    def flush(self) -> bytes:
        """Emit the pending run, if any."""
        if not self.run:
            return b""
        result = chunks.encode_runs(self.run)
        self.run = 0
        return result


class Decoder:
    """
    Single-pass decoder state.

    Iterating yields exactly ``count`` pixels and then checks that the whole
    stream was consumed. An instance decodes one image.
    """

    def __init__(self, data: bytes, count: int) -> None:
        self.data = data
        self.count = count
        self.cache = ColorCache()
        self.previous = Pixel()
        self.offset = 0
        self.produced = 0

    def __iter__(self) -> Iterator[Pixel]:
        data = self.data
        length = len(data)

        while self.produced < self.count:
            if self.offset >= length:
                raise TruncatedStreamError(
                    "Stream ended after %d of %d pixels" % (self.produced, self.count)
                )

            repeat = 1
            tag = data[self.offset]
            if tag == Tag.RGB:
                pixel, self.offset = chunks.decode_rgb(data, self.offset, self.previous)
            elif tag == Tag.RGBA:
                pixel, self.offset = chunks.decode_rgba(data, self.offset)
            elif tag & TAG_MASK == Tag.INDEX:
                pixel, self.offset = chunks.decode_index(data, self.offset, self.cache)
            elif tag & TAG_MASK == Tag.DIFF:
                pixel, self.offset = chunks.decode_diff(data, self.offset, self.previous)
            elif tag & TAG_MASK == Tag.LUMA:
                pixel, self.offset = chunks.decode_luma(data, self.offset, self.previous)
            else:
                repeat, next_offset = chunks.decode_run(data, self.offset)
                if self.produced + repeat > self.count:
                    raise PixelCountMismatchError(
                        "Run of %d at offset %d exceeds %d pixels"
                        % (repeat, self.offset, self.count)
                    )
                pixel, self.offset = self.previous, next_offset

            for _ in range(repeat):
                self.cache.add(pixel)
                self.previous = pixel
                self.produced += 1
                yield pixel

        if self.offset != length:
            raise PixelCountMismatchError(
                "%d bytes remain after %d pixels" % (length - self.offset, self.count)
            )


def encode(pixels: Iterable[Pixel]) -> bytes:
    """
    Encode pixels in raster order into a chunk stream.

    :param pixels: iterable of :py:class:`~qoi_tools.pixel.Pixel`.
    :return: chunk stream bytes.
    """
    encoder = Encoder()
    output = bytearray()
    for pixel in pixels:
        output += encoder.feed(pixel)
    output += encoder.flush()
    logger.debug("encoded %d pixels into %d bytes" % (encoder.count, len(output)))
    return bytes(output)


def decode(data: bytes, count: int) -> list[Pixel]:
    """
    Decode a chunk stream into exactly ``count`` pixels.

    :param data: chunk stream bytes, without the end marker.
    :param count: expected number of pixels, width times height.
    :return: list of :py:class:`~qoi_tools.pixel.Pixel`.
    :raise DecodeError: when the stream is truncated, refers to an empty
        cache slot, or does not describe exactly ``count`` pixels.
    """
    try:
        pixels = list(Decoder(data, count))
    except DecodeError as e:
        logger.error(f"An error occurred during QOI decoding: {e}")
        logger.info(
            f"Decoding of QOI data failed: {count=} size={len(data)}", exc_info=True
        )
        raise
    logger.debug("decoded %d bytes into %d pixels" % (len(data), len(pixels)))
    return pixels
