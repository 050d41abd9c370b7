import logging

import pytest

from qoi_tools.compression.codec import Decoder, Encoder, decode, encode
from qoi_tools.exceptions import (
    DecodeError,
    PixelCountMismatchError,
    TruncatedStreamError,
    UnresolvedIndexError,
)
from qoi_tools.pixel import Pixel

from ..utils import random_pixels

logger = logging.getLogger(__name__)

RUN_BYTES = bytes(range(0xC0, 0xFE))

GRADIENT = [Pixel(i % 256, (i * 3) % 256, (255 - i) % 256) for i in range(600)]


@pytest.mark.parametrize(
    "pixels",
    [
        [],
        [Pixel()],
        [Pixel()] * 5,
        [Pixel(1, 2, 3, 4)] * 200,
        GRADIENT,
        random_pixels(500, seed=1),
        random_pixels(500, seed=2, alpha=True),
        random_pixels(500, seed=3, colors=8),
        random_pixels(500, seed=4, colors=100, alpha=True),
    ],
)
def test_round_trip(pixels) -> None:
    encoded = encode(pixels)
    assert decode(encoded, len(pixels)) == pixels


def test_encode_accepts_iterator() -> None:
    pixels = random_pixels(50, seed=5)
    assert encode(iter(pixels)) == encode(pixels)


def test_single_default_pixel() -> None:
    assert encode([Pixel(0, 0, 0, 255)]) == b"\xfe\x00\x00\x00"
    assert decode(b"\xfe\x00\x00\x00", 1) == [Pixel(0, 0, 0, 255)]


def test_leading_seed_pixels() -> None:
    assert encode([Pixel()] * 5) == b"\xfe\x00\x00\x00\xc3"


def test_long_run_is_split() -> None:
    pixel = Pixel(10, 20, 30, 255)
    encoded = encode([pixel] * 71)
    assert encoded == b"\xfe\x0a\x14\x1e" + b"\xfd\xc7"
    assert decode(encoded, 71) == [pixel] * 71


@pytest.mark.parametrize("repeats", [1, 61, 62, 63, 124, 125, 500])
def test_run_cap(repeats) -> None:
    pixel = Pixel(10, 20, 30, 255)
    encoded = encode([pixel] * (repeats + 1))
    runs = encoded[4:]
    assert len(runs) == -(-repeats // 62)
    assert all(0xC0 <= byte <= 0xFD for byte in runs)
    assert sum((byte & 0x3F) + 1 for byte in runs) == repeats


def test_small_difference_uses_diff() -> None:
    encoded = encode([Pixel(5, 5, 5), Pixel(6, 5, 5)])
    assert encoded == b"\xa5\x88" + b"\x7a"
    assert decode(encoded, 2) == [Pixel(5, 5, 5), Pixel(6, 5, 5)]


def test_green_difference_uses_luma() -> None:
    previous = Pixel(100, 100, 100)
    current = Pixel(120, 120, 120)
    encoded = encode([previous, current])
    assert encoded[-2:] == b"\xb4\x88"
    assert decode(encoded, 2) == [previous, current]


def test_green_difference_beyond_luma_uses_rgb() -> None:
    previous = Pixel(100, 100, 100)
    current = Pixel(140, 140, 140)
    encoded = encode([previous, current])
    assert encoded[-4:] == b"\xfe\x8c\x8c\x8c"
    assert decode(encoded, 2) == [previous, current]


def test_index_preferred_over_diff() -> None:
    first = Pixel(10, 10, 10)
    second = Pixel(11, 10, 10)
    assert encode([first, second, first]) == b"\xaa\x88" + b"\x7a" + b"\x0b"


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_alpha_change_forces_rgba(seed) -> None:
    pixels = random_pixels(400, seed=seed, colors=20, alpha=True)
    encoder = Encoder()
    previous = Pixel()
    for pixel in pixels:
        emitted = encoder.feed(pixel)
        if pixel.a != previous.a:
            chunk = emitted.lstrip(RUN_BYTES)
            assert chunk[0] == 0xFF or chunk[0] < 0x40, (pixel, emitted)
        previous = pixel


def test_encoder_defers_runs() -> None:
    encoder = Encoder()
    pixel = Pixel(1, 2, 3)
    assert encoder.feed(pixel) == b"\xa2\x79"
    assert encoder.feed(pixel) == b""
    assert encoder.feed(pixel) == b""
    assert encoder.run == 2
    assert encoder.feed(Pixel(2, 2, 3)) == b"\xc1\x7a"
    assert encoder.flush() == b""


@pytest.mark.parametrize(
    "pixels",
    [
        random_pixels(300, seed=20, colors=70, alpha=True),
        random_pixels(300, seed=21),
    ],
)
def test_cache_symmetry(pixels) -> None:
    encoder = Encoder()
    data = bytearray()
    encoder_states = []
    for pixel in pixels:
        data += encoder.feed(pixel)
        encoder_states.append(encoder.cache.snapshot())
    data += encoder.flush()

    decoder = Decoder(bytes(data), len(pixels))
    decoder_states = []
    for pixel in decoder:
        decoder_states.append(decoder.cache.snapshot())

    assert decoder_states == encoder_states


def test_decode_run_from_seed() -> None:
    assert decode(b"\xc1", 2) == [Pixel(), Pixel()]


@pytest.mark.parametrize(
    "data, count, expected",
    [
        (b"\xfe\x01\x02\x03", 1, [Pixel(1, 2, 3, 255)]),
        (b"\xff\xc1\xc2\xc3\xc4", 1, [Pixel(0xC1, 0xC2, 0xC3, 0xC4)]),
        (b"\xff\x01\x02\x03\x04\xfe\x05\x06\x07", 2, [Pixel(1, 2, 3, 4), Pixel(5, 6, 7, 4)]),
    ],
)
def test_decode_literal_produces_one_pixel(data, count, expected) -> None:
    assert decode(data, count) == expected


@pytest.mark.parametrize(
    "data, count, error",
    [
        (b"", 1, TruncatedStreamError),
        (b"\xfe\x01\x02\x03", 2, TruncatedStreamError),
        (b"\xfe\x01\x02", 1, TruncatedStreamError),
        (b"\xff\x01\x02\x03", 1, TruncatedStreamError),
        (b"\xb4", 1, TruncatedStreamError),
        (b"\x05", 1, UnresolvedIndexError),
        (b"\xc4", 3, PixelCountMismatchError),
        (b"\xfe\x00\x00\x00\x6a", 1, PixelCountMismatchError),
        (b"\x6a", 0, PixelCountMismatchError),
    ],
)
def test_decode_errors(data, count, error) -> None:
    with pytest.raises(error):
        decode(data, count)
    with pytest.raises(DecodeError):
        decode(data, count)


def test_decode_empty() -> None:
    assert decode(b"", 0) == []
