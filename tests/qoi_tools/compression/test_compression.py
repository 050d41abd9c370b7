import logging

import pytest

from qoi_tools.compression import compress, decompress
from qoi_tools.exceptions import DecodeError, TruncatedStreamError

logger = logging.getLogger(__name__)

RAW_IMAGE_3x1_RGB = b"\x00\x01\x02\x01\x01\x01\x01\x00\x00"
RAW_IMAGE_2x2_RGBA = (
    b"\x00\x00\x00\xff\x00\x00\x00\xff\x10\x20\x30\x80\x00\x00\x00\xff"
)


@pytest.mark.parametrize(
    "data, width, height, channels",
    [
        (RAW_IMAGE_3x1_RGB, 3, 1, 3),
        (RAW_IMAGE_3x1_RGB, 1, 3, 3),
        (RAW_IMAGE_2x2_RGBA, 2, 2, 4),
        (RAW_IMAGE_2x2_RGBA, 4, 1, 4),
        (bytes(bytearray(range(256))), 8, 8, 4),
        (bytes(bytearray(range(255))), 17, 5, 3),
    ],
)
def test_compress_decompress(data, width, height, channels) -> None:
    compressed = compress(data, width, height, channels)
    output = decompress(compressed, width, height, channels)
    assert output == data, "output=%r, expected=%r" % (output, data)


def test_decompress_adds_alpha() -> None:
    compressed = compress(RAW_IMAGE_3x1_RGB, 3, 1, 3)
    output = decompress(compressed, 3, 1, 4)
    assert output == b"\x00\x01\x02\xff\x01\x01\x01\xff\x01\x00\x00\xff"


def test_decompress_drops_alpha() -> None:
    compressed = compress(RAW_IMAGE_2x2_RGBA, 2, 2, 4)
    assert decompress(compressed, 2, 2, 3) == (
        b"\x00\x00\x00\x00\x00\x00\x10\x20\x30\x00\x00\x00"
    )


@pytest.mark.parametrize(
    "data, width, height, channels",
    [
        (RAW_IMAGE_3x1_RGB, 2, 1, 3),
        (RAW_IMAGE_3x1_RGB, 3, 1, 4),
        (RAW_IMAGE_2x2_RGBA, 2, 2, 5),
    ],
)
def test_compress_invalid(data, width, height, channels) -> None:
    with pytest.raises(ValueError):
        compress(data, width, height, channels)


def test_decompress_corrupt(caplog) -> None:
    compressed = compress(RAW_IMAGE_2x2_RGBA, 2, 2, 4)
    with caplog.at_level(logging.INFO, logger="qoi_tools.compression"):
        with pytest.raises(TruncatedStreamError):
            decompress(compressed[:-1], 2, 2, 4)
    assert "An error occurred during QOI decoding" in caplog.text

    with pytest.raises(DecodeError):
        decompress(compressed, 3, 2, 4)
