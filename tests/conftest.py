"""Pytest configuration for qoi-tools tests."""

from typing import Iterator

import pytest
from PIL import Image


@pytest.fixture
def rgba_image() -> Iterator[Image.Image]:
    image = Image.new("RGBA", (8, 4), (10, 20, 30, 255))
    for x in range(8):
        image.putpixel((x, 1), (10 + x, 20, 30, 255))
        image.putpixel((x, 2), (200, 100 - 3 * x, 50, 128 + x))
    image.putpixel((0, 3), (0, 0, 0, 0))
    yield image


@pytest.fixture
def rgb_image(rgba_image: Image.Image) -> Iterator[Image.Image]:
    yield rgba_image.convert("RGB")
