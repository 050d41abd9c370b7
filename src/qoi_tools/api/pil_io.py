"""
PIL IO module.
"""

import logging

from PIL import Image

from qoi_tools.constants import Channels
from qoi_tools.pixel import Pixel, iter_pixels, join_pixels

logger = logging.getLogger(__name__)


def get_channels(image: Image.Image) -> Channels:
    """Pick the QOI channel count for a PIL image."""
    if image.mode in ("RGBA", "LA", "PA", "RGBa", "La"):
        return Channels.RGBA
    if "transparency" in image.info:
        return Channels.RGBA
    return Channels.RGB


def get_pil_mode(channels: Channels) -> str:
    """Get PIL mode from Channels."""
    return Channels(channels).pil_mode


def get_pixels(image: Image.Image) -> tuple[list[Pixel], Channels]:
    """Convert PIL Image to pixels."""
    channels = get_channels(image)
    mode = get_pil_mode(channels)
    if image.mode != mode:
        logger.debug("convert %s image to %s" % (image.mode, mode))
        image = image.convert(mode)
    return list(iter_pixels(image.tobytes(), channels)), channels


def convert_pixels_to_pil(
    pixels: list[Pixel], width: int, height: int, channels: Channels
) -> Image.Image:
    """Convert pixels to PIL Image."""
    mode = get_pil_mode(channels)
    return Image.frombytes(mode, (width, height), join_pixels(pixels, channels))
