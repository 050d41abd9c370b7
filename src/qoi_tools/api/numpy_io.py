import logging

import numpy as np

from qoi_tools.constants import Channels
from qoi_tools.pixel import Pixel, iter_pixels, join_pixels

logger = logging.getLogger(__name__)


def get_pixels(array: np.ndarray) -> tuple[list[Pixel], Channels]:
    """Convert an ``(height, width, 3|4)`` uint8 array to pixels."""
    if not isinstance(array, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, got {type(array).__name__}")
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(f"Expected (height, width, 3|4) array, got {array.shape}")
    if array.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {array.dtype}")

    channels = Channels(array.shape[2])
    data = np.ascontiguousarray(array).tobytes()
    return list(iter_pixels(data, channels)), channels


def get_array(
    pixels: list[Pixel], width: int, height: int, channels: Channels
) -> np.ndarray:
    """Convert pixels to an ``(height, width, channels)`` uint8 array."""
    data = join_pixels(pixels, channels)
    array = np.frombuffer(data, dtype=np.uint8)
    return array.reshape((height, width, int(channels))).copy()
