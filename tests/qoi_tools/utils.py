import logging
import tempfile
from typing import Any, Type, TypeVar

import numpy as np

from qoi_tools.pixel import Pixel
from qoi_tools.qoi.base import BaseElement
from qoi_tools.qoi.bin_utils import trimmed_repr

T = TypeVar("T", bound=BaseElement)

logging.basicConfig(level=logging.DEBUG)


def random_pixels(
    count: int, seed: int = 0, colors: int = 0, alpha: bool = False
) -> list[Pixel]:
    """
    Make a reproducible pixel sequence.

    With ``colors`` set, pixels are drawn from a small palette and repeated in
    short bursts so that runs and index chunks show up. Otherwise channels
    drift by small random steps, which exercises diff and luma chunks.
    """
    rng = np.random.default_rng(seed)
    if colors:
        palette = rng.integers(0, 256, size=(colors, 4))
        if not alpha:
            palette[:, 3] = 255
        result: list[Pixel] = []
        while len(result) < count:
            color = Pixel(*(int(v) for v in palette[rng.integers(0, colors)]))
            result.extend([color] * int(rng.integers(1, 5)))
        return result[:count]

    steps = rng.integers(-40, 41, size=(count, 4))
    if not alpha:
        steps[:, 3] = 0
    values = np.cumsum(steps, axis=0) % 256
    if not alpha:
        values[:, 3] = 255
    return [Pixel(*(int(v) for v in row)) for row in values]


def check_write_read(element: T, *args: Any, **kwargs: Any) -> None:
    with tempfile.TemporaryFile() as f:
        element.write(f, *args, **kwargs)
        f.flush()
        f.seek(0)
        new_element = element.read(f, *args, **kwargs)
    assert element == new_element, "%s vs %s" % (element, new_element)


def check_read_write(cls: Type[T], data: bytes, *args: Any, **kwargs: Any) -> None:
    element = cls.frombytes(data, *args, **kwargs)
    new_data = element.tobytes(*args, **kwargs)
    assert data == new_data, "%s vs %s" % (trimmed_repr(data), trimmed_repr(new_data))
