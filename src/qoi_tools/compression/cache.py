"""
Running color cache shared by the encoder and the decoder.

Both sides record every pixel they emit or produce, in the same order, so the
slot contents match at every position of the stream and index chunks resolve
identically.
"""

from typing import Iterator, Optional

from qoi_tools.constants import CACHE_SIZE
from qoi_tools.pixel import Pixel


def color_hash(pixel: Pixel) -> int:
    """Cache slot of a pixel."""
    return (pixel.r * 3 + pixel.g * 5 + pixel.b * 7 + pixel.a * 11) % CACHE_SIZE


class ColorCache:
    """
    Fixed table of 64 optional pixels addressed by :py:func:`color_hash`.

    A slot is written once and then kept for the rest of the pass.
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: list[Optional[Pixel]] = [None] * CACHE_SIZE

    def add(self, pixel: Pixel) -> int:
        """Record a pixel if its slot is still empty and return the slot."""
        index = color_hash(pixel)
        if self._slots[index] is None:
            self._slots[index] = pixel
        return index

    def find(self, pixel: Pixel) -> Optional[int]:
        """Return the slot holding exactly this pixel, if any."""
        index = color_hash(pixel)
        if self._slots[index] == pixel:
            return index
        return None

    def get(self, index: int) -> Optional[Pixel]:
        return self._slots[index]

    def snapshot(self) -> tuple[Optional[Pixel], ...]:
        return tuple(self._slots)

    def __iter__(self) -> Iterator[Optional[Pixel]]:
        return iter(self._slots)

    def __len__(self) -> int:
        return CACHE_SIZE

    def __repr__(self) -> str:
        used = sum(1 for slot in self._slots if slot is not None)
        return "%s(used=%d)" % (self.__class__.__name__, used)
