"""
Various constants for qoi_tools
"""

from enum import IntEnum

#: File signature at the start of every QOI file.
MAGIC = b"qoif"

#: Byte sequence that terminates the chunk stream.
END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"

#: Number of slots in the running color cache.
CACHE_SIZE = 64

#: Longest run a single run chunk can carry.
MAX_RUN_LENGTH = 62

#: Mask selecting the two-bit tag of a chunk's first byte.
TAG_MASK = 0xC0


class Tag(IntEnum):
    """
    Chunk tags.

    The four two-bit tags occupy the top bits of the first byte. ``RGB`` and
    ``RGBA`` are full-byte markers that take precedence over the two-bit tags.
    """

    INDEX = 0x00
    DIFF = 0x40
    LUMA = 0x80
    RUN = 0xC0
    RGB = 0xFE
    RGBA = 0xFF


class ColorSpace(IntEnum):
    """
    Colorspace byte of the header. Informational only.
    """

    SRGB = 0
    LINEAR = 1


class Channels(IntEnum):
    """
    Channel count of the header. Informational only, the codec always works
    on four channels.
    """

    RGB = 3
    RGBA = 4

    @property
    def pil_mode(self) -> str:
        return self.name
