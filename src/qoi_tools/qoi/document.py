"""
QOI document structure module.

This module contains the main QOI class that represents the low-level
binary structure of a QOI file.
"""

import logging
from typing import Any, BinaryIO, Optional, TypeVar

from attrs import define, field

from qoi_tools.compression import decode, encode
from qoi_tools.constants import END_MARKER
from qoi_tools.pixel import Pixel
from qoi_tools.qoi.base import BaseElement
from qoi_tools.qoi.bin_utils import trimmed_repr, write_bytes
from qoi_tools.qoi.header import FileHeader

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="QOI")


@define(repr=False)
class QOI(BaseElement):
    """
    Low-level QOI file structure.

    Example::

        from qoi_tools.qoi import QOI

        with open(input_file, 'rb') as f:
            qoi = QOI.read(f)

        with open(output_file, 'wb') as f:
            qoi.write(f)

    .. py:attribute:: header

        See :py:class:`.FileHeader`.

    .. py:attribute:: data

        Chunk stream `bytes`, without the end marker.
    """

    header: FileHeader = field(factory=FileHeader)
    data: bytes = b""

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        header = FileHeader.read(fp)
        logger.debug("read %s" % header)
        data = fp.read()
        if data.endswith(END_MARKER):
            data = data[: -len(END_MARKER)]
        else:
            logger.warning("End marker is missing, trailing bytes %s" % trimmed_repr(data[-8:]))
        logger.debug("  read chunk data, len=%d" % len(data))
        return cls(header, data)

    def write(self, fp: BinaryIO, **kwargs: Any) -> int:
        written = self.header.write(fp)
        logger.debug("wrote %s" % self.header)
        written += write_bytes(fp, self.data)
        written += write_bytes(fp, END_MARKER)
        logger.debug("  wrote chunk data, len=%d" % len(self.data))
        return written

    def get_pixels(self) -> list[Pixel]:
        """Decode the chunk stream into width x height pixels."""
        return decode(self.data, self.header.pixel_count)

    def set_pixels(self, pixels: list[Pixel], header: Optional[FileHeader] = None) -> None:
        """Encode pixels into the chunk stream."""
        if header is not None:
            self.header = header
        if len(pixels) != self.header.pixel_count:
            raise ValueError(
                "Expected %d pixels but got %d" % (self.header.pixel_count, len(pixels))
            )
        self.data = encode(pixels)

    def __repr__(self) -> str:
        return "QOI(header=%r, data=%s)" % (self.header, trimmed_repr(self.data))
