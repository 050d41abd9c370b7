"""
File header structure.
"""

import logging
from typing import Any, BinaryIO, TypeVar

from attrs import astuple, define, field

from qoi_tools.constants import MAGIC, Channels, ColorSpace
from qoi_tools.exceptions import InvalidHeaderError
from qoi_tools.qoi.base import BaseElement
from qoi_tools.qoi.bin_utils import read_fmt, write_fmt
from qoi_tools.validators import in_, range_

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileHeader")


@define(repr=True)
class FileHeader(BaseElement):
    """
    Header section of the QOI file.

    Example::

        from qoi_tools.qoi.header import FileHeader
        from qoi_tools.constants import Channels, ColorSpace

        header = FileHeader(width=400, height=359, channels=Channels.RGBA,
                            colorspace=ColorSpace.SRGB)

    .. py:attribute:: signature

        Signature: always equal to ``b'qoif'``.

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: channels

        The number of channels of the source image. See
        :py:class:`~qoi_tools.constants.Channels`. Informational only.

    .. py:attribute:: colorspace

        See :py:class:`~qoi_tools.constants.ColorSpace`. Informational only.
    """

    _FORMAT = "4sIIBB"

    signature: bytes = field(default=MAGIC, repr=False)
    width: int = field(default=1, validator=range_(1, 0xFFFFFFFF))
    height: int = field(default=1, validator=range_(1, 0xFFFFFFFF))
    channels: Channels = field(
        default=Channels.RGBA, converter=Channels, validator=in_(Channels)
    )
    colorspace: ColorSpace = field(
        default=ColorSpace.SRGB, converter=ColorSpace, validator=in_(ColorSpace)
    )

    @signature.validator
    def _validate_signature(self, attribute: Any, value: bytes) -> None:
        if value != MAGIC:
            raise InvalidHeaderError("This is not a QOI file")

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        values = read_fmt(cls._FORMAT, fp)
        try:
            return cls(*values)
        except InvalidHeaderError:
            raise
        except ValueError as e:
            raise InvalidHeaderError("Invalid header %r: %s" % (values, e)) from e

    def write(self, fp: BinaryIO, **kwargs: Any) -> int:
        return write_fmt(fp, self._FORMAT, *astuple(self))

    @property
    def pixel_count(self) -> int:
        return self.width * self.height
