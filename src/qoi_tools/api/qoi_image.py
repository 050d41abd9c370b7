"""
QOI Image module.

This module provides the main :py:class:`QOIImage` class, which is the primary
entry point for users of qoi-tools. It wraps the low-level
:py:class:`~qoi_tools.qoi.QOI` structure and converts between the chunk
stream and pixels, PIL images and numpy arrays.

Key functionality:

- **Opening files**: :py:meth:`QOIImage.open`
- **Creating images**: :py:meth:`QOIImage.new`, :py:meth:`QOIImage.frompil`,
  :py:meth:`QOIImage.fromarray` and :py:meth:`QOIImage.frompixels`
- **Pixel access**: :py:meth:`~QOIImage.pixels`, :py:meth:`~QOIImage.topil`
  and :py:meth:`~QOIImage.numpy`
- **Saving**: :py:meth:`QOIImage.save`

Example usage::

    from PIL import Image
    from qoi_tools import QOIImage

    # Encode a PNG
    qoi = QOIImage.frompil(Image.open('input.png'))
    qoi.save('output.qoi')

    # Decode it back
    qoi = QOIImage.open('output.qoi')
    print(f"Size: {qoi.width}x{qoi.height}")
    qoi.topil().save('roundtrip.png')
"""

import logging
import os
from typing import Any, BinaryIO, Optional, TypeVar, Union

import numpy as np
from PIL import Image

from qoi_tools.api import numpy_io, pil_io
from qoi_tools.constants import Channels, ColorSpace
from qoi_tools.pixel import Pixel
from qoi_tools.qoi import QOI, FileHeader

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="QOIImage")


class QOIImage:
    """
    QOI image document.

    The low-level data structure is accessible at :py:attr:`QOIImage._record`.
    Pixels are decoded on first access and kept afterwards.

    Example::

        from qoi_tools import QOIImage

        qoi = QOIImage.open('example.qoi')
        image = qoi.topil()
    """

    def __init__(self, data: QOI, pixels: Optional[list[Pixel]] = None):
        if not isinstance(data, QOI):
            raise TypeError(f"Expected QOI instance, got {type(data).__name__}")
        self._record = data
        self._pixels = pixels

    @classmethod
    def new(
        cls: type[T],
        size: tuple[int, int],
        color: tuple[int, ...] = (0, 0, 0, 255),
        channels: Channels = Channels.RGBA,
        colorspace: ColorSpace = ColorSpace.SRGB,
    ) -> T:
        """
        Create a new image filled with a single color.

        :param size: A tuple containing (width, height) in pixels.
        :param color: RGB or RGBA tuple. Default is opaque black.
        :param channels: See :py:class:`~qoi_tools.constants.Channels`.
        :param colorspace: See :py:class:`~qoi_tools.constants.ColorSpace`.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        pixel = Pixel(*color)
        return cls.frompixels([pixel] * (size[0] * size[1]), size, channels, colorspace)

    @classmethod
    def frompixels(
        cls: type[T],
        pixels: list[Pixel],
        size: tuple[int, int],
        channels: Channels = Channels.RGBA,
        colorspace: ColorSpace = ColorSpace.SRGB,
    ) -> T:
        """
        Create an image from pixels in raster order.

        :param pixels: list of :py:class:`~qoi_tools.pixel.Pixel`.
        :param size: A tuple containing (width, height) in pixels.
        :param channels: See :py:class:`~qoi_tools.constants.Channels`.
        :param colorspace: See :py:class:`~qoi_tools.constants.ColorSpace`.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        header = FileHeader(
            width=size[0], height=size[1], channels=channels, colorspace=colorspace
        )
        record = QOI(header=header)
        record.set_pixels(pixels)
        return cls(record, pixels)

    @classmethod
    def frompil(
        cls: type[T], image: Image.Image, colorspace: ColorSpace = ColorSpace.SRGB
    ) -> T:
        """
        Create an image from PIL Image.

        :param image: PIL Image object. Modes other than RGB and RGBA are
            converted first.
        :param colorspace: See :py:class:`~qoi_tools.constants.ColorSpace`.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        pixels, channels = pil_io.get_pixels(image)
        return cls.frompixels(pixels, image.size, channels, colorspace)

    @classmethod
    def fromarray(
        cls: type[T], array: np.ndarray, colorspace: ColorSpace = ColorSpace.SRGB
    ) -> T:
        """
        Create an image from a numpy array.

        :param array: ``(height, width, 3)`` or ``(height, width, 4)`` uint8
            array.
        :param colorspace: See :py:class:`~qoi_tools.constants.ColorSpace`.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        pixels, channels = numpy_io.get_pixels(array)
        height, width = array.shape[:2]
        return cls.frompixels(pixels, (width, height), channels, colorspace)

    @classmethod
    def open(cls: type[T], fp: Union[BinaryIO, str, bytes, os.PathLike], **kwargs: Any) -> T:
        """
        Open a QOI image.

        :param fp: filename or file-like object.
        :return: A :py:class:`~qoi_tools.api.qoi_image.QOIImage` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, "rb") as f:
                self = cls(QOI.read(f, **kwargs))
        else:
            self = cls(QOI.read(fp, **kwargs))
        return self

    def save(
        self,
        fp: Union[BinaryIO, str, bytes, os.PathLike],
        mode: str = "wb",
        **kwargs: Any,
    ) -> None:
        """
        Save the QOI file.

        :param fp: filename or file-like object.
        :param mode: file open mode, default 'wb'.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, mode) as f:
                self._record.write(f, **kwargs)
        else:
            self._record.write(fp, **kwargs)

    def pixels(self) -> list[Pixel]:
        """
        Decoded pixels in raster order.

        :return: list of :py:class:`~qoi_tools.pixel.Pixel`.
        :raise DecodeError: when the chunk stream is corrupt.
        """
        if self._pixels is None:
            self._pixels = self._record.get_pixels()
        return self._pixels

    def topil(self) -> Image.Image:
        """
        Get PIL Image.

        :return: :py:class:`PIL.Image` in RGB or RGBA mode, following
            :py:attr:`channels`.
        """
        return pil_io.convert_pixels_to_pil(
            self.pixels(), self.width, self.height, self.channels
        )

    def numpy(self) -> np.ndarray:
        """
        Get numpy array of the image.

        :return: :py:class:`numpy.ndarray` of shape ``(height, width,
            channels)`` and dtype uint8.
        """
        return numpy_io.get_array(self.pixels(), self.width, self.height, self.channels)

    @property
    def header(self) -> FileHeader:
        return self._record.header

    @property
    def width(self) -> int:
        """
        Document width.

        :return: `int`
        """
        return self._record.header.width

    @property
    def height(self) -> int:
        """
        Document height.

        :return: `int`
        """
        return self._record.header.height

    @property
    def size(self) -> tuple[int, int]:
        """
        (width, height) tuple.

        :return: `tuple`
        """
        return self.width, self.height

    @property
    def channels(self) -> Channels:
        """
        Number of channels declared in the header.

        :return: :py:class:`~qoi_tools.constants.Channels`
        """
        return self._record.header.channels

    @property
    def colorspace(self) -> ColorSpace:
        """
        Colorspace declared in the header.

        :return: :py:class:`~qoi_tools.constants.ColorSpace`
        """
        return self._record.header.colorspace

    @property
    def mode(self) -> str:
        """PIL mode matching :py:attr:`channels`."""
        return pil_io.get_pil_mode(self.channels)

    def __repr__(self) -> str:
        return "%s(size=%dx%d, channels=%d, colorspace=%s, data=%d bytes)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            self.channels,
            self.colorspace.name,
            len(self._record.data),
        )
