"""
qoi-tools: Python package for reading and writing QOI images.

QOI is a lossless image format that codes each pixel as a short chunk: a
reference into a table of recently seen colors, a small or large difference
to the previous pixel, a run of repeats, or a literal color.

Basic usage::

    from qoi_tools import QOIImage

    # Open and decode a QOI file
    qoi = QOIImage.open('example.qoi')
    print(qoi.size)

    # Export to PNG
    qoi.topil().save('output.png')

Architecture:

- :py:mod:`qoi_tools.qoi`: Low-level binary structure parsing/writing
- :py:mod:`qoi_tools.api`: High-level user-facing API (primary interface)
- :py:mod:`qoi_tools.compression`: The chunk stream codec
"""

from qoi_tools.api.qoi_image import QOIImage
from qoi_tools.version import __version__

__all__ = ["QOIImage", "__version__"]
