"""
Exceptions raised by qoi_tools.

Every error derives from :py:class:`QOIError`, which is also a
:py:class:`ValueError` so callers checking for malformed data the usual way
keep working.
"""


class QOIError(ValueError):
    """Base class for all qoi_tools errors."""


class InvalidHeaderError(QOIError):
    """The file header is missing, short, or carries invalid values."""


class DecodeError(QOIError):
    """The chunk stream cannot be decoded."""


class TruncatedStreamError(DecodeError):
    """A chunk needs more bytes than the stream holds."""


class UnresolvedIndexError(DecodeError):
    """An index chunk refers to a cache slot that was never populated."""

    def __init__(self, index: int, offset: int):
        super().__init__(
            "Index chunk at offset %d refers to empty cache slot %d" % (offset, index)
        )
        self.index = index
        self.offset = offset


class PixelCountMismatchError(DecodeError):
    """The stream describes more or fewer pixels than the header implies."""
