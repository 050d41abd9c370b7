"""
Binary processing utilities for the QOI container.
"""

import struct
from typing import Any, BinaryIO

from qoi_tools.exceptions import InvalidHeaderError


def read_fmt(fmt: str, fp: BinaryIO) -> tuple[Any, ...]:
    """
    Reads data from ``fp`` according to ``fmt``.
    """
    fmt = str(">" + fmt)
    fmt_size = struct.calcsize(fmt)
    data = fp.read(fmt_size)
    if len(data) != fmt_size:
        raise InvalidHeaderError(
            "Expected %d bytes but read %d bytes" % (fmt_size, len(data))
        )
    return struct.unpack(fmt, data)


def write_fmt(fp: BinaryIO, fmt: str, *args: Any) -> int:
    """
    Writes data to ``fp`` according to ``fmt``.
    """
    fmt = str(">" + fmt)
    fmt_size = struct.calcsize(fmt)
    written = write_bytes(fp, struct.pack(fmt, *args))
    assert written == fmt_size, "written=%d, expected=%d" % (written, fmt_size)
    return written


def write_bytes(fp: BinaryIO, data: bytes) -> int:
    """
    Write bytes to the file object and return the number of bytes written.
    """
    assert isinstance(data, (bytes, bytearray))
    written = fp.write(data)
    assert written is not None
    assert written == len(data), "written=%d, expected=%d" % (written, len(data))
    return written


def trimmed_repr(data: Any, trim_length: int = 16) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(
                data[:trim_length] + b" ... =" + str(len(data)).encode("ascii")
            )
    return repr(data)
