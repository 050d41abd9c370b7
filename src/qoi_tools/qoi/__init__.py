"""
Low-level API that translates binary data to Python structure.

All the data structure in this subpackage inherits from one of the object
defined in :py:mod:`qoi_tools.qoi.base` module.
"""

from .document import QOI as QOI
from .header import FileHeader as FileHeader

__all__ = ["QOI", "FileHeader"]
