"""
High-level API for reading and writing QOI images.
"""

from .qoi_image import QOIImage

__all__ = ["QOIImage"]
