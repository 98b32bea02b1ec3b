"""
Transcode Models
================
Conversion direction between the wide form and UTF-8.
"""

from enum import Enum

from ..config import BYTE_ENCODING, WIDE_ENCODING


class Direction(str, Enum):
    """Which way a conversion runs."""
    WIDE_TO_BYTES = "utf-16-be->utf-8"
    BYTES_TO_WIDE = "utf-8->utf-16-be"

    @property
    def source_encoding(self) -> str:
        return WIDE_ENCODING if self is Direction.WIDE_TO_BYTES else BYTE_ENCODING

    @property
    def target_encoding(self) -> str:
        return BYTE_ENCODING if self is Direction.WIDE_TO_BYTES else WIDE_ENCODING

    @property
    def terminator(self) -> bytes:
        """Null form of the target encoding."""
        return b"\x00" if self is Direction.WIDE_TO_BYTES else b"\x00\x00"
