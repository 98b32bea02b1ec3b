"""
Scanner Models
==============
Data models for string scan results.
"""

from dataclasses import dataclass
from enum import Enum


class DecodeError(str, Enum):
    """Kind of the first invalid sequence found by a scan."""
    NONE = "none"
    UNMATCHED_SURROGATE = "unmatched_surrogate"
    UNEXPECTED_SURROGATE = "unexpected_surrogate"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StringInfo:
    """
    Structural metrics of one scanned string.

    `error` and `error_offset` describe only the first invalid sequence;
    `invalid_byte_count` totals the bytes of every invalid sequence.
    """
    byte_count: int = 0
    unit_count: int = 0
    symbol_count: int = 0
    error: DecodeError = DecodeError.NONE
    error_offset: int = 0  # Byte offset, meaningful only when error is set
    invalid_byte_count: int = 0

    @property
    def is_valid(self) -> bool:
        return self.invalid_byte_count == 0
