"""
Codec Exceptions
================
Exception classes for transcoding operations.
"""

from typing import Optional


class SMSCodecError(Exception):
    """Base exception for all codec errors."""
    pass


class TranscodeError(SMSCodecError):
    """Raised when a buffer cannot be converted to the target encoding."""

    def __init__(self, reason: str, direction: Optional[str] = None, offset: Optional[int] = None):
        self.reason = reason
        self.direction = direction
        self.offset = offset
        super().__init__(f"[{direction}] {reason} (offset: {offset})")


class BufferOverflowError(TranscodeError):
    """Raised when converted output would exceed the allotted capacity."""
    pass
