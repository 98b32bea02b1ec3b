"""
Generic Transcoder
==================
Bidirectional UTF-16BE <-> UTF-8 conversion over null-terminated buffers.
"""

import codecs
from typing import Optional

import structlog

from ..config import TRANSCODE_EXPANSION
from ..exceptions import BufferOverflowError, TranscodeError
from ..scanner import StringInfo, utf16be_string_info, utf8_string_info
from .models import Direction

logger = structlog.get_logger(__name__)


def _measure(data: memoryview, direction: Direction) -> StringInfo:
    if direction is Direction.WIDE_TO_BYTES:
        return utf16be_string_info(data)
    return utf8_string_info(data)


def convert(data: bytes, direction: Direction) -> bytes:
    """
    Convert a null-terminated buffer to the other encoding.

    Args:
        data: Source buffer, ending at its null form or at end of buffer
        direction: Which way to convert

    Returns:
        New buffer in the target encoding, including its terminator

    Raises:
        TranscodeError: If the input cannot be converted
        BufferOverflowError: If the output exceeds four bytes per input unit
    """
    view = memoryview(data).cast("B")
    info = _measure(view, direction)
    capacity = TRANSCODE_EXPANSION * info.unit_count

    # Codec state is created per call and never shared
    decoder = codecs.getincrementaldecoder(direction.source_encoding)("strict")
    encoder = codecs.getincrementalencoder(direction.target_encoding)("strict")

    try:
        text = decoder.decode(bytes(view[:info.byte_count]), final=True)
        output = encoder.encode(text, final=True)
    except UnicodeError as e:
        raise TranscodeError(
            getattr(e, "reason", str(e)),
            direction=direction.value,
            offset=getattr(e, "start", None),
        ) from e

    if len(output) > capacity:
        raise BufferOverflowError(
            f"output of {len(output)} bytes exceeds capacity of {capacity}",
            direction=direction.value,
        )

    return output + direction.terminator


def transcode(data: bytes, direction: Direction) -> Optional[bytes]:
    """
    Convert a null-terminated buffer, returning None on failure.

    Args:
        data: Source buffer, ending at its null form or at end of buffer
        direction: Which way to convert

    Returns:
        New buffer in the target encoding, or None if conversion failed
    """
    try:
        result = convert(data, direction)
    except TranscodeError as e:
        logger.warning(
            "Transcoding failed",
            direction=direction.value,
            reason=e.reason,
            offset=e.offset,
        )
        return None

    logger.debug("Transcoded buffer", direction=direction.value, size=len(result))
    return result
