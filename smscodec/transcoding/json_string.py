"""
JSON String Encoding
====================
Escape a wide-form string for a JSON string literal and convert it to UTF-8.
"""

from typing import Optional

import structlog

from ..config import ESCAPE_EXPANSION, UNIT_WIDTH
from ..scanner import utf16be_string_info
from .converter import transcode
from .models import Direction

logger = structlog.get_logger(__name__)

# Basic Latin characters that need a backslash escape, by escape letter
JSON_ESCAPES = {
    ord("\r"): ord("r"),
    ord("\n"): ord("n"),
    ord("\f"): ord("f"),
    ord("\b"): ord("b"),
    ord("\t"): ord("t"),
    ord("\\"): ord("\\"),
    ord('"'): ord('"'),
}


def encode_json_utf8(data: bytes) -> Optional[bytes]:
    """
    Copy a wide-form string into a new UTF-8 buffer usable as the body
    of a double-quoted JSON string.

    Escapes are inserted while the text is still UTF-16BE, so the UTF-8
    output needs no second pass and multi-byte sequences are never
    mistaken for ASCII.

    Args:
        data: Wide-form buffer, ending at a zero unit or at end of buffer

    Returns:
        Escaped UTF-8 bytes ending in one null byte, or None if the
        string could not be converted
    """
    view = memoryview(data).cast("B")
    info = utf16be_string_info(view)

    # Every unit escaped, plus the terminator
    scratch = bytearray(ESCAPE_EXPANSION * info.unit_count + UNIT_WIDTH)
    j = 0

    for index in range(info.unit_count):
        msb = view[UNIT_WIDTH * index]
        lsb = view[UNIT_WIDTH * index + 1]

        if msb == 0 and lsb in JSON_ESCAPES:
            scratch[j] = 0
            scratch[j + 1] = ord("\\")
            j += 2
            lsb = JSON_ESCAPES[lsb]

        scratch[j] = msb
        scratch[j + 1] = lsb
        j += 2

    scratch[j] = 0
    scratch[j + 1] = 0

    result = transcode(bytes(scratch[:j + UNIT_WIDTH]), Direction.WIDE_TO_BYTES)
    if result is None:
        logger.warning(
            "JSON string encoding failed",
            error=info.error.value,
            error_offset=info.error_offset,
        )
    return result
