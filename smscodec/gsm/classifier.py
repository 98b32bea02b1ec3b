"""
GSM Classification
==================
Whole-string checks used to choose an outbound transport encoding.
"""

from ..config import UNIT_WIDTH, WIDE_ENCODING
from ..scanner import utf16be_string_info
from .alphabet import is_gsm_codepoint
from .models import EncodingType


def is_gsm_string(data: bytes) -> bool:
    """
    Check whether a wide-form string fits the GSM default alphabet.

    Stops at the first character that does not fit. Surrogate units
    never fit, so any astral symbol makes the string non-GSM.

    Args:
        data: Wide-form buffer, ending at a zero unit or at end of buffer

    Returns:
        True if every character is representable (True for empty input)
    """
    view = memoryview(data).cast("B")
    info = utf16be_string_info(view)

    for index in range(info.unit_count):
        offset = index * UNIT_WIDTH
        if not is_gsm_codepoint(view[offset], view[offset + 1]):
            return False

    return True


def is_gsm_text(text: str) -> bool:
    """Check whether a decoded string fits the GSM default alphabet."""
    return is_gsm_string(text.encode(WIDE_ENCODING, "surrogatepass"))


def detect_encoding(data: bytes) -> EncodingType:
    """
    Detect the required transport encoding for a wide-form message.

    Args:
        data: Wide-form message body

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    if is_gsm_string(data):
        return EncodingType.GSM7
    return EncodingType.UCS2
