"""
UTF-16BE Scanner
================
Single-pass metrics and surrogate validation for wide-form strings.
"""

from ..config import SURROGATE_FIRST, SURROGATE_LAST, SURROGATE_MIDDLE, UNIT_WIDTH
from .models import DecodeError, StringInfo


def is_surrogate(value: int) -> bool:
    return SURROGATE_FIRST <= value <= SURROGATE_LAST


def is_lead_surrogate(value: int) -> bool:
    return SURROGATE_FIRST <= value < SURROGATE_MIDDLE


def is_trail_surrogate(value: int) -> bool:
    return SURROGATE_MIDDLE <= value <= SURROGATE_LAST


def utf16be_string_info(data: bytes) -> StringInfo:
    """
    Scan a big-endian UTF-16 string up to its null unit.

    Counts bytes, code units and valid symbols. For malformed input the
    kind and byte offset of the *first* invalid sequence are recorded,
    along with the total number of bytes in all invalid sequences; the
    scan always runs to the terminator.

    Args:
        data: Wide-form buffer, ending at a zero unit or at end of buffer

    Returns:
        StringInfo for the string (check `is_valid`)
    """
    view = memoryview(data).cast("B")
    limit = len(view) - (len(view) % UNIT_WIDTH)

    offset = 0
    units = 0
    symbols = 0
    invalid = 0
    error = DecodeError.NONE
    error_offset = 0
    in_surrogate = False

    def record(kind: DecodeError) -> None:
        nonlocal invalid, error, error_offset
        invalid += UNIT_WIDTH
        if error is DecodeError.NONE:
            error = kind
            error_offset = offset

    while offset < limit:
        value = (view[offset] << 8) | view[offset + 1]

        if in_surrogate:
            in_surrogate = False
            if not is_trail_surrogate(value):
                # Dangling lead: re-examine this unit on the next pass
                record(DecodeError.UNMATCHED_SURROGATE)
                continue
            symbols += 1
        elif value == 0:
            break
        elif not is_surrogate(value):
            symbols += 1
        elif is_lead_surrogate(value):
            in_surrogate = True
        else:
            record(DecodeError.UNEXPECTED_SURROGATE)

        offset += UNIT_WIDTH
        units += 1

    if in_surrogate:
        record(DecodeError.UNMATCHED_SURROGATE)

    # Point at the lead surrogate, not the unit after it
    if error is DecodeError.UNMATCHED_SURROGATE:
        error_offset -= UNIT_WIDTH

    return StringInfo(
        byte_count=offset,
        unit_count=units,
        symbol_count=symbols,
        error=error,
        error_offset=error_offset,
        invalid_byte_count=invalid,
    )
