"""
UTF-8 Scanner
=============
Sizing-only metrics for byte-form strings.
"""

from .models import StringInfo


def utf8_string_info(data: bytes) -> StringInfo:
    """
    Count the bytes and lead bytes of a UTF-8 string up to its null byte.

    Every byte whose top two bits are not `10` counts as one unit and one
    symbol. This is a structural estimate used to size conversion output;
    malformed input is not detected and the result is always valid.
    """
    view = memoryview(data).cast("B")

    end = 0
    units = 0
    for byte in view:
        if byte == 0:
            break
        if (byte & 0xC0) != 0x80:
            units += 1
        end += 1

    return StringInfo(byte_count=end, unit_count=units, symbol_count=units)
