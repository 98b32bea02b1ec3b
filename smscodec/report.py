"""
Encoding Report
===============
Serialisable summary of a wide-form message for outbound preparation.
"""

from pydantic import BaseModel

from .gsm import EncodingType, detect_encoding
from .scanner import DecodeError, utf16be_string_info


class EncodingReport(BaseModel):
    byte_count: int
    unit_count: int
    symbol_count: int
    valid: bool
    error: DecodeError
    error_offset: int
    invalid_byte_count: int
    encoding: EncodingType


def inspect_message(data: bytes) -> EncodingReport:
    """
    Scan a wide-form message body and pick its transport encoding.

    Args:
        data: Wide-form message body

    Returns:
        EncodingReport suitable for `model_dump()`
    """
    view = memoryview(data).cast("B")
    info = utf16be_string_info(view)

    return EncodingReport(
        byte_count=info.byte_count,
        unit_count=info.unit_count,
        symbol_count=info.symbol_count,
        valid=info.is_valid,
        error=info.error,
        error_offset=info.error_offset,
        invalid_byte_count=info.invalid_byte_count,
        encoding=detect_encoding(view),
    )
