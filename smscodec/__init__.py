"""
SMS Codec Library
=================
Text inspection and transcoding for SMS message bodies: UTF-16BE metrics,
GSM default alphabet checks and JSON-safe UTF-8 output.
"""

__version__ = "0.1.0"

# Scanning
from smscodec.scanner import (
    DecodeError,
    StringInfo,
    utf16be_string_info,
    utf8_string_info,
)

# GSM alphabet
from smscodec.gsm import (
    EncodingType,
    is_gsm_codepoint,
    is_gsm_string,
    is_gsm_text,
    detect_encoding,
)

# Transcoding
from smscodec.transcoding import (
    Direction,
    convert,
    transcode,
    encode_json_utf8,
)

# Report
from smscodec.report import EncodingReport, inspect_message

# Errors
from smscodec.exceptions import SMSCodecError, TranscodeError, BufferOverflowError

# Logging
from smscodec.log import setup_logging

__all__ = [
    # Scanning
    "DecodeError",
    "StringInfo",
    "utf16be_string_info",
    "utf8_string_info",
    # GSM
    "EncodingType",
    "is_gsm_codepoint",
    "is_gsm_string",
    "is_gsm_text",
    "detect_encoding",
    # Transcoding
    "Direction",
    "convert",
    "transcode",
    "encode_json_utf8",
    # Report
    "EncodingReport",
    "inspect_message",
    # Errors
    "SMSCodecError",
    "TranscodeError",
    "BufferOverflowError",
    # Logging
    "setup_logging",
]
