"""
String Scanning
===============
Structural metrics and first-error detection for wide-form and UTF-8 strings.
"""

# Re-export all public APIs
from .models import DecodeError, StringInfo
from .utf16be import (
    utf16be_string_info,
    is_surrogate,
    is_lead_surrogate,
    is_trail_surrogate,
)
from .utf8 import utf8_string_info

__all__ = [
    # Models
    "DecodeError",
    "StringInfo",
    # Wide form
    "utf16be_string_info",
    "is_surrogate",
    "is_lead_surrogate",
    "is_trail_surrogate",
    # Byte form
    "utf8_string_info",
]
