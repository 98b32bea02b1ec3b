"""
GSM Models
==========
Transport encoding types for outbound messages.
"""

from enum import Enum


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"
