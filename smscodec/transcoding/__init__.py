"""
Transcoding
===========
UTF-16BE <-> UTF-8 conversion and JSON-safe string encoding.
"""

# Re-export all public APIs
from .models import Direction
from .converter import convert, transcode
from .json_string import encode_json_utf8, JSON_ESCAPES

__all__ = [
    # Models
    "Direction",
    # Converter
    "convert",
    "transcode",
    # JSON
    "encode_json_utf8",
    "JSON_ESCAPES",
]
