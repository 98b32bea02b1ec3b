"""
GSM Default Alphabet
====================
Per-character and whole-string GSM 03.38 membership checks.
"""

# Re-export all public APIs
from .models import EncodingType
from .alphabet import is_gsm_codepoint
from .classifier import is_gsm_string, is_gsm_text, detect_encoding

__all__ = [
    # Models
    "EncodingType",
    # Alphabet
    "is_gsm_codepoint",
    # Classifier
    "is_gsm_string",
    "is_gsm_text",
    "detect_encoding",
]
