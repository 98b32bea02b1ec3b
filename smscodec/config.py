"""
Codec Configuration
===================
Fixed codec constants and environment-driven settings.
"""

import os

# Environment
SERVICE_NAME = os.getenv("SMSCODEC_SERVICE_NAME", "smscodec")
LOG_LEVEL = os.getenv("SMSCODEC_LOG_LEVEL", "INFO")
JSON_LOGS = os.getenv("SMSCODEC_JSON_LOGS", "true").lower() in ("1", "true", "yes")

# Codec names understood by the Python codec registry
WIDE_ENCODING = "utf-16-be"
BYTE_ENCODING = "utf-8"

# Bytes per wide-form code unit
UNIT_WIDTH = 2

# Worst-case growth factors, in bytes per input unit. These are safety
# margins and must not be lowered.
ESCAPE_EXPANSION = 6
TRANSCODE_EXPANSION = 4

# Surrogate ranges (inclusive)
SURROGATE_FIRST = 0xD800
SURROGATE_MIDDLE = 0xDC00
SURROGATE_LAST = 0xDFFF
