"""
GSM 03.38 Default Alphabet
==========================
Membership test for the GSM default alphabet over UCS-2 characters.

The GSM-to-Unicode table used here was obtained from
http://www.unicode.org/Public/MAPPINGS/ETSI/GSM0338.TXT.

Copyright (c) 2000 - 2009 Unicode, Inc. All Rights reserved.
Unicode, Inc. hereby grants the right to freely use the information
supplied in this file in the creation of products supporting the
Unicode Standard, and to make copies of this file in any form for
internal or external distribution as long as this notice remains
attached.
"""

from typing import FrozenSet, Tuple

# Plane 0x00: contiguous ranges (inclusive) of least-significant bytes
LATIN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x20, 0x5F),
    (0x61, 0x7E),
    (0xA3, 0xA5),
    (0xC4, 0xC6),
    (0xE4, 0xE9),
)

# Plane 0x00: isolated characters outside the ranges above
LATIN_SINGLES: FrozenSet[int] = frozenset({
    0x0A, 0x0C, 0x0D,
    0xA0, 0xA1, 0xA7,
    0xBF, 0xC9, 0xD1,
    0xD6, 0xD8, 0xDC,
    0xDF, 0xE0, 0xEC,
    0xF1, 0xF2, 0xF6,
    0xF8, 0xF9, 0xFC,
})

# Plane 0x03: Greek capitals
GREEK: FrozenSet[int] = frozenset({
    0x93, 0x94,
    0x98, 0x9B,
    0x9E, 0xA0,
    0xA3, 0xA6,
    0xA8, 0xA9,
})

# Plane 0x20: euro sign only
EURO_PLANE = 0x20
EURO_LSB = 0xAC


def is_gsm_codepoint(msb: int, lsb: int) -> bool:
    """
    Check whether one UCS-2 character is in the GSM default alphabet.

    Args:
        msb: Most-significant byte of the big-endian character
        lsb: Least-significant byte of the big-endian character

    Returns:
        True if the character can be sent as GSM-7
    """
    if msb == 0x00:
        for first, last in LATIN_RANGES:
            if first <= lsb <= last:
                return True
        return lsb in LATIN_SINGLES
    if msb == 0x03:
        return lsb in GREEK
    if msb == EURO_PLANE:
        return lsb == EURO_LSB
    return False
