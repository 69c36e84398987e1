from __future__ import annotations

"""Fixed alphabet and resolution tables for Open Location Codes.

These values are part of the code format itself; changing any of them
produces codes other implementations cannot read.
"""

# Separator between the first 8 characters and the refinement digits.
SEPARATOR = "+"
SEPARATOR_POSITION = 8

PADDING = "0"

CODE_ALPHABET = "23456789CFGHJMPQRVWX"
ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# Lat/lng pair digits; about 13x13 meters at the equator.
PAIR_CODE_LENGTH = 10

# Place value in degrees of each lat/lng pair position.
PAIR_RESOLUTIONS = (20.0, 1.0, 0.05, 0.0025, 0.000125)

GRID_COLUMNS = 4
GRID_ROWS = 5
GRID_SIZE_DEGREES = 0.000125

MIN_TRIMMABLE_CODE_LEN = 6

# Decode lookup sentinels.
ILLEGAL = -2
SEPARATOR_OR_PADDING = -1


def _build_decode_table() -> tuple[int, ...]:
    table = [ILLEGAL] * 128
    table[ord(SEPARATOR)] = SEPARATOR_OR_PADDING
    table[ord(PADDING)] = SEPARATOR_OR_PADDING
    for i, c in enumerate(CODE_ALPHABET):
        table[ord(c)] = i
        table[ord(c.lower())] = i
    return tuple(table)


# Indexed by ord(character); >= 0 is the alphabet index.
DECODE = _build_decode_table()


def decode_char(ch: str) -> int:
    """Return the DECODE entry for ch, ILLEGAL for anything outside ASCII."""

    o = ord(ch)
    if o >= len(DECODE):
        return ILLEGAL
    return DECODE[o]
