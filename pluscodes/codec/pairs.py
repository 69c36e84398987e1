from __future__ import annotations

"""Lat/lng pair stage: the first 10 digits as interleaved base-20 values."""

from pluscodes.core.constants import (
    CODE_ALPHABET,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    decode_char,
)
from pluscodes.models.code_area import CodeArea


def _pad(code: str) -> str:
    if len(code) < SEPARATOR_POSITION:
        code += PADDING * (SEPARATOR_POSITION - len(code))
    if len(code) == SEPARATOR_POSITION:
        code += SEPARATOR
    return code


def encode_pairs(latitude: float, longitude: float, code_length: int) -> str:
    """Encode clipped/normalized coordinates into code_length pair digits.

    Digits are emitted a lat/lng pair at a time, so an odd length rounds up.
    """

    adjusted_lat = latitude + LATITUDE_MAX
    adjusted_lng = longitude + LONGITUDE_MAX

    out: list[str] = []
    digit_count = 0
    while digit_count < code_length:
        place_value = PAIR_RESOLUTIONS[digit_count // 2]

        digit = int(adjusted_lat / place_value)
        adjusted_lat -= digit * place_value
        out.append(CODE_ALPHABET[digit])

        digit = int(adjusted_lng / place_value)
        adjusted_lng -= digit * place_value
        out.append(CODE_ALPHABET[digit])

        digit_count += 2
        if digit_count == SEPARATOR_POSITION and digit_count < code_length:
            out.append(SEPARATOR)

    return _pad("".join(out))


def _decode_axis(digits: str, offset: int) -> tuple[float, float]:
    """Return (low, span) for every second digit of digits starting at offset."""

    value = 0.0
    i = 0
    while i * 2 + offset < len(digits):
        value += decode_char(digits[i * 2 + offset]) * PAIR_RESOLUTIONS[i]
        i += 1
    return value, PAIR_RESOLUTIONS[i - 1]


def decode_pairs(digits: str) -> CodeArea:
    """Decode up to 10 significant digits (no separator or padding)."""

    lat_lo, lat_span = _decode_axis(digits, 0)
    lng_lo, lng_span = _decode_axis(digits, 1)
    return CodeArea(
        south_latitude=lat_lo - LATITUDE_MAX,
        west_longitude=lng_lo - LONGITUDE_MAX,
        latitude_height=lat_span,
        longitude_width=lng_span,
        code_length=len(digits),
    )
