from __future__ import annotations

"""Coordinate normalization shared by the encoder and the shortener."""

from pluscodes.core.constants import (
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)


def clip_latitude(latitude: float) -> float:
    return min(float(LATITUDE_MAX), max(-float(LATITUDE_MAX), latitude))


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into [-180, 180)."""

    while longitude < -LONGITUDE_MAX:
        longitude += 2 * LONGITUDE_MAX
    while longitude >= LONGITUDE_MAX:
        longitude -= 2 * LONGITUDE_MAX
    return longitude


def base_power(exponent: int) -> float:
    """ENCODING_BASE ** exponent, dividing for negative exponents."""

    if exponent >= 0:
        return float(ENCODING_BASE**exponent)
    return 1 / ENCODING_BASE**-exponent


def latitude_precision(code_length: int) -> float:
    """Height in degrees of the area covered by a code of code_length digits."""

    if code_length <= PAIR_CODE_LENGTH:
        return base_power(code_length // -2 + 2)
    return 1 / (ENCODING_BASE**3 * GRID_ROWS ** (code_length - PAIR_CODE_LENGTH))
