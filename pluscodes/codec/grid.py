from __future__ import annotations

"""Grid refinement stage: each extra digit picks a cell of a 4x5 grid."""

import math

from pluscodes.core.constants import (
    CODE_ALPHABET,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    decode_char,
)
from pluscodes.models.code_area import CodeArea


def encode_grid(latitude: float, longitude: float, code_length: int) -> str:
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES
    adjusted_lat = (latitude + LATITUDE_MAX) % lat_place_value
    adjusted_lng = (longitude + LONGITUDE_MAX) % lng_place_value

    out: list[str] = []
    for _ in range(code_length):
        row = math.floor(adjusted_lat / (lat_place_value / GRID_ROWS))
        col = math.floor(adjusted_lng / (lng_place_value / GRID_COLUMNS))
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        adjusted_lat -= row * lat_place_value
        adjusted_lng -= col * lng_place_value
        out.append(CODE_ALPHABET[row * GRID_COLUMNS + col])
    return "".join(out)


def decode_grid(digits: str) -> CodeArea:
    """Decode refinement digits.

    The result is relative to the south-west corner of the pair-stage cell;
    see CodeArea.offset_by.
    """

    lat_lo = 0.0
    lng_lo = 0.0
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES

    for ch in digits:
        row, col = divmod(decode_char(ch), GRID_COLUMNS)
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        lat_lo += row * lat_place_value
        lng_lo += col * lng_place_value

    return CodeArea(
        south_latitude=lat_lo,
        west_longitude=lng_lo,
        latitude_height=lat_place_value,
        longitude_width=lng_place_value,
        code_length=len(digits),
    )
