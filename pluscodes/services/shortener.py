from __future__ import annotations

import logging
import math

from pluscodes.codec.olc import decode, encode
from pluscodes.codec.validator import is_full, is_short
from pluscodes.core.constants import (
    MIN_TRIMMABLE_CODE_LEN,
    PADDING,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.core.errors import InvalidCodeError, OutOfRangeError
from pluscodes.models.code_area import CodeArea
from pluscodes.utils.coords import base_power, clip_latitude, normalize_longitude


logger = logging.getLogger(__name__)

# A prefix can be dropped while the reference stays within this fraction of
# the dropped cell's size from the code center.
_SAFETY_FACTOR = 0.3


def _upper_range(area: CodeArea, latitude: float, longitude: float) -> float:
    return max(
        abs(area.latitude_center - latitude),
        abs(area.longitude_center - longitude),
    )


def shorten(
    code: str, latitude: float, longitude: float, *, strict: bool | None = None
) -> str:
    """Drop as many leading pairs of code as the reference point allows.

    The result is recoverable with recover_nearest() from any point close
    to (latitude, longitude). Returns the code uppercased and unchanged when
    the reference is too far away.
    """

    if not is_full(code, strict=strict):
        raise InvalidCodeError(
            f"Passed code is not valid and full: {code}",
            details={"code": code},
        )
    if PADDING in code:
        raise InvalidCodeError(
            f"Cannot shorten padded codes: {code}",
            details={"code": code},
        )

    code = code.upper()
    area = decode(code, strict=strict)
    if area.code_length < MIN_TRIMMABLE_CODE_LEN:
        raise OutOfRangeError(
            f"Code length must be at least {MIN_TRIMMABLE_CODE_LEN}",
            details={"code": code, "code_length": area.code_length},
        )

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    distance = _upper_range(area, latitude, longitude)

    # Finest resolution first: 0.0025, 0.05, 1.0 drop 8, 6, 4 characters.
    for idx, resolution in enumerate(reversed(PAIR_RESOLUTIONS[1:-1])):
        if distance < resolution * _SAFETY_FACTOR:
            trim = SEPARATOR_POSITION - idx * 2
            # "XXXXXXXX+" would otherwise shorten to a bare separator.
            if not is_short(code[trim:]):
                continue
            logger.debug(
                "Shortened %s by %d chars (range=%s resolution=%s)",
                code,
                trim,
                distance,
                resolution,
            )
            return code[trim:]

    logger.debug("Reference too far from %s to shorten (range=%s)", code, distance)
    return code


def _nudge(center: float, reference: float, resolution: float) -> float:
    """Move center one cell toward reference if it sits past the cell edge."""

    diff = center - reference
    if diff > resolution / 2.0:
        return center - resolution
    if diff < -resolution / 2.0:
        return center + resolution
    return center


def recover_nearest(
    short_code: str,
    reference_latitude: float,
    reference_longitude: float,
    *,
    strict: bool | None = None,
) -> str:
    """Recover the full code nearest to the reference point.

    Full codes are returned unchanged.
    """

    if not is_short(short_code):
        if is_full(short_code, strict=strict):
            return short_code
        raise InvalidCodeError(
            f"Passed short code is not valid: {short_code}",
            details={"code": short_code},
        )

    reference_latitude = clip_latitude(reference_latitude)
    reference_longitude = normalize_longitude(reference_longitude)
    short_code = short_code.upper()

    filling_length = SEPARATOR_POSITION - short_code.index(SEPARATOR)
    # Degree size of the cell the missing prefix identifies.
    resolution = base_power(2 - filling_length // 2)

    rounded_lat = math.floor(reference_latitude / resolution) * resolution
    rounded_lng = math.floor(reference_longitude / resolution) * resolution
    # Encode the middle of the rounded cell; the rounded corner itself can land
    # a hair below the boundary and pick the cell beneath.
    prefix = encode(
        rounded_lat + resolution / 2.0,
        rounded_lng + resolution / 2.0,
        PAIR_CODE_LENGTH,
    )[:filling_length]

    area = decode(prefix + short_code, strict=strict)
    lat_center = _nudge(area.latitude_center, reference_latitude, resolution)
    lng_center = _nudge(area.longitude_center, reference_longitude, resolution)
    if lat_center != area.latitude_center or lng_center != area.longitude_center:
        logger.debug(
            "Recovered %s into neighbouring cell of %s",
            short_code,
            prefix,
        )
        area = area.with_center(lat_center, lng_center)

    return encode(area.latitude_center, area.longitude_center, area.code_length)
