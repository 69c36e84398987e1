from __future__ import annotations

from pluscodes.codec.grid import decode_grid, encode_grid
from pluscodes.codec.pairs import decode_pairs, encode_pairs
from pluscodes.codec.validator import is_full
from pluscodes.core.constants import (
    LATITUDE_MAX,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.core.errors import InvalidArgumentError, InvalidCodeError
from pluscodes.core.settings import get_settings
from pluscodes.models.code_area import CodeArea
from pluscodes.utils.coords import clip_latitude, latitude_precision, normalize_longitude


def encode(latitude: float, longitude: float, code_length: int | None = None) -> str:
    """Encode a location into a full code of code_length significant digits.

    code_length defaults to the default_code_length setting (10). Lengths
    below 8 must be even so the code ends on a whole lat/lng pair.
    """

    if code_length is None:
        code_length = get_settings().default_code_length
    if code_length < 2 or (code_length < SEPARATOR_POSITION and code_length % 2 == 1):
        raise InvalidArgumentError(
            f"Invalid Open Location Code length: {code_length}",
            details={"code_length": code_length},
        )

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    # North pole belongs to the cell below it.
    if latitude == LATITUDE_MAX:
        latitude -= latitude_precision(code_length)

    code = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        code += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
    return code


def decode(code: str, *, strict: bool | None = None) -> CodeArea:
    if not is_full(code, strict=strict):
        raise InvalidCodeError(
            f"Passed Open Location Code is not a valid full code: {code}",
            details={"code": code},
        )

    digits = code.replace(SEPARATOR, "").replace(PADDING, "").upper()
    area = decode_pairs(digits[:PAIR_CODE_LENGTH])
    if len(digits) <= PAIR_CODE_LENGTH:
        return area
    return decode_grid(digits[PAIR_CODE_LENGTH:]).offset_by(area)
