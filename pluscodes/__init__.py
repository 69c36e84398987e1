"""Open Location Code (Plus Code) encoding, decoding and shortening."""

from __future__ import annotations

from pluscodes.codec.olc import decode, encode
from pluscodes.codec.validator import is_full, is_short, is_valid
from pluscodes.core.errors import (
    InvalidArgumentError,
    InvalidCodeError,
    OutOfRangeError,
    PlusCodeError,
)
from pluscodes.models.code_area import CodeArea
from pluscodes.services.shortener import recover_nearest, shorten

__all__ = [
    "CodeArea",
    "InvalidArgumentError",
    "InvalidCodeError",
    "OutOfRangeError",
    "PlusCodeError",
    "decode",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
]
