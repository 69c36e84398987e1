from __future__ import annotations

import re

from pluscodes.core.constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING,
    SEPARATOR,
    SEPARATOR_OR_PADDING,
    SEPARATOR_POSITION,
    decode_char,
)
from pluscodes.core.settings import get_settings

_PADDING_RUN = re.compile(f"{PADDING}+")


def _valid_separator(code: str) -> bool:
    if code.count(SEPARATOR) != 1:
        return False
    sep = code.index(SEPARATOR)
    return sep <= SEPARATOR_POSITION and sep % 2 == 0


def _valid_padding(code: str) -> bool:
    if PADDING not in code:
        return True
    if code.startswith(PADDING):
        return False
    if code[-1] != SEPARATOR or code[-2] != PADDING:
        return False
    runs = _PADDING_RUN.findall(code)
    if len(runs) != 1:
        return False
    run = runs[0]
    return len(run) % 2 == 0 and len(run) <= SEPARATOR_POSITION - 2


def is_valid(code: str | None) -> bool:
    """Check the code grammar; says nothing about full vs short."""

    if not code or len(code) < 2:
        return False
    if not _valid_separator(code):
        return False
    if not _valid_padding(code):
        return False
    # A single digit after the separator is ambiguous.
    if len(code) - code.index(SEPARATOR) - 1 == 1:
        return False
    return all(decode_char(ch) >= SEPARATOR_OR_PADDING for ch in code)


def is_short(code: str | None) -> bool:
    return is_valid(code) and code.index(SEPARATOR) < SEPARATOR_POSITION


def _first_digits_in_range(code: str) -> bool:
    first_lat = decode_char(code[0]) * ENCODING_BASE
    if first_lat >= LATITUDE_MAX * 2:
        return False
    first_lng = decode_char(code[1]) * ENCODING_BASE
    return first_lng < LONGITUDE_MAX * 2


def is_full(code: str | None, *, strict: bool | None = None) -> bool:
    """True for a valid code that decodes without a reference location.

    With strict (default: the strict_full_codes setting), codes whose first
    latitude or longitude digit alone falls outside the globe are rejected.
    """

    if not is_valid(code) or is_short(code):
        return False
    if strict is None:
        strict = get_settings().strict_full_codes
    if strict:
        return _first_digits_in_range(code)
    return True
