from __future__ import annotations

import pytest

from pluscodes import (
    InvalidArgumentError,
    InvalidCodeError,
    PlusCodeError,
    decode,
    encode,
)


# (code, latitude, longitude, lat_lo, lng_lo, lat_hi, lng_hi, code_length)
ENCODING_CASES = [
    ("7FG49Q00+", 20.375, 2.775, 20.35, 2.75, 20.4, 2.8, 6),
    ("8F000000+", 47.365562, 8.524813, 30.0, 0.0, 50.0, 20.0, 2),
    ("8FVC0000+", 47.365562, 8.524813, 47.0, 8.0, 48.0, 9.0, 4),
    ("8FVC9G8F+", 47.365562, 8.524813, 47.365, 8.5225, 47.3675, 8.525, 8),
    ("8FVC9G8F+6W", 47.365562, 8.524813, 47.3655, 8.52475, 47.365625, 8.524875, 10),
    (
        "8FVC9G8F+6WG",
        47.365562,
        8.524813,
        47.36555,
        8.5248125,
        47.365575,
        8.52484375,
        11,
    ),
    (
        "4RRH46V8+74",
        -33.8568,
        151.2153,
        -33.856875,
        151.21525,
        -33.85675,
        151.215375,
        10,
    ),
    ("22222222+22", -90.0, -180.0, -90.0, -180.0, -89.999875, -179.999875, 10),
]


@pytest.mark.parametrize(
    ("code", "lat", "lng", "lat_lo", "lng_lo", "lat_hi", "lng_hi", "length"),
    ENCODING_CASES,
)
def test_encode_decode_vectors(
    code: str,
    lat: float,
    lng: float,
    lat_lo: float,
    lng_lo: float,
    lat_hi: float,
    lng_hi: float,
    length: int,
) -> None:
    area = decode(code)
    assert area.code_length == length
    assert encode(lat, lng, area.code_length) == code
    assert area.latitude_lo == pytest.approx(lat_lo, abs=1e-9)
    assert area.longitude_lo == pytest.approx(lng_lo, abs=1e-9)
    assert area.latitude_hi == pytest.approx(lat_hi, abs=1e-9)
    assert area.longitude_hi == pytest.approx(lng_hi, abs=1e-9)


def test_encode_north_pole_special_case() -> None:
    assert encode(90.0, 1.0, 15) == "CFX3X2X2+X2XXXXQ"


def test_encode_clips_latitude_and_wraps_longitude() -> None:
    assert encode(120.0, 1.0, 15) == "CFX3X2X2+X2XXXXQ"
    assert encode(47.365562, 368.524813) == "8FVC9G8F+6W"
    assert encode(47.365562, 8.524813 - 720.0) == "8FVC9G8F+6W"


def test_encode_default_length_is_ten() -> None:
    assert encode(47.365562, 8.524813) == "8FVC9G8F+6W"


def test_encode_odd_length_above_separator_rounds_up_to_pair() -> None:
    assert encode(47.365562, 8.524813, 9) == "8FVC9G8F+6W"


@pytest.mark.parametrize("length", [-2, 0, 1, 3, 5, 7])
def test_encode_rejects_bad_length(length: int) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        encode(47.365562, 8.524813, length)

    err = exc_info.value
    assert isinstance(err, PlusCodeError)
    assert err.code == "INVALID_ARGUMENT"
    assert err.details == {"code_length": length}
    assert str(length) in str(err)


def test_decode_is_case_insensitive() -> None:
    assert decode("8fvc9g8f+6w") == decode("8FVC9G8F+6W")


@pytest.mark.parametrize(
    "code",
    ["WC2345+G6", "9G8F+6W", "+6W", "8FWC2345+G", "8FWC2_45+G6", "", "+"],
)
def test_decode_rejects_non_full_codes(code: str) -> None:
    with pytest.raises(InvalidCodeError) as exc_info:
        decode(code)
    assert exc_info.value.code == "INVALID_CODE"
    assert exc_info.value.details == {"code": code}


def test_decode_full_code_policy() -> None:
    area = decode("X2X2X2X2+", strict=False)
    assert area.code_length == 8
    assert area.south_latitude > 90

    with pytest.raises(InvalidCodeError):
        decode("X2X2X2X2+", strict=True)


def test_decode_follows_strict_setting(strict_settings: None) -> None:  # noqa: ARG001
    with pytest.raises(InvalidCodeError):
        decode("2X222222+")
    assert decode("8FVC9G8F+6W").code_length == 10


_LATITUDES = [-89.123456, -45.5123, -0.000321, 12.3456789, 47.365562, 89.987654]
_LONGITUDES = [-179.987654, -122.4194, -0.5123, 8.524813, 151.2153, 179.999123]
_LENGTHS = [2, 4, 6, 8, 10, 11, 12, 13, 14, 15]
_EPS = 1e-9


@pytest.mark.parametrize("length", _LENGTHS)
@pytest.mark.parametrize("lng", _LONGITUDES)
@pytest.mark.parametrize("lat", _LATITUDES)
def test_decoded_area_contains_encoded_point(lat: float, lng: float, length: int) -> None:
    area = decode(encode(lat, lng, length))

    assert area.code_length == length
    assert area.south_latitude - _EPS <= lat <= area.north_latitude + _EPS
    assert area.west_longitude - _EPS <= lng <= area.east_longitude + _EPS
    assert area.south_latitude <= area.latitude_center <= area.north_latitude
    assert area.west_longitude <= area.longitude_center <= area.east_longitude


@pytest.mark.parametrize("length", [2, 4, 6, 8, 10])
@pytest.mark.parametrize(("lat", "lng"), [(0.0, 0.0), (-90.0, -180.0), (40.0, -100.0)])
def test_pair_stage_contains_cell_corners(lat: float, lng: float, length: int) -> None:
    area = decode(encode(lat, lng, length))
    assert area.contains(lat, lng)


@pytest.mark.parametrize("length", _LENGTHS)
def test_north_pole_lands_in_topmost_cell(length: int) -> None:
    area = decode(encode(90.0, 1.0, length))

    assert area.south_latitude < 90.0
    assert area.north_latitude <= 90.0 + _EPS
    assert 90.0 - area.north_latitude <= area.latitude_height + _EPS
