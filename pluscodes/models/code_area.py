from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeArea:
    """Bounding box of a decoded code.

    Spans are in degrees; code_length is the number of significant digits
    (separator and padding excluded) that produced the area.
    """

    south_latitude: float
    west_longitude: float
    latitude_height: float
    longitude_width: float
    code_length: int

    def __post_init__(self) -> None:
        if self.latitude_height < 0 or self.longitude_width < 0:
            raise ValueError(
                f"CodeArea spans must be >= 0, got height={self.latitude_height} "
                f"width={self.longitude_width}"
            )

    @property
    def north_latitude(self) -> float:
        return self.south_latitude + self.latitude_height

    @property
    def east_longitude(self) -> float:
        return self.west_longitude + self.longitude_width

    @property
    def latitude_center(self) -> float:
        return self.south_latitude + self.latitude_height / 2.0

    @property
    def longitude_center(self) -> float:
        return self.west_longitude + self.longitude_width / 2.0

    # Corner aliases.
    @property
    def latitude_lo(self) -> float:
        return self.south_latitude

    @property
    def longitude_lo(self) -> float:
        return self.west_longitude

    @property
    def latitude_hi(self) -> float:
        return self.north_latitude

    @property
    def longitude_hi(self) -> float:
        return self.east_longitude

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.south_latitude <= latitude <= self.north_latitude
            and self.west_longitude <= longitude <= self.east_longitude
        )

    def offset_by(self, base: CodeArea) -> CodeArea:
        """Place this (grid-relative) area inside base's south-west corner."""

        return CodeArea(
            south_latitude=base.south_latitude + self.south_latitude,
            west_longitude=base.west_longitude + self.west_longitude,
            latitude_height=self.latitude_height,
            longitude_width=self.longitude_width,
            code_length=base.code_length + self.code_length,
        )

    def with_center(self, latitude: float, longitude: float) -> CodeArea:
        return CodeArea(
            south_latitude=latitude - self.latitude_height / 2.0,
            west_longitude=longitude - self.longitude_width / 2.0,
            latitude_height=self.latitude_height,
            longitude_width=self.longitude_width,
            code_length=self.code_length,
        )

    def __str__(self) -> str:
        return (
            f"lat_lo: {self.latitude_lo} long_lo: {self.longitude_lo} "
            f"lat_hi: {self.latitude_hi} long_hi: {self.longitude_hi} "
            f"code_len: {self.code_length}"
        )
