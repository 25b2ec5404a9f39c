"""Location and search suggestion models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    name: str
    lat: float
    lon: float
    country: str | None = None


@dataclass(frozen=True)
class Suggestion:
    name: str  # pre-formatted "City, Region, Country"
    lat: float
    lon: float

    def to_location(self) -> Location:
        return Location(name=self.name, lat=self.lat, lon=self.lon)
