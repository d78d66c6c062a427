"""Station identification and location."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from sounding_base.core.missing_value import OptionVal, to_cell


@dataclass(frozen=True)
class StationInfo:
    """Station information including location data and identification number.

    Attributes:
        station_num: Station number, USAF number, eg 727730
        location: (latitude, longitude) in degrees
        elevation: Elevation in meters. For model soundings this is the model
            terrain, not necessarily the real world elevation.
    """
    station_num: Optional[int] = None
    location: Optional[Tuple[float, float]] = None
    elevation: OptionVal = field(default_factory=OptionVal.missing)

    def __post_init__(self):
        # Normalize inputs so equality does not depend on how values were passed
        if self.location is not None:
            lat, lon = self.location
            object.__setattr__(self, "location", (float(lat), float(lon)))
        object.__setattr__(self, "elevation", to_cell(self.elevation))

    @classmethod
    def new_with_values(cls, station_num=None, location=None, elevation=None) -> "StationInfo":
        """Create a new StationInfo with all of its values."""
        return cls(station_num=station_num, location=location, elevation=OptionVal(elevation))

    def with_station(self, number: Optional[int]) -> "StationInfo":
        """Builder method to add a station number."""
        return replace(self, station_num=number)

    def with_lat_lon(self, coords: Optional[Tuple[float, float]]) -> "StationInfo":
        """Builder method to add a location."""
        return replace(self, location=coords)

    def with_elevation(self, elevation) -> "StationInfo":
        """Builder method to add elevation in meters."""
        return replace(self, elevation=OptionVal(elevation))
