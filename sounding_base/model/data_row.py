"""A copy of one level of sounding data."""

from dataclasses import dataclass, field, fields
from typing import Dict, Optional

from sounding_base.core.missing_value import OptionVal
from sounding_base.model.enums import Profile

# DataRow field holding each profile
PROFILE_FIELDS = {
    Profile.PRESSURE: "pressure",
    Profile.TEMPERATURE: "temperature",
    Profile.WET_BULB: "wet_bulb",
    Profile.DEW_POINT: "dew_point",
    Profile.THETA_E: "theta_e",
    Profile.WIND_DIRECTION: "direction",
    Profile.WIND_SPEED: "speed",
    Profile.PRESSURE_VERTICAL_VELOCITY: "omega",
    Profile.GEOPOTENTIAL_HEIGHT: "height",
    Profile.CLOUD_FRACTION: "cloud_fraction",
}


@dataclass(frozen=True)
class DataRow:
    """A row of sounding data: every profile value at one level.

    Attributes:
        pressure: Pressure [hPa]
        temperature: Temperature [C]
        wet_bulb: Wet bulb temperature [C]
        dew_point: Dew point [C]
        theta_e: Equivalent potential temperature [K]
        direction: Wind direction, the direction the wind is from [degrees]
        speed: Wind speed [knots]
        omega: Pressure vertical velocity [Pa/s]
        height: Geopotential height [m]
        cloud_fraction: Cloud fraction [percent]
    """
    pressure: OptionVal = field(default_factory=OptionVal.missing)
    temperature: OptionVal = field(default_factory=OptionVal.missing)
    wet_bulb: OptionVal = field(default_factory=OptionVal.missing)
    dew_point: OptionVal = field(default_factory=OptionVal.missing)
    theta_e: OptionVal = field(default_factory=OptionVal.missing)
    direction: OptionVal = field(default_factory=OptionVal.missing)
    speed: OptionVal = field(default_factory=OptionVal.missing)
    omega: OptionVal = field(default_factory=OptionVal.missing)
    height: OptionVal = field(default_factory=OptionVal.missing)
    cloud_fraction: OptionVal = field(default_factory=OptionVal.missing)

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, OptionVal(getattr(self, f.name)))

    @staticmethod
    def field_for(profile: Profile) -> str:
        """Name of the field holding values of ``profile``."""
        return PROFILE_FIELDS[profile]

    def get(self, profile: Profile) -> OptionVal:
        """Value of ``profile`` at this level."""
        return getattr(self, PROFILE_FIELDS[profile])

    def to_dict(self) -> Dict[str, Optional[float]]:
        """Convert to a dictionary of plain optional floats."""
        return {f.name: getattr(self, f.name).as_option() for f in fields(self)}
