"""Identifiers for the profiles, surface values and indices of a sounding."""

from enum import Enum


class Profile(Enum):
    """Profiles which may be stored in a sounding."""
    PRESSURE = "pressure"                                  # hPa
    TEMPERATURE = "temperature"                            # C
    WET_BULB = "wet bulb temperature"                      # C
    DEW_POINT = "dew point temperature"                    # C
    THETA_E = "equivalent potential temperature"           # K
    WIND_DIRECTION = "wind direction"                      # degrees, direction wind is from
    WIND_SPEED = "wind speed"                              # knots
    PRESSURE_VERTICAL_VELOCITY = "vertical velocity"       # Pa/s
    GEOPOTENTIAL_HEIGHT = "height"                         # m
    CLOUD_FRACTION = "cloud fraction"                      # percent

    def __str__(self):
        return self.value


class Surface(Enum):
    """Surface based values."""
    MSLP = "sea level pressure"                            # hPa
    STATION_PRESSURE = "station pressure"                  # hPa
    LOW_CLOUD = "low cloud fraction"                       # percent
    MID_CLOUD = "mid cloud fraction"                       # percent
    HIGH_CLOUD = "high cloud fraction"                     # percent
    WIND_DIRECTION = "wind direction"                      # degrees, direction wind is from
    WIND_SPEED = "wind speed"                              # knots
    TEMPERATURE = "2-meter temperature"                    # C
    DEW_POINT = "2-meter dew point"                        # C
    PRECIPITATION = "precipitation (liquid equivalent)"    # in

    def __str__(self):
        return self.value


class Index(Enum):
    """Sounding indices stored with a sounding.

    Only indices that are commonly loaded from model output files are
    members. Indices computed by analysis code belong to that code.
    """
    SHOWALTER = "Showalter index"
    LI = "lifted index"
    SWET = "severe weather threat index"
    K = "K-index"
    LCL = "lifting condensation level pressure"            # hPa
    PWAT = "precipitable water"                            # mm
    TOTAL_TOTALS = "total totals"
    CAPE = "convective available potential energy"         # J/kg
    LCL_TEMPERATURE = "lifting condensation level temperature"  # K
    CIN = "convective inhibition"                          # J/kg
    EQUILIBRIUM_LEVEL = "equilibrium level pressure"       # hPa
    LFC = "level of free convection pressure"              # hPa
    BULK_RICHARDSON_NUMBER = "bulk Richardson number"
    HAINES = "Haines index"

    def __str__(self):
        return self.value

    @property
    def is_integer(self) -> bool:
        """True for indices stored as integers."""
        return self is Index.HAINES


# Surface scalar stored at index 0 of each profile
SURFACE_FOR_PROFILE = {
    Profile.PRESSURE: Surface.STATION_PRESSURE,
    Profile.TEMPERATURE: Surface.TEMPERATURE,
    Profile.DEW_POINT: Surface.DEW_POINT,
    Profile.WIND_DIRECTION: Surface.WIND_DIRECTION,
    Profile.WIND_SPEED: Surface.WIND_SPEED,
}

# Surface scalars that feed the wet bulb and theta-e computation
THERMO_INPUTS = frozenset({
    Surface.STATION_PRESSURE,
    Surface.TEMPERATURE,
    Surface.DEW_POINT,
})
