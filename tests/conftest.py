"""Shared fixtures for the sounding tests."""

from datetime import datetime

import pytest

from sounding_base import Index, Profile, Sounding, StationInfo, Surface


def build_valid_sounding() -> Sounding:
    """A physically consistent sounding with a surface level and 8 upper levels."""
    station = StationInfo.new_with_values(1, (45.0, -115.0), 1023.0)
    return (
        Sounding()
        .set_station_info(station)
        .set_valid_time(datetime(2018, 6, 1, 12))
        .set_lead_time(0)
        .set_source_description("test data")
        .set_surface_value(Surface.MSLP, 1014.0)
        .set_surface_value(Surface.STATION_PRESSURE, 847.0)
        .set_surface_value(Surface.TEMPERATURE, 22.0)
        .set_surface_value(Surface.DEW_POINT, 18.0)
        .set_surface_value(Surface.WIND_DIRECTION, 0.0)
        .set_surface_value(Surface.WIND_SPEED, 5.0)
        .set_profile(Profile.PRESSURE, [840.0, 800.0, 700.0, 500.0, 300.0, 250.0, 200.0, 100.0])
        .set_profile(Profile.TEMPERATURE, [20.0, 15.0, 2.0, -10.0, -20.0, -30.0, -50.0, -45.0])
        .set_profile(Profile.WET_BULB, [20.0, 14.0, 1.0, -11.0, -25.0, -39.0, -58.0, -60.0])
        .set_profile(Profile.DEW_POINT, [20.0, 13.0, 0.0, -12.0, -27.0, -45.0, -62.0, -80.0])
        .set_profile(Profile.WIND_DIRECTION, [40.0, 80.0, 120.0, 160.0, 200.0, 240.0, 280.0, 320.0])
        .set_profile(Profile.WIND_SPEED, [10.0, 15.0, 12.0, 27.0, 45.0, 62.0, 80.0, 70.0])
        .set_profile(Profile.GEOPOTENTIAL_HEIGHT,
                     [1100.0, 1500.0, 3000.0, 5600.0, 9200.0, 10400.0, 11800.0, 16200.0])
        .set_profile(Profile.CLOUD_FRACTION, [100.0, 85.0, 70.0, 50.0, 30.0, 25.0, 20.0, 10.0])
        .set_index(Index.SHOWALTER, -2.0)
        .set_index(Index.LI, -2.0)
        .set_index(Index.SWET, 35.0)
        .set_index(Index.K, 45.0)
        .set_index(Index.LCL, 850.0)
        .set_index(Index.PWAT, 2.0)
        .set_index(Index.TOTAL_TOTALS, 55.0)
        .set_index(Index.CAPE, 852.0)
        .set_index(Index.LCL_TEMPERATURE, 12.0)
        .set_index(Index.CIN, -200.0)
        .set_index(Index.EQUILIBRIUM_LEVEL, 222.0)
        .set_index(Index.LFC, 800.0)
        .set_index(Index.BULK_RICHARDSON_NUMBER, 1.2)
        .set_index(Index.HAINES, 6)
    )


@pytest.fixture
def valid_sounding():
    """A sounding that passes validation."""
    return build_valid_sounding()
