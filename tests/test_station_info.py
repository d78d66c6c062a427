"""Tests for StationInfo."""

import dataclasses

import pytest

from sounding_base import OptionVal, StationInfo


class TestStationInfo:
    """Construction and builder methods."""

    def test_default_is_empty(self):
        info = StationInfo()
        assert info.station_num is None
        assert info.location is None
        assert info.elevation.is_none()

    def test_new_with_values(self):
        info = StationInfo.new_with_values(727730, (46.92, -114.09), 972.0)
        assert info.station_num == 727730
        assert info.location == (46.92, -114.09)
        assert info.elevation == OptionVal(972.0)

    def test_builders_return_new_values(self):
        """Builder methods leave the original untouched."""
        base = StationInfo()
        info = base.with_station(727730).with_lat_lon((45, -115)).with_elevation(1023.0)

        assert base == StationInfo()
        assert info.station_num == 727730
        assert info.location == (45.0, -115.0)
        assert info.elevation.as_option() == 1023.0

    def test_clear_with_none(self):
        info = StationInfo.new_with_values(1, (45.0, -115.0), 100.0)
        cleared = info.with_station(None).with_lat_lon(None).with_elevation(None)
        assert cleared == StationInfo()

    def test_immutable(self):
        info = StationInfo()
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.station_num = 5
