"""Tests for sounding validation."""

import logging

import pytest

from sounding_base import (
    Index,
    Profile,
    Sounding,
    SoundingSettings,
    StationInfo,
    Surface,
    ValidationError,
    ValidationReport,
)


class TestValidSounding:
    """A consistent sounding passes."""

    def test_validate_ok(self, valid_sounding):
        report = valid_sounding.validate()
        assert report.is_valid, str(report)
        assert report
        assert report.errors == []
        report.raise_for_errors()

    def test_profiles_with_missing_values(self, valid_sounding):
        """Missing values are skipped by the ordering rules."""
        snd = valid_sounding.set_profile(
            Profile.DEW_POINT, [None, 13.0, None, -12.0, -27.0, -45.0, -62.0, -80.0]
        )
        assert snd.validate().is_valid

    def test_equal_pressures_allowed(self):
        snd = Sounding().set_profile(Profile.PRESSURE, [850.0, 850.0, 700.0])
        assert snd.validate().is_valid


class TestInvalidSounding:
    """Each rule reports its violations."""

    def test_haines_out_of_range(self, valid_sounding):
        report = valid_sounding.set_index(Index.HAINES, 1).validate()
        assert not report.is_valid
        assert any("Haines" in error for error in report.errors)

    @pytest.mark.parametrize("haines", [2, 4, 6])
    def test_haines_in_range(self, valid_sounding, haines):
        assert valid_sounding.set_index(Index.HAINES, haines).validate().is_valid

    def test_pressure_required(self):
        report = Sounding().validate()
        assert not report.is_valid
        assert "Pressure variable required" in str(report)

    def test_length_mismatch(self, valid_sounding):
        report = valid_sounding.set_profile(Profile.PRESSURE_VERTICAL_VELOCITY, [0.1, 0.2]).validate()
        assert any("length mismatch" in error for error in report.errors)
        assert any("vertical velocity" in error for error in report.errors)

    def test_pressure_increasing(self, valid_sounding):
        snd = valid_sounding.set_surface_value(Surface.STATION_PRESSURE, 830.0)
        report = snd.validate()
        assert any("Pressure increasing" in error for error in report.errors)

    def test_height_decreasing(self, valid_sounding):
        snd = valid_sounding.set_station_info(StationInfo().with_elevation(1200.0))
        report = snd.validate()
        assert any("Height values decreasing" in error for error in report.errors)

    def test_dew_point_above_temperature(self, valid_sounding):
        snd = valid_sounding.set_profile(
            Profile.DEW_POINT, [21.0, 13.0, 0.0, -12.0, -27.0, -45.0, -62.0, -80.0]
        )
        report = snd.validate()
        assert any("Dew point temperature greater than temperature" in e for e in report.errors)
        assert any("greater than wet bulb" in e for e in report.errors)

    def test_wet_bulb_above_temperature(self, valid_sounding):
        snd = valid_sounding.set_profile(
            Profile.WET_BULB, [20.0, 16.0, 1.0, -11.0, -25.0, -39.0, -58.0, -60.0]
        )
        report = snd.validate()
        assert any("Wet bulb temperature greater than temperature" in e for e in report.errors)

    def test_negative_values(self, valid_sounding):
        snd = (
            valid_sounding
            .set_profile(Profile.WIND_SPEED, [10.0, -15.0, 12.0, 27.0, 45.0, 62.0, 80.0, 70.0])
            .set_surface_value(Surface.LOW_CLOUD, -5.0)
            .set_index(Index.CAPE, -1.0)
            .set_index(Index.PWAT, -0.5)
        )
        errors = snd.validate().errors
        assert any("wind speed" in e for e in errors)
        assert any("low cloud fraction" in e for e in errors)
        assert any("convective available potential energy" in e for e in errors)
        assert any("precipitable water" in e for e in errors)

    def test_negative_cloud_fraction(self, valid_sounding):
        snd = valid_sounding.set_profile(
            Profile.CLOUD_FRACTION, [100.0, 90.0, -10.0, 60.0, 50.0, 40.0, 20.0, 10.0]
        )
        errors = snd.validate().errors
        assert len(errors) == 1
        assert "Negative cloud fraction" in errors[0]

    def test_negative_precipitation(self, valid_sounding):
        errors = valid_sounding.set_surface_value(Surface.PRECIPITATION, -0.1).validate().errors
        assert len(errors) == 1
        assert "precipitation" in errors[0]

    def test_positive_cin(self, valid_sounding):
        report = valid_sounding.set_index(Index.CIN, 10.0).validate()
        assert any("CIN" in error for error in report.errors)

    def test_all_violations_reported(self, valid_sounding):
        """Validation does not stop at the first problem."""
        snd = (
            valid_sounding
            .set_index(Index.HAINES, 9)
            .set_index(Index.CIN, 10.0)
            .set_surface_value(Surface.STATION_PRESSURE, 830.0)
        )
        assert len(snd.validate().errors) >= 3

    def test_raise_for_errors(self, valid_sounding):
        report = valid_sounding.set_index(Index.HAINES, 1).validate()
        with pytest.raises(ValidationError) as excinfo:
            report.raise_for_errors()
        assert excinfo.value.report is report
        assert "Haines" in str(excinfo.value)


class TestValidationSettings:
    """Settings change the rule limits."""

    def test_custom_haines_range(self, valid_sounding):
        settings = SoundingSettings.from_dict({"validation": {"haines_min": 1}})
        assert valid_sounding.set_index(Index.HAINES, 1).validate(settings).is_valid

    def test_pressure_not_required(self):
        settings = SoundingSettings.from_dict({"validation": {"require_pressure": False}})
        assert Sounding().validate(settings).is_valid

    def test_violations_logged(self, valid_sounding, caplog):
        with caplog.at_level(logging.WARNING, logger="sounding_base"):
            valid_sounding.set_index(Index.HAINES, 1).validate()
        assert "Haines" in caplog.text

    def test_logging_disabled(self, valid_sounding, caplog):
        settings = SoundingSettings.from_dict({"validation": {"log_violations": False}})
        with caplog.at_level(logging.WARNING, logger="sounding_base"):
            valid_sounding.set_index(Index.HAINES, 1).validate(settings)
        assert caplog.text == ""


class TestValidationReport:
    """The report object."""

    def test_empty_report(self):
        report = ValidationReport()
        assert report.is_valid
        assert str(report) == "no errors"

    def test_push_error(self):
        report = ValidationReport()
        report.push_error("first")
        report.push_error("second")
        assert not report
        assert str(report) == "first; second"
