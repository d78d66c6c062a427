"""
Validation rules for a sounding.

Each rule appends its messages to a shared report and never stops early, so
one pass reports every problem with the input.
"""

from typing import Iterable, Optional, Sequence, Tuple

from sounding_base.config.settings import ValidationSettings
from sounding_base.core.missing_value import OptionVal
from sounding_base.model.enums import Index, Profile, Surface
from sounding_base.validation.report import ValidationReport


def _pairs(a: Sequence[OptionVal], b: Sequence[OptionVal]) -> Iterable[Tuple[float, float]]:
    """Levels where both values are present."""
    for x, y in zip(a, b):
        x, y = x.as_option(), y.as_option()
        if x is not None and y is not None:
            yield x, y


def _present(values: Sequence[OptionVal]) -> Iterable[float]:
    return (v for v in (c.as_option() for c in values) if v is not None)


def check_pressure_exists(sounding, report: ValidationReport) -> None:
    if len(sounding.get_profile(Profile.PRESSURE)) == 0:
        report.push_error("Pressure variable required, none given.")


def check_profile_lengths(sounding, report: ValidationReport) -> None:
    """Every supplied profile must match the pressure profile length."""
    length = len(sounding.get_profile(Profile.PRESSURE))
    for profile in Profile:
        if profile is Profile.PRESSURE:
            continue
        values = sounding.get_profile(profile)
        if values and len(values) != length:
            report.push_error(
                f"Vector length mismatch: {profile} has {len(values)} values, "
                f"pressure has {length}."
            )


def check_pressure_decreasing(sounding, report: ValidationReport) -> None:
    """Pressure never increases with height, the surface slot included."""
    one_level_down: Optional[float] = None
    for pres in _present(sounding.get_profile(Profile.PRESSURE)):
        if one_level_down is not None and pres > one_level_down:
            report.push_error(f"Pressure increasing with height: {one_level_down} to {pres} hPa.")
        one_level_down = pres


def check_height_increasing(sounding, report: ValidationReport) -> None:
    one_level_down: Optional[float] = None
    for hgt in _present(sounding.get_profile(Profile.GEOPOTENTIAL_HEIGHT)):
        if one_level_down is not None and hgt < one_level_down:
            report.push_error(f"Height values decreasing with height: {one_level_down} to {hgt} m.")
        one_level_down = hgt


def check_temperature_ordering(sounding, report: ValidationReport) -> None:
    """Dew point <= wet bulb <= temperature at every level."""
    temperature = sounding.get_profile(Profile.TEMPERATURE)
    wet_bulb = sounding.get_profile(Profile.WET_BULB)
    dew_point = sounding.get_profile(Profile.DEW_POINT)

    for t, wb in _pairs(temperature, wet_bulb):
        if t < wb:
            report.push_error(f"Wet bulb temperature greater than temperature: {wb} > {t}.")
    for t, dp in _pairs(temperature, dew_point):
        if t < dp:
            report.push_error(f"Dew point temperature greater than temperature: {dp} > {t}.")
    for wb, dp in _pairs(wet_bulb, dew_point):
        if wb < dp:
            report.push_error(f"Dew point temperature greater than wet bulb temperature: {dp} > {wb}.")


def check_non_negative(sounding, report: ValidationReport) -> None:
    """Speeds, cloud fractions, precipitation, CAPE and PWAT must be >= 0."""
    for profile in (Profile.WIND_SPEED, Profile.CLOUD_FRACTION):
        for value in _present(sounding.get_profile(profile)):
            if value < 0.0:
                report.push_error(f"Negative {profile}: {value}.")

    for surface in (Surface.LOW_CLOUD, Surface.MID_CLOUD, Surface.HIGH_CLOUD,
                    Surface.WIND_SPEED, Surface.PRECIPITATION):
        value = sounding.get_surface_value(surface).as_option()
        if value is not None and value < 0.0:
            report.push_error(f"Negative {surface}: {value}.")

    for index in (Index.CAPE, Index.PWAT):
        value = sounding.get_index(index).as_option()
        if value is not None and value < 0.0:
            report.push_error(f"Negative {index}: {value}.")


def check_cin(sounding, report: ValidationReport) -> None:
    cin = sounding.get_index(Index.CIN).as_option()
    if cin is not None and cin > 0.0:
        report.push_error(f"Positive CINS: {cin}.")


def check_haines(sounding, report: ValidationReport, settings: ValidationSettings) -> None:
    haines = sounding.get_index(Index.HAINES).as_option()
    if haines is not None and not settings.haines_min <= haines <= settings.haines_max:
        report.push_error(
            f"Haines index out of range: {haines} not in "
            f"[{settings.haines_min}, {settings.haines_max}]."
        )


def run_checks(sounding, settings: ValidationSettings) -> ValidationReport:
    """Run every rule against ``sounding``.

    Args:
        sounding: Sounding to check
        settings: Validation settings

    Returns:
        ValidationReport with every violation found
    """
    report = ValidationReport()

    if settings.require_pressure:
        check_pressure_exists(sounding, report)
    check_profile_lengths(sounding, report)
    check_pressure_decreasing(sounding, report)
    check_height_increasing(sounding, report)
    check_temperature_ordering(sounding, report)
    check_non_negative(sounding, report)
    check_cin(sounding, report)
    check_haines(sounding, report, settings)

    return report
