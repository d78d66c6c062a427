"""
Data type and methods to store an atmospheric sounding.

A :class:`Sounding` is an immutable value. Every setter returns a new
sounding, so a sounding that has been handed to other code never changes
underneath it:

>>> from sounding_base import Sounding, Profile, Surface
>>> snd = (
...     Sounding()
...     .set_profile(Profile.PRESSURE, [850.0, 700.0, 500.0])
...     .set_profile(Profile.TEMPERATURE, [15.0, 5.0, -12.0])
...     .set_surface_value(Surface.STATION_PRESSURE, 900.0)
...     .set_surface_value(Surface.TEMPERATURE, 20.0)
... )
>>> [row.pressure.as_option() for row in snd.bottom_up()]
[900.0, 850.0, 700.0, 500.0]

Index 0 of every profile that has been supplied is the surface level. Its
value always comes from the surface scalars (and the station elevation for
height), and is rewritten whenever one of those changes.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np

from sounding_base.config.settings import SoundingSettings
from sounding_base.core.missing_value import OptionVal, cells_from_array, cells_to_array, to_cell
from sounding_base.model.data_row import PROFILE_FIELDS, DataRow
from sounding_base.model.enums import SURFACE_FOR_PROFILE, THERMO_INPUTS, Index, Profile, Surface
from sounding_base.model.interpolation import linear_interpolate, nearest_point
from sounding_base.model.iterators import ProfileIterator
from sounding_base.model.station_info import StationInfo
from sounding_base.physics import thermo
from sounding_base.validation.checks import run_checks
from sounding_base.validation.report import ValidationReport

logger = logging.getLogger(__name__)

# Profiles whose surface value depends on more than one surface scalar
DERIVED_PROFILES = (Profile.WET_BULB, Profile.THETA_E)


def _require(which, enum_cls) -> None:
    if not isinstance(which, enum_cls):
        raise TypeError(f"Expected a {enum_cls.__name__}, got {which!r}")


def _profile_property(profile: Profile, doc: str) -> property:
    return property(lambda self: self.get_profile(profile), doc=doc)


@dataclass(frozen=True)
class Sounding:
    """All the variables stored in a sounding.

    The upper air profiles are stored as parallel sequences of
    :class:`OptionVal`. A profile that was never supplied is empty instead of
    being full of missing values.

    Attributes:
        station: Station identification and location
        valid_time: Valid time of the sounding
        lead_time: Difference between model initialization time and
            ``valid_time`` in hours
        source_description: Free text description of where the data came from
    """
    station: StationInfo = field(default_factory=StationInfo)
    valid_time: Optional[datetime] = None
    lead_time: OptionVal = field(default_factory=lambda: OptionVal.missing(int))
    source_description: Optional[str] = None
    _profiles: Dict[Profile, Tuple[OptionVal, ...]] = field(default_factory=dict, repr=False)
    _surface: Dict[Surface, OptionVal] = field(default_factory=dict, repr=False)
    _indexes: Dict[Index, OptionVal] = field(default_factory=dict, repr=False)

    # Setters never store empty profiles or missing cells, so equal soundings
    # have equal dicts.
    def __hash__(self):
        return hash((
            self.station,
            self.valid_time,
            self.lead_time,
            self.source_description,
            frozenset(self._profiles.items()),
            frozenset(self._surface.items()),
            frozenset(self._indexes.items()),
        ))

    # -------------------------------------------------------------------------
    # Metadata
    # -------------------------------------------------------------------------

    def set_station_info(self, station: StationInfo) -> "Sounding":
        """Set the station info, the station elevation is the surface height."""
        if not isinstance(station, StationInfo):
            raise TypeError(f"Expected a StationInfo, got {station!r}")
        return replace(self, station=station)._resync([Profile.GEOPOTENTIAL_HEIGHT])

    def set_valid_time(self, valid_time: Optional[datetime]) -> "Sounding":
        """Set the valid time of the sounding."""
        return replace(self, valid_time=valid_time)

    def set_lead_time(self, lead_time) -> "Sounding":
        """Set the forecast lead time in hours, an int, None or OptionVal."""
        if isinstance(lead_time, OptionVal):
            lead_time = lead_time.as_option()
        cell = OptionVal(None if lead_time is None else int(lead_time), int)
        return replace(self, lead_time=cell)

    def set_source_description(self, description: Optional[str]) -> "Sounding":
        """Set a description of the data source, e.g. a model name or file."""
        return replace(self, source_description=description)

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    def set_profile(self, which: Profile, values: Iterable) -> "Sounding":
        """
        Set a profile from its upper air values.

        Parameters
        ----------
        which : Profile
            Profile to replace
        values : iterable
            Values from the lowest upper air level upward. Numbers, None,
            NaN (treated as missing) or OptionVal.

        Returns
        -------
        sounding : Sounding
            New sounding. If ``values`` is not empty, the surface value for
            this profile is prepended at index 0. Lengths are not checked
            here, see :meth:`validate`.
        """
        _require(which, Profile)
        cells = cells_from_array(values)

        profiles = dict(self._profiles)
        if cells:
            profiles[which] = (self._surface_cell_for(which),) + cells
        else:
            profiles.pop(which, None)

        logger.debug(f"Set {which} profile with {len(cells)} upper air levels")
        return replace(self, _profiles=profiles)

    def get_profile(self, which: Profile) -> Tuple[OptionVal, ...]:
        """Get a profile, index 0 is the surface. Empty if never supplied."""
        _require(which, Profile)
        return self._profiles.get(which, ())

    def profile_array(self, which: Profile) -> np.ndarray:
        """Get a profile as a float array with NaN for missing values."""
        return cells_to_array(self.get_profile(which))

    pressure_profile = _profile_property(Profile.PRESSURE, "Pressure profile [hPa].")
    temperature_profile = _profile_property(Profile.TEMPERATURE, "Temperature profile [C].")
    wet_bulb_profile = _profile_property(Profile.WET_BULB, "Wet bulb profile [C].")
    dew_point_profile = _profile_property(Profile.DEW_POINT, "Dew point profile [C].")
    theta_e_profile = _profile_property(Profile.THETA_E, "Equivalent potential temperature profile [K].")
    wind_direction_profile = _profile_property(Profile.WIND_DIRECTION, "Wind direction profile [degrees].")
    wind_speed_profile = _profile_property(Profile.WIND_SPEED, "Wind speed profile [knots].")
    omega_profile = _profile_property(Profile.PRESSURE_VERTICAL_VELOCITY, "Vertical velocity profile [Pa/s].")
    height_profile = _profile_property(Profile.GEOPOTENTIAL_HEIGHT, "Geopotential height profile [m].")
    cloud_fraction_profile = _profile_property(Profile.CLOUD_FRACTION, "Cloud fraction profile [percent].")

    @property
    def n_levels(self) -> int:
        """Number of levels, the surface included."""
        return len(self.get_profile(Profile.PRESSURE))

    # -------------------------------------------------------------------------
    # Surface values
    # -------------------------------------------------------------------------

    def set_surface_value(self, which: Surface, value) -> "Sounding":
        """Set a surface value and update the surface level of the profiles.

        Args:
            which: Surface variable
            value: Number, None or OptionVal. NaN is stored as missing.

        Returns:
            New sounding
        """
        _require(which, Surface)
        cell = to_cell(value)
        surface = dict(self._surface)
        if cell.is_some():
            surface[which] = cell
        else:
            surface.pop(which, None)

        affected = [p for p, s in SURFACE_FOR_PROFILE.items() if s is which]
        if which in THERMO_INPUTS:
            affected.extend(DERIVED_PROFILES)

        logger.debug(f"Set surface {which} to {cell.as_option()}")
        return replace(self, _surface=surface)._resync(affected)

    def get_surface_value(self, which: Surface) -> OptionVal:
        """Get a surface value."""
        _require(which, Surface)
        return self._surface.get(which, OptionVal.missing())

    # -------------------------------------------------------------------------
    # Indexes
    # -------------------------------------------------------------------------

    def set_index(self, which: Index, value) -> "Sounding":
        """Set an index value. NaN is stored as missing.

        Raises:
            ValueError: If the Haines index is not a whole number
        """
        _require(which, Index)
        value = to_cell(value).as_option()

        indexes = dict(self._indexes)
        if value is None:
            indexes.pop(which, None)
        elif which.is_integer:
            if not float(value).is_integer():
                raise ValueError(f"{which} must be a whole number, got {value}")
            indexes[which] = OptionVal(int(value), int)
        else:
            indexes[which] = OptionVal(float(value))
        return replace(self, _indexes=indexes)

    def get_index(self, which: Index) -> OptionVal:
        """Get an index value."""
        _require(which, Index)
        kind = int if which.is_integer else float
        return self._indexes.get(which, OptionVal.missing(kind))

    # -------------------------------------------------------------------------
    # Surface synchronization
    # -------------------------------------------------------------------------

    def _surface_cell_for(self, profile: Profile) -> OptionVal:
        """Surface level value of ``profile`` computed from the surface scalars."""
        if profile in SURFACE_FOR_PROFILE:
            return self.get_surface_value(SURFACE_FOR_PROFILE[profile])
        if profile is Profile.GEOPOTENTIAL_HEIGHT:
            return self.station.elevation
        if profile in DERIVED_PROFILES:
            t = self.get_surface_value(Surface.TEMPERATURE).as_option()
            td = self.get_surface_value(Surface.DEW_POINT).as_option()
            p = self.get_surface_value(Surface.STATION_PRESSURE).as_option()
            func = thermo.wet_bulb if profile is Profile.WET_BULB else thermo.theta_e
            return OptionVal(func(t, td, p))
        return OptionVal.missing()

    def _resync(self, profiles: Sequence[Profile]) -> "Sounding":
        """Rewrite index 0 of the given profiles from the surface values."""
        updated = dict(self._profiles)
        for profile in profiles:
            values = updated.get(profile, ())
            if values:
                updated[profile] = (self._surface_cell_for(profile),) + values[1:]
        return replace(self, _profiles=updated)

    # -------------------------------------------------------------------------
    # Rows
    # -------------------------------------------------------------------------

    def get_data_row(self, idx: int) -> Optional[DataRow]:
        """Get a row of data values, None if ``idx`` is out of range.

        Profiles shorter than ``idx + 1``, including those never supplied,
        leave their field missing.
        """
        if idx < 0 or idx >= self.n_levels:
            return None

        values = {}
        for profile, name in PROFILE_FIELDS.items():
            seq = self._profiles.get(profile, ())
            if idx < len(seq):
                values[name] = seq[idx]
        return DataRow(**values)

    def surface_as_data_row(self) -> DataRow:
        """Surface values as a data row, matching index 0 of the profiles."""
        return DataRow(**{
            name: self._surface_cell_for(profile)
            for profile, name in PROFILE_FIELDS.items()
        })

    def bottom_up(self) -> ProfileIterator:
        """Iterator over the rows from the surface upward."""
        return ProfileIterator(self, 0, 1)

    def top_down(self) -> ProfileIterator:
        """Iterator over the rows from the top down to the surface."""
        return ProfileIterator(self, self.n_levels - 1, -1)

    def fetch_nearest_pnt(self, target_p: float) -> DataRow:
        """Row of data at the level with pressure closest to ``target_p`` [hPa]."""
        return nearest_point(self, target_p)

    def interpolate(self, target_p: float,
                    settings: Optional[SoundingSettings] = None) -> DataRow:
        """Row of data linearly interpolated to ``target_p`` [hPa].

        Wind direction is interpolated as a circular quantity.
        """
        settings = settings or SoundingSettings()
        return linear_interpolate(
            self, target_p, tolerance=settings.interpolation.pressure_tolerance_hpa
        )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, settings: Optional[SoundingSettings] = None) -> ValidationReport:
        """Check the sounding for internal consistency.

        Every rule runs, so the report lists all problems at once. This never
        raises; call :meth:`ValidationReport.raise_for_errors` to turn a
        failed report into an exception.

        Args:
            settings: Validation settings, defaults if omitted

        Returns:
            ValidationReport, truthy when the sounding is valid
        """
        settings = settings or SoundingSettings()
        report = run_checks(self, settings.validation)

        if not report.is_valid and settings.validation.log_violations:
            for error in report.errors:
                logger.warning(f"Sounding validation error: {error}")

        return report
