"""
Sounding data model.

Classes
-------
Sounding
    Profiles, surface values, station info and indices of one sounding
StationInfo
    Station number, location and elevation
DataRow
    Copy of all values at one level
ProfileIterator
    Iterator over the rows of a sounding
Profile, Surface, Index
    Identifiers used by the generic accessors
"""

from sounding_base.model.enums import Profile, Surface, Index
from sounding_base.model.station_info import StationInfo
from sounding_base.model.data_row import DataRow
from sounding_base.model.iterators import ProfileIterator
from sounding_base.model.sounding import Sounding

__all__ = [
    "Profile",
    "Surface",
    "Index",
    "StationInfo",
    "DataRow",
    "ProfileIterator",
    "Sounding",
]
