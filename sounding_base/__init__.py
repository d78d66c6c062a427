"""
sounding-base: Data model for atmospheric soundings.

A common base for tools that read, write, analyze or display vertical
soundings with pressure as the vertical coordinate. The emphasis is data
representation, not derivation: file formats, plotting and sounding
analysis live in other packages built on top of this one.

Modules
-------
core
    Missing-value cells and shared constants
model
    Sounding, StationInfo, DataRow and the Profile/Surface/Index identifiers
physics
    Wet bulb and equivalent potential temperature (via MetPy)
validation
    Consistency checks and validation reports
config
    Validation and interpolation settings (dict, JSON or YAML)
"""

__version__ = "0.11.1"
__author__ = "sounding-base Contributors"

from sounding_base.core import OptionVal
from sounding_base.model import (
    DataRow,
    Index,
    Profile,
    ProfileIterator,
    Sounding,
    StationInfo,
    Surface,
)
from sounding_base.validation import ValidationError, ValidationReport
from sounding_base.config import SoundingSettings

__all__ = [
    "__version__",
    "OptionVal",
    "Sounding",
    "StationInfo",
    "DataRow",
    "ProfileIterator",
    "Profile",
    "Surface",
    "Index",
    "ValidationReport",
    "ValidationError",
    "SoundingSettings",
]
