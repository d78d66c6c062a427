"""
Configuration for the sounding data model.

This module provides:
- SoundingSettings: top level settings, loadable from dict/JSON/YAML
- ValidationSettings: validation rule limits
- InterpolationSettings: interpolation tolerances
"""

from sounding_base.config.settings import (
    SoundingSettings,
    ValidationSettings,
    InterpolationSettings,
)

__all__ = [
    "SoundingSettings",
    "ValidationSettings",
    "InterpolationSettings",
]
