"""
Settings for sounding validation and interpolation.

Settings can be built in code, or loaded from a dictionary, a JSON file or a
YAML file:

    validation:
      haines_min: 2
      haines_max: 6
      require_pressure: true
      log_violations: true
    interpolation:
      pressure_tolerance_hpa: 1.0e-9
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
import json

import yaml

from sounding_base.core.constants import HAINES_MAX, HAINES_MIN, PRESSURE_TOLERANCE_HPA


@dataclass
class ValidationSettings:
    """Validation rule settings.

    Attributes:
        haines_min: Lowest valid Haines index
        haines_max: Highest valid Haines index
        require_pressure: Report a sounding without a pressure profile
        log_violations: Log each violation at warning level
    """
    haines_min: int = HAINES_MIN
    haines_max: int = HAINES_MAX
    require_pressure: bool = True
    log_violations: bool = True


@dataclass
class InterpolationSettings:
    """Interpolation settings.

    Attributes:
        pressure_tolerance_hpa: Pressures closer than this are the same level
    """
    pressure_tolerance_hpa: float = PRESSURE_TOLERANCE_HPA


@dataclass
class SoundingSettings:
    """Complete settings for the sounding data model.

    Example YAML input:
        validation: {haines_min: 2, haines_max: 6}
        interpolation: {pressure_tolerance_hpa: 0.01}
    """
    validation: ValidationSettings = field(default_factory=ValidationSettings)
    interpolation: InterpolationSettings = field(default_factory=InterpolationSettings)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SoundingSettings":
        """Create SoundingSettings from a dictionary.

        Args:
            config_dict: Settings dictionary, missing keys take defaults

        Returns:
            SoundingSettings instance
        """
        config_dict = config_dict or {}

        val_dict = config_dict.get("validation", {})
        validation = ValidationSettings(
            haines_min=val_dict.get("haines_min", HAINES_MIN),
            haines_max=val_dict.get("haines_max", HAINES_MAX),
            require_pressure=val_dict.get("require_pressure", True),
            log_violations=val_dict.get("log_violations", True),
        )

        interp_dict = config_dict.get("interpolation", {})
        interpolation = InterpolationSettings(
            pressure_tolerance_hpa=interp_dict.get(
                "pressure_tolerance_hpa", PRESSURE_TOLERANCE_HPA
            ),
        )

        return cls(validation=validation, interpolation=interpolation)

    @classmethod
    def from_json(cls, json_path: str) -> "SoundingSettings":
        """Load settings from a JSON file."""
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "SoundingSettings":
        """Load settings from a YAML file."""
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_file(cls, path: str) -> "SoundingSettings":
        """Load settings from a JSON or YAML file based on its suffix.

        Raises:
            ValueError: If the suffix is not .json, .yaml or .yml
        """
        suffix = Path(path).suffix.lower()
        if suffix == '.json':
            return cls.from_json(path)
        if suffix in ('.yaml', '.yml'):
            return cls.from_yaml(path)
        raise ValueError(f"Unsupported settings file format: {suffix}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a nested dictionary."""
        return {
            "validation": {
                "haines_min": self.validation.haines_min,
                "haines_max": self.validation.haines_max,
                "require_pressure": self.validation.require_pressure,
                "log_violations": self.validation.log_violations,
            },
            "interpolation": {
                "pressure_tolerance_hpa": self.interpolation.pressure_tolerance_hpa,
            },
        }

    def to_json(self, json_path: str, indent: int = 2) -> None:
        """Save settings to a JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def validate(self) -> List[str]:
        """Validate settings values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.validation.haines_min > self.validation.haines_max:
            errors.append("haines_min must not exceed haines_max")

        if self.interpolation.pressure_tolerance_hpa < 0:
            errors.append("pressure_tolerance_hpa must be non-negative")

        return errors
