"""
Thermodynamic functions used to keep derived surface values consistent.

Thin wrappers over MetPy that take plain floats in sounding units and
return ``None`` instead of raising when the input is missing or physically
invalid.

Functions
---------
wet_bulb
    Wet bulb temperature [C] from temperature, dew point and pressure
theta_e
    Equivalent potential temperature [K] from temperature, dew point and pressure
"""

import logging
import math
from typing import Optional

import metpy.calc as mpcalc
from metpy.units import units

logger = logging.getLogger(__name__)


def _check_inputs(temperature: Optional[float], dew_point: Optional[float],
                  pressure: Optional[float]) -> bool:
    """Return True if the inputs can be passed to MetPy."""
    if temperature is None or dew_point is None or pressure is None:
        return False
    if not all(math.isfinite(v) for v in (temperature, dew_point, pressure)):
        logger.debug("Rejected non-finite thermodynamic input")
        return False
    if pressure <= 0.0:
        logger.debug(f"Rejected non-positive pressure {pressure} hPa")
        return False
    if dew_point > temperature:
        logger.debug(f"Rejected super-saturated input T={temperature} Td={dew_point}")
        return False
    return True


def wet_bulb(temperature: Optional[float], dew_point: Optional[float],
             pressure: Optional[float]) -> Optional[float]:
    """
    Wet bulb temperature.

    Parameters
    ----------
    temperature : float or None
        Temperature in Celsius
    dew_point : float or None
        Dew point in Celsius
    pressure : float or None
        Pressure in hPa

    Returns
    -------
    float or None
        Wet bulb temperature in Celsius, None if it cannot be computed
    """
    if not _check_inputs(temperature, dew_point, pressure):
        return None

    result = mpcalc.wet_bulb_temperature(
        pressure * units.hPa,
        temperature * units.degC,
        dew_point * units.degC,
    ).m_as(units.degC)
    result = float(result)
    return result if math.isfinite(result) else None


def theta_e(temperature: Optional[float], dew_point: Optional[float],
            pressure: Optional[float]) -> Optional[float]:
    """
    Equivalent potential temperature.

    Parameters
    ----------
    temperature : float or None
        Temperature in Celsius
    dew_point : float or None
        Dew point in Celsius
    pressure : float or None
        Pressure in hPa

    Returns
    -------
    float or None
        Equivalent potential temperature in Kelvin, None if it cannot be computed
    """
    if not _check_inputs(temperature, dew_point, pressure):
        return None

    result = mpcalc.equivalent_potential_temperature(
        pressure * units.hPa,
        temperature * units.degC,
        dew_point * units.degC,
    ).m_as(units.kelvin)
    result = float(result)
    return result if math.isfinite(result) else None
