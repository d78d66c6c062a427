"""
Vertical lookups in pressure coordinates.

Functions
---------
nearest_point
    Row of the level closest to a target pressure
linear_interpolate
    Row linearly interpolated in pressure, circular for wind direction

Both scans assume the pressure profile decreases with index, which the
validator checks. On non-monotonic pressure the results are not meaningful.
"""

import logging
import math
from typing import Optional

import numpy as np

from sounding_base.core.constants import FULL_CIRCLE_DEG, PRESSURE_TOLERANCE_HPA
from sounding_base.core.missing_value import OptionVal
from sounding_base.model.data_row import PROFILE_FIELDS, DataRow
from sounding_base.model.enums import Profile

logger = logging.getLogger(__name__)


def _pressures(sounding):
    """Index and value of every usable pressure, skipping missing and non-finite."""
    for i, cell in enumerate(sounding.get_profile(Profile.PRESSURE)):
        p = cell.as_option()
        if p is not None and math.isfinite(p):
            yield i, p


def nearest_point(sounding, target_p: float) -> DataRow:
    """
    Row of data closest to a target pressure.

    Parameters
    ----------
    sounding : Sounding
        Sounding to search
    target_p : float
        Target pressure in hPa

    Returns
    -------
    row : DataRow
        Row at the nearest level. Ties go to the first level scanned, the
        surface end. An all missing row if there is no pressure data.

    Notes
    -----
    The scan stops as soon as the distance to the target starts growing.
    """
    idx: Optional[int] = None
    best_abs_diff = np.inf
    for i, p in _pressures(sounding):
        abs_diff = abs(target_p - p)
        if abs_diff < best_abs_diff:
            best_abs_diff = abs_diff
            idx = i
        if abs_diff > best_abs_diff:
            break

    if idx is None:
        return DataRow()
    return sounding.get_data_row(idx)


def _linear(below: OptionVal, above: OptionVal, weight: float) -> OptionVal:
    """v_below + weight * (v_above - v_below), missing if either end is."""
    lo, hi = below.as_option(), above.as_option()
    if lo is None or hi is None:
        return OptionVal.missing()
    return OptionVal(lo + weight * (hi - lo))


def _circular(below: OptionVal, above: OptionVal, weight: float) -> OptionVal:
    """Interpolate directions [degrees] through their unit vector components."""
    lo, hi = below.as_option(), above.as_option()
    if lo is None or hi is None:
        return OptionVal.missing()

    rad = np.deg2rad([lo, hi])
    sin_lo, sin_hi = np.sin(rad)
    cos_lo, cos_hi = np.cos(rad)
    sin_t = sin_lo + weight * (sin_hi - sin_lo)
    cos_t = cos_lo + weight * (cos_hi - cos_lo)

    direction = float(np.mod(np.rad2deg(np.arctan2(sin_t, cos_t)), FULL_CIRCLE_DEG))
    # Rounding can map tiny negative angles onto 360 exactly
    if direction >= FULL_CIRCLE_DEG:
        direction -= FULL_CIRCLE_DEG
    return OptionVal(direction)


def linear_interpolate(sounding, target_p: float,
                       tolerance: float = PRESSURE_TOLERANCE_HPA) -> DataRow:
    """
    Interpolate every profile to a target pressure.

    Parameters
    ----------
    sounding : Sounding
        Sounding to interpolate
    target_p : float
        Target pressure in hPa
    tolerance : float
        Levels within this distance [hPa] of the target are returned as is

    Returns
    -------
    row : DataRow
        Interpolated row. If the target is not bracketed by the data, only
        the pressure is set.

    Notes
    -----
    Values are linear in pressure:

        v = v_below + (p - p_below) / (p_above - p_below) * (v_above - v_below)

    Wind direction is interpolated as sine and cosine components so the result
    is correct across north, then normalized into [0, 360).
    """
    below_idx: Optional[int] = None
    above_idx: Optional[int] = None

    for i, p in _pressures(sounding):
        if abs(p - target_p) <= tolerance:
            return sounding.get_data_row(i)
        if p > target_p:
            below_idx = i
        elif below_idx is not None:
            above_idx = i
            break
        else:
            # Target is below the lowest level
            break

    if below_idx is None or above_idx is None:
        logger.debug(f"Pressure {target_p} hPa is not bracketed by the sounding")
        return DataRow(pressure=OptionVal(target_p))

    row_below = sounding.get_data_row(below_idx)
    row_above = sounding.get_data_row(above_idx)
    p_below = row_below.pressure.unwrap()
    p_above = row_above.pressure.unwrap()
    weight = (target_p - p_below) / (p_above - p_below)

    values = {"pressure": OptionVal(target_p)}
    for profile, name in PROFILE_FIELDS.items():
        if profile is Profile.PRESSURE:
            continue
        below, above = getattr(row_below, name), getattr(row_above, name)
        if profile is Profile.WIND_DIRECTION:
            values[name] = _circular(below, above, weight)
        else:
            values[name] = _linear(below, above, weight)

    return DataRow(**values)
