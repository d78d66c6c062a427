"""Thermodynamic functions for derived sounding values."""

from .thermo import wet_bulb, theta_e

__all__ = ["wet_bulb", "theta_e"]
