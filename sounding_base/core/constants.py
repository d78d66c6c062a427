"""
Constants shared by the sounding data model.

Units follow the sounding conventions: pressure in hPa, temperatures in
degrees Celsius (theta-e in Kelvin), wind speed in knots, heights in meters.
"""

import struct

# =============================================================================
# Missing Value Sentinels
# =============================================================================

# Bit pattern reserved for a missing float: a quiet NaN with a payload that
# no arithmetic operation produces.
MISSING_F64_BITS = 0x7FF8DEADBEEF0001

# Float carrying the reserved bit pattern
MISSING_F64 = struct.unpack("<d", struct.pack("<Q", MISSING_F64_BITS))[0]

# Missing value for integer cells (station numbers, lead times, Haines index)
MISSING_I32 = -9999

# =============================================================================
# Validation Limits
# =============================================================================

# Valid range of the Haines index (inclusive)
HAINES_MIN = 2
HAINES_MAX = 6

# =============================================================================
# Interpolation
# =============================================================================

# Two pressures closer than this [hPa] are treated as the same level
PRESSURE_TOLERANCE_HPA = 1e-9

# Full circle [degrees], used to normalize wind directions
FULL_CIRCLE_DEG = 360.0
