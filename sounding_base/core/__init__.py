"""
Core building blocks of the sounding data model.

This module contains:
- OptionVal: compact missing-value cell for scalars
- cells_from_array / cells_to_array: conversion to and from numpy arrays
- to_cell: single value conversion, NaN becomes missing
- constants: sentinel values and validation limits
"""

from sounding_base.core.missing_value import OptionVal, cells_from_array, cells_to_array, to_cell

__all__ = [
    "OptionVal",
    "cells_from_array",
    "cells_to_array",
    "to_cell",
]
