"""
A quantity with a reserved value that marks missing or invalid data.

Semantically an :class:`OptionVal` is no different from ``Optional[float]``
or ``Optional[int]``. It exists so that every profile value and surface
scalar has the same compact, immutable representation, and so that
collaborators converting from fixed-width file formats can pass sentinel
encoded values straight through.

Floats use a reserved NaN bit pattern as the sentinel, so every other float,
including an ordinary NaN, is stored as present data. Integers use -9999;
that value cannot be stored as present data in an integer cell.
"""

import math
import struct
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from sounding_base.core.constants import MISSING_F64, MISSING_F64_BITS, MISSING_I32

Number = Union[int, float]


def _is_missing_float(value: float) -> bool:
    """Check the exact bit pattern, NaN never compares equal by value."""
    if not math.isnan(value):
        return False
    return struct.unpack("<Q", struct.pack("<d", value))[0] == MISSING_F64_BITS


class OptionVal:
    """Immutable cell holding one scalar or the missing marker for its type.

    Parameters
    ----------
    value : int, float, OptionVal or None
        Value to store. ``None`` produces a missing cell of type ``kind``.
    kind : type
        ``float`` (default) or ``int``; only consulted when ``value`` is None.

    Examples
    --------
    >>> OptionVal(850.0).as_option()
    850.0
    >>> OptionVal(None).as_option() is None
    True
    >>> OptionVal(None, int).unwrap()
    -9999
    """

    __slots__ = ("_value",)

    MISSING = {float: MISSING_F64, int: MISSING_I32}

    def __init__(self, value: Union[Number, "OptionVal", None] = None, kind: type = float):
        if isinstance(value, OptionVal):
            stored = value._value
        elif value is None:
            if kind not in self.MISSING:
                raise TypeError(f"Unsupported cell type: {kind.__name__}")
            stored = self.MISSING[kind]
        elif isinstance(value, bool):
            raise TypeError("Boolean values cannot be stored in an OptionVal")
        elif isinstance(value, (int, np.integer)):
            stored = int(value)
        elif isinstance(value, (float, np.floating)):
            stored = float(value)
        else:
            raise TypeError(f"Unsupported cell value: {value!r}")
        object.__setattr__(self, "_value", stored)

    def __setattr__(self, name, value):
        raise AttributeError("OptionVal is immutable")

    @classmethod
    def from_option(cls, value: Optional[Number], kind: type = float) -> "OptionVal":
        """Build a cell from an optional value."""
        return cls(value, kind)

    @classmethod
    def missing(cls, kind: type = float) -> "OptionVal":
        """A missing cell of the given type."""
        return cls(None, kind)

    @property
    def kind(self) -> type:
        """Python type of the stored value."""
        return int if isinstance(self._value, int) else float

    def is_none(self) -> bool:
        """True if this cell holds the missing marker."""
        if isinstance(self._value, int):
            return self._value == MISSING_I32
        return _is_missing_float(self._value)

    def is_some(self) -> bool:
        """True if this cell holds present data."""
        return not self.is_none()

    def as_option(self) -> Optional[Number]:
        """Convert to ``None`` or the stored value."""
        if self.is_none():
            return None
        return self._value

    def unwrap(self) -> Number:
        """Return the stored value even if it is the missing marker."""
        return self._value

    def __eq__(self, other):
        if not isinstance(other, OptionVal):
            return NotImplemented
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none() and self.kind is other.kind
        return self._value == other._value

    def __hash__(self):
        if self.is_none():
            return hash((OptionVal, self.kind))
        return hash(self._value)

    def __repr__(self):
        if self.is_none():
            return f"OptionVal(None, {self.kind.__name__})"
        return f"OptionVal({self._value!r})"

    def __reduce__(self):
        return (OptionVal, (self.as_option(), self.kind))


def to_cell(value: Union[Number, OptionVal, None]) -> OptionVal:
    """Convert a number, ``None`` or cell to a cell, treating NaN as missing.

    A cell holding an ordinary NaN is also turned into a missing cell of the
    same type.
    """
    kind = float
    if isinstance(value, OptionVal):
        kind = value.kind
        value = value.as_option()
    if value is None:
        return OptionVal.missing(kind)
    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return OptionVal.missing(kind)
    return OptionVal(value)


def cells_from_array(values: Iterable[Optional[Number]]) -> Tuple[OptionVal, ...]:
    """Convert numbers to float cells, treating ``None`` and NaN as missing.

    Args:
        values: Sequence or array of numbers, ``None`` or ``OptionVal``

    Returns:
        Tuple of cells, plain numbers become float cells
    """
    cells = []
    for value in values:
        if isinstance(value, OptionVal) or value is None:
            cells.append(to_cell(value))
        else:
            cells.append(to_cell(float(value)))
    return tuple(cells)


def cells_to_array(cells: Iterable[OptionVal]) -> np.ndarray:
    """Convert cells to a float64 array with NaN for missing values."""
    return np.array(
        [np.nan if cell.is_none() else float(cell.unwrap()) for cell in cells],
        dtype=np.float64,
    )
