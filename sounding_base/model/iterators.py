"""Iteration over the rows of a sounding."""

from typing import Optional

from sounding_base.model.data_row import DataRow


class ProfileIterator:
    """Iterator over the data rows of a sounding.

    Bottom up iteration (``direction=+1``) starts at the surface row, index 0,
    and moves to decreasing pressure. Top down iteration (``direction=-1``)
    starts at the last level and ends with the surface row. Iteration stops at
    the first index outside the pressure profile.

    Soundings are immutable, so the rows produced never change during
    iteration. Request a new iterator from the sounding to start over.
    """

    def __init__(self, sounding, start: int, direction: int):
        if direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {direction}")
        self._src = sounding
        self._next = start
        self._direction = direction

    @property
    def direction(self) -> int:
        """+1 for bottom up, -1 for top down."""
        return self._direction

    def __iter__(self):
        return self

    def __next__(self) -> DataRow:
        row: Optional[DataRow] = self._src.get_data_row(self._next)
        if row is None:
            raise StopIteration
        self._next += self._direction
        return row
