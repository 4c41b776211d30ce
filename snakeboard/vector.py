"""A growable integer vector whose unset locations read as zero."""

from __future__ import annotations


def _check_location(loc) -> int:
    if isinstance(loc, bool) or not isinstance(loc, int):
        raise TypeError(f"vector location must be an integer, not {type(loc).__name__}")
    if loc < 0:
        raise IndexError(f"vector location must be non-negative, got {loc}")
    return loc


class Vector:
    """Integers indexed from zero that grow as locations are set.

    A new vector holds a single zero. Reading past the end yields 0;
    setting past the end grows the vector, filling the gap with zeros.
    """

    def __init__(self) -> None:
        self._data: list[int] = [0]

    def __getitem__(self, loc: int) -> int:
        loc = _check_location(loc)
        if loc >= len(self._data):
            return 0
        return self._data[loc]

    def __setitem__(self, loc: int, value: int) -> None:
        loc = _check_location(loc)
        if loc >= len(self._data):
            self._data.extend([0] * (loc + 1 - len(self._data)))
        self._data[loc] = value

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"