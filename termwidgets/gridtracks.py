"""Sizing and positioning of grid rows and columns."""

from __future__ import annotations

from typing import Sequence


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def distribute_tracks(
    definitions: Sequence[int],
    count: int,
    available: int,
    minimum: int,
    gap: int,
    borders: bool,
) -> list[int]:
    """Return the sizes of ``count`` rows or columns sharing ``available`` cells.

    A definition greater than 0 is an absolute size; 0 or less is a share of
    the free space, 0 counting as -1. Tracks beyond the definitions count as 0.
    No track is smaller than ``minimum``. With ``borders``, a one-cell border
    surrounds every track and ``gap`` is ignored.
    """
    if count < len(definitions):
        raise ValueError("count is smaller than the number of definitions")
    sizes = [0] * count
    remaining = available
    proportional = 0
    for index, value in enumerate(definitions):
        if value > 0:
            value = max(value, minimum)
            remaining -= value
            sizes[index] = value
        else:
            proportional += -value if value < 0 else 1
    if borders:
        remaining -= count + 1
    elif count > 0:
        remaining -= (count - 1) * gap
    proportional += count - len(definitions)

    for index in range(count):
        value = definitions[index] if index < len(definitions) else 0
        if value > 0:
            continue
        share = -value if value < 0 else 1
        size = _div_trunc(share * remaining, proportional)
        remaining -= size
        proportional -= share
        sizes[index] = max(size, minimum)
    return sizes


def track_positions(sizes: Sequence[int], gap: int, borders: bool) -> list[int]:
    """Return the start offset of each track, relative to the grid's corner."""
    step = 1 if borders else gap
    position = 1 if borders else 0
    positions = []
    for size in sizes:
        positions.append(position)
        position += size + step
    return positions