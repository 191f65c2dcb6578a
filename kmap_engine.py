"""Karnaugh map indexing helpers used to transcribe function vectors."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

MAX_VARS = 6

# Column/row order of the hand-drawn 6-variable map: the 3-bit Gray code read backwards.
MIRRORED_GRAY: Tuple[int, ...] = (4, 5, 7, 6, 2, 3, 1, 0)


def gray_code(bits: int, mirrored: bool = False) -> List[int]:
    """Return the reflected Gray sequence for ``bits`` bits."""
    seq = [i ^ (i >> 1) for i in range(1 << bits)]
    return seq[::-1] if mirrored else seq


def _axis_bits(nvars: int) -> Tuple[int, int]:
    if nvars < 1 or nvars > MAX_VARS:
        raise ValueError(f"K-map available for 1-{MAX_VARS} variables.")
    row_bits = nvars // 2
    return row_bits, nvars - row_bits


def map_dimensions(nvars: int) -> Tuple[int, int]:
    """Return (rows, cols) for K-map based on variable count."""
    row_bits, col_bits = _axis_bits(nvars)
    return 1 << row_bits, 1 << col_bits


def idx_to_rc(nvars: int, idx: int, mirrored: bool = True) -> Tuple[int, int]:
    """Translate a minterm index to (row, col); high bits pick the row."""
    row_bits, col_bits = _axis_bits(nvars)
    if idx < 0 or idx >= 1 << nvars:
        raise ValueError(f"Index {idx} out of range for {nvars} variables.")
    high = idx >> col_bits
    low = idx & ((1 << col_bits) - 1)
    return (
        gray_code(row_bits, mirrored).index(high),
        gray_code(col_bits, mirrored).index(low),
    )


def rc_to_idx(nvars: int, r: int, c: int, mirrored: bool = True) -> int:
    """Return the minterm index shown in a given grid cell."""
    row_bits, col_bits = _axis_bits(nvars)
    return (gray_code(row_bits, mirrored)[r] << col_bits) | gray_code(col_bits, mirrored)[c]


def index_grid(nvars: int, mirrored: bool = True) -> np.ndarray:
    """Matrix of minterm indices laid out as on the map."""
    nrows, ncols = map_dimensions(nvars)
    grid = np.zeros((nrows, ncols), dtype=int)
    for r in range(nrows):
        for c in range(ncols):
            grid[r, c] = rc_to_idx(nvars, r, c, mirrored)
    return grid


def values_to_grid(values: Sequence[bool], nvars: int, mirrored: bool = True) -> np.ndarray:
    """Place a function vector onto the map as a 0/1 matrix."""
    if len(values) != 1 << nvars:
        raise ValueError(f"Expected {1 << nvars} values for {nvars} variables, got {len(values)}")
    lookup = np.asarray([int(bool(v)) for v in values], dtype=int)
    return lookup[index_grid(nvars, mirrored)]


def grid_to_values(grid, nvars: int, mirrored: bool = True) -> List[bool]:
    """Read a 0/1 map back into a function vector ordered by index."""
    cells = np.asarray(grid)
    if cells.shape != map_dimensions(nvars):
        raise ValueError(f"Grid shape {cells.shape} does not match {nvars} variables.")
    values = [False] * (1 << nvars)
    indices = index_grid(nvars, mirrored)
    for (r, c), idx in np.ndenumerate(indices):
        values[idx] = bool(cells[r, c])
    return values


__all__ = [
    "MAX_VARS",
    "MIRRORED_GRAY",
    "gray_code",
    "grid_to_values",
    "idx_to_rc",
    "index_grid",
    "map_dimensions",
    "rc_to_idx",
    "values_to_grid",
]
