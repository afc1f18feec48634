from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

from ..types import Piece


def piece_bounds(pieces: Iterable[Piece[Any] | tuple[int, int]]) -> np.ndarray:
    """Materialise piece offsets as an ``(n, 2)`` int64 array."""
    rows = [p.bounds if isinstance(p, Piece) else tuple(p) for p in pieces]
    if not rows:
        return np.zeros((0, 2), dtype=np.int64)
    return np.asarray(rows, dtype=np.int64).reshape(-1, 2)


def check_contiguous(bounds: np.ndarray, length: int) -> bool:
    """True when ``bounds`` cover ``[0, length)`` with no gaps or overlaps."""
    bounds = np.asarray(bounds, dtype=np.int64).reshape(-1, 2)
    if bounds.shape[0] == 0:
        return length == 0
    starts = bounds[:, 0]
    ends = bounds[:, 1]
    if starts[0] != 0 or ends[-1] != length:
        return False
    if np.any(ends < starts):
        return False
    return bool(np.array_equal(starts[1:], ends[:-1]))
