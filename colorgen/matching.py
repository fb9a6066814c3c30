"""
Nearest palette color by squared Euclidean RGB distance.
No luminosity weighting: the classic colormap was built with plain RGB distance.
"""
from typing import Sequence

import numpy as np

from .palette import Palette

# Below this magnitude three squared int64 differences cannot overflow
_INT64_SAFE = 2 ** 30


def _squared_distances(palette: Palette, targets: np.ndarray) -> np.ndarray:
    diff = targets[:, None, :] - palette.colors.astype(np.int64)[None, :, :]
    return (diff * diff).sum(axis=-1)


def _nearest_exact(entries: list[tuple[int, int, int]], target: Sequence[int]) -> int:
    """Plain-int scan for targets too large for int64 arithmetic."""
    best, best_dist = 0, None
    for i, entry in enumerate(entries):
        dist = sum((int(t) - c) ** 2 for t, c in zip(target, entry))
        if best_dist is None or dist < best_dist:
            best, best_dist = i, dist
    return best


def nearest_color_indices(palette: Palette, targets: np.ndarray | Sequence[Sequence[int]]) -> np.ndarray:
    """
    Best palette index for each (R, G, B) row of targets, shape (N,).
    On equal distance the lowest index wins (argmin returns the first minimum).
    """
    t = np.asarray(targets, dtype=object)
    if t.size == 0:
        return np.zeros(0, dtype=np.uint8)
    if t.ndim != 2 or t.shape[1] != 3:
        raise ValueError(f"Targets must have shape (N, 3), got {t.shape}")
    if all(abs(int(v)) < _INT64_SAFE for v in t.flat):
        return np.argmin(_squared_distances(palette, t.astype(np.int64)), axis=1).astype(np.uint8)
    entries = list(palette)
    return np.array([_nearest_exact(entries, row) for row in t], dtype=np.uint8)


def nearest_color_index(palette: Palette, target: Sequence[int]) -> int:
    """Palette index closest to target; components may be any integers."""
    if len(target) != 3:
        raise ValueError(f"Target must have 3 components, got {len(target)}")
    return int(nearest_color_indices(palette, [target])[0])
