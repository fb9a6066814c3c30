"""
Colormap generation: 64 light levels x 256 palette indices, each cell a palette index.
Row y is light level y (0 = full brightness, 63 = darkest); on disk cell (y, x) sits at y * 256 + x.
The last 32 palette entries are fullbright and keep their own index at every level.
"""
import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .errors import ColormapOpenError, ColormapSizeError, OutputOpenError, OutputSizeError
from .matching import nearest_color_indices
from .palette import PALETTE_SIZE, Palette

logger = logging.getLogger(__name__)

LIGHT_LEVELS = 64
FULLBRIGHT_COUNT = 32
FULLBRIGHT_START = PALETTE_SIZE - FULLBRIGHT_COUNT
COLORMAP_BYTES = LIGHT_LEVELS * PALETTE_SIZE
COLORMAP_FILENAME = "colormap.lmp"

_MAX_LEVEL = LIGHT_LEVELS - 1


@dataclass(frozen=True, eq=False)
class Colormap:
    """Immutable light table backed by a read-only (64, 256) uint8 array."""
    table: np.ndarray

    def __post_init__(self) -> None:
        arr = np.asarray(self.table)
        if arr.shape != (LIGHT_LEVELS, PALETTE_SIZE):
            raise ValueError(f"Colormap must have shape ({LIGHT_LEVELS}, {PALETTE_SIZE}), got {arr.shape}")
        if np.any(arr < 0) or np.any(arr > 255):
            raise ValueError("Colormap cells must be palette indices in 0-255")
        arr = arr.astype(np.uint8)
        arr.setflags(write=False)
        object.__setattr__(self, "table", arr)

    def __getitem__(self, key: tuple[int, int]) -> int:
        return int(self.table[key])

    def row(self, level: int) -> np.ndarray:
        return self.table[level]

    @classmethod
    def from_bytes(cls, data: bytes, path: Path | str | None = None) -> "Colormap":
        if len(data) != COLORMAP_BYTES:
            raise ColormapSizeError(
                f"Colormap data is not {COLORMAP_BYTES} bytes long. Got {len(data)} bytes.",
                path,
                expected=COLORMAP_BYTES,
                actual=len(data),
            )
        return cls(np.frombuffer(data, dtype=np.uint8).reshape(LIGHT_LEVELS, PALETTE_SIZE))

    def to_bytes(self) -> bytes:
        """Row-major bytes, brightest level first."""
        return self.table.tobytes(order="C")


def dim_color(rgb: tuple[int, int, int], level: int) -> tuple[int, int, int]:
    """
    Dim an RGB color for a light level: (v * (63 - level) + 16) >> 5 per component,
    i.e. round(v * (63 - level) / 32) in fixed point, capped at 255.
    """
    if not 0 <= level <= _MAX_LEVEL:
        raise ValueError(f"Light level must be in 0-{_MAX_LEVEL}, got {level}")
    scale = _MAX_LEVEL - level
    r, g, b = (min((int(v) * scale + 16) >> 5, 255) for v in rgb)
    return r, g, b


def _dim_row(colors: np.ndarray, level: int) -> np.ndarray:
    """Vectorized dim_color over an (N, 3) array."""
    scale = _MAX_LEVEL - level
    dimmed = (colors.astype(np.int64) * scale + 16) >> 5
    return np.minimum(dimmed, 255)


def generate_colormap(palette: Palette) -> Colormap:
    """Build the full 64-level table for a palette. Pure and deterministic."""
    table = np.empty((LIGHT_LEVELS, PALETTE_SIZE), dtype=np.uint8)
    lit = palette.colors[:FULLBRIGHT_START]
    fullbright = np.arange(FULLBRIGHT_START, PALETTE_SIZE, dtype=np.uint8)
    for y in range(LIGHT_LEVELS):
        table[y, :FULLBRIGHT_START] = nearest_color_indices(palette, _dim_row(lit, y))
        table[y, FULLBRIGHT_START:] = fullbright
    logger.debug("Generated %d light levels (%d fullbright colors)", LIGHT_LEVELS, FULLBRIGHT_COUNT)
    return Colormap(table)


def load_colormap(path: Path | str) -> Colormap:
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ColormapOpenError(f"Cannot open colormap file {path}: {e}", path) from e
    return Colormap.from_bytes(data, path)


def save_colormap(colormap: Colormap, path: Path | str) -> int:
    """
    Write the colormap in one pass. Returns bytes written.
    A failed or short write may leave a truncated file behind.
    """
    path = Path(path)
    data = colormap.to_bytes()
    try:
        f = open(path, "wb")
    except OSError as e:
        raise OutputOpenError(f"Cannot open output colormap file {path}: {e}", path) from e
    written = 0
    try:
        with f:
            written = f.write(data) or 0
    except OSError as e:
        raise OutputSizeError(
            f"Failed to write all {COLORMAP_BYTES} bytes to {path}: {e}",
            path,
            expected=COLORMAP_BYTES,
            actual=written,
        ) from e
    if written != COLORMAP_BYTES:
        raise OutputSizeError(
            f"Failed to write all {COLORMAP_BYTES} bytes to {path}. Wrote {written} bytes.",
            path,
            expected=COLORMAP_BYTES,
            actual=written,
        )
    return written
