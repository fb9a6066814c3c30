"""
Inspect a generated colormap: fullbright columns, convergence of the darkest level,
and how brightness and color variety fall off per light level.
"""
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .colormap import FULLBRIGHT_START, LIGHT_LEVELS, Colormap
from .matching import nearest_color_index
from .palette import PALETTE_SIZE, Palette

# Rec. 601 luma weights, same as the frame metrics elsewhere
_LUMA = np.array([0.299, 0.587, 0.114])


@dataclass
class ColormapAnalysis:
    black_index: int
    fullbright_intact: bool
    darkest_row_uniform: bool
    unique_per_level: list[int] = field(default_factory=list)
    mean_brightness_per_level: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "black_index": self.black_index,
            "fullbright_intact": self.fullbright_intact,
            "darkest_row_uniform": self.darkest_row_uniform,
            "unique_per_level": self.unique_per_level,
            "mean_brightness_per_level": self.mean_brightness_per_level,
        }


def level_brightness(palette: Palette, colormap: Colormap) -> np.ndarray:
    """Mean luma (0-255) of the matched colors on each light level, shape (64,)."""
    rgb = palette.colors.astype(np.float64)[colormap.table]  # (64, 256, 3)
    return (rgb @ _LUMA).mean(axis=1)


def analyze_colormap(palette: Palette, colormap: Colormap) -> ColormapAnalysis:
    table = colormap.table
    black = nearest_color_index(palette, (0, 0, 0))
    expected_fullbright = np.arange(FULLBRIGHT_START, PALETTE_SIZE)
    fullbright_ok = bool(np.all(table[:, FULLBRIGHT_START:] == expected_fullbright))
    darkest_ok = bool(np.all(table[LIGHT_LEVELS - 1, :FULLBRIGHT_START] == black))
    return ColormapAnalysis(
        black_index=black,
        fullbright_intact=fullbright_ok,
        darkest_row_uniform=darkest_ok,
        unique_per_level=[int(len(np.unique(row))) for row in table],
        mean_brightness_per_level=[round(float(v), 3) for v in level_brightness(palette, colormap)],
    )
