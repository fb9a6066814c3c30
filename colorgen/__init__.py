# Quake-style lighting colormap generation from a 256-color palette

from .colormap import (
    COLORMAP_BYTES,
    COLORMAP_FILENAME,
    FULLBRIGHT_COUNT,
    FULLBRIGHT_START,
    LIGHT_LEVELS,
    Colormap,
    dim_color,
    generate_colormap,
    load_colormap,
    save_colormap,
)
from .errors import (
    ColorgenError,
    ColormapOpenError,
    ColormapSizeError,
    OutputOpenError,
    OutputSizeError,
    PaletteOpenError,
    PaletteSizeError,
)
from .matching import nearest_color_index, nearest_color_indices
from .palette import PALETTE_BYTES, PALETTE_SIZE, Palette, load_palette

__all__ = [
    "COLORMAP_BYTES",
    "COLORMAP_FILENAME",
    "FULLBRIGHT_COUNT",
    "FULLBRIGHT_START",
    "LIGHT_LEVELS",
    "PALETTE_BYTES",
    "PALETTE_SIZE",
    "Colormap",
    "Palette",
    "dim_color",
    "generate_colormap",
    "load_colormap",
    "load_palette",
    "nearest_color_index",
    "nearest_color_indices",
    "save_colormap",
    "ColorgenError",
    "ColormapOpenError",
    "ColormapSizeError",
    "OutputOpenError",
    "OutputSizeError",
    "PaletteOpenError",
    "PaletteSizeError",
]
