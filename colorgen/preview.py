"""
Preview images: the colormap as a 256x64 picture (x = palette index, y = light level)
and the palette as a 16x16 swatch grid.
"""
from pathlib import Path

import numpy as np

from .colormap import Colormap
from .palette import Palette


def _to_image(rgb: np.ndarray, scale: int):
    from PIL import Image

    if not isinstance(scale, int) or scale < 1:
        raise ValueError(f"scale must be a positive integer, got {scale!r}")
    img = Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
    return img


def render_colormap_image(palette: Palette, colormap: Colormap, scale: int = 1):
    """Pixel (x, y) shows palette[colormap[y, x]]."""
    return _to_image(palette.colors[colormap.table], scale)


def render_palette_image(palette: Palette, scale: int = 1):
    """16x16 grid, entry i at column i % 16, row i // 16."""
    return _to_image(palette.colors.reshape(16, 16, 3), scale)


def save_preview(image, path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    return path
