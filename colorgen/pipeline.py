"""
Pipeline: one palette file -> one colormap file.
The palette is read and checked in full before anything is computed or written.
"""
from pathlib import Path
from typing import Callable

from .colormap import COLORMAP_FILENAME, generate_colormap, save_colormap
from .matching import nearest_color_index
from .palette import load_palette
from .workflow_utils import log_structured


def generate_colormap_file(
    palette_path: Path | str,
    *,
    output_path: Path | str | None = None,
    progress: Callable[[str], None] | None = None,
) -> Path:
    """
    Read the palette, build the colormap and write it. Returns the output path
    (colormap.lmp in the current directory unless output_path is given).
    Raises a ColorgenError subclass on any failure; on read failures nothing is written.
    """
    if output_path is None:
        output_path = Path.cwd() / COLORMAP_FILENAME
    output_path = Path(output_path)
    say = progress or (lambda _msg: None)

    palette = load_palette(palette_path)
    say(f"Successfully read {palette_path} ({len(palette.to_bytes())} bytes).")

    say("Generating colormap...")
    colormap = generate_colormap(palette)

    written = save_colormap(colormap, output_path)
    say(f"Successfully wrote {output_path.name} ({written} bytes).")

    log_structured(
        "info",
        event="colormap_written",
        palette=str(palette_path),
        output=str(output_path),
        bytes=written,
        black_index=nearest_color_index(palette, (0, 0, 0)),
    )
    return output_path
