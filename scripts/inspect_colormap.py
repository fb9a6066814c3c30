#!/usr/bin/env python3
"""
Inspect a colormap against its palette: prints analysis as JSON, optionally writes a PNG preview.

Usage:
  python scripts/inspect_colormap.py palette.lmp colormap.lmp
  python scripts/inspect_colormap.py palette.lmp colormap.lmp --preview out/colormap.png --scale 4
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check a colormap (fullbrights, darkest level) and report brightness per light level."
    )
    parser.add_argument("palette", type=Path, help="Palette file (768 bytes).")
    parser.add_argument("colormap", type=Path, help="Colormap file (16384 bytes).")
    parser.add_argument(
        "--preview",
        type=Path,
        default=None,
        help="If set, write a PNG of the colormap (x = palette index, y = light level).",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=1,
        help="Integer upscale for the preview (default: 1).",
    )
    parser.add_argument(
        "--palette-preview",
        type=Path,
        default=None,
        help="If set, write a 16x16 PNG swatch grid of the palette.",
    )
    args = parser.parse_args()

    from colorgen.analysis import analyze_colormap
    from colorgen.colormap import load_colormap
    from colorgen.errors import ColorgenError
    from colorgen.palette import load_palette

    try:
        palette = load_palette(args.palette)
        colormap = load_colormap(args.colormap)
    except ColorgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = analyze_colormap(palette, colormap)
    print(json.dumps(report.to_dict(), indent=2))

    from colorgen.preview import render_colormap_image, render_palette_image, save_preview

    try:
        if args.preview is not None:
            path = save_preview(render_colormap_image(palette, colormap, scale=args.scale), args.preview)
            print(f"Preview: {path}", file=sys.stderr)
        if args.palette_preview is not None:
            path = save_preview(render_palette_image(palette, scale=args.scale), args.palette_preview)
            print(f"Palette preview: {path}", file=sys.stderr)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
