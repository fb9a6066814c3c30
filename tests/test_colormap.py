"""
Unit tests for colormap generation: dimming formula, fullbrights, darkest level, file layout.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np


def _ramp_palette():
    """Entry i = (i, i, i); index 0 is black."""
    from colorgen.palette import Palette

    return Palette.from_colors((i, i, i) for i in range(256))


def _random_palette(seed: int = 99):
    from colorgen.palette import Palette

    return Palette(np.random.default_rng(seed).integers(0, 256, size=(256, 3)))


def _reference_cell(palette, x: int, y: int) -> int:
    """Per-cell loop: dim, cap at 255, first strict minimum."""
    if x >= 224:
        return x
    rgb = [min((c * (63 - y) + 16) >> 5, 255) for c in palette[x]]
    best, best_dist = -1, 0
    for i in range(256):
        d = sum((a - b) ** 2 for a, b in zip(rgb, palette[i]))
        if best == -1 or d < best_dist:
            best, best_dist = i, d
    return best


class TestDimColor(unittest.TestCase):

    def test_formula_values(self):
        from colorgen.colormap import dim_color

        # level 31 scales by 32/32: identity
        self.assertEqual(dim_color((100, 37, 250), 31), (100, 37, 250))
        # level 0 scales by 63/32 and caps at 255
        self.assertEqual(dim_color((100, 200, 1), 0), ((100 * 63 + 16) >> 5, 255, (63 + 16) >> 5))
        self.assertEqual(dim_color((255, 255, 255), 63), (0, 0, 0))
        # round-to-nearest: 3 * 47 / 32 = 4.40..., 5 * 47 / 32 = 7.34..., 11 * 47 / 32 = 16.15...
        self.assertEqual(dim_color((3, 5, 11), 16), (4, 7, 16))

    def test_never_negative_never_above_255(self):
        from colorgen.colormap import dim_color

        for y in range(64):
            for v in range(256):
                d = dim_color((v, v, v), y)[0]
                self.assertGreaterEqual(d, 0)
                self.assertLessEqual(d, 255)

    def test_level_out_of_range(self):
        from colorgen.colormap import dim_color

        for level in (-1, 64):
            with self.assertRaises(ValueError):
                dim_color((1, 2, 3), level)


class TestGenerateColormap(unittest.TestCase):

    def test_constants(self):
        from colorgen import colormap

        self.assertEqual(colormap.LIGHT_LEVELS, 64)
        self.assertEqual(colormap.FULLBRIGHT_COUNT, 32)
        self.assertEqual(colormap.FULLBRIGHT_START, 224)
        self.assertEqual(colormap.COLORMAP_BYTES, 16384)

    def test_deterministic_and_input_untouched(self):
        from colorgen.colormap import generate_colormap

        pal = _random_palette()
        before = pal.to_bytes()
        a = generate_colormap(pal).to_bytes()
        b = generate_colormap(pal).to_bytes()
        self.assertEqual(a, b)
        self.assertEqual(len(a), 16384)
        self.assertEqual(pal.to_bytes(), before)

    def test_matches_per_cell_reference(self):
        from colorgen.colormap import generate_colormap

        pal = _random_palette(5)
        cm = generate_colormap(pal)
        for y in (0, 1, 16, 31, 62, 63):
            for x in range(0, 256, 3):
                self.assertEqual(cm[y, x], _reference_cell(pal, x, y), f"cell y={y} x={x}")

    def test_fullbright_columns_unchanged(self):
        from colorgen.colormap import generate_colormap

        data = generate_colormap(_random_palette(3)).to_bytes()
        for y in range(64):
            for x in range(224, 256):
                self.assertEqual(data[y * 256 + x], x)

    def test_darkest_level_converges_to_black(self):
        from colorgen.colormap import generate_colormap
        from colorgen.matching import nearest_color_index

        pal = _random_palette(11)
        cm = generate_colormap(pal)
        black = nearest_color_index(pal, (0, 0, 0))
        row = cm.row(63)
        self.assertEqual(set(int(v) for v in row[:224]), {black})

    def test_grayscale_ramp_scenario(self):
        from colorgen.colormap import generate_colormap

        cm = generate_colormap(_ramp_palette())
        for x in range(224):
            # exact matches exist on a full ramp, so each cell is the dimmed value itself
            self.assertEqual(cm[0, x], min((x * 63 + 16) >> 5, 255))
            self.assertEqual(cm[31, x], x)
            self.assertEqual(cm[63, x], 0)
        for y in range(64):
            for x in range(224, 256):
                self.assertEqual(cm[y, x], x)

    def test_monotonic_darkening_on_ramp(self):
        from colorgen.colormap import generate_colormap

        pal = _ramp_palette()
        cm = generate_colormap(pal)
        for x in range(224):
            brightness = [pal[cm[y, x]][0] for y in range(64)]
            for brighter, darker in zip(brightness, brightness[1:]):
                self.assertLessEqual(darker, brighter, f"column {x}")

    def test_output_size_for_any_palette(self):
        from colorgen.colormap import generate_colormap
        from colorgen.palette import Palette

        for fill in (0, 128, 255):
            pal = Palette.from_bytes(bytes([fill]) * 768)
            data = generate_colormap(pal).to_bytes()
            self.assertEqual(len(data), 16384)


class TestColormapFiles(unittest.TestCase):

    def test_row_major_layout(self):
        from colorgen.colormap import Colormap

        table = np.zeros((64, 256), dtype=np.uint8)
        table[2, 7] = 42
        table[63, 255] = 9
        data = Colormap(table).to_bytes()
        self.assertEqual(data[2 * 256 + 7], 42)
        self.assertEqual(data[16383], 9)
        self.assertEqual(Colormap.from_bytes(data)[2, 7], 42)

    def test_from_bytes_wrong_size(self):
        from colorgen.colormap import Colormap
        from colorgen.errors import ColormapSizeError

        with self.assertRaises(ColormapSizeError) as ctx:
            Colormap.from_bytes(b"\x00" * 16383)
        self.assertEqual(ctx.exception.actual, 16383)

    def test_shape_enforced(self):
        from colorgen.colormap import Colormap

        with self.assertRaises(ValueError):
            Colormap(np.zeros((63, 256), dtype=np.uint8))

    def test_cells_must_be_palette_indices(self):
        from colorgen.colormap import Colormap

        with self.assertRaises(ValueError):
            Colormap(np.full((64, 256), 300))
        with self.assertRaises(ValueError):
            Colormap(np.full((64, 256), -1))
        self.assertEqual(Colormap(np.full((64, 256), 255))[0, 0], 255)

    def test_save_and_load(self):
        from colorgen.colormap import generate_colormap, load_colormap, save_colormap
        from colorgen.errors import ColormapOpenError

        cm = generate_colormap(_ramp_palette())
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "colormap.lmp"
            self.assertEqual(save_colormap(cm, path), 16384)
            self.assertEqual(path.stat().st_size, 16384)
            self.assertEqual(load_colormap(path).to_bytes(), cm.to_bytes())
            with self.assertRaises(ColormapOpenError):
                load_colormap(Path(tmp) / "nope.lmp")

    def test_save_unwritable_destination(self):
        from colorgen.colormap import generate_colormap, save_colormap
        from colorgen.errors import OutputOpenError

        cm = generate_colormap(_ramp_palette())
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OutputOpenError):
                save_colormap(cm, Path(tmp) / "no_such_dir" / "colormap.lmp")

    def test_short_write(self):
        from colorgen.colormap import generate_colormap, save_colormap
        from colorgen.errors import OutputSizeError

        cm = generate_colormap(_ramp_palette())
        fake = mock.mock_open()
        fake.return_value.write.return_value = 4096
        with mock.patch("colorgen.colormap.open", fake, create=True):
            with self.assertRaises(OutputSizeError) as ctx:
                save_colormap(cm, "colormap.lmp")
        self.assertEqual(ctx.exception.expected, 16384)
        self.assertEqual(ctx.exception.actual, 4096)


if __name__ == "__main__":
    unittest.main()
