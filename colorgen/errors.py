"""
Errors raised while reading palettes and writing colormaps.
Every one is fatal for a run; the CLI turns them into a message on stderr and exit status 1.
"""
from pathlib import Path


class ColorgenError(Exception):
    """Base error: carries the file path the failure relates to."""
    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class _SizeError(ColorgenError):
    def __init__(self, message: str, path: Path | str | None = None, *, expected: int, actual: int):
        super().__init__(message, path)
        self.expected = expected
        self.actual = actual


class PaletteOpenError(ColorgenError):
    """Input palette missing or unreadable."""


class PaletteSizeError(_SizeError):
    """Input palette is not exactly 768 bytes."""


class OutputOpenError(ColorgenError):
    """Colormap destination cannot be opened for writing."""


class OutputSizeError(_SizeError):
    """Colormap write did not complete."""


class ColormapOpenError(ColorgenError):
    """Existing colormap file missing or unreadable."""


class ColormapSizeError(_SizeError):
    """Colormap data is not exactly 16384 bytes."""
