"""
Palette: 256 RGB entries (768 bytes on disk, R,G,B per entry, entry 0 first).
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import numpy as np

from .errors import PaletteOpenError, PaletteSizeError

logger = logging.getLogger(__name__)

PALETTE_SIZE = 256
PALETTE_BYTES = PALETTE_SIZE * 3


@dataclass(frozen=True, eq=False)
class Palette:
    """Immutable 256-entry palette backed by a read-only (256, 3) uint8 array."""
    colors: np.ndarray

    def __post_init__(self) -> None:
        arr = np.asarray(self.colors)
        if arr.shape != (PALETTE_SIZE, 3):
            raise ValueError(f"Palette must have shape ({PALETTE_SIZE}, 3), got {arr.shape}")
        if np.any(arr < 0) or np.any(arr > 255):
            raise ValueError("Palette components must be in 0-255")
        arr = arr.astype(np.uint8)  # always a private copy
        arr.setflags(write=False)
        object.__setattr__(self, "colors", arr)

    def __len__(self) -> int:
        return PALETTE_SIZE

    def __getitem__(self, index: int) -> tuple[int, int, int]:
        r, g, b = self.colors[index]
        return int(r), int(g), int(b)

    def __iter__(self):
        for i in range(PALETTE_SIZE):
            yield self[i]

    @classmethod
    def from_colors(cls, colors: Iterable[tuple[int, int, int]]) -> "Palette":
        return cls(np.array(list(colors), dtype=np.int64).reshape(-1, 3))

    @classmethod
    def from_bytes(cls, data: bytes, path: Path | str | None = None) -> "Palette":
        """Parse raw palette bytes. Anything but exactly 768 bytes is a PaletteSizeError."""
        if len(data) != PALETTE_BYTES:
            where = f" {path}" if path is not None else ""
            raise PaletteSizeError(
                f"Input palette file{where} is not {PALETTE_BYTES} bytes long. Read {len(data)} bytes.",
                path,
                expected=PALETTE_BYTES,
                actual=len(data),
            )
        return cls(np.frombuffer(data, dtype=np.uint8).reshape(PALETTE_SIZE, 3))

    def to_bytes(self) -> bytes:
        return self.colors.tobytes()


def load_palette(path: Path | str) -> Palette:
    """Read a palette file fully into memory and parse it."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise PaletteOpenError(f"Cannot open input palette file {path}: {e}", path) from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return Palette.from_bytes(data, path)
