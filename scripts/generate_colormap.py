#!/usr/bin/env python3
"""
CLI: Generate colormap.lmp (64 light levels) from a 256-color palette.
Usage:
  python scripts/generate_colormap.py palette.lmp
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from colorgen.cli import main

if __name__ == "__main__":
    sys.exit(main(prog=Path(sys.argv[0]).name))
