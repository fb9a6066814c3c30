"""
CLI: generate colormap.lmp in the current directory from a 768-byte palette.
Usage:
  colorgen palette.lmp
  python scripts/generate_colormap.py palette.lmp
"""
import argparse
import sys

from .config import get_log_level, load_config
from .errors import ColorgenError
from .pipeline import generate_colormap_file
from .workflow_utils import configure_logging

USAGE_EPILOG = "Generates 'colormap.lmp' in the current directory."


class _Parser(argparse.ArgumentParser):
    """Every usage problem exits with status 1."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(prog: str = "colorgen") -> argparse.ArgumentParser:
    parser = _Parser(
        prog=prog,
        usage=f"{prog} <input_palette.lmp>",
        description="Build a 64-level lighting colormap from a 256-color palette.",
        epilog=USAGE_EPILOG,
        add_help=False,
    )
    parser.add_argument(
        "palette",
        nargs="?",
        help="Input palette file (256 RGB entries, 768 bytes).",
    )
    return parser


def main(argv: list[str] | None = None, prog: str = "colorgen") -> int:
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    if args.palette is None:
        parser.print_usage(sys.stderr)
        print(f"       {USAGE_EPILOG}", file=sys.stderr)
        return 1

    configure_logging(get_log_level(load_config()))

    try:
        generate_colormap_file(args.palette, progress=print)
    except ColorgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
