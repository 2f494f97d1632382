"""png-to-hex converter - Command line entry point."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from config_manager import ConfigManager
from hex_packing import BitmapConverter
from models import ConversionConfig

# ConversionConfig fields that can be set from the command line
OPTION_FIELDS = (
    "output",
    "output_dir",
    "output_ext",
    "minify",
    "threshold",
    "batch_width",
    "batch_height",
    "preview",
    "preview_dir",
    "preview_ext",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="png2hex",
        description="Convert PNG images into packed hex C arrays.",
    )
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="PNG file(s) to convert")
    parser.add_argument("-c", "--config", type=Path, help="JSON configuration file")
    parser.add_argument("-o", "--output", help="C variable name (single input only)")
    parser.add_argument("--odir", dest="output_dir", help="Output directory")
    parser.add_argument("--oext", dest="output_ext", help="Output file extension")
    parser.add_argument(
        "--minify", "--min", action="store_true", default=None,
        help="Drop optional whitespace from the output",
    )
    parser.add_argument(
        "--threshold", "--thr", type=float,
        help="Black/white cutoff for r+g+b, each 0-1 (default 1.7)",
    )
    parser.add_argument("-W", "--batch-width", type=int, help="Batch width in pixels")
    parser.add_argument("-H", "--batch-height", type=int, help="Batch height in pixels")
    parser.add_argument(
        "-p", "--preview", action="store_true", default=None,
        help="Also save the black & white image",
    )
    parser.add_argument("--pdir", dest="preview_dir", help="Preview directory")
    parser.add_argument("--pext", dest="preview_ext", help="Preview file extension")
    return parser


def build_config(args: argparse.Namespace) -> ConversionConfig:
    """Merge defaults, config file and command line flags (flags win)."""
    config = ConversionConfig()
    if args.config is not None:
        config = ConfigManager(args.config).load(config)

    overrides = {}
    for name in OPTION_FIELDS:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value

    return replace(config, **overrides)


def main(argv=None) -> int:
    """Run the converter on the given arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        converter = BitmapConverter(config)
        if len(args.inputs) == 1:
            converter.convert(args.inputs[0])
        else:
            if args.output is not None:
                print("Warning: --output ignored for multiple inputs, using file names")
            converter.convert_many(args.inputs)
    except ValueError as e:
        print(f"✗ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
