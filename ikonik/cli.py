"""CLI entrypoint for the ikonik icon generator."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

from . import __version__
from .config import ConfigError, load_config, resolve_options
from .errors import IkonikError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _positive_number(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"expected a finite positive number, got {raw!r}")
    return int(value) if value.is_integer() else value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ikonik",
        description="Generate tree-shakeable React icon components from SVG files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-s", "--src", type=Path, default=None, help="Source SVG directory (default: icons-src).")
    parser.add_argument("-o", "--out", type=Path, default=None, help="Output directory (default: icons).")
    parser.add_argument("--prefix", default=None, help="Component name prefix.")
    parser.add_argument("--size", type=_positive_number, default=None, help="Default size in px (default: 24).")
    parser.add_argument(
        "--stroke",
        type=_positive_number,
        default=None,
        help="Default strokeWidth (default: 1.5).",
    )
    parser.add_argument(
        "--fill",
        action="store_true",
        default=None,
        help="Treat icons as filled (no stroke).",
    )
    parser.add_argument(
        "--no-format",
        dest="format_output",
        action="store_false",
        default=None,
        help="Write generated sources without running Prettier.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Skip files whose optimization, transformation, or formatting fails.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .ikonik.yml or the directory holding it (default: current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ikonik."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config)
        options = resolve_options(
            config,
            src_dir=args.src.expanduser().resolve() if args.src else None,
            out_dir=args.out.expanduser().resolve() if args.out else None,
            prefix=args.prefix,
            size=args.size,
            stroke_width=args.stroke,
            filled=args.fill,
            format_output=args.format_output,
            keep_going=args.keep_going,
        )
    except ConfigError as exc:
        parser.exit(1, f"ikonik: {exc}\n")

    print("Generating icons...")
    print(f"   Source: {options.src_dir}")
    print(f"   Output: {options.out_dir}")

    orchestrator = Orchestrator(npx=config.npx_executable())
    try:
        orchestrator.generate(options)
    except (IkonikError, OSError) as exc:
        parser.exit(1, f"ikonik: {exc}\nRun with --verbose for more details.\n")

    print(f"Generated icons from {options.src_dir} -> {options.out_dir}")


if __name__ == "__main__":
    main(sys.argv[1:])
