"""Command line entry point."""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from .batch import generate
from .common.schemas import FitPolicy, GenerateParams
from .utils.logging import configure_logging

PROG = "mobile-assets"


def build_parser() -> argparse.ArgumentParser:
    # -h is the target height, so help lives on -? / --help.
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} -i <input dir> -o <output dir> [other options]",
        description="Generate Android drawables and iOS image sets from PNG images.",
        add_help=False,
    )
    _ = parser.add_argument("-i", "--input", dest="input_dir", help="the input directory")
    _ = parser.add_argument("-o", "--output", dest="output_dir", help="the output directory")
    _ = parser.add_argument(
        "-w",
        "--width",
        type=float,
        default=0.0,
        help="the target dp width of result excluding padding "
        + "(omit to compute automatically based on height)",
    )
    _ = parser.add_argument(
        "-h",
        "--height",
        type=float,
        default=0.0,
        help="the target dp height of result excluding padding "
        + "(omit to compute automatically based on width)",
    )
    _ = parser.add_argument("-p", "--padding", type=float, default=0.0, help="the target dp padding")
    _ = parser.add_argument("-r", "--recursive", action="store_true", help="recurse subdirectories")
    _ = parser.add_argument(
        "--policy",
        type=FitPolicy,
        choices=list(FitPolicy),
        default=FitPolicy.FIT,
        help="how the target size is matched to the image aspect ratio (default: fit)",
    )
    _ = parser.add_argument(
        "--no-android", dest="android", action="store_false", help="skip Android output"
    )
    _ = parser.add_argument("--no-ios", dest="ios", action="store_false", help="skip iOS output")
    _ = parser.add_argument(
        "--legacy-android-single-bucket",
        action="store_true",
        help="without a target size, only write the mdpi Android bucket",
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
    _ = parser.add_argument("-?", "--help", action="help", help="show this message and exit")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the batch.

    Returns:
        0 on success, 1 if any asset failed, 2 on invalid arguments
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input_dir is None:
        print("No input directory specified.", file=sys.stderr)
        parser.print_help()
        return 2

    if args.output_dir is None:
        print("No output directory specified.", file=sys.stderr)
        parser.print_help()
        return 2

    try:
        params = GenerateParams(
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            width=args.width,
            height=args.height,
            padding=args.padding,
            recursive=args.recursive,
            android=args.android,
            ios=args.ios,
            policy=args.policy,
            verbose=args.verbose,
            legacy_android_single_bucket=args.legacy_android_single_bucket,
        )
    except ValidationError as e:
        print(f"{PROG}: invalid arguments\n{e}", file=sys.stderr)
        print(f"Try '{PROG} --help' for more information.", file=sys.stderr)
        return 2

    _ = configure_logging(params.verbose)
    return 0 if generate(params) else 1
