"""Command-line interface for image_degrader.

Prints progress to stderr, or a single JSON document with --json for
scripting.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from image_degrader.core.processor import Mode


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-degrader",
        description="Degrade an image with noise, dithering, or B&W thresholding.",
    )
    parser.add_argument("input", nargs="?", help="Input image file path.")
    parser.add_argument(
        "-i", "--input",
        dest="input_option",
        metavar="INPUT",
        help="Input image file path (alternative to the positional argument).",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path. Defaults to <input>_<mode>.<ext>.",
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--bw",
        dest="mode",
        action="store_const",
        const=Mode.THRESHOLD,
        help="Threshold mode: binary black & white.",
    )
    modes.add_argument(
        "-d", "--destructive",
        dest="mode",
        action="store_const",
        const=Mode.DITHER,
        help="Destructive removal: quantization + Floyd-Steinberg dithering.",
    )
    modes.add_argument(
        "-a", "--aggressive",
        dest="mode",
        action="store_const",
        const=Mode.DEGRADE,
        help="Aggressive removal: resize + blur + noise.",
    )
    parser.set_defaults(mode=Mode.NOISE)

    parser.add_argument(
        "-s", "--sigma",
        type=float,
        default=30.0,
        help="Standard deviation of the Gaussian noise (default: 30.0).",
    )
    parser.add_argument(
        "--blur-sigma",
        type=float,
        default=1.0,
        help="Gaussian blur sigma for aggressive mode (default: 1.0).",
    )
    parser.add_argument(
        "--resize-scale",
        type=float,
        default=0.9,
        help="Resize scale for aggressive mode, e.g. 0.9 for 90%% (default: 0.9).",
    )
    parser.add_argument(
        "--levels",
        type=int,
        default=4,
        help="Quantization levels per channel for destructive mode (default: 4).",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=128,
        help="Threshold value for BW mode, 0 to 255 (default: 128).",
    )
    parser.add_argument(
        "--force-bw",
        action="store_true",
        help="Force BW mode even if the image looks colored.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible noise.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output structured JSON (pipe-friendly).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show stack traces on error (with --json).",
    )

    return parser


def _auto_output_path(input_path: Path, mode: Mode) -> Path:
    """Generate default output path from input."""
    return input_path.parent / f"{input_path.stem}_{mode.value}{input_path.suffix}"


def _json_error(message: str, code: str, debug: bool = False) -> None:
    """Print JSON error to stderr and exit with code 1."""
    if debug:
        import traceback
        traceback.print_exc(file=sys.stderr)
    err = {"status": "error", "error": message, "code": code}
    print(json.dumps(err), file=sys.stderr)
    sys.exit(1)


def _fail(args: argparse.Namespace, message: str, code: str) -> None:
    if args.json:
        _json_error(message, code, args.debug)
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _run(args: argparse.Namespace) -> None:
    """Decode, transform and encode one image."""
    from image_degrader.core.errors import DegradeError
    from image_degrader.core.processor import Settings, process_image
    from image_degrader.core.reader import detect_format, load_image
    from image_degrader.core.writer import save_image

    is_json = args.json
    input_path = Path(args.input).resolve()

    try:
        grid, info = load_image(input_path)
    except FileNotFoundError as e:
        _fail(args, str(e), "FILE_NOT_FOUND")
    except (ValueError, OSError) as e:
        _fail(args, str(e), "INVALID_INPUT")

    if args.output:
        output_path = Path(args.output).resolve()
    else:
        output_path = _auto_output_path(input_path, args.mode)

    try:
        detect_format(output_path)
    except ValueError as e:
        _fail(args, str(e), "INVALID_ARGUMENT")

    settings = Settings(
        mode=args.mode,
        sigma=args.sigma,
        blur_sigma=args.blur_sigma,
        resize_scale=args.resize_scale,
        levels=args.levels,
        threshold=args.threshold,
        force=args.force_bw,
        seed=args.seed,
    )

    def status(message: str) -> None:
        if not is_json:
            print(message, file=sys.stderr)

    try:
        result = process_image(grid, settings, on_status=status)
        save_image(result, output_path)
    except DegradeError as e:
        _fail(args, str(e), e.code)
    except OSError as e:
        _fail(args, str(e), "PROCESSING_ERROR")

    if not is_json:
        print(f"Saved to {output_path}", file=sys.stderr)
    else:
        report = {
            "status": "success",
            "input": str(input_path),
            "output": str(output_path),
            "settings": settings.summary(),
            "metadata": {
                "width": result.width,
                "height": result.height,
                "input_format": info.format,
                "input_mode": info.mode,
                "output_format": output_path.suffix.lstrip("."),
            },
        }
        print(json.dumps(report, indent=2))


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.input and args.input_option:
        parser.error("give the input either positionally or with -i, not both")
    args.input = args.input or args.input_option
    if not args.input:
        parser.error("an input image is required")
    _run(args)
