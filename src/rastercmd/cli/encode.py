"""CLI tool for converting images into printer commands."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from rastercmd.config import load_config, settings
from rastercmd.models import ImageCommandConfig, PrinterLanguage, QuantizationMethod


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert an image into printer control language commands.",
        prog="rastercmd-encode",
    )
    parser.add_argument(
        "image",
        type=Path,
        help="Path to image file",
    )
    parser.add_argument(
        "-l",
        "--language",
        help=f"Printer language ({', '.join(PrinterLanguage)}); overrides the config file",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"YAML configuration file (default: {settings.config_file})",
    )
    parser.add_argument(
        "--method",
        choices=[m.value for m in QuantizationMethod],
        help="Quantization method",
    )
    parser.add_argument("--luma-threshold", type=int, help="Luma threshold 0-255")
    parser.add_argument("--alpha-threshold", type=int, help="Alpha threshold 0-255")
    parser.add_argument("-x", type=int, help="X position in dots (EPL, CPCL)")
    parser.add_argument("-y", type=int, help="Y position in dots (EPL, CPCL)")
    parser.add_argument("--dot-density", type=int, help="ESC/P bit-image density (default: 32)")
    parser.add_argument("--charset", help="Charset for command text (default: ascii)")
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Write a hex dump instead of raw bytes",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.debug,
        help="Enable debug logging",
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, dict[str, object]]:
    """Collect config overrides given on the command line."""
    quantization = {
        "method": args.method,
        "luma_threshold": args.luma_threshold,
        "alpha_threshold": args.alpha_threshold,
    }
    params = {
        "x": args.x,
        "y": args.y,
        "dot_density": args.dot_density,
        "charset": args.charset,
    }
    return {
        "quantization": {k: v for k, v in quantization.items() if v is not None},
        "params": {k: v for k, v in params.items() if v is not None},
    }


def main(argv: list[str] | None = None) -> int:
    """Main entry point for rastercmd-encode CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from rastercmd.converters import ImageCommandError
    from rastercmd.encoder import get_image_command
    from rastercmd.raster import RasterImage

    if not args.image.exists():
        print(f"Error: Image file not found: {args.image}", file=sys.stderr)
        return 1

    # Build configuration: file first, then command-line overrides
    try:
        config = load_config(args.config or settings.config_file)
        overrides = _overrides(args)
        config = ImageCommandConfig.model_validate(
            {
                "language": config.language,
                "quantization": {**config.quantization.model_dump(), **overrides["quantization"]},
                "params": {**config.params.model_dump(), **overrides["params"]},
            }
        )
    except yaml.YAMLError as e:
        print(f"Error parsing configuration YAML: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading configuration: {e}", file=sys.stderr)
        return 1

    try:
        raster = RasterImage.open(args.image)
    except OSError as e:
        print(f"Error loading image: {e}", file=sys.stderr)
        return 1

    try:
        output = get_image_command(raster, config, language=args.language)
    except ImageCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.hex:
        output = output.hex(" ").upper().encode("ascii") + b"\n"

    try:
        if args.output:
            with open(args.output, "wb") as f:
                f.write(output)
            print(f"Wrote {len(output)} bytes to {args.output}", file=sys.stderr)
        else:
            sys.stdout.buffer.write(output)
            sys.stdout.buffer.flush()
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
