from __future__ import annotations

import argparse
import sys
from typing import Any

from productframe.canvas.pipeline import run_composite_job
from productframe.config import settings
from productframe.errors import DecodeError, EncodeOrWriteError, InvalidArgument
from productframe.logging_config import configure_logging


DEFAULT_BACKGROUND = "0,0,255,255"


def _split_numbers(text: str, what: str) -> list[float]:
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise InvalidArgument(f"{what}: expected comma-separated numbers, got {text!r}") from exc


def _as_int(value: float, what: str) -> int:
    if not value.is_integer():
        raise InvalidArgument(f"{what}: expected an integer, got {value}")
    return int(value)


def parse_background_arg(text: str) -> list[int]:
    return [_as_int(v, "background") for v in _split_numbers(text, "background")]


def parse_resize_arg(text: str | None) -> dict[str, Any] | None:
    """`Width:300`, `Height:200` or `Scale:0.5` -> resize descriptor."""
    if text is None:
        return None
    kind, sep, raw_value = text.partition(":")
    if not sep:
        raise InvalidArgument(f"resize: expected TYPE:VALUE, got {text!r}")
    values = _split_numbers(raw_value, "resize")
    if len(values) != 1:
        raise InvalidArgument(f"resize: expected a single value, got {raw_value!r}")
    value: float | int = values[0]
    if kind in ("Width", "Height"):
        value = _as_int(values[0], "resize")
    return {"type": kind, "value": value}


def parse_offset_arg(text: str | None) -> dict[str, Any] | None:
    """`Pixel:X,Y`, `Percent:X,Y` or `Center` -> offset descriptor."""
    if text is None:
        return None
    kind, sep, raw_value = text.partition(":")
    if not sep:
        return {"type": kind}
    values: list[Any] = _split_numbers(raw_value, "offset")
    if kind == "Pixel":
        values = [_as_int(v, "offset") for v in values]
    return {"type": kind, "value": values}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="productframe",
        description="Composite a product image under a frame overlay on a solid background",
    )
    parser.add_argument("product", help="Path to the product (foreground) image")
    parser.add_argument("overlay", help="Path to the overlay image; sets the output size")
    parser.add_argument(
        "--background",
        default=DEFAULT_BACKGROUND,
        help="Background color as R,G,B,A (default: %(default)s)",
    )
    parser.add_argument("--resize", help="Width:N, Height:N or Scale:F")
    parser.add_argument("--offset", help="Pixel:X,Y, Percent:X,Y or Center (default)")
    parser.add_argument("--output", default=None, help="Output PNG path (default: settings.output_path)")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        options = {
            "background_color": parse_background_arg(args.background),
            "resize_mode": parse_resize_arg(args.resize),
            "offset_mode": parse_offset_arg(args.offset),
        }
        destination = run_composite_job(args.product, args.overlay, options, args.output)
    except (InvalidArgument, DecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EncodeOrWriteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Composite saved to {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
