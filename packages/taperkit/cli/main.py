"""Command-line interface for taperkit."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taperkit.core.config.loader import configure_logging, load_app_config
from taperkit.core.config.models import AppConfig, TaperDefaults
from taperkit.core.curves.taper_curve import TaperCurve
from taperkit.core.numeric.ranges import FloatRange
from taperkit.core.numeric.rounding import round_digits, truncate_digits
from taperkit.core.utils.logging import get_logger

console = Console()


def _taper_defaults(args: argparse.Namespace, config: AppConfig) -> TaperDefaults:
    """Merge command-line taper options over the configured defaults."""
    updates = {}
    if args.taper is not None:
        updates["taper"] = args.taper
    if args.around_center is not None:
        updates["around_center"] = args.around_center
    return config.taper.model_copy(update=updates)


def _build_curve(args: argparse.Namespace, config: AppConfig) -> TaperCurve:
    lower, upper = FloatRange.from_tuple(args.bounds).as_tuple()
    return TaperCurve.from_config(lower, upper, _taper_defaults(args, config))


def cmd_denormalize(args: argparse.Namespace, config: AppConfig) -> int:
    curve = _build_curve(args, config)
    console.print(f"{curve.denormalize(args.value)}")
    return 0


def cmd_normalize(args: argparse.Namespace, config: AppConfig) -> int:
    curve = _build_curve(args, config)
    console.print(f"{curve.normalize(args.value)}")
    return 0


def cmd_round(args: argparse.Namespace, config: AppConfig) -> int:
    digits = config.rounding.digits if args.digits is None else args.digits
    console.print(f"{round_digits(args.value, digits)}")
    return 0


def cmd_truncate(args: argparse.Namespace, config: AppConfig) -> int:
    digits = config.rounding.digits if args.digits is None else args.digits
    console.print(f"{truncate_digits(args.value, digits)}")
    return 0


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    curve = _build_curve(args, config)
    points = curve.sample(args.points)

    table = Table(title=f"taper={curve.taper} around_center={curve.around_center}")
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for point in points:
        table.add_row(f"{point.t:.4f}", f"{point.v:.6g}")
    console.print(table)
    return 0


COMMANDS = {
    "denormalize": cmd_denormalize,
    "normalize": cmd_normalize,
    "round": cmd_round,
    "truncate": cmd_truncate,
    "sample": cmd_sample,
}


def _add_curve_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--range",
        dest="bounds",
        nargs=2,
        type=float,
        required=True,
        metavar=("LOWER", "UPPER"),
        help="Destination range bounds",
    )
    parser.add_argument("--taper", type=float, default=None, help="Taper in (0, 1); 0.5 is linear")
    parser.add_argument(
        "--around-center",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fold the taper symmetrically around the range midpoint",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="taperkit",
        description="taperkit - tapered range mapping and decimal rounding",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.yaml/.yml/.json, default: taperkit.yaml)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    denorm = sub.add_parser("denormalize", help="Map a normalized value onto a range")
    denorm.add_argument("value", type=float, help="Normalized value in [0, 1]")
    _add_curve_arguments(denorm)

    norm = sub.add_parser("normalize", help="Map a value on a range back to [0, 1]")
    norm.add_argument("value", type=float, help="Value on the range")
    _add_curve_arguments(norm)

    for name, help_text in (
        ("round", "Round half away from zero"),
        ("truncate", "Truncate toward negative infinity"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("value", type=float)
        cmd.add_argument("--digits", type=int, default=None, help="Fractional digits to keep")

    sample = sub.add_parser("sample", help="Print a table of curve samples")
    _add_curve_arguments(sample)
    sample.add_argument("--points", type=int, default=11, help="Number of samples (default: 11)")

    return p


def run(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to a command, returning the exit code."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    configure_logging(config)
    get_logger(__name__, command=args.cmd).debug("Running %s", args.cmd)

    try:
        return COMMANDS[args.cmd](args, config)
    except ValidationError as e:
        console.print(f"[red]ERROR: Invalid curve parameters:[/red] {escape(str(e))}")
        return 1
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


def main() -> None:
    """Main entry point for CLI."""
    sys.exit(run())
