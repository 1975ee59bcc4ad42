"""Command-line interface for utilicurve.

Examples:
    utilicurve shapes
    utilicurve check "Quadratic 0.5 0 0.23 1.3 flipx"
    utilicurve eval "Linear 0 0 1 1" 0.25 0.5
    utilicurve sample "Logistic 0 0 1 1" --samples 5
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from utilicurve.core.config.loader import load_app_config
from utilicurve.core.config.models import AppConfig
from utilicurve.core.curves.codec import ParseError, format_curve, parse_curve
from utilicurve.core.curves.models import ResponseCurve
from utilicurve.core.curves.sampling import sample_curve
from utilicurve.core.curves.shapes import CurveShape
from utilicurve.core.utils.logging import configure_from_config, get_logger

console = Console(highlight=False)


def _print_parse_error(error: ParseError) -> None:
    detail = f" (field: {error.field.value})" if error.field is not None else ""
    console.print(f"[red]ERROR: {error.kind.value}{detail}: {escape(error.message)}[/red]")


def _parse_or_report(line: str) -> ResponseCurve | None:
    result = parse_curve(line)
    if result.error is not None:
        _print_parse_error(result.error)
        return None
    return result.curve


def cmd_shapes(args: argparse.Namespace, config: AppConfig) -> int:
    """List the curve shape catalog."""
    table = Table(title="Curve shapes")
    table.add_column("Shape")
    table.add_column("Description")
    for shape in CurveShape:
        table.add_row(shape.value, shape.description)
    console.print(table)
    return 0


def cmd_check(args: argparse.Namespace, config: AppConfig) -> int:
    """Validate a curve line and echo its normalized encoding."""
    curve = _parse_or_report(args.line)
    if curve is None:
        return 1
    console.print(escape(format_curve(curve)))
    return 0


def cmd_eval(args: argparse.Namespace, config: AppConfig) -> int:
    """Evaluate a curve line at the given inputs."""
    curve = _parse_or_report(args.line)
    if curve is None:
        return 1
    precision = config.sampling.precision
    for x in args.x:
        console.print(f"{x:.{precision}f} -> {curve.evaluate(x):.{precision}f}")
    return 0


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Print evenly-spaced samples of a curve line."""
    curve = _parse_or_report(args.line)
    if curve is None:
        return 1

    n_samples = args.samples if args.samples is not None else config.sampling.num_samples
    if n_samples < 2:
        console.print("[red]ERROR: --samples must be >= 2[/red]")
        return 1

    precision = config.sampling.precision
    table = Table(title=escape(format_curve(curve)))
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for point in sample_curve(curve, n_samples):
        table.add_row(f"{point.x:.{precision}f}", f"{point.y:.{precision}f}")
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="utilicurve",
        description="Evaluate parameterized response curves.",
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to app config (.json/.yaml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    shapes = subparsers.add_parser("shapes", help="List curve shapes")
    shapes.set_defaults(func=cmd_shapes)

    check = subparsers.add_parser("check", help="Validate a curve line")
    check.add_argument("line", help='Curve line, e.g. "Linear 0 0 1 1"')
    check.set_defaults(func=cmd_check)

    evaluate = subparsers.add_parser("eval", help="Evaluate a curve at inputs")
    evaluate.add_argument("line", help="Curve line")
    evaluate.add_argument("x", type=float, nargs="+", help="Input values")
    evaluate.set_defaults(func=cmd_eval)

    sample = subparsers.add_parser("sample", help="Sample a curve over [0, 1]")
    sample.add_argument("line", help="Curve line")
    sample.add_argument("--samples", type=int, default=None, help="Number of samples")
    sample.set_defaults(func=cmd_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    configure_from_config(config.logging, level=args.log_level)
    context = {"command": args.command}
    if getattr(args, "line", None) is not None:
        context["curve"] = args.line
    logger = get_logger(__name__, **context)
    logger.debug("Running command")

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
