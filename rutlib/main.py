"""
Command-line interface for rutlib.

Example: python -m rutlib --format dots parse 17951585-7 179515857
"""

import argparse
import random
import sys
from typing import Callable, List, Optional, Sequence

from . import __version__
from .helpers import Format, RutResult, from_number, parse, randomize_many
from .log_config import configure_logging, get_logger, log_batch_summary
from .settings import settings


logger = get_logger(__name__)


def parse_body(value: str) -> int:
    """
    Parse a bare RUT body given on the command line.

    Dots are accepted as thousands separators ("24.136.773").

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer
    """
    try:
        return int(value.replace(".", ""))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'") from e


def report_results(
    command: str,
    inputs: Sequence,
    build: Callable[[object], RutResult],
    fmt: Format,
) -> int:
    """
    Print one line per input and log a summary.

    Returns:
        Exit code (0 if every input was valid, 1 otherwise)
    """
    processed = 0
    failed = 0

    for raw in inputs:
        result = build(raw)
        if result.ok:
            print(result.value.to_format(fmt))
            processed += 1
        else:
            print(f"{raw}: {result.error}")
            failed += 1

    log_batch_summary(logger, command, items_processed=processed, items_failed=failed, format=fmt.value)
    return 0 if failed == 0 else 1


def generate(count: int, seed: Optional[int], fmt: Format) -> int:
    """Print ``count`` random RUTs."""
    rng = random.Random(seed) if seed is not None else None

    for rut in randomize_many(count, rng):
        print(rut.to_format(fmt))

    log_batch_summary(logger, "random", items_processed=count, seeded=seed is not None, format=fmt.value)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="rutlib",
        description="Validate, format and generate Chilean RUTs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rutlib parse 17.951.585-7 179515857
  rutlib --format dots from-number 24136773
  rutlib random --count 5 --seed 42
        """
    )

    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in Format],
        help="Output format (default from RUTLIB_OUTPUT_FORMAT, else dash)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rutlib {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Validate and reformat RUT strings")
    parse_cmd.add_argument("ruts", nargs="+", metavar="RUT")

    number_cmd = subparsers.add_parser("from-number", help="Compute the DV for RUT bodies")
    number_cmd.add_argument("numbers", nargs="+", type=parse_body, metavar="N")

    random_cmd = subparsers.add_parser("random", help="Generate random valid RUTs")
    random_cmd.add_argument("--count", type=int, default=1, help="How many RUTs to generate")
    random_cmd.add_argument("--seed", type=int, help="Seed for reproducible output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for invalid input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_format)

    config = settings()
    fmt = Format.from_name(args.format or config.output_format)

    logger.debug(
        "rutlib starting",
        command=args.command,
        version=__version__,
        environment=config.environment,
    )

    if args.command == "parse":
        return report_results("parse", args.ruts, parse, fmt)

    if args.command == "from-number":
        return report_results("from-number", args.numbers, from_number, fmt)

    if args.count < 0:
        parser.error("--count must be non-negative")
    seed = args.seed if args.seed is not None else config.random_seed
    return generate(args.count, seed, fmt)


if __name__ == "__main__":
    sys.exit(main())
