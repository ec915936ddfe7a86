"""
hofkit Command-Line Interface.

Runs the collection transforms from the shell. Values are given as JSON
(anything that is not valid JSON is taken as a plain string) and functions
as Python expressions over ``x`` (and ``acc`` for reduce).

Usage:
    hofkit map "x * x" 10 11 12 20
    hofkit filter "x % 2 == 0" 1 2 3 4 5 6 890
    hofkit reduce --seed 0 "acc + x" 3 6 891  # options before the expression
    hofkit map-dict "x * 2" '{"a": 1, "b": 2}'
    hofkit filter-dict "x < 3000" '{"City 1": 1000, "City 2": 6000}'
    hofkit demo all                 # Walk through the built-in examples
    hofkit info                     # Show version and operations
"""

import argparse
import json
import logging
import os
import sys
from collections.abc import Callable
from typing import Any, Optional

from hofkit import __version__
from hofkit.runtime.iterators import (
    apply,
    filter_assoc,
    filter_seq,
    map_assoc,
    map_seq,
    reduce_seq,
)
from hofkit.runtime.stdlib import math as hmath
from hofkit.runtime.stdlib import string as hstring
from hofkit.utils.errors import HofkitError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    BOLD = "\033[1m"

    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


# =============================================================================
# Expression and Value Parsing
# =============================================================================


class ExpressionError(HofkitError):
    """Raised when a command-line expression cannot be compiled."""

    pass


# Names available inside command-line expressions
EXPRESSION_NAMESPACE: dict[str, Any] = {
    "add_one": hmath.add_one,
    "square": hmath.square,
    "increase_by_percent": hmath.increase_by_percent,
    "is_even": hmath.is_even,
    "divisible_by": hmath.divisible_by,
    "between": hmath.between,
    "prefix_with": hstring.prefix_with,
    "ends_with": hstring.ends_with,
}


def compile_function(params: str, expr: str) -> Callable[..., Any]:
    """
    Compile ``expr`` into a function of ``params``.

    Example:
        compile_function("acc, x", "acc + x")(1, 2) -> 3
    """
    source = f"lambda {params}: ({expr})"
    try:
        return eval(source, dict(EXPRESSION_NAMESPACE))
    except SyntaxError as e:
        raise ExpressionError(f"invalid expression {expr!r}: {e.msg}") from e


def parse_value(raw: str) -> Any:
    """Parse a JSON value, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _to_json(value: Any) -> str:
    return json.dumps(value, default=repr)


# =============================================================================
# Argument Parser
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="hofkit",
        description="hofkit - map, filter and reduce from the command line",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Map command
    map_parser = subparsers.add_parser(
        "map",
        help="Transform each value with an expression over x",
    )
    map_parser.add_argument("expr", help="Expression over x, e.g. 'x * x'")
    map_parser.add_argument("values", nargs="*", help="Values (JSON or plain strings)")

    # Filter command
    filter_parser = subparsers.add_parser(
        "filter",
        help="Keep the values for which an expression over x is true",
    )
    filter_parser.add_argument("expr", help="Predicate over x, e.g. 'x % 2 == 0'")
    filter_parser.add_argument("values", nargs="*", help="Values (JSON or plain strings)")

    # Reduce command
    reduce_parser = subparsers.add_parser(
        "reduce",
        help="Fold the values with an expression over acc and x",
    )
    # --seed goes before the expression; values after it are all positional
    reduce_parser.add_argument(
        "-s",
        "--seed",
        default="0",
        help="Initial accumulator as JSON (default: 0)",
    )
    reduce_parser.add_argument("expr", help="Combine expression over acc and x, e.g. 'acc + x'")
    reduce_parser.add_argument("values", nargs="*", help="Values (JSON or plain strings)")

    # Mapping commands
    map_dict_parser = subparsers.add_parser(
        "map-dict",
        help="Transform each value of a JSON object",
    )
    map_dict_parser.add_argument("expr", help="Expression over x")
    map_dict_parser.add_argument("mapping", help="JSON object")

    filter_dict_parser = subparsers.add_parser(
        "filter-dict",
        help="Keep the entries of a JSON object whose value passes a predicate",
    )
    filter_dict_parser.add_argument("expr", help="Predicate over x")
    filter_dict_parser.add_argument("mapping", help="JSON object")

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the built-in examples",
    )
    demo_parser.add_argument(
        "section",
        nargs="?",
        choices=["map", "filter", "reduce", "dict", "all"],
        default="all",
        help="Which examples to run (default: all)",
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Show version and available operations",
    )

    return parser


# =============================================================================
# Command Handlers
# =============================================================================


def _parse_mapping(raw: str) -> dict[str, Any]:
    value = parse_value(raw)
    if not isinstance(value, dict):
        raise ExpressionError(f"expected a JSON object, got {raw!r}")
    return value


def cmd_map(args: argparse.Namespace) -> int:
    """Handle the map command."""
    transform = compile_function("x", args.expr)
    values = [parse_value(v) for v in args.values]
    logger.info("map_seq over %d values", len(values))
    print(_to_json(map_seq(values, transform)))
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    """Handle the filter command."""
    predicate = compile_function("x", args.expr)
    values = [parse_value(v) for v in args.values]
    logger.info("filter_seq over %d values", len(values))
    print(_to_json(filter_seq(values, predicate)))
    return 0


def cmd_reduce(args: argparse.Namespace) -> int:
    """Handle the reduce command."""
    combine = compile_function("acc, x", args.expr)
    values = [parse_value(v) for v in args.values]
    seed = parse_value(args.seed)
    logger.info("reduce_seq over %d values from seed %r", len(values), seed)
    print(_to_json(reduce_seq(values, seed, combine)))
    return 0


def cmd_map_dict(args: argparse.Namespace) -> int:
    """Handle the map-dict command."""
    transform = compile_function("x", args.expr)
    mapping = _parse_mapping(args.mapping)
    print(_to_json(map_assoc(mapping, transform)))
    return 0


def cmd_filter_dict(args: argparse.Namespace) -> int:
    """Handle the filter-dict command."""
    predicate = compile_function("x", args.expr)
    mapping = _parse_mapping(args.mapping)
    print(_to_json(filter_assoc(mapping, predicate)))
    return 0


def _demo_sections() -> dict[str, list[tuple[str, Callable[[], Any]]]]:
    values = [1, 2, 3, 4, 5, 6, 890]
    names = ["Walter", "Jesse", "Saul"]
    characters = [("Walter", "White"), ("Jesse", "Pinkman"), ("Saul", "Goodman")]
    files = ["logo.png", "notes.txt", "banner.png"]
    words = ["This", "is", "a", "text"]
    population = {"City 1": 1000, "City 2": 6000, "City 3": 2500, "City 4": 4000}
    grow = hmath.increase_by_percent(10)

    return {
        "map": [
            ("apply(10, square)", lambda: apply(10, hmath.square)),
            ("map_seq([10, 11, 12, 20], square)", lambda: map_seq([10, 11, 12, 20], hmath.square)),
            ("map_seq(names, prefix_with('Call me '))", lambda: map_seq(names, hstring.prefix_with("Call me "))),
            (
                "map_seq(characters, full_name)",
                lambda: map_seq(characters, lambda c: f"The name is {c[1]}... {c[0]} {c[1]}"),
            ),
        ],
        "filter": [
            ("filter_seq(values, is_even)", lambda: filter_seq(values, hmath.is_even)),
            ("filter_seq(values, between(4, 6))", lambda: filter_seq(values, hmath.between(4, 6))),
            ("filter_seq(files, ends_with('.png'))", lambda: filter_seq(files, hstring.ends_with(".png"))),
            (
                "filter_seq(map_seq(values, add_one), divisible_by(3))",
                lambda: filter_seq(map_seq(values, hmath.add_one), hmath.divisible_by(3)),
            ),
        ],
        "reduce": [
            ("reduce_seq(words, '', join_with(' '))", lambda: reduce_seq(words, "", hstring.join_with(" "))),
            (
                "reduce_seq(filter_seq(map_seq(values, add_one), divisible_by(3)), 0, add)",
                lambda: reduce_seq(
                    filter_seq(map_seq(values, hmath.add_one), hmath.divisible_by(3)), 0, hmath.add
                ),
            ),
        ],
        "dict": [
            ("map_assoc(population, increase_by_percent(10))", lambda: map_assoc(population, grow)),
            (
                "map_assoc(filter_assoc(population, lambda v: v < 3000), increase_by_percent(10))",
                lambda: map_assoc(filter_assoc(population, lambda v: v < 3000), grow),
            ),
        ],
    }


def cmd_demo(args: argparse.Namespace) -> int:
    """Handle the demo command - run the built-in examples."""
    sections = _demo_sections()
    selected = list(sections) if args.section == "all" else [args.section]

    for name in selected:
        print(f"{Colors.BOLD}{name}{Colors.RESET}")
        for label, run in sections[name]:
            print(f"  {Colors.CYAN}{label}{Colors.RESET}")
            print(f"    {Colors.GREEN}=> {_to_json(run())}{Colors.RESET}")
        print()
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command."""
    print(f"""
{Colors.BOLD}hofkit{Colors.RESET}
======

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Operations:{Colors.RESET}
  map_seq(input, transform)           Transform every element, same order and length
  filter_seq(input, predicate)        Keep matching elements, same relative order
  reduce_seq(input, seed, combine)    Left fold, returns seed for empty input
  map_assoc(mapping, transform)       Transform every value, same keys
  filter_assoc(mapping, predicate)    Keep entries whose value matches

{Colors.CYAN}Expression helpers:{Colors.RESET}
  {", ".join(sorted(EXPRESSION_NAMESPACE))}
""")
    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=LOG_FORMAT,
    )
    if args.no_color:
        Colors.disable()

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "map": cmd_map,
        "filter": cmd_filter,
        "reduce": cmd_reduce,
        "map-dict": cmd_map_dict,
        "filter-dict": cmd_filter_dict,
        "demo": cmd_demo,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except HofkitError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
