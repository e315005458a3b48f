import argparse
import sys
from collections.abc import Sequence

from hypermath.arithmetic import (
    InvalidInputError,
    add,
    divide,
    format_number,
    multiply,
    subtract,
)
from hypermath.config.settings import Settings
from hypermath.logging.logger import Log

_COMMANDS = frozenset({"add", "subtract", "multiply", "divide", "format"})
_LEADING_FLAGS = frozenset({"-h", "--help", "--"})
_MAX_PLAIN_INTEGER = 1e16


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="hypermath",
        description="Arithmetic on numbers rounded to 2 decimal places.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("add", add, "add two or more values"),
        ("subtract", subtract, "subtract values left to right"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("operands", nargs="*", metavar="VALUE")
        command.set_defaults(handler=handler)

    for name, handler, help_text in (
        ("multiply", multiply, "multiply two values"),
        ("divide", divide, "divide the first value by the second"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("operands", nargs=2, metavar="VALUE")
        command.set_defaults(handler=handler)

    command = commands.add_parser("format", help="round a value to 2 decimal places")
    command.add_argument("operands", nargs=1, metavar="VALUE")
    command.set_defaults(handler=format_number)

    return parser


def render(result: float) -> str:
    """Format a result for printing.

    Whole numbers below 1e16 print without a trailing ".0"; everything else
    prints as its repr.
    """
    if result.is_integer() and abs(result) < _MAX_PLAIN_INTEGER:
        return str(int(result))
    return repr(result)


def separate_operands(argv: Sequence[str]) -> list[str]:
    """Put "--" after the command so operands such as "-1e3" stay positional."""
    args = list(argv)
    if len(args) > 1 and args[0] in _COMMANDS and args[1] not in _LEADING_FLAGS:
        args.insert(1, "--")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run one operation."""
    settings = Settings()
    Log.configure(settings.log_level)
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(separate_operands(argv))

    try:
        result = args.handler(*args.operands)
    except InvalidInputError as exc:
        Log.error(f"{args.command} failed: {exc}")
        print(exc, file=sys.stderr)
        return 1

    print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
