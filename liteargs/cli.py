"""Command-line front end for trying parameter declarations against raw arguments.

Parameters are declared with ``--string`` / ``--int`` options; the tokens after
the first standalone ``--`` are scanned by :class:`liteargs.parser.Parser` and
the resolved values are printed::

    liteargs --string file:f:out.txt --int count:c:1 -- --file=in.txt -c 3
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from .colors import color
from .config import load_token_config
from .parameter import Parameter
from .parser import Parser
from .version import __version__

_SEPARATOR = "--"


def _declaration(kind: str) -> Callable[[str], Parameter]:
    def _parse(value: str) -> Parameter:
        parts = value.split(":", 2)
        if len(parts) != 3:
            raise argparse.ArgumentTypeError(
                f"expected NAME:SHORT:DEFAULT, got '{value}'"
            )
        name, short_name, default = parts
        try:
            if kind == "int":
                return Parameter.integer(name, short_name, int(default))
            return Parameter.string(name, short_name, default)
        except (TypeError, ValueError) as exc:
            raise argparse.ArgumentTypeError(f"invalid {kind} parameter '{value}': {exc}")

    _parse.__name__ = f"{kind} parameter"
    return _parse


def _path_arg(value: str) -> Path:
    return Path(value).expanduser()


def build_parser(prog: str = "liteargs") -> argparse.ArgumentParser:
    """Construct the argparse parser for the liteargs command."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Resolve declared parameters from the arguments given after '--'.",
    )
    parser.add_argument(
        "--string",
        dest="parameters",
        action="append",
        type=_declaration("string"),
        metavar="NAME:SHORT:DEFAULT",
        help="Declare a string parameter (id is NAME). May be repeated.",
    )
    parser.add_argument(
        "--int",
        dest="parameters",
        action="append",
        type=_declaration("int"),
        metavar="NAME:SHORT:DEFAULT",
        help="Declare an integer parameter (id is NAME). May be repeated.",
    )
    parser.add_argument(
        "--prefix",
        metavar="TOKEN",
        help="Long form prefix (default: '--'). Pass as --prefix=TOKEN.",
    )
    parser.add_argument(
        "--secondary-prefix",
        metavar="TOKEN",
        help="Short form prefix (default: '-'). Pass as --secondary-prefix=TOKEN.",
    )
    parser.add_argument(
        "--separator",
        metavar="TOKEN",
        help="Long form name/value separator (default: '=').",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=_path_arg,
        default=None,
        help="JSON file with prefix/secondary_prefix/value_separator keys "
        "(default: $LITEARGS_CONFIG).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved values as a JSON object.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log how each parameter was resolved.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split ``argv`` at the first standalone ``--`` into options and raw tokens."""
    items = list(argv)
    if _SEPARATOR not in items:
        return items, []
    index = items.index(_SEPARATOR)
    return items[:index], items[index + 1 :]


def parse_args(argv: Optional[Sequence[str]], *, prog: str = "liteargs") -> argparse.Namespace:
    options, _ = split_argv(list(argv) if argv is not None else sys.argv[1:])
    return build_parser(prog=prog).parse_args(options)


def main(argv: Optional[List[str]] = None) -> int:
    raw = list(argv) if argv is not None else sys.argv[1:]
    options, scanned = split_argv(raw)
    parser = build_parser()
    args = parser.parse_args(options)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = load_token_config(args.config)
    except ValueError as exc:
        parser.error(str(exc))
    config = config.with_overrides(
        prefix=args.prefix,
        secondary_prefix=args.secondary_prefix,
        value_separator=args.separator,
    )

    values = Parser.from_config(scanned, args.parameters or [], config).resolved()
    if args.json:
        print(json.dumps(values, ensure_ascii=False))
        return 0
    if not values:
        print("No parameters declared.")
        return 0
    for ident, value in values.items():
        print(f"{color(ident, cyan=True, bold=True)}={value}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
