"""Command line front end for the quadratic equation solver."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from practicum.quadratic import solve_quadratic

_FORMAT_ERROR = "Wrong number format!"
_WS = r"[ \t\n\v\f\r]*"
_DECIMAL = re.compile(
    _WS + r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX = re.compile(
    _WS + r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL = re.compile(_WS + r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def _help(appname: str, message: str = "") -> str:
    return (
        message
        + "This app is for solving quadratic equations.\n\n"
        + "Please provide arguments in the following format:\n\n"
        + "  $ " + appname + " <value_1> <value_2> <value_3> \n\n"
        + "Where all values are double.\n "
        + "Example:1 2 3 -> Result equations: 1*x^2 + 2*x + 3 = 0"
    )


def _parse_double(arg: str) -> float:
    """Parse a whole argument as a floating point number."""
    if arg == "":
        return 0.0
    if _DECIMAL.fullmatch(arg) or _SPECIAL.fullmatch(arg):
        return float(arg.lstrip(" \t\n\v\f\r"))
    if _HEX.fullmatch(arg):
        return float.fromhex(arg.lstrip(" \t\n\v\f\r"))
    raise ValueError(_FORMAT_ERROR)


def run(argv: Sequence[str]) -> str:
    """Run on a full argument vector (program name first) and return the output."""
    appname = argv[0] if argv else ""
    args = list(argv[1:])
    if len(args) != 3:
        return _help(appname)
    try:
        a, b, c = (_parse_double(arg) for arg in args)
    except ValueError as error:
        return str(error)
    return solve_quadratic(a, b, c)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result for the given argument vector (default: sys.argv)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())