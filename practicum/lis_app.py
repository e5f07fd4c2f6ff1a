"""Command line front end for the longest increasing subsequence."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from practicum.lis import longest_increasing_subsequence

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")
_FORMAT_ERROR = "Wrong number format!"


def _help(appname: str, message: str = "") -> str:
    return (
        message
        + "This app is for finding the largest increasing sequence.\n\n"
        + "Please provide arguments in the following format:\n\n"
        + "  $ " + appname + " <value_1> <value_2> ... "
        + "<value_n>. \n\n" + "Where all values are integers.\n "
    )


def _parse_int(arg: str) -> int:
    """Parse a base-10 integer; leading whitespace is allowed, nothing trailing."""
    if arg == "":
        return 0
    if not _INTEGER.fullmatch(arg):
        raise ValueError(_FORMAT_ERROR)
    return int(arg)


def run(argv: Sequence[str]) -> str:
    """Run on a full argument vector (program name first) and return the output."""
    appname = argv[0] if argv else ""
    args = list(argv[1:])
    if not args:
        return _help(appname)
    try:
        values = [_parse_int(arg) for arg in args]
    except ValueError as error:
        return str(error)
    answer = longest_increasing_subsequence(values)
    return "".join(f"{value} " for value in answer)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result for the given argument vector (default: sys.argv)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())