"""Command line front end for an integer stack."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from practicum.linked_list import EmptyListError
from practicum.stack import Stack

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1

_HELP = (
    "This is an integer stack application.\n\n"
    "Parameters:\n"
    "s \t\t Output size of stack.\n"
    "e \t\t Output if stack is empty.\n"
    "t \t\t Output top element of stack.\n"
    "pop \t\t Pop element from stack.\n"
    "push <values> \t Input element(s) and push it into stack.\n"
    "c \t\t Clear stack.\n\n"
)


def _atoi(arg: str) -> int:
    """Parse a leading integer as a 32-bit int; 0 when there is none."""
    match = _LEADING_INT.match(arg)
    if match is None:
        return 0
    value = min(max(int(match.group(1)), _LONG_MIN), _LONG_MAX)
    return (value + 2**31) % 2**32 - 2**31


def _is_value(arg: str) -> bool:
    return bool(arg) and arg[0] in "0123456789-"


class StackApp:
    """Runs stack commands given as arguments; output accumulates between calls."""

    def __init__(self) -> None:
        self._message = ""
        self._stack = Stack()

    def _top(self) -> str:
        try:
            return str(self._stack.top())
        except EmptyListError:
            return "error: can't get top, stack is empty"

    def _pop(self) -> str:
        try:
            self._stack.pop()
        except EmptyListError:
            return "error: can't pop, stack is empty"
        return ""

    def __call__(self, argv: Sequence[str]) -> str:
        """Run on a full argument vector (program name first) and return the output."""
        argv = list(argv)
        if len(argv) == 1:
            self._message += _HELP

        pos = 1
        while pos < len(argv):
            if pos != 1:
                self._message += " "
            key = argv[pos]
            if key == "s":
                self._message += str(len(self._stack))
            elif key == "e":
                self._message += "true" if self._stack.empty() else "false"
            elif key == "t":
                self._message += self._top()
            elif key == "pop":
                self._message += self._pop()
            elif key == "push":
                while pos + 1 < len(argv) and _is_value(argv[pos + 1]):
                    pos += 1
                    self._stack.push(_atoi(argv[pos]))
            elif key == "c":
                self._stack.clear()
            else:
                self._message += "error: unknown key " + key
            pos += 1

        self._message += "\n"
        return self._message


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result for the given argument vector (default: sys.argv)."""
    app = StackApp()
    sys.stdout.write(app(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())