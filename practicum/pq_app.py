"""Command line front end for an integer priority queue."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

from practicum.priority_queue import EmptyQueueError, PriorityQueue

_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_FORMAT_ERROR = "Wrong number format!"
_UNKNOWN_OPERATION = "Unknown operator. Incorrect input format"


def _help(appname: str, message: str = "") -> str:
    return (
        message
        + "\tThis is an application for working with a priority queue.\n\n\n"
        + "\tPlease provide arguments in the following format:\n"
        + "   $ " + appname + "  <Operation>" + "  <value_or_values>\n\n"
        + "\tThe arguments for the operations must be integer number,"
        + " and the operation is one of the following :"
        + "\n\t'put' - \tPut elements in queue."
        + "\n\t'pop' - \tRetrieves the element on the top out of queue"
        + "\n\t'top' - \tReturns element value on the top out of queue"
        + "\n\t'get' - \tRetrieves the element on the top and returns"
        + " its value out of queue "
        + "\n\t'size' - \tReturns the queue size"
        + "\n\t'empty' -  \tChecks if the queue is empty"
        + "\n\t'clear' - \tClears the queue\n\n"
    )


def _has_digit(arg: str) -> bool:
    return any(ch in "0123456789" for ch in arg)


def _parse_int(arg: str) -> int:
    """Parse a leading 32-bit integer, ignoring anything after it."""
    match = _INTEGER_PREFIX.match(arg)
    if match is None:
        raise ValueError(_FORMAT_ERROR)
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(_FORMAT_ERROR)
    return value


class PriorityQueueApp:
    """Runs queue operations given as arguments; state persists between calls."""

    def __init__(self) -> None:
        self._message = ""
        self._queue = PriorityQueue()
        self._operations: dict[str, Callable[[], None]] = {
            "clear": self._clear,
            "empty": self._empty,
            "size": self._size,
            "pop": self._pop,
            "top": self._top,
            "get": self._get,
        }

    def _clear(self) -> None:
        self._message += "\tThe queue cleared\n"
        self._queue.clear()

    def _size(self) -> None:
        self._message += f"\tA queue size = {len(self._queue)}\n"

    def _empty(self) -> None:
        if self._queue.empty():
            self._message += "\tQueue is empty\n"
        else:
            self._message += "\tQueue is not empty\n"

    def _pop(self) -> None:
        self._message += "\tAn withdrawal was made from the queue\n"
        self._queue.pop()

    def _top(self) -> None:
        self._message += "\tAt the top of the queue a value of "
        self._message += f"{self._queue.top()}\n"

    def _get(self) -> None:
        self._message += "\tThe withdrawal was made from the queue a value of "
        self._message += f"{self._queue.get()}\n"

    def __call__(self, argv: Sequence[str]) -> str:
        """Run on a full argument vector (program name first) and return the output."""
        argv = list(argv)
        if len(argv) <= 1:
            self._message = _help(argv[0] if argv else "")
            return self._message

        args = argv[1:]
        pos = 0
        while pos < len(args):
            operation = args[pos]
            pos += 1
            if operation == "put":
                self._message += "\tAn insertion was made from the queue:\n\t"
                while pos < len(args) and _has_digit(args[pos]):
                    try:
                        value = _parse_int(args[pos])
                    except ValueError as error:
                        return str(error)
                    self._message += f" {value}"
                    self._queue.put(value)
                    pos += 1
                self._message += "\n"
                continue
            handler = self._operations.get(operation)
            if handler is None:
                return _UNKNOWN_OPERATION
            try:
                handler()
            except EmptyQueueError as error:
                return str(error)
        return self._message


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result for the given argument vector (default: sys.argv)."""
    app = PriorityQueueApp()
    sys.stdout.write(app(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())