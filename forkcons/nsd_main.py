"""Read pairs of integers and report their greatest common divisor."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from forkcons.divisors import nd, nsd

_LINE_LIMIT = 255
_WS = "[ \t\n\v\f\r]*"
_INT = r"([+-]?[0-9]+)(?![0-9])"
_PAIR = re.compile(_WS + _INT + _WS + _INT)


def _is_prime(n: int) -> bool:
    return n != 1 and nd(n) == 1


def describe_pair(a: int, b: int) -> str:
    """Return the report line (without newline) for one pair."""
    if _is_prime(a) and _is_prime(b):
        return f"Both {a} and {b} are prime"
    return f"nsd({a}, {b}) = {nsd(a, b)}"


def parse_pair(line: str) -> tuple[int, int]:
    """Parse two leading whitespace-separated integers from ``line``.

    Anything after the second integer is ignored. Raises ValueError when the
    line does not start with two integers.
    """
    match = _PAIR.match(line)
    if match is None:
        raise ValueError(f"expected two integers: {line!r}")
    return int(match.group(1)), int(match.group(2))


def _chunks(lines: Iterable[str]) -> Iterator[str]:
    """Split overly long lines into pieces the reader handles one at a time."""
    for line in lines:
        while len(line) > _LINE_LIMIT:
            yield line[:_LINE_LIMIT]
            line = line[_LINE_LIMIT:]
        if line:
            yield line


def run(lines: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Process every line, writing reports to ``out`` and complaints to ``err``."""
    for line in _chunks(lines):
        try:
            a, b = parse_pair(line)
        except ValueError:
            err.write(f"Invalid input: {line}\n")
            err.flush()
            continue
        out.write(describe_pair(a, b) + "\n")
        out.flush()
    err.write("NSD DONE\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run over standard input; command-line arguments are ignored."""
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())