"""
Command-line filter: sort newline-separated integers with stooge sort.

Usage:
    printf '3\n2\n1\n-5\n' | stoogesort
    printf '3\n2\n1\n-5\n' | python -m stoogesort --reverse

Blank lines are ignored. Any other line that is not an integer aborts with
exit status 2 and names the offending line.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from stoogesort.core import natural_order, reverse_order, stooge_sort, stooge_sort_by

__all__ = ["main", "read_ints"]

PROMPT = "Pipe in a newline-separated list of ints"


def read_ints(stream: TextIO) -> List[int]:
    """
    Parse one integer per line from `stream`.

    Raises
    ------
    ValueError
        If a non-blank line is not an integer; the message carries the
        1-based line number.
    """
    nums: List[int] = []
    for lineno, raw in enumerate(stream, start=1):
        text = raw.strip()
        if not text:
            continue
        try:
            nums.append(int(text))
        except ValueError as e:
            raise ValueError(f"line {lineno}: not an integer: {text!r}") from e
    return nums


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stoogesort",
        description="Read newline-separated integers from stdin and print them stooge-sorted.",
    )
    p.add_argument("--reverse", action="store_true", help="Print in descending order")
    return p


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    if stdin.isatty():
        print(PROMPT, file=stdout)
        return 0

    try:
        nums = read_ints(stdin)
    except ValueError as e:
        parser.error(str(e))

    if args.reverse:
        stooge_sort_by(nums, reverse_order(natural_order))
    else:
        stooge_sort(nums)

    for n in nums:
        print(n, file=stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
