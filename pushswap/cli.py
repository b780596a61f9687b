"""Command-line entry point: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, is_blank, parse_arguments
from pushswap.sorting import is_sorted, sort
from pushswap.stacks import Stacks


def _emit(op: str) -> None:
    sys.stdout.write(op + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on argv and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        if any(is_blank(arg) for arg in args):
            raise InputError()
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(values, emit=_emit)
    if is_sorted(stacks):
        return 1
    sort(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())