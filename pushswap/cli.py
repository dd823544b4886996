"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .parsing import InputError, has_duplicates, parse_arguments
from .sorting import solve


def _fail(message: str) -> int:
    if message:
        sys.stderr.write(message + "\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; report "Error" on stderr for bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
        if has_duplicates(values):
            raise InputError()
        operations = solve(values)
    except InputError as error:
        return _fail(str(error))
    except RuntimeError as error:
        return _fail(str(error))
    for operation in operations:
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())