"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    print("Hello, astronomy!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())