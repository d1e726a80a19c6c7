"""Command-line entry point: read a scene file and show its elements."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .output import putstr_fd
from .parser import ElementType, ParseError, parse_map
from .printf import printf


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene named on the command line and print each element value."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        putstr_fd("Usage: cub3d <map.cub>\n", sys.stderr)
        return 1
    try:
        config = parse_map(args[0])
    except ParseError as err:
        putstr_fd(f"Error: {err}\n", sys.stderr)
        return 1
    for element in ElementType:
        printf("%s\n", config.data.get(element))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())