"""Reading the element lines of a .cub scene description."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .linereader import LineReader
from .strings import strcmp, strrchr
from .transform import strtrim

_BLANKS = " \t\n"


class ElementType(Enum):
    """The scene elements, named by the identifier that starts their line."""

    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"
    F = "F"
    C = "C"


class ParseError(Exception):
    """A scene file that cannot be read or is malformed."""


@dataclass
class MapConfig:
    """Everything read from a scene file."""

    data: dict[ElementType, str] = field(default_factory=dict)
    f_color: int = 0
    c_color: int = 0
    map_grid: list[str] = field(default_factory=list)
    height: int = 0
    width: int = 0


def is_cub_extension(map_name: str) -> bool:
    """True when the name ends in '.cub' with something before the dot."""
    dot = strrchr(map_name, ".")
    if dot is None:
        return False
    return strcmp(map_name[dot + 1 :], "cub") == 0 and dot != 0


def _element_of(line: str) -> tuple[ElementType, str] | None:
    for element in ElementType:
        prefix = element.value + " "
        if line.startswith(prefix):
            return element, line[len(prefix) :]
    return None


def fill_map_data(lines: Iterable[str], config: MapConfig) -> MapConfig:
    """Record each element line into config and return it.

    Blank and unrecognised lines are skipped; an element given twice
    raises ParseError.
    """
    for line in lines:
        trimmed = strtrim(line, _BLANKS)
        if not trimmed:
            continue
        found = _element_of(trimmed)
        if found is None:
            continue
        element, value = found
        if element in config.data:
            raise ParseError("fill map failed")
        config.data[element] = strtrim(value, _BLANKS)
    return config


def parse_map(path: str) -> MapConfig:
    """Read the scene file at path into a new MapConfig."""
    if not is_cub_extension(path):
        raise ParseError("invalid extension")
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as err:
        raise ParseError("failed to open the map") from err
    with handle:
        return fill_map_data(LineReader(handle), MapConfig())