# cub3d

Reads `.cub` scene files for a raycasting game and extracts their header
elements: the four wall textures (`NO`, `SO`, `WE`, `EA`) and the floor and
ceiling colours (`F`, `C`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
cub3d path/to/scene.cub
```

The file name must end in `.cub` with something before the dot. The value
of every element is printed on its own line, in the order `NO`, `SO`, `WE`,
`EA`, `F`, `C`; an element missing from the file is printed as `(null)`.
The command exits with status 0 on success.

On a bad extension, an unreadable file or an element given twice, a line
such as `Error: invalid extension`, `Error: failed to open the map` or
`Error: fill map failed` goes to standard error and the command exits with
status 1. Called with anything other than exactly one argument, it prints
`Usage: cub3d <map.cub>` to standard error and exits with status 1.

## Library use

```python
from cub3d.parser import ElementType, MapConfig, ParseError, fill_map_data, is_cub_extension, parse_map

is_cub_extension("maps/level.cub")   # True
is_cub_extension(".cub")             # False

try:
    config = parse_map("maps/level.cub")
except ParseError as exc:
    print(exc)
else:
    print(config.data.get(ElementType.NO))

config = fill_map_data(["NO ./north.xpm\n", "F 220,100,0\n"], MapConfig())
config.data[ElementType.F]           # "220,100,0"
```

Each line is trimmed of spaces, tabs and newlines. A line that starts with
an identifier followed by a space (`NO `, `SO `, `WE `, `EA `, `F `, `C `)
stores the rest of the line, trimmed again, in `MapConfig.data` under that
`ElementType`. Each element may appear only once; a repeat raises
`ParseError`. Blank lines and lines that are not elements are skipped.

## Other modules

- `cub3d.linereader.LineReader(stream, buffer_size=500)` — reads a text or
  binary stream line by line through a fixed-size buffer; `read_line()`
  returns the next line with its newline, or `None` at the end, and the
  reader is iterable.
- `cub3d.printf` — `format_printf(fmt, *args)` renders the `%c %s %p %d %i
  %u %x %X %%` conversions; `printf(fmt, *args)` writes the result to
  standard output and returns its length.
- `cub3d.linkedlist` — `Node` and `LinkedList` with `add_front`,
  `add_back`, `last`, `remove_first`, `clear`, `iterate` and `map`.
- `cub3d.strings` — `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`; strings end at their first NUL.
- `cub3d.transform` — `strdup`, `substr`, `strjoin`, `strjoin_three`,
  `strtrim`, `split`, `strmapi`, `striteri`, `first_word`.
- `cub3d.numbers` — `atoi`, `atoi_base` and `itoa`, with 32-bit wrapping
  for the parsers.
- `cub3d.chars` — ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper`, `to_lower`,
  `lower_str` and `absolute`.
- `cub3d.memory` — `bzero`, `memset`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` on bytearrays.
- `cub3d.output` — `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  to a file object or a file descriptor.

## What it does not do

This package only reads the element lines of a scene file. It does not
parse the map grid itself, does not turn the `F` and `C` values into colours
(`MapConfig.map_grid`, `f_color`, `c_color`, `height` and `width` keep their
defaults), does not check that texture files exist, and opens no window:
there is no rendering or raycasting.