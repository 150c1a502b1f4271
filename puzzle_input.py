"""
Reading and drawing the burrow text grid.

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

Line 1 is the hallway; every following line with a symbol under each room
is one room row. Grids with 2 or 4 room rows are accepted.
"""

from typing import Iterable, List, Union

from burrow import Configuration
from burrow_layout import (
    CELL_COORDS, CELL_COUNT, CELL_INDEX, EMPTY, HALLWAY_WIDTH, KINDS,
    MAX_ROOM_DEPTH, ROOM_COLUMNS,
)

EXAMPLE_GRID = (
    "#############\n"
    "#...........#\n"
    "###B#C#B#D###\n"
    "  #A#D#C#A#\n"
    "  #########\n"
)

_SYMBOLS = set(KINDS) | {EMPTY}
_ROOM_DEPTHS = (2, MAX_ROOM_DEPTH)


class PuzzleInputError(ValueError):
    """Raised when a grid cannot be read as a burrow."""


def _room_symbols(line: str) -> List[str]:
    """Symbols under the four room columns, or [] if the line is not a room row."""
    symbols = []
    for col in ROOM_COLUMNS:
        text_col = col + 1
        if text_col >= len(line) or line[text_col] not in _SYMBOLS:
            return []
        symbols.append(line[text_col])
    return symbols


def parse_burrow(text: Union[str, Iterable[str]]) -> Configuration:
    """Parse a burrow grid into a Configuration. Raises PuzzleInputError."""
    lines = text.splitlines() if isinstance(text, str) else [line.rstrip('\n') for line in text]
    if len(lines) < 4:
        raise PuzzleInputError(f"Expected at least 4 grid lines, got {len(lines)}")

    hallway = lines[1]
    if len(hallway) < HALLWAY_WIDTH + 2:
        raise PuzzleInputError(f"Hallway line is too short: {hallway!r}")

    cells = [EMPTY] * CELL_COUNT
    for col in range(HALLWAY_WIDTH):
        symbol = hallway[col + 1]
        if symbol not in _SYMBOLS:
            raise PuzzleInputError(f"Unknown symbol {symbol!r} in hallway column {col}")
        index = CELL_INDEX.get((col, 0))
        if index is None:
            if symbol != EMPTY:
                raise PuzzleInputError(f"Amphipod {symbol!r} stands outside a room at column {col}")
            continue
        cells[index] = symbol

    rows = []
    for line in lines[2:]:
        symbols = _room_symbols(line)
        if not symbols:
            break
        rows.append(symbols)

    if len(rows) not in _ROOM_DEPTHS:
        raise PuzzleInputError(f"Expected {' or '.join(map(str, _ROOM_DEPTHS))} room rows, got {len(rows)}")

    for row, symbols in enumerate(rows, start=1):
        for col, symbol in zip(ROOM_COLUMNS, symbols):
            cells[CELL_INDEX[(col, row)]] = symbol

    # Rooms fill from the bottom; nothing may float above an empty cell
    for col in ROOM_COLUMNS:
        column = [cells[CELL_INDEX[(col, row)]] for row in range(1, len(rows) + 1)]
        seen = False
        for row, symbol in enumerate(column, start=1):
            if symbol != EMPTY:
                seen = True
            elif seen:
                raise PuzzleInputError(f"Room at column {col} has an empty row {row} below an amphipod")

    config = Configuration(cells)
    for kind in KINDS:
        count = config.cells.count(kind)
        if count != len(rows):
            raise PuzzleInputError(f"Expected {len(rows)} amphipods of kind {kind}, got {count}")
    return config


def format_burrow(configuration: Configuration, max_depth: int) -> str:
    """Draw a configuration in the same grid shape parse_burrow reads."""
    hallway = [EMPTY] * HALLWAY_WIDTH
    for index, (col, row) in enumerate(CELL_COORDS):
        if row == 0:
            hallway[col] = configuration[index]

    lines = ['#' * (HALLWAY_WIDTH + 2), '#' + ''.join(hallway) + '#']
    for row in range(1, max_depth + 1):
        symbols = '#'.join(configuration[CELL_INDEX[(col, row)]] for col in ROOM_COLUMNS)
        if row == 1:
            lines.append('###' + symbols + '###')
        else:
            lines.append('  #' + symbols + '#')
    lines.append('  ' + '#' * (HALLWAY_WIDTH - 2))
    return '\n'.join(lines) + '\n'
