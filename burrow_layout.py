"""
Cell layout of the amphipod burrow.

The burrow is an eleven-square hallway above four side rooms. The squares
directly outside a room can never be stopped on, so only seven hallway cells
are addressable. Each room holds up to four cells; the shallow variant of the
puzzle only uses the top two rows of every room.

Cell indices are shared by every module:
    0-6    hallway, columns 0, 1, 3, 5, 7, 9, 10
    7-10   room A (column 2), rows 1-4
    11-14  room B (column 4), rows 1-4
    15-18  room C (column 6), rows 1-4
    19-22  room D (column 8), rows 1-4

This module is the single source of truth for burrow geometry.
"""

HALLWAY_COLUMNS = (0, 1, 3, 5, 7, 9, 10)
ROOM_COLUMNS = (2, 4, 6, 8)
HALLWAY_WIDTH = 11
MAX_ROOM_DEPTH = 4
CELL_COUNT = len(HALLWAY_COLUMNS) + len(ROOM_COLUMNS) * MAX_ROOM_DEPTH

EMPTY = '.'
KINDS = ('A', 'B', 'C', 'D')

# Energy spent per step, by kind
KIND_COST = {'A': 1, 'B': 10, 'C': 100, 'D': 1000}

# Room column each kind must end up in
DESTINATION_COLUMN = dict(zip(KINDS, ROOM_COLUMNS))


def _compute_cells():
    """Build the index -> (column, row) table, hallway first, then room by room."""
    cells = [(col, 0) for col in HALLWAY_COLUMNS]
    for col in ROOM_COLUMNS:
        for row in range(1, MAX_ROOM_DEPTH + 1):
            cells.append((col, row))
    return tuple(cells)


def _compute_hallway_spans():
    """Map every (low, high) column pair to the hallway indices between them, inclusive."""
    spans = {}
    for low in range(HALLWAY_WIDTH):
        for high in range(low, HALLWAY_WIDTH):
            spans[(low, high)] = tuple(
                i for i, col in enumerate(HALLWAY_COLUMNS) if low <= col <= high
            )
    return spans


CELL_COORDS = _compute_cells()
CELL_INDEX = {coord: i for i, coord in enumerate(CELL_COORDS)}
_HALLWAY_SPANS = _compute_hallway_spans()


def cell_coord(index):
    """Returns the (column, row) of a cell index."""
    return CELL_COORDS[index]


def cell_index(column, row):
    """Returns the cell index at (column, row), or None if no cell is there."""
    return CELL_INDEX.get((column, row))


def room_cells(column, max_depth=MAX_ROOM_DEPTH):
    """Indices of a room's cells from the mouth (row 1) down to max_depth."""
    return tuple(CELL_INDEX[(column, row)] for row in range(1, max_depth + 1))


def hallway_span(from_column, to_column):
    """Hallway indices whose column lies between the two columns, inclusive."""
    if from_column > to_column:
        from_column, to_column = to_column, from_column
    return _HALLWAY_SPANS[(from_column, to_column)]


def distance(from_index, to_index):
    """Manhattan distance between two cells."""
    from_col, from_row = CELL_COORDS[from_index]
    to_col, to_row = CELL_COORDS[to_index]
    return abs(from_col - to_col) + abs(from_row - to_row)
