"""
Burrow configurations and the amphipod move rules.

A configuration is the symbol in each of the 23 burrow cells ('.' for an
empty cell, otherwise the amphipod kind). It is immutable and carries a
canonical base-5 integer key, so it can be used directly as a search node.

Usage:
    from burrow import Configuration, available_moves, apply_move
    start = Configuration('.......' 'BA..' 'CD..' 'BC..' 'DA..')
    for move in available_moves(start, max_depth=2):
        nxt = apply_move(start, move)
"""

from collections import namedtuple

from burrow_layout import (
    CELL_COORDS, CELL_COUNT, CELL_INDEX, DESTINATION_COLUMN, EMPTY,
    HALLWAY_COLUMNS, KIND_COST, KINDS, MAX_ROOM_DEPTH, ROOM_COLUMNS,
    distance, hallway_span,
)

# Base-5 digit of each cell symbol
SYMBOL_DIGITS = {EMPTY: 0, 'A': 1, 'B': 2, 'C': 3, 'D': 4}
DIGIT_SYMBOLS = {digit: symbol for symbol, digit in SYMBOL_DIGITS.items()}

# Positional weight of each cell in the key; cell 0 is the most significant digit
_PLACE_VALUES = tuple(5 ** (CELL_COUNT - 1 - i) for i in range(CELL_COUNT))

# Rows inserted between the two rows of each room when unfolding, rooms A-D
UNFOLD_ROWS = (('D', 'D'), ('C', 'B'), ('B', 'A'), ('A', 'C'))

Move = namedtuple('Move', ['origin', 'destination', 'cost'])


class InvalidConfigurationError(ValueError):
    """Raised when cells do not describe a valid burrow configuration."""


class Configuration:
    """Immutable assignment of a symbol to every burrow cell."""

    __slots__ = ('cells', 'key')

    def __init__(self, cells):
        if not isinstance(cells, str):
            cells = ''.join(cells)
        if len(cells) != CELL_COUNT:
            raise InvalidConfigurationError(
                f"Configuration needs {CELL_COUNT} cells, got {len(cells)}: {cells!r}"
            )
        key = 0
        for symbol in cells:
            digit = SYMBOL_DIGITS.get(symbol)
            if digit is None:
                raise InvalidConfigurationError(f"Unknown cell symbol {symbol!r} in {cells!r}")
            key = key * 5 + digit
        object.__setattr__(self, 'cells', cells)
        object.__setattr__(self, 'key', key)

    @classmethod
    def _trusted(cls, cells, key):
        """Build a configuration from already validated cells and their key."""
        config = object.__new__(cls)
        object.__setattr__(config, 'cells', cells)
        object.__setattr__(config, 'key', key)
        return config

    @classmethod
    def from_key(cls, key):
        """Decode a canonical key back into a configuration."""
        if key < 0 or key >= 5 ** CELL_COUNT:
            raise InvalidConfigurationError(f"Key {key} is out of range")
        symbols = []
        remaining = key
        for _ in range(CELL_COUNT):
            remaining, digit = divmod(remaining, 5)
            symbols.append(DIGIT_SYMBOLS[digit])
        return cls._trusted(''.join(reversed(symbols)), key)

    def __setattr__(self, name, value):
        raise AttributeError("Configuration is immutable")

    def __reduce__(self):
        return (Configuration, (self.cells,))

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Configuration({self.cells!r})"

    def __getitem__(self, index):
        return self.cells[index]

    def token_count(self):
        return CELL_COUNT - self.cells.count(EMPTY)


def room_depth_for(configuration):
    """Room depth implied by the number of amphipods: 8 -> 2, 16 -> 4."""
    count = configuration.token_count()
    if count % len(ROOM_COLUMNS) or not len(ROOM_COLUMNS) <= count <= len(ROOM_COLUMNS) * MAX_ROOM_DEPTH:
        raise InvalidConfigurationError(f"Cannot derive a room depth from {count} amphipods")
    return count // len(ROOM_COLUMNS)


def goal_configuration(max_depth):
    """Empty hallway with every room filled with its own kind down to max_depth."""
    if not 1 <= max_depth <= MAX_ROOM_DEPTH:
        raise InvalidConfigurationError(f"Room depth must be 1-{MAX_ROOM_DEPTH}, got {max_depth}")
    rooms = ''.join(kind * max_depth + EMPTY * (MAX_ROOM_DEPTH - max_depth) for kind in KINDS)
    return Configuration(EMPTY * len(HALLWAY_COLUMNS) + rooms)


def unfold(configuration):
    """
    Build the deep (depth 4) puzzle from a shallow (depth 2) one.

    The two existing rows of each room become rows 1 and 4, and the fixed
    rows D D / C B / B A / A C are inserted as rows 2-3 of rooms A-D.
    """
    if configuration.token_count() != 2 * len(ROOM_COLUMNS):
        raise InvalidConfigurationError(
            f"Only a depth-2 configuration with 8 amphipods can be unfolded: {configuration!r}"
        )
    cells = list(configuration.cells)
    for col, (upper, lower) in zip(ROOM_COLUMNS, UNFOLD_ROWS):
        cells[CELL_INDEX[(col, 4)]] = cells[CELL_INDEX[(col, 2)]]
        cells[CELL_INDEX[(col, 2)]] = upper
        cells[CELL_INDEX[(col, 3)]] = lower
    return Configuration(cells)


def destination_row(configuration, kind, room_column, max_depth):
    """
    Returns the row an amphipod of `kind` would settle in, or None.

    Rooms fill from the bottom: the deepest empty row qualifies only when
    every row beneath it already holds `kind` and every row above it is
    empty. A foreign kind anywhere in the room, an amphipod nearer the
    mouth, or a full room means there is no destination.
    """
    cells = configuration.cells
    for row in range(max_depth, 0, -1):
        symbol = cells[CELL_INDEX[(room_column, row)]]
        if symbol == EMPTY:
            if _is_stuck(cells, room_column, row):
                return None
            return row
        if symbol != kind:
            return None
    return None


def is_hallway_clear(configuration, from_column, to_column, exclude_index=None):
    """Returns whether no hallway cell between the columns (inclusive) is occupied."""
    cells = configuration.cells
    for index in hallway_span(from_column, to_column):
        if index != exclude_index and cells[index] != EMPTY:
            return False
    return True


def _is_stuck(cells, column, row):
    """Whether some amphipod sits above (column, row) in its room."""
    for above in range(1, row):
        if cells[CELL_INDEX[(column, above)]] != EMPTY:
            return True
    return False


def _is_settled(cells, kind, column, row, max_depth):
    """Whether an amphipod at (column, row) is home with only its own kind below it."""
    if column != DESTINATION_COLUMN[kind]:
        return False
    for below in range(row + 1, max_depth + 1):
        if cells[CELL_INDEX[(column, below)]] != kind:
            return False
    return True


def _make_move(origin, destination, kind):
    return Move(origin, destination, distance(origin, destination) * KIND_COST[kind])


def available_moves(configuration, max_depth):
    """
    Returns every legal single-amphipod move as a list of Move tuples.

    A hallway amphipod may only walk straight into the deepest free row of
    its own room. A room amphipod that is not blocked from above and not
    already settled may walk to any hallway cell it can reach.
    """
    cells = configuration.cells
    moves = []
    for index, kind in enumerate(cells):
        if kind == EMPTY:
            continue

        column, row = CELL_COORDS[index]
        dest_column = DESTINATION_COLUMN[kind]

        if row == 0:
            dest_row = destination_row(configuration, kind, dest_column, max_depth)
            if dest_row is not None and is_hallway_clear(configuration, column, dest_column, index):
                moves.append(_make_move(index, CELL_INDEX[(dest_column, dest_row)], kind))
            continue

        if _is_stuck(cells, column, row):
            continue
        if _is_settled(cells, kind, column, row, max_depth):
            continue

        for hall_index, hall_column in enumerate(HALLWAY_COLUMNS):
            if is_hallway_clear(configuration, column, hall_column, index):
                moves.append(_make_move(index, hall_index, kind))
    return moves


def apply_move(configuration, move):
    """Returns a new configuration with the amphipod relocated."""
    cells = configuration.cells
    origin, destination = move.origin, move.destination
    kind = cells[origin]
    if kind == EMPTY:
        raise InvalidConfigurationError(f"No amphipod at cell {origin} in {configuration!r}")
    if cells[destination] != EMPTY:
        raise InvalidConfigurationError(f"Cell {destination} is occupied in {configuration!r}")

    new_cells = list(cells)
    new_cells[destination] = kind
    new_cells[origin] = EMPTY
    digit = SYMBOL_DIGITS[kind]
    key = configuration.key + digit * (_PLACE_VALUES[destination] - _PLACE_VALUES[origin])
    return Configuration._trusted(''.join(new_cells), key)
