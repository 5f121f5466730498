"""Move admission: coordinate normalisation, game-over, bounds and occupancy checks."""

import operator

from .state import GameState


class IllegalMove(ValueError):
    """Raised for a move request the rules do not admit."""


def normalize_move(row, col):
    """
    Coerce (row, col) to plain ints.
    Anything implementing __index__ is accepted except bool; floats and strings are not.
    """
    coords = []
    for value in (row, col):
        if isinstance(value, bool):
            raise IllegalMove("Coordinates must be integers")
        try:
            coords.append(operator.index(value))
        except TypeError as exc:
            raise IllegalMove("Coordinates must be integers") from exc
    return coords[0], coords[1]


def check_move(board, state, row, col):
    """
    Validate a move against game state, bounds and occupancy.
    Returns the normalised (row, col); raises IllegalMove on invalid moves.
    """
    if state is not GameState.PLAYING:
        raise IllegalMove("Game is already over")

    row, col = normalize_move(row, col)
    if not board.in_bounds(row, col):
        raise IllegalMove("Move out of bounds")
    if not board.is_empty(row, col):
        raise IllegalMove("Cell already occupied")

    return row, col
