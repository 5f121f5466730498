"""Pixel <-> grid cell mapping shared by the pygame view."""

import math

from ..Board import BOARD_SIZE

CELL_SIZE = 36
MARGIN = 30
STONE_RADIUS = 14
STAR_POINTS = (3, 7, 11)


def canvas_size(cell_size=CELL_SIZE, margin=MARGIN):
    return BOARD_SIZE * cell_size + margin * 2


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def pixel_to_cell(x, y, cell_size=CELL_SIZE, margin=MARGIN):
    """Map a click to the nearest intersection as (row, col); may fall off the board."""
    row = _round_half_up((y - margin) / cell_size)
    col = _round_half_up((x - margin) / cell_size)
    return row, col


def cell_to_pixel(row, col, cell_size=CELL_SIZE, margin=MARGIN):
    """Centre of an intersection as (x, y)."""
    return col * cell_size + margin, row * cell_size + margin
