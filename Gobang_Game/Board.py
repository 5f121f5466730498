"""Board state container and five-in-a-row line counting."""

from enum import IntEnum

BOARD_SIZE = 15
WIN_LENGTH = 5

# Horizontal, vertical, main diagonal, anti-diagonal as (dr, dc)
ORIENTATIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class Piece(IntEnum):
    EMPTY = 0
    BLACK = -1
    WHITE = 1

    def opponent(self):
        if self is Piece.EMPTY:
            raise ValueError("empty cell has no opponent")
        return Piece.WHITE if self is Piece.BLACK else Piece.BLACK


class Board:
    def __init__(self):
        # cells[row][col]; the grid size never changes after construction
        self.size = BOARD_SIZE
        self.cells = [[Piece.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.move_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] is Piece.EMPTY

    def place(self, row, col, color):
        """Place a stone; raise if out of bounds or occupied."""
        if color not in (Piece.BLACK, Piece.WHITE):
            raise ValueError("color must be Piece.BLACK or Piece.WHITE")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] is not Piece.EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = Piece(color)
        self.move_count += 1

    def has_five_or_more(self, row, col, color):
        """Check for WIN_LENGTH+ stones of color in any orientation through (row, col)."""
        for dr, dc in ORIENTATIONS:
            forward = self.count_direction(row, col, dr, dc, color, limit=WIN_LENGTH - 1)
            backward = self.count_direction(row, col, -dr, -dc, color, limit=WIN_LENGTH - 1)
            if 1 + forward + backward >= WIN_LENGTH:
                return True
        return False

    def count_direction(self, row, col, dr, dc, color, limit=None):
        """Count contiguous stones of color from (row, col) (exclusive) in (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            count += 1
            if limit is not None and count >= limit:
                break
            r += dr
            c += dc
        return count

    def is_full(self):
        for row in self.cells:
            for cell in row:
                if cell is Piece.EMPTY:
                    return False
        return True

    def rows(self):
        """Return a read-only copy of the grid as a tuple of row tuples."""
        return tuple(tuple(row) for row in self.cells)
