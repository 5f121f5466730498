"""Single-game rules engine: board ownership, turn alternation, win and draw detection."""

from .Board import Board, Piece
from .engine import referee
from .engine.state import GameState, Snapshot


class RulesEngine:
    def __init__(self, logger=None):
        self.logger = logger
        self.board = None
        self.turn = Piece.BLACK
        self.state = GameState.PLAYING
        self.winner = None
        self.new_game()

    def new_game(self):
        """Replace the board with a fresh empty one; Black to move."""
        self.board = Board()
        self.turn = Piece.BLACK
        self.state = GameState.PLAYING
        self.winner = None
        self._log("New game: Black to move")

    def apply_move(self, row, col):
        """
        Place the current player's stone at (row, col).
        Illegal requests (game over, non-integer or out-of-bounds coordinates,
        occupied cell) leave the state untouched. Returns True if the move was applied.
        """
        try:
            row, col = referee.check_move(self.board, self.state, row, col)
        except referee.IllegalMove as exc:
            self._log(f"Ignored move {(row, col)!r}: {exc}")
            return False

        color = self.turn
        self.board.place(row, col, color)
        self._log(f"Move {self.board.move_count}: {'B' if color is Piece.BLACK else 'W'} {(row, col)}")

        # Win before draw: a five on the last empty cell is a win
        if self.check_win(row, col, color):
            self.state = GameState.win_for(color)
            self.winner = color
            self._log(f"Winner: {'Black' if color is Piece.BLACK else 'White'}")
        elif self.check_draw():
            self.state = GameState.DRAW
            self._log("Result: Draw (board full)")
        else:
            self.turn = color.opponent()
        return True

    def check_win(self, row, col, color):
        return self.board.has_five_or_more(row, col, color)

    def check_draw(self):
        return self.board.is_full()

    def get_snapshot(self):
        return Snapshot(
            board=self.board.rows(),
            turn=self.turn,
            state=self.state,
            winner=self.winner,
            move_count=self.board.move_count,
        )

    def _log(self, message):
        if self.logger:
            self.logger(message)
