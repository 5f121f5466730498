"""Text front end: ASCII board on stdout, 'row col' moves from stdin."""

import sys

from ..Board import Piece
from ..Presenter import StatusPresenter

SYMBOLS = {Piece.EMPTY: "+", Piece.BLACK: "@", Piece.WHITE: "O"}

RESTART_WORDS = ("r", "restart")
QUIT_WORDS = ("q", "quit", "exit")


class ConsoleView:
    def __init__(self, presenter=None, stdin=None, stdout=None):
        self.presenter = presenter or StatusPresenter()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text):
        self.stdout.write(text + "\n")

    def render(self, snapshot):
        size = len(snapshot.board)
        self._write("   " + " ".join(f"{c:>2}" for c in range(size)))
        for r, cells in enumerate(snapshot.board):
            self._write(f"{r:>2} " + " ".join(f"{SYMBOLS[p]:>2}" for p in cells))
        self._write(self.presenter.headline(snapshot))

    def read_command(self):
        """Return the next stripped input line, or None at end of input."""
        self.stdout.write("Enter move as 'row col', 'r' to restart, 'q' to quit: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def run(self, engine):
        """Read commands until quit or end of input."""
        self.render(engine.get_snapshot())
        while True:
            raw = self.read_command()
            if raw is None or raw.lower() in QUIT_WORDS:
                return
            if raw.lower() in RESTART_WORDS:
                engine.new_game()
            else:
                try:
                    row_str, col_str = raw.split()
                    row, col = int(row_str), int(col_str)
                except ValueError:
                    self._write("Invalid input format; expected two integers")
                    continue
                engine.apply_move(row, col)
            self.render(engine.get_snapshot())
