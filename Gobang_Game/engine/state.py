"""Game state enum and the immutable snapshot handed to front ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..Board import Piece


class GameState(Enum):
    PLAYING = "playing"
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.PLAYING

    @classmethod
    def win_for(cls, color: Piece) -> "GameState":
        if color is Piece.BLACK:
            return cls.BLACK_WINS
        if color is Piece.WHITE:
            return cls.WHITE_WINS
        raise ValueError("only a stone color can win")


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[Piece, ...], ...]
    turn: Piece
    state: GameState
    winner: Optional[Piece] = None
    move_count: int = 0

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    def cell(self, row: int, col: int) -> Piece:
        return self.board[row][col]
