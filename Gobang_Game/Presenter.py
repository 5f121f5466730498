"""Human-readable turn and result strings for a snapshot."""

from .Board import Piece
from .engine.state import GameState

MESSAGES = {
    "en": {
        Piece.BLACK: "Black",
        Piece.WHITE: "White",
        GameState.PLAYING: "",
        GameState.BLACK_WINS: "Game over! Black wins!",
        GameState.WHITE_WINS: "Game over! White wins!",
        GameState.DRAW: "Game over! Draw!",
        "to_move": "{player} to move",
        "restart": "Restart",
    },
    "zh": {
        Piece.BLACK: "黑棋",
        Piece.WHITE: "白棋",
        GameState.PLAYING: "",
        GameState.BLACK_WINS: "游戏结束！黑棋获胜！",
        GameState.WHITE_WINS: "游戏结束！白棋获胜！",
        GameState.DRAW: "游戏结束！平局！",
        "to_move": "当前玩家：{player}",
        "restart": "重新开始",
    },
}


class StatusPresenter:
    def __init__(self, language="en"):
        if language not in MESSAGES:
            raise ValueError(f"Unsupported language: {language!r} (expected one of {sorted(MESSAGES)})")
        self.language = language
        self._messages = MESSAGES[language]

    def turn_text(self, snapshot):
        """Name of the player whose turn it is (the winner once the game is won)."""
        return self._messages[snapshot.turn]

    def status_text(self, snapshot):
        """Terminal-state message, or an empty string while the game is on."""
        return self._messages[snapshot.state]

    def headline(self, snapshot):
        """One-line summary: the result when over, otherwise whose move it is."""
        status = self.status_text(snapshot)
        if status:
            return status
        return self._messages["to_move"].format(player=self.turn_text(snapshot))

    def restart_label(self):
        return self._messages["restart"]
