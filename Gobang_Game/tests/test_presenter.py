"""Status text for each game state, in both languages."""

import dataclasses

import pytest

from Gobang_Game.Presenter import StatusPresenter
from Gobang_Game.RulesEngine import RulesEngine
from Gobang_Game.engine.state import GameState


def finished_engine():
    engine = RulesEngine()
    for move in [(0, 0), (0, 14), (1, 1), (1, 14), (2, 2), (2, 14), (3, 3), (3, 14), (4, 4)]:
        engine.apply_move(*move)
    return engine


def test_english_while_playing():
    engine = RulesEngine()
    p = StatusPresenter()
    snap = engine.get_snapshot()
    assert p.turn_text(snap) == "Black"
    assert p.status_text(snap) == ""
    assert p.headline(snap) == "Black to move"

    engine.apply_move(7, 7)
    assert p.headline(engine.get_snapshot()) == "White to move"


def test_english_black_wins():
    p = StatusPresenter("en")
    snap = finished_engine().get_snapshot()
    assert p.status_text(snap) == "Game over! Black wins!"
    assert p.headline(snap) == "Game over! Black wins!"


def test_chinese_strings():
    p = StatusPresenter("zh")
    engine = RulesEngine()
    assert p.turn_text(engine.get_snapshot()) == "黑棋"
    engine.apply_move(0, 0)
    assert p.headline(engine.get_snapshot()) == "当前玩家：白棋"
    assert p.status_text(finished_engine().get_snapshot()) == "游戏结束！黑棋获胜！"
    assert p.restart_label() == "重新开始"


@pytest.mark.parametrize(
    "state, en, zh",
    [
        (GameState.WHITE_WINS, "Game over! White wins!", "游戏结束！白棋获胜！"),
        (GameState.DRAW, "Game over! Draw!", "游戏结束！平局！"),
    ],
)
def test_terminal_messages(state, en, zh):
    snap = dataclasses.replace(RulesEngine().get_snapshot(), state=state)
    assert StatusPresenter("en").status_text(snap) == en
    assert StatusPresenter("zh").status_text(snap) == zh


def test_unknown_language():
    with pytest.raises(ValueError):
        StatusPresenter("fr")
