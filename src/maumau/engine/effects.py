# src/maumau/engine/effects.py
from maumau.constants import ACE, DRAW_TWO, QUEEN
from maumau.model.game import GameState


def penalty_draw(g: GameState, pid: int, n: int) -> None:
    p = g.players[pid]
    for _ in range(n):
        g.give_card(pid)
    p.penalty += n
    g.emit({"a": "penalty_draw", "t": g.turn, "p": pid, "n": n})


def apply_rank_effect(g: GameState, rank: int) -> None:
    """
    Rank effects that run after a card is played and before the regular
    end-of-turn advance. The caller always advances once more afterwards.

      1 (ace)    skip the next player (ace_rule="skip"); nothing with "none"
      7          next player draws two and loses the turn
      12 (queen) reverse direction; with two players "skip" passes the turn
                 straight back, "noop" leaves it alone
      11 (jack)  no effect here; the asked suit was set when the card was played
    """
    if rank == ACE:
        if g.cfg.ace_rule == "skip":
            g.advance()
            g.emit({"a": "skip", "t": g.turn, "p": g.current_player, "by": "ace"})
    elif rank == DRAW_TWO:
        g.advance()
        penalty_draw(g, g.current_player, 2)
        g.emit({"a": "skip", "t": g.turn, "p": g.current_player, "by": "seven"})
    elif rank == QUEEN:
        if len(g.players) == 2:
            if g.cfg.queen_two_players == "skip":
                g.advance()
                g.emit({"a": "skip", "t": g.turn, "p": g.current_player, "by": "queen"})
        else:
            g.reverse()
            g.emit({"a": "reverse", "t": g.turn, "direction": g.direction})
