# src/maumau/engine/turns.py
from __future__ import annotations
from typing import Optional

from maumau.engine.effects import apply_rank_effect
from maumau.engine.rules import check_play
from maumau.errors import IllegalMoveError
from maumau.model.game import GameState


def forced_draw(g: GameState, pid: int) -> None:
    c = g.give_card(pid)
    g.players[pid].drawn += 1
    g.emit({"a": "forced_draw", "t": g.turn, "p": pid, "card": str(c)})


def play_turn(g: GameState) -> Optional[int]:
    """
    Run one turn for the active player. Returns the winner's seat when the
    game is over, else None. Faults (illegal move, exhausted shoe) propagate.
    """
    pid = g.current_player
    p = g.players[pid]
    p.turns += 1

    held = len(p.hand)
    move = p.play(g.top, g.asked, g.deck)
    if g.log.echo:
        g.log.trace(f"{g} {move[0] if move else None} {int(move[1]) if move else 0}")

    if move is None:
        forced_draw(g, pid)
        g.advance()
        g.turn += 1
        return None

    played, declared = move
    if len(p.hand) != held - 1:
        raise IllegalMoveError(f"hand went from {held} to {len(p.hand)} cards on a play",
                               played, declared, g.top, g.asked)
    check_play(played, declared, g.top, g.asked)

    g.discard.append(g.top)
    g.top, g.asked = played, declared
    g.emit({"a": "play", "t": g.turn, "p": pid, "card": str(played), "asked": int(declared)})

    if p.is_out():
        g.emit({"a": "win", "t": g.turn, "p": pid})
        g.turn += 1
        return pid

    apply_rank_effect(g, played.rank)
    g.advance()
    g.turn += 1
    return None
