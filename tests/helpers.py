from __future__ import annotations

from typing import List, Optional, Sequence

from game.services import cards, state as state_svc
from game.services.context import GameContext


def make_context(
    hole: Sequence[str],
    board: Sequence[str] = (),
    *,
    stage: str = "preflop",
    pot: int = 30,
    position: str = "Button",
    stack: int = 1_000,
) -> GameContext:
    return GameContext(
        hole_cards=tuple(hole),
        community_cards=tuple(board),
        stage=stage,
        pot=pot,
        position=position,
        stack=stack,
    )


def stacked_hand(
    hole: List[str],
    upcoming: List[str],
    *,
    opponent: Optional[List[str]] = None,
    position: str = "Button",
) -> dict:
    """A fresh hand whose deck deals `upcoming` next, then the rest of the deck."""
    state = state_svc.new_hand(position=position)
    used = hole + upcoming + (opponent or [])
    state["player"]["hand"] = list(hole)
    state["deck"] = list(upcoming) + (list(opponent) if opponent else []) + cards.remaining_deck(used)
    return state
