from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple

PREFLOP = "preflop"
FLOP = "flop"
TURN = "turn"
RIVER = "river"
SHOWDOWN = "showdown"

STAGES = (PREFLOP, FLOP, TURN, RIVER, SHOWDOWN)

# Board size each stage must have been dealt.
BOARD_SIZE = {PREFLOP: 0, FLOP: 3, TURN: 4, RIVER: 5, SHOWDOWN: 5}


def next_stage(stage: str) -> str:
    idx = STAGES.index(stage)
    return STAGES[min(idx + 1, len(STAGES) - 1)]


@dataclass(frozen=True)
class GameContext:
    # Snapshot of one decision point; rebuilt for every evaluation.
    hole_cards: Tuple[str, ...]
    community_cards: Tuple[str, ...] = ()
    stage: str = PREFLOP
    pot: int = 0
    position: str = "Button"
    stack: int = 0
    last_action: Optional[str] = None

    @classmethod
    def from_state(cls, state: dict, last_action: Optional[str] = None) -> "GameContext":
        player = state.get("player", {})
        return cls(
            hole_cards=tuple(player.get("hand") or ()),
            community_cards=tuple(state.get("community") or ()),
            stage=state.get("street", PREFLOP),
            pot=state.get("pot", 0),
            position=state.get("position", "Button"),
            stack=player.get("stack", 0),
            last_action=last_action,
        )


@dataclass(frozen=True)
class Recommendation:
    action: str
    reasoning: str
    hand_strength: str
    should_play: bool
    score: int = 0
    position_weight: int = 0
    pot_odds: float = 0.0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MoveJudgment:
    was_good_move: bool
    explanation: str
    learning_point: str
    better_move: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class SessionProgress:
    """Per-browser learning progress, passed into and returned from each handler."""

    xp: int = 0
    level: int = 1
    hearts: int = 5
    streak: int = 0
    hands_played: int = 0
    completed_tutorials: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SessionProgress":
        if not data:
            return cls()
        known = {key: data[key] for key in cls.__dataclass_fields__ if key in data}
        return cls(**known)

    def as_dict(self) -> dict:
        return asdict(self)

    def add_xp(self, amount: int) -> None:
        self.xp += amount
        if self.xp >= self.level * 100:
            self.level += 1
