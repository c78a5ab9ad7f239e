"""Quick practice: grade a single pre-flop decision from the starting-hand table."""

import random
from dataclasses import asdict, dataclass

from . import strength

PRACTICE_HANDS = (
    "AA", "KK", "QQ", "JJ", "TT", "99", "88", "77", "66", "55",
    "AK", "AQ", "AJ", "AT", "A9", "A8", "KQ", "KJ", "KT", "QJ",
    "QT", "JT", "54", "72", "83", "95", "J3", "Q4",
)
PRACTICE_POSITIONS = ("UTG", "MP", "CO", "Button")
LATE_POSITIONS = ("Button", "CO")

FOLD_XP = 10
CALL_XP = 15
RAISE_XP = 20
MISS_XP = 5


@dataclass(frozen=True)
class QuizResult:
    correct: bool
    explanation: str
    xp: int

    def as_dict(self):
        return asdict(self)


def random_spot(rng=None):
    rng = rng or random
    return rng.choice(PRACTICE_HANDS), rng.choice(PRACTICE_POSITIONS)


def evaluate(hand, position, action):
    value = strength.score(strength.cards_for_key(hand), mode=strength.TABLE)
    late = position in LATE_POSITIONS
    action = (action or "").strip().lower()

    if action == "fold":
        if value < 4:
            return QuizResult(
                True,
                f"Perfect fold! {hand} is weak and should be folded from {position}. Save your chips for better spots!",
                FOLD_XP,
            )
        return QuizResult(
            False,
            f"Not quite! {hand} is strong enough to play from {position}. "
            "Missing opportunities costs you money long-term.",
            MISS_XP,
        )
    if action == "call":
        if 5 <= value < 8:
            return QuizResult(
                True,
                f"Good call! {hand} from {position} is worth seeing a flop. You have decent equity and position helps!",
                CALL_XP,
            )
        return QuizResult(
            False,
            f"Think bigger! With {hand}, you should either fold (if too weak) or raise (if strong). "
            "Calling is often the worst option.",
            MISS_XP,
        )
    if action == "raise":
        if value >= 8 or (value >= 6 and late):
            return QuizResult(
                True,
                f"Excellent raise! {hand} from {position} is premium. "
                "You're taking control and building the pot with a strong hand!",
                RAISE_XP,
            )
        return QuizResult(
            False,
            f"Too aggressive! {hand} from {position} isn't strong enough to raise. "
            "Play tight and disciplined for long-term wins.",
            MISS_XP,
        )
    return QuizResult(False, f"Choose fold, call or raise with {hand} from {position}.", 0)


def record(progress, result):
    """Fold a quiz result into the session progress and return it."""
    if result.correct:
        progress.streak += 1
    else:
        progress.streak = 0
        if progress.hearts > 0:
            progress.hearts -= 1
    progress.hands_played += 1
    progress.add_xp(result.xp)
    return progress
