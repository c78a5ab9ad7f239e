from . import strength
from .context import PREFLOP, Recommendation

# Seat weights: later seats act with more information.
POSITION_WEIGHTS = {
    "Button": 5,
    "Cut-off": 4,
    "Middle": 3,
    "UTG": 2,
    "Small Blind": 1,
    "Big Blind": 1,
}
POSITION_ALIASES = {
    "BTN": "Button",
    "CO": "Cut-off",
    "MP": "Middle",
    "SB": "Small Blind",
    "BB": "Big Blind",
}
DEFAULT_POSITION_WEIGHT = 3

POT_ODDS_THRESHOLD = 0.3

STAGE_PHRASES = {
    "preflop": "before seeing the flop",
    "flop": "with these community cards",
    "turn": "on the turn",
    "river": "on the river",
    "showdown": "at showdown",
}


def position_weight(position):
    seat = POSITION_ALIASES.get(position, position)
    return POSITION_WEIGHTS.get(seat, DEFAULT_POSITION_WEIGHT)


def pot_odds(pot, stack):
    total = (stack or 0) + (pot or 0)
    # An empty table grades as the worst case, which never reads as a cheap call.
    return (pot or 0) / total if total > 0 else 1.0


def recommend(context):
    """
    Rule-based recommendation for the hero's next action.
    Deterministic in hand score, seat weight and pot odds.
    """
    score = strength.score(context.hole_cards, context.community_cards)
    weight = position_weight(context.position)
    odds = pot_odds(context.pot, context.stack)
    hand = "-".join(context.hole_cards)
    board = ", ".join(context.community_cards)
    seat = context.position

    should_play = True
    if context.stage == PREFLOP:
        if score >= 8:
            action = "raise"
            reason = (
                f"You have a strong hand! With {hand}, you should raise to build the pot "
                f"and narrow the field. Position: {seat}."
            )
        elif score >= 6:
            if weight >= 4:
                action = "call"
                reason = f"Decent hand in good position. {hand} is playable from {seat}. Call to see the flop."
            else:
                action = "fold"
                should_play = False
                reason = (
                    f"{hand} is marginal in early position ({seat}). "
                    "Safer to fold and wait for a better spot."
                )
        elif score >= 4 and weight >= 4:
            action = "call"
            reason = (
                "Speculative hand in late position. You can call and see if the flop "
                f"improves your hand. Position: {seat}."
            )
        else:
            action = "fold"
            should_play = False
            reason = f"{hand} is too weak to play. Folding saves your chips for better opportunities."
    else:
        if score >= 8:
            action = "bet"
            reason = f"Strong hand! Bet to build the pot and protect your hand. The board shows {board}."
        elif score >= 6:
            if odds < POT_ODDS_THRESHOLD:
                action = "call"
                reason = f"Medium strength. Call to see the next card. Community: {board}."
            else:
                action = "check"
                reason = f"Medium strength. Check to see a free card. Community: {board}."
        else:
            action = "fold"
            should_play = False
            reason = (
                f"Your hand didn't improve enough. With {board} on board, "
                "it's better to fold and preserve chips."
            )

    return Recommendation(
        action=action,
        reasoning=reason,
        hand_strength=strength.strength_category(score),
        should_play=should_play,
        score=score,
        position_weight=weight,
        pot_odds=round(odds, 4),
    )


def insight(context):
    """What the coach would do, phrased before the player acts."""
    rec = recommend(context)
    phrase = STAGE_PHRASES.get(context.stage, "right now")
    return f"AI Coach says: I'd recommend you {rec.action.upper()} {phrase}. {rec.reasoning}"
