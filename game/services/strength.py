"""
Heuristic hand-strength scoring on a 0-10 scale.

One scorer serves both teaching modes: the full game uses the formula
heuristic (with a board adjustment after the flop), quick practice uses the
static starting-hand table so both modes grade a hand the same way.
"""

from collections import Counter

from .hand_eval import RANK_VALUE

HEURISTIC = "heuristic"
TABLE = "table"

MAX_SCORE = 10
UNKNOWN_HAND_SCORE = 2

STARTING_HANDS = {
    "AA": 10,
    "KK": 10,
    "QQ": 9,
    "JJ": 9,
    "TT": 8,
    "AK": 9,
    "AQ": 8,
    "AJ": 7,
    "AT": 7,
    "KQ": 7,
    "KJ": 6,
    "KT": 6,
    "QJ": 6,
    "QT": 5,
    "JT": 5,
    "A9": 5,
    "A8": 4,
    "A7": 4,
    "99": 7,
    "88": 6,
    "77": 5,
    "66": 4,
    "55": 3,
}


def rank_of(card):
    # Unknown ranks count as 0 so malformed cards grade as weak.
    return RANK_VALUE.get(card[:-1], 0) if card else 0


def suit_of(card):
    return card[-1:] if card else ""


def starting_hand_key(hole_cards):
    """Reduce two hole cards to a table key such as "AK" or "99"."""
    ranks = sorted(hole_cards[:2], key=rank_of, reverse=True)
    return "".join(card[:-1] for card in ranks)


def cards_for_key(key):
    """Two off-suit cards standing for a starting-hand key such as "AK"."""
    if not key or len(key) != 2:
        return []
    return [key[0] + "S", key[1] + "H"]


def starting_hand_score(key):
    return STARTING_HANDS.get(key, UNKNOWN_HAND_SCORE)


def preflop_score(hole_cards):
    first, second = hole_cards[:2]
    rank1, rank2 = rank_of(first), rank_of(second)
    adjacent = abs(rank1 - rank2) == 1

    if rank1 == rank2:
        if rank1 >= 12:
            return 10
        if rank1 >= 10:
            return 9
        if rank1 >= 8:
            return 7
        return 5
    if rank1 >= 12 or rank2 >= 12:
        total = rank1 + rank2
        if total >= 24:
            return 9
        if total >= 22:
            return 8
        return 6
    if suit_of(first) == suit_of(second):
        return 6 if adjacent else 5
    if adjacent and rank1 + rank2 >= 18:
        return 5
    return 2


def board_adjusted(base, cards):
    """Raise `base` for made hands and flush draws across all known cards."""
    score = base
    rank_counts = Counter(rank_of(card) for card in cards)
    most = max(rank_counts.values())
    if most >= 4:
        score = MAX_SCORE
    elif most == 3:
        score = max(score, 8)
    elif most == 2:
        pairs = sum(1 for count in rank_counts.values() if count == 2)
        score = max(score, 7 if pairs >= 2 else 6)

    suited = max(Counter(suit_of(card) for card in cards).values())
    if suited >= 5:
        score = MAX_SCORE
    elif suited == 4:
        score = max(score, 7)
    return max(0, min(score, MAX_SCORE))


def score(hole_cards, community_cards=(), mode=HEURISTIC):
    """Score a hand from 0 (trash) to 10 (premium)."""
    hole_cards = list(hole_cards or [])
    community_cards = list(community_cards or [])
    if len(hole_cards) < 2:
        return 0

    if mode == TABLE:
        return starting_hand_score(starting_hand_key(hole_cards))

    base = preflop_score(hole_cards)
    if community_cards:
        return board_adjusted(base, hole_cards + community_cards)
    return base


def strength_category(value):
    if value >= 7:
        return "strong"
    if value >= 5:
        return "medium"
    return "weak"
