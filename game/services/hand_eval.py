"""Best-of-seven hand ranking used to settle a natural showdown."""

import itertools
from collections import Counter

from .cards import RANKS

RANK_VALUE = {rank: idx + 2 for idx, rank in enumerate(RANKS)}

HAND_LABELS = (
    "High Card",
    "One Pair",
    "Two Pair",
    "Three of a Kind",
    "Straight",
    "Flush",
    "Full House",
    "Four of a Kind",
    "Straight Flush",
)


def card_value(card):
    return RANK_VALUE[card[0]]


def straight_high(values):
    uniq = sorted(set(values), reverse=True)
    if 14 in uniq:
        uniq.append(1)  # Ace can play low
    for i in range(len(uniq) - 4):
        window = uniq[i : i + 5]
        if window[0] - window[4] == 4:
            return window[0]
    return None


def score_five(cards):
    values = sorted((card_value(card) for card in cards), reverse=True)
    counts = Counter(values)
    ordered = sorted(counts.items(), key=lambda x: (-x[1], -x[0]))
    groups = [count for _, count in ordered]

    is_flush = len({card[1] for card in cards}) == 1
    top = straight_high(values)

    if is_flush and top:
        return (8, [top])
    if groups[0] == 4:
        quad = ordered[0][0]
        return (7, [quad, ordered[1][0]])
    if groups[:2] == [3, 2]:
        return (6, [ordered[0][0], ordered[1][0]])
    if is_flush:
        return (5, values)
    if top:
        return (4, [top])
    if groups[0] == 3:
        trips = ordered[0][0]
        return (3, [trips] + [v for v in values if v != trips])
    if groups[:2] == [2, 2]:
        high_pair, low_pair, kicker = ordered[0][0], ordered[1][0], ordered[2][0]
        return (2, [high_pair, low_pair, kicker])
    if groups[0] == 2:
        pair = ordered[0][0]
        return (1, [pair] + [v for v in values if v != pair])
    return (0, values)


def evaluate_best(cards):
    """Return the best 5-card score for 5 to 7 cards."""
    if len(cards) < 5:
        raise ValueError(f"Need at least 5 cards to rank a hand, got {len(cards)}")
    return max(score_five(combo) for combo in itertools.combinations(cards, 5))


def compare(hand_a, hand_b):
    """Compare two (rank, detail) tuples."""
    return (hand_a > hand_b) - (hand_a < hand_b)


def rank_label(score):
    rank_idx = score[0] if score else -1
    return HAND_LABELS[rank_idx] if 0 <= rank_idx < len(HAND_LABELS) else "Unknown"
