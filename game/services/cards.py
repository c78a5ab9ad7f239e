import logging
import random

RANKS = "23456789TJQKA"
SUITS = "SHDC"

LOGGER = logging.getLogger("pokermind.cards")


def new_deck():
    """Return a freshly ordered deck."""
    return [r + s for r in RANKS for s in SUITS]


def shuffle(deck):
    # random.shuffle is an in-place Fisher-Yates shuffle
    random.shuffle(deck)
    return deck


def remaining_deck(excluded):
    excluded_set = set(excluded)
    return [card for card in new_deck() if card not in excluded_set]


def draw(deck, count, in_play=()):
    """
    Take `count` cards off the top of `deck`.
    A deck that cannot cover the request is rebuilt from every card not in
    play and reshuffled first, so it is never read past its end.
    """
    if len(deck) < count:
        LOGGER.info("Deck has %d card(s), %d needed; regenerating", len(deck), count)
        deck[:] = shuffle(remaining_deck(in_play))
    drawn = deck[:count]
    del deck[:count]
    return drawn


def describe_cards(cards):
    return " ".join(cards) if cards else "none"
