LESSON_XP = 50

LESSONS = {
    "hands": {
        "title": "Hand Rankings",
        "description": "Learn what makes a poker hand strong",
        "cards": [
            {
                "name": "Royal Flush",
                "rank": 1,
                "example": "AS KS QS JS TS",
                "description": "The best hand! All cards in sequence, same suit, starting with Ace.",
            },
            {
                "name": "Straight Flush",
                "rank": 2,
                "example": "9H 8H 7H 6H 5H",
                "description": "Five cards in sequence, all the same suit.",
            },
            {
                "name": "Four of a Kind",
                "rank": 3,
                "example": "KC KD KH KS 3C",
                "description": "Four cards of the same rank. Very powerful!",
            },
            {
                "name": "Full House",
                "rank": 4,
                "example": "QS QH QD 7C 7S",
                "description": "Three of one rank, two of another. Strong hand!",
            },
            {
                "name": "Flush",
                "rank": 5,
                "example": "AD JD 9D 5D 3D",
                "description": "Five cards of the same suit, not in sequence.",
            },
            {
                "name": "Straight",
                "rank": 6,
                "example": "TS 9C 8H 7D 6S",
                "description": "Five cards in sequence, different suits.",
            },
            {"name": "Three of a Kind", "rank": 7, "example": "8C 8S KH 4C", "description": "Three cards of the same rank."},
            {"name": "Two Pair", "rank": 8, "example": "JH JC 6S AC", "description": "Two different pairs of cards."},
            {"name": "One Pair", "rank": 9, "example": "TS TD AH 7C 4S", "description": "Two cards of the same rank."},
            {"name": "High Card", "rank": 10, "example": "AS KD 9H 7C 3S", "description": "Nothing special. Highest card wins."},
        ],
    },
    "positions": {
        "title": "Table Positions",
        "description": "Where you sit matters in poker",
        "cards": [
            {
                "name": "Button (BTN)",
                "position": "best",
                "description": "The best seat! You act last on every betting round after the flop. "
                "You see what everyone else does before deciding. Play more hands here.",
            },
            {
                "name": "Cut-Off (CO)",
                "position": "great",
                "description": "Second best position, right before the Button. You act second-to-last post-flop. "
                "Great for stealing the blinds when the Button folds.",
            },
            {
                "name": "Middle Position (MP)",
                "position": "okay",
                "description": "The middle seats at the table. You have some players behind you who act after. "
                "Play decent hands only.",
            },
            {
                "name": "Under the Gun (UTG)",
                "position": "worst",
                "description": "First to act! Everyone gets to see what you do before deciding. This is tough. "
                "Only play your strongest hands from here.",
            },
            {
                "name": "Small Blind (SB)",
                "position": "tricky",
                "description": "You post a forced half-bet before seeing cards. You act first after the flop. "
                "Difficult position - be careful!",
            },
            {
                "name": "Big Blind (BB)",
                "position": "tricky",
                "description": "You post a forced full bet before seeing cards. You act last pre-flop but first post-flop. "
                "Defend with decent hands.",
            },
        ],
    },
}

SKILLS = (
    ("Pre-flop Basics", True, 1),
    ("Position Play", True, 2),
    ("Hand Ranges", True, 3),
    ("Pot Odds", True, 4),
    ("Post-flop Play", False, 5),
    ("Bluffing", False, 6),
    ("Tournament Strategy", False, 7),
    ("GTO Fundamentals", False, 8),
)


def skill_tree():
    return [{"name": name, "unlocked": unlocked, "level": level} for name, unlocked, level in SKILLS]


def lesson(mode):
    """Return the lesson for `mode`, or None when the mode is unknown."""
    return LESSONS.get(mode)


def lesson_card(mode, index):
    current = lesson(mode)
    if current is None:
        return None
    cards = current["cards"]
    index = max(0, min(index, len(cards) - 1))
    return {
        "mode": mode,
        "title": current["title"],
        "description": current["description"],
        "index": index,
        "total": len(cards),
        "card": cards[index],
    }


def next_lesson(progress, mode, index):
    """
    Step forward through a lesson. Returns (progress, next_index, finished).
    Finishing a lesson marks it completed; its XP is granted only once.
    """
    cards = LESSONS[mode]["cards"]
    if index < len(cards) - 1:
        return progress, index + 1, False
    if mode not in progress.completed_tutorials:
        progress.completed_tutorials.append(mode)
        progress.add_xp(LESSON_XP)
    return progress, 0, True


def prev_lesson(index):
    return index - 1 if index > 0 else 0
