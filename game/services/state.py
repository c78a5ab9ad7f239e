from . import cards, quiz
from .context import PREFLOP, SessionProgress

STARTING_STACK = 1000
BLINDS_TOTAL = 30
DEFAULT_POSITION = "Button"


def new_hand(prev_state=None, starting_stack=STARTING_STACK, position=DEFAULT_POSITION):
    """Start a fresh heads-up hand; reuse existing stacks if prev_state is provided."""
    if prev_state:
        player_stack = prev_state.get("player", {}).get("stack", starting_stack)
        opponent_stack = prev_state.get("opponent", {}).get("stack", starting_stack)
        position = prev_state.get("position", position)
    else:
        player_stack = opponent_stack = starting_stack

    deck = cards.shuffle(cards.new_deck())
    player_hand = cards.draw(deck, 2)

    return {
        "deck": deck,
        "player": {
            "name": "You",
            "hand": player_hand,
            "stack": player_stack,
            "folded": False,
        },
        # The opponent's cards come off the deck only at a natural showdown.
        "opponent": {
            "name": "AI",
            "hand": [],
            "stack": opponent_stack,
        },
        "community": [],
        "street": PREFLOP,
        "pot": BLINDS_TOTAL,
        "position": position,
        "log": ["New hand started."],
        "result": None,
        "last_action": None,
        "last_analysis": None,
    }


def public_view(state):
    """Hand state safe to send to the browser: no deck, no hidden opponent cards."""
    opponent = dict(state["opponent"])
    if state.get("street") != "showdown" or state["player"].get("folded"):
        opponent["hand"] = []
    view = {key: value for key, value in state.items() if key != "deck"}
    view["opponent"] = opponent
    return view


def load(session):
    return session.get("game_state")


def save(session, state):
    session["game_state"] = state


def load_progress(session):
    return SessionProgress.from_dict(session.get("progress"))


def save_progress(session, progress):
    session["progress"] = progress.as_dict()


def load_spot(session):
    spot = session.get("practice_spot")
    if not spot:
        hand, position = quiz.random_spot()
        spot = {"hand": hand, "position": position}
        session["practice_spot"] = spot
    return spot


def new_spot(session):
    session.pop("practice_spot", None)
    return load_spot(session)


def load_lesson_index(session, mode):
    return session.get("lesson_index", {}).get(mode, 0)


def save_lesson_index(session, mode, index):
    indexes = dict(session.get("lesson_index", {}))
    indexes[mode] = index
    session["lesson_index"] = indexes
