import logging

from . import advice, cards, hand_eval
from .context import BOARD_SIZE, RIVER, SHOWDOWN, GameContext, next_stage

CALL_AMOUNT = 50
RAISE_AMOUNT = 100
BET_AMOUNT = RAISE_AMOUNT

MOVES = ("fold", "check", "call", "raise", "bet")
WAGERS = {"call": CALL_AMOUNT, "raise": RAISE_AMOUNT, "bet": BET_AMOUNT}

LOGGER = logging.getLogger("pokermind.engine")


def _note(state, events, msg):
    events.append(msg)
    state["log"].append(msg)


def cards_in_play(state):
    return state["player"]["hand"] + state["opponent"]["hand"] + state["community"]


def analyze(state, move):
    """Judge `move` against the hand as it stood when the player chose it."""
    context = GameContext.from_state(state, last_action=move)
    judgment = advice.judge(context, move)
    state["last_analysis"] = {
        **judgment.as_dict(),
        "text": advice.format_judgment(judgment),
    }
    return judgment


def apply_player_move(state, move):
    events = []
    move = (move or "").strip().lower()

    if state.get("street") == SHOWDOWN:
        _note(state, events, "Hand is over. Start a new hand to play again.")
        return state, events

    analyze(state, move)
    state["last_action"] = move
    player = state["player"]

    if move == "fold":
        pot = state["pot"]
        player["folded"] = True
        state["opponent"]["stack"] += pot
        state["pot"] = 0
        state["street"] = SHOWDOWN
        state["result"] = f"You folded. The AI wins ${pot}."
        _note(state, events, state["result"])
        return state, events

    wager = WAGERS.get(move)
    if wager:
        bet = min(wager, player["stack"])
        player["stack"] -= bet
        state["pot"] += bet
        _note(state, events, f"You {move} {bet}.")
    else:
        if move != "check":
            LOGGER.warning("Unrecognized move %r treated as check", move)
        _note(state, events, "You check.")

    if state["street"] == RIVER:
        showdown(state, events)
    else:
        advance_board(state, events)
    return state, events


def advance_board(state, events):
    """Move one street forward and top the board up to that street's size."""
    street = next_stage(state["street"])
    needed = BOARD_SIZE[street] - len(state["community"])
    if needed > 0:
        state["community"].extend(cards.draw(state["deck"], needed, in_play=cards_in_play(state)))
    state["street"] = street
    _note(state, events, f"{street.capitalize()} dealt.")


def showdown(state, events):
    """Rank both hands and pay the pot to the better one; exact ties split it."""
    player = state["player"]
    opponent = state["opponent"]
    board = state["community"]
    if not opponent["hand"]:
        opponent["hand"] = cards.draw(state["deck"], 2, in_play=cards_in_play(state))

    player_score = hand_eval.evaluate_best(player["hand"] + board)
    opponent_score = hand_eval.evaluate_best(opponent["hand"] + board)
    player_label = hand_eval.rank_label(player_score)
    opponent_label = hand_eval.rank_label(opponent_score)
    outcome = hand_eval.compare(player_score, opponent_score)
    pot = state["pot"]

    if outcome > 0:
        player["stack"] += pot
        msg = f"You won ${pot} with {player_label}! The AI had {opponent_label}."
    elif outcome < 0:
        opponent["stack"] += pot
        msg = f"You lost this hand. The AI had {opponent_label} and you had {player_label}."
    else:
        share, remainder = divmod(pot, 2)
        player["stack"] += share + remainder
        opponent["stack"] += share
        msg = f"Split pot: both players have {player_label}."

    LOGGER.debug("Showdown %s vs %s -> %d", player_score, opponent_score, outcome)
    state["pot"] = 0
    state["street"] = SHOWDOWN
    state["result"] = msg
    _note(state, events, msg)
    _note(state, events, f"AI shows {cards.describe_cards(opponent['hand'])} ({opponent_label}).")
