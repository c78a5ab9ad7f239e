import pytest

from game.services import policy

from .helpers import make_context

ALL_POSITIONS = ["Button", "Cut-off", "Middle", "UTG", "Small Blind", "Big Blind"]


@pytest.mark.parametrize(
    "position, weight",
    [("Button", 5), ("Cut-off", 4), ("Middle", 3), ("UTG", 2), ("Small Blind", 1), ("Big Blind", 1), ("CO", 4)],
)
def test_position_weight_table(position, weight):
    assert policy.position_weight(position) == weight


def test_unknown_position_weighs_middle():
    assert policy.position_weight("Hijack") == 3
    assert policy.position_weight(None) == 3


def test_pot_odds_handles_empty_table():
    assert policy.pot_odds(0, 0) == 1.0
    assert policy.pot_odds(100, 300) == pytest.approx(0.25)


@pytest.mark.parametrize("position", ALL_POSITIONS)
def test_premium_preflop_hand_always_raises(position):
    rec = policy.recommend(make_context(["AS", "KD"], position=position))
    assert rec.score == 9
    assert rec.action == "raise"
    assert rec.should_play is True
    assert rec.hand_strength == "strong"


def test_medium_hand_from_big_blind_folds():
    rec = policy.recommend(make_context(["7S", "7D"], position="Big Blind"))
    assert rec.score == 5
    assert rec.position_weight == 1
    assert rec.action == "fold"
    assert rec.should_play is False


def test_playable_hand_calls_only_from_late_seat():
    late = policy.recommend(make_context(["QS", "4D"], position="Cut-off"))
    early = policy.recommend(make_context(["QS", "4D"], position="Middle"))
    assert (late.action, late.should_play) == ("call", True)
    assert (early.action, early.should_play) == ("fold", False)


def test_speculative_hand_calls_from_button():
    rec = policy.recommend(make_context(["9H", "5H"], position="Button"))
    assert rec.score == 5
    assert rec.action == "call"
    assert rec.hand_strength == "medium"


def test_trash_folds_everywhere():
    for position in ALL_POSITIONS:
        rec = policy.recommend(make_context(["7C", "2D"], position=position))
        assert rec.action == "fold"


def test_postflop_strong_hand_bets():
    rec = policy.recommend(make_context(["7C", "2D"], ["7H", "7S", "9D"], stage="flop"))
    assert rec.action == "bet"
    assert rec.should_play is True
    assert "7H, 7S, 9D" in rec.reasoning


def test_postflop_medium_hand_calls_with_good_pot_odds():
    ctx = make_context(["7C", "2D"], ["7H", "KS", "9D"], stage="flop", pot=100, stack=900)
    rec = policy.recommend(ctx)
    assert rec.pot_odds == pytest.approx(0.1)
    assert rec.action == "call"


def test_postflop_medium_hand_checks_when_pot_is_large():
    # 300 / (700 + 300) sits exactly on the threshold, which is not "below" it.
    ctx = make_context(["7C", "2D"], ["7H", "KS", "9D"], stage="turn", pot=300, stack=700)
    rec = policy.recommend(ctx)
    assert rec.action == "check"
    assert rec.should_play is True


def test_postflop_missed_hand_folds():
    rec = policy.recommend(make_context(["7C", "2D"], ["AH", "KS", "9D"], stage="flop"))
    assert rec.action == "fold"
    assert rec.should_play is False


def test_reasoning_mentions_cards_and_seat():
    rec = policy.recommend(make_context(["AS", "AH"], position="UTG"))
    assert "AS-AH" in rec.reasoning
    assert "UTG" in rec.reasoning


def test_insight_phrases_recommendation_by_stage():
    text = policy.insight(make_context(["AS", "AH"]))
    assert text.startswith("AI Coach says: I'd recommend you RAISE before seeing the flop.")
    river = policy.insight(make_context(["7C", "2D"], ["AH", "KS", "9D", "3C", "4S"], stage="river"))
    assert "FOLD on the river" in river


def test_empty_table_never_reads_as_cheap_call():
    ctx = make_context(["7C", "2D"], ["7H", "KS", "9D"], stage="flop", pot=0, stack=0)
    rec = policy.recommend(ctx)
    assert rec.pot_odds == 1.0
    assert rec.action == "check"
