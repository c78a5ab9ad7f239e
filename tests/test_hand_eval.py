import pytest

from game.services import cards, hand_eval


def test_evaluate_best_identifies_all_hand_categories():
    cases = [
        (8, ["AH", "KH", "QH", "JH", "TH"]),
        (7, ["AS", "AH", "AD", "AC", "KD"]),
        (6, ["QC", "QD", "QS", "9H", "9S"]),
        (5, ["AH", "JH", "9H", "6H", "2H"]),
        (4, ["9H", "8D", "7C", "6S", "5H"]),
        (3, ["8H", "8D", "8S", "QD", "JS"]),
        (2, ["7H", "7D", "4S", "4C", "AS"]),
        (1, ["6H", "6S", "QH", "8D", "4C"]),
        (0, ["AS", "KD", "JH", "9C", "4D"]),
    ]
    for expected_rank, hand in cases:
        rank, _ = hand_eval.evaluate_best(hand)
        assert rank == expected_rank, f"hand={hand}"


def test_wheel_straight_plays_ace_low():
    rank, detail = hand_eval.evaluate_best(["AH", "2D", "3C", "4S", "5H", "9D", "KD"])
    assert rank == 4
    assert detail[0] == 5


def test_kickers_break_equal_pairs():
    hand_a = hand_eval.evaluate_best(["AH", "AD", "KC", "QS", "9H", "2D", "3C"])
    hand_b = hand_eval.evaluate_best(["AH", "AD", "QC", "JS", "8H", "2D", "3C"])
    assert hand_eval.compare(hand_a, hand_b) == 1
    assert hand_eval.compare(hand_b, hand_a) == -1
    assert hand_eval.compare(hand_a, hand_a) == 0


def test_evaluate_best_needs_five_cards():
    with pytest.raises(ValueError, match="at least 5 cards"):
        hand_eval.evaluate_best(["AH", "AD"])


def test_rank_label():
    assert hand_eval.rank_label(hand_eval.evaluate_best(["7H", "7D", "4S", "4C", "AS"])) == "Two Pair"
    assert hand_eval.rank_label(()) == "Unknown"


def test_new_deck_has_52_unique_cards():
    deck = cards.new_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_draw_takes_from_top():
    deck = ["AS", "KD", "2C"]
    assert cards.draw(deck, 2) == ["AS", "KD"]
    assert deck == ["2C"]


def test_draw_regenerates_exhausted_deck_without_cards_in_play():
    in_play = ["AS", "AH", "KD", "QC", "JC"]
    deck = ["2C"]
    drawn = cards.draw(deck, 3, in_play=in_play)
    assert len(drawn) == 3
    assert not set(drawn) & set(in_play)
    assert len(deck) == 52 - len(in_play) - 3
    assert not set(deck) & (set(drawn) | set(in_play))
