import io
import json
import urllib.error

import pytest

from game.services import llm


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_urlopen(req, timeout=None):
        calls.append({"payload": json.loads(req.data.decode("utf-8")), "timeout": timeout})
        return FakeResponse(json.dumps({"response": "  Nice raise, keep it up.  "}).encode("utf-8"))

    monkeypatch.setattr(llm.urllib.request, "urlopen", fake_urlopen)
    return calls


def _fail(exc):
    def fake_urlopen(req, timeout=None):
        raise exc

    return fake_urlopen


def test_analyze_move_sends_prompt_with_budget(captured):
    text = llm.analyze_move(["AS", "AH"], [], "preflop", "raise", 30, "Button")
    assert text == "Nice raise, keep it up."
    payload = captured[0]["payload"]
    assert payload["options"] == {"temperature": 0.7, "num_predict": 300}
    assert payload["stream"] is False
    assert "- Player Cards: AS, AH" in payload["prompt"]
    assert "None yet (pre-flop)" in payload["prompt"]
    assert "- Position: Button" in payload["prompt"]


def test_coach_insight_uses_its_own_budget(captured):
    llm.coach_insight(["AS", "AH"], ["2C", "7D", "9H"], "flop", 130)
    payload = captured[0]["payload"]
    assert payload["options"] == {"temperature": 0.8, "num_predict": 200}
    assert "- Community Cards: 2C, 7D, 9H" in payload["prompt"]
    assert "- Current Pot: $130" in payload["prompt"]


@pytest.mark.parametrize(
    "exc",
    [urllib.error.URLError("refused"), TimeoutError("slow"), ConnectionResetError("reset")],
)
def test_transport_failure_falls_back_to_canned_text(monkeypatch, exc):
    monkeypatch.setattr(llm.urllib.request, "urlopen", _fail(exc))
    assert llm.query_ollama("hi", max_tokens=10, temperature=0.1) is None
    assert llm.analyze_move(["AS", "AH"], [], "preflop", "fold", 30) == (
        "You chose to fold. Consider the strength of your hand and the pot odds. Keep learning and you'll improve!"
    )


def test_garbage_body_falls_back(monkeypatch):
    monkeypatch.setattr(llm.urllib.request, "urlopen", lambda req, timeout=None: FakeResponse(b"<html>"))
    assert llm.coach_insight(["AS", "KD"], [], "preflop", 30).startswith("Strong starting hand! AK")


def test_empty_response_falls_back(monkeypatch):
    body = json.dumps({"response": "   "}).encode("utf-8")
    monkeypatch.setattr(llm.urllib.request, "urlopen", lambda req, timeout=None: FakeResponse(body))
    assert llm.coach_insight(["9S", "9D"], [], "preflop", 30).startswith("Pocket pair!")


@pytest.mark.parametrize(
    "stage, hole, start",
    [
        ("preflop", ["7C", "2D"], "Think about your position."),
        ("flop", ["7C", "2D"], "Look at what the flop"),
        ("turn", ["7C", "2D"], "One more card to come."),
        ("river", ["7C", "2D"], "This is it!"),
        ("unknown", ["7C", "2D"], "Think about your hand strength"),
    ],
)
def test_stage_hint(stage, hole, start):
    assert llm.stage_hint(stage, hole).startswith(start)
