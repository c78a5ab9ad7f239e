import json
import logging
import urllib.error
import urllib.request

from django.conf import settings

LOGGER = logging.getLogger("pokermind.llm")

ANALYSIS_MAX_TOKENS = 300
ANALYSIS_TEMPERATURE = 0.7
INSIGHT_MAX_TOKENS = 200
INSIGHT_TEMPERATURE = 0.8

ANALYSIS_FALLBACK = (
    "You chose to {action}. Consider the strength of your hand and the pot odds. "
    "Keep learning and you'll improve!"
)
INSIGHT_FALLBACK = "Think about your hand strength and the pot size. What would a tight-aggressive player do here?"


def _board_text(community_cards):
    return ", ".join(community_cards) if community_cards else "None yet (pre-flop)"


def analysis_prompt(player_cards, community_cards, stage, action, pot, position=None):
    return (
        "You are an expert poker coach analyzing a player's move in real-time. "
        "Be encouraging and educational.\n\n"
        "Game Context:\n"
        f"- Stage: {stage}\n"
        f"- Player Cards: {', '.join(player_cards)}\n"
        f"- Community Cards: {_board_text(community_cards)}\n"
        f"- Action Taken: {action}\n"
        f"- Current Pot: ${pot}\n"
        f"- Position: {position or 'Unknown'}\n\n"
        "Analyze this move and provide:\n"
        "1. A brief assessment (2-3 sentences) - was this a good move or not?\n"
        "2. Why it was good/bad based on hand strength, position, and pot odds\n"
        "3. If it was suboptimal, what would have been better and why?\n"
        "4. One key learning point to remember\n\n"
        "Keep your response conversational, encouraging, and under 150 words. "
        "Avoid jargon - explain concepts simply."
    )


def insight_prompt(player_cards, community_cards, stage, pot):
    return (
        "You are a friendly poker coach providing a strategic hint during a hand.\n\n"
        "Current Situation:\n"
        f"- Stage: {stage}\n"
        f"- Player Cards: {', '.join(player_cards)}\n"
        f"- Community Cards: {_board_text(community_cards)}\n"
        f"- Current Pot: ${pot}\n\n"
        "Provide a helpful hint about what to consider for the next action. Focus on:\n"
        "- Hand strength at this stage\n"
        "- What to watch for in the community cards\n"
        "- General strategic advice for this situation\n\n"
        "Keep it brief (2-3 sentences), encouraging, and avoid giving away the exact answer. "
        "Help them think strategically."
    )


def query_ollama(prompt, *, max_tokens, temperature, timeout=None):
    """
    Hit a local Ollama server if available.
    Returns text or None if unavailable.
    """
    endpoint = settings.OLLAMA_ENDPOINT
    timeout = timeout if timeout is not None else settings.OLLAMA_TIMEOUT
    payload = {
        "model": settings.OLLAMA_MODEL,
        "prompt": prompt,
        "stream": False,
        "options": {"temperature": temperature, "num_predict": max_tokens},
    }
    data = json.dumps(payload).encode("utf-8")
    req = urllib.request.Request(endpoint, data=data, headers={"Content-Type": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read()
    except (urllib.error.URLError, TimeoutError, ConnectionError) as exc:
        LOGGER.warning("Text generation unavailable at %s: %s", endpoint, exc)
        return None

    try:
        parsed = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        LOGGER.warning("Text generation returned a non-JSON body")
        return None
    resp = parsed.get("response") if isinstance(parsed, dict) else None
    if isinstance(resp, str):
        resp = resp.strip()
    return resp or None


def analyze_move(player_cards, community_cards, stage, action, pot, position=None):
    prompt = analysis_prompt(player_cards, community_cards, stage, action, pot, position)
    text = query_ollama(prompt, max_tokens=ANALYSIS_MAX_TOKENS, temperature=ANALYSIS_TEMPERATURE)
    return text or ANALYSIS_FALLBACK.format(action=action)


def stage_hint(stage, player_cards):
    """Canned hint used whenever the model cannot answer."""
    if stage == "preflop":
        ranks = "".join(card[:-1] for card in player_cards[:2])
        if "A" in ranks and "K" in ranks:
            return "Strong starting hand! AK is worth playing aggressively. Consider raising."
        if len(ranks) == 2 and ranks[0] == ranks[1]:
            return "Pocket pair! These are strong hands. Higher pairs should raise, lower pairs can call."
        return "Think about your position. Can you afford to see a flop with this hand?"
    if stage == "flop":
        return "Look at what the flop connects with your hand. Do you have a pair? A draw? Position matters more now."
    if stage == "turn":
        return "One more card to come. Think about pot odds if you're drawing. Consider your opponent's possible hands."
    if stage in ("river", "showdown"):
        return "This is it! Make your final decision based on your hand strength and the betting action."
    return INSIGHT_FALLBACK


def coach_insight(player_cards, community_cards, stage, pot):
    prompt = insight_prompt(player_cards, community_cards, stage, pot)
    text = query_ollama(prompt, max_tokens=INSIGHT_MAX_TOKENS, temperature=INSIGHT_TEMPERATURE)
    return text or stage_hint(stage, player_cards)
