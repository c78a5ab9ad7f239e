import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from .forms import AnalyzeMoveForm, CoachInsightForm
from .services import engine, llm, policy, quiz, state as state_svc, tutorials
from .services.context import GameContext

LOGGER = logging.getLogger("pokermind.views")


def _error(msg, status=400, **extra):
    return JsonResponse({"error": msg, **extra}, status=status)


def _json_body(request):
    try:
        data = json.loads(request.body or b"{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _current_hand(request):
    state = state_svc.load(request.session)
    if state is None:
        state = state_svc.new_hand()
        state_svc.save(request.session, state)
    return state


@require_GET
@ensure_csrf_cookie
def home(request):
    progress = state_svc.load_progress(request.session)
    return JsonResponse(
        {
            "progress": progress.as_dict(),
            "tutorials": [
                {"mode": mode, "title": item["title"], "completed": mode in progress.completed_tutorials}
                for mode, item in tutorials.LESSONS.items()
            ],
            "skills": tutorials.skill_tree(),
        }
    )


@require_GET
@ensure_csrf_cookie
def progress_view(request):
    progress = state_svc.load_progress(request.session)
    return JsonResponse({"progress": progress.as_dict(), "skills": tutorials.skill_tree()})


@require_GET
@ensure_csrf_cookie
def tutorial(request, mode):
    index = state_svc.load_lesson_index(request.session, mode)
    card = tutorials.lesson_card(mode, index)
    if card is None:
        return _error(f"Unknown tutorial: {mode}", status=404)
    return JsonResponse(card)


@require_POST
def tutorial_next(request, mode):
    if tutorials.lesson(mode) is None:
        return _error(f"Unknown tutorial: {mode}", status=404)
    progress = state_svc.load_progress(request.session)
    index = state_svc.load_lesson_index(request.session, mode)
    progress, index, finished = tutorials.next_lesson(progress, mode, index)
    state_svc.save_progress(request.session, progress)
    state_svc.save_lesson_index(request.session, mode, index)
    return JsonResponse(
        {"finished": finished, "lesson": tutorials.lesson_card(mode, index), "progress": progress.as_dict()}
    )


@require_POST
def tutorial_prev(request, mode):
    if tutorials.lesson(mode) is None:
        return _error(f"Unknown tutorial: {mode}", status=404)
    index = tutorials.prev_lesson(state_svc.load_lesson_index(request.session, mode))
    state_svc.save_lesson_index(request.session, mode, index)
    return JsonResponse({"lesson": tutorials.lesson_card(mode, index)})


@require_GET
@ensure_csrf_cookie
def practice(request):
    spot = state_svc.load_spot(request.session)
    return JsonResponse({"spot": spot, "progress": state_svc.load_progress(request.session).as_dict()})


@require_POST
def practice_action(request, move):
    if move.lower() not in ("fold", "call", "raise"):
        return _error(f"Unsupported practice action: {move}")
    spot = state_svc.load_spot(request.session)
    result = quiz.evaluate(spot["hand"], spot["position"], move)
    progress = quiz.record(state_svc.load_progress(request.session), result)
    state_svc.save_progress(request.session, progress)
    return JsonResponse({"spot": spot, "feedback": result.as_dict(), "progress": progress.as_dict()})


@require_POST
def practice_next(request):
    return JsonResponse({"spot": state_svc.new_spot(request.session)})


@require_GET
@ensure_csrf_cookie
def play(request):
    state = _current_hand(request)
    return JsonResponse({"state": state_svc.public_view(state)})


@require_POST
def new_hand(request):
    prev = state_svc.load(request.session)
    state = state_svc.new_hand(prev_state=prev)
    state_svc.save(request.session, state)
    progress = state_svc.load_progress(request.session)
    progress.hands_played += 1
    state_svc.save_progress(request.session, progress)
    return JsonResponse({"state": state_svc.public_view(state)})


@require_POST
def player_action(request, move):
    if move.lower() not in engine.MOVES:
        return _error(f"Unsupported action: {move}")
    state = _current_hand(request)
    state, events = engine.apply_player_move(state, move)
    state_svc.save(request.session, state)
    return JsonResponse(
        {"events": events, "analysis": state.get("last_analysis"), "state": state_svc.public_view(state)}
    )


@require_GET
def recommendation(request):
    state = _current_hand(request)
    context = GameContext.from_state(state)
    rec = policy.recommend(context)
    return JsonResponse({"insight": policy.insight(context), "recommendation": rec.as_dict()})


@require_GET
def ai_tip(request):
    """
    Return only the model's hint without blocking the main gameplay flow.
    """
    state = state_svc.load(request.session)
    if not state or state.get("street") == "showdown":
        return JsonResponse({"ai_note": None}, status=400)
    note = llm.coach_insight(state["player"]["hand"], state["community"], state["street"], state["pot"])
    return JsonResponse({"ai_note": note})


@require_POST
def analyze_move(request):
    data = _json_body(request)
    if data is None:
        return _error("Request body must be a JSON object.")
    form = AnalyzeMoveForm(data)
    if not form.is_valid():
        return _error("Invalid request.", errors=form.errors.get_json_data())
    fields = form.cleaned_data
    text = llm.analyze_move(
        fields["playerCards"],
        fields["communityCards"],
        fields["stage"],
        fields["action"],
        fields["pot"],
        fields["position"],
    )
    return JsonResponse({"analysis": text})


@require_POST
def coach_insight(request):
    data = _json_body(request)
    if data is None:
        return _error("Request body must be a JSON object.")
    form = CoachInsightForm(data)
    if not form.is_valid():
        return _error("Invalid request.", errors=form.errors.get_json_data())
    fields = form.cleaned_data
    text = llm.coach_insight(fields["playerCards"], fields["communityCards"], fields["stage"], fields["pot"])
    return JsonResponse({"insight": text})
