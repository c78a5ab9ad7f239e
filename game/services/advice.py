from . import policy
from .context import MoveJudgment


def judge(context, action_taken):
    """
    Grade the action the player actually took against the coach's pick.
    Calling where a raise was suggested is forgiven; raising where a call
    was suggested is not.
    """
    rec = policy.recommend(context)
    action = (action_taken or "").strip().lower()
    hand = "-".join(context.hole_cards)
    seat = context.position

    if action == rec.action:
        style = "cautiously" if action == "fold" else "aggressively"
        return MoveJudgment(
            was_good_move=True,
            explanation=f"Great decision! {rec.reasoning} You made the right play here.",
            learning_point=f"Remember: {rec.hand_strength} hands from {seat} position should be played {style}.",
        )

    if action == "fold" and rec.should_play:
        return MoveJudgment(
            was_good_move=False,
            explanation=f"You folded, but this was actually a playable hand. {rec.reasoning}",
            learning_point=f"Don't be too tight! {hand} from {seat} is worth playing.",
            better_move=rec.action,
        )

    if action != "fold" and not rec.should_play:
        return MoveJudgment(
            was_good_move=False,
            explanation=(
                f"You chose to {action_taken}, but with a {rec.hand_strength} hand, "
                f"it might have been better to {rec.action}. {rec.reasoning}"
            ),
            learning_point="Playing too many weak hands costs chips. Focus on strong starting hands and good position.",
            better_move=rec.action,
        )

    if action == "call" and rec.action == "raise":
        return MoveJudgment(
            was_good_move=True,
            explanation=f"You called, which is okay, but raising would be stronger here. {rec.reasoning}",
            learning_point="With strong hands, raise to build the pot and take control of the hand.",
        )

    if action == "raise" and rec.action == "call":
        return MoveJudgment(
            was_good_move=False,
            explanation=f"You raised, which is aggressive! {rec.reasoning} A call might have been safer.",
            learning_point="Balance aggression with hand strength. Raising with medium hands can be risky.",
            better_move="call",
        )

    return MoveJudgment(
        was_good_move=False,
        explanation=f"You chose to {action_taken}. {rec.reasoning}",
        learning_point="Think about hand strength, position, and pot size before each decision.",
        better_move=rec.action,
    )


def format_judgment(judgment):
    verdict = "Good move!" if judgment.was_good_move else "Could be better"
    parts = [verdict, judgment.explanation]
    if judgment.better_move:
        parts.append(f"Better play: {judgment.better_move.upper()}")
    parts.append(f"Key takeaway: {judgment.learning_point}")
    return "\n\n".join(parts)
