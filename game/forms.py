from django import forms
from django.core.exceptions import ValidationError

from .services.cards import RANKS, SUITS
from .services.context import STAGES


class CardListField(forms.Field):
    """A JSON list of two-character card tokens such as ["AS", "KD"]."""

    def __init__(self, *, max_cards, **kwargs):
        self.max_cards = max_cards
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return []
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, (list, tuple)):
            raise ValidationError("Expected a list of cards.")
        return [str(card).strip().upper() for card in value]

    def validate(self, value):
        super().validate(value)
        if len(value) > self.max_cards:
            raise ValidationError(f"At most {self.max_cards} cards allowed.")
        for card in value:
            if len(card) != 2 or card[0] not in RANKS or card[1] not in SUITS:
                raise ValidationError(f"Invalid card: {card}")
        if len(set(value)) != len(value):
            raise ValidationError("Duplicate cards.")


class CoachInsightForm(forms.Form):
    playerCards = CardListField(max_cards=2, required=True)
    communityCards = CardListField(max_cards=5)
    stage = forms.ChoiceField(choices=[(stage, stage) for stage in STAGES])
    pot = forms.IntegerField(min_value=0)


class AnalyzeMoveForm(CoachInsightForm):
    action = forms.CharField(max_length=16)
    position = forms.CharField(max_length=32, required=False)
