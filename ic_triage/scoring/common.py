"""Shared scoring strategies for catalog instruments.

Strategies:
- sum of ordinals: sum the weight of the selected answer across items
- max of ordinals: the single highest item weight
- count of yes: number of items answered with the canonical YES code
- threshold classifiers: map a total onto LOW/MEDIUM/HIGH

Every lookup goes through ``single_response``: a question with zero or
several answers counts as unanswered and contributes nothing.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.answer_codes import AnswerCode
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import ResponseItem, ResponseSnapshot


@dataclass(frozen=True)
class QuestionnaireScore:
    """Score for one instrument.

    Acuity is None for instruments that are tracked but not triage-relevant.
    """

    score: int
    acuity: Optional[AcuityCategory] = None


AcuityClassifier = Callable[[int], AcuityCategory]


def single_response(responses: ResponseSnapshot, link_id: str) -> Optional[ResponseItem]:
    """Return the only response for a question, or None if not exactly one."""
    items = responses.get(link_id, ())
    if len(items) != 1:
        return None
    return items[0]


def single_code(responses: ResponseSnapshot, link_id: str) -> Optional[str]:
    """Coded answer for a question, or None if unanswered/ambiguous/uncoded."""
    item = single_response(responses, link_id)
    if item is None:
        return None
    return item.code


def answered_with(responses: ResponseSnapshot, link_id: str, code: AnswerCode) -> bool:
    """True if the question has exactly one answer and it is ``code``."""
    return single_code(responses, link_id) == code.value


def answered_other_than(responses: ResponseSnapshot, link_id: str, code: AnswerCode) -> bool:
    """True if the question has exactly one coded answer and it is not ``code``."""
    answer = single_code(responses, link_id)
    return answer is not None and answer != code.value


def is_checked(responses: ResponseSnapshot, link_id: str) -> bool:
    """True if a checkbox-style question was answered with boolean true."""
    item = single_response(responses, link_id)
    if item is None:
        return False
    return item.boolean is True


def item_value(item: InstrumentItem, responses: ResponseSnapshot) -> Optional[int]:
    """Ordinal weight of the selected answer for an item, None if absent."""
    return item.weight_for(single_code(responses, item.link_id))


def sum_values(items: Sequence[InstrumentItem], responses: ResponseSnapshot) -> int:
    """Sum of ordinal weights across the scored items.

    Unanswered items and unrecognised answer codes contribute 0.
    """
    total = 0
    for item in items:
        if not item.scored:
            continue
        value = item_value(item, responses)
        if value is not None:
            total += value
    return total


def max_value(items: Sequence[InstrumentItem], responses: ResponseSnapshot) -> int:
    """Highest ordinal weight selected on any scored item (0 if none)."""
    values = [
        value
        for value in (item_value(item, responses) for item in items if item.scored)
        if value is not None
    ]
    return max(values, default=0)


def count_yes(items: Sequence[InstrumentItem], responses: ResponseSnapshot) -> int:
    """Number of items answered with the canonical YES code."""
    return sum(1 for item in items if answered_with(responses, item.link_id, AnswerCode.YES))


def acuity_from_thresholds(low: int, high: int) -> AcuityClassifier:
    """Build a classifier with two cut points.

    score <= low is LOW, score <= high is MEDIUM, anything above is HIGH.
    """
    if low > high:
        raise ValueError(f"Low cut point {low} exceeds high cut point {high}")

    def classify(score: int) -> AcuityCategory:
        if score <= low:
            return AcuityCategory.LOW
        if score <= high:
            return AcuityCategory.MEDIUM
        return AcuityCategory.HIGH

    return classify


def acuity_from_threshold(low: int) -> AcuityClassifier:
    """Build a single cut point classifier that never reaches HIGH."""

    def classify(score: int) -> AcuityCategory:
        return AcuityCategory.LOW if score <= low else AcuityCategory.MEDIUM

    return classify
