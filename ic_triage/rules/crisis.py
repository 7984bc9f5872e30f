"""Crisis (safety) detection.

A patient is in crisis when any of these holds:
- lifetime suicidal ideation reported on the C-SSRS screener
- recent suicidal ideation reported on the C-SSRS screener
- a suicide plan together with intent to act on it
- PHQ-9 item 9 answered with anything but "Not at all"

Each signal reads raw responses; a missing or ambiguous answer makes that
signal false. Detection never raises.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from ic_triage.models.answer_codes import AnswerCode
from ic_triage.models.response import ResponseSnapshot
from ic_triage.scoring.common import answered_with
from ic_triage.scoring.cssrs import (
    INTENT_LINK_ID,
    LIFETIME_IDEATION_LINK_ID,
    PLAN_LINK_ID,
    RECENT_IDEATION_LINK_ID,
)
from ic_triage.scoring.phq9 import item9_positive

if TYPE_CHECKING:
    from ic_triage.services.assessment import TriageSummary


def _lifetime_ideation(responses: ResponseSnapshot) -> bool:
    return answered_with(responses, LIFETIME_IDEATION_LINK_ID, AnswerCode.YES)


def _recent_ideation(responses: ResponseSnapshot) -> bool:
    return answered_with(responses, RECENT_IDEATION_LINK_ID, AnswerCode.YES)


def _plan_with_intent(responses: ResponseSnapshot) -> bool:
    return answered_with(responses, PLAN_LINK_ID, AnswerCode.YES) and answered_with(
        responses, INTENT_LINK_ID, AnswerCode.YES
    )


CRISIS_SIGNALS: dict[str, Callable[[ResponseSnapshot], bool]] = {
    "cssrs_lifetime_ideation": _lifetime_ideation,
    "cssrs_recent_ideation": _recent_ideation,
    "cssrs_plan_with_intent": _plan_with_intent,
    "phq9_item9_positive": item9_positive,
}


def crisis_signals(summary: "TriageSummary") -> list[str]:
    """Names of the crisis signals present in a summary's responses."""
    return [name for name, signal in CRISIS_SIGNALS.items() if signal(summary.responses)]


def is_crisis(summary: "TriageSummary") -> bool:
    """Check whether any crisis signal is present."""
    return any(signal(summary.responses) for signal in CRISIS_SIGNALS.values())
