"""PHQ-9 (Patient Health Questionnaire-9) scoring module.

The PHQ-9 is a validated 9-item depression screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-27. The trailing functional difficulty question is
presented but not summed.

Acuity cut points for integrated-care triage:
- 0-17: LOW
- 18-21: MEDIUM
- 22-27: HIGH

Item 9 asks about thoughts of self-harm. Any answer other than
"Not at all" forces HIGH acuity regardless of the total, and is checked
before the cut points are applied.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.answer_codes import AnswerCode
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import (
    QuestionnaireScore,
    acuity_from_thresholds,
    answered_other_than,
    sum_values,
)

ITEM9_LINK_ID = "/44260-8"  # Thoughts of self-harm or being better off dead
DIFFICULTY_LINK_ID = "/69722-7"

LOW_THRESHOLD = 17
HIGH_THRESHOLD = 21

# General-care cut point used by the diagnosis rules
ELEVATED_SCORE = 5

classify_acuity = acuity_from_thresholds(LOW_THRESHOLD, HIGH_THRESHOLD)


def item9_positive(responses: ResponseSnapshot) -> bool:
    """Check whether item 9 was answered with anything but "Not at all".

    An unanswered or ambiguous item 9 is not positive.
    """
    return answered_other_than(responses, ITEM9_LINK_ID, AnswerCode.NOT_AT_ALL)


def score_phq9(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score PHQ-9 responses.

    Args:
        items: PHQ-9 catalog items (the difficulty item is unscored)
        responses: Response snapshot keyed by link-id
        patient: Unused; PHQ-9 cut points are not population-specific

    Returns:
        QuestionnaireScore with total and acuity
    """
    total = sum_values(items, responses)

    if item9_positive(responses):
        return QuestionnaireScore(score=total, acuity=AcuityCategory.HIGH)

    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
