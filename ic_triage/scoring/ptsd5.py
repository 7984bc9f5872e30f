"""PC-PTSD-5 (Primary Care PTSD Screen for DSM-5) scoring module.

Five yes/no items, each YES worth 1 point. Only administered when the
trauma exposure screen was answered YES.

Acuity cut points:
- 0-2: LOW
- 3-4: MEDIUM
- 5: HIGH
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_thresholds, sum_values

LOW_THRESHOLD = 2
HIGH_THRESHOLD = 4

classify_acuity = acuity_from_thresholds(LOW_THRESHOLD, HIGH_THRESHOLD)


def score_ptsd5(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score PC-PTSD-5 responses.

    Args:
        items: PC-PTSD-5 catalog items
        responses: Response snapshot keyed by link-id
        patient: Unused

    Returns:
        QuestionnaireScore with total and acuity
    """
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
