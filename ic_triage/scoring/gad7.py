"""GAD-7 (Generalized Anxiety Disorder-7) scoring module.

The GAD-7 is a validated 7-item anxiety screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-21.

Acuity cut points for integrated-care triage:
- 0-13: LOW
- 14-16: MEDIUM
- 17-21: HIGH
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_thresholds, sum_values

LOW_THRESHOLD = 13
HIGH_THRESHOLD = 16

# General-care cut point used by the diagnosis rules
ELEVATED_SCORE = 5

classify_acuity = acuity_from_thresholds(LOW_THRESHOLD, HIGH_THRESHOLD)


def score_gad7(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score GAD-7 responses.

    Args:
        items: GAD-7 catalog items
        responses: Response snapshot keyed by link-id
        patient: Unused

    Returns:
        QuestionnaireScore with total and acuity
    """
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
