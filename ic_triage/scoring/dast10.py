"""DAST-10 (Drug Abuse Screening Test) scoring module.

Ten yes/no items, 1 point each. Item 3 ("Are you always able to stop
using drugs when you want to?") is reverse-keyed: NO scores 1. The
reversal lives in the item's answer scale, so scoring is a plain sum.

Total score ranges 0-10.

Acuity cut points:
- 0-3: LOW
- 4-6: MEDIUM
- 7-10: HIGH
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_thresholds, sum_values

LOW_THRESHOLD = 3
HIGH_THRESHOLD = 6

classify_acuity = acuity_from_thresholds(LOW_THRESHOLD, HIGH_THRESHOLD)


def score_dast10(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score DAST-10 responses.

    Args:
        items: DAST-10 catalog items
        responses: Response snapshot keyed by link-id
        patient: Unused

    Returns:
        QuestionnaireScore with total and acuity
    """
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
