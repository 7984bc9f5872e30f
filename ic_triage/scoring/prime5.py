"""PRIME-5 psychosis-risk screen scoring module.

Five items rated 0 (definitely disagree) to 6 (definitely agree).

A patient is MEDIUM acuity when either:
- the total is 13 or more, or
- any single item is answered "definitely agree" (6)

Otherwise LOW. PRIME-5 never reaches HIGH.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, max_value, sum_values

TOTAL_THRESHOLD = 13
ITEM_THRESHOLD = 6


def score_prime5(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score PRIME-5 responses from the total and the highest item."""
    total = sum_values(items, responses)
    highest = max_value(items, responses)

    if total >= TOTAL_THRESHOLD or highest >= ITEM_THRESHOLD:
        return QuestionnaireScore(score=total, acuity=AcuityCategory.MEDIUM)

    return QuestionnaireScore(score=total, acuity=AcuityCategory.LOW)
