"""ASRM (Altman Self-Rating Mania Scale) scoring module.

Five items scored 0-4, total 0-20. Totals above 5 suggest hypomanic or
manic symptoms and are MEDIUM; ASRM never reaches HIGH.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_threshold, sum_values

LOW_THRESHOLD = 5

classify_acuity = acuity_from_threshold(LOW_THRESHOLD)


def score_asrm(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
