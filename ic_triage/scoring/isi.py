"""ISI (Insomnia Severity Index) scoring module.

Seven items scored 0-4, total 0-28. Insomnia never escalates triage to
HIGH on its own: totals above 13 are MEDIUM, everything else LOW.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_threshold, sum_values

LOW_THRESHOLD = 13

classify_acuity = acuity_from_threshold(LOW_THRESHOLD)


def score_isi(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=classify_acuity(total))
