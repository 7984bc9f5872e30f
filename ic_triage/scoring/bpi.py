"""BPI (Brief Pain Inventory) scoring module.

Four pain intensity items rated 0-10. The total is tracked for the care
team but carries no acuity, so pain never changes triage severity.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, sum_values


def score_bpi(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    # TODO: Pain acuity cut points need clinical sign-off before BPI can feed triage
    return QuestionnaireScore(score=sum_values(items, responses), acuity=None)
