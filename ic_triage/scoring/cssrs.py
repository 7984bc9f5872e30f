"""C-SSRS (Columbia Suicide Severity Rating Scale) screener scoring module.

Four yes/no items. The score is the number of YES answers; any YES
makes the instrument HIGH acuity.

The screener is always scored, whether or not the follow-up intent
question was shown, because its items also feed crisis detection.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, count_yes

LIFETIME_IDEATION_LINK_ID = "/93246-7"  # Wished you were dead
RECENT_IDEATION_LINK_ID = "/93247-5"  # Thoughts of killing yourself
PLAN_LINK_ID = "/93267-3"
INTENT_LINK_ID = "/93269-9"


def score_cssrs(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Count YES answers; any YES is HIGH."""
    total = count_yes(items, responses)
    acuity = AcuityCategory.HIGH if total > 0 else AcuityCategory.LOW
    return QuestionnaireScore(score=total, acuity=acuity)
