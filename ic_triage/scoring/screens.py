"""Single-question gating screens.

These screens decide which follow-up instruments a patient is given:
- trauma exposure -> PC-PTSD-5
- any drug use in the past year -> opioid screen and DAST-10
- any alcohol use -> AUDIT-C
- chronic pain -> BPI

Each concern is false unless its question has exactly one coded answer.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.answer_codes import AnswerCode
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import (
    QuestionnaireScore,
    answered_other_than,
    answered_with,
    count_yes,
)

PTSD_SCREEN_LINK_ID = "/pre-ptsd-1"
DRUG_SCREEN_LINK_ID = "/single-q-drug-screen"
ALCOHOL_SCREEN_LINK_ID = "/68518-0"  # AUDIT-C frequency item doubles as the screen
PAIN_SCREEN_LINK_ID = "/ic-simplePain-1"

# Opioid use disorder needs at least this many YES answers on the opioid screen
OPIOID_POSITIVE_SCORE = 1


def ptsd_concern(responses: ResponseSnapshot) -> bool:
    return answered_with(responses, PTSD_SCREEN_LINK_ID, AnswerCode.YES)


def drug_concern(responses: ResponseSnapshot) -> bool:
    return answered_other_than(responses, DRUG_SCREEN_LINK_ID, AnswerCode.PC_0)


def alcohol_concern(responses: ResponseSnapshot) -> bool:
    return answered_other_than(responses, ALCOHOL_SCREEN_LINK_ID, AnswerCode.NEVER)


def pain_concern(responses: ResponseSnapshot) -> bool:
    return answered_with(responses, PAIN_SCREEN_LINK_ID, AnswerCode.YES)


def score_trauma_screen(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Any reported trauma exposure is HIGH."""
    total = count_yes(items, responses)
    acuity = AcuityCategory.HIGH if total > 0 else AcuityCategory.LOW
    return QuestionnaireScore(score=total, acuity=acuity)


def score_opioid_screen(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Count YES answers. No acuity: the screen only qualifies DAST-10."""
    return QuestionnaireScore(score=count_yes(items, responses), acuity=None)
