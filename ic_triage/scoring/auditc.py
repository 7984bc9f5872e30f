"""AUDIT-C (Alcohol Use Disorders Identification Test - Consumption) scoring module.

The AUDIT-C is a brief 3-item alcohol screening using the first three
items of the full AUDIT questionnaire.

Scoring:
- Q1 (frequency): 0-4 points
- Q2 (typical quantity): 0-4 points
- Q3 (binge frequency): 0-4 points

Total score ranges 0-12.

Cut points are population-specific:
- Male patients: <= 3 LOW, 4-5 MEDIUM, >= 6 HIGH
- All other patients: <= 2 LOW, 3-4 MEDIUM, >= 5 HIGH

Patients without a recorded gender get the lower (more conservative)
cut points.
"""

from collections.abc import Sequence

from ic_triage.catalog.models import InstrumentItem
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext, ResponseSnapshot
from ic_triage.scoring.common import QuestionnaireScore, acuity_from_thresholds, sum_values

FREQUENCY_LINK_ID = "/68518-0"

MALE_THRESHOLDS = (3, 5)
DEFAULT_THRESHOLDS = (2, 4)

# Alcohol use disorder cut point used by the diagnosis rules
DISORDER_SCORE = 6

classify_male = acuity_from_thresholds(*MALE_THRESHOLDS)
classify_default = acuity_from_thresholds(*DEFAULT_THRESHOLDS)


def get_acuity(total: int, patient: PatientContext) -> AcuityCategory:
    """Determine acuity from total score using the patient's cut points."""
    if patient.is_male:
        return classify_male(total)
    return classify_default(total)


def score_auditc(
    items: Sequence[InstrumentItem],
    responses: ResponseSnapshot,
    patient: PatientContext,
) -> QuestionnaireScore:
    """Score AUDIT-C responses.

    Args:
        items: AUDIT-C catalog items
        responses: Response snapshot keyed by link-id
        patient: Patient context for sex-specific cut points

    Returns:
        QuestionnaireScore with total and acuity

    Item scoring reference:
        Q1 - How often do you have a drink containing alcohol?
            0 = Never
            1 = Monthly or less
            2 = 2-4 times a month
            3 = 2-3 times a week
            4 = 4+ times a week

        Q2 - How many standard drinks on a typical day when drinking?
            0 = 1-2
            1 = 3-4
            2 = 5-6
            3 = 7-9
            4 = 10+

        Q3 - How often do you have 6+ drinks on one occasion?
            0 = Never
            1 = Less than monthly
            2 = Monthly
            3 = Weekly
            4 = Daily or almost daily
    """
    total = sum_values(items, responses)
    return QuestionnaireScore(score=total, acuity=get_acuity(total, patient))
