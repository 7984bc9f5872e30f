"""Deterministic diagnosis resolution.

Resolution runs in three stages:
1. Crisis gate: a crisis always resolves to crisis care.
2. Explicit selection: a diagnosis the patient or MHIC ticked on the
   diagnoses form.
3. Rule chain: rules in ascending priority, first match wins.

The last rule always matches, so every summary resolves to exactly one
diagnosis. Same input, same output; nothing here reads the clock or
any external state.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from ic_triage.catalog.models import InstrumentId
from ic_triage.core.exceptions import IncompleteRuleChainError
from ic_triage.models.disposition import AcuityCategory
from ic_triage.rules.crisis import is_crisis
from ic_triage.rules.models import DiagnosisId, DiagnosisRule
from ic_triage.scoring import auditc, gad7, phq9
from ic_triage.scoring.common import is_checked
from ic_triage.scoring.screens import OPIOID_POSITIVE_SCORE

if TYPE_CHECKING:
    from ic_triage.services.assessment import TriageSummary

DIAGNOSIS_PREFIX = "/diagnosis"

ED_LINK_ID = "/diagnosis/ED"
ADHD_LINK_ID = "/diagnosis/ADHD"
SUBSTANCE_LINK_ID = "/diagnosis/substance"
SCHIZOPHRENIA_LINK_ID = "/diagnosis/schizophrenia"
BIPOLAR_LINK_ID = "/diagnosis/bipolar"
PTSD_LINK_ID = "/diagnosis/PTSD"
OTHER_LINK_ID = "/diagnosis/other"
GRIEF_LINK_ID = "/symptom/grief"

# Single explicit selection -> diagnosis. Unlisted selections fall through.
SELECTION_MAP: dict[str, DiagnosisId] = {
    ED_LINK_ID: DiagnosisId.EATING_DISORDER,
    ADHD_LINK_ID: DiagnosisId.ADHD,
    SUBSTANCE_LINK_ID: DiagnosisId.SUD,
    SCHIZOPHRENIA_LINK_ID: DiagnosisId.PSYCHOTHERAPY_ANDOR_MM,
    BIPOLAR_LINK_ID: DiagnosisId.PSYCHOTHERAPY_ANDOR_MM,
    PTSD_LINK_ID: DiagnosisId.TRAUMA,
    OTHER_LINK_ID: DiagnosisId.EVALUATION,
}

# Resolution paths reported by explain()
PATH_CRISIS = "crisis"
PATH_SELECTION = "selection"
PATH_RULE = "rule"


def _checked(summary: "TriageSummary", link_id: str) -> bool:
    return is_checked(summary.responses, link_id)


def _acuity_is(
    summary: "TriageSummary",
    instrument_id: InstrumentId,
    acuity: AcuityCategory,
) -> bool:
    return summary.get_acuity(instrument_id) == acuity


def _acuity_above_low(summary: "TriageSummary", instrument_id: InstrumentId) -> bool:
    acuity = summary.get_acuity(instrument_id)
    return acuity is not None and acuity != AcuityCategory.LOW


def _score_at_least(summary: "TriageSummary", instrument_id: InstrumentId, minimum: int) -> bool:
    score = summary.get_score(instrument_id)
    return score is not None and score.score >= minimum


def _trauma(summary: "TriageSummary") -> bool:
    return _checked(summary, PTSD_LINK_ID) or _acuity_is(
        summary, InstrumentId.PTSD5, AcuityCategory.HIGH
    )


def _evaluation(summary: "TriageSummary") -> bool:
    return any(
        _acuity_is(summary, instrument_id, AcuityCategory.MEDIUM)
        for instrument_id in (InstrumentId.ASRM, InstrumentId.PTSD5, InstrumentId.PRIME5)
    )


def _opioid_use_disorder(summary: "TriageSummary") -> bool:
    return _score_at_least(
        summary, InstrumentId.OPIOIDSCREEN, OPIOID_POSITIVE_SCORE
    ) and _acuity_is(summary, InstrumentId.DAST10, AcuityCategory.HIGH)


def _substance_use_disorder(summary: "TriageSummary") -> bool:
    return _checked(summary, SUBSTANCE_LINK_ID) or _acuity_is(
        summary, InstrumentId.DAST10, AcuityCategory.HIGH
    )


def _alcohol_use_disorder(summary: "TriageSummary") -> bool:
    return _score_at_least(summary, InstrumentId.AUDITC, auditc.DISORDER_SCORE)


def _psychotherapy(summary: "TriageSummary") -> bool:
    return (
        _checked(summary, SCHIZOPHRENIA_LINK_ID)
        or _checked(summary, BIPOLAR_LINK_ID)
        or _acuity_above_low(summary, InstrumentId.PHQ9)
        or _acuity_above_low(summary, InstrumentId.GAD7)
    )


def _general(summary: "TriageSummary") -> bool:
    return _score_at_least(summary, InstrumentId.PHQ9, phq9.ELEVATED_SCORE) or _score_at_least(
        summary, InstrumentId.GAD7, gad7.ELEVATED_SCORE
    )


def _insomnia(summary: "TriageSummary") -> bool:
    return _general(summary) and _acuity_is(summary, InstrumentId.ISI, AcuityCategory.MEDIUM)


def _grief(summary: "TriageSummary") -> bool:
    return _general(summary) and _checked(summary, GRIEF_LINK_ID)


def _lcsw_capacity(summary: "TriageSummary") -> bool:
    # TODO: enable once LCSW caseload capacity is exposed by scheduling
    return False


def _always(summary: "TriageSummary") -> bool:
    return True


CRISIS_RULE = DiagnosisRule(10, DiagnosisId.CRISIS_CARE, is_crisis, "Any crisis signal")

RULES: tuple[DiagnosisRule, ...] = (
    CRISIS_RULE,
    DiagnosisRule(20, DiagnosisId.LCSW_CAPACITY, _lcsw_capacity, "LCSW capacity placeholder"),
    DiagnosisRule(
        30, DiagnosisId.EATING_DISORDER,
        lambda summary: _checked(summary, ED_LINK_ID),
        "Eating disorder selected",
    ),
    DiagnosisRule(40, DiagnosisId.TRAUMA, _trauma, "PTSD selected or PC-PTSD-5 HIGH"),
    DiagnosisRule(
        50, DiagnosisId.ADHD,
        lambda summary: _checked(summary, ADHD_LINK_ID),
        "ADHD selected",
    ),
    DiagnosisRule(60, DiagnosisId.EVALUATION, _evaluation, "ASRM, PC-PTSD-5 or PRIME-5 MEDIUM"),
    DiagnosisRule(
        70, DiagnosisId.OPIOID_USE_DISORDER, _opioid_use_disorder,
        "Opioid screen positive and DAST-10 HIGH",
    ),
    DiagnosisRule(80, DiagnosisId.SUD, _substance_use_disorder, "Substance use selected or DAST-10 HIGH"),
    DiagnosisRule(90, DiagnosisId.ALCOHOL_USE_DISORDER, _alcohol_use_disorder, "AUDIT-C >= 6"),
    DiagnosisRule(
        100, DiagnosisId.PSYCHOTHERAPY_ANDOR_MM, _psychotherapy,
        "Schizophrenia or bipolar selected, or PHQ-9/GAD-7 above LOW",
    ),
    DiagnosisRule(110, DiagnosisId.INSOMNIA, _insomnia, "General criteria and ISI MEDIUM"),
    DiagnosisRule(120, DiagnosisId.GRIEF, _grief, "General criteria and grief reported"),
    DiagnosisRule(130, DiagnosisId.GENERAL, _general, "PHQ-9 >= 5 or GAD-7 >= 5"),
    DiagnosisRule(140, DiagnosisId.SELF_DIRECTED, _always, "Catch-all"),
)


def get_sorted_rules(rules: Optional[Iterable[DiagnosisRule]] = None) -> list[DiagnosisRule]:
    """Get rules sorted by priority (ascending)."""
    return sorted(RULES if rules is None else rules, key=lambda r: r.priority)


def selected_diagnoses(summary: "TriageSummary") -> list[str]:
    """Link-ids of every diagnosis explicitly selected on the diagnoses form."""
    selected = []
    for link_id in summary.responses:
        if not link_id.startswith(DIAGNOSIS_PREFIX):
            continue
        item = summary.single_response(link_id)
        if item is not None and item.is_selected():
            selected.append(link_id)
    return selected


def preselected_diagnosis(summary: "TriageSummary") -> Optional[DiagnosisId]:
    """Diagnosis implied by explicit selection, if any.

    Several selections are treated as a complex presentation and go to
    psychotherapy and/or medication management.
    """
    selected = selected_diagnoses(summary)

    if not selected:
        return None
    if len(selected) > 1:
        return DiagnosisId.PSYCHOTHERAPY_ANDOR_MM

    return SELECTION_MAP.get(selected[0])


def _resolve(summary: "TriageSummary") -> tuple[DiagnosisId, str]:
    if CRISIS_RULE.evaluate(summary):
        return CRISIS_RULE.diagnosis, PATH_CRISIS

    selected = preselected_diagnosis(summary)
    if selected is not None:
        return selected, PATH_SELECTION

    for rule in get_sorted_rules():
        if rule.evaluate(summary):
            return rule.diagnosis, PATH_RULE

    raise IncompleteRuleChainError("No diagnosis rule matched; the rule chain must end in a catch-all")


def resolve_diagnosis(summary: "TriageSummary") -> DiagnosisId:
    """Resolve the single diagnosis for a summary.

    Raises:
        IncompleteRuleChainError: If no rule matched
    """
    diagnosis, _ = _resolve(summary)
    return diagnosis


def explain(summary: "TriageSummary") -> str:
    """Which stage resolved the diagnosis: crisis, selection or rule."""
    _, path = _resolve(summary)
    return path
