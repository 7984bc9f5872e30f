"""Diagnosis and rule data models."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ic_triage.models.disposition import DispositionFlag, DispositionOutcomeCare

if TYPE_CHECKING:
    from ic_triage.services.assessment import TriageSummary


class DiagnosisId(str, Enum):
    """Care pathway a triaged patient is routed to.

    Each member carries the numeric code stored by the case-management
    system, a display name, the level of care and the workflow flag the
    care team should act on next.
    """

    CRISIS_CARE = "CRISIS_CARE"
    LCSW_CAPACITY = "LCSW_CAPACITY"
    EATING_DISORDER = "EATING_DISORDER"
    TRAUMA = "TRAUMA"
    ADHD = "ADHD"
    EVALUATION = "EVALUATION"
    OPIOID_USE_DISORDER = "OPIOID_USE_DISORDER"
    SUD = "SUD"
    ALCOHOL_USE_DISORDER = "ALCOHOL_USE_DISORDER"
    PSYCHOTHERAPY_ANDOR_MM = "PSYCHOTHERAPY_ANDOR_MM"
    INSOMNIA = "INSOMNIA"
    GRIEF = "GRIEF"
    GENERAL = "GENERAL"
    SELF_DIRECTED = "SELF_DIRECTED"

    @property
    def code(self) -> int:
        return _DISPOSITIONS[self].code

    @property
    def display_name(self) -> str:
        return _DISPOSITIONS[self].display_name

    @property
    def care(self) -> DispositionOutcomeCare:
        return _DISPOSITIONS[self].care

    @property
    def flag(self) -> DispositionFlag:
        return _DISPOSITIONS[self].flag

    @classmethod
    def from_code(cls, code: int) -> "DiagnosisId":
        """Look up a diagnosis by its stored numeric code.

        Raises:
            ValueError: If no diagnosis uses the code
        """
        for diagnosis, disposition in _DISPOSITIONS.items():
            if disposition.code == code:
                return diagnosis
        raise ValueError(f"Unknown diagnosis code: {code}")


@dataclass(frozen=True)
class Disposition:
    """Stored code, display name, care level and flag for a diagnosis."""

    code: int
    display_name: str
    care: DispositionOutcomeCare
    flag: DispositionFlag


_DISPOSITIONS: dict[DiagnosisId, Disposition] = {
    DiagnosisId.CRISIS_CARE: Disposition(
        100, "Crisis Care", DispositionOutcomeCare.IC,
        DispositionFlag.NEEDS_INITIAL_SAFETY_PLANNING,
    ),
    DiagnosisId.LCSW_CAPACITY: Disposition(
        0, "LCSW Capacity", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.EATING_DISORDER: Disposition(
        6, "Eating Disorder", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.TRAUMA: Disposition(
        4, "Trauma", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.ADHD: Disposition(
        3, "ADHD", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.EVALUATION: Disposition(
        1, "Evaluation", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.NEEDS_FURTHER_ASSESSMENT_WITH_MHIC,
    ),
    DiagnosisId.OPIOID_USE_DISORDER: Disposition(
        11, "Opioid Use Disorder", DispositionOutcomeCare.IC,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.SUD: Disposition(
        5, "SUD", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.ALCOHOL_USE_DISORDER: Disposition(
        7, "Alcohol Use Disorder", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.PSYCHOTHERAPY_ANDOR_MM: Disposition(
        2, "Psychotherapy and/or MM", DispositionOutcomeCare.SPECIALTY,
        DispositionFlag.COORDINATE_REFERRAL,
    ),
    DiagnosisId.INSOMNIA: Disposition(
        9, "Insomnia", DispositionOutcomeCare.IC,
        DispositionFlag.AWAITING_IC_SCHEDULING,
    ),
    DiagnosisId.GRIEF: Disposition(
        10, "Grief", DispositionOutcomeCare.IC,
        DispositionFlag.AWAITING_IC_SCHEDULING,
    ),
    DiagnosisId.GENERAL: Disposition(
        8, "General", DispositionOutcomeCare.IC,
        DispositionFlag.AWAITING_IC_SCHEDULING,
    ),
    DiagnosisId.SELF_DIRECTED: Disposition(
        -1, "Sub-clinical symptoms", DispositionOutcomeCare.SUB_CLINICAL,
        DispositionFlag.OPTIONAL_REFERRAL,
    ),
}


RulePredicate = Callable[["TriageSummary"], bool]


@dataclass(frozen=True)
class DiagnosisRule:
    """A diagnosis rule: fires its diagnosis when the predicate holds."""

    priority: int  # Lower = evaluated first
    diagnosis: DiagnosisId
    predicate: RulePredicate
    description: str = ""

    def evaluate(self, summary: "TriageSummary") -> bool:
        return self.predicate(summary)
