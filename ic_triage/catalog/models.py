"""Instrument catalog data models."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from ic_triage.models.response import PatientContext, ResponseSnapshot

if TYPE_CHECKING:
    from ic_triage.scoring.common import QuestionnaireScore
    from ic_triage.services.assessment import TriageSummary


class InstrumentId(str, Enum):
    """Identity of every instrument in the intake battery.

    Declaration order is presentation order.
    """

    INFO = "INFO"
    SYMPTOMS = "SYMPTOMS"
    DIAGNOSES = "DIAGNOSES"
    MILITARY = "MILITARY"
    CSSRS_SHORT = "CSSRS_SHORT"
    CSSRS = "CSSRS"
    PHQ9 = "PHQ9"
    GAD7 = "GAD7"
    ISI = "ISI"
    PREPTSD = "PREPTSD"
    PTSD5 = "PTSD5"
    ASRM = "ASRM"
    PRIME5 = "PRIME5"
    SIMPLEPAIN = "SIMPLEPAIN"
    BPI = "BPI"
    SIMPLEDRUGALCOHOL = "SIMPLEDRUGALCOHOL"
    OPIOIDSCREEN = "OPIOIDSCREEN"
    DAST10 = "DAST10"
    AUDITC = "AUDITC"
    GOALS = "GOALS"


@dataclass(frozen=True)
class InstrumentItem:
    """A question with an ordinal weight per coded answer.

    Unscored items are presented to the patient but never summed.
    """

    link_id: str
    text: str
    weights: Mapping[str, int] = field(default_factory=dict)
    scored: bool = True

    def weight_for(self, code: Optional[str]) -> Optional[int]:
        """Ordinal weight of a coded answer, None when unrecognised."""
        if code is None:
            return None
        return self.weights.get(code)


Scorer = Callable[
    [Sequence[InstrumentItem], ResponseSnapshot, PatientContext],
    "QuestionnaireScore",
]
AdministrationPredicate = Callable[["TriageSummary"], bool]


@dataclass(frozen=True)
class QuestionnaireDefinition:
    """A clinical instrument: content, scoring strategy and administration rule."""

    instrument_id: InstrumentId
    link_id: str
    name: str
    is_clinical: bool
    items: tuple[InstrumentItem, ...]
    administer: AdministrationPredicate
    scorer: Optional[Scorer] = None
    mandatory: bool = False  # Scored whether or not it was administered

    @property
    def is_scorable(self) -> bool:
        return self.scorer is not None

    def include_in_scoring(self, summary: "TriageSummary") -> bool:
        """Whether this instrument belongs in the score map for a summary."""
        if self.mandatory:
            return True
        return self.is_clinical and self.administer(summary)

    def score(
        self,
        responses: ResponseSnapshot,
        patient: PatientContext,
    ) -> Optional["QuestionnaireScore"]:
        """Apply the scoring strategy, None for informational instruments."""
        if self.scorer is None:
            return None
        return self.scorer(self.items, responses, patient)
