"""Triage summary for a single assessment.

The summary is the read-only view collaborators consume: scores, crisis
status, overall acuity and the resolved diagnosis with its care level and
workflow flag. It never writes anything back.
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional, Protocol

from ic_triage.catalog.models import InstrumentId
from ic_triage.catalog.registry import QuestionnaireCatalog, get_catalog
from ic_triage.core.logging import audit_logger, get_logger
from ic_triage.models.disposition import AcuityCategory, DispositionFlag, DispositionOutcomeCare
from ic_triage.models.response import PatientContext, ResponseItem, ResponseSnapshot
from ic_triage.rules.crisis import crisis_signals, is_crisis
from ic_triage.rules.diagnosis import preselected_diagnosis, resolve_diagnosis
from ic_triage.rules.models import DiagnosisId
from ic_triage.scoring import common, screens
from ic_triage.scoring.common import QuestionnaireScore
from ic_triage.services.scoring import compute_scores

logger = get_logger(__name__)


class TriageSummary:
    """Scores and disposition for one assessment's responses.

    Scores are computed on first access and memoized; concurrent first
    access computes them once.
    """

    def __init__(
        self,
        responses: ResponseSnapshot,
        patient: Optional[PatientContext] = None,
        catalog: Optional[QuestionnaireCatalog] = None,
    ) -> None:
        self._responses: ResponseSnapshot = MappingProxyType(
            {link_id: tuple(items) for link_id, items in responses.items()}
        )
        self._patient = patient or PatientContext()
        self._catalog = catalog or get_catalog()
        self._scores: Optional[Mapping[InstrumentId, QuestionnaireScore]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_scores(
        cls,
        responses: ResponseSnapshot,
        patient: Optional[PatientContext],
        scores: Mapping[InstrumentId, QuestionnaireScore],
        catalog: Optional[QuestionnaireCatalog] = None,
    ) -> "TriageSummary":
        """Build a summary around previously stored scores.

        The scores are used as given and never recomputed.
        """
        summary = cls(responses, patient, catalog)
        summary._scores = MappingProxyType(dict(scores))
        return summary

    @property
    def responses(self) -> ResponseSnapshot:
        return self._responses

    @property
    def patient(self) -> PatientContext:
        return self._patient

    @property
    def catalog(self) -> QuestionnaireCatalog:
        return self._catalog

    @property
    def scores(self) -> Mapping[InstrumentId, QuestionnaireScore]:
        """Scores keyed by instrument id, in catalog order."""
        if self._scores is None:
            with self._lock:
                if self._scores is None:
                    self._scores = MappingProxyType(compute_scores(self, self._catalog))
        return self._scores

    def get_score(self, instrument_id: InstrumentId) -> Optional[QuestionnaireScore]:
        return self.scores.get(instrument_id)

    def get_acuity(self, instrument_id: InstrumentId) -> Optional[AcuityCategory]:
        score = self.get_score(instrument_id)
        return score.acuity if score is not None else None

    def single_response(self, link_id: str) -> Optional[ResponseItem]:
        """The only response to a question, None when absent or ambiguous."""
        return common.single_response(self._responses, link_id)

    # Concern screens

    def ptsd_concern(self) -> bool:
        return screens.ptsd_concern(self._responses)

    def drug_concern(self) -> bool:
        return screens.drug_concern(self._responses)

    def alcohol_concern(self) -> bool:
        return screens.alcohol_concern(self._responses)

    def pain_concern(self) -> bool:
        return screens.pain_concern(self._responses)

    # Disposition

    @property
    def is_crisis(self) -> bool:
        return is_crisis(self)

    @property
    def crisis_signals(self) -> list[str]:
        return crisis_signals(self)

    @property
    def overall_acuity(self) -> Optional[AcuityCategory]:
        """Most severe acuity across scored clinical instruments.

        None when no clinical instrument produced an acuity.
        """
        acuities = [
            score.acuity
            for instrument_id, score in self.scores.items()
            if score.acuity is not None and self._catalog.get(instrument_id).is_clinical
        ]
        return max(acuities, default=None)

    @property
    def preselected_diagnosis(self) -> Optional[DiagnosisId]:
        return preselected_diagnosis(self)

    @property
    def diagnosis(self) -> DiagnosisId:
        return resolve_diagnosis(self)

    @property
    def care_level(self) -> DispositionOutcomeCare:
        return self.diagnosis.care

    @property
    def flag(self) -> DispositionFlag:
        return self.diagnosis.flag

    def to_dict(self) -> dict[str, Any]:
        """Serialize scores and disposition for collaborators."""
        overall = self.overall_acuity
        diagnosis = self.diagnosis
        return {
            "scores": {
                instrument_id.value: {
                    "score": score.score,
                    "acuity": score.acuity.name if score.acuity is not None else None,
                }
                for instrument_id, score in self.scores.items()
            },
            "is_crisis": self.is_crisis,
            "overall_acuity": overall.name if overall is not None else None,
            "diagnosis": diagnosis.value,
            "care_level": diagnosis.care.name,
            "flag": diagnosis.flag.value,
            "catalog_version": self._catalog.version,
            "catalog_hash": self._catalog.content_hash,
        }


class ResponseRepository(Protocol):
    """Source of questionnaire responses for an assessment."""

    def responses_for(self, assessment_id: str) -> ResponseSnapshot:
        ...


class PatientDemographics(Protocol):
    """Source of the demographics used by population-specific cut points."""

    def patient_for(self, assessment_id: str) -> PatientContext:
        ...


class AssessmentTriageService:
    """Builds triage summaries for stored assessments.

    Reads responses and demographics through the collaborator interfaces
    and records each decision in the audit log.
    """

    def __init__(
        self,
        responses_repo: ResponseRepository,
        demographics: PatientDemographics,
        catalog: Optional[QuestionnaireCatalog] = None,
    ) -> None:
        """Initialize triage service.

        Args:
            responses_repo: Response repository
            demographics: Patient demographics source
            catalog: Instrument catalog (defaults to the configured catalog)
        """
        self.responses_repo = responses_repo
        self.demographics = demographics
        self.catalog = catalog or get_catalog()

    def summarize(self, assessment_id: str) -> TriageSummary:
        """Score and resolve the disposition for an assessment.

        Args:
            assessment_id: Assessment to triage

        Returns:
            TriageSummary
        """
        summary = TriageSummary(
            self.responses_repo.responses_for(assessment_id),
            self.demographics.patient_for(assessment_id),
            self.catalog,
        )

        if summary.is_crisis:
            logger.warning(
                f"Crisis detected for assessment {assessment_id}: "
                f"{', '.join(summary.crisis_signals)}",
                extra={"assessment_id": assessment_id},
            )

        diagnosis = summary.diagnosis
        logger.info(
            f"Assessment {assessment_id} resolved to {diagnosis.value} "
            f"(care={diagnosis.care.name}, flag={diagnosis.flag.value})",
            extra={"assessment_id": assessment_id},
        )
        audit_logger.triage_decision(
            assessment_id=assessment_id,
            diagnosis=diagnosis.value,
            flag=diagnosis.flag.value,
            is_crisis=summary.is_crisis,
            catalog_hash=self.catalog.content_hash,
        )

        return summary
