"""Triage services."""

from ic_triage.services.assessment import (
    AssessmentTriageService,
    PatientDemographics,
    ResponseRepository,
    TriageSummary,
)
from ic_triage.services.scoring import compute_scores

__all__ = [
    "AssessmentTriageService",
    "PatientDemographics",
    "ResponseRepository",
    "TriageSummary",
    "compute_scores",
]
