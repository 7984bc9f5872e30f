"""Deterministic crisis detection and diagnosis resolution.

All triage decisions are deterministic and explainable; no AI/ML is used.
"""

from ic_triage.rules.crisis import crisis_signals, is_crisis
from ic_triage.rules.diagnosis import RULES, explain, preselected_diagnosis, resolve_diagnosis
from ic_triage.rules.models import DiagnosisId, DiagnosisRule

__all__ = [
    "DiagnosisId",
    "DiagnosisRule",
    "RULES",
    "crisis_signals",
    "explain",
    "is_crisis",
    "preselected_diagnosis",
    "resolve_diagnosis",
]
