"""Scoring modules for validated clinical instruments."""

from ic_triage.scoring.asrm import score_asrm
from ic_triage.scoring.auditc import score_auditc
from ic_triage.scoring.bpi import score_bpi
from ic_triage.scoring.common import QuestionnaireScore
from ic_triage.scoring.cssrs import score_cssrs
from ic_triage.scoring.dast10 import score_dast10
from ic_triage.scoring.gad7 import score_gad7
from ic_triage.scoring.isi import score_isi
from ic_triage.scoring.phq9 import score_phq9
from ic_triage.scoring.prime5 import score_prime5
from ic_triage.scoring.ptsd5 import score_ptsd5
from ic_triage.scoring.screens import score_opioid_screen, score_trauma_screen

__all__ = [
    "QuestionnaireScore",
    "score_asrm",
    "score_auditc",
    "score_bpi",
    "score_cssrs",
    "score_dast10",
    "score_gad7",
    "score_isi",
    "score_phq9",
    "score_prime5",
    "score_ptsd5",
    "score_opioid_screen",
    "score_trauma_screen",
]
