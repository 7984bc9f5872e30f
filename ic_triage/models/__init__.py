"""Domain models for IC triage."""

from ic_triage.models.answer_codes import AnswerCode
from ic_triage.models.disposition import (
    AcuityCategory,
    AssessmentStatus,
    DispositionFlag,
    DispositionOutcomeCare,
)
from ic_triage.models.response import (
    Coding,
    PatientContext,
    ResponseItem,
    ResponseSnapshot,
    group_by_link_id,
)

__all__ = [
    # Answer codes
    "AnswerCode",
    # Disposition
    "AcuityCategory",
    "AssessmentStatus",
    "DispositionFlag",
    "DispositionOutcomeCare",
    # Responses
    "Coding",
    "PatientContext",
    "ResponseItem",
    "ResponseSnapshot",
    "group_by_link_id",
]
