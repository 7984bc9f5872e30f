"""Pydantic schemas for request/response validation."""

from ic_triage.schemas.catalog import (
    CatalogRead,
    InstrumentRead,
    PresentationItemRead,
    PresentationRead,
)
from ic_triage.schemas.triage import (
    CodingIn,
    PatientIn,
    ResponseItemIn,
    ScoreRead,
    TriageRequest,
    TriageResult,
)

__all__ = [
    "CatalogRead",
    "InstrumentRead",
    "PresentationItemRead",
    "PresentationRead",
    "CodingIn",
    "PatientIn",
    "ResponseItemIn",
    "ScoreRead",
    "TriageRequest",
    "TriageResult",
]
