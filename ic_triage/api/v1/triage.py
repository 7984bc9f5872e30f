"""Triage evaluation endpoints."""

import logging

from fastapi import APIRouter, status

from ic_triage.api.deps import Catalog
from ic_triage.core.logging import audit_logger
from ic_triage.rules.diagnosis import explain
from ic_triage.schemas.triage import ScoreRead, TriageRequest, TriageResult
from ic_triage.services.assessment import TriageSummary

logger = logging.getLogger(__name__)

router = APIRouter()


def build_result(summary: TriageSummary) -> TriageResult:
    """Convert a summary into the API response schema."""
    data = summary.to_dict()
    diagnosis = summary.diagnosis
    return TriageResult(
        scores={
            instrument_id: ScoreRead(**score)
            for instrument_id, score in data["scores"].items()
        },
        is_crisis=data["is_crisis"],
        crisis_signals=summary.crisis_signals,
        overall_acuity=data["overall_acuity"],
        diagnosis=data["diagnosis"],
        diagnosis_code=diagnosis.code,
        diagnosis_display_name=diagnosis.display_name,
        resolved_by=explain(summary),
        care_level=data["care_level"],
        flag=data["flag"],
        catalog_version=data["catalog_version"],
        catalog_hash=data["catalog_hash"],
    )


@router.post(
    "/evaluate",
    response_model=TriageResult,
    status_code=status.HTTP_200_OK,
    summary="Evaluate triage",
    description="Score a response snapshot and resolve its diagnosis and care level",
)
async def evaluate(request: TriageRequest, catalog: Catalog) -> TriageResult:
    """Evaluate a response snapshot.

    Nothing is stored; the same request always produces the same result.

    Args:
        request: Patient demographics and responses
        catalog: Instrument catalog

    Returns:
        Scores, crisis status and resolved disposition
    """
    summary = TriageSummary(request.to_snapshot(), request.patient.to_context(), catalog)
    result = build_result(summary)

    if result.is_crisis:
        logger.warning(f"Crisis detected in evaluation: {', '.join(result.crisis_signals)}")

    audit_logger.triage_decision(
        assessment_id="adhoc",
        diagnosis=result.diagnosis,
        flag=result.flag,
        is_crisis=result.is_crisis,
        catalog_hash=result.catalog_hash,
    )

    return result
