"""Instrument catalog endpoints."""

from fastapi import APIRouter

from ic_triage.api.deps import Catalog
from ic_triage.schemas.catalog import (
    CatalogRead,
    InstrumentRead,
    PresentationItemRead,
    PresentationRead,
)
from ic_triage.schemas.triage import TriageRequest
from ic_triage.services.assessment import TriageSummary

router = APIRouter()


@router.get(
    "",
    response_model=CatalogRead,
    summary="Get catalog",
    description="Returns the loaded instrument catalog with its version and content hash",
)
async def get_catalog(catalog: Catalog) -> CatalogRead:
    """Describe the loaded instrument catalog."""
    return CatalogRead(
        id=catalog.id,
        version=catalog.version,
        hash=catalog.content_hash,
        instruments=[
            InstrumentRead(
                id=definition.instrument_id.value,
                link_id=definition.link_id,
                name=definition.name,
                is_clinical=definition.is_clinical,
                is_scorable=definition.is_scorable,
                items=[item.link_id for item in definition.items],
            )
            for definition in catalog
        ],
    )


@router.post(
    "/presentation",
    response_model=PresentationRead,
    summary="Get presentation items",
    description="Returns the items to present given the responses so far",
)
async def get_presentation(request: TriageRequest, catalog: Catalog) -> PresentationRead:
    """List items to present, each shared item once."""
    summary = TriageSummary(request.to_snapshot(), request.patient.to_context(), catalog)
    return PresentationRead(
        items=[
            PresentationItemRead(link_id=item.link_id, text=item.text)
            for item in catalog.presentation_items(summary)
        ]
    )
