"""Pydantic schemas for the instrument catalog."""

from pydantic import BaseModel


class InstrumentRead(BaseModel):
    """Schema for reading an instrument definition."""

    id: str
    link_id: str
    name: str
    is_clinical: bool
    is_scorable: bool
    items: list[str]


class CatalogRead(BaseModel):
    """Schema for reading the loaded catalog."""

    id: str
    version: str
    hash: str
    instruments: list[InstrumentRead]


class PresentationItemRead(BaseModel):
    """An item to present to the patient."""

    link_id: str
    text: str


class PresentationRead(BaseModel):
    """Items to present for the instruments administered so far."""

    items: list[PresentationItemRead]
