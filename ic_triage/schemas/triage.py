"""Pydantic schemas for triage evaluation."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ic_triage.models.response import (
    Coding,
    PatientContext,
    ResponseItem,
    ResponseSnapshot,
    group_by_link_id,
)


class CodingIn(BaseModel):
    """A coded answer."""

    code: str = Field(..., min_length=1)
    system: Optional[str] = None
    display: Optional[str] = None


class ResponseItemIn(BaseModel):
    """One answer to one question.

    Exactly one of coding, boolean, string or numeric must be set.
    """

    link_id: str = Field(..., min_length=1, description="Question link-id")
    coding: Optional[CodingIn] = None
    boolean: Optional[bool] = None
    string: Optional[str] = None
    numeric: Optional[int | float] = None

    @model_validator(mode="after")
    def validate_single_value(self) -> "ResponseItemIn":
        """Validate that exactly one value is present."""
        values = [self.coding, self.boolean, self.string, self.numeric]
        present = sum(1 for value in values if value is not None)
        if present != 1:
            raise ValueError(
                "exactly one of coding, boolean, string or numeric is required"
            )
        return self

    def to_response_item(self) -> ResponseItem:
        coding = None
        if self.coding is not None:
            coding = Coding(
                code=self.coding.code,
                system=self.coding.system,
                display=self.coding.display,
            )
        return ResponseItem(
            link_id=self.link_id,
            coding=coding,
            boolean=self.boolean,
            string=self.string,
            numeric=self.numeric,
        )


class PatientIn(BaseModel):
    """Demographics used by population-specific cut points."""

    preferred_gender: Optional[str] = None

    def to_context(self) -> PatientContext:
        return PatientContext(preferred_gender=self.preferred_gender)


class TriageRequest(BaseModel):
    """Schema for evaluating a response snapshot."""

    patient: PatientIn = Field(default_factory=PatientIn)
    responses: list[ResponseItemIn] = Field(default_factory=list)

    def to_snapshot(self) -> ResponseSnapshot:
        return group_by_link_id(item.to_response_item() for item in self.responses)


class ScoreRead(BaseModel):
    """Score for one instrument."""

    score: int
    acuity: Optional[str] = None


class TriageResult(BaseModel):
    """Schema for a triage evaluation result."""

    scores: dict[str, ScoreRead]
    is_crisis: bool
    crisis_signals: list[str] = Field(default_factory=list)
    overall_acuity: Optional[str] = None
    diagnosis: str
    diagnosis_code: int
    diagnosis_display_name: str
    resolved_by: str = Field(..., description="crisis, selection or rule")
    care_level: str
    flag: str
    catalog_version: str
    catalog_hash: str
