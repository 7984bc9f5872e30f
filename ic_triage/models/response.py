"""Questionnaire response items and patient context.

Response items arrive from the response repository grouped by link-id.
A link-id may carry zero, one or many items; the scoring code only trusts
a link-id that carries exactly one.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Coding:
    """A coded answer (usually a LOINC answer code)."""

    code: str
    system: Optional[str] = None
    display: Optional[str] = None


@dataclass(frozen=True)
class ResponseItem:
    """A single answer to a single question.

    Exactly one of the value fields is expected to be set.
    """

    link_id: str
    coding: Optional[Coding] = None
    boolean: Optional[bool] = None
    string: Optional[str] = None
    numeric: Optional[Union[int, float]] = None

    @classmethod
    def coded(cls, link_id: str, code: str, display: Optional[str] = None) -> "ResponseItem":
        """Build a coded-answer response item."""
        return cls(link_id=link_id, coding=Coding(code=code, display=display))

    @property
    def code(self) -> Optional[str]:
        """Coded answer value, if this item carries one."""
        return self.coding.code if self.coding is not None else None

    @property
    def has_value(self) -> bool:
        return any(
            v is not None for v in (self.coding, self.boolean, self.string, self.numeric)
        )

    def is_selected(self) -> bool:
        """True for a checked box or a non-empty free-text entry."""
        if self.boolean is not None:
            return self.boolean
        if self.string is not None:
            return len(self.string) > 0
        return False


ResponseSnapshot = Mapping[str, Sequence[ResponseItem]]


def group_by_link_id(items: Iterable[ResponseItem]) -> dict[str, list[ResponseItem]]:
    """Group a flat list of response items by link-id, keeping order."""
    grouped: dict[str, list[ResponseItem]] = {}
    for item in items:
        grouped.setdefault(item.link_id, []).append(item)
    return grouped


@dataclass(frozen=True)
class PatientContext:
    """Demographic facts needed for population-specific thresholds."""

    preferred_gender: Optional[str] = None

    @property
    def is_male(self) -> bool:
        if not self.preferred_gender:
            return False
        return self.preferred_gender.lower() == "male"
