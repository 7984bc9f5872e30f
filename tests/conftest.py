"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from ic_triage.catalog.registry import QuestionnaireCatalog, get_catalog
from ic_triage.main import app
from ic_triage.models.response import PatientContext, ResponseItem, ResponseSnapshot, group_by_link_id
from ic_triage.services.assessment import TriageSummary

SnapshotFactory = Callable[[dict[str, Any]], ResponseSnapshot]
SummaryFactory = Callable[..., TriageSummary]


def to_response_item(link_id: str, value: Any) -> ResponseItem:
    """Build a response item; strings are treated as answer codes."""
    if isinstance(value, ResponseItem):
        return value
    if isinstance(value, bool):
        return ResponseItem(link_id=link_id, boolean=value)
    if isinstance(value, (int, float)):
        return ResponseItem(link_id=link_id, numeric=value)
    return ResponseItem.coded(link_id, value)


def build_snapshot(answers: dict[str, Any]) -> ResponseSnapshot:
    """Build a snapshot from {link_id: value}; a list value gives several items."""
    items = []
    for link_id, value in answers.items():
        values = value if isinstance(value, list) else [value]
        items.extend(to_response_item(link_id, v) for v in values)
    return group_by_link_id(items)


@pytest.fixture(scope="session")
def catalog() -> QuestionnaireCatalog:
    """The packaged instrument catalog."""
    return get_catalog()


@pytest.fixture
def snapshot() -> SnapshotFactory:
    """Factory for response snapshots."""
    return build_snapshot


@pytest.fixture
def make_summary(catalog: QuestionnaireCatalog) -> SummaryFactory:
    """Factory for triage summaries over the packaged catalog."""

    def _make(
        answers: Optional[dict[str, Any]] = None,
        gender: Optional[str] = None,
    ) -> TriageSummary:
        return TriageSummary(
            build_snapshot(answers or {}),
            PatientContext(preferred_gender=gender),
            catalog,
        )

    return _make


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
