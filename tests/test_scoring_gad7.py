"""Unit tests for GAD-7 scoring module."""

import pytest

from ic_triage.catalog.models import InstrumentId
from ic_triage.models.disposition import AcuityCategory
from ic_triage.models.response import PatientContext
from ic_triage.scoring.gad7 import classify_acuity, score_gad7

FREQUENCY = ["LA6568-5", "LA6569-3", "LA6570-1", "LA6571-9"]
GAD7_ITEMS = ["/69725-0", "/68509-9", "/69733-4", "/69734-2", "/69735-9", "/69689-8", "/69736-7"]


def gad7_answers(values: list[int]) -> dict[str, str]:
    return {link_id: FREQUENCY[value] for link_id, value in zip(GAD7_ITEMS, values)}


class TestGAD7Scoring:
    """Tests for GAD-7 score calculation."""

    def test_all_zeros(self, catalog, snapshot) -> None:
        """Test minimum score."""
        items = catalog.get(InstrumentId.GAD7).items
        result = score_gad7(items, snapshot(gad7_answers([0] * 7)), PatientContext())

        assert result.score == 0
        assert result.acuity == AcuityCategory.LOW

    def test_all_threes(self, catalog, snapshot) -> None:
        """Test maximum score (all items = 3)."""
        items = catalog.get(InstrumentId.GAD7).items
        result = score_gad7(items, snapshot(gad7_answers([3] * 7)), PatientContext())

        assert result.score == 21
        assert result.acuity == AcuityCategory.HIGH

    def test_medium(self, catalog, snapshot) -> None:
        """Test a total of 14 is MEDIUM."""
        items = catalog.get(InstrumentId.GAD7).items
        result = score_gad7(items, snapshot(gad7_answers([2] * 7)), PatientContext())

        assert result.score == 14
        assert result.acuity == AcuityCategory.MEDIUM


class TestGAD7Thresholds:
    """Tests for GAD-7 cut points."""

    @pytest.mark.parametrize(
        "total,expected",
        [
            (13, AcuityCategory.LOW),
            (14, AcuityCategory.MEDIUM),
            (16, AcuityCategory.MEDIUM),
            (17, AcuityCategory.HIGH),
        ],
    )
    def test_cut_points(self, total: int, expected: AcuityCategory) -> None:
        """Test the 13/16 cut points."""
        assert classify_acuity(total) == expected
