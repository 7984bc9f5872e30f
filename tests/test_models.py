"""Tests for response and patient value types."""

import pytest

from ic_triage.models.disposition import AcuityCategory, DispositionOutcomeCare
from ic_triage.models.response import PatientContext, ResponseItem, group_by_link_id


class TestPatientContext:
    """Tests for patient demographics."""

    @pytest.mark.parametrize("gender", ["male", "Male", "MALE"])
    def test_is_male(self, gender: str) -> None:
        """Test case-insensitive male detection."""
        assert PatientContext(gender).is_male is True

    @pytest.mark.parametrize("gender", ["female", "non-binary", "males", "", None])
    def test_is_not_male(self, gender) -> None:
        """Test everything else is not male."""
        assert PatientContext(gender).is_male is False


class TestResponseItem:
    """Tests for response items."""

    def test_coded(self) -> None:
        """Test the coded constructor."""
        item = ResponseItem.coded("/q", "LA33-6", "Yes")

        assert item.code == "LA33-6"
        assert item.coding.display == "Yes"
        assert item.has_value is True

    def test_no_value(self) -> None:
        """Test an empty item."""
        item = ResponseItem(link_id="/q")

        assert item.code is None
        assert item.has_value is False
        assert item.is_selected() is False

    def test_is_selected(self) -> None:
        """Test selection semantics for checkboxes and free text."""
        assert ResponseItem(link_id="/q", boolean=True).is_selected() is True
        assert ResponseItem(link_id="/q", boolean=False).is_selected() is False
        assert ResponseItem(link_id="/q", string="text").is_selected() is True
        assert ResponseItem(link_id="/q", string="").is_selected() is False

    def test_group_by_link_id(self) -> None:
        """Test grouping keeps every item in order."""
        items = [
            ResponseItem.coded("/a", "1"),
            ResponseItem.coded("/b", "2"),
            ResponseItem.coded("/a", "3"),
        ]
        grouped = group_by_link_id(items)

        assert list(grouped) == ["/a", "/b"]
        assert [i.code for i in grouped["/a"]] == ["1", "3"]


class TestOrdinals:
    """Tests for ordered enumerations."""

    def test_acuity_order(self) -> None:
        """Test acuity ordering for max()."""
        assert max([AcuityCategory.MEDIUM, AcuityCategory.HIGH, AcuityCategory.LOW]) == AcuityCategory.HIGH

    def test_care_order(self) -> None:
        """Test care levels are ordered by intensity."""
        assert DispositionOutcomeCare.SUB_CLINICAL < DispositionOutcomeCare.SELF_DIRECTED
        assert DispositionOutcomeCare.IC < DispositionOutcomeCare.SPECIALTY
