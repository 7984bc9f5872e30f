"""Tests for the triage and catalog endpoints."""

from fastapi.testclient import TestClient

from ic_triage.catalog.models import InstrumentId

YES = "LA33-6"
NO = "LA32-8"


def coded(link_id: str, code: str) -> dict:
    return {"link_id": link_id, "coding": {"code": code}}


class TestEvaluateEndpoint:
    """Tests for POST /api/v1/triage/evaluate."""

    def test_empty_assessment(self, client: TestClient) -> None:
        """Test that no responses resolve to self-directed care."""
        response = client.post("/api/v1/triage/evaluate", json={"responses": []})

        assert response.status_code == 200
        data = response.json()
        assert data["diagnosis"] == "SELF_DIRECTED"
        assert data["diagnosis_code"] == -1
        assert data["care_level"] == "SUB_CLINICAL"
        assert data["flag"] == "optional_referral"
        assert data["is_crisis"] is False
        assert data["resolved_by"] == "rule"
        assert data["overall_acuity"] == "LOW"
        assert len(data["catalog_hash"]) == 64

    def test_crisis(self, client: TestClient) -> None:
        """Test that plan with intent resolves to crisis care."""
        payload = {
            "patient": {"preferred_gender": "female"},
            "responses": [coded("/93267-3", YES), coded("/93269-9", YES)],
        }
        response = client.post("/api/v1/triage/evaluate", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["is_crisis"] is True
        assert data["crisis_signals"] == ["cssrs_plan_with_intent"]
        assert data["diagnosis"] == "CRISIS_CARE"
        assert data["diagnosis_display_name"] == "Crisis Care"
        assert data["care_level"] == "IC"
        assert data["flag"] == "needs_initial_safety_planning"
        assert data["resolved_by"] == "crisis"
        assert data["scores"]["CSSRS"] == {"score": 2, "acuity": "HIGH"}

    def test_explicit_selection(self, client: TestClient) -> None:
        """Test boolean diagnosis selections."""
        payload = {
            "responses": [
                {"link_id": "/diagnosis/ED", "boolean": True},
                {"link_id": "/diagnosis/ADHD", "boolean": True},
            ]
        }
        data = client.post("/api/v1/triage/evaluate", json=payload).json()

        assert data["diagnosis"] == "PSYCHOTHERAPY_ANDOR_MM"
        assert data["resolved_by"] == "selection"

    def test_population_specific_thresholds(self, client: TestClient) -> None:
        """Test that AUDIT-C acuity depends on the patient's gender."""
        responses = [
            coded("/68518-0", "LA18928-4"),
            coded("/68519-8", "LA18930-0"),
            coded("/68520-6", "LA6270-8"),
        ]

        male = client.post(
            "/api/v1/triage/evaluate",
            json={"patient": {"preferred_gender": "male"}, "responses": responses},
        ).json()
        other = client.post(
            "/api/v1/triage/evaluate",
            json={"patient": {"preferred_gender": "female"}, "responses": responses},
        ).json()

        assert male["scores"]["AUDITC"] == {"score": 5, "acuity": "MEDIUM"}
        assert other["scores"]["AUDITC"] == {"score": 5, "acuity": "HIGH"}

    def test_response_without_value_rejected(self, client: TestClient) -> None:
        """Test that a response with no value is a validation error."""
        payload = {"responses": [{"link_id": "/93246-7"}]}
        response = client.post("/api/v1/triage/evaluate", json=payload)

        assert response.status_code == 422

    def test_response_with_two_values_rejected(self, client: TestClient) -> None:
        """Test that a response with two values is a validation error."""
        payload = {"responses": [{"link_id": "/93246-7", "boolean": True, "string": "yes"}]}
        response = client.post("/api/v1/triage/evaluate", json=payload)

        assert response.status_code == 422

    def test_evaluation_is_deterministic(self, client: TestClient) -> None:
        """Test that the same request gives the same result."""
        payload = {"responses": [coded("/44250-9", "LA6571-9"), coded("/44255-8", "LA6570-1")]}

        first = client.post("/api/v1/triage/evaluate", json=payload).json()
        second = client.post("/api/v1/triage/evaluate", json=payload).json()

        assert first == second
        assert first["diagnosis"] == "GENERAL"


class TestCatalogEndpoints:
    """Tests for the catalog endpoints."""

    def test_get_catalog(self, client: TestClient) -> None:
        """Test the catalog description."""
        response = client.get("/api/v1/catalog")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "ic-instruments"
        assert data["version"] == "1.0.0"
        assert len(data["hash"]) == 64
        assert [i["id"] for i in data["instruments"]] == [i.value for i in InstrumentId]

    def test_presentation_deduplicates(self, client: TestClient) -> None:
        """Test that shared items are presented once."""
        payload = {"responses": [coded("/93267-3", YES), coded("/68518-0", "LA18926-8")]}
        response = client.post("/api/v1/catalog/presentation", json=payload)

        assert response.status_code == 200
        link_ids = [item["link_id"] for item in response.json()["items"]]
        assert len(link_ids) == len(set(link_ids))
        assert "/93269-9" in link_ids
        assert "/68519-8" in link_ids

    def test_presentation_without_screens(self, client: TestClient) -> None:
        """Test that gated items are withheld before their screen."""
        response = client.post(
            "/api/v1/catalog/presentation",
            json={"responses": [coded("/93267-3", NO)]},
        )

        link_ids = [item["link_id"] for item in response.json()["items"]]
        assert "/93269-9" not in link_ids
        assert "/ic-dast-1" not in link_ids
