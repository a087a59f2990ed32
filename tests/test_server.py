import pytest

from hotel_intel.core.config import Settings
from hotel_intel.core.errors import NotFound, Unauthorized, ValidationError
from hotel_intel.core.models import Amenity, AmenityAnalysis, Competitor, Hotel, Location, Report
from hotel_intel.jobs import server

SECRET = "s3cret"


class DummyOrchestrator:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def _report(self, kind, name, **extra):
        self.calls.append((kind, name))
        if self.error:
            raise self.error
        competitor = Competitor(name="Rival Inn", external_id="c1", rating=4.2, rating_count=10)
        competitor.review_summary = "Nice"
        competitor.opportunities = ["Add breakfast"]
        return Report(hotel=Hotel(name, "h1", Location(10.0, 20.0)), competitors=[competitor], **extra)

    def basic_report(self, name):
        return self._report("basic", name)

    def extended_report(self, name):
        return self._report(
            "extended",
            name,
            amenities={"cafe": [Amenity("Bean", rating=4.5)]},
            amenity_analysis=AmenityAnalysis(recommendations=["Limited cafe options nearby (1)"]),
        )


@pytest.fixture
def orchestrator(monkeypatch):
    dummy = DummyOrchestrator()
    settings = Settings(places_api_key="p", openai_api_key="o", authorized_api_key=SECRET)
    monkeypatch.setattr(server, "get_settings", lambda: settings)
    monkeypatch.setattr(server, "build_orchestrator", lambda: dummy)
    return dummy


@pytest.fixture
def client():
    return server.app.test_client()


def test_health_endpoint_is_public(orchestrator, client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_missing_api_key_is_rejected(orchestrator, client):
    response = client.get("/analyze?hotel_name=Grand%20Plaza")
    assert response.status_code == 403
    assert response.get_json() == {"error": "Unauthorized"}
    assert orchestrator.calls == []


def test_wrong_header_is_rejected(orchestrator, client):
    response = client.get("/analyzeApi?hotel_name=x", headers={"Authorization": "nope"})
    assert response.status_code == 403


def test_unconfigured_secret_rejects_everything(monkeypatch, client):
    settings = Settings(places_api_key="p", openai_api_key="o", authorized_api_key="")
    monkeypatch.setattr(server, "get_settings", lambda: settings)
    assert client.get("/analyze?hotel_name=x&api_key=").status_code == 403


def test_missing_hotel_name(orchestrator, client):
    response = client.get(f"/analyze?api_key={SECRET}")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Please provide a hotel name."}


def test_analyze_returns_basic_report(orchestrator, client):
    response = client.get("/analyze?hotel_name=Grand%20Plaza", headers={"Authorization": SECRET})

    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {"hotel", "competitors"}
    assert body["hotel"]["location"] == {"latitude": 10.0, "longitude": 20.0}
    assert body["competitors"][0]["placeId"] == "c1"
    assert body["competitors"][0]["opportunities"] == ["Add breakfast"]
    assert orchestrator.calls == [("basic", "Grand Plaza")]


def test_analyze_api_returns_extended_report(orchestrator, client):
    response = client.get(f"/analyzeApi?hotel_name=Grand%20Plaza&api_key={SECRET}")

    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {"hotel", "competitors", "nearbyAmenities", "amenitiesAnalysis"}
    assert body["nearbyAmenities"]["cafe"][0]["name"] == "Bean"
    assert orchestrator.calls == [("extended", "Grand Plaza")]


def test_pipeline_failure_returns_500_with_message(orchestrator, client):
    orchestrator.error = NotFound("Hotel not found")
    response = client.get(f"/analyze?hotel_name=Nowhere&api_key={SECRET}")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Hotel not found"}


def test_validation_error_returns_400(orchestrator, client):
    orchestrator.error = ValidationError("Unknown amenity category: spa")
    response = client.get(f"/analyzeApi?hotel_name=Spa&api_key={SECRET}")
    assert response.status_code == 400


def test_unknown_route_is_not_found(orchestrator, client):
    response = client.get("/nope")
    assert response.status_code == 404


def test_unauthorized_error_handler(orchestrator, client, caplog):
    with caplog.at_level("WARNING"):
        response = client.get("/analyze?hotel_name=x&api_key=wrong")
    assert response.status_code == 403
    assert response.get_json() == {"error": "Unauthorized"}
    assert "Rejected unauthorized request to /analyze" in " ".join(caplog.messages)


def test_require_api_key_raises_unauthorized(orchestrator):
    with server.app.test_request_context("/analyze?hotel_name=x"):
        with pytest.raises(Unauthorized):
            server.require_api_key()
