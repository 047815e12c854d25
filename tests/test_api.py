import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.schemas.routing import ErrorResponse
from api.services.routing_service import SafeRoutingService
from safe_walk_routing.config.routing_config import RoutingConfig
from safe_walk_routing.providers.errors import NoRoutesFound, ProviderNetworkError, ProviderUnavailable

from conftest import FakeDirectory, FakeRouteProvider, place, straight_path, straight_route

SAFE_LON = -79.3900

COMPARE_PAYLOAD = {
    "origin": {"latitude": 43.6426, "longitude": -79.3871},
    "destination": {"latitude": 43.6516, "longitude": -79.3871}
}


def police_near_safe_route(center):
    if center.longitude == SAFE_LON:
        return [place("station", "Division 52", ["police"], lon=SAFE_LON)]
    return []


def unavailable_directory(config):
    raise ProviderUnavailable("Google Maps API key is not configured.")


def install_service(monkeypatch, service):
    monkeypatch.setattr("api.routes.routing.routing_service", service)
    monkeypatch.setattr("api.main.routing_service", service)


@pytest.fixture
def api_config():
    return RoutingConfig(google_maps_api_key="AIza-test-key", aggregation_timeout_s=5.0)


@pytest.fixture
def client():
    return TestClient(app)


def test_compare_returns_labeled_routes(monkeypatch, client, api_config):
    raw = [straight_route(1000, duration_text="12 mins"), straight_route(1200, lon=SAFE_LON, duration_text="15 mins")]
    install_service(monkeypatch, SafeRoutingService(
        api_config,
        route_provider_factory=lambda config: FakeRouteProvider(raw),
        directory_factory=lambda config: FakeDirectory(police_near_safe_route)
    ))

    response = client.post("/api/routing/compare", json=COMPARE_PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [r["label"] for r in data["routes"]] == ["Safest", "Shortest"]

    safest = data["routes"][0]
    assert safest["route_index"] == 1
    assert safest["safety_score"] == 60.0
    assert safest["score_tier"] == "base"
    assert safest["duration_text"] == "15 mins"
    assert safest["counts"] == {"police": 1, "hospital": 0, "store": 0, "building": 0}
    assert safest["safety_points"][0]["type"] == "police"
    assert safest["midpoint"] is not None

    features = data["route_geojson"]["features"]
    route_features = [f for f in features if f["properties"]["type"] == "route"]
    assert [f["properties"]["route_index"] for f in route_features] == [1, 0]
    assert route_features[0]["geometry"]["type"] == "LineString"


def test_compare_reports_no_routes(monkeypatch, client, api_config):
    install_service(monkeypatch, SafeRoutingService(
        api_config,
        route_provider_factory=lambda config: FakeRouteProvider(error=NoRoutesFound()),
        directory_factory=lambda config: FakeDirectory(lambda c: [])
    ))

    response = client.post("/api/routing/compare", json=COMPARE_PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "no_routes_found"
    assert data["message"] == "No walking routes found between these locations."
    assert data["routes"] == []


def test_compare_reports_network_failure(monkeypatch, client, api_config):
    install_service(monkeypatch, SafeRoutingService(
        api_config,
        route_provider_factory=lambda config: FakeRouteProvider(error=ProviderNetworkError("Could not reach the directions service.")),
        directory_factory=lambda config: FakeDirectory(lambda c: [])
    ))

    data = client.post("/api/routing/compare", json=COMPARE_PAYLOAD).json()

    assert data["success"] is False
    assert data["error"] == "network_failure"


def test_compare_without_api_key_is_provider_unavailable(monkeypatch, client):
    install_service(monkeypatch, SafeRoutingService(RoutingConfig(google_maps_api_key=None)))

    data = client.post("/api/routing/compare", json=COMPARE_PAYLOAD).json()

    assert data["success"] is False
    assert data["error"] == "provider_unavailable"


def test_evaluate_scores_supplied_path(monkeypatch, client, api_config):
    install_service(monkeypatch, SafeRoutingService(
        api_config,
        directory_factory=lambda config: FakeDirectory(police_near_safe_route)
    ))
    plain = [{"latitude": c.latitude, "longitude": c.longitude} for c in straight_path([0, 900])]
    safe = [{"latitude": c.latitude, "longitude": c.longitude} for c in straight_path([0, 1100], lon=SAFE_LON)]

    response = client.post("/api/routing/evaluate", json={"routes": [
        {"path": plain, "distance_meters": 900, "duration_text": "11 mins"},
        {"path": safe, "distance_meters": 1100, "duration_text": "14 mins", "summary": "Spadina Ave"},
    ]})

    assert response.status_code == 200
    routes = response.json()["routes"]
    assert [(r["label"], r["route_index"]) for r in routes] == [("Safest", 1), ("Shortest", 0)]
    assert routes[0]["summary"] == "Spadina Ave"
    assert routes[0]["entity_total"] == 1


def test_evaluate_with_directory_unavailable_is_neutral(monkeypatch, client, api_config):
    install_service(monkeypatch, SafeRoutingService(api_config, directory_factory=unavailable_directory))
    path = [{"latitude": c.latitude, "longitude": c.longitude} for c in straight_path([0, 500])]

    response = client.post("/api/routing/evaluate", json={"routes": [
        {"path": path, "distance_meters": 500}
    ]})

    routes = response.json()["routes"]
    assert len(routes) == 1
    assert routes[0]["label"] == "Safest"
    assert routes[0]["safety_score"] == 50.0
    assert routes[0]["safety_points"] == []


@pytest.mark.parametrize("payload", [
    {"routes": []},
    {"routes": [{"distance_meters": 500}]},
    {"routes": [{"encoded_polyline": "abc", "distance_meters": -1}]},
])
def test_evaluate_rejects_invalid_requests(client, payload):
    response = client.post("/api/routing/evaluate", json=payload)

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"


def test_compare_rejects_out_of_range_coordinates(client):
    payload = {
        "origin": {"latitude": 95.0, "longitude": -79.3871},
        "destination": COMPARE_PAYLOAD["destination"]
    }

    response = client.post("/api/routing/compare", json=payload)

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_health_reports_degraded_without_api_key(monkeypatch, client):
    install_service(monkeypatch, SafeRoutingService(RoutingConfig(google_maps_api_key=None)))

    health = client.get("/api/routing/health").json()
    assert health["status"] == "degraded"
    assert health["api_key_configured"] is False

    overall = client.get("/health").json()
    assert overall["api_status"] == "healthy"
    assert overall["service_status"] == "degraded"


def test_health_reports_healthy_with_api_key(monkeypatch, client, api_config):
    install_service(monkeypatch, SafeRoutingService(api_config))

    health = client.get("/api/routing/health").json()

    assert health["status"] == "healthy"
    assert health["directory_enabled"] is True


def test_api_info_lists_labels(client):
    info = client.get("/api/routing/").json()

    assert info["labels"] == ["Safest", "Shortest", "Neutral"]
    assert info["score_range"] == {"min": 50, "max": 100}


def test_validation_errors_use_the_error_response_body(client):
    body = client.post("/api/routing/evaluate", json={"routes": [{"distance_meters": 500}]}).json()

    assert set(body) == set(ErrorResponse.model_fields)
    assert body["success"] is False
    assert body["message"] == "Request validation failed"
    assert body["details"]


class BrokenService:
    def get_health_status(self):
        raise RuntimeError("service state lost")


def test_unexpected_errors_use_the_error_response_body(monkeypatch):
    install_service(monkeypatch, BrokenService())

    response = TestClient(app, raise_server_exceptions=False).get("/health")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "internal_server_error",
        "message": "An unexpected error occurred",
        "details": None
    }
