"""
API tests for the random-user endpoint and service endpoints
"""
import pytest
import httpx
from fastapi.testclient import TestClient

from app.main import app
from app.core.dependencies import get_aggregator
from app.services.aggregator import Aggregator, GENERIC_ERROR_MESSAGE

from conftest import RANDOMUSER_HOST, RESTCOUNTRIES_HOST, make_settings


@pytest.fixture
def client(upstreams):
    """Test client whose aggregator talks to the fake upstreams"""
    aggregator = Aggregator(make_settings(), transport=upstreams.transport)
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRandomUserEndpoint:
    """Test GET /api/random-user"""

    def test_success_response_shape(self, client):
        response = client.get("/api/random-user")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert set(data) == {"success", "user", "country", "exchangeRates", "news"}
        assert set(data["user"]) == {
            "firstName", "lastName", "gender", "profilePicture", "age",
            "dateOfBirth", "city", "country", "fullAddress"
        }
        assert data["exchangeRates"] == {"baseCurrency": "KZT", "usd": 0.0021, "kzt": 1.0}

    def test_identity_failure_returns_500(self, client, upstreams):
        upstreams.fail(RANDOMUSER_HOST)

        response = client.get("/api/random-user")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": GENERIC_ERROR_MESSAGE}

    def test_exchange_rates_absent_without_currency(self, client, upstreams):
        upstreams.set(RESTCOUNTRIES_HOST, httpx.Response(404, json={"status": 404}))

        response = client.get("/api/random-user")

        assert response.status_code == 200
        data = response.json()
        assert "exchangeRates" not in data
        assert data["country"]["currency"] is None

    def test_unexpected_error_returns_generic_body(self):
        class BrokenAggregator:
            async def handle(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_aggregator] = lambda: BrokenAggregator()
        try:
            response = TestClient(app, raise_server_exceptions=False).get("/api/random-user")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": GENERIC_ERROR_MESSAGE}


class TestServiceEndpoints:
    """Test health and info endpoints"""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info(self, client):
        data = client.get("/api/info").json()
        assert data["endpoints"]["random_user"] == "/api/random-user"
        assert data["country_provider"] == "restcountries"
