"""
Tests for the main application module.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.external_api import OpenWeatherClient


class TestMainApplication:
    """Test suite for main FastAPI application configuration.

    Validates application setup, middleware configuration,
    router registration, and API documentation endpoints.
    """

    @pytest.fixture
    def client(self):
        """Create a FastAPI test client that runs the lifespan.

        Yields:
            TestClient: Configured test client for API testing
        """
        with TestClient(app) as test_client:
            yield test_client

    def test_app_creation(self):
        """Test FastAPI application initialization."""
        assert app.title == "Weather Lookup API"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"
        assert app.redoc_url == "/redoc"
        assert app.openapi_url == "/openapi.json"

    def test_cors_middleware_added(self):
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in str(middleware_classes)

    def test_request_tracker_middleware_added(self):
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "RequestTrackerMiddleware" in str(middleware_classes)

    def test_routes_included(self):
        routes = [route.path for route in app.routes]

        assert "/api/weather" in routes
        assert "/api/health" in routes

    def test_prometheus_metrics_endpoint(self):
        routes = [route.path for route in app.routes]
        assert any("/prometheus-metrics" in route for route in routes)

    def test_lifespan_creates_weather_client(self, client):
        """Test the shared upstream client is created at startup."""
        assert isinstance(app.state.weather_client, OpenWeatherClient)

    def test_request_id_header(self, client):
        response = client.get("/api/health")

        assert response.headers["X-Request-ID"].startswith("req_")
        assert "X-Process-Time" in response.headers
