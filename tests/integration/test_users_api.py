"""
Integration tests for the users HTTP API

Runs the FastAPI application in-process through TestClient with the
sample users and a recording analytics sink.
"""

import pytest
from fastapi.testclient import TestClient

from profilehub.bootstrap import build_user_management
from profilehub.main import create_application
from profilehub.modules.user_management.infrastructure.analytics import (
    InMemoryAnalyticsService,
    LoggingAnalyticsService,
)
from profilehub.modules.user_management.infrastructure.repositories import InMemoryUserRepository

from tests.factories import make_user


@pytest.fixture
def client(services, test_settings):
    """TestClient over an application using the composed test services"""
    app = create_application(services=services, settings=test_settings)
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoints:
    """Test health checks"""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["user_count"] == 4

    def test_detailed_health(self, client):
        response = client.get("/api/v1/health/detailed")

        assert response.status_code == 200
        body = response.json()
        assert body["process"]["memory_rss_bytes"] > 0
        assert body["system"]["cpu_count"] >= 1
        assert body["environment"] == "test"


class TestListUsersEndpoint:
    """Test GET /users"""

    def test_list_all(self, client):
        response = client.get("/api/v1/users")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == ["1", "2", "3", "4"]

    def test_list_with_filters(self, client):
        response = client.get("/api/v1/users", params={"membership_type": "free", "min_purchase_count": 10})

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == ["2"]

    def test_invalid_filter_value(self, client):
        response = client.get("/api/v1/users", params={"min_purchase_count": -1})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "min_purchase_count" in error["details"]["errors"]


class TestGetUserEndpoint:
    """Test GET /users/{user_id}"""

    def test_get_profile(self, client):
        response = client.get("/api/v1/users/3")

        assert response.status_code == 200
        body = response.json()
        assert body["membership_type"] == "premium"
        assert body["discount_rate"] == 0.25
        assert body["status_message"] == "Premium member since 2023"
        assert len(body["available_features"]) == 8

    def test_unknown_user(self, client):
        response = client.get("/api/v1/users/999")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["status_code"] == 404
        assert error["message"] == "User with ID 999 not found"
        assert error["details"]["resource_id"] == "999"

    def test_blank_user_id(self, client):
        response = client.get("/api/v1/users/%20")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_request_id_is_echoed(self, client):
        response = client.get("/api/v1/users/1", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_user_header_reaches_analytics(self, client, analytics):
        client.get("/api/v1/users/1", headers={"X-User-ID": "viewer-9"})

        viewed = analytics.events_named("user_profile_viewed")[-1]
        assert viewed.properties["analytics_user_id"] == "viewer-9"
        assert viewed.properties["app_name"] == "ProfileHub API"


class TestUpdateUserEndpoint:
    """Test PUT /users/{user_id}"""

    def test_update_profile(self, client, repository):
        response = client.put("/api/v1/users/1", json={"name": "Bruno Costa", "email": "bruno@example.com"})

        assert response.status_code == 200
        assert response.json()["name"] == "Bruno Costa"
        assert response.json()["email"] == "bruno@example.com"

    def test_form_errors(self, client):
        response = client.put("/api/v1/users/1", json={"name": "B", "email": "nope"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["errors"] == {
            "name": "Name must be at least 2 characters",
            "email": "Please enter a valid email address",
        }

    def test_email_conflict(self, client):
        response = client.put("/api/v1/users/1", json={"name": "Bruno Silva", "email": "premium@example.com"})

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT_ERROR"

    def test_unknown_user(self, client):
        response = client.put("/api/v1/users/999", json={"name": "Ana Souza", "email": "ana@example.com"})
        assert response.status_code == 404


class TestUpgradeEndpoint:
    """Test POST /users/{user_id}/upgrade"""

    def test_upgrade_without_body(self, client):
        response = client.post("/api/v1/users/2/upgrade")

        assert response.status_code == 200
        assert response.json()["membership_type"] == "premium"
        assert client.get("/api/v1/users/2").json()["membership_type"] == "premium"

    def test_upgrade_with_body(self, client):
        response = client.post("/api/v1/users/4/upgrade", json={"target_membership_type": "premium"})
        assert response.status_code == 200

    def test_invalid_target(self, client):
        response = client.post("/api/v1/users/2/upgrade", json={"target_membership_type": "free"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_already_premium(self, client):
        response = client.post("/api/v1/users/3/upgrade")

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_PREMIUM"

    def test_not_eligible(self, client):
        response = client.post("/api/v1/users/1/upgrade")

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "NOT_ELIGIBLE"
        assert error["details"]["context"]["required_purchases"] == 10


class TestUnexpectedFailures:
    """Test collaborator failures surface as 500s"""

    def test_repository_failure_returns_500(self, test_settings, analytics):
        class ExplodingRepository(InMemoryUserRepository):
            async def find_all(self):
                raise ConnectionError("store unreachable")

        services = build_user_management(
            settings=test_settings,
            repository=ExplodingRepository(users=[make_user()]),
            analytics=analytics,
        )
        app = create_application(services=services, settings=test_settings)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/v1/users", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_SERVER_ERROR"
        assert error["message"] == "An internal server error occurred"
        assert error["status_code"] == 500
        assert error["request_id"] == "req-500"
        assert "users_list_error" in analytics.event_names


class TestRequestContext:
    """Test the X-User-ID header reaches the logging context"""

    def test_user_header_sets_logging_context(self, test_settings, repository):
        """The logging sink reads the user id from the request-scoped context."""
        seen = []

        class RecordingLoggingAnalytics(LoggingAnalyticsService):
            def track(self, event, properties):
                seen.append((event, self._current_user_id()))
                super().track(event, properties)

        services = build_user_management(
            settings=test_settings,
            repository=repository,
            analytics=RecordingLoggingAnalytics(),
        )
        app = create_application(services=services, settings=test_settings)

        with TestClient(app) as client:
            response = client.get("/api/v1/users/1", headers={"X-User-ID": "viewer-9"})
            anonymous = client.get("/api/v1/users/2")

        assert response.status_code == 200
        assert anonymous.status_code == 200
        assert ("user_profile_viewed", "viewer-9") in seen
        # The context is reset once the request ends
        assert seen[-1] == ("user_profile_viewed", None)


class TestAnalyticsFailures:
    """Test a failing analytics sink never fails a request"""

    def test_raising_identity_calls_are_isolated(self, test_settings, repository):
        """set_user_id and set_global_properties errors are logged and dropped."""

        class BrokenIdentityAnalytics(InMemoryAnalyticsService):
            def set_user_id(self, user_id):
                raise RuntimeError("identify endpoint down")

            def set_global_properties(self, properties):
                raise RuntimeError("identify endpoint down")

        analytics = BrokenIdentityAnalytics()
        services = build_user_management(
            settings=test_settings,
            repository=repository,
            analytics=analytics,
        )
        app = create_application(services=services, settings=test_settings)

        with TestClient(app) as client:
            response = client.get("/api/v1/users/1", headers={"X-User-ID": "viewer-9"})

        assert response.status_code == 200
        assert response.json()["id"] == "1"
        assert "user_profile_viewed" in analytics.event_names
