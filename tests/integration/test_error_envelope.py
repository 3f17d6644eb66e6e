"""
Integration tests for authentication, authorization and error rendering.

Every failure reaching the client must use the error envelope
``{"status": "error", "message", "code"}`` with the right HTTP status.
"""
import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings
from tests.fakes import bearer

WORKOUTS = "/api/v1/workouts"


@pytest.mark.integration
class TestHealth:

    def test_health_needs_no_token(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.integration
class TestAuthentication:

    def test_missing_token_returns_401(self, client):
        response = client.get(WORKOUTS)

        assert response.status_code == 401
        assert response.json() == {
            "status": "error",
            "message": "Unauthorized: No token provided",
            "code": "TOKEN_NOT_FOUND",
        }

    def test_non_bearer_scheme_returns_401(self, client):
        response = client.get(WORKOUTS, headers={"Authorization": "Basic dXNlcjpwYXNz"})

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_NOT_FOUND"

    def test_invalid_token_returns_401(self, client):
        response = client.get(WORKOUTS, headers=bearer("forged"))

        assert response.status_code == 401
        body = response.json()
        assert body["status"] == "error"
        assert body["code"] == "TOKEN_INVALID"
        assert body["message"].startswith("Unauthorized")

    def test_identity_provider_outage_returns_401(self, client, identity_provider):
        identity_provider.unavailable = True

        response = client.get(WORKOUTS, headers=bearer("lite-token"))

        assert response.status_code == 401
        assert response.json()["code"] == "IDENTITY_PROVIDER_UNAVAILABLE"


@pytest.mark.integration
class TestAuthorization:

    def test_missing_role_returns_403(self, client):
        response = client.get(WORKOUTS, headers=bearer("norole-token"))

        assert response.status_code == 403
        assert response.json() == {
            "status": "error",
            "message": "Forbidden: No role found",
            "code": "ROLE_NOT_FOUND",
        }

    def test_insufficient_role_returns_403(self, client):
        response = client.get("/api/v1/questions", headers=bearer("lite-token"))

        assert response.status_code == 403
        assert response.json()["code"] == "INSUFFICIENT_ROLE"
        assert response.json()["message"] == "Forbidden: Insufficient role"

    def test_authorization_runs_before_any_store_access(self, client, store):
        client.delete("/api/v1/questions/q1", headers=bearer("trainer-token"))

        assert store.calls == []


@pytest.mark.integration
class TestErrorRendering:

    def test_validation_error_returns_400(self, client):
        response = client.post(WORKOUTS, json={"exerciseLibraryIds": ["sq1"]}, headers=bearer("lite-token"))

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["message"].startswith("Validation error: ")
        assert "workoutData" in body["message"]

    def test_unknown_route_returns_404_envelope(self, client):
        response = client.get("/api/v1/nowhere")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Not Found", "code": "HTTP_404"}

    def test_not_found_document_returns_404(self, client):
        response = client.get(f"{WORKOUTS}/missing", headers=bearer("lite-token"))

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "DOCUMENT_NOT_FOUND"
        assert body["message"].startswith("Failed to retrieve workout missing: ")

    def test_unexpected_exception_returns_generic_500(self, client, identity_provider):
        def explode(token):
            raise RuntimeError("secret internals")

        identity_provider.verify = explode

        response = client.get(WORKOUTS, headers=bearer("lite-token"))

        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "message": "An unexpected error occurred",
            "code": "UNKNOWN_ERROR",
        }


@pytest.mark.integration
class TestUnconfiguredBackend:

    @pytest.fixture
    def bare_client(self):
        settings = Settings(environment="test", firebase_project_id=None, _env_file=None)
        return TestClient(create_app(settings=settings), raise_server_exceptions=False)

    def test_token_checked_before_provider(self, bare_client):
        response = bare_client.get(WORKOUTS)

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_NOT_FOUND"

    def test_missing_project_returns_auth_not_configured(self, bare_client):
        response = bare_client.get(WORKOUTS, headers=bearer("any-token"))

        assert response.status_code == 500
        assert response.json()["code"] == "AUTH_NOT_CONFIGURED"

    def test_missing_project_returns_database_unavailable(self, app, identity_provider):
        from api.deps import get_identity_provider

        app.state.settings = Settings(environment="test", firebase_project_id=None, _env_file=None)
        app.dependency_overrides[get_identity_provider] = lambda: identity_provider
        try:
            response = TestClient(app, raise_server_exceptions=False).get(
                WORKOUTS, headers=bearer("lite-token")
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json()["code"] == "DATABASE_UNAVAILABLE"
