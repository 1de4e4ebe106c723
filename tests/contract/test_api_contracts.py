"""
Contract tests for API response shapes.

Tests verify that every endpoint returns exactly the documented fields
with the documented types, and that every error is an {"error": str} body.
"""

import re
from typing import Any, Dict

import pytest

from tests.contract import assert_error_response, assert_list_response, assert_response_shape

pytestmark = pytest.mark.contract

# "Mon Jan 01 1990"
DISPLAY_DATE_RE = re.compile(
    r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun) "
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) "
    r"\d{2} \d{4}$"
)

USER_FIELDS = {"username": str, "id": str}
EXERCISE_FIELDS = {"id": str, "username": str, "description": str, "duration": int, "date": str}
LOG_FIELDS = {"id": str, "username": str, "count": int, "log": list}
LOG_ENTRY_FIELDS = {"description": str, "duration": int, "date": str}


# =============================================================================
# Test Data Factories
# =============================================================================


def create_user_payload(username: str = "contract_user") -> Dict[str, Any]:
    """Create a valid payload for POST /api/users."""
    return {"username": username}


def create_exercise_payload(date: str = "2020-02-02") -> Dict[str, Any]:
    """Create a valid payload for POST /api/users/{id}/exercises."""
    return {"description": "Contract run", "duration": 25, "date": date}


@pytest.fixture
def user(client) -> Dict[str, Any]:
    return client.post("/api/users", json=create_user_payload()).json()


# =============================================================================
# Health Contract Tests
# =============================================================================


class TestHealthContracts:

    def test_health_response_shape(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert_response_shape(resp.json(), {"status": str, "service": str}, allow_extra=False)


# =============================================================================
# Users Contract Tests
# =============================================================================


class TestUserContracts:

    def test_create_user_shape(self, client):
        resp = client.post("/api/users", json=create_user_payload("shape_user"))

        assert resp.status_code == 200
        assert_response_shape(resp.json(), USER_FIELDS, allow_extra=False)

    def test_list_users_shape(self, client, user):
        resp = client.get("/api/users")

        assert resp.status_code == 200
        assert_list_response(resp.json(), USER_FIELDS, min_items=1, allow_extra=False)


# =============================================================================
# Exercise Contract Tests
# =============================================================================


class TestExerciseContracts:

    def test_log_exercise_shape(self, client, user):
        resp = client.post(f"/api/users/{user['id']}/exercises", json=create_exercise_payload())

        assert resp.status_code == 200
        data = resp.json()
        assert_response_shape(data, EXERCISE_FIELDS, allow_extra=False)
        assert DISPLAY_DATE_RE.match(data["date"])

    def test_exercise_id_is_the_user_id(self, client, user):
        data = client.post(
            f"/api/users/{user['id']}/exercises", json=create_exercise_payload()
        ).json()
        assert data["id"] == user["id"]


# =============================================================================
# Log Contract Tests
# =============================================================================


class TestLogContracts:

    def test_log_shape(self, client, user):
        for date in ("2020-02-02", "2021-03-05"):
            client.post(f"/api/users/{user['id']}/exercises", json=create_exercise_payload(date))

        resp = client.get(f"/api/users/{user['id']}/logs")

        assert resp.status_code == 200
        data = resp.json()
        assert_response_shape(data, LOG_FIELDS, allow_extra=False)
        assert_list_response(data["log"], LOG_ENTRY_FIELDS, min_items=2, allow_extra=False, path="log")
        assert all(DISPLAY_DATE_RE.match(entry["date"]) for entry in data["log"])

    def test_empty_log_shape(self, client, user):
        data = client.get(f"/api/users/{user['id']}/logs").json()
        assert_response_shape(data, LOG_FIELDS, allow_extra=False)
        assert data["log"] == []


# =============================================================================
# Error Contract Tests
# =============================================================================


class TestErrorContracts:

    @pytest.mark.parametrize(
        "method,path,body,status",
        [
            ("post", "/api/users", {}, 400),
            ("post", "/api/users/nonexistent-id/exercises", {"description": "x", "duration": 1}, 404),
            ("get", "/api/users/nonexistent-id/logs", None, 404),
            ("get", "/no/such/route", None, 404),
        ],
    )
    def test_error_shape(self, client, method, path, body, status):
        kwargs = {"json": body} if body is not None else {}
        resp = getattr(client, method)(path, **kwargs)

        assert resp.status_code == status
        assert_error_response(resp.json())

    def test_validation_error_shape(self, client, user):
        resp = client.post(
            f"/api/users/{user['id']}/exercises",
            json={"description": "Run", "duration": "soon"},
        )

        assert resp.status_code == 400
        assert_error_response(resp.json())
