"""API tests for course echo endpoints.

Tests the complete HTTP request/response cycle for coded enum binding:
- GET /api/v1/courses/echo (query parameter)
- POST /api/v1/courses/echo (JSON body)
- PUT /api/v1/courses/echo (query parameter model)

Architecture:
- Uses FastAPI TestClient with the real app
- Unknown codes must produce RFC 7807 422 responses
"""

import pytest

ECHO_URL = "/api/v1/courses/echo"


@pytest.mark.api
class TestEchoFromQuery:
    """Test GET /api/v1/courses/echo."""

    @pytest.mark.parametrize("code", [102, 103, 104, 105])
    def test_every_known_code_round_trips(self, client, code):
        response = client.get(ECHO_URL, params={"course_type": code})

        assert response.status_code == 200
        assert response.json()["course_type"] == code

    def test_response_body(self, client):
        response = client.get(
            ECHO_URL, params={"course_type": "103", "course_id": "9007199254740993"}
        )

        assert response.json() == {
            "course_type": 103,
            "course_id": "9007199254740993",
            "title": None,
        }

    def test_unknown_code_rejected(self, client):
        response = client.get(ECHO_URL, params={"course_type": 999})

        assert response.status_code == 422
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert body["instance"] == ECHO_URL
        assert body["errors"][0]["field"] == "course_type"
        assert "CourseType has no variant with code 999" in body["errors"][0]["message"]

    def test_non_numeric_code_rejected(self, client):
        response = client.get(ECHO_URL, params={"course_type": "AUDIO"})

        assert response.status_code == 422
        assert "must be an integer" in response.json()["errors"][0]["message"]

    def test_missing_code_rejected(self, client):
        response = client.get(ECHO_URL)

        assert response.status_code == 422
        assert response.json()["errors"][0]["code"] == "missing"

    def test_error_carries_trace_id(self, client):
        response = client.get(
            ECHO_URL, params={"course_type": 1}, headers={"X-Trace-Id": "trace-abc"}
        )

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert response.json()["trace_id"] == "trace-abc"


@pytest.mark.api
class TestEchoFromBody:
    """Test POST /api/v1/courses/echo."""

    def test_known_code(self, client):
        response = client.post(ECHO_URL, json={"course_type": 104})

        assert response.status_code == 200
        assert response.json()["course_type"] == 104

    def test_code_as_string(self, client):
        response = client.post(ECHO_URL, json={"course_type": "102", "course_id": 7})

        assert response.json() == {"course_type": 102, "course_id": "7", "title": None}

    def test_unknown_code_rejected(self, client):
        response = client.post(ECHO_URL, json={"course_type": 101})

        assert response.status_code == 422
        error = response.json()["errors"][0]
        assert error["field"] == "course_type"
        assert error["code"] == "value_error"

    def test_boolean_rejected(self, client):
        response = client.post(ECHO_URL, json={"course_type": True})

        assert response.status_code == 422

    def test_course_id_out_of_range_rejected(self, client):
        response = client.post(
            ECHO_URL, json={"course_type": 102, "course_id": str(2**63)}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "course_id"


@pytest.mark.api
class TestEchoFromQueryModel:
    """Test PUT /api/v1/courses/echo."""

    def test_known_code(self, client):
        response = client.put(ECHO_URL, params={"course_type": 105, "title": "Links"})

        assert response.status_code == 200
        assert response.json() == {
            "course_type": 105,
            "course_id": None,
            "title": "Links",
        }

    def test_unknown_code_rejected(self, client):
        response = client.put(ECHO_URL, params={"course_type": 0})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "course_type"
