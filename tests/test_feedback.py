"""
Tests for the feedback endpoints.
"""

import uuid
from datetime import datetime

import pytest

from jobby.core.security import decode_token
from jobby.models.feedback import Feedback


@pytest.fixture
def feedback_id(client):
    response = client.post(
        "/api/feedback",
        json={"username": "alice", "email": "alice@example.com", "message": "Great listings"}
    )
    assert response.status_code == 201
    return response.json()["feedback"]["id"]


class TestFeedbackCreation:

    def test_create_feedback(self, client):
        response = client.post(
            "/api/feedback",
            json={"username": "alice", "email": "alice@example.com", "message": "Great listings"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Feedback submitted successfully"
        assert data["feedback"]["username"] == "alice"
        assert data["feedback"]["message"] == "Great listings"
        assert data["feedback"]["created_at"] is not None

    def test_create_feedback_without_email(self, client):
        response = client.post("/api/feedback", json={"username": "bob", "message": "Hi"})

        assert response.status_code == 201
        assert response.json()["feedback"]["email"] is None

    @pytest.mark.parametrize("payload", [
        {"username": "alice"},
        {"username": "alice", "message": ""},
        {"username": "alice", "message": "   ", "email": "alice@example.com"},
        {"message": "No name given"},
        {"username": " ", "message": "Blank name"},
    ])
    def test_create_feedback_requires_username_and_message(self, client, db_session, payload):
        response = client.post("/api/feedback", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Username and message are required"}
        assert db_session.query(Feedback).count() == 0

    def test_token_user_overrides_body_username(self, client, auth_headers):
        response = client.post(
            "/api/feedback",
            json={"username": "mallory", "message": "Signed in feedback"},
            headers=auth_headers
        )

        assert response.status_code == 201
        feedback = response.json()["feedback"]
        assert feedback["username"] == "alice"
        assert feedback["email"] == "alice@example.com"

    def test_token_supplies_missing_username(self, client, auth_headers):
        response = client.post("/api/feedback", json={"message": "Hello"}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["feedback"]["username"] == "alice"

    def test_invalid_token_is_rejected(self, client, db_session):
        response = client.post(
            "/api/feedback",
            json={"username": "alice", "message": "Hello"},
            headers={"Authorization": "Bearer invalid.token.here"}
        )

        assert response.status_code == 401
        assert db_session.query(Feedback).count() == 0


    def test_token_for_deleted_user_is_rejected(self, client, signup, settings, db_session):
        token = signup()
        user_id = decode_token(token, settings)["sub"]
        client.delete(f"/api/users/{user_id}")

        response = client.post(
            "/api/feedback",
            json={"username": "alice", "message": "Hello"},
            headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
        assert db_session.query(Feedback).count() == 0


class TestFeedbackRetrieval:

    def test_list_feedback(self, client, feedback_id):
        client.post("/api/feedback", json={"username": "bob", "message": "Second"})

        response = client.get("/api/feedback")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 2
        assert feedback_id in {f["id"] for f in data}

    def test_list_order_is_stable_for_equal_timestamps(self, client, db_session):
        created_at = datetime(2024, 1, 1, 12, 0, 0)
        rows = [
            Feedback(username=f"user{i}", message="Same second", created_at=created_at)
            for i in range(5)
        ]
        db_session.add_all(rows)
        db_session.commit()

        listed = [f["id"] for f in client.get("/api/feedback").json()]

        assert listed == sorted(listed)
        assert listed == [f["id"] for f in client.get("/api/feedback").json()]

    def test_get_feedback(self, client, feedback_id):
        response = client.get(f"/api/feedback/{feedback_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Great listings"

    def test_get_nonexistent_feedback(self, client):
        response = client.get(f"/api/feedback/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Feedback not found"}


class TestFeedbackUpdate:

    def test_update_message(self, client, feedback_id):
        response = client.put(f"/api/feedback/{feedback_id}", json={"message": "Even better now"})

        assert response.status_code == 200
        feedback = response.json()["feedback"]
        assert feedback["message"] == "Even better now"
        assert feedback["username"] == "alice"
        assert feedback["email"] == "alice@example.com"

    def test_update_blank_message(self, client, feedback_id):
        response = client.put(f"/api/feedback/{feedback_id}", json={"message": ""})

        assert response.status_code == 400
        assert client.get(f"/api/feedback/{feedback_id}").json()["message"] == "Great listings"

    def test_update_nonexistent_feedback(self, client):
        response = client.put(f"/api/feedback/{uuid.uuid4()}", json={"message": "Hello"})

        assert response.status_code == 404


class TestFeedbackDeletion:

    def test_delete_feedback(self, client, feedback_id):
        response = client.delete(f"/api/feedback/{feedback_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Feedback deleted successfully"
        assert data["feedback"]["id"] == feedback_id
        assert client.get(f"/api/feedback/{feedback_id}").status_code == 404

    def test_delete_nonexistent_feedback(self, client, feedback_id):
        response = client.delete(f"/api/feedback/{uuid.uuid4()}")

        assert response.status_code == 404
        assert len(client.get("/api/feedback").json()) == 1

    def test_delete_all_feedback(self, client, feedback_id):
        client.post("/api/feedback", json={"username": "bob", "message": "Second"})

        response = client.delete("/api/feedback")

        assert response.status_code == 200
        assert response.json() == {"message": "All feedbacks deleted successfully", "deletedCount": 2}
        assert client.get("/api/feedback").json() == []
