"""
Test suite for the job catalog endpoints.

Tests cover:
- Single and bulk job creation
- Summary listing and detail retrieval
- Deletion of one or all jobs
- Error handling
"""

import uuid

from jobby.models.job import Job

SUMMARY_FIELDS = {
    "id",
    "title",
    "company_logo_url",
    "rating",
    "job_description",
    "location",
    "employment_type",
    "package_per_annum",
}


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_single_job(self, client, sample_job_data):
        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Job created successfully"
        job = data["job"]
        assert uuid.UUID(job["id"])
        assert job["title"] == sample_job_data["title"]
        assert job["skills"] == sample_job_data["skills"]
        assert job["life_at_company"] == sample_job_data["life_at_company"]

    def test_create_job_defaults(self, client, minimal_job_data):
        response = client.post("/api/jobs", json=minimal_job_data)

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["rating"] == 0
        assert job["company_logo_url"] is None
        assert job["company_website_url"] == ""
        assert job["life_at_company"] == {"description": "", "image_url": ""}
        assert job["skills"] == []

    def test_create_bulk_jobs(self, client, sample_job_data):
        payload = []
        for i in range(3):
            job_data = sample_job_data.copy()
            job_data["title"] = f"Job {i}"
            payload.append(job_data)

        response = client.post("/api/jobs", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Jobs created successfully"
        assert len(data["jobs"]) == 3
        ids = [job["id"] for job in data["jobs"]]
        assert len(set(ids)) == 3

        for job_id in ids:
            assert client.get(f"/api/jobs/{job_id}").status_code == 200

        assert len(client.get("/api/jobs").json()) == 3

    def test_create_job_missing_fields(self, client, db_session):
        response = client.post("/api/jobs", json={"title": "Test Job"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"
        assert db_session.query(Job).count() == 0

    def test_create_job_blank_required_field(self, client, minimal_job_data):
        minimal_job_data["location"] = ""

        response = client.post("/api/jobs", json=minimal_job_data)

        assert response.status_code == 400

    def test_bulk_with_invalid_entry_creates_nothing(self, client, sample_job_data, db_session):
        response = client.post("/api/jobs", json=[sample_job_data, {"title": "Broken"}])

        assert response.status_code == 400
        assert db_session.query(Job).count() == 0

    def test_create_empty_array(self, client):
        response = client.post("/api/jobs", json=[])

        assert response.status_code == 400


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_list_jobs_returns_summaries(self, client, sample_job_data):
        client.post("/api/jobs", json=sample_job_data)

        response = client.get("/api/jobs")

        assert response.status_code == 200
        jobs = response.json()
        assert len(jobs) == 1
        assert set(jobs[0]) == SUMMARY_FIELDS

    def test_list_jobs_empty(self, client):
        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_job_by_id(self, client, sample_job_data):
        job_id = client.post("/api/jobs", json=sample_job_data).json()["job"]["id"]

        response = client.get(f"/api/jobs/{job_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == job_id
        assert data["company_website_url"] == sample_job_data["company_website_url"]
        assert data["skills"][0]["name"] == "Python"
        assert "created_at" in data

    def test_get_nonexistent_job(self, client):
        response = client.get(f"/api/jobs/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Job not found"}

    def test_get_malformed_id(self, client):
        response = client.get("/api/jobs/12345")

        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, sample_job_data):
        job_id = client.post("/api/jobs", json=sample_job_data).json()["job"]["id"]

        response = client.delete(f"/api/jobs/{job_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Job deleted successfully"
        assert data["job"]["id"] == job_id
        assert client.get(f"/api/jobs/{job_id}").status_code == 404

    def test_delete_nonexistent_job(self, client, sample_job_data):
        client.post("/api/jobs", json=sample_job_data)

        response = client.delete(f"/api/jobs/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Job not found"}
        assert len(client.get("/api/jobs").json()) == 1

    def test_delete_all_jobs(self, client, sample_job_data):
        client.post("/api/jobs", json=[sample_job_data] * 3)

        response = client.delete("/api/jobs")

        assert response.status_code == 200
        assert response.json() == {"message": "All jobs deleted successfully", "deletedCount": 3}
        assert client.get("/api/jobs").json() == []

    def test_delete_all_jobs_when_empty(self, client):
        response = client.delete("/api/jobs")

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0
