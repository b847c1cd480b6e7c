"""Tests for the profile HTTP API."""

import pytest
from fastapi.testclient import TestClient

from job_board.config import AppConfig
from job_board.models import make_session_factory
from job_board.storage.hooks import remove_resume_hooks
from job_board.web.app import create_app


@pytest.fixture
def client(tmp_path):
    session_factory = make_session_factory(f"sqlite:///{tmp_path / 'web.db'}")
    app = create_app(AppConfig(), session_factory=session_factory)
    with TestClient(app) as c:
        yield c
    remove_resume_hooks(session_factory)


@pytest.fixture
def profile_id(client):
    response = client.post("/profiles", json={
        "firstName": "Ada",
        "lastName": "Lovelace",
        "country": "Nigeria",
        "skills": "Go, Rust",
        "portfolio": "https://ada.dev",
    })
    assert response.status_code == 201
    return response.json()["id"]


class TestProfileRoutes:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "pdf": True}

    def test_create_returns_generated_resume(self, client):
        response = client.post("/profiles", json={"firstName": "Ada", "lastName": "Lovelace"})
        body = response.json()
        assert response.status_code == 201
        assert body["resume_generated"] == "# Ada Lovelace"
        assert body["resume_generated_redacted"] == "# [REDACTED]"
        assert body["has_pdf"] is True
        assert "resume_generated_pdf" not in body

    def test_get_profile(self, client, profile_id):
        body = client.get(f"/profiles/{profile_id}").json()
        assert body["firstName"] == "Ada"
        assert body["skills"] == "Go, Rust"

    def test_get_missing_profile(self, client):
        assert client.get("/profiles/999").status_code == 404

    def test_update_regenerates(self, client, profile_id):
        response = client.patch(f"/profiles/{profile_id}", json={"skills": ["Go", "Rust", "Zig"]})
        assert response.status_code == 200
        assert "- Zig" in response.json()["resume_generated"]

    def test_update_unknown_field(self, client, profile_id):
        response = client.patch(f"/profiles/{profile_id}", json={"nickname": "Countess"})
        assert response.status_code == 422

    def test_create_with_object_for_text_field(self, client):
        response = client.post("/profiles", json={"firstName": {"a": 1}})
        assert response.status_code == 422
        assert "firstName" in response.json()["detail"]

    def test_create_with_parameter_name_key(self, client):
        assert client.post("/profiles", json={"self": "x"}).status_code == 422
        assert client.post("/profiles", json={"fields": "x"}).status_code == 422

    def test_update_with_wrong_types(self, client, profile_id):
        assert client.patch(f"/profiles/{profile_id}", json={"country": ["NG"]}).status_code == 422
        assert client.patch(f"/profiles/{profile_id}", json={"profile_id": 3}).status_code == 422
        assert client.get(f"/profiles/{profile_id}").json()["country"] == "Nigeria"

    def test_update_missing_profile(self, client):
        assert client.patch("/profiles/999", json={"firstName": "Ada"}).status_code == 404


class TestResumeRoutes:
    def test_markdown(self, client, profile_id):
        response = client.get(f"/profiles/{profile_id}/resume")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert response.text.startswith("# Ada Lovelace\nNigeria\nhttps://ada.dev")

    def test_redacted_markdown(self, client, profile_id):
        text = client.get(f"/profiles/{profile_id}/resume", params={"redacted": "true"}).text
        assert "Ada" not in text
        assert "Nigeria" not in text
        assert "https://ada.dev" not in text
        assert "- Rust" in text

    def test_pdf(self, client, profile_id):
        response = client.get(f"/profiles/{profile_id}/resume.pdf")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "generated-resume.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_no_resume_for_empty_profile(self, client):
        empty_id = client.post("/profiles", json={"user": "u1"}).json()["id"]
        assert client.get(f"/profiles/{empty_id}/resume").status_code == 404
        assert client.get(f"/profiles/{empty_id}/resume.pdf").status_code == 404

    def test_regenerate(self, client, profile_id):
        response = client.post(f"/profiles/{profile_id}/resume/regenerate")
        assert response.json() == {"id": profile_id, "regenerated": True}

    def test_regenerate_missing_profile(self, client):
        assert client.post("/profiles/999/resume/regenerate").status_code == 404


class TestPdfDisabled:
    def test_text_only_mode(self, tmp_path):
        config = AppConfig()
        config.resume.pdf.enabled = False
        session_factory = make_session_factory(f"sqlite:///{tmp_path / 'nopdf.db'}")
        with TestClient(create_app(config, session_factory=session_factory)) as client:
            body = client.post("/profiles", json={"firstName": "Ada"}).json()
            assert body["resume_generated"] == "# Ada"
            assert body["has_pdf"] is False
            assert client.get(f"/profiles/{body['id']}/resume.pdf").status_code == 404
        remove_resume_hooks(session_factory)
