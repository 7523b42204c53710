"""MVP connection tests — connect flow per kind, background analysis, disconnect, auth.

The AI collaborator and the page scraper are mocked. Background analysis
runs inside the TestClient call, so its results are visible right after
the POST returns.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio
import uuid
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from launchbase.agents.url_inspector import PageExtract, PageMetadata, ScrapeResult
from launchbase.database import Base, get_db, get_session_factory
from launchbase.main import app
from launchbase.models.url_project import UrlProject
from launchbase.schemas.connection_schema import ConnectionRequest
from launchbase.services.auth_utils import create_access_token
from launchbase.services.connection_service import connect
from launchbase.services.errors import AIGenerationError, ScrapeError

# ---------------------------------------------------------------------------
# Test database setup
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite:///./test_connections.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def override_get_session_factory():
    return TestingSessionLocal


client = TestClient(app)


@pytest.fixture(autouse=True)
def setup_db():
    """Create tables before each test, drop after."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = override_get_session_factory
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_session_factory, None)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SAMPLE_ANALYSIS = """Business Model: Freemium SaaS
Target Audience: Early-stage founders
Market Category: Productivity software
Industry: Software
Value Proposition: Launch checklists that write themselves
Pricing: $29/month
Market Size: $2B
Go-to-Market: Product Hunt launch and founder communities
"""


def _auth_headers():
    """Token for a fresh user; the local user is provisioned on first request."""
    uid = str(uuid.uuid4())
    name = f"founder_{uid[:8]}"
    token = create_access_token(uid, f"{name}@test.com", name)
    return uid, {"Authorization": f"Bearer {token}"}


def _mock_ai(text=SAMPLE_ANALYSIS):
    return patch(
        "launchbase.services.analysis_service.generate_text",
        new=AsyncMock(return_value=text),
    )


def _mock_scrape(result=None, side_effect=None):
    if side_effect is not None:
        return patch(
            "launchbase.services.url_project_service.scrape_page",
            new=AsyncMock(side_effect=side_effect),
        )
    return patch(
        "launchbase.services.url_project_service.scrape_page",
        new=AsyncMock(return_value=result or _scraped_page()),
    )


def _scraped_page():
    return ScrapeResult(
        metadata=PageMetadata(title="Shiplog", description="Changelogs for indie apps"),
        extract=PageExtract(text="Built with React and Express. Docs at /api/changelog"),
    )


MANUAL_PAYLOAD = {
    "kind": "manual",
    "project_name": "Shiplog",
    "project_description": "Changelog tool for indie developers",
    "target_audience": "Indie developers",
    "business_model": "Freemium",
}


# ---------------------------------------------------------------------------
# Tests — Connect flow
# ---------------------------------------------------------------------------

class TestManualConnection:
    def test_connect_returns_immediately_with_analyzing(self):
        _, headers = _auth_headers()
        with _mock_ai():
            res = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers)

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["analysis_status"] == "analyzing"
        assert data["connection"]["connection_type"] == "manual"
        assert data["connection"]["project_name"] == "Shiplog"
        assert data["connection"]["status"] == "connected"
        assert data["url_project"] is None

    def test_background_analysis_completes(self):
        _, headers = _auth_headers()
        with _mock_ai() as mock_ai:
            res = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers)
        assert res.status_code == 201

        prompt = mock_ai.call_args.args[0]
        assert "Source: manual" in prompt
        assert '"project_name": "Shiplog"' in prompt

        latest = client.get("/analyses/latest", headers=headers)
        assert latest.status_code == 200
        analysis = latest.json()
        assert analysis["analysis_status"] == "completed"
        assert analysis["mvp_connection_id"] == res.json()["connection"]["id"]
        assert analysis["business_model"] == "Business Model: Freemium SaaS"
        assert analysis["market_category"] == "Market Category: Productivity software"
        assert analysis["key_features"] == ["Feature 1", "Feature 2", "Feature 3"]
        assert analysis["analysis_confidence"] == 0.85
        assert analysis["raw_analysis_data"] == SAMPLE_ANALYSIS

    def test_analysis_ready_notification(self):
        _, headers = _auth_headers()
        with _mock_ai():
            client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers)

        titles = [n["title"] for n in client.get("/notifications/", headers=headers).json()["records"]]
        assert "AI Analysis Ready" in titles

    def test_ai_failure_leaves_analysis_analyzing(self):
        _, headers = _auth_headers()
        failing = patch(
            "launchbase.services.analysis_service.generate_text",
            new=AsyncMock(side_effect=AIGenerationError("OpenAI request failed: HTTP 500")),
        )
        with failing:
            res = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers)

        assert res.status_code == 201
        latest = client.get("/analyses/latest", headers=headers).json()
        assert latest["analysis_status"] == "analyzing"

        notes = client.get("/notifications/", headers=headers).json()["records"]
        assert any(n["type"] == "error" for n in notes)

    def test_missing_description_rejected_before_any_write(self):
        _, headers = _auth_headers()
        with _mock_ai() as mock_ai:
            res = client.post(
                "/connections/",
                json={"kind": "manual", "project_name": "Shiplog", "project_description": "   "},
                headers=headers,
            )

        assert res.status_code == 400
        assert mock_ai.call_count == 0
        assert client.get("/connections/", headers=headers).json()["records"] == []


class TestIntegrationConnection:
    def test_connect(self):
        _, headers = _auth_headers()
        with _mock_ai() as mock_ai:
            res = client.post(
                "/connections/",
                json={"kind": "integration", "platform": "vercel", "url": "https://shiplog.vercel.app"},
                headers=headers,
            )

        assert res.status_code == 201, res.text
        conn = res.json()["connection"]
        assert conn["platform"] == "vercel"
        assert conn["connection_url"] == "https://shiplog.vercel.app"
        assert "vercel" in res.json()["message"]
        assert "Platform: vercel" in mock_ai.call_args.args[0]

    def test_missing_url(self):
        _, headers = _auth_headers()
        res = client.post("/connections/", json={"kind": "integration", "platform": "github"}, headers=headers)
        assert res.status_code == 400

    def test_unknown_platform(self):
        _, headers = _auth_headers()
        res = client.post(
            "/connections/",
            json={"kind": "integration", "platform": "geocities", "url": "https://x.dev"},
            headers=headers,
        )
        assert res.status_code == 400
        assert "geocities" in res.json()["detail"]

    def test_unknown_kind_is_a_schema_error(self):
        _, headers = _auth_headers()
        res = client.post("/connections/", json={"kind": "carrier-pigeon"}, headers=headers)
        assert res.status_code == 422


class TestUrlConnection:
    def test_connect_creates_url_project_and_connection(self):
        _, headers = _auth_headers()
        with _mock_scrape(), _mock_ai():
            res = client.post(
                "/connections/",
                json={"kind": "url", "url": "https://shiplog.dev/app"},
                headers=headers,
            )

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["connection"]["connection_type"] == "url"
        assert data["connection"]["project_name"] == "Shiplog"
        project = data["url_project"]
        assert project["tech_stack"] == ["React", "Node.js"]
        assert project["endpoints"] == ["/api/changelog"]
        assert project["tracking_id"].startswith("app_")
        assert project["tracking_id"] in project["tracking_code"]

    def test_duplicate_url_conflicts(self):
        _, headers = _auth_headers()
        payload = {"kind": "url", "url": "https://shiplog.dev/app"}
        with _mock_scrape(), _mock_ai():
            first = client.post("/connections/", json=payload, headers=headers)
            second = client.post("/connections/", json=payload, headers=headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert len(client.get("/connections/", headers=headers).json()["records"]) == 1

    def test_unique_constraint_rejects_concurrent_duplicate(self):
        """Both requests pass the pre-check; the database constraint decides."""
        _, headers = _auth_headers()
        payload = {"kind": "url", "url": "https://shiplog.dev/app"}
        with _mock_scrape(), _mock_ai(), patch(
            "launchbase.services.url_project_service.find_url_project",
            return_value=None,
        ):
            first = client.post("/connections/", json=payload, headers=headers)
            second = client.post("/connections/", json=payload, headers=headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert "already connected" in second.json()["detail"]
        assert len(client.get("/connections/", headers=headers).json()["records"]) == 1

        db = TestingSessionLocal()
        try:
            assert db.query(UrlProject).filter(UrlProject.url == payload["url"]).count() == 1
        finally:
            db.close()

    def test_failed_connection_commit_keeps_no_url_project(self):
        db = TestingSessionLocal()
        payload = ConnectionRequest(kind="url", url="https://shiplog.dev/app")
        try:
            with _mock_scrape(), patch(
                "launchbase.services.connection_service._persist",
                side_effect=RuntimeError("commit failed"),
            ):
                with pytest.raises(RuntimeError):
                    asyncio.run(connect(db, uuid.uuid4(), payload))
            db.rollback()
            assert db.query(UrlProject).count() == 0
        finally:
            db.close()

    def test_same_url_for_different_users(self):
        _, headers_a = _auth_headers()
        _, headers_b = _auth_headers()
        payload = {"kind": "url", "url": "https://shiplog.dev/app"}
        with _mock_scrape(), _mock_ai():
            assert client.post("/connections/", json=payload, headers=headers_a).status_code == 201
            assert client.post("/connections/", json=payload, headers=headers_b).status_code == 201

    def test_scrape_failure_saves_nothing(self):
        _, headers = _auth_headers()
        url = "https://down.example.com"
        with _mock_scrape(side_effect=ScrapeError(url, "HTTP 503")), _mock_ai() as mock_ai:
            res = client.post("/connections/", json={"kind": "url", "url": url}, headers=headers)

        assert res.status_code == 502
        assert "HTTP 503" in res.json()["detail"]
        assert mock_ai.call_count == 0
        assert client.get("/connections/", headers=headers).json()["records"] == []
        assert client.get("/integrations/replit", headers=headers).json()["records"] == []

    def test_missing_url(self):
        _, headers = _auth_headers()
        res = client.post("/connections/", json={"kind": "url", "url": ""}, headers=headers)
        assert res.status_code == 400


# ---------------------------------------------------------------------------
# Tests — Listing, reading and disconnecting
# ---------------------------------------------------------------------------

class TestConnectionLifecycle:
    def test_list_newest_first(self):
        _, headers = _auth_headers()
        with _mock_ai():
            client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers)
            client.post(
                "/connections/",
                json={"kind": "integration", "platform": "heroku", "url": "https://x.herokuapp.com"},
                headers=headers,
            )

        records = client.get("/connections/", headers=headers).json()["records"]
        assert [r["connection_type"] for r in records] == ["integration", "manual"]

    def test_analyses_for_connection(self):
        _, headers = _auth_headers()
        with _mock_ai():
            conn_id = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers).json()["connection"]["id"]

        res = client.get(f"/analyses/connection/{conn_id}", headers=headers)
        assert res.status_code == 200
        records = res.json()["records"]
        assert len(records) == 1

        single = client.get(f"/analyses/{records[0]['id']}", headers=headers)
        assert single.status_code == 200
        assert single.json()["id"] == records[0]["id"]

    def test_disconnect_removes_connection_and_analyses(self):
        _, headers = _auth_headers()
        with _mock_ai():
            conn_id = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers).json()["connection"]["id"]

        res = client.delete(f"/connections/{conn_id}", headers=headers)
        assert res.status_code == 204
        assert client.get("/connections/", headers=headers).json()["records"] == []
        assert client.get("/analyses/latest", headers=headers).status_code == 404
        assert client.get(f"/analyses/connection/{conn_id}", headers=headers).status_code == 404

    def test_disconnected_url_can_be_connected_again(self):
        _, headers = _auth_headers()
        payload = {"kind": "url", "url": "https://shiplog.dev/app"}
        with _mock_scrape(), _mock_ai():
            first = client.post("/connections/", json=payload, headers=headers)
            assert first.status_code == 201
            conn_id = first.json()["connection"]["id"]

            assert client.delete(f"/connections/{conn_id}", headers=headers).status_code == 204
            assert client.get("/integrations/replit", headers=headers).json()["records"] == []

            again = client.post("/connections/", json=payload, headers=headers)

        assert again.status_code == 201, again.text
        assert len(client.get("/integrations/replit", headers=headers).json()["records"]) == 1

    def test_disconnecting_manual_connection_keeps_url_projects(self):
        _, headers = _auth_headers()
        with _mock_scrape(), _mock_ai():
            client.post("/connections/", json={"kind": "url", "url": "https://shiplog.dev/app"}, headers=headers)
            manual_id = client.post("/connections/", json=MANUAL_PAYLOAD, headers=headers).json()["connection"]["id"]

        assert client.delete(f"/connections/{manual_id}", headers=headers).status_code == 204
        assert len(client.get("/integrations/replit", headers=headers).json()["records"]) == 1

    def test_cannot_touch_other_users_connection(self):
        _, owner = _auth_headers()
        _, intruder = _auth_headers()
        with _mock_ai():
            conn_id = client.post("/connections/", json=MANUAL_PAYLOAD, headers=owner).json()["connection"]["id"]

        assert client.delete(f"/connections/{conn_id}", headers=intruder).status_code == 404
        assert client.get(f"/analyses/connection/{conn_id}", headers=intruder).status_code == 404
        assert len(client.get("/connections/", headers=owner).json()["records"]) == 1

    def test_latest_analysis_none_yet(self):
        _, headers = _auth_headers()
        assert client.get("/analyses/latest", headers=headers).status_code == 404


class TestAuthRequired:
    def test_missing_token(self):
        assert client.get("/connections/").status_code == 401
        assert client.post("/connections/", json=MANUAL_PAYLOAD).status_code == 401

    def test_invalid_token(self):
        res = client.get("/connections/", headers={"Authorization": "Bearer not-a-token"})
        assert res.status_code == 401
