"""Dashboard feature tests — content, strategy, quick actions, agents, checklist,
notifications, integrations, onboarding profile and the dashboard summary.

The AI collaborator is mocked at each service's import site.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import uuid
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from launchbase.agents.url_inspector import PageExtract, PageMetadata, ScrapeResult
from launchbase.constants import CHECKLIST_SECTIONS
from launchbase.database import Base, get_db, get_session_factory
from launchbase.main import app
from launchbase.services.auth_utils import create_access_token
from launchbase.services.checklist_service import build_checklist, calculate_progress
from launchbase.services.dashboard_service import classify_activity
from launchbase.services.errors import AIGenerationError
from launchbase.services.notification_service import time_ago

# ---------------------------------------------------------------------------
# Test database setup
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite:///./test_dashboard_features.db"
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

def _auth_headers():
    uid = str(uuid.uuid4())
    name = f"founder_{uid[:8]}"
    token = create_access_token(uid, f"{name}@test.com", name)
    return uid, {"Authorization": f"Bearer {token}"}


def _mock_ai(module, text="Generated text", side_effect=None):
    target = f"launchbase.services.{module}.generate_text"
    if side_effect is not None:
        return patch(target, new=AsyncMock(side_effect=side_effect))
    return patch(target, new=AsyncMock(return_value=text))


USER_CHECKABLE = [
    item["id"]
    for section in CHECKLIST_SECTIONS
    for item in section["items"]
    if not item["completed"]
]


# ---------------------------------------------------------------------------
# Tests — Content generator
# ---------------------------------------------------------------------------

class TestContentGenerator:
    def test_generate_persists_draft(self):
        _, headers = _auth_headers()
        with _mock_ai("content_service", "Subject: Welcome!") as mock_ai:
            res = client.post(
                "/content/generate",
                json={"content_type": "email", "custom_input": "  for dentists  "},
                headers=headers,
            )

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["title"] == "Email Sequence"
        assert data["status"] == "draft"
        assert data["content"] == "Subject: Welcome!"
        assert data["prompt"] == "for dentists"

        prompt = mock_ai.call_args.args[0]
        assert prompt.endswith("Additional context: for dentists")
        assert mock_ai.call_args.kwargs["max_tokens"] == 1000

    def test_recent_content_is_capped_at_four(self):
        _, headers = _auth_headers()
        with _mock_ai("content_service"):
            for content_type in ["landing", "email", "social", "sales", "landing"]:
                client.post("/content/generate", json={"content_type": content_type}, headers=headers)

        records = client.get("/content/", headers=headers).json()["records"]
        assert len(records) == 4
        assert records[0]["content_type"] == "landing"

    def test_mark_used(self):
        _, headers = _auth_headers()
        with _mock_ai("content_service"):
            content_id = client.post(
                "/content/generate", json={"content_type": "social"}, headers=headers
            ).json()["id"]

        res = client.patch(f"/content/{content_id}/used", headers=headers)
        assert res.status_code == 200
        assert res.json()["status"] == "used"

    def test_unknown_type(self):
        _, headers = _auth_headers()
        res = client.post("/content/generate", json={"content_type": "haiku"}, headers=headers)
        assert res.status_code == 422

    def test_ai_failure_is_bad_gateway(self):
        _, headers = _auth_headers()
        with _mock_ai("content_service", side_effect=AIGenerationError("down")):
            res = client.post("/content/generate", json={"content_type": "sales"}, headers=headers)
        assert res.status_code == 502
        assert client.get("/content/", headers=headers).json()["records"] == []


# ---------------------------------------------------------------------------
# Tests — Strategy builder
# ---------------------------------------------------------------------------

class TestStrategyBuilder:
    def test_generate_step(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service", "ICP: CTOs at 10-50 person startups") as mock_ai:
            res = client.post("/strategy/icp", headers=headers)

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["type"] == "icp"
        assert data["title"] == "Ideal Customer Profile Strategy"
        assert data["status"] == "completed"
        assert data["priority"] == "high"
        assert mock_ai.call_args.kwargs["max_tokens"] == 1000

        strategy = client.get("/strategy/", headers=headers).json()
        assert strategy["completed_steps"] == 1
        assert strategy["total_steps"] == 4
        assert strategy["strategies"]["icp"]["content"] == "ICP: CTOs at 10-50 person startups"

    def test_full_strategy_fills_missing_steps(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service"):
            client.post("/strategy/pricing", headers=headers)
        with _mock_ai("suggestion_service") as mock_ai:
            res = client.post("/strategy/full", headers=headers)

        assert res.status_code == 200, res.text
        assert mock_ai.call_count == 3
        data = res.json()
        assert data["completed_steps"] == 4
        assert all(step["completed"] for step in data["steps"])
        assert [s["id"] for s in data["steps"]] == ["icp", "positioning", "pricing", "channels"]

    def test_unknown_step(self):
        _, headers = _auth_headers()
        assert client.post("/strategy/branding", headers=headers).status_code == 404

    def test_ai_failure(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service", side_effect=AIGenerationError("down")):
            res = client.post("/strategy/channels", headers=headers)
        assert res.status_code == 502


# ---------------------------------------------------------------------------
# Tests — Quick actions, agents and suggestions
# ---------------------------------------------------------------------------

class TestSuggestions:
    def test_quick_action(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service") as mock_ai:
            res = client.post("/suggestions/quick-actions/competitors", headers=headers)

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["title"] == "Competitor Analysis"
        assert data["status"] == "pending"
        assert data["priority"] == "high"
        assert mock_ai.call_args.kwargs["max_tokens"] == 800

    def test_agent_request(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service") as mock_ai:
            res = client.post("/suggestions/agents/lex", headers=headers)

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["type"] == "lex"
        assert data["title"] == "Legal Document Review"
        assert data["description"] == "Lex generated legal document review"
        assert data["priority"] == "medium"
        assert mock_ai.call_args.kwargs["max_tokens"] == 1000

    def test_unknown_action_and_agent(self):
        _, headers = _auth_headers()
        assert client.post("/suggestions/quick-actions/seo", headers=headers).status_code == 404
        assert client.post("/suggestions/agents/bob", headers=headers).status_code == 404

    def test_list_and_complete(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service"):
            for action in ["icp", "competitors", "outreach", "copy"]:
                client.post(f"/suggestions/quick-actions/{action}", headers=headers)
            for agent in ["maya", "sam"]:
                client.post(f"/suggestions/agents/{agent}", headers=headers)

        records = client.get("/suggestions/", headers=headers).json()["records"]
        assert len(records) == 5

        res = client.patch(f"/suggestions/{records[0]['id']}/complete", headers=headers)
        assert res.status_code == 200
        assert res.json()["status"] == "completed"

    def test_complete_other_users_suggestion(self):
        _, owner = _auth_headers()
        _, intruder = _auth_headers()
        with _mock_ai("suggestion_service"):
            sid = client.post("/suggestions/agents/alex", headers=owner).json()["id"]
        assert client.patch(f"/suggestions/{sid}/complete", headers=intruder).status_code == 404


# ---------------------------------------------------------------------------
# Tests — Launch checklist
# ---------------------------------------------------------------------------

class TestChecklist:
    def test_preset_progress(self):
        assert calculate_progress([]) == 37

    def test_all_items_ready(self):
        checklist = build_checklist(USER_CHECKABLE)
        assert checklist["progress"] == 100
        assert checklist["critical_remaining"] == 0
        assert checklist["ready_to_launch"] is True

    def test_get_checklist(self):
        _, headers = _auth_headers()
        data = client.get("/checklist/", headers=headers).json()
        assert data["progress"] == 37
        assert data["critical_remaining"] == 7
        assert data["ready_to_launch"] is False
        assert len(data["sections"]) == 6
        assert data["sections"][0]["completed"] == 3

    def test_toggle_raises_then_restores_progress(self):
        _, headers = _auth_headers()
        res = client.post("/checklist/items/bugs-fixed/toggle", headers=headers)
        assert res.status_code == 200
        assert res.json()["progress"] == 40
        assert res.json()["critical_remaining"] == 6

        assert client.get("/checklist/", headers=headers).json()["progress"] == 40

        res = client.post("/checklist/items/bugs-fixed/toggle", headers=headers)
        assert res.json()["progress"] == 37

    def test_preset_item_cannot_be_toggled(self):
        _, headers = _auth_headers()
        res = client.post("/checklist/items/mvp-complete/toggle", headers=headers)
        assert res.status_code == 400

    def test_unknown_item(self):
        _, headers = _auth_headers()
        assert client.post("/checklist/items/nope/toggle", headers=headers).status_code == 404


# ---------------------------------------------------------------------------
# Tests — Notifications
# ---------------------------------------------------------------------------

class TestNotifications:
    def test_welcome_notification_on_first_request(self):
        _, headers = _auth_headers()
        data = client.get("/notifications/", headers=headers).json()
        assert data["unread_count"] == 1
        assert data["records"][0]["title"] == "Welcome to Launchbase!"
        assert data["records"][0]["time_ago"] == "Just now"

    def test_mark_read_and_read_all(self):
        _, headers = _auth_headers()
        nid = client.get("/notifications/", headers=headers).json()["records"][0]["id"]

        res = client.patch(f"/notifications/{nid}/read", headers=headers)
        assert res.status_code == 200
        assert res.json()["read"] is True
        assert client.get("/notifications/", headers=headers).json()["unread_count"] == 0

        assert client.post("/notifications/read-all", headers=headers).json()["updated"] == 0

    def test_delete_only_own(self):
        _, owner = _auth_headers()
        _, intruder = _auth_headers()
        nid = client.get("/notifications/", headers=owner).json()["records"][0]["id"]

        assert client.delete(f"/notifications/{nid}", headers=intruder).status_code == 404
        assert client.patch(f"/notifications/{nid}/read", headers=intruder).status_code == 404
        assert client.delete(f"/notifications/{nid}", headers=owner).status_code == 204
        assert client.get("/notifications/", headers=owner).json()["records"] == []

    def test_time_ago_labels(self):
        now = datetime(2024, 5, 1, 12, 0, 0)
        assert time_ago(now - timedelta(seconds=30), now) == "Just now"
        assert time_ago(now - timedelta(minutes=5), now) == "5m ago"
        assert time_ago(now - timedelta(hours=3), now) == "3h ago"
        assert time_ago(now - timedelta(days=2, hours=1), now) == "2d ago"


# ---------------------------------------------------------------------------
# Tests — Integrations catalog & Replit connector
# ---------------------------------------------------------------------------

class TestIntegrations:
    def test_catalog_counts(self):
        _, headers = _auth_headers()
        data = client.get("/integrations/", headers=headers).json()
        assert data["total"] == 12
        assert data["connected"] == 0
        assert [c["id"] for c in data["categories"]] == ["development", "productivity", "payments", "marketing"]

    def test_connect_and_disconnect(self):
        _, headers = _auth_headers()
        res = client.post("/integrations/stripe/connect", headers=headers)
        assert res.status_code == 200
        assert res.json()["connected"] == 1
        assert res.json()["category_counts"]["payments"] == {"connected": 1, "total": 2}

        again = client.post("/integrations/stripe/connect", headers=headers).json()
        assert again["connected_integrations"] == ["stripe"]

        res = client.delete("/integrations/stripe/connect", headers=headers)
        assert res.json()["connected"] == 0

    def test_unknown_integration(self):
        _, headers = _auth_headers()
        assert client.post("/integrations/myspace/connect", headers=headers).status_code == 404


class TestReplitConnector:
    SCRAPED = ScrapeResult(
        metadata=PageMetadata(title="Todo"),
        extract=PageExtract(text="python flask app with /api/todos"),
    )

    def _mock_scrape(self):
        return patch(
            "launchbase.services.url_project_service.scrape_page",
            new=AsyncMock(return_value=self.SCRAPED),
        )

    def test_connect(self):
        _, headers = _auth_headers()
        with self._mock_scrape():
            res = client.post("/integrations/replit", json={"url": "https://todo.replit.app/"}, headers=headers)

        assert res.status_code == 201, res.text
        data = res.json()
        assert data["description"] == "Replit application"
        assert data["tech_stack"] == ["Python"]
        assert "Add server-side error tracking" in data["gtm_suggestions"]
        assert data["tracking_id"].startswith("todo_")
        # The Replit connector does not create an MVP connection
        assert client.get("/connections/", headers=headers).json()["records"] == []

    def test_rejects_non_replit_url(self):
        _, headers = _auth_headers()
        res = client.post("/integrations/replit", json={"url": "https://example.com"}, headers=headers)
        assert res.status_code == 400

    def test_duplicate(self):
        _, headers = _auth_headers()
        with self._mock_scrape():
            client.post("/integrations/replit", json={"url": "https://todo.replit.app"}, headers=headers)
            res = client.post("/integrations/replit", json={"url": "https://todo.replit.app"}, headers=headers)
        assert res.status_code == 409

    def test_list_stats_and_disconnect(self):
        _, headers = _auth_headers()
        with self._mock_scrape():
            pid = client.post(
                "/integrations/replit", json={"url": "https://todo.replit.app"}, headers=headers
            ).json()["id"]

        data = client.get("/integrations/replit", headers=headers).json()
        assert data["stats"]["connected_apps"] == 1
        assert data["stats"]["active_apps"] == 1
        assert data["stats"]["tech_stacks"] == 1
        assert data["stats"]["gtm_suggestions"] == len(data["records"][0]["gtm_suggestions"])

        assert client.delete(f"/integrations/replit/{pid}", headers=headers).status_code == 204
        assert client.get("/integrations/replit", headers=headers).json()["records"] == []


# ---------------------------------------------------------------------------
# Tests — Profile & dashboard
# ---------------------------------------------------------------------------

class TestProfile:
    def test_onboarding(self):
        _, headers = _auth_headers()
        assert client.get("/profile/", headers=headers).json()["onboarding_completed"] is False

        res = client.post(
            "/profile/onboarding",
            json={
                "product_name": "Shiplog",
                "product_description": "Changelogs for indie apps",
                "goals": "100 paying users",
                "timeline": "3 months",
            },
            headers=headers,
        )
        assert res.status_code == 200
        data = res.json()
        assert data["onboarding_completed"] is True
        assert data["product_name"] == "Shiplog"
        assert data["timeline"] == "3 months"

    def test_onboarding_requires_product_name(self):
        _, headers = _auth_headers()
        res = client.post("/profile/onboarding", json={"product_description": "x"}, headers=headers)
        assert res.status_code == 422


class TestDashboard:
    def test_empty_dashboard(self):
        _, headers = _auth_headers()
        data = client.get("/dashboard/", headers=headers).json()
        assert data["has_mvp"] is False
        assert data["latest_analysis"] is None
        assert [a["agent"] for a in data["recent_activity"]] == ["Sam", "Maya", "Lex", "Alex"]
        assert len(data["agents"]) == 4

    def test_activity_after_agent_request(self):
        _, headers = _auth_headers()
        with _mock_ai("suggestion_service"):
            client.post("/suggestions/agents/lex", headers=headers)

        data = client.get("/dashboard/", headers=headers).json()
        assert len(data["recent_activity"]) == 1
        activity = data["recent_activity"][0]
        assert activity["agent"] == "Lex"
        assert activity["action"] == "Generated Legal Document Review"
        assert activity["type"] == "legal"
        assert len(data["suggestions"]) == 1

    def test_classify_activity(self):
        assert classify_activity("Sent email campaign") == "outreach"
        assert classify_activity("Generated content calendar") == "content"
        assert classify_activity("Reviewed LEGAL terms") == "legal"
        assert classify_activity("Generated Ideal Customer Profile") == "analysis"


class TestGeneral:
    def test_root_and_health(self):
        assert client.get("/").json()["name"] == "Launchbase"
        assert client.get("/health").json()["status"] == "healthy"
