"""Per-user profile: onboarding answers, connected integrations, checklist state.

The profile row is created lazily on first access and committed on every
mutation.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..constants import INTEGRATION_CATEGORIES, INTEGRATIONS_BY_ID
from ..models.user_profile import UserProfile

_ONBOARDING_FIELDS = (
    "product_name",
    "product_description",
    "target_audience",
    "problem_solving",
    "goals",
    "timeline",
)


def get_or_create_profile(db: Session, user_id) -> UserProfile:
    profile = db.query(UserProfile).filter(UserProfile.user_id == str(user_id)).first()
    if profile is None:
        profile = UserProfile(user_id=user_id)
        db.add(profile)
        db.commit()
        db.refresh(profile)
    return profile


def _load_ids(raw: str | None) -> List[str]:
    try:
        value = json.loads(raw or "[]")
    except ValueError:
        return []
    return [str(v) for v in value] if isinstance(value, list) else []


def get_checked_items(profile: UserProfile) -> List[str]:
    return _load_ids(profile.checked_items_json)


def set_checked_items(db: Session, profile: UserProfile, item_ids: List[str]) -> UserProfile:
    profile.checked_items_json = json.dumps(item_ids)
    db.commit()
    db.refresh(profile)
    return profile


def complete_onboarding(db: Session, user_id, answers: Dict[str, Any]) -> UserProfile:
    """Store the onboarding answers and flag onboarding as done."""
    profile = get_or_create_profile(db, user_id)
    for field in _ONBOARDING_FIELDS:
        if field in answers:
            setattr(profile, field, answers[field])
    profile.onboarding_completed = True
    db.commit()
    db.refresh(profile)
    print(f"✅ [PROFILE] Onboarding completed for {user_id}")
    return profile


# ── Integrations catalog ─────────────────────────────────────────────────

def get_connected_integrations(profile: UserProfile) -> List[str]:
    return _load_ids(profile.connected_integrations_json)


def connect_integration(db: Session, user_id, integration_id: str) -> UserProfile:
    """Add a catalog integration. Unknown ids raise KeyError; repeats are no-ops."""
    if integration_id not in INTEGRATIONS_BY_ID:
        raise KeyError(integration_id)
    profile = get_or_create_profile(db, user_id)
    connected = get_connected_integrations(profile)
    if integration_id not in connected:
        connected.append(integration_id)
        profile.connected_integrations_json = json.dumps(connected)
        db.commit()
        db.refresh(profile)
    return profile


def disconnect_integration(db: Session, user_id, integration_id: str) -> UserProfile:
    if integration_id not in INTEGRATIONS_BY_ID:
        raise KeyError(integration_id)
    profile = get_or_create_profile(db, user_id)
    connected = [i for i in get_connected_integrations(profile) if i != integration_id]
    profile.connected_integrations_json = json.dumps(connected)
    db.commit()
    db.refresh(profile)
    return profile


def integration_counts(connected: List[str]) -> Dict[str, Any]:
    """Connected/total overall and per category."""
    connected_set = set(connected)
    categories: Dict[str, Dict[str, int]] = {}
    for category in INTEGRATION_CATEGORIES:
        ids = [i["id"] for i in category["integrations"]]
        categories[category["id"]] = {
            "connected": sum(1 for i in ids if i in connected_set),
            "total": len(ids),
        }
    return {
        "connected": sum(c["connected"] for c in categories.values()),
        "total": sum(c["total"] for c in categories.values()),
        "categories": categories,
    }
