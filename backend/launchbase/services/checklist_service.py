"""Launch checklist — fixed sections, per-user checked items, launch readiness."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Set

from sqlalchemy.orm import Session

from ..constants import CHECKLIST_SECTIONS
from .profile_service import get_checked_items, get_or_create_profile, set_checked_items

_ITEMS_BY_ID: Dict[str, dict] = {
    item["id"]: item
    for section in CHECKLIST_SECTIONS
    for item in section["items"]
}


class ChecklistItemLocked(ValueError):
    """Preset-completed items cannot be toggled."""


def _is_done(item: dict, checked: Set[str]) -> bool:
    return item["completed"] or item["id"] in checked


def calculate_progress(checked: Iterable[str]) -> int:
    """Completed share of all items as a whole percent, halves rounded up."""
    checked = set(checked)
    total = len(_ITEMS_BY_ID)
    done = sum(1 for item in _ITEMS_BY_ID.values() if _is_done(item, checked))
    return int(math.floor(done / total * 100 + 0.5))


def critical_remaining(checked: Iterable[str]) -> int:
    checked = set(checked)
    return sum(
        1 for item in _ITEMS_BY_ID.values()
        if item["critical"] and not _is_done(item, checked)
    )


def build_checklist(checked_ids: Iterable[str]) -> Dict[str, Any]:
    """Checklist view with per-item state and the readiness summary."""
    checked = set(checked_ids)
    sections: List[Dict[str, Any]] = []
    for section in CHECKLIST_SECTIONS:
        items = [
            {
                "id": item["id"],
                "title": item["title"],
                "critical": item["critical"],
                "preset": item["completed"],
                "completed": _is_done(item, checked),
            }
            for item in section["items"]
        ]
        sections.append({
            "id": section["id"],
            "title": section["title"],
            "completed": sum(1 for i in items if i["completed"]),
            "total": len(items),
            "items": items,
        })

    progress = calculate_progress(checked)
    remaining = critical_remaining(checked)
    return {
        "sections": sections,
        "progress": progress,
        "critical_remaining": remaining,
        "ready_to_launch": progress == 100 and remaining == 0,
    }


def get_checklist(db: Session, user_id) -> Dict[str, Any]:
    profile = get_or_create_profile(db, user_id)
    return build_checklist(get_checked_items(profile))


def toggle_item(db: Session, user_id, item_id: str) -> Dict[str, Any]:
    """Flip one user-checkable item.

    Raises KeyError for unknown ids and ChecklistItemLocked for preset items.
    """
    item = _ITEMS_BY_ID[item_id]
    if item["completed"]:
        raise ChecklistItemLocked(f"'{item['title']}' is already complete")

    profile = get_or_create_profile(db, user_id)
    checked = get_checked_items(profile)
    if item_id in checked:
        checked.remove(item_id)
    else:
        checked.append(item_id)
    set_checked_items(db, profile, checked)
    return build_checklist(checked)
