"""Content generator — AI drafts for landing pages, emails, social and sales."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from ..agents.gtm_content import CONTENT_PROMPTS, build_content_prompt
from ..constants import CONTENT_MAX_TOKENS
from ..models.generated_content import GeneratedContent
from .openai_client import generate_text

_RECENT_LIMIT = 4


async def generate_content(
    db: Session,
    user_id,
    content_type: str,
    custom_input: Optional[str] = None,
) -> GeneratedContent:
    """Generate one draft and store it. Unknown types raise KeyError."""
    entry = CONTENT_PROMPTS[content_type]
    prompt = build_content_prompt(content_type, custom_input)

    print(f"✍️  [CONTENT] Generating {content_type}")
    text = await generate_text(prompt, max_tokens=CONTENT_MAX_TOKENS)

    record = GeneratedContent(
        user_id=user_id,
        content_type=content_type,
        title=entry["title"],
        content=text,
        prompt=(custom_input or "").strip(),
        status="draft",
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_recent_content(db: Session, user_id) -> List[GeneratedContent]:
    return (
        db.query(GeneratedContent)
        .filter(GeneratedContent.user_id == str(user_id))
        .order_by(GeneratedContent.created_at.desc())
        .limit(_RECENT_LIMIT)
        .all()
    )


def mark_content_used(db: Session, user_id, content_id) -> Optional[GeneratedContent]:
    record = (
        db.query(GeneratedContent)
        .filter(
            GeneratedContent.id == str(content_id),
            GeneratedContent.user_id == str(user_id),
        )
        .first()
    )
    if record is None:
        return None
    record.status = "used"
    db.commit()
    db.refresh(record)
    return record
