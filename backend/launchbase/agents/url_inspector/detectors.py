"""Heuristic detectors over scraped page content.

Plain substring and regex checks — deterministic, side-effect free and
total over any string input. Check order is precedence order.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .schema import PageMetadata

DEFAULT_TECH_LABEL = "Web Application"
DEFAULT_FRAMEWORK = "Web Application"
UNKNOWN_LANGUAGE = "Unknown"
MAX_ENDPOINTS = 10

# (display label, marker substrings)
TECH_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("React", ("react",)),
    ("Vue.js", ("vue",)),
    ("Angular", ("angular",)),
    ("Next.js", ("next.js", "nextjs")),
    ("Node.js", ("express", "node.js")),
    ("Python", ("python", "flask", "django")),
    ("JavaScript", ("javascript",)),
    ("TypeScript", ("typescript",)),
    ("Tailwind CSS", ("tailwind",)),
    ("Bootstrap", ("bootstrap",)),
)

ENDPOINT_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"/api/[\w/]+"),
    re.compile(r"/v\d+/[\w/]+"),
    re.compile(r"/graphql"),
    re.compile(r"/webhook"),
)

# Short aliases ("js", "ts", "py", "go") match inside ordinary words; kept as-is.
LANGUAGE_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("JavaScript", ("javascript", "js")),
    ("TypeScript", ("typescript", "ts")),
    ("Python", ("python", "py")),
    ("Java", ("java",)),
    ("Go", ("go", "golang")),
)

FRAMEWORK_PRIORITY: Tuple[str, ...] = ("React", "Vue.js", "Angular", "Next.js", "Node.js")


def detect_tech_stack(metadata: Optional[PageMetadata], text: str) -> List[str]:
    """Map marker substrings in page text and the generator tag to display labels."""
    generator = (metadata.generator if metadata else None) or ""
    content = f"{text or ''} {generator}".lower()

    stack: List[str] = []
    for label, markers in TECH_MARKERS:
        if label not in stack and any(marker in content for marker in markers):
            stack.append(label)
    return stack or [DEFAULT_TECH_LABEL]


def extract_endpoints(text: str) -> List[str]:
    """Collect API-looking paths, deduplicated in first-seen order, capped at 10."""
    content = text or ""
    found: List[str] = []
    for pattern in ENDPOINT_PATTERNS:
        found.extend(pattern.findall(content))
    return list(dict.fromkeys(found))[:MAX_ENDPOINTS]


def detect_language(text: str) -> str:
    content = (text or "").lower()
    for language, markers in LANGUAGE_MARKERS:
        if any(marker in content for marker in markers):
            return language
    return UNKNOWN_LANGUAGE


def detect_framework(tech_stack: Sequence[str]) -> str:
    for framework in FRAMEWORK_PRIORITY:
        if framework in tech_stack:
            return framework
    return DEFAULT_FRAMEWORK
