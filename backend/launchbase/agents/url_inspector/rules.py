"""GTM suggestion rules and tracking-snippet template for URL projects."""

from __future__ import annotations

import re
import time
from typing import List, Optional, Sequence
from urllib.parse import urlparse

# ── GTM suggestion rule table ─────────────────────────────────────────
# Applied in declaration order. Conditional groups never overlap.

BASELINE_SUGGESTIONS: tuple[str, ...] = (
    "Add Google Analytics tracking",
    "Implement user feedback collection",
    "Set up error monitoring",
)

SPA_SUGGESTIONS: tuple[str, ...] = (
    "Add performance monitoring for SPA",
    "Implement A/B testing framework",
)

API_SUGGESTIONS: tuple[str, ...] = (
    "Monitor API performance and usage",
    "Set up API rate limiting alerts",
)

BACKEND_SUGGESTIONS: tuple[str, ...] = (
    "Add server-side error tracking",
    "Implement health check endpoints",
)

GROWTH_SUGGESTIONS: tuple[str, ...] = (
    "Create landing page for user acquisition",
    "Set up email capture for early users",
    "Implement user onboarding flow",
    "Add social sharing capabilities",
)

_SPA_FRAMEWORKS = ("React", "Vue.js")
_BACKEND_RUNTIMES = ("Node.js", "Python")


def generate_gtm_suggestions(tech_stack: Sequence[str], endpoints: Sequence[str]) -> List[str]:
    """Build the ordered advisory list for a detected stack and endpoint set."""
    suggestions: List[str] = list(BASELINE_SUGGESTIONS)

    if any(tech in tech_stack for tech in _SPA_FRAMEWORKS):
        suggestions.extend(SPA_SUGGESTIONS)

    if endpoints:
        suggestions.extend(API_SUGGESTIONS)

    if any(tech in tech_stack for tech in _BACKEND_RUNTIMES):
        suggestions.extend(BACKEND_SUGGESTIONS)

    suggestions.extend(GROWTH_SUGGESTIONS)
    return suggestions


# ── Tracking snippet ──────────────────────────────────────────────────

TRACKING_SCRIPT_URL = "https://cdn.launchbase.ai/track.js"

_TRACKING_TEMPLATE = """\
<!-- Launchbase GTM Tracking -->
<script>
  (function(l,a,u,n,c,h,b,a,s,e) {{
    l[c] = l[c] || function() {{ (l[c].q = l[c].q || []).push(arguments) }};
    h = a.createElement(u); b = a.getElementsByTagName(u)[0];
    h.async = 1; h.src = n; b.parentNode.insertBefore(h, b);
  }})(window, document, 'script', '{script_url}', 'launchbase');

  launchbase('init', '{project_id}');
  launchbase('track', 'pageview');
</script>
<!-- End Launchbase GTM Tracking -->"""


def generate_tracking_code(project_id: str) -> str:
    """Render the tracking snippet. The id is embedded verbatim, unescaped."""
    return _TRACKING_TEMPLATE.format(script_url=TRACKING_SCRIPT_URL, project_id=project_id)


def derive_tracking_id(url: str, now_ms: Optional[int] = None) -> str:
    """Opaque project id: last URL path segment (or first host label) plus a ms timestamp."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    slug = url.rstrip().split("/")[-1]
    if not slug:
        host = urlparse(url).netloc or url.split("//")[-1]
        slug = host.split(".")[0]
    return f"{slug or 'unknown'}_{now_ms}"


# ── Replit URL patterns ───────────────────────────────────────────────

REPLIT_URL_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^https://[\w-]+\.replit\.app"),
    re.compile(r"^https://replit\.com/@[\w-]+/[\w-]+"),
    re.compile(r"^https://[\w-]+--[\w-]+\.repl\.co"),
)


def is_replit_url(url: str) -> bool:
    return any(pattern.match(url) for pattern in REPLIT_URL_PATTERNS)
