"""Tavily integration — web-search grounding for AI analysis.

Returns clean text passages only. Missing key or a failed search yields an
empty list; grounding is best-effort and never blocks generation.
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, List

import httpx

from .http_client import get_timeout

# ---------------------------------------------------------------------------
# Tavily API configuration
# ---------------------------------------------------------------------------
_TAVILY_API_URL = "https://api.tavily.com/search"
_MAX_RESULTS = 5
_MIN_PASSAGE_LENGTH = 50
_MAX_PASSAGE_LENGTH = 600


def _get_tavily_key() -> str:
    """Read the Tavily API key from the environment."""
    key = os.getenv("TAVILY_API_KEY", "").strip()
    if not key:
        raise EnvironmentError("TAVILY_API_KEY environment variable not set")
    return key


def clean_passage(text: str) -> str:
    """Remove ads, navigation fragments, and collapse whitespace."""
    text = re.sub(r"(Subscribe|Sign up|Log in|Cookie|Advertisement)[\s\S]{0,80}", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\s+", " ", text).strip()
    return text[:_MAX_PASSAGE_LENGTH]


async def _search_tavily(api_key: str, query: str) -> List[Dict[str, Any]]:
    """Execute a single Tavily search and return result dicts."""
    payload = {
        "api_key": api_key,
        "query": query,
        "search_depth": "basic",
        "max_results": _MAX_RESULTS,
        "include_answer": False,
    }
    try:
        async with httpx.AsyncClient(timeout=get_timeout("tavily")) as client:
            response = await client.post(_TAVILY_API_URL, json=payload)
    except httpx.TimeoutException:
        print(f"⚠️ [SEARCH] Tavily timeout for {query!r}")
        return []
    except httpx.HTTPError as exc:
        print(f"❌ [SEARCH] Tavily error for {query!r}: {exc}")
        return []

    if response.status_code != 200:
        print(f"⚠️ [SEARCH] Tavily HTTP {response.status_code} for {query!r}")
        return []

    results = response.json().get("results", [])
    print(f"📦 [SEARCH] Tavily: {len(results)} results for {query!r}")
    return results


async def search_web(query: str) -> List[str]:
    """Return cleaned, URL-deduplicated passages for ``query``."""
    try:
        api_key = _get_tavily_key()
    except EnvironmentError:
        print("⚠️  [SEARCH] Skipping grounding — TAVILY_API_KEY not set")
        return []

    passages: List[str] = []
    seen_urls: set[str] = set()
    for result in await _search_tavily(api_key, query):
        url = result.get("url", "")
        if url in seen_urls:
            continue
        seen_urls.add(url)
        cleaned = clean_passage(result.get("content", "") or "")
        if len(cleaned) >= _MIN_PASSAGE_LENGTH:
            passages.append(cleaned)

    print(f"✅ [SEARCH] {len(passages)} grounding passages")
    return passages
