"""Centralized OpenAI client — plain-text generation for every AI feature.

All services MUST use `generate_text()` from this module.
This ensures:
  - Model, temperature, timeout, and token limits are read from env.
  - Optional web-search grounding via Tavily passages.
  - Bounded retry with exponential backoff on timeouts and retryable
    HTTP codes, then AIGenerationError.
  - Consistent logging across all callers.
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import Any, Dict, List, Optional

import httpx

from .errors import AIGenerationError
from .http_client import RetryConfig, backoff_delay, get_timeout, is_retryable_error
from .web_search import search_web

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants, read from environment with safe defaults
# ---------------------------------------------------------------------------
_OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"

_SYSTEM_PROMPT = (
    "You are Launchbase, a go-to-market assistant for founders launching an MVP. "
    "Give specific, actionable recommendations in clearly labelled sections. "
    "Do not invent traction, revenue, or user numbers."
)


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def get_openai_key() -> str:
    """Read OPENAI_API_KEY from the environment. Raises EnvironmentError if missing."""
    key = os.getenv("OPENAI_API_KEY", "").strip()
    if not key:
        print("⚠️  [OPENAI] API key missing (OPENAI_API_KEY)")
        raise EnvironmentError("OPENAI_API_KEY environment variable not set")
    return key


def get_openai_model() -> str:
    """Read OPENAI_MODEL from the environment (default: gpt-4.1)."""
    return os.getenv("OPENAI_MODEL", "gpt-4.1").strip()


def _get_temperature() -> float:
    return _env_float("OPENAI_TEMPERATURE", 0.7)


def _get_default_max_tokens() -> int:
    return _env_int("OPENAI_MAX_COMPLETION_TOKENS", 4000)


def build_messages(prompt: str, passages: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """System + user messages; grounding passages go into the system message."""
    system = _SYSTEM_PROMPT
    if passages:
        context = "\n".join(f"- {p}" for p in passages)
        system += (
            "\n\nWeb research results (use them where relevant, cite no URLs):\n"
            f"{context}"
        )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": prompt},
    ]


def build_payload(
    *,
    model: str,
    messages: List[Dict[str, str]],
    max_tokens: int,
    temperature: float,
) -> Dict[str, Any]:
    """Build an OpenAI chat completions payload (plain text, no JSON mode)."""
    payload: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": temperature,
    }

    print(f"🧠 [OPENAI] Model: {model}")
    print(f"🧠 [OPENAI] Tokens requested: {max_tokens}")

    return payload


async def generate_text(
    prompt: str,
    *,
    max_tokens: int = 0,
    search_grounding: bool = False,
    search_query: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> str:
    """Generate a single non-streaming text completion.

    Parameters
    ----------
    prompt : str
        The user prompt.
    max_tokens : int
        Token limit for the response. 0 = use env default.
    search_grounding : bool
        Run a web search first and pass the passages as context.
    search_query : str, optional
        Query for grounding (default: the first 380 chars of the prompt).

    Returns
    -------
    str
        The generated text, stripped.

    Raises
    ------
    AIGenerationError
        Missing API key, non-retryable error, or all attempts exhausted.
    """
    try:
        if api_key is None:
            api_key = get_openai_key()
    except EnvironmentError as exc:
        raise AIGenerationError(str(exc)) from exc
    if model is None:
        model = get_openai_model()
    if max_tokens <= 0:
        max_tokens = _get_default_max_tokens()

    passages: List[str] = []
    if search_grounding:
        query = search_query or " ".join(prompt.split())[:380]
        passages = await search_web(query)

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = build_payload(
        model=model,
        messages=build_messages(prompt, passages),
        max_tokens=max_tokens,
        temperature=_get_temperature(),
    )

    max_retries = RetryConfig.MAX_RETRIES
    last_error = "no attempt made"

    for attempt in range(max_retries + 1):
        if attempt > 0:
            delay = backoff_delay(attempt - 1)
            print(f"🔄 [OPENAI] Retrying in {delay:.1f}s...")
            await asyncio.sleep(delay)

        t0 = time.time()
        try:
            print(f"🧠 [OPENAI] Calling {model} (attempt {attempt + 1}/{max_retries + 1})")
            async with httpx.AsyncClient(timeout=get_timeout("openai")) as client:
                response = await client.post(_OPENAI_API_URL, headers=headers, json=payload)
        except httpx.TimeoutException:
            duration = time.time() - t0
            print(f"❌ [OPENAI] Timeout ({duration:.1f}s)")
            last_error = "request timed out"
            continue
        except httpx.HTTPError as exc:
            logger.warning("OpenAI transport error: %s", exc)
            last_error = f"transport error: {exc}"
            continue

        duration = time.time() - t0
        print(f"📦 [OPENAI] HTTP {response.status_code} ({duration:.1f}s)")

        if response.status_code != 200:
            error_body = response.text[:400]
            print(f"⚠️  [OPENAI] Error response: {error_body}")
            last_error = f"HTTP {response.status_code}"
            if is_retryable_error(response.status_code):
                continue
            raise AIGenerationError(f"OpenAI request failed: {last_error}")

        try:
            data = response.json()
        except ValueError:
            print(f"⚠️  [OPENAI] Non-JSON response body (attempt {attempt + 1})")
            last_error = "invalid JSON response"
            continue

        usage = data.get("usage")
        if usage:
            print(f"🧠 [OPENAI] Tokens used: prompt={usage.get('prompt_tokens', '?')}, completion={usage.get('completion_tokens', '?')}, total={usage.get('total_tokens', '?')}")

        try:
            text = (data["choices"][0]["message"]["content"] or "").strip()
        except (KeyError, IndexError, TypeError):
            text = ""

        if not text:
            print(f"⚠️  [OPENAI] Empty response (attempt {attempt + 1})")
            last_error = "empty response"
            continue

        print(f"🧠 [OPENAI] Success — {len(text)} chars")
        return text

    raise AIGenerationError(f"OpenAI request failed after {max_retries + 1} attempts: {last_error}")
