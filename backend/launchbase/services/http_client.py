"""
Outbound HTTP configuration

Timeout presets and retry policy shared by the AI, search and scrape
collaborators.
"""

import os

import httpx


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


# Timeout configurations (in seconds)
class Timeouts:
    """Timeout presets for external services."""
    TAVILY = 15.0       # Web search grounding
    SCRAPE = 15.0       # Page fetch for URL projects
    OPENAI = 40.0       # Chat completions (long-form text)


# Retry configuration
class RetryConfig:
    """Bounded retry with exponential backoff for idempotent calls."""
    MAX_RETRIES = 1
    INITIAL_BACKOFF = 0.5  # seconds
    MAX_BACKOFF = 4.0      # seconds

    # Non-retryable status codes
    NON_RETRYABLE_CODES = {400, 401, 403, 404, 422}

    # Retryable status codes
    RETRYABLE_CODES = {408, 429, 500, 502, 503, 504}


def get_timeout(service: str) -> httpx.Timeout:
    """Get timeout configuration for a service, honouring env overrides."""
    timeouts = {
        "tavily": Timeouts.TAVILY,
        "scrape": _env_float("SCRAPE_TIMEOUT", Timeouts.SCRAPE),
        "openai": _env_float("OPENAI_REQUEST_TIMEOUT", Timeouts.OPENAI),
    }
    seconds = timeouts.get(service.lower(), 10.0)
    return httpx.Timeout(seconds, connect=5.0)


def backoff_delay(attempt: int) -> float:
    """Delay before retry number ``attempt`` (0-based)."""
    return min(RetryConfig.INITIAL_BACKOFF * (2 ** attempt), RetryConfig.MAX_BACKOFF)


def is_retryable_error(status_code: int) -> bool:
    """Check if an HTTP error is retryable."""
    return status_code in RetryConfig.RETRYABLE_CODES
