"""Service-layer exceptions. Routers translate these into HTTP responses."""

from __future__ import annotations


class ConnectionValidationError(ValueError):
    """Required connect input is missing or malformed. Raised before any write."""


class DuplicateConnectionError(Exception):
    """The user already has a URL project for this URL."""

    def __init__(self, url: str, message: str | None = None):
        self.url = url
        super().__init__(message or f"{url} is already connected to your account")


class AIGenerationError(RuntimeError):
    """The AI text-generation call failed after all attempts."""


class ScrapeError(RuntimeError):
    """The page could not be fetched or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to analyze {url}: {reason}")
