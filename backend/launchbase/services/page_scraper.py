"""Page scraper — fetches a deployed app and extracts metadata + visible text."""

from __future__ import annotations

import logging
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from ..agents.url_inspector.schema import PageExtract, PageMetadata, ScrapeResult
from .errors import ScrapeError
from .http_client import get_timeout

logger = logging.getLogger(__name__)

_USER_AGENT = "Mozilla/5.0 (compatible; LaunchbaseBot/0.1; +https://launchbase.ai)"


def _meta_content(soup: BeautifulSoup, *, name: str | None = None, prop: str | None = None) -> str | None:
    attrs = {"name": name} if name else {"property": prop}
    tag = soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"].strip()
    return None


def parse_page(html: str, base_url: str) -> ScrapeResult:
    """Parse raw HTML into metadata and visible text."""
    soup = BeautifulSoup(html, "html.parser")

    title = _meta_content(soup, prop="og:title")
    if not title and soup.title and soup.title.string:
        title = soup.title.string.strip()

    description = _meta_content(soup, name="description") or _meta_content(soup, prop="og:description")
    generator = _meta_content(soup, name="generator")

    favicon = None
    for link in soup.find_all("link", href=True):
        rels = [r.lower() for r in link.get("rel", [])]
        if "icon" in rels:
            favicon = urljoin(base_url, link["href"])
            break

    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text(separator=" ", strip=True)

    return ScrapeResult(
        metadata=PageMetadata(
            title=title or None,
            description=description,
            favicon=favicon,
            generator=generator,
        ),
        extract=PageExtract(text=text),
    )


async def scrape_page(url: str) -> ScrapeResult:
    """Fetch ``url`` and parse it. Raises ScrapeError on any transport or HTTP failure."""
    print(f"🌐 [SCRAPE] Fetching {url}")
    try:
        async with httpx.AsyncClient(
            timeout=get_timeout("scrape"),
            follow_redirects=True,
            headers={"User-Agent": _USER_AGENT},
        ) as client:
            response = await client.get(url)
    except httpx.TimeoutException as exc:
        raise ScrapeError(url, "request timed out") from exc
    except httpx.HTTPError as exc:
        logger.warning("Scrape transport error for %s: %s", url, exc)
        raise ScrapeError(url, str(exc)) from exc

    if response.status_code >= 400:
        raise ScrapeError(url, f"HTTP {response.status_code}")

    result = parse_page(response.text, str(response.url))
    print(f"📦 [SCRAPE] {url}: title={result.metadata.title!r}, {len(result.extract.text)} chars")
    return result
