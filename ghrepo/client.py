import asyncio
import logging
from typing import List, Tuple

import aiohttp
from pydantic import ValidationError

from . import __version__
from .domain import (
    Repository,
    transform_github_response,
    ApiError,
    TransportError,
    ParseError,
    RateLimitError,
)
from .models import parse_page

logger = logging.getLogger(__name__)

# Sent on every GET; kept for compatibility with the original tool
CONTENT_TYPE = "application/json; charset=utf-8"
NEXT_RELATION = 'rel="next"'


class GitHubClient:
    """
    Client for paginated GitHub REST collection endpoints.

    Pages are requested one at a time with a ``page`` query parameter and
    followed for as long as the ``Link`` header advertises a next page.
    Payloads are converted to domain models before leaving the client.
    """

    def __init__(self):
        self.headers = {
            "Content-Type": CONTENT_TYPE,
            "User-Agent": f"ghrepo/{__version__}",
        }
        self._session = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(headers=self.headers)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._session:
            await self._session.close()

    async def fetch_page(self, url: str, page: int) -> Tuple[List[Repository], bool]:
        """
        Fetch one page of the listing.

        Returns the page's repositories and whether a next page is advertised.
        The status code is not inspected; a body that is not a JSON array of
        repositories raises ParseError, or RateLimitError when the body says
        the rate limit was hit.
        """
        if not self._session:
            raise RuntimeError("Client must be used as async context manager")

        try:
            async with self._session.get(url, params={"page": page}) as resp:
                body = await resp.read()
                link = resp.headers.get("Link", "")
                logger.debug(f"📄 Page {page}: HTTP {resp.status}, {len(body)} bytes")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"🔌 Request for page {page} of {url} failed: {e}")
            raise TransportError(f"GET {url} page {page} failed: {e}") from e

        try:
            payloads = parse_page(body)
        except ValidationError as e:
            text = body.decode("utf-8", errors="replace")
            if RateLimitError.MARKER in text:
                raise RateLimitError(
                    f"JSON decode failed likely because of: {RateLimitError.MARKER!r} "
                    f"json error: {e}"
                ) from e
            raise ParseError(f"JSON decode of page {page} failed: {e}") from e

        repositories = [transform_github_response(p) for p in payloads]
        return repositories, NEXT_RELATION in link

    async def fetch_all(self, url: str) -> List[Repository]:
        """Fetch every page of the listing, concatenated in page order."""
        repositories: List[Repository] = []
        page = 0
        while True:
            page += 1
            try:
                batch, has_next = await self.fetch_page(url, page)
            except ApiError as e:
                logger.error(f"❌ Fetching page {page} of {url} failed: {e}")
                raise

            repositories.extend(batch)
            logger.info(f"🔍 Page {page} returned {len(batch)} repositories")

            if not has_next:
                break

        logger.info(f"📊 Fetched {len(repositories)} repositories in {page} pages")
        return repositories
