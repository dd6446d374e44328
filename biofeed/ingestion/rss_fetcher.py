"""Feed fetcher: one GET, one parse pass, one normalization pass."""

import asyncio
import logging
from typing import List, Optional

import feedparser
import httpx
import pendulum
from rich.console import Console

from ..config import FetchConfig, SourceConfig
from .errors import FeedError, FetchFailed, MissingURL, ParseFailed
from .models import FeedRequest, FeedResponse, NormalizedFeed
from .normalizer import detect_feed_type, extract_feed_title, normalize_entries

console = Console()
logger = logging.getLogger(__name__)


def resolve_max_items(max_items: Optional[int], default: int = 10, cap: int = 50) -> int:
    """Absent or non-positive values fall back to `default`; large ones are capped."""
    if max_items is None or max_items < 1:
        return default
    return min(max_items, cap)


class RSSFetcher:
    """Fetch, parse and normalize syndication feeds."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize RSS fetcher."""
        self.config = config or FetchConfig()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
            transport=self.transport,
        )

    async def _download(self, feed_url: str) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.get(feed_url)
                response.raise_for_status()
                return response
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailed(feed_url, e) from e

    def _parse(self, feed_url: str, response: httpx.Response) -> feedparser.FeedParserDict:
        parsed = feedparser.parse(
            response.content,
            response_headers={"content-location": str(response.url)},
        )

        # feedparser leaves version empty when no RSS/Atom root was recognised
        if not parsed.get("version"):
            raise ParseFailed(feed_url, parsed.get("bozo_exception") or "unrecognised feed format")

        # a malformed document fails as a whole, even if some entries were recovered
        if parsed.get("bozo"):
            exc = parsed.get("bozo_exception")
            if not isinstance(exc, feedparser.CharacterEncodingOverride):
                raise ParseFailed(feed_url, exc or "malformed feed")

        return parsed

    async def normalize(self, feed_url: Optional[str], max_items: Optional[int] = None) -> NormalizedFeed:
        """
        Fetch `feed_url` and normalize its first `max_items` entries.

        Raises:
            MissingURL: feed_url is empty; nothing is fetched.
            FetchFailed: transport failure or non-2xx status.
            ParseFailed: the document is not a recognizable feed.
        """
        feed_url = (feed_url or "").strip()
        if not feed_url:
            raise MissingURL()

        limit = resolve_max_items(max_items, self.config.default_max_items, self.config.max_items_cap)

        response = await self._download(feed_url)
        parsed = self._parse(feed_url, response)

        feed_title = extract_feed_title(parsed)
        items = normalize_entries(parsed.entries, feed_title, limit, now=pendulum.now("UTC"))

        logger.debug("Normalized %d item(s) from %s", len(items), feed_url)
        return NormalizedFeed(
            feed_title=feed_title,
            feed_type=detect_feed_type(feed_url, parsed),
            items=items,
        )

    def normalize_sync(self, feed_url: Optional[str], max_items: Optional[int] = None) -> NormalizedFeed:
        """Synchronous wrapper for normalize."""
        return asyncio.run(self.normalize(feed_url, max_items))

    async def fetch_feed(self, request: FeedRequest) -> FeedResponse:
        """Normalize a feed request into the success/failure envelope."""
        try:
            feed = await self.normalize(request.feed_url, request.max_items)
        except FeedError as e:
            logger.warning("RSS fetch error: %s", e.message)
            return FeedResponse.failed(e.message)
        return FeedResponse.ok(feed)

    async def fetch_all_feeds(self, sources: List[SourceConfig]) -> List[FeedResponse]:
        """Fetch all enabled sources concurrently, each as its own request."""
        enabled_sources = [s for s in sources if s.enabled]

        if not enabled_sources:
            return []

        semaphore = asyncio.Semaphore(self.config.max_concurrent)

        async def fetch_with_semaphore(source: SourceConfig) -> FeedResponse:
            async with semaphore:
                return await self.fetch_feed(FeedRequest(feed_url=source.url, max_items=source.max_items))

        tasks = [fetch_with_semaphore(source) for source in enabled_sources]
        return list(await asyncio.gather(*tasks))

    def fetch_feeds_sync(self, sources: List[SourceConfig]) -> List[FeedResponse]:
        """Synchronous wrapper for fetch_all_feeds."""
        return asyncio.run(self.fetch_all_feeds(sources))


def print_feed_summary(sources: List[SourceConfig], results: List[FeedResponse]) -> None:
    """Print summary of feed check results. `sources` are the enabled ones, in order."""
    total_items = sum(len(r.items) for r in results)
    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print("\n[bold]Feed Summary:[/bold]")
    console.print(f"  Sources fetched: {len(results)}")
    console.print(f"  Successful: [green]{successful}[/green]")
    console.print(f"  Failed: [red]{failed}[/red]")
    console.print(f"  Total items: {total_items}")

    if failed > 0:
        console.print("\n[bold red]Failed feeds:[/bold red]")
        for source, result in zip(sources, results):
            if not result.success:
                console.print(f"  - {source.name}: {result.error}")
