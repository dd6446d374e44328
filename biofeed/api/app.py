"""HTTP surface for the feed normalizer."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import ConfigModel
from ..ingestion import FeedCache, FeedError, FeedRequest, FeedResponse, RSSFetcher, resolve_max_items

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=FeedResponse.failed(message).to_payload())


def create_app(
    config: Optional[ConfigModel] = None,
    fetcher: Optional[RSSFetcher] = None,
) -> FastAPI:
    """Build the FastAPI application."""
    config = config or ConfigModel()
    fetcher = fetcher or RSSFetcher(config.fetch)
    cache = FeedCache(config.cache.ttl_seconds, max_entries=config.cache.max_entries)

    app = FastAPI(title="biofeed", description="RSS/Atom feed normalizer")
    app.state.fetcher = fetcher
    app.state.cache = cache

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.post("/fetch-rss")
    async def fetch_rss(request: Request) -> JSONResponse:
        """Normalize the feed named in the JSON body."""
        try:
            body = await request.json()
        except ValueError:
            logger.warning("RSS fetch error: unreadable request body")
            return _failure("Invalid JSON request body")

        if not isinstance(body, dict):
            logger.warning("RSS fetch error: request body is not an object")
            return _failure("Request body must be a JSON object")

        feed_request = FeedRequest.model_validate(body)
        # the fetcher applies its own limits; key the cache on the same value
        limit = resolve_max_items(
            feed_request.max_items,
            fetcher.config.default_max_items,
            fetcher.config.max_items_cap,
        )

        if cache.enabled and feed_request.feed_url:
            cached = cache.get(feed_request.feed_url, limit)
            if cached is not None:
                return JSONResponse(content=FeedResponse.ok(cached).to_payload())

        try:
            feed = await fetcher.normalize(feed_request.feed_url, limit)
        except FeedError as e:
            logger.warning("RSS fetch error: %s", e.message)
            return _failure(e.message)

        cache.set(feed_request.feed_url, limit, feed)
        return JSONResponse(content=FeedResponse.ok(feed).to_payload())

    return app
