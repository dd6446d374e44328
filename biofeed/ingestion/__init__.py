"""Feed fetching and normalization."""

from .cache import FeedCache
from .errors import FeedError, FetchFailed, MissingURL, ParseFailed
from .models import FeedRequest, FeedResponse, NormalizedFeed, NormalizedItem
from .rss_fetcher import RSSFetcher, print_feed_summary, resolve_max_items

__all__ = [
    "RSSFetcher",
    "FeedCache",
    "FeedRequest",
    "FeedResponse",
    "NormalizedFeed",
    "NormalizedItem",
    "FeedError",
    "MissingURL",
    "FetchFailed",
    "ParseFailed",
    "print_feed_summary",
    "resolve_max_items",
]
