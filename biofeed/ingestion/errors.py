"""Feed normalization errors."""

from typing import Optional


class FeedError(Exception):
    """Base class for every normalization failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class MissingURL(FeedError):
    """No feed URL was supplied. Raised before any network access."""

    def __init__(self) -> None:
        super().__init__("feedUrl is required")


class FetchFailed(FeedError):
    """The feed URL could not be retrieved (DNS, timeout, non-2xx, bad URL)."""

    def __init__(self, feed_url: str, cause: BaseException) -> None:
        super().__init__(f"Failed to fetch feed {feed_url}: {cause}", cause)
        self.feed_url = feed_url


class ParseFailed(FeedError):
    """The fetched document is not a feed we can read."""

    def __init__(self, feed_url: str, cause: object) -> None:
        exc = cause if isinstance(cause, BaseException) else None
        super().__init__(f"Invalid RSS feed at {feed_url}: {cause}", exc)
        self.feed_url = feed_url
