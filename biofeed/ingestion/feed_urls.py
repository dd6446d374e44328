"""Feed URL templates for the common profile section sources."""

from urllib.parse import quote_plus, urlparse


def normalize_feed_url(feed_url: str) -> str:
    return (feed_url or "").strip()


def youtube_channel_feed_url(channel_id: str) -> str:
    """Atom feed of a YouTube channel's uploads."""
    channel_id = channel_id.strip()
    if not channel_id:
        raise ValueError("channel_id is required")
    return f"https://www.youtube.com/feeds/videos.xml?channel_id={quote_plus(channel_id)}"


def _site_root(site_url: str) -> str:
    site_url = normalize_feed_url(site_url)
    if not site_url:
        raise ValueError("site URL is required")
    if not urlparse(site_url).scheme:
        site_url = f"https://{site_url}"
    return site_url.rstrip("/")


def blog_feed_url(site_url: str) -> str:
    """WordPress-style blog feed: the site URL plus /feed."""
    return f"{_site_root(site_url)}/feed"


def shopify_feed_url(store_url: str) -> str:
    """Shopify storefront product feed."""
    return f"{_site_root(store_url)}/collections/all.atom"
