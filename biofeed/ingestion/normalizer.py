"""Normalization of parsed feed entries into NormalizedItem.

Every feed dialect carries its fields under different names (RSS 2.0 items,
Atom entries, media RSS, iTunes podcast extensions, YouTube's media:group).
feedparser already maps most of them onto a common vocabulary; the functions
below pick the first usable value for each output field and never raise on a
missing one.
"""

import calendar
import re
from html import unescape
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

import pendulum
from pendulum import DateTime

from .models import UNTITLED, NormalizedItem

_HTML_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

_PODCAST_NAMESPACES = (
    "http://www.itunes.com/dtds/podcast-1.0.dtd",
    "https://podcastindex.org/namespace/1.0",
)
_BLOG_GENERATORS = ("wordpress", "blogger", "ghost", "substack", "medium", "jekyll", "hugo", "tumblr")


def _text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for anything blank or non-string."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def strip_html(value: str) -> str:
    """Turn an HTML fragment into a single line of plain text."""
    text = _HTML_TAG_RE.sub(" ", value or "")
    text = unescape(text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def _first_url(candidates: Any, *keys: str) -> Optional[str]:
    if not isinstance(candidates, list):
        return None
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        for key in keys:
            url = _text(candidate.get(key))
            if url:
                return url
    return None


def _iso(dt: DateTime) -> str:
    return dt.in_timezone("UTC").to_iso8601_string()


def _parse_date_string(value: Any) -> Optional[str]:
    raw = _text(value)
    if raw is None:
        return None
    try:
        parsed = pendulum.parse(raw, strict=False)
    except (ValueError, TypeError, OverflowError):
        return None
    if not isinstance(parsed, DateTime):
        return None
    return _iso(parsed)


def _struct_time_to_iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    try:
        return _iso(pendulum.from_timestamp(calendar.timegm(value)))
    except (ValueError, TypeError, OverflowError):
        return None


def extract_title(entry: Dict[str, Any]) -> str:
    return _text(entry.get("title")) or UNTITLED


def extract_link(entry: Dict[str, Any]) -> str:
    return _text(entry.get("link")) or ""


def extract_published_at(entry: Dict[str, Any], now: DateTime) -> str:
    """Parsed publish date, then the raw publish string, then Atom updated, then `now`."""
    # published_parsed honours RFC 822 zone names (EST, PDT) that dateutil drops
    return (
        _struct_time_to_iso(entry.get("published_parsed"))
        or _parse_date_string(entry.get("published"))
        or _struct_time_to_iso(entry.get("updated_parsed"))
        or _iso(now)
    )


def _content_value(entry: Dict[str, Any]) -> Optional[str]:
    # content:encoded (RSS) and <content> (Atom) both land in entry.content
    content = entry.get("content")
    if isinstance(content, list):
        for block in content:
            if isinstance(block, dict):
                value = _text(block.get("value"))
                if value:
                    return value
    return None


def extract_description(entry: Dict[str, Any]) -> str:
    """Plain-text content snippet, then plain-text summary, then ''."""
    for raw in (_content_value(entry), _text(entry.get("summary"))):
        if raw:
            snippet = strip_html(raw)
            if snippet:
                return snippet
    return ""


def extract_thumbnail(entry: Dict[str, Any]) -> Optional[str]:
    """media:thumbnail, then enclosure, then the first media:content."""
    thumbnail = _first_url(entry.get("media_thumbnail"), "url")
    if thumbnail:
        return thumbnail

    enclosure = _first_url(entry.get("enclosures"), "href", "url")
    if enclosure:
        return enclosure

    media_content = entry.get("media_content")
    if isinstance(media_content, list) and media_content:
        first = media_content[0]
        if isinstance(first, dict):
            return _text(first.get("url"))
    return None


def extract_author(entry: Dict[str, Any], feed_title: Optional[str]) -> Optional[str]:
    author = _text(entry.get("author"))
    if author:
        return author
    detail = entry.get("author_detail")
    if isinstance(detail, dict):
        name = _text(detail.get("name"))
        if name:
            return name
    return _text(feed_title)


def normalize_entry(
    entry: Dict[str, Any],
    feed_title: Optional[str],
    now: DateTime,
) -> NormalizedItem:
    """Build one NormalizedItem from a feedparser entry."""
    return NormalizedItem(
        title=extract_title(entry),
        link=extract_link(entry),
        published_at=extract_published_at(entry, now),
        description=extract_description(entry),
        thumbnail=extract_thumbnail(entry),
        author=extract_author(entry, feed_title),
    )


def normalize_entries(
    entries: Iterable[Dict[str, Any]],
    feed_title: Optional[str],
    max_items: int,
    now: Optional[DateTime] = None,
) -> List[NormalizedItem]:
    """Normalize the first `max_items` entries, keeping source order."""
    if now is None:
        now = pendulum.now("UTC")

    items = []
    for entry in entries:
        if len(items) >= max_items:
            break
        items.append(normalize_entry(entry, feed_title, now))
    return items


def extract_feed_title(parsed: Dict[str, Any]) -> Optional[str]:
    feed = parsed.get("feed") or {}
    return _text(feed.get("title")) if isinstance(feed, dict) else None


def detect_feed_type(feed_url: str, parsed: Dict[str, Any]) -> str:
    """Classify a feed as youtube, shopify, podcast, blog or generic."""
    url = urlparse(feed_url)
    host = (url.hostname or "").lower()
    path = url.path.lower()
    feed = parsed.get("feed") or {}
    entries = parsed.get("entries") or []
    generator = str(feed.get("generator") or "").lower()

    if host.endswith("youtube.com") or any("yt_videoid" in e for e in entries):
        return "youtube"

    if host.endswith("myshopify.com") or "shopify" in generator or path.endswith("/collections/all.atom"):
        return "shopify"

    namespaces = parsed.get("namespaces") or {}
    if any(ns in namespaces.values() for ns in _PODCAST_NAMESPACES):
        return "podcast"
    for entry in entries:
        for enclosure in entry.get("enclosures") or []:
            if str(enclosure.get("type") or "").startswith("audio/"):
                return "podcast"

    if any(name in generator for name in _BLOG_GENERATORS) or path.rstrip("/").endswith("/feed"):
        return "blog"

    return "generic"
