"""Shared fixtures: sample feeds and a fetcher wired to a mock transport."""

from typing import Callable, List

import httpx
import pytest

from biofeed.config import FetchConfig
from biofeed.ingestion import RSSFetcher

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:media="http://search.yahoo.com/mrss/"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example Blog</title>
    <link>https://example.com/</link>
    <description>Posts from the example blog</description>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
      <dc:creator>Jane Doe</dc:creator>
      <description>Short summary</description>
      <content:encoded><![CDATA[<p>Hello <b>world</b> &amp; friends</p>]]></content:encoded>
      <media:thumbnail url="https://example.com/thumb-first.jpg" />
      <enclosure url="https://example.com/first.mp3" type="audio/mpeg" length="1234" />
    </item>
    <item>
      <link>https://example.com/second</link>
      <pubDate>Tue, 02 Jan 2024 08:30:00 GMT</pubDate>
      <description>&lt;p&gt;Second &lt;i&gt;summary&lt;/i&gt;&lt;/p&gt;</description>
      <enclosure url="https://example.com/second.jpg" type="image/jpeg" length="99" />
    </item>
    <item>
      <title>Third post</title>
      <link>https://example.com/third</link>
      <media:content url="https://example.com/third.jpg" medium="image" />
    </item>
  </channel>
</rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:yt="http://www.youtube.com/xml/schemas/2015"
      xmlns:media="http://search.yahoo.com/mrss/">
  <title>Example Channel</title>
  <link rel="alternate" href="https://www.youtube.com/channel/UC123"/>
  <id>yt:channel:UC123</id>
  <updated>2024-02-03T04:05:06+00:00</updated>
  <entry>
    <id>yt:video:abc</id>
    <yt:videoId>abc</yt:videoId>
    <title>Video one</title>
    <link rel="alternate" href="https://www.youtube.com/watch?v=abc"/>
    <author><name>Channel Owner</name></author>
    <updated>2024-02-03T04:05:06+00:00</updated>
    <media:group>
      <media:title>Video one</media:title>
      <media:thumbnail url="https://i.ytimg.com/vi/abc/hqdefault.jpg" width="480" height="360"/>
      <media:description>Watch this video</media:description>
    </media:group>
    <summary>Watch this video</summary>
  </entry>
</feed>
"""

HTML_PAGE = """<!DOCTYPE html>
<html><head><title>Not a feed</title></head>
<body><p>Just a page</p></body></html>
"""


def rss_with_items(count: int, title: str = "Numbered Feed") -> str:
    items = "".join(
        f"<item><title>Item {i}</title><link>https://example.com/{i}</link></item>"
        for i in range(1, count + 1)
    )
    return (
        '<?xml version="1.0"?><rss version="2.0"><channel>'
        f"<title>{title}</title><link>https://example.com/</link>"
        f"{items}</channel></rss>"
    )


class RecordingHandler:
    """MockTransport handler that serves one body and records every request."""

    def __init__(self, body: str = RSS_FEED, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            text=self.body,
            headers={"Content-Type": "application/rss+xml"},
        )


@pytest.fixture
def make_fetcher() -> Callable[..., RSSFetcher]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], **config) -> RSSFetcher:
        return RSSFetcher(FetchConfig(**config), transport=httpx.MockTransport(handler))

    return _make


TRUNCATED_RSS = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Broken Feed</title>
    <item><title>One</title><link>https://example.com/1</link></item>
    <item><title>Two</title><link>https://example.com/2</link></item>
    <item><title>Three<link>https://example.com/3</link></item>
  </channel>
</rss>
"""

EST_RSS = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Eastern Feed</title>
    <item>
      <title>Morning post</title>
      <link>https://example.com/morning</link>
      <pubDate>Mon, 01 Jan 2024 10:00:00 EST</pubDate>
    </item>
  </channel>
</rss>
"""
