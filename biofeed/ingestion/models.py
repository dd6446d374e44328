"""Data models for feed ingestion."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNTITLED = "Untitled"


class FeedRequest(BaseModel):
    """Inbound request to normalize one feed."""

    model_config = ConfigDict(populate_by_name=True)

    feed_url: Optional[str] = Field(None, alias="feedUrl", description="Absolute feed URL")
    max_items: Optional[int] = Field(None, alias="maxItems", description="Maximum items to return")

    @field_validator("feed_url", mode="before")
    @classmethod
    def blank_url_is_missing(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("max_items", mode="before")
    @classmethod
    def coerce_max_items(cls, v: Any) -> Optional[int]:
        """Anything that is not a whole number counts as absent."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        if isinstance(v, str):
            try:
                return int(v.strip())
            except ValueError:
                return None
        return None


class NormalizedItem(BaseModel):
    """Feed entry in the fixed output shape, whatever the source dialect."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(UNTITLED, description="Entry title", min_length=1)
    link: str = Field("", description="Canonical entry URL")
    published_at: str = Field(..., alias="publishedAt", description="ISO-8601 publication timestamp")
    description: str = Field("", description="Plain-text summary")
    thumbnail: Optional[str] = Field(None, description="Thumbnail URL")
    author: Optional[str] = Field(None, description="Entry author or feed title")


class NormalizedFeed(BaseModel):
    """Successful normalization of one feed."""

    feed_title: Optional[str] = Field(None, description="Feed-level title")
    feed_type: str = Field("generic", description="Detected feed kind")
    items: List[NormalizedItem] = Field(default_factory=list, description="Normalized entries in source order")


class FeedResponse(BaseModel):
    """Wire envelope returned to callers."""

    success: bool = Field(..., description="Whether the feed was normalized")
    feed_title: Optional[str] = Field(None, description="Feed-level title")
    items: List[NormalizedItem] = Field(default_factory=list, description="Normalized entries")
    error: Optional[str] = Field(None, description="Error message if failed")

    @classmethod
    def ok(cls, feed: NormalizedFeed) -> "FeedResponse":
        return cls(success=True, feed_title=feed.feed_title, items=feed.items)

    @classmethod
    def failed(cls, error: str) -> "FeedResponse":
        return cls(success=False, error=error)

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body callers expect."""
        if not self.success:
            return {"success": False, "error": self.error or "Failed to fetch RSS feed"}
        return {
            "success": True,
            "feedTitle": self.feed_title,
            "items": [item.model_dump(by_alias=True) for item in self.items],
        }
