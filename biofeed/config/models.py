"""Configuration models."""

from typing import List

from pydantic import BaseModel, Field, model_validator

FEED_TYPES = ("youtube", "blog", "podcast", "shopify", "generic")


class FetchConfig(BaseModel):
    """Feed fetching configuration."""

    timeout: float = Field(10.0, description="HTTP timeout in seconds", gt=0.0, le=120.0)
    user_agent: str = Field("biofeed/0.1 (+feed normalizer)", description="User-Agent header")
    default_max_items: int = Field(10, description="Items returned when maxItems is absent", ge=1)
    max_items_cap: int = Field(50, description="Upper bound for maxItems", ge=1, le=500)
    max_concurrent: int = Field(5, description="Concurrent fetches when checking sources", ge=1, le=50)

    @model_validator(mode="after")
    def validate_bounds(self) -> "FetchConfig":
        """Default must fit under the cap."""
        if self.default_max_items > self.max_items_cap:
            raise ValueError(
                f"default_max_items ({self.default_max_items}) exceeds "
                f"max_items_cap ({self.max_items_cap})"
            )
        return self


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field("127.0.0.1", description="Bind address")
    port: int = Field(8000, description="Bind port", ge=1, le=65535)
    allow_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="CORS allowed origins",
    )


class CacheConfig(BaseModel):
    """Result cache configuration. A TTL of 0 disables caching."""

    ttl_seconds: float = Field(0.0, description="Seconds a normalized feed stays cached", ge=0.0)
    max_entries: int = Field(256, description="Most feeds held in the cache at once", ge=1)


class ConfigModel(BaseModel):
    """Main configuration model."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)


class SourceConfig(BaseModel):
    """Feed source configuration from sources.yaml."""

    name: str = Field(..., description="Source name")
    url: str = Field(..., description="Feed URL")
    feed_type: str = Field("generic", description="Feed kind (youtube, blog, podcast, shopify, generic)")
    max_items: int = Field(10, description="Items to show for this source", ge=1, le=50)
    enabled: bool = Field(True, description="Whether source is enabled")

    @model_validator(mode="after")
    def validate_feed_type(self) -> "SourceConfig":
        if self.feed_type not in FEED_TYPES:
            raise ValueError(f"feed_type must be one of {', '.join(FEED_TYPES)}")
        return self
