"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from searchagent.searcher.models import SearcherKind


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearcherBackendConfig(Base):
    """Per-backend endpoint override; empty means the built-in default."""

    base_url: str = ""


class SearcherBackendsConfig(Base):
    scraper: SearcherBackendConfig = Field(default_factory=SearcherBackendConfig)
    api: SearcherBackendConfig = Field(default_factory=SearcherBackendConfig)


class SearchConfig(Base):
    """Web search configuration."""

    type: SearcherKind = "scraper"
    limit: int = Field(default=3, ge=0)
    timeout: float = Field(default=10.0, gt=0)
    content_concurrency: int = Field(default=4, ge=1)
    backends: SearcherBackendsConfig = Field(default_factory=SearcherBackendsConfig)


class Config(Base):
    """Root configuration for searchagent."""

    search: SearchConfig = Field(default_factory=SearchConfig)
