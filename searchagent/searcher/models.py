"""Shared search models."""

from dataclasses import asdict, dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SearcherKind = Literal["scraper", "api"]


@dataclass(slots=True)
class SearchResult:
    """Normalized search result item."""

    url: str
    title: str
    content: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class SearXNGResult(BaseModel):
    """One entry of a SearXNG JSON response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    url: str | None = None
    content: str | None = None
    engine: str | None = None
    published_date: str | None = None


class SearXNGResponse(BaseModel):
    """SearXNG JSON response envelope."""

    results: list[SearXNGResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value):
        return [] if value is None else value
