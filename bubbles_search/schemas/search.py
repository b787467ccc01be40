"""Search API schemas.

Field names on the wire are camelCase (createdAt, didYouMean); category
specific fields (postId, userId, adminOnly, section) pass through as extras.
"""

from pydantic import BaseModel, ConfigDict, Field


class MatchResponse(BaseModel):
    """One matched term and the text around it."""

    text: str
    context: str


class SearchResultItemResponse(BaseModel):
    """Single search hit of any content category."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | str
    title: str
    excerpt: str
    type: str = Field(..., description="document | page | reply | reference | account | report")
    url: str
    matches: list[MatchResponse]
    created_at: str | None = Field(None, alias="createdAt")


class SearchMetaResponse(BaseModel):
    """Echo of the normalized request plus totals."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    total: int
    page: int
    pages: int
    limit: int
    types: list[str]
    date_from: str | None = Field(None, alias="from")
    category: str | None = None
    did_you_mean: str | None = Field(None, alias="didYouMean")
    degraded: bool = Field(False, description="True when at least one source failed")


class SearchResponse(BaseModel):
    """Federated search response envelope."""

    results: list[SearchResultItemResponse]
    meta: SearchMetaResponse


class SuggestionResponse(BaseModel):
    """Typeahead hit."""

    id: int | str
    title: str
    type: str
    url: str


class SuggestResponse(BaseModel):
    """Typeahead response."""

    suggestions: list[SuggestionResponse]


class TrendingQueryResponse(BaseModel):
    """Tracked query and its execution count."""

    query: str
    count: int


class TrendingResponse(BaseModel):
    """Most frequently executed queries since start."""

    trending: list[TrendingQueryResponse]
