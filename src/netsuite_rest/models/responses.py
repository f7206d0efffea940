"""
Pydantic models for NetSuite REST response envelopes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NavigationLink(BaseModel):
    """A navigation link from a collection envelope (``self``, ``next``, ...)."""

    model_config = ConfigDict(extra="allow")

    rel: str = Field(..., description="Relation tag, e.g. 'next'")
    href: str = Field(..., description="Target URL carrying offset/limit params")


class Page(BaseModel):
    """
    One page of a NetSuite collection response.

    Records in ``items`` are left as plain dicts. ``has_more``, ``count`` and
    ``total_results`` are informational; pagination follows ``links`` only.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    items: list[dict[str, Any]] = Field(default_factory=list)
    links: list[NavigationLink] = Field(default_factory=list)
    has_more: bool = Field(default=False, alias="hasMore")
    offset: int | None = Field(default=None)
    count: int | None = Field(default=None)
    total_results: int | None = Field(default=None, alias="totalResults")

    @field_validator("items", "links", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ErrorDetail(BaseModel):
    """Single entry of ``o:errorDetails``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    detail: str | None = None
    error_code: str | None = Field(default=None, alias="o:errorCode")


class ErrorBody(BaseModel):
    """NetSuite error response body (RFC 7807 style with ``o:`` extensions)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str | None = None
    title: str | None = None
    status: int | None = None
    error_details: list[ErrorDetail] = Field(
        default_factory=list, alias="o:errorDetails"
    )

    @property
    def first_detail(self) -> ErrorDetail | None:
        return self.error_details[0] if self.error_details else None
