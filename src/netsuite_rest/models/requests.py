"""
Pydantic models for client call options.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class RequestOptions(BaseModel):
    """Options for a generic REST request."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    path: str = Field(
        default="*",
        description="Path relative to the REST base URL, or an absolute URL",
    )
    method: HttpMethod = Field(default="GET", description="HTTP method")
    body: Any = Field(default=None, description="JSON body, omitted when None")

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class MetadataOptions(BaseModel):
    """Options for fetching the OpenAPI metadata catalog."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    record_types: list[str] | None = Field(
        default=None,
        description="Record types to include, e.g. ['customer', 'salesorder']. "
        "None fetches the whole catalog.",
    )
    save_to_file: bool = Field(
        default=False, description="Write the catalog as JSON to the working directory"
    )
    file_name: str | None = Field(
        default=None, description="Target file name; defaults to the configured name"
    )
