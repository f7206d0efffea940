"""Client tunables using Pydantic Settings."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_version() -> str:
    try:
        return _pkg_version("netsuite-rest")
    except PackageNotFoundError:
        return "0.0.0"


class NetSuiteSettings(BaseSettings):
    """Client settings loaded from NETSUITE_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NETSUITE_",
        extra="ignore",
    )

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default_factory=lambda: f"netsuite-rest/{_get_version()}")

    # Paging
    page_limit: int = Field(default=1000, ge=1, le=1000)
    suiteql_limit: int = Field(default=10, ge=1, le=1000)

    # Retry (attempts per call; 1 disables retrying)
    max_retries: int = Field(default=1, ge=1)
    retry_base_delay: float = Field(default=2.0, ge=0)

    # Metadata catalog
    metadata_file_name: str = Field(default="netsuite-openapi-metadata.json")
