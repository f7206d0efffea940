"""
Credential configuration for the NetSuite client.

Loads token-based auth credentials from environment variables and .env files.
Priority: Environment vars > .env file > defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from netsuite_rest.utils.errors import ConfigurationError

# Global config singleton
_config: Optional[Config] = None

CREDENTIAL_ENV_VARS = (
    "ACCOUNT_ID",
    "CONSUMER_KEY",
    "CONSUMER_SECRET",
    "TOKEN_ID",
    "TOKEN_SECRET",
)


class Config(BaseModel):
    """Account and token-based auth credentials."""

    account_id: str = Field(default="")
    consumer_key: str = Field(default="")
    consumer_secret: str = Field(default="")
    token_id: str = Field(default="")
    token_secret: str = Field(default="")

    # Logging
    log_level: str = Field(default="INFO")
    debug: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> Config:
        """Create config from environment variables."""
        return cls(
            account_id=os.getenv("ACCOUNT_ID", "").strip(),
            consumer_key=os.getenv("CONSUMER_KEY", ""),
            consumer_secret=os.getenv("CONSUMER_SECRET", ""),
            token_id=os.getenv("TOKEN_ID", ""),
            token_secret=os.getenv("TOKEN_SECRET", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            debug=os.getenv("DEBUG", "false").lower() in ("true", "1"),
        )

    @classmethod
    def load(cls, env_file: str = ".env") -> Config:
        """Load config from .env file, then environment variables."""
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)

        return cls.from_env()

    @property
    def missing_credentials(self) -> list[str]:
        """Names of credential variables that are not set."""
        values = (
            self.account_id,
            self.consumer_key,
            self.consumer_secret,
            self.token_id,
            self.token_secret,
        )
        return [name for name, value in zip(CREDENTIAL_ENV_VARS, values) if not value]

    @property
    def has_credentials(self) -> bool:
        """Whether every token-based auth credential is configured."""
        return not self.missing_credentials

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless all credentials are set."""
        missing = self.missing_credentials
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                suggestion="Set them in the environment or in a .env file",
            )

    @property
    def account_host(self) -> str:
        """Account id as used in hostnames (``1234567_SB1`` -> ``1234567-sb1``)."""
        return self.account_id.lower().replace("_", "-")

    @property
    def realm(self) -> str:
        """Account id as used for the OAuth realm."""
        return self.account_id.upper()

    @property
    def rest_base_url(self) -> str:
        return f"https://{self.account_host}.suitetalk.api.netsuite.com/services/rest/"

    @property
    def restlet_url(self) -> str:
        return (
            f"https://{self.account_host}.restlets.api.netsuite.com"
            "/app/site/hosting/restlet.nl"
        )


def get_config() -> Config:
    """Get or create the global config singleton."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Reset the global config (for testing)."""
    global _config
    _config = None
