"""
OAuth 1.0a token-based authentication for httpx.

NetSuite TBA signs every request with the consumer and token secrets using
HMAC-SHA256, with the account id as the OAuth realm.
"""

from collections.abc import Generator

import httpx
from oauthlib.oauth1 import (
    SIGNATURE_HMAC_SHA256,
    SIGNATURE_TYPE_AUTH_HEADER,
    Client,
)

from netsuite_rest.config import Config


class NetSuiteOAuth1(httpx.Auth):
    """httpx auth flow adding a signed ``Authorization: OAuth ...`` header."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        token_id: str,
        token_secret: str,
        realm: str,
        signature_method: str = SIGNATURE_HMAC_SHA256,
    ):
        self.realm = realm
        self.signature_method = signature_method
        self._signer = Client(
            client_key=consumer_key,
            client_secret=consumer_secret,
            resource_owner_key=token_id,
            resource_owner_secret=token_secret,
            signature_method=signature_method,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            realm=realm,
        )

    @classmethod
    def from_config(cls, config: Config) -> "NetSuiteOAuth1":
        """Build the auth flow from loaded credentials."""
        return cls(
            consumer_key=config.consumer_key,
            consumer_secret=config.consumer_secret,
            token_id=config.token_id,
            token_secret=config.token_secret,
            realm=config.realm,
        )

    def sign(self, method: str, url: str) -> str:
        """
        Compute the Authorization header value for a request.

        JSON bodies are not part of the OAuth signature base string, so only
        the method and the full URL (query string included) are signed.
        """
        _, headers, _ = self._signer.sign(url, http_method=method, body=None, headers={})
        return headers["Authorization"]

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.sign(request.method, str(request.url))
        yield request
