"""
NetSuite SuiteTalk REST client.

Async httpx wrapper with OAuth 1.0a signing, typed call helpers and
unified error handling.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from netsuite_rest.clients.auth import NetSuiteOAuth1
from netsuite_rest.config import Config, get_config
from netsuite_rest.models import MetadataOptions, Page, RequestOptions
from netsuite_rest.services.pagination import Paginator
from netsuite_rest.services.retry import retrying
from netsuite_rest.settings import NetSuiteSettings
from netsuite_rest.utils.errors import NetSuiteError, from_http_error
from netsuite_rest.utils.logging_config import PerformanceMonitor

logger = logging.getLogger(__name__)

SUITEQL_PATH = "query/v1/suiteql"
METADATA_CATALOG_PATH = "record/v1/metadata-catalog"
SWAGGER_ACCEPT = "application/swagger+json"

# Paths copied from NetSuite docs often carry the REST prefix already.
_REST_PREFIX = "services/rest/"


def _relative_path(path: str) -> str:
    if "://" in path:
        return path
    path = path.lstrip("/")
    if path.startswith(_REST_PREFIX):
        path = path[len(_REST_PREFIX):]
    return path or "*"


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class NetSuiteClient:
    """
    Client for the NetSuite SuiteTalk REST API.

    Use as an async context manager, or call :meth:`close` when done::

        async with NetSuiteClient() as client:
            page = await client.fetch_suiteql("SELECT id FROM customer")
    """

    def __init__(
        self,
        config: Config | None = None,
        settings: NetSuiteSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the NetSuite client.

        Args:
            config: Account and token credentials (default: from environment)
            settings: Timeouts, page sizes and retry tunables
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config or get_config()
        self.settings = settings or NetSuiteSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Default request headers."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Prefer": "transient",
            "User-Agent": self.settings.user_agent,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self.config.require_credentials()
            self._client = httpx.AsyncClient(
                base_url=self.config.rest_base_url,
                headers=self.headers,
                timeout=self.settings.request_timeout,
                auth=NetSuiteOAuth1.from_config(self.config),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "NetSuiteClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a signed request, raising NetSuiteError on any failure."""
        client = await self._get_client()
        try:
            with PerformanceMonitor(logger, f"{method} {url}"):
                response = await client.request(
                    method, url, params=params, json=json_body, headers=headers
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            error = from_http_error(e)
            logger.warning(f"NetSuite {method} {url} failed: {error}")
            raise error from e
        return response

    # -------------------- SuiteQL --------------------

    async def fetch_suiteql(
        self,
        query: str,
        offset: int = 0,
        limit: int | None = None,
    ) -> Page:
        """
        Fetch a single page of SuiteQL results.

        Args:
            query: SuiteQL statement
            offset: Index of the first row
            limit: Page size (default: settings.suiteql_limit)

        Returns:
            The result page, including its navigation links

        Raises:
            NetSuiteError: On HTTP failure or an unexpected response body
        """
        if limit is None:
            limit = self.settings.suiteql_limit

        response = await self._send(
            "POST",
            SUITEQL_PATH,
            params={"offset": offset, "limit": limit},
            json_body={"q": query},
        )
        try:
            page = Page.model_validate(response.json())
        except ValueError as e:
            raise NetSuiteError(
                f"Unexpected SuiteQL response: {e}",
                status_code=response.status_code,
            ) from e

        logger.info(
            f"SuiteQL returned {len(page.items)} rows at offset {offset} "
            f"(total: {page.total_results})"
        )
        return page

    def suiteql_paginator(
        self,
        query: str,
        limit: int | None = None,
        max_retries: int | None = None,
    ) -> Paginator[Page]:
        """
        Build a paginator walking every page of a SuiteQL query.

        Args:
            query: SuiteQL statement
            limit: Initial page size (default: settings.page_limit)
            max_retries: Attempts per page (default: settings.max_retries);
                values above 1 retry network errors, 429 and 5xx responses

        Example:
            >>> async for page in client.suiteql_paginator("SELECT id FROM item").run():
            ...     rows.extend(page.items)
        """
        if limit is None:
            limit = self.settings.page_limit
        if max_retries is None:
            max_retries = self.settings.max_retries

        async def fetch(offset: int, page_limit: int) -> Page:
            return await self.fetch_suiteql(query, offset, page_limit)

        fetch_page = fetch
        if max_retries > 1:
            fetch_page = retrying(
                fetch,
                max_retries=max_retries,
                base_delay=self.settings.retry_base_delay,
            )
        return Paginator(fetch_page, limit=limit)

    # -------------------- RESTlets --------------------

    async def get_restlet(
        self,
        script_id: int | str,
        deploy_id: int | str = 1,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Call a RESTlet's GET entry point.

        Args:
            script_id: Internal id of the RESTlet script
            deploy_id: Deployment id
            params: Extra query parameters passed to the script

        Returns:
            Decoded JSON body (or raw text for non-JSON responses)
        """
        query = {"script": script_id, "deploy": deploy_id, **(params or {})}
        response = await self._send("GET", self.config.restlet_url, params=query)
        return _decode(response)

    # -------------------- Generic requests --------------------

    async def request(self, options: RequestOptions | None = None, **kwargs: Any) -> Any:
        """
        Make an arbitrary REST call, e.g. record CRUD.

        Accepts either a RequestOptions instance or its fields as keywords::

            await client.request(path="record/v1/customer/42")
            await client.request(path="record/v1/customer", method="POST", body={...})

        Returns:
            Decoded JSON body, raw text, or None for empty responses (e.g. 204)
        """
        if options is None:
            options = RequestOptions(**kwargs)

        response = await self._send(
            options.method,
            _relative_path(options.path),
            json_body=options.body,
        )
        return _decode(response)

    async def test_connection(self) -> bool:
        """
        Check that the account is reachable and the credentials are accepted.

        Returns:
            True if an OPTIONS request succeeds, False on any API failure

        Raises:
            ConfigurationError: If credentials are missing
        """
        await self._get_client()
        try:
            await self._send("OPTIONS", "*")
        except NetSuiteError as e:
            logger.warning(f"Connection test failed: {e}")
            return False
        logger.info(f"Connected to NetSuite account {self.config.realm}")
        return True

    # -------------------- Metadata --------------------

    async def get_openapi_metadata(
        self, options: MetadataOptions | None = None, **kwargs: Any
    ) -> dict[str, Any]:
        """
        Fetch the OpenAPI 3.0 description of the record service.

        Args:
            options: MetadataOptions (or its fields as keywords):
                record_types to restrict the catalog, save_to_file/file_name
                to persist it as JSON under the working directory

        Returns:
            The OpenAPI document

        Raises:
            NetSuiteError: On HTTP failure
            OSError: If the file cannot be written
        """
        if options is None:
            options = MetadataOptions(**kwargs)

        params = {"select": ",".join(options.record_types)} if options.record_types else {}
        response = await self._send(
            "GET",
            METADATA_CATALOG_PATH,
            params=params,
            headers={"Accept": SWAGGER_ACCEPT},
        )
        try:
            metadata = response.json()
        except ValueError as e:
            raise NetSuiteError(
                f"Metadata catalog is not valid JSON: {e}",
                status_code=response.status_code,
            ) from e

        if options.save_to_file:
            file_path = Path.cwd() / (options.file_name or self.settings.metadata_file_name)
            file_path.write_text(json.dumps(metadata, indent=2), encoding="utf-8")
            logger.info(f"OpenAPI metadata saved to: {file_path}")

        return metadata


def get_netsuite_client(env_file: str = ".env") -> NetSuiteClient:
    """
    Get a NetSuite client configured from the environment.

    Environment Variables:
        ACCOUNT_ID: NetSuite account id (e.g. 1234567 or 1234567_SB1)
        CONSUMER_KEY / CONSUMER_SECRET: Integration record credentials
        TOKEN_ID / TOKEN_SECRET: Access token credentials

    Raises:
        ConfigurationError: If any credential is missing
    """
    config = Config.load(env_file)
    config.require_credentials()
    return NetSuiteClient(config=config)
