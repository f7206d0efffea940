"""Tests for NetSuiteClient against a mocked SuiteTalk REST API."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from netsuite_rest.clients import NetSuiteClient, get_netsuite_client
from netsuite_rest.config import Config
from netsuite_rest.models import MetadataOptions, Page, RequestOptions
from netsuite_rest.utils.errors import (
    AuthenticationError,
    ConfigurationError,
    NetSuiteError,
    NetworkError,
    NotFoundError,
)

REST_HOST = "123456.suitetalk.api.netsuite.com"
SUITEQL_URL = f"https://{REST_HOST}/services/rest/query/v1/suiteql"


def error_response(status_code: int, detail: str, code: str) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={
            "type": "https://www.rfc-editor.org/rfc/rfc9110.html#section-15.5.1",
            "title": "Bad Request",
            "status": status_code,
            "o:errorDetails": [{"detail": detail, "o:errorCode": code}],
        },
    )


@pytest.mark.asyncio
async def test_fetch_suiteql_sends_signed_post(make_client, suiteql_page):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=suiteql_page([{"id": "7"}], offset=20))

    async with make_client(handler) as client:
        page = await client.fetch_suiteql("SELECT id FROM customer", offset=20, limit=5)

    assert isinstance(page, Page)
    assert page.items == [{"id": "7"}]
    assert page.total_results == 242514

    request = requests[0]
    assert request.method == "POST"
    assert request.url.host == REST_HOST
    assert request.url.path == "/services/rest/query/v1/suiteql"
    assert request.url.params["offset"] == "20"
    assert request.url.params["limit"] == "5"
    assert json.loads(request.content) == {"q": "SELECT id FROM customer"}
    assert request.headers["Prefer"] == "transient"
    assert request.headers["Content-Type"] == "application/json"

    authorization = request.headers["Authorization"]
    assert authorization.startswith('OAuth realm="123456"')
    assert 'oauth_signature_method="HMAC-SHA256"' in authorization
    assert 'oauth_consumer_key="test_consumer_key"' in authorization
    assert 'oauth_token="test_token_id"' in authorization


@pytest.mark.asyncio
async def test_fetch_suiteql_uses_default_limit(make_client, suiteql_page, settings):
    seen = []

    def handler(request):
        seen.append(request.url.params["limit"])
        return httpx.Response(200, json=suiteql_page([]))

    async with make_client(handler) as client:
        await client.fetch_suiteql("SELECT id FROM item")

    assert seen == [str(settings.suiteql_limit)]


@pytest.mark.asyncio
async def test_fetch_suiteql_surfaces_error_detail(make_client):
    def handler(request):
        return error_response(
            400,
            "Invalid search query. Detailed unprocessed description follows.",
            "INVALID_PARAMETER",
        )

    async with make_client(handler) as client:
        with pytest.raises(NetSuiteError) as exc_info:
            await client.fetch_suiteql("SELEC id FROM customer")

    error = exc_info.value
    assert error.status_code == 400
    assert error.error_code == "INVALID_PARAMETER"
    assert error.message.startswith("Invalid search query")


@pytest.mark.asyncio
async def test_fetch_suiteql_rejects_unexpected_body(make_client):
    def handler(request):
        return httpx.Response(200, json={"items": "not a list"})

    async with make_client(handler) as client:
        with pytest.raises(NetSuiteError, match="Unexpected SuiteQL response"):
            await client.fetch_suiteql("SELECT id FROM customer")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "error_cls"),
    [(401, AuthenticationError), (403, AuthenticationError), (404, NotFoundError)],
)
async def test_http_errors_map_to_typed_exceptions(make_client, status_code, error_cls):
    def handler(request):
        return error_response(status_code, "Denied", "INVALID_LOGIN")

    async with make_client(handler) as client:
        with pytest.raises(error_cls) as exc_info:
            await client.request(path="record/v1/customer/1")

    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_transport_failure_becomes_network_error(make_client):
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    async with make_client(handler) as client:
        with pytest.raises(NetworkError, match="Name or service not known"):
            await client.fetch_suiteql("SELECT id FROM customer")


@pytest.mark.asyncio
async def test_suiteql_paginator_walks_all_pages(make_client, suiteql_page):
    calls = []

    def handler(request):
        offset = int(request.url.params["offset"])
        limit = int(request.url.params["limit"])
        calls.append((offset, limit))
        if offset == 0:
            return httpx.Response(
                200,
                json=suiteql_page(
                    [{"id": "1"}, {"id": "2"}],
                    next_href=f"{SUITEQL_URL}?limit=2&offset=2",
                ),
            )
        return httpx.Response(200, json=suiteql_page([{"id": "3"}], offset=2))

    async with make_client(handler) as client:
        paginator = client.suiteql_paginator("SELECT id FROM customer", limit=2)
        ids = [row["id"] async for row in paginator.items()]

    assert ids == ["1", "2", "3"]
    assert calls == [(0, 2), (2, 2)]
    assert paginator.done is True


@pytest.mark.asyncio
async def test_suiteql_paginator_retries_transient_failures(make_client, suiteql_page):
    responses = iter(
        [
            httpx.Response(503, text="Service Unavailable"),
            httpx.Response(200, json=suiteql_page([{"id": "1"}])),
        ]
    )

    def handler(request):
        return next(responses)

    async with make_client(handler) as client:
        paginator = client.suiteql_paginator("SELECT id FROM customer", max_retries=2)
        pages = [page async for page in paginator.run()]

    assert [page.items for page in pages] == [[{"id": "1"}]]


@pytest.mark.asyncio
async def test_suiteql_paginator_without_retries_fails_fast(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503, text="Service Unavailable")

    async with make_client(handler) as client:
        paginator = client.suiteql_paginator("SELECT id FROM customer")
        with pytest.raises(NetSuiteError) as exc_info:
            async for _ in paginator.run():
                pass

    assert exc_info.value.status_code == 503
    assert len(calls) == 1
    assert paginator.done is True


@pytest.mark.asyncio
async def test_get_restlet_calls_restlet_host(make_client):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"status": "ok"})

    async with make_client(handler) as client:
        result = await client.get_restlet(895, deploy_id=2, params={"customerId": "42"})

    assert result == {"status": "ok"}
    request = requests[0]
    assert request.method == "GET"
    assert request.url.host == "123456.restlets.api.netsuite.com"
    assert request.url.path == "/app/site/hosting/restlet.nl"
    assert dict(request.url.params) == {"script": "895", "deploy": "2", "customerId": "42"}
    assert request.headers["Authorization"].startswith("OAuth ")


@pytest.mark.asyncio
async def test_get_restlet_returns_text_bodies(make_client):
    async with make_client(lambda request: httpx.Response(200, text="pong")) as client:
        assert await client.get_restlet("customscript_ping") == "pong"


@pytest.mark.asyncio
async def test_request_get_and_post(make_client):
    requests = []

    def handler(request):
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(204)
        return httpx.Response(200, json={"id": "42", "companyName": "Acme"})

    async with make_client(handler) as client:
        record = await client.request(path="/services/rest/record/v1/customer/42")
        created = await client.request(
            RequestOptions(path="record/v1/customer", method="post", body={"companyName": "Acme"})
        )

    assert record == {"id": "42", "companyName": "Acme"}
    assert created is None
    assert requests[0].url.path == "/services/rest/record/v1/customer/42"
    assert requests[1].method == "POST"
    assert requests[1].url.path == "/services/rest/record/v1/customer"
    assert json.loads(requests[1].content) == {"companyName": "Acme"}


@pytest.mark.asyncio
async def test_test_connection_sends_options(make_client):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(204)

    async with make_client(handler) as client:
        assert await client.test_connection() is True

    assert requests[0].method == "OPTIONS"
    assert requests[0].url.path == "/services/rest/*"


@pytest.mark.asyncio
async def test_test_connection_reports_failure(make_client):
    def handler(request):
        return error_response(401, "Invalid login attempt.", "INVALID_LOGIN")

    async with make_client(handler) as client:
        assert await client.test_connection() is False


@pytest.mark.asyncio
async def test_missing_credentials_raise_configuration_error(settings):
    client = NetSuiteClient(config=Config(account_id="123456"), settings=settings)

    with pytest.raises(ConfigurationError, match="CONSUMER_KEY"):
        await client.test_connection()


@pytest.mark.asyncio
async def test_get_openapi_metadata(make_client):
    requests = []
    document = {"openapi": "3.0.1", "paths": {"/customer": {}}}

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=document)

    async with make_client(handler) as client:
        full = await client.get_openapi_metadata()
        partial = await client.get_openapi_metadata(record_types=["customer", "salesorder"])

    assert full == document
    assert partial == document
    assert requests[0].url.path == "/services/rest/record/v1/metadata-catalog"
    assert "select" not in requests[0].url.params
    assert requests[0].headers["Accept"] == "application/swagger+json"
    assert requests[1].url.params["select"] == "customer,salesorder"


@pytest.mark.asyncio
async def test_get_openapi_metadata_saves_file(make_client, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    document = {"openapi": "3.0.1"}

    async with make_client(lambda request: httpx.Response(200, json=document)) as client:
        await client.get_openapi_metadata(MetadataOptions(save_to_file=True))
        await client.get_openapi_metadata(save_to_file=True, file_name="customer.json")

    default_file = tmp_path / "netsuite-openapi-metadata.json"
    assert json.loads(default_file.read_text(encoding="utf-8")) == document
    assert json.loads((tmp_path / "customer.json").read_text(encoding="utf-8")) == document


@pytest.mark.asyncio
async def test_get_openapi_metadata_propagates_write_errors(make_client, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    async with make_client(lambda request: httpx.Response(200, json={})) as client:
        with patch.object(Path, "write_text", side_effect=PermissionError("read-only")):
            with pytest.raises(OSError):
                await client.get_openapi_metadata(save_to_file=True)


@pytest.mark.asyncio
async def test_get_openapi_metadata_http_error(make_client):
    def handler(request):
        return error_response(400, "Record type 'foo' does not exist.", "INVALID_PARAMETER")

    async with make_client(handler) as client:
        with pytest.raises(NetSuiteError, match="does not exist"):
            await client.get_openapi_metadata(record_types=["foo"])


@pytest.mark.asyncio
async def test_close_releases_http_client(make_client):
    client = make_client(lambda request: httpx.Response(204))
    await client.test_connection()
    assert client._client is not None

    await client.close()

    assert client._client is None


def test_get_netsuite_client_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "ACCOUNT_ID=1234567_SB1\n"
        "CONSUMER_KEY=ck\n"
        "CONSUMER_SECRET=cs\n"
        "TOKEN_ID=ti\n"
        "TOKEN_SECRET=ts\n"
    )

    with patch.dict(os.environ, {}, clear=True):
        client = get_netsuite_client(str(env_file))

    assert client.config.realm == "1234567_SB1"
    assert client.config.rest_base_url == (
        "https://1234567-sb1.suitetalk.api.netsuite.com/services/rest/"
    )


def test_get_netsuite_client_requires_credentials(tmp_path):
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ConfigurationError, match="ACCOUNT_ID"):
            get_netsuite_client(str(tmp_path / "missing.env"))
