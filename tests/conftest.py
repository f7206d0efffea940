from collections.abc import Callable

import httpx
import pytest

from netsuite_rest.clients import NetSuiteClient
from netsuite_rest.config import Config
from netsuite_rest.settings import NetSuiteSettings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def config():
    """Fixture for a fully configured test account."""
    return Config(
        account_id="123456",
        consumer_key="test_consumer_key",
        consumer_secret="test_consumer_secret",
        token_id="test_token_id",
        token_secret="test_token_secret",
    )


@pytest.fixture
def settings():
    """Fixture for settings isolated from any local .env file."""
    return NetSuiteSettings(_env_file=None, retry_base_delay=0)


@pytest.fixture
def make_client(config, settings) -> Callable[[Handler], NetSuiteClient]:
    """Build a NetSuiteClient whose HTTP traffic goes to ``handler``."""

    def factory(handler: Handler) -> NetSuiteClient:
        return NetSuiteClient(
            config=config,
            settings=settings,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def suiteql_page():
    """Build a SuiteQL envelope, optionally with a next link."""

    def factory(items, offset=0, next_href=None, has_more=None, total=242514):
        links = [
            {
                "rel": "self",
                "href": "https://123456.suitetalk.api.netsuite.com/services/rest/query/v1/suiteql",
            }
        ]
        if next_href is not None:
            links.append({"rel": "next", "href": next_href})
        return {
            "links": links,
            "count": len(items),
            "hasMore": next_href is not None if has_more is None else has_more,
            "items": items,
            "offset": offset,
            "totalResults": total,
        }

    return factory
