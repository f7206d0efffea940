"""
Clients for the NetSuite SuiteTalk REST API.

- NetSuiteClient: SuiteQL, RESTlets, record requests and metadata over httpx
- NetSuiteOAuth1: httpx auth flow for token-based authentication
"""

from .auth import NetSuiteOAuth1
from .netsuite_client import NetSuiteClient, get_netsuite_client

__all__ = [
    "NetSuiteClient",
    "get_netsuite_client",
    "NetSuiteOAuth1",
]
