"""Pydantic models for NetSuite requests and responses."""

from .requests import HttpMethod, MetadataOptions, RequestOptions
from .responses import ErrorBody, ErrorDetail, NavigationLink, Page

__all__ = [
    # Responses
    "Page",
    "NavigationLink",
    "ErrorBody",
    "ErrorDetail",
    # Requests
    "HttpMethod",
    "RequestOptions",
    "MetadataOptions",
]
