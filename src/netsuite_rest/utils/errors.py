"""
Unified error handling for the NetSuite client.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from netsuite_rest.models.responses import ErrorBody

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class NetSuiteError(Exception):
    """Base exception for NetSuite client errors."""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        status_code: int | None = None,
        error_code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.status_code = status_code
        self.error_code = error_code

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}. {self.suggestion}"
        return self.message


class ConfigurationError(NetSuiteError):
    """Missing or invalid configuration."""
    pass


class NetworkError(NetSuiteError):
    """The request never got an HTTP response (DNS, TLS, timeout, reset)."""
    pass


class AuthenticationError(NetSuiteError):
    """Authentication or authorization error (401/403)."""
    pass


class NotFoundError(NetSuiteError):
    """Resource not found error (404)."""
    pass


class RateLimitError(NetSuiteError):
    """Concurrency or rate limit exceeded (429)."""
    pass


_STATUS_ERRORS: dict[int, type[NetSuiteError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}


def _parse_body(payload: Any) -> ErrorBody | None:
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError:
            return None
    if not isinstance(payload, dict):
        return None
    try:
        return ErrorBody.model_validate(payload)
    except PydanticValidationError:
        return None


def extract_error_detail(response: httpx.Response) -> tuple[str | None, str | None]:
    """
    Pull the first ``o:errorDetails`` entry out of a NetSuite error response.

    Args:
        response: The failed HTTP response

    Returns:
        Tuple of (detail message, NetSuite error code); either may be None.
    """
    body = _parse_body(response.content)
    if body is None or body.first_detail is None:
        return None, None
    detail = body.first_detail
    return detail.detail or None, detail.error_code


def from_http_error(error: httpx.HTTPError) -> NetSuiteError:
    """
    Translate an httpx error into the NetSuiteError hierarchy.

    The NetSuite error detail is used as the message when the response
    carries one; otherwise the httpx message is kept.
    """
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        detail, error_code = extract_error_detail(error.response)
        error_cls = _STATUS_ERRORS.get(status, NetSuiteError)
        suggestion = None
        if error_cls is AuthenticationError:
            suggestion = (
                "Check ACCOUNT_ID, CONSUMER_KEY/SECRET and TOKEN_ID/SECRET "
                "and the role's permissions"
            )
        return error_cls(
            detail or str(error),
            suggestion=suggestion,
            status_code=status,
            error_code=error_code,
        )

    if isinstance(error, httpx.TransportError):
        return NetworkError(
            str(error) or type(error).__name__,
            suggestion="Check network connectivity and the account id",
        )

    return NetSuiteError(str(error) or type(error).__name__)


def is_retryable(error: BaseException) -> bool:
    """Whether a failed call is worth repeating."""
    if isinstance(error, NetworkError):
        return True
    if isinstance(error, NetSuiteError):
        return error.status_code in RETRYABLE_STATUS_CODES
    return False


def handle_error(error: Exception, operation: str = "operation") -> str:
    """
    Handle errors consistently across CLI commands.

    Args:
        error: The exception that occurred
        operation: Name of the operation that failed

    Returns:
        User-friendly error message with suggestions
    """
    logger.error(f"Error in {operation}: {error}")

    if isinstance(error, ConfigurationError | NetworkError):
        return f"Error: {error}"

    if isinstance(error, NetSuiteError):
        if error.status_code is not None:
            return format_api_error(error.status_code, error.message)
        return f"Error: {error}"

    return f"Error in {operation}: {type(error).__name__} - {error}"


def format_api_error(status_code: int, message: str = "") -> str:
    """Format an API error with appropriate message."""
    error_messages = {
        400: "Bad request. Please check the query or request body.",
        401: "Authentication failed. Please check your token-based auth credentials.",
        403: "Access denied. The token's role lacks permission for this action.",
        404: "Resource not found. Please check the record type, id or script id.",
        405: "Method not allowed for this resource.",
        429: "Concurrency limit exceeded. Please wait before making more requests.",
        500: "NetSuite server error. Please try again later.",
        503: "NetSuite service unavailable. Please try again later.",
    }

    default_message = f"API error (status {status_code})"
    base_message = error_messages.get(status_code, default_message)

    if message:
        return f"Error: {base_message} Details: {message}"
    return f"Error: {base_message}"
