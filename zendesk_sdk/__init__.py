"""
Zendesk Python SDK

Async, typed client for the Zendesk Support REST API.

Basic usage:
    >>> from zendesk_sdk import ZendeskClient
    >>> client = ZendeskClient.with_api_token("acme", "agent@acme.com", "api-token")
    >>> ticket = await client.get_ticket(42)
    >>> print(ticket.subject)

Authentication:
    # API token
    client = ZendeskClient.with_api_token(subdomain, email, token)

    # Password
    client = ZendeskClient.with_password(subdomain, email, password)

    # OAuth access token
    client = ZendeskClient.with_bearer(subdomain, access_token)

    # ZENDESK_* environment variables
    client = ZendeskClient.from_env()

Pagination and sideloading:
    params = QueryParams().with_per_page(50).with_sort("created_at", SortOrder.DESC)
    page = await client.list_tickets_paginated(params)

    response = await client.list_tickets_with_sideloading(["users"])
    requesters = response.users()
"""

import logging

from .auth import APITokenAuth, Authenticator, BearerAuth, PasswordAuth
from .client import ZendeskClient
from .config import ZendeskConfig, ZendeskSettings
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    InvalidURLError,
    NetworkError,
    RateLimitError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
    ZendeskError,
)
from .http_client import HTTPClient
from .models import (
    Organization,
    SearchQueryBuilder,
    SearchResponse,
    Ticket,
    TicketComment,
    TicketCommentCreate,
    TicketCreateRequest,
    TicketPriority,
    TicketStatus,
    TicketType,
    User,
    UserRole,
)
from .query import (
    OrganizationsWithSideloading,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    QueryParams,
    SideloadedResponse,
    SortOrder,
    TicketsWithSideloading,
    UsersWithSideloading,
)
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Main client
    "ZendeskClient",
    "HTTPClient",
    "ZendeskConfig",
    "ZendeskSettings",
    # Exceptions
    "ZendeskError",
    "APIError",
    "ConfigurationError",
    "DecodeError",
    "InvalidURLError",
    "NetworkError",
    "TimeoutError",
    "RateLimitError",
    "UnauthorizedError",
    "ValidationError",
    # Auth
    "Authenticator",
    "APITokenAuth",
    "PasswordAuth",
    "BearerAuth",
    # Query
    "QueryParams",
    "SortOrder",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "SideloadedResponse",
    "TicketsWithSideloading",
    "UsersWithSideloading",
    "OrganizationsWithSideloading",
    # Models
    "Ticket",
    "TicketComment",
    "TicketCommentCreate",
    "TicketCreateRequest",
    "TicketPriority",
    "TicketStatus",
    "TicketType",
    "User",
    "UserRole",
    "Organization",
    "SearchQueryBuilder",
    "SearchResponse",
    "__version__",
]


# Convenience functions for error checking
def is_zendesk_error(error: Exception) -> bool:
    """Check if an exception is raised by this SDK."""
    return isinstance(error, ZendeskError)


def is_unauthorized_error(error: Exception) -> bool:
    """Check if an exception is a 401 Unauthorized error."""
    return isinstance(error, UnauthorizedError)


def is_rate_limit_error(error: Exception) -> bool:
    """Check if an exception is a 429 Rate Limit error."""
    return isinstance(error, RateLimitError)


def is_api_error(error: Exception) -> bool:
    """Check if an exception is a non-success HTTP status other than 401/429."""
    return isinstance(error, APIError)


def is_network_error(error: Exception) -> bool:
    """Check if an exception is a network error (timeouts included)."""
    return isinstance(error, NetworkError)


def is_timeout_error(error: Exception) -> bool:
    """Check if an exception is a timeout error."""
    return isinstance(error, TimeoutError)


def is_validation_error(error: Exception) -> bool:
    """Check if an exception is a validation error."""
    return isinstance(error, ValidationError)


def is_config_error(error: Exception) -> bool:
    """Check if an exception is a configuration error."""
    return isinstance(error, ConfigurationError)


def is_decode_error(error: Exception) -> bool:
    """Check if an exception is a response decoding error."""
    return isinstance(error, DecodeError)
