"""ZendeskClient, composed from the HTTP pipeline and the endpoint mixins."""

from typing import Any, Optional

import httpx

from .auth import APITokenAuth, Authenticator, BearerAuth, PasswordAuth
from .config import ZendeskConfig, ZendeskSettings
from .endpoints import (
    CustomObjectsMixin,
    OrganizationsMixin,
    RelationshipsMixin,
    SearchMixin,
    TicketsMixin,
    UsersMixin,
)
from .http_client import HTTPClient


class ZendeskClient(
    HTTPClient,
    TicketsMixin,
    UsersMixin,
    OrganizationsMixin,
    SearchMixin,
    CustomObjectsMixin,
    RelationshipsMixin,
):
    """Async client for the Zendesk Support API.

    Construct it from a ``ZendeskConfig`` or with one of the ``with_*``
    shortcuts. The config is validated immediately, so a bad subdomain or
    timeout raises ``ConfigurationError`` here rather than on first use.

    Use it as an async context manager, or call ``close()`` when done::

        async with ZendeskClient.with_api_token("acme", "agent@acme.com", token) as client:
            ticket = await client.get_ticket(42)
    """

    @classmethod
    def with_auth(
        cls,
        subdomain: str,
        auth: Authenticator,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **config: Any,
    ) -> "ZendeskClient":
        """Build a client; extra keyword arguments become ``ZendeskConfig`` fields."""
        return cls(ZendeskConfig(subdomain=subdomain, auth=auth, **config), transport=transport)

    @classmethod
    def with_api_token(cls, subdomain: str, email: str, token: str, **kwargs: Any) -> "ZendeskClient":
        return cls.with_auth(subdomain, APITokenAuth(email, token), **kwargs)

    @classmethod
    def with_password(cls, subdomain: str, email: str, password: str, **kwargs: Any) -> "ZendeskClient":
        return cls.with_auth(subdomain, PasswordAuth(email, password), **kwargs)

    @classmethod
    def with_bearer(cls, subdomain: str, token: str, **kwargs: Any) -> "ZendeskClient":
        return cls.with_auth(subdomain, BearerAuth(token), **kwargs)

    @classmethod
    def from_env(
        cls,
        settings: Optional[ZendeskSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ZendeskClient":
        """Build a client from ``ZENDESK_*`` environment variables (or a ``.env`` file)."""
        settings = settings or ZendeskSettings()
        return cls(settings.to_config(), transport=transport)
