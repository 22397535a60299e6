"""Authentication classes for the Zendesk SDK."""

import base64
from abc import ABC, abstractmethod
from typing import Dict


def _basic(credentials: str) -> str:
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class Authenticator(ABC):
    """Base class for authentication methods.

    An authenticator is an immutable credential that renders exactly one
    ``Authorization`` header value per request.
    """

    __slots__ = ()

    @abstractmethod
    def to_header_value(self) -> str:
        """Render the ``Authorization`` header value."""

    def get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers for requests."""
        return {"Authorization": self.to_header_value()}

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Get the authentication type."""

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_header_value() == other.to_header_value()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_header_value()))


class APITokenAuth(Authenticator):
    """API token authentication, sent as ``{email}/token:{token}`` basic credentials."""

    __slots__ = ("email", "token")

    def __init__(self, email: str, token: str) -> None:
        self.email = email
        self.token = token

    def to_header_value(self) -> str:
        return _basic(f"{self.email}/token:{self.token}")

    @property
    def auth_type(self) -> str:
        return "api-token"

    def __repr__(self) -> str:
        return f"APITokenAuth(email={self.email!r}, token='***')"


class PasswordAuth(Authenticator):
    """Basic authentication with an email and password."""

    __slots__ = ("email", "password")

    def __init__(self, email: str, password: str) -> None:
        self.email = email
        self.password = password

    def to_header_value(self) -> str:
        return _basic(f"{self.email}:{self.password}")

    @property
    def auth_type(self) -> str:
        return "password"

    def __repr__(self) -> str:
        return f"PasswordAuth(email={self.email!r}, password='***')"


class BearerAuth(Authenticator):
    """OAuth bearer token authentication."""

    __slots__ = ("token",)

    def __init__(self, token: str) -> None:
        self.token = token

    def to_header_value(self) -> str:
        return f"Bearer {self.token}"

    @property
    def auth_type(self) -> str:
        return "bearer"

    def __repr__(self) -> str:
        return "BearerAuth(token='***')"


def to_header_value(credential: Authenticator) -> str:
    """Render the ``Authorization`` header value for ``credential``."""
    return credential.to_header_value()
