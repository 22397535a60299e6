"""Client configuration for the Zendesk SDK."""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .auth import APITokenAuth, Authenticator, BearerAuth, PasswordAuth
from .exceptions import ConfigurationError
from .version import __version__

DEFAULT_API_VERSION = "v2"
DEFAULT_DOMAIN = "zendesk.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"zendesk-python-sdk/{__version__}"


class ZendeskConfig(BaseModel):
    """Immutable settings held by a client for its whole lifetime.

    Nothing is checked when the config is built; ``ensure_valid`` runs when
    a client is constructed so that a bad config fails before any request.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    subdomain: str
    auth: Authenticator
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0
    retry_backoff: float = 1.0
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    domain: str = DEFAULT_DOMAIN

    def with_api_version(self, version: str) -> "ZendeskConfig":
        return self.model_copy(update={"api_version": version})

    def with_timeout(self, timeout: float) -> "ZendeskConfig":
        return self.model_copy(update={"timeout": timeout})

    def with_max_retries(self, max_retries: int) -> "ZendeskConfig":
        return self.model_copy(update={"max_retries": max_retries})

    def with_user_agent(self, user_agent: Optional[str]) -> "ZendeskConfig":
        return self.model_copy(update={"user_agent": user_agent})

    def base_url(self) -> str:
        """Return the API root, always ending with a slash."""
        host = f"{self.subdomain}.{self.domain}"
        url = f"https://{host}/api/{self.api_version}/"
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise ConfigurationError(f"Invalid base URL {url!r}: {e}", field="subdomain") from e

        # subdomain or domain leaking '/', '@', ':', '?' or '#' changes the host
        if (
            parts.netloc != host
            or parts.hostname != host.lower()
            or any(c.isspace() for c in url)
        ):
            raise ConfigurationError(f"Invalid base URL {url!r}", field="subdomain")
        return url

    def ensure_valid(self) -> None:
        """Raise ``ConfigurationError`` if the config cannot produce a working client."""
        if not self.subdomain or not self.subdomain.strip():
            raise ConfigurationError("Subdomain cannot be empty", field="subdomain")

        if not self.api_version or not self.api_version.strip():
            raise ConfigurationError("API version cannot be empty", field="api_version")

        if self.timeout <= 0:
            raise ConfigurationError("Timeout must be greater than 0", field="timeout")

        if self.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative", field="max_retries")

        if self.retry_backoff < 0:
            raise ConfigurationError("retry_backoff cannot be negative", field="retry_backoff")

        if not isinstance(self.auth, Authenticator):
            raise ConfigurationError("auth must be an Authenticator", field="auth")

        self.base_url()


class ZendeskSettings(BaseSettings):
    """Environment-driven settings (``ZENDESK_*`` variables or a ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="ZENDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    subdomain: str = ""
    email: Optional[str] = None
    api_token: Optional[str] = None
    password: Optional[str] = None
    oauth_token: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=DEFAULT_TIMEOUT)
    max_retries: int = 0
    user_agent: Optional[str] = DEFAULT_USER_AGENT

    def credential(self) -> Authenticator:
        if self.oauth_token:
            return BearerAuth(self.oauth_token)
        if self.email and self.api_token:
            return APITokenAuth(self.email, self.api_token)
        if self.email and self.password:
            return PasswordAuth(self.email, self.password)
        raise ConfigurationError(
            "Set ZENDESK_OAUTH_TOKEN, or ZENDESK_EMAIL with ZENDESK_API_TOKEN or ZENDESK_PASSWORD",
            field="auth",
        )

    def to_config(self) -> ZendeskConfig:
        return ZendeskConfig(
            subdomain=self.subdomain,
            auth=self.credential(),
            api_version=self.api_version,
            timeout=self.timeout,
            max_retries=self.max_retries,
            user_agent=self.user_agent,
        )
