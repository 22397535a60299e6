"""Exception classes for the Zendesk SDK."""

from typing import Optional, Any


class ZendeskError(Exception):
    """Base exception for all Zendesk SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[str] = None,
        response_data: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.response_data = response_data

    def __str__(self) -> str:
        base_msg = self.message
        if self.status_code:
            base_msg = f"HTTP {self.status_code}: {base_msg}"
        if self.details:
            base_msg = f"{base_msg} - {self.details}"
        return base_msg

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"code={self.code!r})"
        )


class NetworkError(ZendeskError):
    """Raised when the request never produced an HTTP response (connect, TLS, protocol)."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("code", "NETWORK_ERROR")
        super().__init__(message, **kwargs)
        self.operation = operation
        self.url = url


class TimeoutError(NetworkError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("code", "TIMEOUT")
        super().__init__(message, **kwargs)
        self.timeout = timeout


class InvalidURLError(ZendeskError):
    """Raised when an endpoint or page URL cannot be turned into a request URL."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, code="INVALID_URL", **kwargs)
        self.url = url


class DecodeError(ZendeskError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "DECODE_ERROR")
        super().__init__(message, **kwargs)


class UnauthorizedError(ZendeskError):
    """Raised when authentication is required or invalid (HTTP 401)."""

    def __init__(self, message: str = "Unauthorized", **kwargs: Any) -> None:
        super().__init__(message, status_code=401, code="UNAUTHORIZED", **kwargs)


class RateLimitError(ZendeskError):
    """Raised when rate limit is exceeded (HTTP 429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=429, code="RATE_LIMITED", **kwargs)
        self.retry_after = retry_after


class APIError(ZendeskError):
    """Raised for any other non-success HTTP status."""

    def __init__(self, status_code: int, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "API_ERROR")
        super().__init__(message, status_code=status_code, **kwargs)


class ConfigurationError(ZendeskError):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, code="CONFIG_ERROR", **kwargs)
        self.field = field


class ValidationError(ZendeskError):
    """Raised when a library-level precondition fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
