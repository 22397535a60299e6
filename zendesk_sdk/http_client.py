"""HTTP client for the Zendesk SDK.

Every endpoint method funnels into ``HTTPClient.request``: build the URL,
attach headers, send the JSON body, then either decode a 2xx body into the
requested type or classify the failure into one of the SDK exceptions.
"""

import asyncio
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode, urljoin, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import ZendeskConfig
from .exceptions import (
    APIError,
    DecodeError,
    InvalidURLError,
    NetworkError,
    RateLimitError,
    TimeoutError,
    UnauthorizedError,
    ZendeskError,
)
from .query import QueryParams, SideloadedResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _serialize_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True, by_alias=True)
    return body


def _is_retryable(status_code: int) -> bool:
    return status_code == 429 or 500 <= status_code < 600


def with_query(endpoint: str, pairs: Sequence[Tuple[str, Any]]) -> str:
    """Append ``pairs`` to ``endpoint`` as an encoded query string, skipping ``None`` values."""
    encoded = []
    for key, value in pairs:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded.append((key, value))
    if not encoded:
        return endpoint
    return f"{endpoint}?{urlencode(encoded, safe='[],:', quote_via=quote)}"


def extract_error_message(status_code: int, body: str) -> str:
    """Pick the human-readable message out of an error response body.

    422 responses carry per-field validation detail, so their ``details`` or
    ``errors`` structure is echoed as JSON (``description`` is the fallback).
    Otherwise the ``error`` string is used. A body that is not a JSON object
    is returned verbatim.
    """
    try:
        data = json.loads(body)
    except ValueError:
        return body

    if not isinstance(data, dict):
        return body

    if status_code == 422:
        if "details" in data:
            return f"RecordInvalid - Details: {json.dumps(data['details'])}"
        if "errors" in data:
            return f"RecordInvalid - Errors: {json.dumps(data['errors'])}"
        if "description" in data:
            description = data["description"]
            if not isinstance(description, str):
                description = "Unknown validation error"
            return f"RecordInvalid - {description}"

    error = data.get("error")
    return error if isinstance(error, str) else body


class HTTPClient:
    """HTTP client for making requests to the Zendesk API.

    The client holds nothing mutable after construction and may be shared by
    concurrent tasks. Connection pooling is left to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: ZendeskConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config.ensure_valid()
        self.config = config
        self.base_url = config.base_url()

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _prepare_headers(self) -> Dict[str, str]:
        """Prepare headers with authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(self.config.auth.get_auth_headers())
        if self.config.user_agent:
            headers["User-Agent"] = self.config.user_agent
        return headers

    def build_url(self, endpoint: str, params: Optional[QueryParams] = None) -> str:
        """Join ``endpoint`` onto the API root and overlay the query string of ``params``.

        A query string already present in ``endpoint`` is replaced when
        ``params`` renders a non-empty one, and kept otherwise.
        """
        # "./" keeps paths such as "zen:user/1/..." from parsing as a scheme
        try:
            parts = urlsplit(urljoin(self.base_url, "./" + endpoint.lstrip("/")))
        except ValueError as e:
            raise InvalidURLError(f"Invalid endpoint {endpoint!r}: {e}", url=endpoint) from e

        base = urlsplit(self.base_url)
        if (parts.scheme, parts.netloc) != (base.scheme, base.netloc):
            raise InvalidURLError(
                f"Endpoint {endpoint!r} resolves outside {self.base_url}", url=endpoint
            )

        if params is not None:
            query = params.to_query_string().lstrip("?")
            if query:
                parts = parts._replace(query=query)

        return urlunsplit(parts)

    def endpoint_from_page_url(self, page_url: str) -> str:
        """Turn an absolute ``next_page``/``previous_page`` URL into an endpoint."""
        root = urlsplit(self.base_url).path
        parts = urlsplit(page_url)
        index = parts.path.find(root)
        if index < 0:
            raise InvalidURLError(f"Page URL {page_url!r} is not under {root}", url=page_url)

        endpoint = parts.path[index + len(root):]
        if parts.query:
            endpoint = f"{endpoint}?{parts.query}"
        return endpoint

    def _handle_error(self, response: httpx.Response) -> None:
        """Handle HTTP error responses."""
        status_code = response.status_code
        text = response.text
        message = extract_error_message(status_code, text) or response.reason_phrase

        try:
            error_data = response.json()
        except ValueError:
            error_data = text

        if status_code == 401:
            raise UnauthorizedError(message, response_data=error_data)
        elif status_code == 429:
            # Retry-After is not parsed
            raise RateLimitError(message or "Rate limit exceeded", retry_after=None, response_data=error_data)
        else:
            raise APIError(status_code, message, response_data=error_data)

    async def _make_request_with_retries(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        **kwargs: Any,
    ) -> httpx.Response:
        """Send the request, retrying up to ``max_retries`` times.

        Only transport failures, 429 and 5xx are retried. With the default
        ``max_retries=0`` exactly one attempt is made.
        """
        attempts = self.config.max_retries + 1

        for attempt in range(attempts):
            last_attempt = attempt == attempts - 1
            try:
                response = await self._client.request(method, url, headers=headers, **kwargs)
            except httpx.InvalidURL as e:
                raise InvalidURLError(f"Invalid request URL: {e}", url=url) from e
            except httpx.UnsupportedProtocol as e:
                raise InvalidURLError(f"Unsupported URL: {e}", url=url) from e
            except httpx.TimeoutException as e:
                if last_attempt:
                    raise TimeoutError(
                        f"Request timed out after {self.config.timeout}s",
                        timeout=self.config.timeout,
                        operation=method,
                        url=url,
                    ) from e
                reason = "timed out"
            except httpx.TransportError as e:
                if last_attempt:
                    raise NetworkError(f"Network error: {e}", operation=method, url=url) from e
                reason = f"network error: {e}"
            else:
                if last_attempt or not _is_retryable(response.status_code):
                    return response
                reason = f"HTTP {response.status_code}"

            delay = self.config.retry_backoff * 2 ** attempt
            logger.debug(
                "%s %s failed (%s), retrying in %.2fs (attempt %d of %d)",
                method, url, reason, delay, attempt + 1, attempts,
            )
            await asyncio.sleep(delay)

        raise ZendeskError("Request failed after all retry attempts")

    def _extract_data(self, response: httpx.Response, response_model: Optional[Any] = None) -> Any:
        """Decode a response, or raise the classified error for a non-2xx status."""
        if not response.is_success:
            self._handle_error(response)

        if not response.content.strip():
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Response body is not valid JSON: {e}", response_data=response.text
            ) from e

        if response_model is None:
            return data

        try:
            return _adapter(response_model).validate_python(data)
        except PydanticValidationError as e:
            name = getattr(response_model, "__name__", repr(response_model))
            raise DecodeError(
                f"Response does not match {name}", details=str(e), response_data=data
            ) from e

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Send one request and decode the answer into ``response_model``.

        ``response_model`` is anything pydantic can validate against (a model,
        ``List[Model]``, ``SideloadedResponse[Model]``); with ``None`` the raw
        JSON value is returned. Models in ``body`` are serialized without
        ``None`` fields.
        """
        url = self.build_url(endpoint, params)
        headers = self._prepare_headers()

        kwargs: Dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = _serialize_body(body)

        logger.debug("%s %s", method, url)
        response = await self._make_request_with_retries(method, url, headers, **kwargs)
        return self._extract_data(response, response_model)

    async def get(
        self,
        endpoint: str,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Make a GET request."""
        return await self.request("GET", endpoint, params=params, response_model=response_model)

    async def post(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Make a POST request."""
        return await self.request("POST", endpoint, body, params, response_model)

    async def put(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Make a PUT request."""
        return await self.request("PUT", endpoint, body, params, response_model)

    async def patch(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Make a PATCH request."""
        return await self.request("PATCH", endpoint, body, params, response_model)

    async def delete(
        self,
        endpoint: str,
        params: Optional[QueryParams] = None,
        response_model: Optional[Any] = None,
    ) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", endpoint, params=params, response_model=response_model)

    async def get_with_sideloading(
        self,
        endpoint: str,
        include: Iterable[str],
        response_model: Any,
        params: Optional[QueryParams] = None,
    ) -> SideloadedResponse:
        """GET ``endpoint`` with ``include=...`` and decode it as ``SideloadedResponse[response_model]``."""
        params = (params or QueryParams()).with_sideloading(include)
        return await self.get(endpoint, params=params, response_model=SideloadedResponse[response_model])

    async def get_page(self, page_url: str, response_model: Optional[Any] = None) -> Any:
        """Follow a ``next_page``/``previous_page`` URL returned by the API."""
        return await self.get(self.endpoint_from_page_url(page_url), response_model=response_model)
