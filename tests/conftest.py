"""
Test configuration for the Zendesk SDK

Purpose: Provide a mock Zendesk API and a client wired to it
Expected output: Reusable fixtures; no test touches the network
"""

import json
from typing import Any, List, Optional, Union

import httpx
import pytest

from zendesk_sdk import APITokenAuth, ZendeskClient, ZendeskConfig


class MockZendeskAPI:
    """Queue of canned responses served through ``httpx.MockTransport``.

    Every request is recorded. When the queue is empty a ``200 {}`` is served.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Union[httpx.Response, Exception]] = []

    def add(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        text: Optional[str] = None,
        headers: Optional[dict] = None,
    ) -> "MockZendeskAPI":
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body, headers=headers)
        else:
            response = httpx.Response(status_code, text=text or "", headers=headers)
        self._responses.append(response)
        return self

    def fail(self, error: Exception) -> "MockZendeskAPI":
        self._responses.append(error)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api() -> MockZendeskAPI:
    return MockZendeskAPI()


@pytest.fixture
def auth() -> APITokenAuth:
    return APITokenAuth("agent@acme.com", "secret-token")


@pytest.fixture
def config(auth) -> ZendeskConfig:
    return ZendeskConfig(subdomain="acme", auth=auth)


@pytest.fixture
def client(config, api) -> ZendeskClient:
    """ZendeskClient for ``acme.zendesk.com`` talking to the mock API."""
    return ZendeskClient(config, transport=api.transport)


@pytest.fixture
def sample_ticket_data():
    """
    Sample ticket data for testing

    Based on Zendesk ticket API response structure:
    https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
    """
    return {
        "id": 42,
        "subject": "Printer on fire",
        "description": "The printer in room 3 is on fire.",
        "status": "open",
        "priority": "urgent",
        "type": "incident",
        "requester_id": 67890,
        "assignee_id": 11111,
        "organization_id": 22222,
        "created_at": "2024-01-01T12:00:00Z",
        "updated_at": "2024-01-01T14:30:00Z",
        "tags": ["hardware", "fire"],
        "custom_fields": [{"id": 360001, "value": "building-a"}],
        "via": {"channel": "web"},
    }


@pytest.fixture
def sample_user_data():
    """
    Sample user data for testing

    Based on Zendesk user API response structure:
    https://developer.zendesk.com/api-reference/ticketing/users/users/
    """
    return {
        "id": 67890,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "role": "end-user",
        "active": True,
        "suspended": False,
        "organization_id": 22222,
        "created_at": "2023-12-01T10:00:00Z",
        "updated_at": "2024-01-01T10:00:00Z",
        "user_fields": {},
    }


@pytest.fixture
def sample_organization_data():
    """
    Sample organization data for testing

    Based on Zendesk organization API response structure:
    https://developer.zendesk.com/api-reference/ticketing/organizations/organizations/
    """
    return {
        "id": 22222,
        "name": "Example Corp",
        "domain_names": ["example.com"],
        "shared_tickets": True,
        "created_at": "2023-11-01T09:00:00Z",
        "updated_at": "2024-01-01T09:00:00Z",
        "organization_fields": {},
    }
