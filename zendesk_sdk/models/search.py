"""Search models and the search query builder."""

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import ConfigDict, Discriminator, Tag

from .base import BaseZendeskModel
from .organization import Organization
from .ticket import Ticket
from .user import User


class Group(BaseZendeskModel):
    id: int
    name: str
    description: Optional[str] = None
    default: Optional[bool] = None
    deleted: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TicketResult(Ticket):
    result_type: Literal["ticket"] = "ticket"


class UserResult(User):
    result_type: Literal["user"] = "user"


class OrganizationResult(Organization):
    result_type: Literal["organization"] = "organization"


class GroupResult(Group):
    result_type: Literal["group"] = "group"


class OtherResult(BaseZendeskModel):
    """Any result type without a dedicated model (articles, topics, ...)."""

    model_config = ConfigDict(extra="allow")

    result_type: str
    id: Optional[int] = None


_KNOWN_RESULT_TYPES = frozenset({"ticket", "user", "organization", "group"})


def _result_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("result_type")
    else:
        kind = getattr(value, "result_type", None)
    return kind if kind in _KNOWN_RESULT_TYPES else "other"


SearchResult = Annotated[
    Union[
        Annotated[TicketResult, Tag("ticket")],
        Annotated[UserResult, Tag("user")],
        Annotated[OrganizationResult, Tag("organization")],
        Annotated[GroupResult, Tag("group")],
        Annotated[OtherResult, Tag("other")],
    ],
    Discriminator(_result_kind),
]


class SearchResponse(BaseZendeskModel):
    results: List[SearchResult]
    facets: Optional[Any] = None
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


class SearchCountResponse(BaseZendeskModel):
    count: int


class SearchExportResponse(BaseZendeskModel):
    results: List[SearchResult]
    after_cursor: Optional[str] = None
    before_cursor: Optional[str] = None
    after_url: Optional[str] = None
    before_url: Optional[str] = None
    end_of_stream: Optional[bool] = None


class SearchSortBy(str, Enum):
    UPDATED_AT = "updated_at"
    CREATED_AT = "created_at"
    PRIORITY = "priority"
    STATUS = "status"
    TICKET_TYPE = "ticket_type"

    def __str__(self) -> str:
        return self.value


def _quoted(text: str) -> str:
    return '"{}"'.format(text.replace('"', '\\"'))


class SearchQueryBuilder:
    """Composes a search query string from space-separated terms.

    >>> SearchQueryBuilder().tickets().status("open").tags("bug").build()
    'type:ticket status:open tags:bug'
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def _add(self, part: str) -> "SearchQueryBuilder":
        self._parts.append(part)
        return self

    # Resource type filters
    def tickets(self) -> "SearchQueryBuilder":
        return self._add("type:ticket")

    def users(self) -> "SearchQueryBuilder":
        return self._add("type:user")

    def organizations(self) -> "SearchQueryBuilder":
        return self._add("type:organization")

    def groups(self) -> "SearchQueryBuilder":
        return self._add("type:group")

    # Ticket filters
    def status(self, status: str) -> "SearchQueryBuilder":
        return self._add(f"status:{status}")

    def priority(self, priority: str) -> "SearchQueryBuilder":
        return self._add(f"priority:{priority}")

    def ticket_type(self, ticket_type: str) -> "SearchQueryBuilder":
        return self._add(f"ticket_type:{ticket_type}")

    def assignee_id(self, assignee_id: int) -> "SearchQueryBuilder":
        return self._add(f"assignee:{assignee_id}")

    def requester_id(self, requester_id: int) -> "SearchQueryBuilder":
        return self._add(f"requester:{requester_id}")

    def organization_id(self, organization_id: int) -> "SearchQueryBuilder":
        return self._add(f"organization:{organization_id}")

    def group_id(self, group_id: int) -> "SearchQueryBuilder":
        return self._add(f"group:{group_id}")

    def tags(self, tag: str) -> "SearchQueryBuilder":
        return self._add(f"tags:{tag}")

    # Date filters
    def created_after(self, date: str) -> "SearchQueryBuilder":
        return self._add(f"created>{date}")

    def created_before(self, date: str) -> "SearchQueryBuilder":
        return self._add(f"created<{date}")

    def updated_after(self, date: str) -> "SearchQueryBuilder":
        return self._add(f"updated>{date}")

    def updated_before(self, date: str) -> "SearchQueryBuilder":
        return self._add(f"updated<{date}")

    # Text
    def text(self, text: str) -> "SearchQueryBuilder":
        return self._add(_quoted(text) if " " in text else text)

    def subject_contains(self, text: str) -> "SearchQueryBuilder":
        return self._add(f"subject:{_quoted(text)}")

    def description_contains(self, text: str) -> "SearchQueryBuilder":
        return self._add(f"description:{_quoted(text)}")

    def custom_field(self, field_id: int, value: str) -> "SearchQueryBuilder":
        return self._add(f"custom_field_{field_id}:{value}")

    def raw(self, query_part: str) -> "SearchQueryBuilder":
        return self._add(query_part)

    def build(self) -> str:
        return " ".join(self._parts)
