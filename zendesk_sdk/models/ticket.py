"""Ticket and ticket comment models."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from .base import BaseZendeskModel


class TicketStatus(str, Enum):
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class TicketType(str, Enum):
    PROBLEM = "problem"
    INCIDENT = "incident"
    QUESTION = "question"
    TASK = "task"


class CustomField(BaseZendeskModel):
    """A ticket custom field value."""

    id: int
    value: Any = None


class AttachmentThumbnail(BaseZendeskModel):
    id: int
    file_name: str
    content_url: str
    content_type: str
    size: int


class CommentAttachment(BaseZendeskModel):
    id: int
    file_name: str
    content_url: str
    content_type: str
    size: int
    thumbnails: Optional[List[AttachmentThumbnail]] = None
    inline: Optional[bool] = None
    deleted: Optional[bool] = None


class Ticket(BaseZendeskModel):
    """Represents a support ticket."""

    id: Optional[int] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    ticket_type: Optional[TicketType] = Field(default=None, alias="type")
    requester_id: Optional[int] = None
    assignee_id: Optional[int] = None
    group_id: Optional[int] = None
    organization_id: Optional[int] = None
    tags: Optional[List[str]] = None
    custom_fields: Optional[List[CustomField]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None

    @staticmethod
    def builder(subject: str) -> "TicketBuilder":
        return TicketBuilder(subject)


class TicketComment(BaseZendeskModel):
    """Represents a comment on a ticket."""

    id: Optional[int] = None
    body: str = ""
    author_id: Optional[int] = None
    created_at: Optional[str] = None
    public: Optional[bool] = None
    html_body: Optional[str] = None
    plain_body: Optional[str] = None
    audit_id: Optional[int] = None
    via: Optional[Any] = None
    metadata: Optional[Any] = None
    attachments: Optional[List[CommentAttachment]] = None


# Request/Response models

class TicketCreate(BaseZendeskModel):
    subject: str
    comment: TicketComment
    priority: Optional[TicketPriority] = None
    ticket_type: Optional[TicketType] = Field(default=None, alias="type")
    status: Optional[TicketStatus] = None
    requester_id: Optional[int] = None
    assignee_id: Optional[int] = None
    group_id: Optional[int] = None
    tags: Optional[List[str]] = None


class TicketCreateRequest(BaseZendeskModel):
    """Request model for creating or updating a ticket."""

    ticket: TicketCreate


class TicketResponse(BaseZendeskModel):
    ticket: Ticket


class TicketsResponse(BaseZendeskModel):
    tickets: List[Ticket]
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


class TicketCommentsResponse(BaseZendeskModel):
    comments: List[TicketComment]
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


class TicketCommentCount(BaseZendeskModel):
    value: int
    refreshed_at: Optional[str] = None


class TicketCommentCountResponse(BaseZendeskModel):
    count: TicketCommentCount


class TicketCommentCreate(BaseZendeskModel):
    """A new comment, public unless marked otherwise."""

    body: str
    public: Optional[bool] = None
    author_id: Optional[int] = None
    uploads: Optional[List[str]] = None

    @classmethod
    def public_response(cls, body: str) -> "TicketCommentCreate":
        return cls(body=body, public=True)

    @classmethod
    def work_note(cls, body: str) -> "TicketCommentCreate":
        return cls(body=body, public=False)

    @staticmethod
    def builder(body: str) -> "TicketCommentBuilder":
        return TicketCommentBuilder(body)


class TicketUpdate(BaseZendeskModel):
    comment: TicketCommentCreate
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    assignee_id: Optional[int] = None
    group_id: Optional[int] = None
    tags: Optional[List[str]] = None
    additional_tags: Optional[List[str]] = None
    remove_tags: Optional[List[str]] = None


class TicketCommentRequest(BaseZendeskModel):
    """Request model for adding a comment (and optional updates) to a ticket."""

    ticket: TicketUpdate


# Builders

class TicketBuilder:
    """Builds a ``TicketCreateRequest``; the initial comment is public by default."""

    def __init__(self, subject: str) -> None:
        self._subject = subject
        self._comment = ""
        self._fields: dict = {}

    def comment(self, body: str) -> "TicketBuilder":
        self._comment = body
        return self

    def priority(self, priority: TicketPriority) -> "TicketBuilder":
        self._fields["priority"] = priority
        return self

    def ticket_type(self, ticket_type: TicketType) -> "TicketBuilder":
        self._fields["ticket_type"] = ticket_type
        return self

    def status(self, status: TicketStatus) -> "TicketBuilder":
        self._fields["status"] = status
        return self

    def requester_id(self, requester_id: int) -> "TicketBuilder":
        self._fields["requester_id"] = requester_id
        return self

    def assignee_id(self, assignee_id: int) -> "TicketBuilder":
        self._fields["assignee_id"] = assignee_id
        return self

    def group_id(self, group_id: int) -> "TicketBuilder":
        self._fields["group_id"] = group_id
        return self

    def tags(self, tags: List[str]) -> "TicketBuilder":
        self._fields["tags"] = list(tags)
        return self

    def build(self) -> TicketCreateRequest:
        ticket = TicketCreate(
            subject=self._subject,
            comment=TicketComment(body=self._comment, public=True),
            **self._fields,
        )
        return TicketCreateRequest(ticket=ticket)


class TicketCommentBuilder:
    """Builds a comment, or a full comment request with ticket updates."""

    def __init__(self, body: str) -> None:
        self._body = body
        self._public = True
        self._author_id: Optional[int] = None
        self._uploads: Optional[List[str]] = None

    def public(self, is_public: bool) -> "TicketCommentBuilder":
        self._public = is_public
        return self

    def work_note(self) -> "TicketCommentBuilder":
        return self.public(False)

    def public_response(self) -> "TicketCommentBuilder":
        return self.public(True)

    def author_id(self, author_id: int) -> "TicketCommentBuilder":
        self._author_id = author_id
        return self

    def uploads(self, uploads: List[str]) -> "TicketCommentBuilder":
        self._uploads = list(uploads)
        return self

    def build(self) -> TicketCommentCreate:
        return TicketCommentCreate(
            body=self._body,
            public=self._public,
            author_id=self._author_id,
            uploads=self._uploads,
        )

    def build_request(
        self,
        status: Optional[TicketStatus] = None,
        priority: Optional[TicketPriority] = None,
        assignee_id: Optional[int] = None,
        group_id: Optional[int] = None,
        tags: Optional[List[str]] = None,
        additional_tags: Optional[List[str]] = None,
        remove_tags: Optional[List[str]] = None,
    ) -> TicketCommentRequest:
        update = TicketUpdate(
            comment=self.build(),
            status=status,
            priority=priority,
            assignee_id=assignee_id,
            group_id=group_id,
            tags=tags,
            additional_tags=additional_tags,
            remove_tags=remove_tags,
        )
        return TicketCommentRequest(ticket=update)
