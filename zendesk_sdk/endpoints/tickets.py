"""Ticket and ticket comment endpoints."""

from typing import Iterable, List, Optional

from ..exceptions import DecodeError
from ..http_client import with_query
from ..models.search import SearchResponse, TicketResult
from ..models.ticket import (
    Ticket,
    TicketComment,
    TicketCommentCountResponse,
    TicketCommentCreate,
    TicketCommentRequest,
    TicketCommentsResponse,
    TicketCreateRequest,
    TicketResponse,
    TicketStatus,
    TicketsResponse,
    TicketUpdate,
)
from ..query import PaginatedResponse, QueryParams, TicketsWithSideloading


class TicketsMixin:
    """Tickets API: ``/tickets`` and the per-user ticket lists."""

    async def create_ticket(self, ticket_request: TicketCreateRequest) -> Ticket:
        response = await self.post("tickets.json", ticket_request, response_model=TicketResponse)
        return response.ticket

    async def get_ticket(self, ticket_id: int) -> Ticket:
        response = await self.get(f"tickets/{ticket_id}.json", response_model=TicketResponse)
        return response.ticket

    async def update_ticket(self, ticket_id: int, ticket_request: TicketCreateRequest) -> Ticket:
        response = await self.put(
            f"tickets/{ticket_id}.json", ticket_request, response_model=TicketResponse
        )
        return response.ticket

    async def delete_ticket(self, ticket_id: int) -> None:
        await self.delete(f"tickets/{ticket_id}.json")

    async def list_tickets(self) -> List[Ticket]:
        response = await self.get("tickets.json", response_model=TicketsResponse)
        return response.tickets

    async def list_tickets_paginated(self, params: Optional[QueryParams] = None) -> PaginatedResponse[Ticket]:
        """List one page of tickets; ``params`` controls paging, sorting and cursor."""
        payload = await self.get("tickets.json", params=params)
        return PaginatedResponse[Ticket].from_collection(payload or {}, "tickets", Ticket)

    async def list_tickets_with_sideloading(self, include: Iterable[str]) -> TicketsWithSideloading:
        """List tickets with related resources, e.g. ``include=["users", "organizations"]``."""
        return await self.get_with_sideloading("tickets.json", include, TicketsResponse)

    async def list_tickets_assigned_to(self, assignee_id: int) -> List[Ticket]:
        response = await self.get(
            f"users/{assignee_id}/tickets/assigned.json", response_model=TicketsResponse
        )
        return response.tickets

    async def list_tickets_requested_by(self, requester_id: int) -> List[Ticket]:
        response = await self.get(
            f"users/{requester_id}/tickets/requested.json", response_model=TicketsResponse
        )
        return response.tickets

    async def search_tickets(self, query: str) -> List[Ticket]:
        """Search tickets and return only the ticket results."""
        endpoint = with_query("search.json", [("query", f"type:ticket {query}")])
        response = await self.get(endpoint, response_model=SearchResponse)
        return [result for result in response.results if isinstance(result, TicketResult)]

    # Comments

    async def get_ticket_comments(self, ticket_id: int) -> List[TicketComment]:
        response = await self.get(
            f"tickets/{ticket_id}/comments.json", response_model=TicketCommentsResponse
        )
        return response.comments

    async def get_ticket_comments_with_pagination(
        self, ticket_id: int, page_url: Optional[str] = None
    ) -> TicketCommentsResponse:
        """Fetch the first page of comments, or the page at ``page_url`` if given."""
        if page_url is not None:
            return await self.get_page(page_url, response_model=TicketCommentsResponse)
        return await self.get(
            f"tickets/{ticket_id}/comments.json", response_model=TicketCommentsResponse
        )

    async def count_ticket_comments(self, ticket_id: int) -> int:
        response = await self.get(
            f"tickets/{ticket_id}/comments/count.json", response_model=TicketCommentCountResponse
        )
        return response.count.value

    async def make_comment_private(self, ticket_id: int, comment_id: int) -> TicketComment:
        payload = await self.put(f"tickets/{ticket_id}/comments/{comment_id}/make_private.json", {})
        if not isinstance(payload, dict) or "comment" not in payload:
            raise DecodeError("Comment not found in response", response_data=payload)
        return TicketComment.model_validate(payload["comment"])

    async def add_ticket_comment(self, ticket_id: int, comment_request: TicketCommentRequest) -> Ticket:
        """Add a comment to a ticket, applying any ticket updates carried in the request."""
        response = await self.put(
            f"tickets/{ticket_id}.json", comment_request, response_model=TicketResponse
        )
        return response.ticket

    async def add_public_response(self, ticket_id: int, body: str) -> Ticket:
        """Add a comment visible to the requester."""
        comment = TicketCommentCreate.public_response(body)
        return await self.add_ticket_comment(ticket_id, TicketCommentRequest(ticket=TicketUpdate(comment=comment)))

    async def add_work_note(self, ticket_id: int, body: str) -> Ticket:
        """Add an internal note, hidden from the requester."""
        comment = TicketCommentCreate.work_note(body)
        return await self.add_ticket_comment(ticket_id, TicketCommentRequest(ticket=TicketUpdate(comment=comment)))

    async def add_comment_with_updates(
        self,
        ticket_id: int,
        comment: TicketCommentCreate,
        status: Optional[TicketStatus] = None,
        assignee_id: Optional[int] = None,
        tags: Optional[List[str]] = None,
    ) -> Ticket:
        update = TicketUpdate(comment=comment, status=status, assignee_id=assignee_id, tags=tags)
        return await self.add_ticket_comment(ticket_id, TicketCommentRequest(ticket=update))

    async def solve_ticket_with_response(self, ticket_id: int, body: str) -> Ticket:
        update = TicketUpdate(
            comment=TicketCommentCreate.public_response(body), status=TicketStatus.SOLVED
        )
        return await self.add_ticket_comment(ticket_id, TicketCommentRequest(ticket=update))

    async def reassign_ticket_with_note(self, ticket_id: int, new_assignee_id: int, note: str) -> Ticket:
        update = TicketUpdate(
            comment=TicketCommentCreate.work_note(note), assignee_id=new_assignee_id
        )
        return await self.add_ticket_comment(ticket_id, TicketCommentRequest(ticket=update))
