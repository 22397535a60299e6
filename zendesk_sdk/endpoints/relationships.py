"""Lookup relationship endpoints.

A lookup field on a source object (ticket, user, organization or custom
object record) points at a target object. ``get_sources_by_target`` walks
the relationship backwards: given a target, list the sources pointing at it.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Type

from ..exceptions import DecodeError
from ..models.organization import Organization
from ..models.relationship import (
    CreateLookupRelationshipField,
    LookupFieldResponse,
    LookupFieldsResponse,
    LookupRelationshipField,
    ObjectType,
    RelationshipSourcesResponse,
    TargetType,
    object_type_value,
)
from ..models.ticket import Ticket
from ..models.user import User
from ..query import QueryParams, SideloadedResponse

# kind -> (collection path and list key, single-item key)
_FIELD_KINDS = {
    "ticket": ("ticket_fields", "ticket_field"),
    "user": ("user_fields", "user_field"),
    "organization": ("organization_fields", "organization_field"),
}


def _sources_endpoint(
    target_type: TargetType, target_id: int, field_id: int, source_type: TargetType
) -> str:
    return (
        f"{object_type_value(target_type)}/{target_id}"
        f"/relationship_fields/{field_id}/{object_type_value(source_type)}"
    )


class RelationshipsMixin:
    async def get_sources_by_target(
        self,
        target_type: TargetType,
        target_id: int,
        field_id: int,
        source_type: TargetType,
        source_model: Type[Any] = dict,
        params: Optional[QueryParams] = None,
    ) -> RelationshipSourcesResponse:
        """List the ``source_type`` objects whose lookup field ``field_id`` points at the target.

        Results are decoded as ``source_model`` (raw dicts by default).
        """
        return await self.get(
            _sources_endpoint(target_type, target_id, field_id, source_type),
            params=params,
            response_model=RelationshipSourcesResponse[source_model],
        )

    async def get_sources_by_target_with_sideloading(
        self,
        target_type: TargetType,
        target_id: int,
        field_id: int,
        source_type: TargetType,
        include: Iterable[str],
        source_model: Type[Any] = dict,
    ) -> SideloadedResponse:
        return await self.get_with_sideloading(
            _sources_endpoint(target_type, target_id, field_id, source_type),
            include,
            RelationshipSourcesResponse[source_model],
        )

    async def get_sources_by_target_with_params(
        self,
        target_type: TargetType,
        target_id: int,
        field_id: int,
        source_type: TargetType,
        params: QueryParams,
        source_model: Type[Any] = dict,
    ) -> RelationshipSourcesResponse:
        return await self.get_sources_by_target(
            target_type, target_id, field_id, source_type, source_model, params=params
        )

    # Lookup field definitions

    async def _create_lookup_field(self, kind: str, field: CreateLookupRelationshipField) -> LookupRelationshipField:
        collection, key = _FIELD_KINDS[kind]
        response = await self.post(
            f"{collection}.json", {key: field.to_payload()}, response_model=LookupFieldResponse
        )
        return self._unwrap_lookup_field(response, key)

    async def _get_lookup_field(self, kind: str, field_id: int) -> LookupRelationshipField:
        collection, key = _FIELD_KINDS[kind]
        response = await self.get(f"{collection}/{field_id}.json", response_model=LookupFieldResponse)
        return self._unwrap_lookup_field(response, key)

    async def _list_lookup_fields(self, kind: str) -> List[LookupRelationshipField]:
        collection, _ = _FIELD_KINDS[kind]
        response = await self.get(f"{collection}.json", response_model=LookupFieldsResponse)
        fields = getattr(response, collection) or []
        # only lookup fields are guaranteed to carry relationship_target_type
        return [
            LookupRelationshipField.model_validate(field)
            for field in fields
            if field.get("type") == "lookup"
        ]

    async def _delete_lookup_field(self, kind: str, field_id: int) -> None:
        collection, _ = _FIELD_KINDS[kind]
        await self.delete(f"{collection}/{field_id}.json")

    @staticmethod
    def _unwrap_lookup_field(response: LookupFieldResponse, key: str) -> LookupRelationshipField:
        field = getattr(response, key)
        if field is None:
            raise DecodeError(f"No {key.replace('_', ' ')} in response")
        return field

    async def create_ticket_lookup_field(self, field: CreateLookupRelationshipField) -> LookupRelationshipField:
        return await self._create_lookup_field("ticket", field)

    async def create_user_lookup_field(self, field: CreateLookupRelationshipField) -> LookupRelationshipField:
        return await self._create_lookup_field("user", field)

    async def create_organization_lookup_field(
        self, field: CreateLookupRelationshipField
    ) -> LookupRelationshipField:
        return await self._create_lookup_field("organization", field)

    async def list_ticket_lookup_fields(self) -> List[LookupRelationshipField]:
        return await self._list_lookup_fields("ticket")

    async def list_user_lookup_fields(self) -> List[LookupRelationshipField]:
        return await self._list_lookup_fields("user")

    async def list_organization_lookup_fields(self) -> List[LookupRelationshipField]:
        return await self._list_lookup_fields("organization")

    async def get_ticket_lookup_field(self, field_id: int) -> LookupRelationshipField:
        return await self._get_lookup_field("ticket", field_id)

    async def get_user_lookup_field(self, field_id: int) -> LookupRelationshipField:
        return await self._get_lookup_field("user", field_id)

    async def get_organization_lookup_field(self, field_id: int) -> LookupRelationshipField:
        return await self._get_lookup_field("organization", field_id)

    async def delete_ticket_lookup_field(self, field_id: int) -> None:
        await self._delete_lookup_field("ticket", field_id)

    async def delete_user_lookup_field(self, field_id: int) -> None:
        await self._delete_lookup_field("user", field_id)

    async def delete_organization_lookup_field(self, field_id: int) -> None:
        await self._delete_lookup_field("organization", field_id)

    # Shortcuts for the common source/target pairs

    async def get_tickets_related_to_user(self, user_id: int, lookup_field_id: int) -> RelationshipSourcesResponse:
        return await self.get_sources_by_target(
            ObjectType.USER, user_id, lookup_field_id, ObjectType.TICKET, Ticket
        )

    async def get_tickets_related_to_organization(
        self, organization_id: int, lookup_field_id: int
    ) -> RelationshipSourcesResponse:
        return await self.get_sources_by_target(
            ObjectType.ORGANIZATION, organization_id, lookup_field_id, ObjectType.TICKET, Ticket
        )

    async def get_users_related_to_ticket(self, ticket_id: int, lookup_field_id: int) -> RelationshipSourcesResponse:
        return await self.get_sources_by_target(
            ObjectType.TICKET, ticket_id, lookup_field_id, ObjectType.USER, User
        )

    async def get_organizations_related_to_user(
        self, user_id: int, lookup_field_id: int
    ) -> RelationshipSourcesResponse:
        return await self.get_sources_by_target(
            ObjectType.USER, user_id, lookup_field_id, ObjectType.ORGANIZATION, Organization
        )

    async def get_tickets_with_lookup_relationships(
        self,
        ticket_ids: Sequence[int],
        lookup_fields: Sequence[Tuple[int, TargetType]],
    ) -> List[Tuple[Ticket, Dict[int, List[Any]]]]:
        """Fetch each ticket together with the objects related to it through ``lookup_fields``.

        ``lookup_fields`` pairs a field id with the object type it relates to.
        Related objects are returned as raw dicts keyed by field id. Requests
        are issued one after another.
        """
        results = []
        for ticket_id in ticket_ids:
            ticket = await self.get_ticket(ticket_id)
            related: Dict[int, List[Any]] = {}
            for field_id, related_type in lookup_fields:
                sources = await self.get_sources_by_target(
                    ObjectType.TICKET, ticket_id, field_id, related_type
                )
                related[field_id] = sources.results
            results.append((ticket, related))
        return results
