"""Lookup relationship field models."""

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseZendeskModel

T = TypeVar("T")

CUSTOM_OBJECT_PREFIX = "zen:custom_object:"


class ObjectType(str, Enum):
    """Built-in object types that can take part in a lookup relationship.

    Custom objects are addressed by a plain string, see ``custom_object_type``.
    """

    USER = "zen:user"
    ORGANIZATION = "zen:organization"
    TICKET = "zen:ticket"
    GROUP = "zen:group"

    def __str__(self) -> str:
        return self.value


TargetType = Union[ObjectType, str]


def custom_object_type(key: str) -> str:
    return f"{CUSTOM_OBJECT_PREFIX}{key}"


def object_type_value(target: TargetType) -> str:
    return target.value if isinstance(target, ObjectType) else str(target)


class LookupRelationshipField(BaseZendeskModel):
    id: int
    title: str
    description: Optional[str] = None
    active: bool = True
    required: bool = False
    field_type: str = Field(alias="type")
    relationship_target_type: str
    relationship_filter: Optional[Any] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None
    key: Optional[str] = None
    raw_title: Optional[str] = None
    raw_description: Optional[str] = None

    def is_lookup(self) -> bool:
        return self.field_type == "lookup"


class CreateLookupRelationshipField(BaseZendeskModel):
    title: str
    description: Optional[str] = None
    active: Optional[bool] = True
    required: Optional[bool] = False
    field_type: str = Field(default="lookup", alias="type")
    relationship_target_type: str
    relationship_filter: Optional[Any] = None
    key: Optional[str] = None

    @staticmethod
    def builder(title: str, target_type: TargetType) -> "LookupRelationshipFieldBuilder":
        return LookupRelationshipFieldBuilder(title, target_type)

    @classmethod
    def user_lookup(cls, title: str) -> "CreateLookupRelationshipField":
        return cls(title=title, relationship_target_type=ObjectType.USER.value)

    @classmethod
    def organization_lookup(cls, title: str) -> "CreateLookupRelationshipField":
        return cls(title=title, relationship_target_type=ObjectType.ORGANIZATION.value)

    @classmethod
    def ticket_lookup(cls, title: str) -> "CreateLookupRelationshipField":
        return cls(title=title, relationship_target_type=ObjectType.TICKET.value)

    @classmethod
    def custom_object_lookup(cls, title: str, custom_object_key: str) -> "CreateLookupRelationshipField":
        return cls(title=title, relationship_target_type=custom_object_type(custom_object_key))


class RelationshipMeta(BaseZendeskModel):
    has_more: bool = False
    after_cursor: Optional[str] = None
    before_cursor: Optional[str] = None


class RelationshipSourcesResponse(BaseModel, Generic[T]):
    """Sources pointing at one target through a lookup field."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    results: List[T]
    count: Optional[int] = None
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    meta: Optional[RelationshipMeta] = None


class LookupFieldResponse(BaseZendeskModel):
    ticket_field: Optional[LookupRelationshipField] = None
    user_field: Optional[LookupRelationshipField] = None
    organization_field: Optional[LookupRelationshipField] = None


class LookupFieldsResponse(BaseZendeskModel):
    ticket_fields: Optional[List[Dict[str, Any]]] = None
    user_fields: Optional[List[Dict[str, Any]]] = None
    organization_fields: Optional[List[Dict[str, Any]]] = None


class LookupRelationshipFieldBuilder:
    def __init__(self, title: str, target_type: TargetType) -> None:
        self._fields: Dict[str, Any] = {
            "title": title,
            "relationship_target_type": object_type_value(target_type),
        }

    def description(self, description: str) -> "LookupRelationshipFieldBuilder":
        self._fields["description"] = description
        return self

    def required(self, required: bool) -> "LookupRelationshipFieldBuilder":
        self._fields["required"] = required
        return self

    def active(self, active: bool) -> "LookupRelationshipFieldBuilder":
        self._fields["active"] = active
        return self

    def key(self, key: str) -> "LookupRelationshipFieldBuilder":
        self._fields["key"] = key
        return self

    def filter(self, relationship_filter: Any) -> "LookupRelationshipFieldBuilder":
        self._fields["relationship_filter"] = relationship_filter
        return self

    def filter_users_by_role(self, role: str) -> "LookupRelationshipFieldBuilder":
        return self.filter({"all": [{"field": "role", "operator": "is", "value": role}]})

    def filter_active_only(self) -> "LookupRelationshipFieldBuilder":
        return self.filter({"all": [{"field": "active", "operator": "is", "value": True}]})

    def build(self) -> CreateLookupRelationshipField:
        return CreateLookupRelationshipField(**self._fields)
