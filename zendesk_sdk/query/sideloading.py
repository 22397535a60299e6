"""Responses carrying side-loaded resources next to the primary collection.

A request such as ``tickets.json?include=users,organizations`` answers with::

    {"tickets": [...], "users": [...], "organizations": [...], "count": 1}

The payload is decoded twice. ``primary`` is validated against the primary
model, which ignores keys it does not declare. Every top-level key that is not
a field of the primary model (or one of the wrapper's pagination fields) is
kept verbatim in ``sideloaded`` and only decoded when asked for.
"""

import logging
from functools import lru_cache
from typing import (
    Any,
    Dict,
    FrozenSet,
    Generic,
    List,
    Mapping,
    Optional,
    Protocol,
    Set,
    Type,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError
from ..models.organization import Organization, OrganizationsResponse
from ..models.ticket import Ticket, TicketsResponse
from ..models.user import User, UsersResponse
from .pagination import PaginationMeta

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

WRAPPER_FIELDS = frozenset({"next_page", "previous_page", "count"})


@runtime_checkable
class HasId(Protocol):
    """Anything with an ``id`` attribute can be looked up by ``find_sideloaded``."""

    id: Any


@lru_cache(maxsize=None)
def _list_adapter(item_type: Any) -> TypeAdapter:
    return TypeAdapter(List[item_type])


def _model_keys(model: Any) -> Set[str]:
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        return set()
    keys = set()
    for name, field in model.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


class SideloadedResponse(BaseModel, Generic[T]):
    """Primary resource plus the raw side-loaded collections of one response."""

    primary: T
    sideloaded: Dict[str, Any] = Field(default_factory=dict)
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None

    @classmethod
    def claimed_keys(cls) -> FrozenSet[str]:
        """Top-level keys consumed by the primary model or the wrapper itself.

        Derived from the declared fields of the primary model, never from the
        payload, so the split is the same for every response.
        """
        primary_type = cls.model_fields["primary"].annotation
        return WRAPPER_FIELDS | frozenset(_model_keys(primary_type))

    @model_validator(mode="before")
    @classmethod
    def _split_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        claimed = cls.claimed_keys()
        return {
            "primary": dict(data),
            "sideloaded": {key: value for key, value in data.items() if key not in claimed},
            "next_page": data.get("next_page"),
            "previous_page": data.get("previous_page"),
            "count": data.get("count"),
        }

    @classmethod
    def from_parts(
        cls,
        primary: T,
        sideloaded: Optional[Mapping[str, Any]] = None,
        next_page: Optional[str] = None,
        previous_page: Optional[str] = None,
        count: Optional[int] = None,
    ) -> "SideloadedResponse[T]":
        """Build a response from an already decoded primary and raw side-loaded collections."""
        return cls.model_construct(
            primary=primary,
            sideloaded=dict(sideloaded or {}),
            next_page=next_page,
            previous_page=previous_page,
            count=count,
        )

    @property
    def meta(self) -> PaginationMeta:
        return PaginationMeta(
            next_page=self.next_page, previous_page=self.previous_page, count=self.count
        )

    def sideloaded_resource(self, name: str, item_type: Type[U]) -> Optional[List[U]]:
        """Decode the side-loaded collection ``name`` as a list of ``item_type``.

        Returns ``None`` when the collection is absent, and also when it is
        present but does not decode: malformed side-loaded data reads as
        missing. Use ``require_sideloaded`` to get a ``DecodeError`` instead.
        """
        if name not in self.sideloaded:
            return None
        try:
            return _list_adapter(item_type).validate_python(self.sideloaded[name])
        except PydanticValidationError as e:
            logger.debug("Side-loaded %r did not decode as %s: %s", name, item_type, e)
            return None

    def require_sideloaded(self, name: str, item_type: Type[U]) -> List[U]:
        """Strict variant of ``sideloaded_resource``.

        Raises ``DecodeError`` if ``name`` was not side-loaded or does not decode.
        """
        if name not in self.sideloaded:
            raise DecodeError(
                f"No side-loaded {name!r} in response",
                response_data=sorted(self.sideloaded),
            )
        try:
            return _list_adapter(item_type).validate_python(self.sideloaded[name])
        except PydanticValidationError as e:
            raise DecodeError(
                f"Side-loaded {name!r} does not match {getattr(item_type, '__name__', item_type)}",
                details=str(e),
                response_data=self.sideloaded[name],
            ) from e

    def find_sideloaded(self, name: str, item_type: Type[U], item_id: Any) -> Optional[U]:
        """Return the first side-loaded ``item_type`` in ``name`` whose id is ``item_id``."""
        items = self.sideloaded_resource(name, item_type)
        if items is None:
            return None
        for item in items:
            if getattr(item, "id", None) == item_id:
                return item
        return None

    def has_sideloaded(self, name: str) -> bool:
        return name in self.sideloaded

    def sideloaded_resource_names(self) -> Set[str]:
        return set(self.sideloaded)

    def users(self) -> Optional[List[User]]:
        return self.sideloaded_resource("users", User)

    def organizations(self) -> Optional[List[Organization]]:
        return self.sideloaded_resource("organizations", Organization)

    def tickets(self) -> Optional[List[Ticket]]:
        return self.sideloaded_resource("tickets", Ticket)


TicketsWithSideloading = SideloadedResponse[TicketsResponse]
UsersWithSideloading = SideloadedResponse[UsersResponse]
OrganizationsWithSideloading = SideloadedResponse[OrganizationsResponse]
