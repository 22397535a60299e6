"""Pagination metadata and the generic paginated response wrapper.

The API paginates in two styles: cursor pagination (``has_more`` plus
``after_cursor``/``before_cursor``, usually inside a ``meta`` object) and offset
pagination (``next_page``/``previous_page`` URLs plus ``count``). A single
``PaginationMeta`` carries the fields of both; which style a response used is
inferred from the fields that are present.
"""

from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError

T = TypeVar("T")
U = TypeVar("U")

CURSOR_FIELDS = ("has_more", "after_cursor", "before_cursor")
OFFSET_FIELDS = ("next_page", "previous_page", "count", "page", "per_page")


class PaginationMeta(BaseModel):
    """Pagination fields of both styles, all optional.

    Real responses populate at most one style, but nothing here enforces it.
    When both are present the accessors answer for the union: a next page
    exists if either style says so.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Cursor pagination
    has_more: Optional[bool] = None
    after_cursor: Optional[str] = None
    before_cursor: Optional[str] = None

    # Offset pagination
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None
    page: Optional[int] = None
    per_page: Optional[int] = None

    def is_cursor_based(self) -> bool:
        return (
            self.has_more is not None
            or self.after_cursor is not None
            or self.before_cursor is not None
        )

    def is_offset_based(self) -> bool:
        return (
            self.next_page is not None
            or self.previous_page is not None
            or self.count is not None
        )

    def has_next_page(self) -> bool:
        return bool(self.has_more) or self.next_page is not None

    def has_previous_page(self) -> bool:
        return self.before_cursor is not None or self.previous_page is not None

    def next_cursor(self) -> Optional[str]:
        return self.after_cursor

    def previous_cursor(self) -> Optional[str]:
        return self.before_cursor

    def next_page_url(self) -> Optional[str]:
        return self.next_page

    def previous_page_url(self) -> Optional[str]:
        return self.previous_page

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PaginationMeta":
        """Collect pagination fields from the top level and from a nested ``meta`` object."""
        fields: Dict[str, Any] = {
            key: payload[key] for key in CURSOR_FIELDS + OFFSET_FIELDS if key in payload
        }
        nested = payload.get("meta")
        if isinstance(nested, Mapping):
            for key in CURSOR_FIELDS:
                if key in nested:
                    fields.setdefault(key, nested[key])
        return cls.model_validate(fields)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results plus its pagination metadata."""

    results: List[T]
    meta: PaginationMeta = PaginationMeta()

    @classmethod
    def with_cursor_pagination(
        cls,
        results: List[T],
        has_more: bool,
        after_cursor: Optional[str] = None,
        before_cursor: Optional[str] = None,
    ) -> "PaginatedResponse[T]":
        meta = PaginationMeta(
            has_more=has_more, after_cursor=after_cursor, before_cursor=before_cursor
        )
        return cls(results=results, meta=meta)

    @classmethod
    def with_offset_pagination(
        cls,
        results: List[T],
        count: Optional[int] = None,
        next_page: Optional[str] = None,
        previous_page: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> "PaginatedResponse[T]":
        meta = PaginationMeta(
            count=count,
            next_page=next_page,
            previous_page=previous_page,
            page=page,
            per_page=per_page,
        )
        return cls(results=results, meta=meta)

    @classmethod
    def from_collection(
        cls,
        payload: Mapping[str, Any],
        key: str,
        item_type: Type[Any] = dict,
    ) -> "PaginatedResponse[Any]":
        """Build a page from a list response such as ``{"tickets": [...], "next_page": ...}``.

        Raises ``DecodeError`` if ``payload`` is not an object or ``payload[key]``
        does not decode as a list of ``item_type``.
        """
        if not isinstance(payload, Mapping):
            raise DecodeError(
                f"Expected an object with {key!r}, got {type(payload).__name__}",
                response_data=payload,
            )
        try:
            items = TypeAdapter(List[item_type]).validate_python(payload.get(key) or [])
            return cls(results=items, meta=PaginationMeta.from_payload(payload))
        except PydanticValidationError as e:
            raise DecodeError(
                f"Response does not match a page of {key!r}", details=str(e), response_data=payload
            ) from e

    def has_more_results(self) -> bool:
        return self.meta.has_next_page()

    def total_count(self) -> Optional[int]:
        return self.meta.count

    def page_size(self) -> int:
        return len(self.results)

    def is_empty(self) -> bool:
        return not self.results

    def map(self, func: Callable[[T], U]) -> "PaginatedResponse[U]":
        """Transform every result in order; ``meta`` is carried over unchanged."""
        return PaginatedResponse.model_construct(
            results=[func(item) for item in self.results], meta=self.meta
        )

    def filter(self, predicate: Callable[[T], bool]) -> "PaginatedResponse[T]":
        """Keep results matching ``predicate``.

        ``meta`` is not recomputed, so ``count`` still describes the unfiltered
        collection.
        """
        return self.model_copy(
            update={"results": [item for item in self.results if predicate(item)]}
        )


class PaginationParams(BaseModel):
    """Explicit cursor/offset request parameters for endpoints that take them."""

    model_config = ConfigDict(frozen=True)

    after_cursor: Optional[str] = None
    before_cursor: Optional[str] = None
    limit: Optional[int] = None

    page: Optional[int] = None
    per_page: Optional[int] = None
    offset: Optional[int] = None

    def after(self, cursor: str) -> "PaginationParams":
        return self.model_copy(update={"after_cursor": cursor})

    def before(self, cursor: str) -> "PaginationParams":
        return self.model_copy(update={"before_cursor": cursor})

    def with_limit(self, limit: int) -> "PaginationParams":
        return self.model_copy(update={"limit": limit})

    def with_page(self, page: int) -> "PaginationParams":
        return self.model_copy(update={"page": page})

    def with_per_page(self, per_page: int) -> "PaginationParams":
        return self.model_copy(update={"per_page": per_page})

    def with_offset(self, offset: int) -> "PaginationParams":
        return self.model_copy(update={"offset": offset})

    def to_query_params(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        if self.after_cursor is not None:
            params.append(("page[after]", self.after_cursor))
        if self.before_cursor is not None:
            params.append(("page[before]", self.before_cursor))
        if self.limit is not None:
            params.append(("page[size]", str(self.limit)))
        if self.page is not None:
            params.append(("page", str(self.page)))
        if self.per_page is not None:
            params.append(("per_page", str(self.per_page)))
        if self.offset is not None:
            params.append(("offset", str(self.offset)))
        return params
