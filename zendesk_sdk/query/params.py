"""Query-string parameters shared by list endpoints."""

from enum import Enum
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value


class QueryParams(BaseModel):
    """Immutable set of sideloading, pagination and sort parameters.

    Every ``with_*`` method returns a new instance, so a partially built value
    can be shared and extended along several branches without interference::

        base = QueryParams().with_per_page(50)
        first = base.with_page(1)
        sideloaded = base.with_sideloading(["users"])

    Serialization order is fixed: include, page, per_page, sort_by, sort_order,
    page[after].
    """

    model_config = ConfigDict(frozen=True)

    include: Tuple[str, ...] = ()
    page: Optional[int] = None
    per_page: Optional[int] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    cursor: Optional[str] = None

    def with_include(self, include: Iterable[str]) -> "QueryParams":
        return self.model_copy(update={"include": tuple(include)})

    def with_sideloading(self, resources: Iterable[str]) -> "QueryParams":
        """Alias of ``with_include`` named after what it is used for."""
        return self.with_include(resources)

    def with_page(self, page: int) -> "QueryParams":
        return self.model_copy(update={"page": page})

    def with_per_page(self, per_page: int) -> "QueryParams":
        return self.model_copy(update={"per_page": per_page})

    def with_sort(self, sort_by: str, sort_order: SortOrder = SortOrder.ASC) -> "QueryParams":
        return self.model_copy(update={"sort_by": sort_by, "sort_order": SortOrder(sort_order)})

    def with_cursor(self, cursor: str) -> "QueryParams":
        return self.model_copy(update={"cursor": cursor})

    def to_query_pairs(self) -> Tuple[Tuple[str, str], ...]:
        pairs = []
        if self.include:
            pairs.append(("include", ",".join(self.include)))
        if self.page is not None:
            pairs.append(("page", str(self.page)))
        if self.per_page is not None:
            pairs.append(("per_page", str(self.per_page)))
        if self.sort_by is not None:
            pairs.append(("sort_by", self.sort_by))
        if self.sort_order is not None:
            pairs.append(("sort_order", SortOrder(self.sort_order).value))
        if self.cursor is not None:
            # Passed through untouched; callers encode reserved characters.
            pairs.append(("page[after]", self.cursor))
        return tuple(pairs)

    def to_query_string(self) -> str:
        """Render ``?k=v&...``, or an empty string when nothing is set."""
        pairs = self.to_query_pairs()
        if not pairs:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in pairs)

    def is_empty(self) -> bool:
        return not self.to_query_pairs()
