"""Unified search endpoints.

``search`` covers tickets, users, organizations and groups in one call and
caps out at 1,000 results; ``search_export`` streams larger result sets with
cursor pagination.
"""

from typing import Optional, Union

from ..http_client import with_query
from ..models.search import (
    SearchCountResponse,
    SearchExportResponse,
    SearchQueryBuilder,
    SearchResponse,
    SearchSortBy,
)
from ..query import SortOrder


def _scoped(query: str, result_type: str) -> str:
    scope = f"type:{result_type}"
    return query if scope in query else f"{scope} {query}"


class SearchMixin:
    async def search(self, query: str) -> SearchResponse:
        return await self.get(with_query("search.json", [("query", query)]), response_model=SearchResponse)

    async def search_with_sort(
        self,
        query: str,
        sort_by: Union[SearchSortBy, str],
        order: Union[SortOrder, str] = SortOrder.ASC,
    ) -> SearchResponse:
        endpoint = with_query(
            "search.json",
            [("query", query), ("sort_by", str(sort_by)), ("sort_order", str(order))],
        )
        return await self.get(endpoint, response_model=SearchResponse)

    async def search_with_pagination(self, page_url: str) -> SearchResponse:
        """Fetch the search page at ``page_url`` (a ``next_page`` or ``previous_page`` value)."""
        return await self.get_page(page_url, response_model=SearchResponse)

    async def search_count(self, query: str) -> int:
        endpoint = with_query("search/count.json", [("query", query)])
        response = await self.get(endpoint, response_model=SearchCountResponse)
        return response.count

    async def search_export(self, query: str) -> SearchExportResponse:
        return await self.search_export_with_cursor(query)

    async def search_export_with_cursor(
        self, query: str, cursor: Optional[str] = None
    ) -> SearchExportResponse:
        endpoint = with_query("search/export.json", [("query", query), ("page[after]", cursor)])
        return await self.get(endpoint, response_model=SearchExportResponse)

    async def search_tickets_advanced(self, query: str) -> SearchResponse:
        return await self.search(_scoped(query, "ticket"))

    async def search_users_advanced(self, query: str) -> SearchResponse:
        return await self.search(_scoped(query, "user"))

    async def search_organizations_advanced(self, query: str) -> SearchResponse:
        return await self.search(_scoped(query, "organization"))

    async def search_groups(self, query: str) -> SearchResponse:
        return await self.search(_scoped(query, "group"))

    async def search_advanced(self, builder: SearchQueryBuilder) -> SearchResponse:
        return await self.search(builder.build())

    async def search_advanced_with_sort(
        self,
        builder: SearchQueryBuilder,
        sort_by: Union[SearchSortBy, str],
        order: Union[SortOrder, str] = SortOrder.ASC,
    ) -> SearchResponse:
        return await self.search_with_sort(builder.build(), sort_by, order)
