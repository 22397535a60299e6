from .pagination import PaginatedResponse, PaginationMeta, PaginationParams
from .params import QueryParams, SortOrder
from .sideloading import (
    HasId,
    OrganizationsWithSideloading,
    SideloadedResponse,
    TicketsWithSideloading,
    UsersWithSideloading,
)

__all__ = [
    "HasId",
    "OrganizationsWithSideloading",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "QueryParams",
    "SideloadedResponse",
    "SortOrder",
    "TicketsWithSideloading",
    "UsersWithSideloading",
]
