"""Organization endpoints."""

from typing import Iterable, List

from ..http_client import with_query
from ..models.organization import (
    Organization,
    OrganizationCreateRequest,
    OrganizationResponse,
    OrganizationsResponse,
)
from ..query import OrganizationsWithSideloading


class OrganizationsMixin:
    async def create_organization(self, org_request: OrganizationCreateRequest) -> Organization:
        response = await self.post(
            "organizations.json", org_request, response_model=OrganizationResponse
        )
        return response.organization

    async def get_organization(self, organization_id: int) -> Organization:
        response = await self.get(
            f"organizations/{organization_id}.json", response_model=OrganizationResponse
        )
        return response.organization

    async def update_organization(
        self, organization_id: int, org_request: OrganizationCreateRequest
    ) -> Organization:
        response = await self.put(
            f"organizations/{organization_id}.json", org_request, response_model=OrganizationResponse
        )
        return response.organization

    async def delete_organization(self, organization_id: int) -> None:
        await self.delete(f"organizations/{organization_id}.json")

    async def list_organizations(self) -> List[Organization]:
        response = await self.get("organizations.json", response_model=OrganizationsResponse)
        return response.organizations

    async def list_organizations_with_sideloading(
        self, include: Iterable[str]
    ) -> OrganizationsWithSideloading:
        return await self.get_with_sideloading("organizations.json", include, OrganizationsResponse)

    async def search_organizations(self, query: str) -> List[Organization]:
        endpoint = with_query("organizations/search.json", [("query", query)])
        response = await self.get(endpoint, response_model=OrganizationsResponse)
        return response.organizations
