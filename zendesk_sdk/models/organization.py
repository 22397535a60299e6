"""Organization models."""

from typing import List, Optional

from .base import BaseZendeskModel


class Organization(BaseZendeskModel):
    id: Optional[int] = None
    name: Optional[str] = None
    details: Optional[str] = None
    notes: Optional[str] = None
    domain_names: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    external_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None

    @staticmethod
    def builder(name: str) -> "OrganizationBuilder":
        return OrganizationBuilder(name)


class OrganizationCreate(BaseZendeskModel):
    name: str
    details: Optional[str] = None
    notes: Optional[str] = None
    domain_names: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    external_id: Optional[str] = None


class OrganizationCreateRequest(BaseZendeskModel):
    organization: OrganizationCreate


class OrganizationResponse(BaseZendeskModel):
    organization: Organization


class OrganizationsResponse(BaseZendeskModel):
    organizations: List[Organization]
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


class OrganizationBuilder:
    def __init__(self, name: str) -> None:
        self._name = name
        self._fields: dict = {}

    def details(self, details: str) -> "OrganizationBuilder":
        self._fields["details"] = details
        return self

    def notes(self, notes: str) -> "OrganizationBuilder":
        self._fields["notes"] = notes
        return self

    def domain_names(self, domain_names: List[str]) -> "OrganizationBuilder":
        self._fields["domain_names"] = list(domain_names)
        return self

    def tags(self, tags: List[str]) -> "OrganizationBuilder":
        self._fields["tags"] = list(tags)
        return self

    def external_id(self, external_id: str) -> "OrganizationBuilder":
        self._fields["external_id"] = external_id
        return self

    def build(self) -> OrganizationCreateRequest:
        return OrganizationCreateRequest(
            organization=OrganizationCreate(name=self._name, **self._fields)
        )
