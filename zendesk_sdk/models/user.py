"""User models."""

from enum import Enum
from typing import List, Optional

from .base import BaseZendeskModel


class UserRole(str, Enum):
    END_USER = "end-user"
    AGENT = "agent"
    ADMIN = "admin"


class User(BaseZendeskModel):
    """Represents a user in the system."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    organization_id: Optional[int] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None
    time_zone: Optional[str] = None
    locale: Optional[str] = None
    active: Optional[bool] = None
    verified: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None

    @staticmethod
    def builder(name: str, email: str) -> "UserBuilder":
        return UserBuilder(name, email)


class UserCreate(BaseZendeskModel):
    name: str
    email: str
    role: Optional[UserRole] = None
    organization_id: Optional[int] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None
    time_zone: Optional[str] = None
    locale: Optional[str] = None


class UserCreateRequest(BaseZendeskModel):
    """Request model for creating or updating a user."""

    user: UserCreate


class UserResponse(BaseZendeskModel):
    user: User


class UsersResponse(BaseZendeskModel):
    users: List[User]
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    count: Optional[int] = None


class UserBuilder:
    def __init__(self, name: str, email: str) -> None:
        self._name = name
        self._email = email
        self._fields: dict = {}

    def role(self, role: UserRole) -> "UserBuilder":
        self._fields["role"] = role
        return self

    def organization_id(self, organization_id: int) -> "UserBuilder":
        self._fields["organization_id"] = organization_id
        return self

    def phone(self, phone: str) -> "UserBuilder":
        self._fields["phone"] = phone
        return self

    def notes(self, notes: str) -> "UserBuilder":
        self._fields["notes"] = notes
        return self

    def tags(self, tags: List[str]) -> "UserBuilder":
        self._fields["tags"] = list(tags)
        return self

    def time_zone(self, time_zone: str) -> "UserBuilder":
        self._fields["time_zone"] = time_zone
        return self

    def locale(self, locale: str) -> "UserBuilder":
        self._fields["locale"] = locale
        return self

    def build(self) -> UserCreateRequest:
        user = UserCreate(name=self._name, email=self._email, **self._fields)
        return UserCreateRequest(user=user)
