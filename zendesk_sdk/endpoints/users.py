"""User endpoints."""

from typing import Iterable, List

from ..exceptions import ValidationError
from ..http_client import with_query
from ..models.user import User, UserCreateRequest, UserResponse, UsersResponse
from ..query import UsersWithSideloading


class UsersMixin:
    async def create_user(self, user_request: UserCreateRequest) -> User:
        response = await self.post("users.json", user_request, response_model=UserResponse)
        return response.user

    async def get_user(self, user_id: int) -> User:
        response = await self.get(f"users/{user_id}.json", response_model=UserResponse)
        return response.user

    async def get_user_by_email(self, email: str) -> User:
        """Return the first user matching ``email``.

        Raises ``ValidationError`` when the search comes back empty.
        """
        endpoint = with_query("users/search.json", [("query", f"email:{email}")])
        response = await self.get(endpoint, response_model=UsersResponse)
        if not response.users:
            raise ValidationError("User not found", field="email", value=email)
        return response.users[0]

    async def update_user(self, user_id: int, user_request: UserCreateRequest) -> User:
        response = await self.put(f"users/{user_id}.json", user_request, response_model=UserResponse)
        return response.user

    async def delete_user(self, user_id: int) -> None:
        await self.delete(f"users/{user_id}.json")

    async def list_users(self) -> List[User]:
        response = await self.get("users.json", response_model=UsersResponse)
        return response.users

    async def list_users_with_sideloading(self, include: Iterable[str]) -> UsersWithSideloading:
        return await self.get_with_sideloading("users.json", include, UsersResponse)

    async def list_users_in_organization(self, organization_id: int) -> List[User]:
        response = await self.get(
            f"organizations/{organization_id}/users.json", response_model=UsersResponse
        )
        return response.users

    async def search_users(self, query: str) -> List[User]:
        endpoint = with_query("users/search.json", [("query", query)])
        response = await self.get(endpoint, response_model=UsersResponse)
        return response.users
