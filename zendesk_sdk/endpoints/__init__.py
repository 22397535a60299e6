"""Endpoint groups mixed into ``ZendeskClient``.

Each mixin only calls the request methods of ``HTTPClient`` (``get``,
``post``, ``get_with_sideloading``, ...) and knows nothing about transport.
"""

from .custom_objects import CustomObjectsMixin
from .organizations import OrganizationsMixin
from .relationships import RelationshipsMixin
from .search import SearchMixin
from .tickets import TicketsMixin
from .users import UsersMixin

__all__ = [
    "CustomObjectsMixin",
    "OrganizationsMixin",
    "RelationshipsMixin",
    "SearchMixin",
    "TicketsMixin",
    "UsersMixin",
]
