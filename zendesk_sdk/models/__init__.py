"""Data models for the Zendesk API."""

from .base import BaseZendeskModel
from .custom_object import (
    BulkJob,
    BulkJobRequest,
    BulkJobResponse,
    CreateCustomFieldOption,
    CreateCustomObject,
    CreateCustomObjectField,
    CreateCustomObjectFieldRequest,
    CreateCustomObjectRequest,
    CustomFieldOption,
    CustomObject,
    CustomObjectField,
    CustomObjectFieldResponse,
    CustomObjectFieldsLimit,
    CustomObjectFieldsResponse,
    CustomObjectRecord,
    CustomObjectRecordCount,
    CustomObjectRecordData,
    CustomObjectRecordRequest,
    CustomObjectRecordResponse,
    CustomObjectRecordsResponse,
    CustomObjectResponse,
    CustomObjectsLimit,
    CustomObjectsResponse,
    JobStatus,
    ReorderCustomObjectFieldsRequest,
    SearchCustomObjectRecordsRequest,
    UpdateCustomObject,
    UpdateCustomObjectField,
    UpdateCustomObjectFieldRequest,
    UpdateCustomObjectRequest,
)
from .organization import (
    Organization,
    OrganizationBuilder,
    OrganizationCreate,
    OrganizationCreateRequest,
    OrganizationResponse,
    OrganizationsResponse,
)
from .relationship import (
    CreateLookupRelationshipField,
    LookupRelationshipField,
    LookupRelationshipFieldBuilder,
    ObjectType,
    RelationshipMeta,
    RelationshipSourcesResponse,
    custom_object_type,
)
from .search import (
    Group,
    SearchCountResponse,
    SearchExportResponse,
    SearchQueryBuilder,
    SearchResponse,
    SearchResult,
    SearchSortBy,
)
from .ticket import (
    CustomField,
    Ticket,
    TicketBuilder,
    TicketComment,
    TicketCommentBuilder,
    TicketCommentCreate,
    TicketCommentRequest,
    TicketCommentsResponse,
    TicketCreate,
    TicketCreateRequest,
    TicketPriority,
    TicketResponse,
    TicketsResponse,
    TicketStatus,
    TicketType,
    TicketUpdate,
)
from .user import (
    User,
    UserBuilder,
    UserCreate,
    UserCreateRequest,
    UserResponse,
    UserRole,
    UsersResponse,
)
