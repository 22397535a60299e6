"""Custom object, custom object field and record models."""

from typing import Any, List, Optional

from pydantic import Field

from .base import BaseZendeskModel


class CustomObject(BaseZendeskModel):
    """Represents a custom object definition."""

    id: Optional[int] = None
    key: str
    title: str
    title_pluralized: str
    description: Optional[str] = None
    allows_photos: Optional[bool] = None
    include_in_list_view: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None


class CustomObjectResponse(BaseZendeskModel):
    custom_object: CustomObject


class CustomObjectsResponse(BaseZendeskModel):
    custom_objects: List[CustomObject]
    count: Optional[int] = None
    next_page: Optional[str] = None
    previous_page: Optional[str] = None


class CreateCustomObject(BaseZendeskModel):
    key: str
    title: str
    title_pluralized: str
    description: Optional[str] = None
    allows_photos: Optional[bool] = None
    include_in_list_view: Optional[bool] = None


class CreateCustomObjectRequest(BaseZendeskModel):
    custom_object: CreateCustomObject


class UpdateCustomObject(BaseZendeskModel):
    title: Optional[str] = None
    title_pluralized: Optional[str] = None
    description: Optional[str] = None
    allows_photos: Optional[bool] = None
    include_in_list_view: Optional[bool] = None


class UpdateCustomObjectRequest(BaseZendeskModel):
    custom_object: UpdateCustomObject


class ObjectLimit(BaseZendeskModel):
    count: int
    limit: int


class CustomObjectsLimit(BaseZendeskModel):
    object_limit: ObjectLimit


# Fields

class CustomFieldOption(BaseZendeskModel):
    id: Optional[int] = None
    name: str
    value: str
    position: Optional[int] = None
    default: Optional[bool] = None


class CustomObjectField(BaseZendeskModel):
    id: Optional[int] = None
    key: str
    title: str
    description: Optional[str] = None
    field_type: str = Field(alias="type")
    position: Optional[int] = None
    active: Optional[bool] = None
    required: Optional[bool] = None
    unique: Optional[bool] = None
    system: Optional[bool] = None
    regexp_for_validation: Optional[str] = None
    relationship_target_type: Optional[str] = None
    relationship_filter: Optional[Any] = None
    custom_field_options: Optional[List[CustomFieldOption]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None


class CustomObjectFieldResponse(BaseZendeskModel):
    custom_object_field: CustomObjectField


class CustomObjectFieldsResponse(BaseZendeskModel):
    custom_object_fields: List[CustomObjectField]
    count: Optional[int] = None
    next_page: Optional[str] = None
    previous_page: Optional[str] = None


class CreateCustomFieldOption(BaseZendeskModel):
    name: str
    value: str
    position: Optional[int] = None
    default: Optional[bool] = None


class CreateCustomObjectField(BaseZendeskModel):
    key: str
    title: str
    field_type: str = Field(alias="type")
    description: Optional[str] = None
    position: Optional[int] = None
    active: Optional[bool] = None
    required: Optional[bool] = None
    unique: Optional[bool] = None
    regexp_for_validation: Optional[str] = None
    relationship_target_type: Optional[str] = None
    relationship_filter: Optional[Any] = None
    custom_field_options: Optional[List[CreateCustomFieldOption]] = None


class CreateCustomObjectFieldRequest(BaseZendeskModel):
    custom_object_field: CreateCustomObjectField


class UpdateCustomObjectField(BaseZendeskModel):
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    active: Optional[bool] = None
    required: Optional[bool] = None
    unique: Optional[bool] = None
    regexp_for_validation: Optional[str] = None
    relationship_target_type: Optional[str] = None
    relationship_filter: Optional[Any] = None
    custom_field_options: Optional[List[CreateCustomFieldOption]] = None


class UpdateCustomObjectFieldRequest(BaseZendeskModel):
    custom_object_field: UpdateCustomObjectField


class ReorderCustomObjectFieldsRequest(BaseZendeskModel):
    custom_object_field_ids: List[int]


class FieldLimit(BaseZendeskModel):
    count: int
    limit: int


class CustomObjectFieldsLimit(BaseZendeskModel):
    field_limit: FieldLimit


# Records

class CustomObjectRecord(BaseZendeskModel):
    """A record of a custom object. Record ids are strings."""

    id: Optional[str] = None
    external_id: Optional[str] = None
    name: Optional[str] = None
    custom_object_key: Optional[str] = None
    custom_object_fields: Optional[Any] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    created_by_user_id: Optional[str] = None
    updated_by_user_id: Optional[str] = None
    url: Optional[str] = None


class CustomObjectRecordResponse(BaseZendeskModel):
    custom_object_record: CustomObjectRecord


class CustomObjectRecordsResponse(BaseZendeskModel):
    custom_object_records: List[CustomObjectRecord]
    count: Optional[int] = None
    next_page: Optional[str] = None
    previous_page: Optional[str] = None
    links: Optional[Any] = None
    meta: Optional[Any] = None


class CustomObjectRecordData(BaseZendeskModel):
    """Body of a record create, update or upsert."""

    external_id: Optional[str] = None
    name: Optional[str] = None
    custom_object_fields: Optional[Any] = None


class CustomObjectRecordRequest(BaseZendeskModel):
    custom_object_record: CustomObjectRecordData


class CustomObjectRecordCount(BaseZendeskModel):
    count: int


class SearchCustomObjectRecordsRequest(BaseZendeskModel):
    filter: Optional[Any] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None


# Bulk jobs

class BulkJob(BaseZendeskModel):
    action: str
    data: Any


class BulkJobRequest(BaseZendeskModel):
    job: BulkJob


class JobStatus(BaseZendeskModel):
    id: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    progress: Optional[int] = None
    total: Optional[int] = None
    url: Optional[str] = None
    results: Optional[Any] = None


class BulkJobResponse(BaseZendeskModel):
    job_status: JobStatus
