"""Custom object endpoints: object definitions, their fields, records and bulk jobs."""

from typing import List, Optional, Sequence

from ..http_client import with_query
from ..models.custom_object import (
    BulkJobRequest,
    BulkJobResponse,
    CreateCustomObjectFieldRequest,
    CreateCustomObjectRequest,
    CustomObject,
    CustomObjectField,
    CustomObjectFieldResponse,
    CustomObjectFieldsLimit,
    CustomObjectFieldsResponse,
    CustomObjectRecord,
    CustomObjectRecordCount,
    CustomObjectRecordRequest,
    CustomObjectRecordResponse,
    CustomObjectRecordsResponse,
    CustomObjectResponse,
    CustomObjectsLimit,
    CustomObjectsResponse,
    JobStatus,
    ReorderCustomObjectFieldsRequest,
    SearchCustomObjectRecordsRequest,
    UpdateCustomObjectFieldRequest,
    UpdateCustomObjectRequest,
)


def _joined(values: Optional[Sequence[str]]) -> Optional[str]:
    return ",".join(values) if values is not None else None


class CustomObjectsMixin:
    # Objects

    async def create_custom_object(self, request: CreateCustomObjectRequest) -> CustomObject:
        response = await self.post("custom_objects.json", request, response_model=CustomObjectResponse)
        return response.custom_object

    async def get_custom_object(self, custom_object_key: str) -> CustomObject:
        response = await self.get(
            f"custom_objects/{custom_object_key}.json", response_model=CustomObjectResponse
        )
        return response.custom_object

    async def update_custom_object(
        self, custom_object_key: str, request: UpdateCustomObjectRequest
    ) -> CustomObject:
        response = await self.put(
            f"custom_objects/{custom_object_key}.json", request, response_model=CustomObjectResponse
        )
        return response.custom_object

    async def delete_custom_object(self, custom_object_key: str) -> None:
        await self.delete(f"custom_objects/{custom_object_key}.json")

    async def list_custom_objects(self) -> List[CustomObject]:
        response = await self.get("custom_objects.json", response_model=CustomObjectsResponse)
        return response.custom_objects

    async def get_custom_objects_limit(self) -> CustomObjectsLimit:
        return await self.get(
            "custom_objects/limits/object_limit.json", response_model=CustomObjectsLimit
        )

    # Fields

    async def list_custom_object_fields(
        self, custom_object_key: str, include_standard_fields: Optional[bool] = None
    ) -> List[CustomObjectField]:
        endpoint = with_query(
            f"custom_objects/{custom_object_key}/fields.json",
            [("include_standard_fields", include_standard_fields)],
        )
        response = await self.get(endpoint, response_model=CustomObjectFieldsResponse)
        return response.custom_object_fields

    async def create_custom_object_field(
        self, custom_object_key: str, request: CreateCustomObjectFieldRequest
    ) -> CustomObjectField:
        response = await self.post(
            f"custom_objects/{custom_object_key}/fields.json",
            request,
            response_model=CustomObjectFieldResponse,
        )
        return response.custom_object_field

    async def get_custom_object_field(self, custom_object_key: str, field_key_or_id: str) -> CustomObjectField:
        response = await self.get(
            f"custom_objects/{custom_object_key}/fields/{field_key_or_id}.json",
            response_model=CustomObjectFieldResponse,
        )
        return response.custom_object_field

    async def update_custom_object_field(
        self,
        custom_object_key: str,
        field_key_or_id: str,
        request: UpdateCustomObjectFieldRequest,
    ) -> CustomObjectField:
        response = await self.patch(
            f"custom_objects/{custom_object_key}/fields/{field_key_or_id}.json",
            request,
            response_model=CustomObjectFieldResponse,
        )
        return response.custom_object_field

    async def delete_custom_object_field(self, custom_object_key: str, field_key_or_id: str) -> None:
        await self.delete(f"custom_objects/{custom_object_key}/fields/{field_key_or_id}.json")

    async def reorder_custom_object_fields(
        self, custom_object_key: str, request: ReorderCustomObjectFieldsRequest
    ) -> List[CustomObjectField]:
        response = await self.put(
            f"custom_objects/{custom_object_key}/fields/reorder.json",
            request,
            response_model=CustomObjectFieldsResponse,
        )
        return response.custom_object_fields

    async def get_custom_object_fields_limit(self, custom_object_key: str) -> CustomObjectFieldsLimit:
        return await self.get(
            f"custom_objects/{custom_object_key}/limits/field_limit.json",
            response_model=CustomObjectFieldsLimit,
        )

    # Records

    async def list_custom_object_records(
        self,
        custom_object_key: str,
        external_ids: Optional[Sequence[str]] = None,
        ids: Optional[Sequence[str]] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> CustomObjectRecordsResponse:
        endpoint = with_query(
            f"custom_objects/{custom_object_key}/records.json",
            [
                ("external_ids", _joined(external_ids)),
                ("ids", _joined(ids)),
                ("page[size]", page_size),
                ("sort", sort_by),
                ("order", sort_order),
            ],
        )
        return await self.get(endpoint, response_model=CustomObjectRecordsResponse)

    async def get_custom_object_record(self, custom_object_key: str, record_id: str) -> CustomObjectRecord:
        response = await self.get(
            f"custom_objects/{custom_object_key}/records/{record_id}.json",
            response_model=CustomObjectRecordResponse,
        )
        return response.custom_object_record

    async def create_custom_object_record(
        self, custom_object_key: str, request: CustomObjectRecordRequest
    ) -> CustomObjectRecord:
        response = await self.post(
            f"custom_objects/{custom_object_key}/records.json",
            request,
            response_model=CustomObjectRecordResponse,
        )
        return response.custom_object_record

    async def update_custom_object_record(
        self, custom_object_key: str, record_id: str, request: CustomObjectRecordRequest
    ) -> CustomObjectRecord:
        response = await self.patch(
            f"custom_objects/{custom_object_key}/records/{record_id}.json",
            request,
            response_model=CustomObjectRecordResponse,
        )
        return response.custom_object_record

    async def upsert_custom_object_record(
        self, custom_object_key: str, request: CustomObjectRecordRequest
    ) -> CustomObjectRecord:
        """Create the record, or update the one with the same ``external_id``."""
        response = await self.patch(
            f"custom_objects/{custom_object_key}/records.json",
            request,
            response_model=CustomObjectRecordResponse,
        )
        return response.custom_object_record

    async def delete_custom_object_record(self, custom_object_key: str, record_id: str) -> None:
        await self.delete(f"custom_objects/{custom_object_key}/records/{record_id}.json")

    async def count_custom_object_records(self, custom_object_key: str) -> CustomObjectRecordCount:
        return await self.get(
            f"custom_objects/{custom_object_key}/records/count.json",
            response_model=CustomObjectRecordCount,
        )

    async def search_custom_object_records_get(
        self,
        custom_object_key: str,
        query: Optional[str] = None,
        external_id: Optional[str] = None,
        name: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> CustomObjectRecordsResponse:
        endpoint = with_query(
            f"custom_objects/{custom_object_key}/records/search.json",
            [
                ("query", query),
                ("external_id", external_id),
                ("name", name),
                ("page[size]", page_size),
            ],
        )
        return await self.get(endpoint, response_model=CustomObjectRecordsResponse)

    async def search_custom_object_records_post(
        self, custom_object_key: str, request: SearchCustomObjectRecordsRequest
    ) -> CustomObjectRecordsResponse:
        return await self.post(
            f"custom_objects/{custom_object_key}/records/search.json",
            request,
            response_model=CustomObjectRecordsResponse,
        )

    async def incremental_export_custom_object_records(
        self,
        custom_object_key: str,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> CustomObjectRecordsResponse:
        endpoint = with_query(
            f"incremental/custom_objects/{custom_object_key}/cursor.json",
            [("cursor", cursor), ("page[size]", page_size)],
        )
        return await self.get(endpoint, response_model=CustomObjectRecordsResponse)

    # Bulk jobs

    async def create_bulk_job(self, custom_object_key: str, request: BulkJobRequest) -> JobStatus:
        response = await self.post(
            f"custom_objects/{custom_object_key}/jobs.json", request, response_model=BulkJobResponse
        )
        return response.job_status

    async def get_job_status(self, custom_object_key: str, job_id: str) -> JobStatus:
        response = await self.get(
            f"custom_objects/{custom_object_key}/jobs/{job_id}.json", response_model=BulkJobResponse
        )
        return response.job_status
