import pytest

from zendesk_sdk import DecodeError, SortOrder, User, ValidationError
from zendesk_sdk.models import (
    BulkJob,
    BulkJobRequest,
    CreateCustomObject,
    CreateCustomObjectRequest,
    CreateLookupRelationshipField,
    CustomObjectRecordData,
    CustomObjectRecordRequest,
    ObjectType,
    Organization,
    ReorderCustomObjectFieldsRequest,
    SearchQueryBuilder,
    SearchSortBy,
    Ticket,
)
from zendesk_sdk.models.search import GroupResult, OtherResult, TicketResult, UserResult


class TestUserEndpoints:
    """Test user endpoints."""

    async def test_get_user(self, client, api, sample_user_data):
        api.add(200, {"user": sample_user_data})

        user = await client.get_user(67890)

        assert api.last_request.url.path == "/api/v2/users/67890.json"
        assert user.role == "end-user"

    async def test_get_user_by_email(self, client, api, sample_user_data):
        api.add(200, {"users": [sample_user_data], "count": 1})

        user = await client.get_user_by_email("john.doe@example.com")

        assert api.last_request.url.path == "/api/v2/users/search.json"
        assert api.last_request.url.params["query"] == "email:john.doe@example.com"
        assert user.id == 67890

    async def test_get_user_by_email_not_found(self, client, api):
        """An empty search result is a ValidationError."""
        api.add(200, {"users": [], "count": 0})

        with pytest.raises(ValidationError, match="User not found"):
            await client.get_user_by_email("nobody@example.com")

    async def test_create_user(self, client, api, sample_user_data):
        api.add(201, {"user": sample_user_data})

        await client.create_user(User.builder("John Doe", "john.doe@example.com").role("end-user").build())

        assert api.last_request.method == "POST"
        assert api.last_json() == {
            "user": {"name": "John Doe", "email": "john.doe@example.com", "role": "end-user"}
        }

    async def test_list_users_in_organization(self, client, api):
        api.add(200, {"users": []})

        assert await client.list_users_in_organization(22222) == []
        assert api.last_request.url.path == "/api/v2/organizations/22222/users.json"

    async def test_delete_user(self, client, api):
        api.add(200, {"user": {"id": 1, "active": False}})

        await client.delete_user(1)

        assert api.last_request.method == "DELETE"


class TestOrganizationEndpoints:
    """Test organization endpoints."""

    async def test_create_organization(self, client, api, sample_organization_data):
        api.add(201, {"organization": sample_organization_data})
        request = Organization.builder("Example Corp").domain_names(["example.com"]).build()

        organization = await client.create_organization(request)

        assert api.last_json() == {"organization": {"name": "Example Corp", "domain_names": ["example.com"]}}
        assert organization.id == 22222

    async def test_list_and_search(self, client, api, sample_organization_data):
        api.add(200, {"organizations": [sample_organization_data]})
        api.add(200, {"organizations": []})

        organizations = await client.list_organizations()
        assert organizations[0].name == "Example Corp"

        await client.search_organizations("ext-1")
        assert api.last_request.url.params["query"] == "ext-1"


class TestSearchEndpoints:
    """Test unified search."""

    async def test_mixed_results(self, client, api, sample_ticket_data, sample_user_data):
        """Each result decodes into the model for its result_type."""
        api.add(
            200,
            {
                "results": [
                    dict(sample_ticket_data, result_type="ticket"),
                    dict(sample_user_data, result_type="user"),
                    {"id": 5, "name": "Tier 2", "result_type": "group"},
                    {"id": 9, "title": "How to reset", "result_type": "article"},
                ],
                "count": 4,
            },
        )

        response = await client.search("reset")

        kinds = [type(result) for result in response.results]
        assert kinds == [TicketResult, UserResult, GroupResult, OtherResult]
        assert response.results[3].result_type == "article"

    async def test_search_with_sort(self, client, api):
        api.add(200, {"results": []})

        await client.search_with_sort("status:open", SearchSortBy.CREATED_AT, SortOrder.DESC)

        params = api.last_request.url.params
        assert params["query"] == "status:open"
        assert params["sort_by"] == "created_at"
        assert params["sort_order"] == "desc"

    async def test_search_count(self, client, api):
        api.add(200, {"count": 17})

        assert await client.search_count("type:ticket") == 17
        assert api.last_request.url.path == "/api/v2/search/count.json"

    async def test_export_with_cursor(self, client, api):
        api.add(200, {"results": [], "after_cursor": "next", "end_of_stream": False})

        response = await client.search_export_with_cursor("type:ticket", "abc")

        assert api.last_request.url.params["page[after]"] == "abc"
        assert response.after_cursor == "next"

    async def test_scoped_helpers(self, client, api):
        api.add(200, {"results": []}).add(200, {"results": []})

        await client.search_users_advanced("name:john")
        assert api.last_request.url.params["query"] == "type:user name:john"

        await client.search_tickets_advanced("type:ticket status:new")
        assert api.last_request.url.params["query"] == "type:ticket status:new"

    async def test_search_with_pagination(self, client, api):
        api.add(200, {"results": []})

        await client.search_with_pagination("https://acme.zendesk.com/api/v2/search.json?page=2&query=x")

        assert api.last_request.url.params["page"] == "2"

    async def test_builder_search(self, client, api):
        api.add(200, {"results": []})

        await client.search_advanced(SearchQueryBuilder().tickets().status("open").assignee_id(7))

        assert api.last_request.url.params["query"] == "type:ticket status:open assignee:7"


class TestCustomObjectEndpoints:
    """Test custom objects, fields, records and jobs."""

    async def test_create_custom_object(self, client, api):
        api.add(201, {"custom_object": {"key": "car", "title": "Car", "title_pluralized": "Cars"}})
        request = CreateCustomObjectRequest(
            custom_object=CreateCustomObject(key="car", title="Car", title_pluralized="Cars")
        )

        custom_object = await client.create_custom_object(request)

        assert api.last_request.url.path == "/api/v2/custom_objects.json"
        assert custom_object.key == "car"

    async def test_list_fields_with_standard(self, client, api):
        api.add(200, {"custom_object_fields": [{"key": "make", "title": "Make", "type": "text"}]})

        fields = await client.list_custom_object_fields("car", include_standard_fields=True)

        assert api.last_request.url.params["include_standard_fields"] == "true"
        assert fields[0].field_type == "text"

    async def test_reorder_fields(self, client, api):
        api.add(200, {"custom_object_fields": []})

        await client.reorder_custom_object_fields("car", ReorderCustomObjectFieldsRequest(custom_object_field_ids=[3, 1, 2]))

        assert api.last_request.method == "PUT"
        assert api.last_json() == {"custom_object_field_ids": [3, 1, 2]}

    async def test_list_records_query(self, client, api):
        api.add(200, {"custom_object_records": []})

        await client.list_custom_object_records("car", external_ids=["a", "b"], page_size=10, sort_by="name")

        params = api.last_request.url.params
        assert params["external_ids"] == "a,b"
        assert params["page[size]"] == "10"
        assert params["sort"] == "name"
        assert "ids" not in params

    async def test_upsert_record(self, client, api):
        api.add(200, {"custom_object_record": {"id": "01H", "name": "Herbie", "external_id": "vin-1"}})
        request = CustomObjectRecordRequest(
            custom_object_record=CustomObjectRecordData(external_id="vin-1", name="Herbie")
        )

        record = await client.upsert_custom_object_record("car", request)

        assert api.last_request.method == "PATCH"
        assert api.last_request.url.path == "/api/v2/custom_objects/car/records.json"
        assert record.id == "01H"

    async def test_count_records(self, client, api):
        api.add(200, {"count": 3})

        count = await client.count_custom_object_records("car")

        assert count.count == 3

    async def test_incremental_export(self, client, api):
        api.add(200, {"custom_object_records": []})

        await client.incremental_export_custom_object_records("car", cursor="c1", page_size=100)

        assert api.last_request.url.path == "/api/v2/incremental/custom_objects/car/cursor.json"
        assert api.last_request.url.params["cursor"] == "c1"

    async def test_bulk_job(self, client, api):
        api.add(200, {"job_status": {"id": "job-1", "status": "queued"}})

        status = await client.create_bulk_job("car", BulkJobRequest(job=BulkJob(action="delete", data=["01H"])))

        assert api.last_json() == {"job": {"action": "delete", "data": ["01H"]}}
        assert status.status == "queued"


class TestRelationshipEndpoints:
    """Test lookup relationship fields and source traversal."""

    async def test_sources_by_target(self, client, api, sample_ticket_data):
        api.add(200, {"results": [sample_ticket_data], "count": 1, "meta": {"has_more": False}})

        response = await client.get_tickets_related_to_user(67890, 5)

        assert api.last_request.url.path == "/api/v2/zen:user/67890/relationship_fields/5/zen:ticket"
        assert isinstance(response.results[0], Ticket)
        assert response.meta.has_more is False

    async def test_sources_for_custom_object(self, client, api):
        api.add(200, {"results": [{"id": "01H", "name": "Herbie"}]})

        response = await client.get_sources_by_target(
            ObjectType.TICKET, 42, 5, "zen:custom_object:car"
        )

        assert api.last_request.url.path == "/api/v2/zen:ticket/42/relationship_fields/5/zen:custom_object:car"
        assert response.results == [{"id": "01H", "name": "Herbie"}]

    async def test_sources_with_sideloading(self, client, api, sample_ticket_data, sample_user_data):
        api.add(200, {"results": [sample_ticket_data], "users": [sample_user_data]})

        response = await client.get_sources_by_target_with_sideloading(
            ObjectType.USER, 67890, 5, ObjectType.TICKET, ["users"], Ticket
        )

        assert api.last_request.url.params["include"] == "users"
        assert response.primary.results[0].id == 42
        assert response.users()[0].id == 67890

    async def test_create_ticket_lookup_field(self, client, api):
        api.add(
            201,
            {
                "ticket_field": {
                    "id": 5,
                    "title": "Related user",
                    "type": "lookup",
                    "relationship_target_type": "zen:user",
                }
            },
        )

        field = await client.create_ticket_lookup_field(CreateLookupRelationshipField.user_lookup("Related user"))

        assert api.last_request.url.path == "/api/v2/ticket_fields.json"
        assert api.last_json() == {
            "ticket_field": {
                "title": "Related user",
                "active": True,
                "required": False,
                "type": "lookup",
                "relationship_target_type": "zen:user",
            }
        }
        assert field.is_lookup()

    async def test_lookup_field_missing_in_response(self, client, api):
        api.add(200, {"user_field": None})

        with pytest.raises(DecodeError):
            await client.get_user_lookup_field(5)

    async def test_list_lookup_fields_filters_other_types(self, client, api):
        """Only fields of type lookup are returned."""
        api.add(
            200,
            {
                "organization_fields": [
                    {"id": 1, "title": "Region", "type": "dropdown"},
                    {"id": 2, "title": "Parent", "type": "lookup", "relationship_target_type": "zen:organization"},
                ]
            },
        )

        fields = await client.list_organization_lookup_fields()

        assert [field.id for field in fields] == [2]

    async def test_tickets_with_lookup_relationships(self, client, api, sample_ticket_data, sample_user_data):
        api.add(200, {"ticket": sample_ticket_data})
        api.add(200, {"results": [sample_user_data]})

        results = await client.get_tickets_with_lookup_relationships([42], [(5, ObjectType.USER)])

        ticket, related = results[0]
        assert ticket.id == 42
        assert related[5][0]["email"] == "john.doe@example.com"
        assert api.last_request.url.path == "/api/v2/zen:ticket/42/relationship_fields/5/zen:user"
