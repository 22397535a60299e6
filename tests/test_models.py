import pytest

from zendesk_sdk.models import (
    CreateLookupRelationshipField,
    ObjectType,
    SearchQueryBuilder,
    Ticket,
    TicketCommentCreate,
    TicketPriority,
    TicketStatus,
    TicketType,
    custom_object_type,
)


class TestTicketModels:
    """Test ticket decoding and builders."""

    def test_type_alias(self, sample_ticket_data):
        """The wire key "type" maps to ticket_type and back."""
        ticket = Ticket.model_validate(sample_ticket_data)

        assert ticket.ticket_type == "incident"
        assert ticket.to_payload()["type"] == "incident"
        assert "ticket_type" not in ticket.to_payload()

    def test_unknown_fields_ignored(self):
        ticket = Ticket.model_validate({"id": 1, "satisfaction_rating": {"score": "good"}})

        assert ticket.id == 1

    def test_invalid_status_rejected(self):
        with pytest.raises(Exception):
            Ticket.model_validate({"id": 1, "status": "exploded"})

    def test_builder(self):
        request = (
            Ticket.builder("Broken laptop")
            .comment("Screen is cracked")
            .ticket_type(TicketType.PROBLEM)
            .status(TicketStatus.NEW)
            .requester_id(10)
            .assignee_id(20)
            .group_id(30)
            .build()
        )

        payload = request.to_payload()["ticket"]
        assert payload["subject"] == "Broken laptop"
        assert payload["type"] == "problem"
        assert payload["status"] == "new"
        assert payload["comment"] == {"body": "Screen is cracked", "public": True}
        assert payload["requester_id"] == 10

    def test_comment_shortcuts(self):
        assert TicketCommentCreate.public_response("hi").public is True
        assert TicketCommentCreate.work_note("hi").public is False

    def test_comment_builder_request(self):
        request = (
            TicketCommentCreate.builder("Closing out")
            .work_note()
            .uploads(["token-1"])
            .build_request(status=TicketStatus.SOLVED, priority=TicketPriority.LOW, remove_tags=["urgent"])
        )

        payload = request.to_payload()["ticket"]
        assert payload["comment"] == {"body": "Closing out", "public": False, "uploads": ["token-1"]}
        assert payload["status"] == "solved"
        assert payload["priority"] == "low"
        assert payload["remove_tags"] == ["urgent"]


class TestSearchQueryBuilder:
    """Test search query composition."""

    def test_filters(self):
        query = (
            SearchQueryBuilder()
            .tickets()
            .status("open")
            .priority("high")
            .requester_id(5)
            .organization_id(6)
            .group_id(7)
            .tags("vip")
            .build()
        )

        assert query == "type:ticket status:open priority:high requester:5 organization:6 group:7 tags:vip"

    def test_dates(self):
        query = SearchQueryBuilder().created_after("2024-01-01").updated_before("2024-02-01").build()

        assert query == "created>2024-01-01 updated<2024-02-01"

    def test_text_quoting(self):
        assert SearchQueryBuilder().text("printer").build() == "printer"
        assert SearchQueryBuilder().text("printer fire").build() == '"printer fire"'
        assert SearchQueryBuilder().subject_contains("help").build() == 'subject:"help"'

    def test_custom_field_and_raw(self):
        query = SearchQueryBuilder().custom_field(360001, "gold").raw("-tags:spam").build()

        assert query == "custom_field_360001:gold -tags:spam"

    def test_empty(self):
        assert SearchQueryBuilder().build() == ""


class TestLookupFields:
    """Test lookup relationship field construction."""

    def test_target_types(self):
        assert CreateLookupRelationshipField.ticket_lookup("t").relationship_target_type == "zen:ticket"
        assert CreateLookupRelationshipField.organization_lookup("o").relationship_target_type == "zen:organization"
        assert (
            CreateLookupRelationshipField.custom_object_lookup("c", "car").relationship_target_type
            == "zen:custom_object:car"
        )
        assert custom_object_type("car") == "zen:custom_object:car"
        assert str(ObjectType.GROUP) == "zen:group"

    def test_builder(self):
        field = (
            CreateLookupRelationshipField.builder("Manager", ObjectType.USER)
            .description("Account manager")
            .required(True)
            .key("manager")
            .filter_users_by_role("agent")
            .build()
        )

        payload = field.to_payload()
        assert payload["type"] == "lookup"
        assert payload["relationship_target_type"] == "zen:user"
        assert payload["required"] is True
        assert payload["relationship_filter"] == {
            "all": [{"field": "role", "operator": "is", "value": "agent"}]
        }

    def test_filter_active_only(self):
        field = CreateLookupRelationshipField.builder("Parent", "zen:organization").filter_active_only().build()

        assert field.relationship_filter == {"all": [{"field": "active", "operator": "is", "value": True}]}
