"""Base model shared by every Zendesk wire shape."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseZendeskModel(BaseModel):
    """Base model for all Zendesk API models.

    Unknown keys are ignored so that a model can be decoded from any payload
    that contains its fields, including payloads carrying side-loaded
    collections.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for a request body: JSON types, wire aliases, no ``None`` fields."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
