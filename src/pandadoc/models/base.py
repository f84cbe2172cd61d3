r"""Base model shared by every API payload."""

from __future__ import annotations

__all__ = ["PandaDocModel"]

from pydantic import BaseModel, ConfigDict


class PandaDocModel(BaseModel):
    """Base class for request and response payloads.

    Unknown keys are kept so that fields added to the API later survive a
    round trip through the client.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_payload(self) -> dict:
        """Serialize to a JSON-compatible dict, omitting unset values."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
