"""
Base model shared by all MCP Tracker API models.

Models mirror the Jira wire format: attribute aliases carry the wire names,
and unknown keys (custom fields, expansions, links) are kept as extras so a
model dumps back to the same shape it was built from.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base model for Jira REST payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    @classmethod
    def from_api_response(cls: type[T], data: Any, **kwargs: Any) -> T:
        """
        Create a model instance from decoded API JSON.

        Args:
            data: The decoded response body
            **kwargs: Unused; accepted for subclasses that need extra context

        Returns:
            A model instance; an empty one if data is not a dictionary
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()
        return cls.model_validate(data)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Dump the model using wire names and only the keys that were present."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
