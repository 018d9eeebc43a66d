# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base models with common configuration and fields.
"""

import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    """Generate a new record identifier (UUID4 string)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base for every request/response schema. Wire names are camelCase."""

    model_config = ConfigDict(
        # camelCase on the wire, snake_case in Python
        alias_generator=to_camel,
        populate_by_name=True,
        # Use enum values instead of enum objects, defaults included
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True
    )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)


class BaseEntity(BaseSchema):
    """Base for stored records."""

    id: str = Field(default_factory=generate_id, description="Unique identifier")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last update timestamp")

    def update_timestamp(self) -> None:
        """Refresh updated_at."""
        self.updated_at = utc_now()
