"""
Response model pieces shared by the timestamped resources.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TimestampedOut(BaseModel):
    """
    Rows carry `created_at`/`updated_at`; clients get `createdAt`/`updatedAt`.
    """

    model_config = ConfigDict(populate_by_name=True)

    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
