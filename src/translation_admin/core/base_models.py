"""Base models and mixins shared by the content schemas.

Usage:
    - Table models inherit ActiveMixin for the active flag
    - Request bodies inherit StrictInput so unknown fields are rejected
    - Mutations with no record to return answer with SuccessResponse
"""

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class ActiveMixin(SQLModel):
    """Active flag carried by every content record."""

    active: bool = Field(default=True)


class StrictInput(SQLModel):
    """Request body base: unknown fields are a validation error."""

    model_config = ConfigDict(extra="forbid")


class StatusUpdate(StrictInput):
    active: bool


class SuccessResponse(SQLModel):
    success: bool = True
    message: str | None = None
