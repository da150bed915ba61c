# app/ticket/schemas.py
from pydantic import BaseModel, ConfigDict, Field

MUTABLE_FIELDS = ("title", "description", "status", "priority")


class TicketBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class TicketCreate(TicketBase):
    status: str = "Open"
    priority: str = "Medium"
    # ignored; the owner always comes from the token
    created_by: str | None = Field(default=None, alias="createdBy", exclude=True)

    model_config = ConfigDict(populate_by_name=True)


class TicketUpdate(TicketBase):
    """Full replacement of the mutable fields (PUT semantics)."""

    status: str
    priority: str
    created_by: str | None = Field(default=None, alias="createdBy", exclude=True)

    model_config = ConfigDict(populate_by_name=True)


class TicketOut(TicketBase):
    id: int
    status: str
    priority: str
    created_by: str = Field(..., serialization_alias="createdBy")

    model_config = ConfigDict(from_attributes=True, frozen=True)
