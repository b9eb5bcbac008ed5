"""Contact activity schemas."""

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import AliasChoices, Field

from tidyhq.schemas.common import CamelModel

ActivityType = Literal["call", "email", "sms", "visit", "estimate", "follow_up", "booking", "payment"]


class ContactActivityBase(CamelModel):
    client_id: str
    activity_type: ActivityType
    title: str
    description: str = ""
    outcome: Optional[str] = None
    duration: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    related_job_id: Optional[str] = None
    related_lead_id: Optional[str] = None
    # ORM instances expose the declarative MetaData as `.metadata`, so read `extra` first
    extra: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("extra", "metadata"),
        serialization_alias="metadata",
    )


class ContactActivityCreate(ContactActivityBase):
    """`createdBy` defaults to the calling user when omitted."""

    created_by: Optional[str] = None


class ContactActivityUpdate(CamelModel):
    activity_type: Optional[ActivityType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    outcome: Optional[str] = None
    duration: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    related_job_id: Optional[str] = None
    related_lead_id: Optional[str] = None
    extra: Optional[Dict[str, Any]] = Field(default=None, validation_alias=AliasChoices("extra", "metadata"))


class ContactActivityRead(ContactActivityBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime
