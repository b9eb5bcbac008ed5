"""Follow-up schemas."""

from datetime import datetime
from typing import Literal, Optional

from tidyhq.schemas.common import CamelModel

FollowUpType = Literal["call", "email", "sms", "visit"]
FollowUpStatus = Literal["pending", "completed", "cancelled"]


class FollowUpBase(CamelModel):
    client_id: str
    lead_id: Optional[str] = None
    follow_up_type: FollowUpType
    title: str
    description: str = ""
    scheduled_date: datetime
    status: FollowUpStatus = "pending"
    notes: str = ""


class FollowUpCreate(FollowUpBase):
    """`assignedTo` and `createdBy` default to the calling user when omitted."""

    assigned_to: Optional[str] = None
    created_by: Optional[str] = None


class FollowUpUpdate(CamelModel):
    lead_id: Optional[str] = None
    follow_up_type: Optional[FollowUpType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    status: Optional[FollowUpStatus] = None
    assigned_to: Optional[str] = None
    completed_at: Optional[datetime] = None
    completed_by: Optional[str] = None
    notes: Optional[str] = None


class FollowUpRead(FollowUpBase):
    id: str
    assigned_to: str
    created_by: str
    completed_at: Optional[datetime] = None
    completed_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
