"""Job schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field

from tidyhq.schemas.common import CamelModel

JobStatus = Literal["scheduled", "in-progress", "completed", "cancelled"]


class JobBase(CamelModel):
    client_id: str
    service: str
    description: str = ""
    address: str
    scheduled_date: datetime
    scheduled_time: str
    estimated_duration: int
    actual_duration: Optional[int] = None
    status: JobStatus = "scheduled"
    cost: Decimal
    tips: Decimal = Decimal("0")
    materials: List[str] = Field(default_factory=list)
    staff: List[str] = Field(default_factory=list)
    notes: str = ""
    photos: List[str] = Field(default_factory=list)
    completed_at: Optional[datetime] = None


class JobCreate(JobBase):
    pass


class JobUpdate(CamelModel):
    client_id: Optional[str] = None
    service: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    scheduled_time: Optional[str] = None
    estimated_duration: Optional[int] = None
    actual_duration: Optional[int] = None
    status: Optional[JobStatus] = None
    cost: Optional[Decimal] = None
    tips: Optional[Decimal] = None
    materials: Optional[List[str]] = None
    staff: Optional[List[str]] = None
    notes: Optional[str] = None
    photos: Optional[List[str]] = None
    completed_at: Optional[datetime] = None


class JobRead(JobBase):
    id: str
    created_at: datetime
    updated_at: datetime
