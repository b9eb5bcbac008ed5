"""Booking schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field

from tidyhq.schemas.common import CamelModel

BookingStatus = Literal["pending", "confirmed", "completed", "cancelled"]


class BookingBase(CamelModel):
    client_id: str
    job_id: Optional[str] = None
    service: str
    date: datetime
    time: str
    duration: int
    staff: List[str] = Field(default_factory=list)
    address: str
    phone: str
    status: BookingStatus = "pending"
    estimated_cost: Decimal
    notes: str = ""


class BookingCreate(BookingBase):
    pass


class BookingUpdate(CamelModel):
    client_id: Optional[str] = None
    job_id: Optional[str] = None
    service: Optional[str] = None
    date: Optional[datetime] = None
    time: Optional[str] = None
    duration: Optional[int] = None
    staff: Optional[List[str]] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[BookingStatus] = None
    estimated_cost: Optional[Decimal] = None
    notes: Optional[str] = None


class BookingRead(BookingBase):
    id: str
    created_at: datetime
    updated_at: datetime
