"""Lead schemas for the sales pipeline."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from tidyhq.schemas.client import ClientRead
from tidyhq.schemas.common import CamelModel

AllowedLeadStatus = Literal["new", "contacted", "proposal", "booked", "won", "lost"]

# Pipeline stages counted as "active" on the dashboard
EARLY_PIPELINE_STATUSES = ("new", "contacted", "proposal")


class LeadBase(CamelModel):
    name: str
    email: str
    phone: str
    address: Optional[str] = None
    service: str
    source: str
    status: AllowedLeadStatus = "new"
    value: Decimal
    last_contact_date: Optional[datetime] = None
    notes: str = ""
    assigned_to: Optional[str] = None


class LeadCreate(LeadBase):
    """Schema for lead creation requests. The client link is only ever set by conversion."""


class LeadUpdate(CamelModel):
    """Schema for lead updates with partial fields."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    service: Optional[str] = None
    source: Optional[str] = None
    status: Optional[AllowedLeadStatus] = None
    value: Optional[Decimal] = None
    last_contact_date: Optional[datetime] = None
    notes: Optional[str] = None
    assigned_to: Optional[str] = None


class LeadRead(LeadBase):
    """Schema for lead responses."""

    id: str
    client_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LeadConversion(CamelModel):
    lead: LeadRead
    client: ClientRead
