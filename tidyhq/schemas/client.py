"""Client schemas for create, update and read operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field

from tidyhq.schemas.common import CamelModel

ClientStatus = Literal["active", "inactive", "prospect"]
ContactMethod = Literal["phone", "email", "sms"]


class EmergencyContact(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


class ServicePreferences(CamelModel):
    products: Optional[List[str]] = None
    frequency: Optional[str] = None
    special_instructions: Optional[str] = None


class ClientBase(CamelModel):
    name: str
    email: str
    phone: str
    address: str
    alternate_phone: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: ClientStatus = "active"
    notes: str = ""
    emergency_contact: Optional[EmergencyContact] = None
    preferred_contact_method: ContactMethod = "phone"
    preferred_time_slot: Optional[str] = None
    service_preferences: ServicePreferences = Field(default_factory=ServicePreferences)
    source: Optional[str] = None
    referred_by: Optional[str] = None
    lifetime_value: Decimal = Decimal("0")
    join_date: Optional[datetime] = None
    last_service_date: Optional[datetime] = None
    last_contact_date: Optional[datetime] = None
    next_follow_up_date: Optional[datetime] = None
    assigned_to: Optional[str] = None


class ClientCreate(ClientBase):
    """Schema for client creation requests."""


class ClientUpdate(CamelModel):
    """Schema for client updates with partial fields."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    alternate_phone: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None
    emergency_contact: Optional[EmergencyContact] = None
    preferred_contact_method: Optional[ContactMethod] = None
    preferred_time_slot: Optional[str] = None
    service_preferences: Optional[ServicePreferences] = None
    source: Optional[str] = None
    referred_by: Optional[str] = None
    lifetime_value: Optional[Decimal] = None
    join_date: Optional[datetime] = None
    last_service_date: Optional[datetime] = None
    last_contact_date: Optional[datetime] = None
    next_follow_up_date: Optional[datetime] = None
    assigned_to: Optional[str] = None


class ClientRead(ClientBase):
    """Schema for client responses."""

    id: str
    created_at: datetime
    updated_at: datetime
