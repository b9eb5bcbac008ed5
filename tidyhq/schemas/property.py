"""Property schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from tidyhq.schemas.common import CamelModel

PropertyType = Literal["house", "apartment", "condo", "townhouse", "office", "commercial"]


class PropertyBase(CamelModel):
    client_id: str
    property_type: PropertyType
    address: str
    square_footage: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[Decimal] = None
    floors: int = 1
    has_basement: bool = False
    has_garage: bool = False
    has_pets: bool = False
    pet_details: Optional[str] = None
    special_requirements: Optional[str] = None
    access_instructions: Optional[str] = None
    alarm_code: Optional[str] = None
    key_location: Optional[str] = None
    notes: str = ""
    is_active: bool = True


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(CamelModel):
    property_type: Optional[PropertyType] = None
    address: Optional[str] = None
    square_footage: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[Decimal] = None
    floors: Optional[int] = None
    has_basement: Optional[bool] = None
    has_garage: Optional[bool] = None
    has_pets: Optional[bool] = None
    pet_details: Optional[str] = None
    special_requirements: Optional[str] = None
    access_instructions: Optional[str] = None
    alarm_code: Optional[str] = None
    key_location: Optional[str] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class PropertyRead(PropertyBase):
    id: str
    created_at: datetime
    updated_at: datetime
