"""Service catalog schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from tidyhq.schemas.common import CamelModel


class ServiceBase(CamelModel):
    name: str
    description: str = ""
    base_price: Decimal
    estimated_duration: int
    is_active: bool = True


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    base_price: Optional[Decimal] = None
    estimated_duration: Optional[int] = None
    is_active: Optional[bool] = None


class ServiceRead(ServiceBase):
    id: str
    created_at: datetime
    updated_at: datetime
