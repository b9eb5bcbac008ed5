"""Service catalog entries."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    base_price = Column(Numeric(10, 2), nullable=False)
    estimated_duration = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
