"""Property details for a client's service address."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Property(Base):
    __tablename__ = "properties"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    property_type = Column(String, nullable=False)
    address = Column(Text, nullable=False)
    square_footage = Column(Integer, nullable=True)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Numeric(3, 1), nullable=True)
    floors = Column(Integer, nullable=False, default=1)
    has_basement = Column(Boolean, nullable=False, default=False)
    has_garage = Column(Boolean, nullable=False, default=False)
    has_pets = Column(Boolean, nullable=False, default=False)
    pet_details = Column(Text, nullable=True)
    special_requirements = Column(Text, nullable=True)
    access_instructions = Column(Text, nullable=True)
    alarm_code = Column(String, nullable=True)
    key_location = Column(String, nullable=True)
    notes = Column(Text, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    client = relationship("Client", back_populates="properties")
