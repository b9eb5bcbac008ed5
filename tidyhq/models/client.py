"""Client model: customers who have purchased or are receiving service."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    alternate_phone = Column(String, nullable=True)
    address = Column(Text, nullable=False)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zip_code = Column(String, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    status = Column(String, nullable=False, default="active", index=True)
    notes = Column(Text, nullable=False, default="")
    emergency_contact = Column(JSON, nullable=True)
    preferred_contact_method = Column(String, nullable=False, default="phone")
    preferred_time_slot = Column(String, nullable=True)
    service_preferences = Column(JSON, nullable=False, default=dict)
    source = Column(String, nullable=True)
    referred_by = Column(String(36), nullable=True)
    lifetime_value = Column(Numeric(10, 2), nullable=False, default=0)
    join_date = Column(DateTime(timezone=True), nullable=True, default=utc_now)
    last_service_date = Column(DateTime(timezone=True), nullable=True)
    last_contact_date = Column(DateTime(timezone=True), nullable=True)
    next_follow_up_date = Column(DateTime(timezone=True), nullable=True)
    assigned_to = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    leads = relationship("Lead", back_populates="client")
    jobs = relationship("Job", back_populates="client", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="client", cascade="all, delete-orphan")
    messages = relationship("Message", back_populates="client", cascade="all, delete-orphan")
    properties = relationship("Property", back_populates="client", cascade="all, delete-orphan")
    activities = relationship("ContactActivity", back_populates="client", cascade="all, delete-orphan")
    follow_ups = relationship("FollowUp", back_populates="client", cascade="all, delete-orphan")
