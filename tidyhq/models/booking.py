"""Booking model for the calendar."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    job_id = Column(String(36), ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    service = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    time = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)
    staff = Column(JSON, nullable=False, default=list)
    address = Column(Text, nullable=False)
    phone = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending", index=True)
    estimated_cost = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    client = relationship("Client", back_populates="bookings")
    job = relationship("Job", back_populates="bookings")
