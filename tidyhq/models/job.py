"""Job model: a unit of service work for a client."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=generate_id)
    client_id = Column(String(36), ForeignKey("clients.id"), nullable=False, index=True)
    service = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    address = Column(Text, nullable=False)
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    scheduled_time = Column(String, nullable=False)
    estimated_duration = Column(Integer, nullable=False)
    actual_duration = Column(Integer, nullable=True)
    status = Column(String, nullable=False, default="scheduled", index=True)
    cost = Column(Numeric(10, 2), nullable=False)
    tips = Column(Numeric(10, 2), nullable=False, default=0)
    materials = Column(JSON, nullable=False, default=list)
    staff = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=False, default="")
    photos = Column(JSON, nullable=False, default=list)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    client = relationship("Client", back_populates="jobs")
    bookings = relationship("Booking", back_populates="job")
