"""Lead model for the sales pipeline."""

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from tidyhq.core.time import utc_now
from tidyhq.db.base_class import Base, generate_id


class Lead(Base):
    __tablename__ = "leads"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(Text, nullable=True)
    service = Column(String, nullable=False)
    source = Column(String, nullable=False)
    status = Column(String, nullable=False, default="new", index=True)
    value = Column(Numeric(10, 2), nullable=False)
    last_contact_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=False, default="")
    assigned_to = Column(String(36), ForeignKey("users.id"), nullable=True)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    client = relationship("Client", back_populates="leads")
