"""CRUD operations for bookings."""

from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from tidyhq.core.time import day_bounds
from tidyhq.crud.base import CRUDBase
from tidyhq.models.booking import Booking
from tidyhq.schemas.booking import BookingCreate, BookingUpdate


class CRUDBooking(CRUDBase[Booking, BookingCreate, BookingUpdate]):
    def get_by_status(self, db: Session, *, status: str) -> List[Booking]:
        return db.query(Booking).filter(Booking.status == status).order_by(Booking.date.asc()).all()

    def get_by_date(self, db: Session, *, day: datetime) -> List[Booking]:
        start, end = day_bounds(day)
        return (
            db.query(Booking)
            .filter(Booking.date >= start, Booking.date <= end)
            .order_by(Booking.time.asc())
            .all()
        )

    def get_by_client(self, db: Session, *, client_id: str) -> List[Booking]:
        return db.query(Booking).filter(Booking.client_id == client_id).order_by(Booking.date.desc()).all()


booking_crud = CRUDBooking(Booking)
