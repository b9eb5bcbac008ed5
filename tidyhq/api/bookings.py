"""Booking calendar endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_booking import booking_crud
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_job import ensure_job_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.booking import Booking
from tidyhq.schemas.booking import BookingCreate, BookingRead, BookingStatus, BookingUpdate

router = APIRouter(prefix="/api/bookings", tags=["bookings"], dependencies=[Depends(require_user)])


def _get_booking(db: Session, booking_id: str) -> Booking:
    booking = booking_crud.get(db, booking_id)
    if not booking:
        raise NotFound.entity("Booking")
    return booking


@router.get("", response_model=list[BookingRead])
def list_bookings(
    status: Optional[BookingStatus] = None,
    day: Optional[datetime] = Query(default=None, alias="date"),
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    db: Session = Depends(get_db),
):
    if status:
        return booking_crud.get_by_status(db, status=status)
    if day:
        return booking_crud.get_by_date(db, day=day)
    if client_id:
        return booking_crud.get_by_client(db, client_id=client_id)
    return booking_crud.get_multi(db)


@router.get("/{booking_id}", response_model=BookingRead)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    return _get_booking(db, booking_id)


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(booking_in: BookingCreate, db: Session = Depends(get_db)):
    ensure_client_exists(db, booking_in.client_id)
    ensure_job_exists(db, booking_in.job_id)
    return booking_crud.create(db, obj_in=booking_in)


@router.patch("/{booking_id}", response_model=BookingRead)
def update_booking(booking_id: str, booking_in: BookingUpdate, db: Session = Depends(get_db)):
    booking = _get_booking(db, booking_id)
    ensure_client_exists(db, booking_in.client_id)
    ensure_job_exists(db, booking_in.job_id)
    return booking_crud.update(db, db_obj=booking, obj_in=booking_in)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    if not booking_crud.delete(db, id=booking_id):
        raise NotFound.entity("Booking")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
