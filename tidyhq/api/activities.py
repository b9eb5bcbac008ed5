"""Contact activity endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_contact_activity import contact_activity_crud
from tidyhq.crud.crud_job import ensure_job_exists
from tidyhq.crud.crud_lead import ensure_lead_exists
from tidyhq.crud.crud_user import ensure_user_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.contact_activity import ContactActivity
from tidyhq.models.user import User
from tidyhq.schemas.contact_activity import (
    ActivityType,
    ContactActivityCreate,
    ContactActivityRead,
    ContactActivityUpdate,
)

router = APIRouter(prefix="/api/activities", tags=["activities"])


def _get_activity(db: Session, activity_id: str) -> ContactActivity:
    activity = contact_activity_crud.get(db, activity_id)
    if not activity:
        raise NotFound.entity("Activity")
    return activity


def _ensure_related_records(db: Session, activity_in: ContactActivityCreate | ContactActivityUpdate) -> None:
    ensure_job_exists(db, activity_in.related_job_id, "relatedJobId")
    ensure_lead_exists(db, activity_in.related_lead_id, "relatedLeadId")


@router.get("", response_model=list[ContactActivityRead])
def list_activities(
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    activity_type: Optional[ActivityType] = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    if client_id:
        return contact_activity_crud.get_by_client(db, client_id=client_id)
    if activity_type:
        return contact_activity_crud.get_by_type(db, activity_type=activity_type)
    return contact_activity_crud.get_multi(db)


@router.get("/{activity_id}", response_model=ContactActivityRead)
def get_activity(activity_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return _get_activity(db, activity_id)


@router.post("", response_model=ContactActivityRead, status_code=status.HTTP_201_CREATED)
def create_activity(
    activity_in: ContactActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    ensure_client_exists(db, activity_in.client_id)
    ensure_user_exists(db, activity_in.created_by, "createdBy")
    _ensure_related_records(db, activity_in)
    return contact_activity_crud.create(
        db, obj_in=activity_in, created_by=activity_in.created_by or current_user.id
    )


@router.patch("/{activity_id}", response_model=ContactActivityRead)
def update_activity(
    activity_id: str,
    activity_in: ContactActivityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    activity = _get_activity(db, activity_id)
    _ensure_related_records(db, activity_in)
    return contact_activity_crud.update(db, db_obj=activity, obj_in=activity_in)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(activity_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    if not contact_activity_crud.delete(db, id=activity_id):
        raise NotFound.entity("Activity")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
